"""Implement an in-memory planning scene that mirrors MoveIt's bookkeeping semantics."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from moveit_pick_place.io.logging import log_error, log_warn
from moveit_pick_place.kinematics import DEFAULT_FRAME
from moveit_pick_place.scene import AllowedCollisionMatrix, PlanningScene

if TYPE_CHECKING:
    from collections.abc import Iterable

    from moveit_pick_place.kinematics import Pose3D
    from moveit_pick_place.scene import AllowedCollisionEntry, AttachmentRecord, ObstacleDescriptor


class SimulatedPlanningScene(PlanningScene):
    """A planning scene kept in memory, used for dry runs and testing."""

    def __init__(
        self,
        planning_frame: str = DEFAULT_FRAME,
        acm: AllowedCollisionMatrix | None = None,
        rejected_edits: Iterable[str] = (),
    ) -> None:
        """Initialize an empty simulated scene.

        :param planning_frame: Name of the frame in which the scene is expressed
        :param acm: Initial allowed collision matrix (defaults to an empty matrix)
        :param rejected_edits: Names of edit operations (e.g., "allow_collisions") that the scene
            rejects, leaving itself unchanged
        """
        self._planning_frame = planning_frame
        self._acm = AllowedCollisionMatrix() if acm is None else acm.copy()
        self._acm_lock = threading.Lock()
        self._rejected_edits = set(rejected_edits)

        self._world_objects: dict[str, ObstacleDescriptor] = {}
        """Maps names of world (unattached) objects to their descriptors."""

        self._attached_objects: dict[str, AttachmentRecord] = {}
        """Maps names of attached objects to the records describing their attachment."""

        self.operations: list[tuple[str, object]] = []
        """Log of every scene edit, in the order the edits were requested."""

    def _is_rejected(self, operation: str) -> bool:
        if operation in self._rejected_edits:
            log_error(f"Simulated planning scene rejected the '{operation}' edit.")
            return True
        return False

    @property
    def planning_frame(self) -> str:
        """Retrieve the name of the frame in which the scene is expressed."""
        return self._planning_frame

    def apply_collision_objects(self, obstacles: Iterable[ObstacleDescriptor]) -> bool:
        """Add the given obstacles to the world, replacing objects with the same names."""
        obstacles = list(obstacles)
        for obstacle in obstacles:
            self.operations.append(("apply_collision_object", obstacle.name))
            if self._is_rejected("apply_collision_object"):
                continue
            self._world_objects[obstacle.name] = obstacle

        return all(o.name in self._world_objects for o in obstacles)

    def remove_collision_objects(self, names: Iterable[str]) -> bool:
        """Remove the named world objects; attached objects are left untouched."""
        names = list(names)
        for name in names:
            self.operations.append(("remove_collision_object", name))
            if self._is_rejected("remove_collision_object"):
                continue
            if name in self._world_objects:
                del self._world_objects[name]
            elif name in self._attached_objects:
                log_warn(f"Tried to remove world object '{name}', but it is attached to the robot.")
            else:
                log_warn(f"Tried to remove world object '{name}', but it does not exist.")

        return all(name not in self._world_objects for name in names)

    def apply_attached_collision_object(self, attachment: AttachmentRecord) -> bool:
        """Move the named world object onto the robot link given by the attachment record."""
        self.operations.append(("attach_object", attachment.object_name))
        name = attachment.object_name
        if self._is_rejected("attach_object"):
            return False

        if name in self._world_objects:
            del self._world_objects[name]
        elif name not in self._attached_objects:
            log_error(f"Cannot attach '{name}': no such object exists in the scene.")
            return False

        self._attached_objects[name] = attachment
        return True

    def get_attachment(self, name: str) -> AttachmentRecord | None:
        """Retrieve the attachment record of the named object (None if it isn't attached)."""
        return self._attached_objects.get(name)

    def get_allowed_collision_matrix(self) -> AllowedCollisionMatrix:
        """Retrieve a copy of the scene's current allowed collision matrix."""
        with self._acm_lock:
            return self._acm.copy()

    def allow_collisions(self, entries: Iterable[AllowedCollisionEntry]) -> AllowedCollisionMatrix:
        """Permit collisions between each given pair as a single read-modify-write of the matrix."""
        entries = list(entries)
        self.operations.append(("allow_collisions", tuple(entries)))
        if self._is_rejected("allow_collisions"):
            return self.get_allowed_collision_matrix()

        with self._acm_lock:
            updated_acm = self._acm.copy()
            updated_acm.allow(entries)
            self._acm = updated_acm
            return updated_acm.copy()

    def known_object_names(self) -> set[str]:
        """Retrieve the names of all world (unattached) objects in the scene."""
        return set(self._world_objects)

    def attached_object_names(self) -> set[str]:
        """Retrieve the names of all objects attached to the robot."""
        return set(self._attached_objects)

    def get_object_pose(self, name: str) -> Pose3D | None:
        """Look up the pose of the named world object (None if it isn't in the world)."""
        obstacle = self._world_objects.get(name)
        return None if obstacle is None else obstacle.pose
