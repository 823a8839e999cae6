"""Define a general-purpose interface for the shared planning scene."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from moveit_pick_place.kinematics import Pose3D
    from moveit_pick_place.scene.allowed_collisions import AllowedCollisionMatrix
    from moveit_pick_place.scene.obstacles import (
        AllowedCollisionEntry,
        AttachmentRecord,
        ObstacleDescriptor,
    )


class PlanningScene(ABC):
    """An interface to the scene used by the motion planner for collision checking."""

    @property
    @abstractmethod
    def planning_frame(self) -> str:
        """Retrieve the name of the frame in which the scene is expressed."""
        ...

    @abstractmethod
    def apply_collision_objects(self, obstacles: Iterable[ObstacleDescriptor]) -> bool:
        """Add the given obstacles to the scene (replacing any objects with the same names).

        :return: True if every obstacle appeared in the scene, else False
        """
        ...

    @abstractmethod
    def remove_collision_objects(self, names: Iterable[str]) -> bool:
        """Remove the named world objects from the scene.

        :return: True if every named object is absent from the world afterward, else False
        """
        ...

    @abstractmethod
    def apply_attached_collision_object(self, attachment: AttachmentRecord) -> bool:
        """Attach a scene object to a robot link as described by the given record.

        :return: True if the object is attached afterward, else False
        """
        ...

    @abstractmethod
    def get_allowed_collision_matrix(self) -> AllowedCollisionMatrix:
        """Retrieve a copy of the scene's current allowed collision matrix."""
        ...

    @abstractmethod
    def allow_collisions(self, entries: Iterable[AllowedCollisionEntry]) -> AllowedCollisionMatrix:
        """Permit collisions between each given pair, editing the scene's matrix as one diff.

        :param entries: Pairs of named bodies that may touch
        :return: The allowed collision matrix after the edit
        """
        ...

    @abstractmethod
    def known_object_names(self) -> set[str]:
        """Retrieve the names of all world (unattached) objects in the scene."""
        ...

    @abstractmethod
    def attached_object_names(self) -> set[str]:
        """Retrieve the names of all objects attached to the robot."""
        ...

    @abstractmethod
    def get_object_pose(self, name: str) -> Pose3D | None:
        """Look up the pose of the named world object (None if it isn't in the world)."""
        ...
