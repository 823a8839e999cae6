"""Define the records exchanged with the planning scene: obstacles, attachments, and ACM entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from moveit_pick_place.collision_models import AnyPrimitive
    from moveit_pick_place.kinematics import Pose3D


@dataclass(frozen=True)
class ObstacleDescriptor:
    """A named primitive obstacle to be inserted into (and later removed from) the scene."""

    name: str
    shape: AnyPrimitive
    pose: Pose3D
    """Pose of the primitive's center, expressed in the pose's reference frame."""


@dataclass(frozen=True)
class AttachmentRecord:
    """Binds a scene object to a robot link so that the object moves with the robot."""

    object_name: str
    link_name: str
    touch_links: tuple[str, ...] = field(default_factory=tuple)
    """Robot links permitted to touch the attached object."""


@dataclass(frozen=True)
class AllowedCollisionEntry:
    """An unordered pair of named surfaces exempted from collision checking."""

    name_a: str
    name_b: str

    def __post_init__(self) -> None:
        """Store the names in sorted order so that (a, b) and (b, a) compare equal."""
        if self.name_b < self.name_a:
            name_a, name_b = self.name_b, self.name_a
            object.__setattr__(self, "name_a", name_a)
            object.__setattr__(self, "name_b", name_b)

    @property
    def names(self) -> frozenset[str]:
        """Retrieve the (unordered) pair of names in the entry."""
        return frozenset((self.name_a, self.name_b))
