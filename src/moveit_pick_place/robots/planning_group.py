"""Define a general-purpose interface for a named group of robot joints."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from moveit_pick_place.kinematics import Configuration, Pose3D


@dataclass(frozen=True)
class PlanResult:
    """Outcome of a single motion planning request."""

    success: bool
    planning_time_s: float = 0.0
    error_code: int = 1
    """Planner error code (1 is MoveIt's SUCCESS value)."""


class PlanningGroup(ABC):
    """An interface for a planning group: joints that are planned for and moved as a unit."""

    def __init__(self, name: str) -> None:
        """Initialize the planning group with its name."""
        self.name = name

    @property
    @abstractmethod
    def joint_model_group_names(self) -> list[str]:
        """Retrieve the names of all planning groups defined for the robot."""
        ...

    @abstractmethod
    def get_named_target_values(self, target_name: str) -> Configuration:
        """Look up a named preset configuration of the group (e.g., "home").

        :raises KeyError: If the group has no preset with the given name
        """
        ...

    @abstractmethod
    def set_joint_value_target(self, configuration: Configuration) -> None:
        """Set a joint-space target for the next planning request."""
        ...

    @abstractmethod
    def set_pose_target(self, pose: Pose3D) -> None:
        """Set an end-effector pose target for the next planning request."""
        ...

    @abstractmethod
    def get_current_pose(self, link_name: str) -> Pose3D:
        """Retrieve the current pose of the named link in the planning frame."""
        ...

    @abstractmethod
    def plan(self) -> PlanResult:
        """Compute a plan from the current state to the current target."""
        ...

    @abstractmethod
    def move(self) -> bool:
        """Plan to the current target and execute the result, blocking until motion ends.

        :return: True if execution succeeded, False otherwise
        """
        ...
