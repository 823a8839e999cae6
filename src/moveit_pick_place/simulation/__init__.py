"""Import in-memory stand-ins for the planning scene and planning groups."""

from .simulated_planning_group import SimulatedPlanningGroup as SimulatedPlanningGroup
from .simulated_planning_scene import SimulatedPlanningScene as SimulatedPlanningScene
