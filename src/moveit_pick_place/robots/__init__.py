"""Import classes defining general-purpose robot interfaces."""

from .planning_group import PlanningGroup as PlanningGroup
from .planning_group import PlanResult as PlanResult
