"""Import ROS-related classes and definitions."""

from .moveit_planning_group import MoveItPlanningGroup as MoveItPlanningGroup
from .moveit_planning_scene import MoveItPlanningScene as MoveItPlanningScene
from .node import init_node as init_node
from .node import shutdown_node as shutdown_node
