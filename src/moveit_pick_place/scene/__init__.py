"""Import classes describing the shared planning scene."""

from .allowed_collisions import AllowedCollisionMatrix as AllowedCollisionMatrix
from .obstacles import AllowedCollisionEntry as AllowedCollisionEntry
from .obstacles import AttachmentRecord as AttachmentRecord
from .obstacles import ObstacleDescriptor as ObstacleDescriptor
from .planning_scene import PlanningScene as PlanningScene
