"""Import the pick-and-place task and its configuration."""

from .outcome import StepOutcome as StepOutcome
from .pick_and_place import MOTION_STEPS as MOTION_STEPS
from .pick_and_place import SCENE_STEPS as SCENE_STEPS
from .pick_and_place import PickAndPlaceTask as PickAndPlaceTask
from .pick_place_config import PickPlaceConfig as PickPlaceConfig
