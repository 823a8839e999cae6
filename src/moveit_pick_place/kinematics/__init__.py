"""Import classes and definitions for robot kinematics."""

from .configuration import Configuration as Configuration
from .point3d import Point3D as Point3D
from .pose3d import DEFAULT_FRAME as DEFAULT_FRAME
from .pose3d import Pose3D as Pose3D
from .rotations import EulerRPY as EulerRPY
from .rotations import Quaternion as Quaternion
