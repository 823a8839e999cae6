"""Define functions to start and stop the ROS node that drives MoveIt."""

from __future__ import annotations

from typing import TYPE_CHECKING

import rospy
from moveit_commander import roscpp_initialize, roscpp_shutdown

if TYPE_CHECKING:
    from collections.abc import Sequence


def init_node(node_name: str, argv: Sequence[str]) -> None:
    """Initialize MoveIt's C++ client and a ROS node if this process does not yet have one.

    MoveIt's client library spins a background thread that keeps the robot state current;
    it is started here once and never used directly.

    :param node_name: Name of the node
    :param argv: Command-line arguments, including any ROS remappings (e.g., `__ns:=robot`)
    """
    roscpp_initialize(list(argv))

    if rospy.get_name() in ["", "/unnamed"]:
        rospy.init_node(node_name, argv=list(argv), anonymous=True)
        rospy.loginfo(f"Initialized node with name '{rospy.get_name()}'")


def shutdown_node(reason: str = "pick-and-place finished") -> None:
    """Shut down MoveIt's C++ client and the ROS node."""
    roscpp_shutdown()
    rospy.signal_shutdown(reason)
