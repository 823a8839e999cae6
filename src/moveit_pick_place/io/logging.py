"""Define utility functions to simplify logging to the CLI."""

from rich.console import Console
from rich.highlighter import NullHighlighter
from rich.logging import RichHandler

try:
    import rospy

    ROS_PRESENT = True
except ModuleNotFoundError:
    ROS_PRESENT = False

import logging

logger = logging.getLogger("moveit_pick_place")
console = Console()


def configure_logging(level: int = logging.INFO) -> None:
    """Print log messages at or above the given level to the shared console.

    Calling this again only updates the level; a single handler is ever installed.
    """
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=console,
            show_time=False,
            show_path=False,
            highlighter=NullHighlighter(),
        )
        logger.addHandler(handler)


def _use_rospy() -> bool:
    """Decide whether messages go through rospy, which only prints once a node is running."""
    return ROS_PRESENT and rospy.core.is_initialized()


def log_info(message: str) -> None:
    """Log the given string to standard output."""
    if _use_rospy():
        rospy.loginfo(message)
    else:
        logger.info(message)


def log_warn(message: str) -> None:
    """Log the given string as a warning."""
    if _use_rospy():
        rospy.logwarn(message)
    else:
        logger.warning(message)


def log_error(message: str) -> None:
    """Log the given string as an error."""
    if _use_rospy():
        rospy.logerr(message)
    else:
        logger.error(message)
