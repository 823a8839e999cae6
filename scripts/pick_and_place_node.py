"""Run the pick-and-place sequence as a ROS node."""

from moveit_pick_place.io.cli import cli


def main() -> None:
    """Pick up the box, carry it, and put it down using MoveIt."""
    cli(prog_name="pick_and_place_node")


if __name__ == "__main__":
    main()
