"""Define a command-line interface for running the pick-and-place sequence."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Sequence, Tuple

import click
from rich.panel import Panel

from moveit_pick_place.io.logging import configure_logging, console, log_info
from moveit_pick_place.io.tables import render_outcome_table
from moveit_pick_place.io.yaml_utils import export_yaml_data
from moveit_pick_place.kinematics import Point3D, Pose3D, Quaternion
from moveit_pick_place.simulation import SimulatedPlanningGroup, SimulatedPlanningScene
from moveit_pick_place.tasks import PickAndPlaceTask, PickPlaceConfig

if TYPE_CHECKING:
    from moveit_pick_place.robots import PlanningGroup
    from moveit_pick_place.scene import PlanningScene
    from moveit_pick_place.tasks import StepOutcome

Backend = Tuple["PlanningGroup", "PlanningGroup", "PlanningScene"]
"""The arm group, gripper group, and planning scene driven by the task."""

BACKENDS = ("moveit", "simulated")

UR5_JOINTS = (
    "shoulder_pan_joint",
    "shoulder_lift_joint",
    "elbow_joint",
    "wrist_1_joint",
    "wrist_2_joint",
    "wrist_3_joint",
)


def build_simulated_backend(config: PickPlaceConfig) -> Backend:
    """Create in-memory planning groups and a planning scene for a dry run of the sequence."""
    group_names = [config.arm_group, config.gripper_group]
    arm = SimulatedPlanningGroup(
        config.arm_group,
        {config.home_target: {joint: 0.0 for joint in UR5_JOINTS}},
        ee_link=config.ee_link,
        ee_pose=Pose3D(Point3D(0.5, 0.1, 0.4), Quaternion(0.0, 0.7071068, 0.0, 0.7071068)),
        group_names=group_names,
    )
    gripper = SimulatedPlanningGroup(
        config.gripper_group,
        {
            config.open_target: {"robotiq_85_left_knuckle_joint": 0.0},
            config.closed_target: {"robotiq_85_left_knuckle_joint": 0.8},
        },
        ee_link=config.ee_link,
        ee_pose=Pose3D.identity(),
        group_names=group_names,
    )
    return arm, gripper, SimulatedPlanningScene()


def run_on_moveit(
    config: PickPlaceConfig,
    node_name: str,
    argv: Sequence[str],
) -> list[StepOutcome]:
    """Run the sequence on the robot driven by MoveIt's move_group node.

    :param config: Configuration of the sequence
    :param node_name: Name of the ROS node started for the run
    :param argv: Extra command-line arguments forwarded to ROS (e.g., remappings)
    :return: Outcome of each step of the sequence
    """
    from moveit_pick_place.ros import (  # noqa: PLC0415
        MoveItPlanningGroup,
        MoveItPlanningScene,
        init_node,
        shutdown_node,
    )

    init_node(node_name, argv)
    try:
        arm = MoveItPlanningGroup(config.arm_group)
        gripper = MoveItPlanningGroup(config.gripper_group)
        scene = MoveItPlanningScene(arm.planning_frame, timeout_s=config.scene_timeout_s)
        return PickAndPlaceTask(arm, gripper, scene, config).run()
    finally:
        shutdown_node()


def run_sequence(
    backend: str,
    config: PickPlaceConfig,
    node_name: str = "pick_and_place",
    argv: Sequence[str] = (),
) -> list[StepOutcome]:
    """Run the pick-and-place sequence once using the named backend.

    :param backend: Name of the backend (one of `BACKENDS`)
    :param config: Configuration of the sequence
    :param node_name: Name of the ROS node (used only by the MoveIt backend)
    :param argv: Extra command-line arguments forwarded to ROS (used only by the MoveIt backend)
    :return: Outcome of each step of the sequence
    :raises ValueError: If the backend name is unrecognized
    """
    if backend == "simulated":
        arm, gripper, scene = build_simulated_backend(config)
        return PickAndPlaceTask(arm, gripper, scene, config).run()
    if backend == "moveit":
        return run_on_moveit(config, node_name, argv)

    raise ValueError(f"Unrecognized backend: '{backend}'. Expected one of {BACKENDS}.")


@click.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML file configuring the sequence (defaults to the UR5 demo values).",
)
@click.option(
    "--backend",
    type=click.Choice(BACKENDS),
    default="moveit",
    show_default=True,
    help="Drive MoveIt through ROS, or run the sequence against an in-memory robot.",
)
@click.option("--node-name", default="pick_and_place", show_default=True, help="ROS node name.")
@click.option(
    "--dump-config",
    "dump_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the effective configuration to this YAML file and exit.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Path | None,
    backend: str,
    node_name: str,
    dump_path: Path | None,
) -> None:
    """Add a box to the planning scene, pick it up, carry it, and put it down."""
    configure_logging()

    try:
        config = PickPlaceConfig()
        if config_path is not None:
            config = PickPlaceConfig.from_yaml(config_path)
    except RuntimeError as error:
        raise click.ClickException(str(error)) from error

    if dump_path is not None:
        export_yaml_data(config.to_yaml_data(), dump_path)
        console.print(f"[green]Wrote configuration to {dump_path}.[/]")
        return

    console.print(Panel.fit(f"[bold]Pick-and-place[/] ({backend} backend)", border_style="green"))

    try:
        outcomes = run_sequence(backend, config, node_name, ctx.args)
    except ModuleNotFoundError as error:
        raise click.ClickException(f"Backend '{backend}' is unavailable: {error}") from error
    except (RuntimeError, KeyError) as error:
        raise click.ClickException(str(error)) from error

    console.print(render_outcome_table(outcomes))
    num_failed = sum(not outcome.success for outcome in outcomes)
    log_info(f"Pick-and-place finished with {num_failed} failed step(s).")


def main() -> None:
    """Run the pick-and-place command."""
    cli()
