"""Unit tests for the pick-and-place command-line interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

from moveit_pick_place.io.cli import cli, run_sequence
from moveit_pick_place.tasks import PickPlaceConfig

if TYPE_CHECKING:
    from pathlib import Path


def test_simulated_run_prints_summary() -> None:
    """Verify that a dry run against the simulated backend completes and prints a summary."""
    # Arrange
    runner = CliRunner()

    # Act - Run with a trailing ROS remapping, which should be accepted and ignored
    result = runner.invoke(cli, ["--backend", "simulated", "__ns:=robot"])

    # Assert
    assert result.exit_code == 0, result.output
    assert "Pick-and-Place Summary" in result.output


def test_dump_config_writes_loadable_yaml(tmp_path: Path) -> None:
    """Verify that --dump-config writes the effective configuration without running anything."""
    # Arrange
    runner = CliRunner()
    dump_path = tmp_path / "dumped.yaml"

    # Act
    result = runner.invoke(cli, ["--dump-config", str(dump_path)])

    # Assert - Expect the default configuration in the written file
    assert result.exit_code == 0, result.output
    assert PickPlaceConfig.from_yaml(dump_path) == PickPlaceConfig()
    assert "Summary" not in result.output


def test_invalid_config_exits_with_error(tmp_path: Path) -> None:
    """Verify that an invalid configuration file produces a readable error and nonzero exit."""
    # Arrange - Write a config whose attach link isn't allowed to touch the object
    yaml_path = tmp_path / "invalid.yaml"
    yaml_path.write_text("grasp:\n  attach_link: ee_link\n")
    runner = CliRunner()

    # Act
    result = runner.invoke(cli, ["--backend", "simulated", "--config", str(yaml_path)])

    # Assert
    assert result.exit_code != 0
    assert "Validation error" in result.output


def test_run_sequence_with_unknown_backend_raises_error() -> None:
    """Verify that requesting an unknown backend raises a ValueError."""
    # Arrange/Act/Assert
    with pytest.raises(ValueError, match="gazebo"):
        run_sequence("gazebo", PickPlaceConfig(settle_s=0.0))


def test_run_sequence_with_simulated_backend() -> None:
    """Verify that the simulated backend runs every step of the sequence successfully."""
    # Arrange/Act
    outcomes = run_sequence("simulated", PickPlaceConfig(settle_s=0.0))

    # Assert
    assert outcomes[0].step == "add_object"
    assert outcomes[-1].step == "remove_object"
    assert all(success for success, _ in outcomes)


def test_simulated_run_prints_progress_lines() -> None:
    """Verify that a dry run prints the progress line of each planning request."""
    # Arrange
    runner = CliRunner()

    # Act
    result = runner.invoke(cli, ["--backend", "simulated"])

    # Assert - Expect the plan lines and the scene edits among the printed output
    assert result.exit_code == 0, result.output
    assert "Plan for step 'home'" in result.output
    assert "Plan for step 'release'" in result.output
    assert "Added 'blue_box' into the world" in result.output
