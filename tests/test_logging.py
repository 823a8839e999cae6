"""Unit tests for logging and console rendering."""

from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from moveit_pick_place.io import logging as pick_place_logging
from moveit_pick_place.io.tables import render_acm_table, render_outcome_table
from moveit_pick_place.scene import AllowedCollisionEntry, AllowedCollisionMatrix
from moveit_pick_place.tasks import StepOutcome


def _render(renderable: object) -> str:
    """Render the given object as plain text."""
    console = Console(file=io.StringIO(), width=200, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


def test_log_helpers_use_python_logging_without_ros(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Verify that messages go to the standard logging module when ROS isn't available."""
    # Arrange - Pretend rospy couldn't be imported
    monkeypatch.setattr(pick_place_logging, "ROS_PRESENT", False)
    caplog.set_level(logging.INFO, logger="moveit_pick_place")

    # Act
    pick_place_logging.log_info("Added 'blue_box' into the world.")
    pick_place_logging.log_warn("'blue_box' is attached to the robot.")
    pick_place_logging.log_error("Cannot attach 'ghost'.")

    # Assert - Expect one record per call, at the matching level
    levels = [record.levelno for record in caplog.records]
    assert levels == [logging.INFO, logging.WARNING, logging.ERROR]
    assert "blue_box" in caplog.records[0].getMessage()


def test_acm_table_marks_allowed_pairs() -> None:
    """Verify that the rendered matrix labels each body and marks allowed pairs."""
    # Arrange
    acm = AllowedCollisionMatrix()
    acm.allow([AllowedCollisionEntry("blue_box", "robotiq_85_left_finger_tip_link")])

    # Act
    text = _render(render_acm_table(acm, names=["blue_box", "not_in_matrix"]))

    # Assert - Expect a row for the box only, with a "1" for its allowed pair
    assert "0: blue_box" in text
    assert "1: robotiq_85_left_finger_tip_link" not in text
    assert "not_in_matrix" not in text
    assert "1" in text


def test_outcome_table_lists_every_step() -> None:
    """Verify that the summary table shows every step with its result."""
    # Arrange
    outcomes = [
        StepOutcome("home", True, "ur5_arm -> named target 'home': planning succeeded"),
        StepOutcome("approach", False, "ur5_arm -> pose: planning failed (error code 99999)"),
    ]

    # Act
    text = _render(render_outcome_table(outcomes))

    # Assert
    assert "home" in text
    assert "approach" in text
    assert "FAILED" in text


def test_configure_logging_installs_one_console_handler() -> None:
    """Verify that configuring logging twice leaves a single console handler at INFO level."""
    # Arrange/Act - Configure logging twice
    pick_place_logging.configure_logging()
    pick_place_logging.configure_logging()

    # Assert
    handlers = [h for h in pick_place_logging.logger.handlers if isinstance(h, RichHandler)]
    assert len(handlers) == 1
    assert pick_place_logging.logger.level == logging.INFO
