"""Unit tests for the allowed collision matrix."""

import pytest
from hypothesis import given

from moveit_pick_place.scene import AllowedCollisionEntry, AllowedCollisionMatrix

from .hypothesis_strategies import allowed_entries, body_names

BOX = "blue_box"
LEFT_TIP = "robotiq_85_left_finger_tip_link"
RIGHT_TIP = "robotiq_85_right_finger_tip_link"


@given(body_names(), body_names())
def test_allowed_collision_entry_is_unordered(name_a: str, name_b: str) -> None:
    """Verify that an entry is the same regardless of the order of its two names."""
    # Arrange/Act - Construct entries with the names in both orders
    entry_ab = AllowedCollisionEntry(name_a, name_b)
    entry_ba = AllowedCollisionEntry(name_b, name_a)

    # Assert - Expect that both entries compare (and hash) equal
    assert entry_ab == entry_ba
    assert hash(entry_ab) == hash(entry_ba)
    assert entry_ab.names == frozenset((name_a, name_b))


@given(allowed_entries())
def test_allowed_entry_is_symmetric(entry: AllowedCollisionEntry) -> None:
    """Verify that allowing a pair allows it in both directions."""
    # Arrange - Start from an empty matrix
    acm = AllowedCollisionMatrix()

    # Act - Allow collisions between the pair
    acm.allow([entry])

    # Assert - Expect that both lookup orders report the pair as allowed
    assert acm.get_entry(entry.name_a, entry.name_b) is True
    assert acm.get_entry(entry.name_b, entry.name_a) is True
    assert entry in acm.allowed_pairs()


def test_allow_preserves_existing_entries() -> None:
    """Verify that allowing new pairs adds to the matrix without discarding prior entries."""
    # Arrange - Create a matrix where the two finger tips may touch each other
    acm = AllowedCollisionMatrix.from_rows([LEFT_TIP, RIGHT_TIP], [[False, True], [True, False]])

    # Act - Allow collisions between the box and each finger tip
    acm.allow([AllowedCollisionEntry(BOX, LEFT_TIP), AllowedCollisionEntry(BOX, RIGHT_TIP)])

    # Assert - Expect the new entries alongside the existing ones
    assert acm.entry_names == [LEFT_TIP, RIGHT_TIP, BOX]
    assert acm.allowed_pairs() == {
        AllowedCollisionEntry(LEFT_TIP, RIGHT_TIP),
        AllowedCollisionEntry(BOX, LEFT_TIP),
        AllowedCollisionEntry(BOX, RIGHT_TIP),
    }
    assert acm.get_entry(LEFT_TIP, LEFT_TIP) is False


def test_unknown_pair_falls_back_to_default_entries() -> None:
    """Verify that pairs without explicit entries use the default entries of their bodies."""
    # Arrange - Create a matrix where the box may collide with anything by default
    acm = AllowedCollisionMatrix()
    acm.set_default_entry(BOX, True)

    # Act/Assert - Expect the default for the box, and no answer for unrelated bodies
    assert acm.get_entry(BOX, "table") is True
    assert acm.get_entry("table", "wall") is None


def test_to_rows_and_back() -> None:
    """Verify that a matrix is unchanged after converting to and from a table of rows."""
    # Arrange - Create a matrix with an allowed pair and a default entry
    acm = AllowedCollisionMatrix()
    acm.allow([AllowedCollisionEntry(BOX, RIGHT_TIP)])
    acm.set_entry(BOX, LEFT_TIP, False)
    acm.set_default_entry(LEFT_TIP, False)

    # Act - Convert the matrix into rows and back
    result = AllowedCollisionMatrix.from_rows(acm.entry_names, acm.to_rows(), acm.default_entries)

    # Assert - Expect the same names, entries, and defaults
    assert result.entry_names == acm.entry_names
    assert result.to_rows() == acm.to_rows()
    assert result.allowed_pairs() == acm.allowed_pairs()
    assert result.default_entries == {LEFT_TIP: False}


def test_from_non_square_rows_raises_error() -> None:
    """Verify that a table whose size doesn't match its names is rejected."""
    # Arrange/Act/Assert - Expect that a 2x1 table for two names raises an error
    with pytest.raises(ValueError, match="2x2"):
        AllowedCollisionMatrix.from_rows([BOX, LEFT_TIP], [[True], [False]])


def test_copy_is_independent() -> None:
    """Verify that editing a copy of the matrix leaves the original unchanged."""
    # Arrange - Create a matrix and copy it
    acm = AllowedCollisionMatrix()
    acm_copy = acm.copy()

    # Act - Allow a pair in the copy only
    acm_copy.allow([AllowedCollisionEntry(BOX, LEFT_TIP)])

    # Assert - Expect that the original matrix is still empty
    assert len(acm) == 0
    assert BOX not in acm
    assert BOX in acm_copy
