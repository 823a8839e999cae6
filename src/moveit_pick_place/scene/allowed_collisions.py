"""Define a symmetric matrix recording which pairs of named bodies may collide."""

from __future__ import annotations

from typing import TYPE_CHECKING

from moveit_pick_place.scene.obstacles import AllowedCollisionEntry

if TYPE_CHECKING:
    from collections.abc import Iterable


class AllowedCollisionMatrix:
    """A symmetric map from pairs of named bodies to whether their collisions are allowed.

    Pairs without an explicit entry fall back to the default entry of either body, if any.
    """

    def __init__(self) -> None:
        """Initialize an empty allowed collision matrix."""
        self._entry_names: list[str] = []
        self._entries: dict[frozenset[str], bool] = {}
        self._default_entries: dict[str, bool] = {}

    def __len__(self) -> int:
        """Return the number of named bodies in the matrix."""
        return len(self._entry_names)

    def __contains__(self, name: object) -> bool:
        """Evaluate whether the named body has any entries in the matrix."""
        return name in self._entry_names

    @classmethod
    def from_rows(
        cls,
        entry_names: list[str],
        rows: list[list[bool]],
        default_entries: dict[str, bool] | None = None,
    ) -> AllowedCollisionMatrix:
        """Construct a matrix from a square table of booleans (the layout used by MoveIt messages).

        :param entry_names: Names of the bodies, in the order of the table's rows and columns
        :param rows: Square table where rows[i][j] is True if bodies i and j may collide
        :param default_entries: Optional map from body names to their default allowed value
        :return: Constructed AllowedCollisionMatrix
        :raises ValueError: If the table isn't square or doesn't match the given names
        """
        if len(rows) != len(entry_names) or any(len(row) != len(entry_names) for row in rows):
            raise ValueError(f"Expected a {len(entry_names)}x{len(entry_names)} collision table.")

        acm = cls()
        for i, name_i in enumerate(entry_names):
            acm._add_name(name_i)
            for j in range(i, len(entry_names)):
                acm.set_entry(name_i, entry_names[j], rows[i][j] or rows[j][i])

        for name, allowed in (default_entries or {}).items():
            acm.set_default_entry(name, allowed)

        return acm

    def to_rows(self) -> list[list[bool]]:
        """Convert the matrix into a square table of booleans, ordered by `entry_names`."""
        return [[bool(self.get_entry(a, b)) for b in self._entry_names] for a in self._entry_names]

    @property
    def entry_names(self) -> list[str]:
        """Retrieve the names of all bodies in the matrix, in insertion order."""
        return list(self._entry_names)

    @property
    def default_entries(self) -> dict[str, bool]:
        """Retrieve the default allowed value of each body that has one."""
        return dict(self._default_entries)

    def _add_name(self, name: str) -> None:
        if name not in self._entry_names:
            self._entry_names.append(name)

    def set_entry(self, name_a: str, name_b: str, allowed: bool) -> None:
        """Set whether collisions between the two named bodies are allowed."""
        self._add_name(name_a)
        self._add_name(name_b)
        self._entries[frozenset((name_a, name_b))] = allowed

    def set_default_entry(self, name: str, allowed: bool) -> None:
        """Set whether the named body may collide with bodies lacking an explicit entry."""
        self._default_entries[name] = allowed

    def get_entry(self, name_a: str, name_b: str) -> bool | None:
        """Look up whether collisions between the two named bodies are allowed.

        :return: True or False if an entry (or default) applies, else None
        """
        explicit = self._entries.get(frozenset((name_a, name_b)))
        if explicit is not None:
            return explicit

        names = (name_a, name_b)
        defaults = [self._default_entries[n] for n in names if n in self._default_entries]
        if defaults:
            return any(defaults)

        return None

    def allow(self, entries: Iterable[AllowedCollisionEntry]) -> None:
        """Mark every given pair of bodies as allowed to collide."""
        for entry in entries:
            self.set_entry(entry.name_a, entry.name_b, True)

    def allowed_pairs(self) -> set[AllowedCollisionEntry]:
        """Collect the explicit entries that allow collisions."""
        pairs = set()
        for names, allowed in self._entries.items():
            if allowed:
                name_a = min(names)
                name_b = max(names)  # Same as name_a for a body paired with itself
                pairs.add(AllowedCollisionEntry(name_a, name_b))
        return pairs

    def copy(self) -> AllowedCollisionMatrix:
        """Create an independent copy of the matrix."""
        acm = AllowedCollisionMatrix()
        acm._entry_names = list(self._entry_names)
        acm._entries = dict(self._entries)
        acm._default_entries = dict(self._default_entries)
        return acm
