"""Index of people who have already shared a group."""

# Group Mixer
# Copyright (C) 2025  Group Mixer developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass, field
from itertools import combinations
from typing import FrozenSet, Iterable

from groupmixer.models.group import PartitionDraw
from groupmixer.type_hints import PairMap

_NO_NEIGHBOURS: FrozenSet[int] = frozenset()


@dataclass
class PairHistoryIndex:
    """
    Undirected co-membership graph built from previous draws.

    Every pair of people that shared a group in any draw is linked, with no
    weighting by recency or frequency.

    Attributes
    ----------
    neighbours_by_id : dict of int to set of int
        Mapping of a person id to the ids of everyone they have been
        grouped with.
    """

    neighbours_by_id: PairMap = field(default_factory=dict)

    def add_pairing(self, person1_id: int, person2_id: int) -> None:
        """Record that two people have shared a group."""
        self.neighbours_by_id.setdefault(person1_id, set()).add(person2_id)
        self.neighbours_by_id.setdefault(person2_id, set()).add(person1_id)

    def add_draw(self, draw: PartitionDraw) -> None:
        """Record every pair inside every group of a draw."""
        for group in draw.groups:
            for first, second in combinations(group.people, 2):
                self.add_pairing(first.id, second.id)

    def neighbours(self, person_id: int) -> FrozenSet[int]:
        """Ids previously grouped with ``person_id`` (empty if unknown)."""
        known = self.neighbours_by_id.get(person_id)
        return frozenset(known) if known else _NO_NEIGHBOURS

    def have_met(self, person1_id: int, person2_id: int) -> bool:
        """Check if two people have previously shared a group."""
        return person2_id in self.neighbours_by_id.get(person1_id, _NO_NEIGHBOURS)

    def pair_count(self) -> int:
        """Number of distinct recorded pairs."""
        return sum(len(ids) for ids in self.neighbours_by_id.values()) // 2

    def __bool__(self) -> bool:
        return bool(self.neighbours_by_id)

    @classmethod
    def from_draws(cls, draws: Iterable[PartitionDraw]) -> "PairHistoryIndex":
        """Build the index from a sequence of previous draws."""
        index = cls()
        for draw in draws:
            index.add_draw(draw)
        return index
