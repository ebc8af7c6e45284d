"""Shuffle that discourages placing previous group mates side by side."""

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

import random
from typing import List

from groupmixer.constants import MAX_SHUFFLE_ATTEMPTS
from groupmixer.models import PairHistoryIndex, Person
from groupmixer.utils import setup_logger

logger = setup_logger(__name__)


def would_create_previous_pair(
    people: List[Person], pos1: int, pos2: int, history: PairHistoryIndex
) -> bool:
    """Check whether swapping ``pos1`` and ``pos2`` puts old group mates side by side.

    Only the immediate left and right neighbours of both positions in the
    current sequence are inspected. Groups are cut as contiguous runs, so
    sequence adjacency stands in for sharing a group; two people can still
    end up in the same run without ever being adjacent.
    """
    id1 = people[pos1].id
    id2 = people[pos2].id
    last = len(people) - 1

    if pos1 > 0 and history.have_met(people[pos1 - 1].id, id2):
        return True
    if pos1 < last and history.have_met(people[pos1 + 1].id, id2):
        return True
    if pos2 > 0 and history.have_met(people[pos2 - 1].id, id1):
        return True
    if pos2 < last and history.have_met(people[pos2 + 1].id, id1):
        return True
    return False


def shuffle_avoiding_previous_pairs(
    people: List[Person],
    history: PairHistoryIndex,
    rng: random.Random,
    max_attempts: int = MAX_SHUFFLE_ATTEMPTS,
) -> int:
    """Fisher-Yates shuffle of ``people`` in place, steering away from repeats.

    For each position ``i`` from the end down to 1 a swap partner ``j`` is
    drawn from ``[0, i]``. A draw that would seat previous group mates next
    to each other is redrawn, up to ``max_attempts`` times; after that the
    last drawn ``j`` is used anyway so the shuffle always completes.

    Args:
        people: Working list owned by the caller, mutated in place
        history: Pairs to steer away from
        rng: Random source, seeded by the caller for reproducible results
        max_attempts: Draws allowed per position before accepting a conflict

    Returns:
        Number of positions where a conflicting swap had to be accepted
    """
    forced_swaps = 0

    for i in range(len(people) - 1, 0, -1):
        j = rng.randrange(i + 1)
        if history:
            attempts = 1
            while would_create_previous_pair(people, i, j, history):
                if attempts >= max_attempts:
                    forced_swaps += 1
                    logger.debug(
                        "Position %s: no conflict-free swap after %s attempts",
                        i,
                        attempts,
                    )
                    break
                j = rng.randrange(i + 1)
                attempts += 1

        people[i], people[j] = people[j], people[i]

    if forced_swaps:
        logger.info(
            "Shuffle accepted %s swap(s) next to previous group mates", forced_swaps
        )
    return forced_swaps
