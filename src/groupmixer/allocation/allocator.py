"""Group allocation: sort, shuffle and slice a roster into named groups."""

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

import itertools
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from groupmixer.allocation.criteria_sorter import sort_by_criteria
from groupmixer.allocation.shuffle import shuffle_avoiding_previous_pairs
from groupmixer.constants import DEFAULT_GROUP_NAME
from groupmixer.exceptions import AllocationException, GroupCountError, NameCountError
from groupmixer.models import (
    Group,
    PairHistoryIndex,
    PartitionCriteria,
    PartitionDraw,
    Person,
)
from groupmixer.type_hints import IdGenerator
from groupmixer.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(slots=True)
class AllocationResult:
    """Outcome of an allocation attempt: either groups or the failure."""

    groups: List[Group] = field(default_factory=list)
    error: Optional[AllocationException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def counter_id_generator(start: int = 1) -> IdGenerator:
    """Return a generator of increasing group ids starting at ``start``."""
    return itertools.count(start).__next__


def default_group_names(count: int) -> List[str]:
    """Default names ``Group 1`` ... ``Group N``."""
    return [DEFAULT_GROUP_NAME.format(number=i + 1) for i in range(count)]


def group_sizes(number_of_people: int, number_of_groups: int) -> List[int]:
    """Size of each group; the first ``n % g`` groups get one extra person."""
    base, extra = divmod(number_of_people, number_of_groups)
    return [base + 1 if i < extra else base for i in range(number_of_groups)]


def check_preconditions(
    people: Sequence[Person], number_of_groups: int, group_names: Sequence[str]
) -> None:
    """Raise before any work is done if the request cannot be satisfied.

    Raises:
        GroupCountError: If more groups than people are requested
        NameCountError: If the name list does not match the group count
    """
    if number_of_groups > len(people):
        raise GroupCountError(number_of_groups, len(people))
    if len(group_names) != number_of_groups:
        raise NameCountError(len(group_names), number_of_groups)


def split_into_groups(
    people: Sequence[Person],
    group_names: Sequence[str],
    id_generator: IdGenerator,
) -> List[Group]:
    """Cut ``people`` into contiguous runs, one per name, in order."""
    groups = []
    current_index = 0
    for name, size in zip(group_names, group_sizes(len(people), len(group_names))):
        groups.append(
            Group(
                id=id_generator(),
                name=name,
                people=list(people[current_index : current_index + size]),
            )
        )
        current_index += size
    return groups


def allocate(
    people: Sequence[Person],
    number_of_groups: int,
    group_names: Sequence[str],
    criteria: PartitionCriteria,
    previous_draws: Sequence[PartitionDraw] = (),
    rng: Optional[random.Random] = None,
    id_generator: Optional[IdGenerator] = None,
) -> List[Group]:
    """Split a roster into named groups, mixing attributes and avoiding repeats.

    The roster is copied, sorted by the enabled criteria (when any), shuffled
    away from previous group mates and then cut into contiguous groups.
    The caller's list is never modified; the returned groups reference the
    caller's Person objects.

    Args:
        people: The roster
        number_of_groups: How many groups to build
        group_names: One name per group, in output order
        criteria: Attributes to spread across groups
        previous_draws: Earlier draws of the same roster
        rng: Random source (a fresh unseeded one when omitted)
        id_generator: Source of group ids (a counter from 1 when omitted)

    Returns:
        ``number_of_groups`` groups partitioning ``people``

    Raises:
        GroupCountError: If ``number_of_groups`` exceeds the roster size
        NameCountError: If ``len(group_names) != number_of_groups``
    """
    check_preconditions(people, number_of_groups, group_names)

    rng = rng if rng is not None else random.Random()
    id_generator = id_generator or counter_id_generator()

    working = list(people)
    sort_by_criteria(working, criteria)

    history = PairHistoryIndex.from_draws(previous_draws)
    logger.debug(
        "Pair history: %s pairs from %s draws",
        history.pair_count(),
        len(previous_draws),
    )
    shuffle_avoiding_previous_pairs(working, history, rng)

    groups = split_into_groups(working, group_names, id_generator)
    logger.info(
        "Allocated %s people into %s groups (sizes %s)",
        len(working),
        len(groups),
        [len(group) for group in groups],
    )
    return groups


def try_allocate(
    people: Sequence[Person],
    number_of_groups: int,
    group_names: Sequence[str],
    criteria: PartitionCriteria,
    previous_draws: Sequence[PartitionDraw] = (),
    rng: Optional[random.Random] = None,
    id_generator: Optional[IdGenerator] = None,
) -> AllocationResult:
    """Same as :func:`allocate` but reports precondition failures in the result."""
    try:
        groups = allocate(
            people,
            number_of_groups,
            group_names,
            criteria,
            previous_draws,
            rng=rng,
            id_generator=id_generator,
        )
    except AllocationException as e:
        logger.warning("Allocation rejected: %s", e)
        return AllocationResult(error=e)
    return AllocationResult(groups=groups)
