"""Seed ordering that pushes similar people apart before shuffling.

Each enabled criterion contributes a signed delta for a pair of people and
the deltas are summed into a single comparison score. This is a coarse
heuristic; balance is checked afterwards by the mix validator.
"""

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

from functools import cmp_to_key
from typing import Dict, List, Sequence

from groupmixer.constants import (
    CRITERION_AGE,
    CRITERION_FORMER_DWWM,
    CRITERION_FRENCH_FLUENCY,
    CRITERION_GENDER,
    CRITERION_PROFILE,
    CRITERION_TECHNICAL_LEVEL,
)
from groupmixer.models import PartitionCriteria, Person
from groupmixer.type_hints import AttributeDelta
from groupmixer.utils import setup_logger

logger = setup_logger(__name__)


def _category_delta(a: str, b: str) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


def _gender_delta(a: Person, b: Person) -> int:
    return _category_delta(a.gender.value, b.gender.value)


def _french_fluency_delta(a: Person, b: Person) -> int:
    return a.french_fluency - b.french_fluency


def _former_dwwm_delta(a: Person, b: Person) -> int:
    # former trainees sort first
    if a.former_dwwm == b.former_dwwm:
        return 0
    return -1 if a.former_dwwm else 1


def _technical_level_delta(a: Person, b: Person) -> int:
    return a.technical_level - b.technical_level


def _profile_delta(a: Person, b: Person) -> int:
    return _category_delta(a.profile.value, b.profile.value)


def _age_delta(a: Person, b: Person) -> int:
    return a.age - b.age


ATTRIBUTE_DELTAS: Dict[str, AttributeDelta] = {
    CRITERION_GENDER: _gender_delta,
    CRITERION_FRENCH_FLUENCY: _french_fluency_delta,
    CRITERION_FORMER_DWWM: _former_dwwm_delta,
    CRITERION_TECHNICAL_LEVEL: _technical_level_delta,
    CRITERION_PROFILE: _profile_delta,
    CRITERION_AGE: _age_delta,
}


def enabled_deltas(criteria: PartitionCriteria) -> List[AttributeDelta]:
    """Attribute deltas for the enabled criteria, in evaluation order."""
    return [ATTRIBUTE_DELTAS[key] for key in criteria.enabled()]


def combined_score(a: Person, b: Person, deltas: Sequence[AttributeDelta]) -> int:
    """Sum of every delta for the pair ``(a, b)``."""
    return sum(delta(a, b) for delta in deltas)


def sort_by_criteria(people: List[Person], criteria: PartitionCriteria) -> bool:
    """Sort ``people`` in place by the summed criteria score.

    Args:
        people: Working list owned by the caller, mutated in place
        criteria: Criteria selecting which deltas take part

    Returns:
        True if the list was sorted, False if no criterion is enabled and
        the order was left untouched
    """
    deltas = enabled_deltas(criteria)
    if not deltas:
        logger.debug("No mixing criteria enabled, keeping roster order")
        return False

    people.sort(key=cmp_to_key(lambda a, b: combined_score(a, b, deltas)))
    logger.debug(
        "Sorted %s people by criteria: %s", len(people), ", ".join(criteria.enabled())
    )
    return True
