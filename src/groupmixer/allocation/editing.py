"""Manual adjustments to a generated partition."""

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

from typing import Sequence

from groupmixer.exceptions import PersonNotFoundException
from groupmixer.models import Group, Person
from groupmixer.type_hints import Location
from groupmixer.utils import setup_logger

logger = setup_logger(__name__)


def find_person(groups: Sequence[Group], person_id: int) -> Location:
    """Locate a person in a partition.

    Returns:
        ``(group_index, position)`` of the person

    Raises:
        PersonNotFoundException: If no group holds the person
    """
    for group_index, group in enumerate(groups):
        for position, person in enumerate(group.people):
            if person.id == person_id:
                return group_index, position
    raise PersonNotFoundException(f"Person {person_id} is not in any group")


def _check_index(group: Group, index: int) -> None:
    if not 0 <= index < len(group.people):
        raise IndexError(
            f"Position {index} out of range for group '{group.name}' "
            f"({len(group.people)} people)"
        )


def move_within_group(group: Group, from_index: int, to_index: int) -> None:
    """Move a member to another position of the same group."""
    _check_index(group, from_index)
    to_index = max(0, min(to_index, len(group.people) - 1))
    person = group.people.pop(from_index)
    group.people.insert(to_index, person)


def transfer_person(
    source: Group, target: Group, from_index: int, to_index: int
) -> Person:
    """Move a member of ``source`` into ``target`` at ``to_index``.

    ``to_index`` is clamped to the target's bounds. Returns the moved person.
    """
    _check_index(source, from_index)
    if source is target:
        person = source.people[from_index]
        move_within_group(source, from_index, to_index)
        return person

    person = source.people.pop(from_index)
    to_index = max(0, min(to_index, len(target.people)))
    target.people.insert(to_index, person)
    logger.debug("Moved %s from '%s' to '%s'", person, source.name, target.name)
    return person


def move_person(groups: Sequence[Group], person_id: int, target_index: int) -> Person:
    """Move a person, wherever they are, to the end of ``groups[target_index]``."""
    group_index, position = find_person(groups, person_id)
    target = groups[target_index]
    return transfer_person(groups[group_index], target, position, len(target.people))
