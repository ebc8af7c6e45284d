"""A roster: a named list of people together with its past draws."""

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
from typing import Any, Dict, List

from groupmixer.exceptions import InvalidPersonDataException
from groupmixer.models.group import PartitionDraw
from groupmixer.models.person import Person


@dataclass
class Roster:
    """A list of people and the draws already made from it.

    Attributes
    ----------
    id : int
        Roster identifier, used as ``list_id`` on draws.
    name : str
        Display name.
    people : list of Person
        Members of the roster.
    draws : list of PartitionDraw
        Previous draws, oldest first.
    """

    id: int
    name: str = ""
    people: List[Person] = field(default_factory=list)
    draws: List[PartitionDraw] = field(default_factory=list)

    def people_by_id(self) -> Dict[int, Person]:
        return {person.id: person for person in self.people}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize roster to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "people": [person.to_dict() for person in self.people],
            "draws": [draw.to_dict() for draw in self.draws],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Roster":
        """Deserialize roster from dictionary.

        Draw members are resolved to the roster's own Person objects.

        Raises
        ------
        InvalidPersonDataException
            If an entry is invalid or two entries share an id.
        """
        people = [Person.from_dict(entry) for entry in data.get("people", [])]
        by_id = {person.id: person for person in people}
        if len(by_id) != len(people):
            raise InvalidPersonDataException("Roster contains duplicate person ids")

        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            people=people,
            draws=[PartitionDraw.from_dict(d, by_id) for d in data.get("draws", [])],
        )
