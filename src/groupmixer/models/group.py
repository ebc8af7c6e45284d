"""Data models for groups and recorded partitions."""

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
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from groupmixer.models.criteria import PartitionCriteria
from groupmixer.models.person import Person


@dataclass
class Group:
    """A named group of people.

    Attributes
    ----------
    id : int
        Group identifier. Identifiers assigned by the allocator are
        provisional; a store may replace them when saving.
    name : str
        Display name.
    people : list of Person
        Members in order. These are references to the roster's Person
        objects, never copies.
    """

    id: int
    name: str
    people: List[Person] = field(default_factory=list)

    @property
    def person_ids(self) -> List[int]:
        return [person.id for person in self.people]

    def __len__(self) -> int:
        return len(self.people)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize group to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "people": [person.to_dict() for person in self.people],
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        people_by_id: Optional[Mapping[int, Person]] = None,
    ) -> "Group":
        """Deserialize group from dictionary.

        When ``people_by_id`` is given, members whose id is known are taken
        from it so the group shares the roster's Person objects.
        """
        people_by_id = people_by_id or {}
        people = []
        for entry in data.get("people", []):
            known = people_by_id.get(int(entry["id"]))
            people.append(known if known is not None else Person.from_dict(entry))
        return cls(id=data["id"], name=data.get("name", ""), people=people)


@dataclass(frozen=True)
class PartitionDraw:
    """A recorded partition of a roster, used as pairing history.

    Attributes
    ----------
    id : int
        Draw identifier (0 until a store assigns one).
    date : datetime
        When the draw was made.
    list_id : int
        Identifier of the roster the draw belongs to.
    groups : tuple of Group
        The groups produced.
    criteria : PartitionCriteria
        Criteria used to produce the groups.
    """

    id: int
    date: datetime
    list_id: int
    groups: Tuple[Group, ...]
    criteria: PartitionCriteria = field(default_factory=PartitionCriteria)

    @classmethod
    def from_groups(
        cls,
        list_id: int,
        groups: Sequence[Group],
        criteria: PartitionCriteria,
        draw_id: int = 0,
        clock: Callable[[], datetime] = datetime.now,
    ) -> "PartitionDraw":
        """Build a provisional draw record from freshly allocated groups."""
        return cls(
            id=draw_id,
            date=clock(),
            list_id=list_id,
            groups=tuple(
                Group(id=group.id, name=group.name, people=list(group.people))
                for group in groups
            ),
            criteria=criteria,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize draw to dictionary."""
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "listId": self.list_id,
            "groups": [group.to_dict() for group in self.groups],
            "criteria": self.criteria.to_dict(),
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        people_by_id: Optional[Mapping[int, Person]] = None,
    ) -> "PartitionDraw":
        """Deserialize draw from dictionary."""
        return cls(
            id=data.get("id", 0),
            date=datetime.fromisoformat(data["date"]),
            list_id=data.get("listId", 0),
            groups=tuple(
                Group.from_dict(g, people_by_id) for g in data.get("groups", [])
            ),
            criteria=PartitionCriteria.from_dict(data.get("criteria", {})),
        )
