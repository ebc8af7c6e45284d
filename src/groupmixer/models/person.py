"""A person on a roster."""

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

from dataclasses import dataclass
from typing import Any, Dict

from groupmixer.constants import DEFAULT_AGE, DEFAULT_LEVEL
from groupmixer.exceptions import InvalidPersonDataException
from groupmixer.models.enums import Gender, Profile
from groupmixer.utils.validation import (
    require_valid,
    validate_age,
    validate_level,
    validate_name,
)


@dataclass(frozen=True, slots=True)
class Person:
    """
    A person who can be placed into a group.

    Person values are shared by reference between the roster and every group
    built from it, so instances are frozen.

    Attributes
    ----------
    id : int
        Unique identifier within the roster.
    name : str
        Display name.
    gender : Gender
        Gender category.
    french_fluency : int
        French fluency level from 1 (beginner) to 4 (fluent).
    former_dwwm : bool
        Whether the person previously followed the DWWM (web developer)
        training.
    technical_level : int
        Technical level from 1 to 4.
    profile : Profile
        Social profile category.
    age : int
        Age in years.

    Examples
    --------
    Creating a person::

        person = Person(
            id=1,
            name="Jane Smith",
            gender=Gender.FEMALE,
            french_fluency=4,
            former_dwwm=False,
            technical_level=3,
            profile=Profile.RESERVED,
            age=30,
        )
    """

    id: int
    name: str
    gender: Gender = Gender.NOT_SPECIFIED
    french_fluency: int = DEFAULT_LEVEL
    former_dwwm: bool = False
    technical_level: int = DEFAULT_LEVEL
    profile: Profile = Profile.RESERVED
    age: int = DEFAULT_AGE

    def to_dict(self) -> Dict[str, Any]:
        """Serialize person to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "gender": self.gender.value,
            "frenchFluency": self.french_fluency,
            "formerDWWM": self.former_dwwm,
            "technicalLevel": self.technical_level,
            "profile": self.profile.value,
            "age": self.age,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Person":
        """Deserialize and validate a person from dictionary.

        Raises
        ------
        InvalidPersonDataException
            If a required field is missing or an attribute is out of range.
        """
        if "id" not in data:
            raise InvalidPersonDataException(f"Person entry has no id: {data!r}")

        try:
            person_id = int(data["id"])
            gender = Gender(data.get("gender", Gender.NOT_SPECIFIED.value))
            profile = Profile(data.get("profile", Profile.RESERVED.value))
        except (TypeError, ValueError) as e:
            raise InvalidPersonDataException(
                f"Invalid person entry {data.get('id')!r}: {e}"
            ) from e

        return cls(
            id=person_id,
            name=require_valid(validate_name(data.get("name"))),
            gender=gender,
            french_fluency=require_valid(
                validate_level(
                    data.get("frenchFluency", DEFAULT_LEVEL), "French fluency"
                )
            ),
            former_dwwm=bool(data.get("formerDWWM", False)),
            technical_level=require_valid(
                validate_level(
                    data.get("technicalLevel", DEFAULT_LEVEL), "Technical level"
                )
            ),
            profile=profile,
            age=require_valid(validate_age(data.get("age", DEFAULT_AGE))),
        )

    def __str__(self) -> str:
        return f"{self.name} (#{self.id})"
