"""Selection of attributes to spread across groups."""

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
from typing import Any, Dict, Iterable, List

from groupmixer.constants import (
    CRITERIA_ORDER,
    CRITERION_AGE,
    CRITERION_FORMER_DWWM,
    CRITERION_FRENCH_FLUENCY,
    CRITERION_GENDER,
    CRITERION_PROFILE,
    CRITERION_TECHNICAL_LEVEL,
)
from groupmixer.exceptions import InvalidConfigurationException
from groupmixer.type_hints import CriterionKey

# Criterion key -> serialized flag name
_FLAG_NAMES = {
    CRITERION_GENDER: "mixGender",
    CRITERION_FRENCH_FLUENCY: "mixFrenchFluency",
    CRITERION_FORMER_DWWM: "mixFormerDWWM",
    CRITERION_TECHNICAL_LEVEL: "mixTechnicalLevel",
    CRITERION_PROFILE: "mixProfile",
    CRITERION_AGE: "mixAge",
}


@dataclass(frozen=True)
class PartitionCriteria:
    """Which person attributes should be spread across groups.

    Attributes
    ----------
    mix_gender : bool
        Spread genders.
    mix_french_fluency : bool
        Spread French fluency levels.
    mix_former_dwwm : bool
        Spread former DWWM trainees.
    mix_technical_level : bool
        Spread technical levels.
    mix_profile : bool
        Spread social profiles.
    mix_age : bool
        Spread age bands.
    """

    mix_gender: bool = False
    mix_french_fluency: bool = False
    mix_former_dwwm: bool = False
    mix_technical_level: bool = False
    mix_profile: bool = False
    mix_age: bool = False

    def is_enabled(self, key: CriterionKey) -> bool:
        """Check whether a single criterion is switched on."""
        return bool(getattr(self, f"mix_{key}"))

    def enabled(self) -> List[str]:
        """Enabled criterion keys in evaluation order."""
        return [key for key in CRITERIA_ORDER if self.is_enabled(key)]

    def any_enabled(self) -> bool:
        return bool(self.enabled())

    @classmethod
    def all(cls) -> "PartitionCriteria":
        """Criteria with every attribute switched on."""
        return cls.from_keys(CRITERIA_ORDER)

    @classmethod
    def none(cls) -> "PartitionCriteria":
        """Criteria with every attribute switched off."""
        return cls()

    @classmethod
    def from_keys(cls, keys: Iterable[str]) -> "PartitionCriteria":
        """Build criteria from criterion keys such as ``["gender", "age"]``.

        Raises
        ------
        InvalidConfigurationException
            If a key is not a known criterion.
        """
        flags = {}
        for key in keys:
            key = key.strip().lower().replace("-", "_")
            if key not in _FLAG_NAMES:
                raise InvalidConfigurationException(
                    f"Unknown criterion '{key}'. Expected one of: "
                    f"{', '.join(CRITERIA_ORDER)}"
                )
            flags[f"mix_{key}"] = True
        return cls(**flags)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize criteria to dictionary."""
        return {flag: self.is_enabled(key) for key, flag in _FLAG_NAMES.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PartitionCriteria":
        """Deserialize criteria from dictionary."""
        return cls(
            **{
                f"mix_{key}": bool(data.get(flag, False))
                for key, flag in _FLAG_NAMES.items()
            }
        )
