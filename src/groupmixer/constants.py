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

# --- Constants ---
# Shuffle: draws allowed per position before a conflicting swap is accepted
MAX_SHUFFLE_ATTEMPTS = 10

# Mix validation thresholds
DEVIATION_FACTOR = 0.5
MIN_DEVIATION = 1

# Person attribute bounds (inclusive)
MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 50
MIN_LEVEL = 1
MAX_LEVEL = 4
MIN_AGE = 1
MAX_AGE = 99

# Default values used when a roster entry omits an attribute
DEFAULT_LEVEL = 1
DEFAULT_AGE = 18

# Group naming
DEFAULT_GROUP_NAME = "Group {number}"

# Criterion keys (for internal logic and the CLI)
CRITERION_GENDER = "gender"
CRITERION_FRENCH_FLUENCY = "french_fluency"
CRITERION_FORMER_DWWM = "former_dwwm"
CRITERION_TECHNICAL_LEVEL = "technical_level"
CRITERION_PROFILE = "profile"
CRITERION_AGE = "age"

# Evaluation order of criteria, shared by the sorter and the validator
CRITERIA_ORDER = [
    CRITERION_GENDER,
    CRITERION_FRENCH_FLUENCY,
    CRITERION_FORMER_DWWM,
    CRITERION_TECHNICAL_LEVEL,
    CRITERION_PROFILE,
    CRITERION_AGE,
]

# Display names for criteria
CRITERION_NAMES = {
    CRITERION_GENDER: "Gender",
    CRITERION_FRENCH_FLUENCY: "French fluency",
    CRITERION_FORMER_DWWM: "Former DWWM",
    CRITERION_TECHNICAL_LEVEL: "Technical level",
    CRITERION_PROFILE: "Profile",
    CRITERION_AGE: "Age",
}

# Age buckets: (inclusive upper bound, label); ages above the last bound
# fall into AGE_BUCKET_OVERFLOW
AGE_BUCKETS = [
    (24, "<25"),
    (35, "25-35"),
    (45, "36-45"),
]
AGE_BUCKET_OVERFLOW = ">45"

# Boolean bucket labels
BUCKET_YES = "yes"
BUCKET_NO = "no"
