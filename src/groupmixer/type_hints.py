"""Type hints used in Group Mixer."""

from typing import Callable, Dict, Literal, Set, Tuple

# Criterion key literals (for type hints)
CriterionKey = Literal[
    "gender",
    "french_fluency",
    "former_dwwm",
    "technical_level",
    "profile",
    "age",
]

# Person id -> ids of people previously grouped with them
PairMap = Dict[int, Set[int]]
# Signed per-criterion difference between two people
AttributeDelta = Callable[["Person", "Person"], int]
# Person -> bucket label used for distribution scoring
BucketExtractor = Callable[["Person"], str]
# Supplies fresh group identities
IdGenerator = Callable[[], int]
# (group index, position inside the group)
Location = Tuple[int, int]

#  LocalWords:  PairMap
