from groupmixer.models.criteria import PartitionCriteria
from groupmixer.models.enums import Gender, Profile
from groupmixer.models.group import Group, PartitionDraw
from groupmixer.models.pair_history import PairHistoryIndex
from groupmixer.models.person import Person
from groupmixer.models.roster import Roster

__all__ = [
    "Gender",
    "Group",
    "PairHistoryIndex",
    "PartitionCriteria",
    "PartitionDraw",
    "Person",
    "Profile",
    "Roster",
]
