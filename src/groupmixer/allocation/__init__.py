from groupmixer.allocation.allocator import (
    AllocationResult,
    allocate,
    counter_id_generator,
    default_group_names,
    group_sizes,
    try_allocate,
)
from groupmixer.allocation.editing import (
    find_person,
    move_person,
    move_within_group,
    transfer_person,
)

__all__ = [
    "AllocationResult",
    "allocate",
    "counter_id_generator",
    "default_group_names",
    "find_person",
    "group_sizes",
    "move_person",
    "move_within_group",
    "transfer_person",
    "try_allocate",
]
