import random
from datetime import datetime

import pytest

from groupmixer.allocation import (
    allocate,
    counter_id_generator,
    default_group_names,
    group_sizes,
    try_allocate,
)
from groupmixer.exceptions import GroupCountError, NameCountError
from groupmixer.models import Gender, Group, PartitionCriteria, PartitionDraw, Person


class ExplodingRandom(random.Random):
    """Fails the test if any random draw is made."""

    def randrange(self, *args, **kwargs):
        raise AssertionError("no random draw expected")


def _ids(groups):
    return sorted(person.id for group in groups for person in group.people)


def _draw(*groups_of_people):
    return PartitionDraw(
        id=1,
        date=datetime(2025, 1, 6),
        list_id=1,
        groups=tuple(
            Group(id=i + 1, name=f"Old {i + 1}", people=list(members))
            for i, members in enumerate(groups_of_people)
        ),
    )


def test_two_groups_of_three(people):
    groups = allocate(
        people,
        2,
        ["Group A", "Group B"],
        PartitionCriteria.all(),
        [],
        rng=random.Random(1),
    )

    assert [g.name for g in groups] == ["Group A", "Group B"]
    assert [len(g) for g in groups] == [3, 3]
    assert _ids(groups) == [1, 2, 3, 4, 5, 6]


def test_uneven_split_gives_extra_people_to_first_groups(people):
    groups = allocate(
        people,
        4,
        default_group_names(4),
        PartitionCriteria.all(),
        [],
        rng=random.Random(2),
    )

    assert [len(g) for g in groups] == [2, 2, 1, 1]
    assert _ids(groups) == [1, 2, 3, 4, 5, 6]


def test_too_many_groups_raises(people):
    with pytest.raises(GroupCountError, match="cannot exceed"):
        allocate(people, 10, default_group_names(10), PartitionCriteria.all(), [])


def test_name_count_mismatch_raises(people):
    with pytest.raises(NameCountError, match="must match"):
        allocate(people, 2, ["Group A"], PartitionCriteria.all(), [])


def test_group_count_checked_before_names(people):
    with pytest.raises(GroupCountError):
        allocate(people, 10, ["Only one"], PartitionCriteria.none(), [])


def test_preconditions_fail_before_any_random_draw(people):
    with pytest.raises(NameCountError):
        allocate(people, 3, ["A"], PartitionCriteria.all(), [], rng=ExplodingRandom())


def test_single_person_single_group(people):
    groups = allocate(people[:1], 1, ["Solo Group"], PartitionCriteria.all(), [])

    assert len(groups) == 1
    assert groups[0].people == [people[0]]
    assert groups[0].people[0] is people[0]


def test_two_people_two_groups(people):
    groups = allocate(people[:2], 2, ["A", "B"], PartitionCriteria.all(), [])

    assert [len(g) for g in groups] == [1, 1]


@pytest.mark.parametrize("number_of_people", range(1, 16))
def test_size_distribution(number_of_people):
    roster = [Person(i, f"Person {i}") for i in range(1, number_of_people + 1)]
    for number_of_groups in range(1, number_of_people + 1):
        groups = allocate(
            roster,
            number_of_groups,
            default_group_names(number_of_groups),
            PartitionCriteria.none(),
            [],
            rng=random.Random(number_of_groups),
        )
        base, extra = divmod(number_of_people, number_of_groups)
        assert len(groups) == number_of_groups
        assert [len(g) for g in groups] == [base + 1] * extra + [base] * (
            number_of_groups - extra
        )
        assert _ids(groups) == list(range(1, number_of_people + 1))


def test_group_sizes():
    assert group_sizes(6, 4) == [2, 2, 1, 1]
    assert group_sizes(7, 3) == [3, 2, 2]
    assert group_sizes(5, 5) == [1, 1, 1, 1, 1]


def test_seeded_allocation_is_reproducible(people):
    def run():
        groups = allocate(
            people,
            3,
            default_group_names(3),
            PartitionCriteria.all(),
            [],
            rng=random.Random(42),
        )
        return [g.person_ids for g in groups]

    assert run() == run()


def test_caller_roster_is_not_modified(people):
    original = list(people)

    allocate(people, 2, ["A", "B"], PartitionCriteria.all(), [], rng=random.Random(3))

    assert people == original
    assert all(a is b for a, b in zip(people, original))


def test_groups_share_person_objects(people):
    groups = allocate(people, 2, ["A", "B"], PartitionCriteria.none(), [])
    by_id = {p.id: p for p in people}

    for group in groups:
        for person in group.people:
            assert person is by_id[person.id]


def test_group_ids_come_from_id_generator(people):
    groups = allocate(
        people,
        3,
        default_group_names(3),
        PartitionCriteria.none(),
        [],
        id_generator=counter_id_generator(100),
    )

    assert [g.id for g in groups] == [100, 101, 102]


def test_default_ids_are_unique(people):
    groups = allocate(people, 3, default_group_names(3), PartitionCriteria.all(), [])

    assert len({g.id for g in groups}) == 3


def test_previous_draws_still_produce_a_partition(people):
    draws = [
        _draw(people[0:2], people[2:4]),
        _draw([people[0], people[2]], [people[1], people[3]]),
    ]

    groups = allocate(
        people, 2, ["A", "B"], PartitionCriteria.all(), draws, rng=random.Random(9)
    )

    assert _ids(groups) == [1, 2, 3, 4, 5, 6]


def test_history_of_full_roster_does_not_block_allocation():
    roster = [Person(i, f"Person {i}", gender=Gender.MALE) for i in range(1, 9)]
    draws = [_draw(roster)]

    groups = allocate(
        roster,
        4,
        default_group_names(4),
        PartitionCriteria.none(),
        draws,
        rng=random.Random(5),
    )

    assert [len(g) for g in groups] == [2, 2, 2, 2]
    assert _ids(groups) == list(range(1, 9))


def test_try_allocate_success(people):
    result = try_allocate(
        people, 2, ["A", "B"], PartitionCriteria.all(), [], rng=random.Random(4)
    )

    assert result.ok
    assert result.error is None
    assert len(result.groups) == 2


def test_try_allocate_reports_errors_without_drawing(people):
    result = try_allocate(
        people,
        7,
        default_group_names(7),
        PartitionCriteria.all(),
        [],
        rng=ExplodingRandom(),
    )

    assert not result.ok
    assert isinstance(result.error, GroupCountError)
    assert result.groups == []

    result = try_allocate(people, 2, ["A"], PartitionCriteria.all(), [])
    assert isinstance(result.error, NameCountError)


def test_default_group_names():
    assert default_group_names(3) == ["Group 1", "Group 2", "Group 3"]
    assert default_group_names(0) == []
