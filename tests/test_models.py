from datetime import datetime

import pytest

from groupmixer.allocation import transfer_person
from groupmixer.exceptions import (
    InvalidConfigurationException,
    InvalidPersonDataException,
)
from groupmixer.models import (
    Gender,
    Group,
    PairHistoryIndex,
    PartitionCriteria,
    PartitionDraw,
    Person,
    Profile,
    Roster,
)


def _draw(groups, draw_id=1):
    return PartitionDraw(
        id=draw_id,
        date=datetime(2025, 3, 10, 14, 30),
        list_id=7,
        groups=tuple(groups),
        criteria=PartitionCriteria(mix_gender=True),
    )


def test_person_dict_round_trip(people):
    data = people[1].to_dict()

    assert data == {
        "id": 2,
        "name": "Jane Smith",
        "gender": "female",
        "frenchFluency": 4,
        "formerDWWM": False,
        "technicalLevel": 3,
        "profile": "reserved",
        "age": 30,
    }
    assert Person.from_dict(data) == people[1]


def test_person_from_dict_defaults_and_name_cleanup():
    person = Person.from_dict({"id": "12", "name": "  Lea   Roux "})

    assert person == Person(
        id=12,
        name="Lea Roux",
        gender=Gender.NOT_SPECIFIED,
        french_fluency=1,
        former_dwwm=False,
        technical_level=1,
        profile=Profile.RESERVED,
        age=18,
    )


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": "Al"},
        {"name": ""},
        {"name": 123},
        {"frenchFluency": 5},
        {"technicalLevel": 0},
        {"technicalLevel": True},
        {"age": 0},
        {"age": 100},
        {"age": "old"},
        {"age": float("inf")},
        {"gender": "robot"},
        {"profile": "loud"},
    ],
)
def test_person_from_dict_rejects_invalid_data(overrides):
    data = {"id": 1, "name": "Valid Name", **overrides}

    with pytest.raises(InvalidPersonDataException):
        Person.from_dict(data)


def test_person_from_dict_requires_id():
    with pytest.raises(InvalidPersonDataException):
        Person.from_dict({"name": "No Id Here"})


def test_person_is_immutable(people):
    with pytest.raises(AttributeError):
        people[0].age = 40


def test_criteria_helpers():
    criteria = PartitionCriteria(mix_age=True, mix_gender=True)

    assert criteria.enabled() == ["gender", "age"]
    assert criteria.any_enabled()
    assert not PartitionCriteria.none().any_enabled()
    assert len(PartitionCriteria.all().enabled()) == 6


def test_criteria_from_keys():
    criteria = PartitionCriteria.from_keys(["Gender", "technical-level", " age "])

    assert criteria == PartitionCriteria(
        mix_gender=True, mix_technical_level=True, mix_age=True
    )
    with pytest.raises(InvalidConfigurationException):
        PartitionCriteria.from_keys(["height"])


def test_criteria_dict_round_trip():
    criteria = PartitionCriteria(mix_former_dwwm=True, mix_profile=True)

    assert criteria.to_dict() == {
        "mixGender": False,
        "mixFrenchFluency": False,
        "mixFormerDWWM": True,
        "mixTechnicalLevel": False,
        "mixProfile": True,
        "mixAge": False,
    }
    assert PartitionCriteria.from_dict(criteria.to_dict()) == criteria
    assert PartitionCriteria.from_dict({}) == PartitionCriteria.none()


def test_draw_round_trip_shares_roster_people(people):
    draw = _draw([Group(1, "A", people[:3]), Group(2, "B", people[3:])])
    by_id = {p.id: p for p in people}

    restored = PartitionDraw.from_dict(draw.to_dict(), by_id)

    assert restored == draw
    assert restored.groups[0].people[0] is people[0]


def test_draw_from_groups_is_provisional(people):
    groups = [Group(1, "A", people)]
    when = datetime(2025, 5, 1)

    draw = PartitionDraw.from_groups(
        3, groups, PartitionCriteria.all(), clock=lambda: when
    )

    assert draw.id == 0
    assert draw.date == when
    assert draw.list_id == 3
    assert draw.groups == (groups[0],)


def test_draw_from_groups_is_not_changed_by_later_edits(people):
    groups = [Group(1, "A", people[:3]), Group(2, "B", people[3:])]
    draw = PartitionDraw.from_groups(1, groups, PartitionCriteria.all())

    transfer_person(groups[0], groups[1], 0, 0)

    assert draw.groups[0].person_ids() == [1, 2, 3]
    assert draw.groups[1].person_ids() == [4, 5, 6]
    assert draw.groups[0].people[0] is people[0]


def test_roster_round_trip(people):
    draws = [_draw([Group(1, "A", people)])]
    roster = Roster(id=7, name="Promo 2025", people=people, draws=draws)

    restored = Roster.from_dict(roster.to_dict())

    assert restored == roster
    assert restored.draws[0].groups[0].people[2] is restored.people[2]


def test_roster_rejects_duplicate_ids(people):
    data = {"id": 1, "people": [people[0].to_dict(), people[0].to_dict()]}

    with pytest.raises(InvalidPersonDataException, match="duplicate"):
        Roster.from_dict(data)


def test_pair_history_index(people):
    draws = [
        _draw([Group(1, "A", people[0:2]), Group(2, "B", people[2:5])]),
        _draw([Group(3, "A", [people[0], people[5]])], draw_id=2),
    ]

    index = PairHistoryIndex.from_draws(draws)

    assert index.neighbours(1) == {2, 6}
    assert index.neighbours(3) == {4, 5}
    assert index.have_met(6, 1)
    assert not index.have_met(1, 3)
    assert index.pair_count() == 5
    assert index.neighbours(42) == frozenset()


def test_empty_pair_history():
    index = PairHistoryIndex.from_draws([])

    assert not index
    assert index.pair_count() == 0
    assert not index.have_met(1, 2)
