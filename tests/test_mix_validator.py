import pytest

from groupmixer.models import Gender, Group, PartitionCriteria, Person
from groupmixer.validation import (
    CriterionStatus,
    age_bucket,
    build_mix_report,
    validate,
)

GENDER_ONLY = PartitionCriteria(mix_gender=True)


def _group(group_id, *members):
    return Group(id=group_id, name=f"Group {group_id}", people=list(members))


def _males(count, start=1):
    return [
        Person(i, f"Man {i}", gender=Gender.MALE) for i in range(start, start + count)
    ]


def _females(count, start=100):
    return [
        Person(i, f"Woman {i}", gender=Gender.FEMALE)
        for i in range(start, start + count)
    ]


def _split(people, sizes):
    groups, index = [], 0
    for number, size in enumerate(sizes, start=1):
        groups.append(_group(number, *people[index : index + size]))
        index += size
    return groups


@pytest.fixture
def mixed_groups(people):
    return [_group(1, *people[0:3]), _group(2, *people[3:6])]


@pytest.mark.parametrize(
    "criteria", [PartitionCriteria.all(), PartitionCriteria.none(), GENDER_ONLY]
)
def test_empty_and_single_group_are_balanced(people, criteria):
    assert validate([], criteria) is True
    assert validate([_group(1, *people)], criteria) is True


def test_well_mixed_groups_are_balanced(mixed_groups):
    assert validate(mixed_groups, PartitionCriteria.all()) is True


@pytest.mark.parametrize(
    "flag",
    [
        "mix_gender",
        "mix_french_fluency",
        "mix_former_dwwm",
        "mix_technical_level",
        "mix_profile",
        "mix_age",
    ],
)
def test_each_criterion_on_its_own(mixed_groups, flag):
    assert validate(mixed_groups, PartitionCriteria(**{flag: True})) is True


def test_segregated_genders_are_unbalanced():
    groups = [_group(1, *_males(4)), _group(2, *_females(4))]

    assert validate(groups, GENDER_ONLY) is False
    assert validate(groups, PartitionCriteria(mix_age=True)) is True


def test_two_person_segregation_is_within_tolerance():
    # ideal 1 per group, tolerance 1: a count of 2 is still accepted
    groups = [_group(1, *_males(2)), _group(2, *_females(2))]

    assert validate(groups, GENDER_ONLY) is True


def test_deviation_threshold():
    men = _males(8)

    assert validate(_split(men, [3, 1, 2, 2]), GENDER_ONLY) is True
    assert validate(_split(men, [4, 0, 2, 2]), GENDER_ONLY) is False


def test_tolerance_grows_with_ideal():
    # 16 men over 2 groups: ideal 8, tolerance 4
    men = _males(16)

    assert validate(_split(men, [12, 4]), GENDER_ONLY) is True
    assert validate(_split(men, [13, 3]), GENDER_ONLY) is False


def test_single_occurrence_buckets_are_ignored():
    lone_woman = Person(200, "Lone Woman", gender=Gender.FEMALE)
    groups = [_group(1, *_males(2), lone_woman), _group(2, *_males(2, start=10))]

    assert validate(groups, GENDER_ONLY) is True


def test_disabled_criteria_are_not_checked():
    groups = [_group(1, *_males(4)), _group(2, *_females(4))]

    assert validate(groups, PartitionCriteria.none()) is True


def test_validate_is_deterministic():
    groups = [_group(1, *_males(4)), _group(2, *_females(4))]

    assert [validate(groups, GENDER_ONLY) for _ in range(5)] == [False] * 5


@pytest.mark.parametrize(
    "age, label",
    [
        (18, "<25"),
        (24, "<25"),
        (25, "25-35"),
        (35, "25-35"),
        (36, "36-45"),
        (45, "36-45"),
        (46, ">45"),
        (99, ">45"),
    ],
)
def test_age_buckets(age, label):
    assert age_bucket(age) == label


def test_age_mix_uses_bands():
    young = [Person(i, f"Young {i}", age=20 + i) for i in range(4)]
    older = [Person(10 + i, f"Older {i}", age=50 + i) for i in range(4)]

    age_only = PartitionCriteria(mix_age=True)
    segregated = [_group(1, *young), _group(2, *older)]
    mixed = [_group(1, *young[:2], *older[:2]), _group(2, *young[2:], *older[2:])]

    assert validate(segregated, age_only) is False
    assert validate(mixed, age_only) is True


def test_report_agrees_with_validate(mixed_groups):
    segregated = [_group(1, *_males(4)), _group(2, *_females(4))]

    for groups in (mixed_groups, segregated):
        for criteria in (PartitionCriteria.all(), GENDER_ONLY):
            report = build_mix_report(groups, criteria)
            assert report.is_balanced == validate(groups, criteria)


def test_report_details():
    groups = [_group(1, *_males(4)), _group(2, *_females(4))]

    report = build_mix_report(groups, GENDER_ONLY)

    assert report.group_count == 2
    assert report.failed_criteria == ["gender"]
    assert report.summary() == "Unbalanced: Gender"

    by_criterion = {r.criterion: r for r in report.criteria_results}
    gender = by_criterion["gender"]
    assert gender.status == CriterionStatus.UNBALANCED
    assert gender.totals == {"male": 4, "female": 4}
    assert {(d.group_name, d.bucket, d.count) for d in gender.deviations} == {
        ("Group 1", "male", 4),
        ("Group 2", "male", 0),
        ("Group 1", "female", 0),
        ("Group 2", "female", 4),
    }
    assert by_criterion["age"].status == CriterionStatus.NOT_APPLICABLE


def test_report_for_single_group_is_not_applicable(people):
    report = build_mix_report([_group(1, *people)], PartitionCriteria.all())

    assert report.is_balanced
    assert all(
        r.status == CriterionStatus.NOT_APPLICABLE for r in report.criteria_results
    )
    assert report.summary() == "Balanced (nothing to check)"
