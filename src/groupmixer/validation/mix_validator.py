"""Mix validation: does a partition spread the selected attributes evenly?

Each enabled criterion maps people to bucket labels. For every label held by
more than one person, each group must hold close to its proportional share:
``ideal = total / group_count`` with a tolerance of
``max(1, floor(ideal * 0.5))``. The verdict is a strict boolean gate, any
single failing bucket makes the partition unbalanced.
"""

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

import math
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Sequence

from groupmixer.constants import (
    AGE_BUCKET_OVERFLOW,
    AGE_BUCKETS,
    BUCKET_NO,
    BUCKET_YES,
    CRITERION_AGE,
    CRITERION_FORMER_DWWM,
    CRITERION_FRENCH_FLUENCY,
    CRITERION_GENDER,
    CRITERION_NAMES,
    CRITERION_PROFILE,
    CRITERION_TECHNICAL_LEVEL,
    DEVIATION_FACTOR,
    MIN_DEVIATION,
)
from groupmixer.models import Group, PartitionCriteria
from groupmixer.type_hints import BucketExtractor
from groupmixer.utils import setup_logger

logger = setup_logger(__name__)


class CriterionStatus(Enum):
    """Status of a single mixing criterion."""

    BALANCED = "BALANCED"
    UNBALANCED = "UNBALANCED"
    NOT_APPLICABLE = "NOT_APPLICABLE"


@dataclass
class BucketDeviation:
    """A bucket whose count in one group strays too far from the ideal."""

    bucket: str
    group_name: str
    count: int
    ideal: float
    max_deviation: int


@dataclass
class CriterionResult:
    """Result of checking one criterion over a partition."""

    criterion: str
    status: CriterionStatus
    totals: Dict[str, int] = field(default_factory=dict)
    deviations: List[BucketDeviation] = field(default_factory=list)

    @property
    def name(self) -> str:
        return CRITERION_NAMES.get(self.criterion, self.criterion)


@dataclass
class MixReport:
    """Per-criterion mix report for a partition."""

    group_count: int
    criteria_results: List[CriterionResult] = field(default_factory=list)

    @property
    def is_balanced(self) -> bool:
        return all(
            r.status != CriterionStatus.UNBALANCED for r in self.criteria_results
        )

    @property
    def failed_criteria(self) -> List[str]:
        return [
            r.criterion
            for r in self.criteria_results
            if r.status == CriterionStatus.UNBALANCED
        ]

    def summary(self) -> str:
        checked = [
            r
            for r in self.criteria_results
            if r.status != CriterionStatus.NOT_APPLICABLE
        ]
        if not checked:
            return "Balanced (nothing to check)"
        if self.is_balanced:
            return f"Balanced on {len(checked)} criteria"
        failed = ", ".join(CRITERION_NAMES[c] for c in self.failed_criteria)
        return f"Unbalanced: {failed}"


# ========== Bucket extractors ==========


def age_bucket(age: int) -> str:
    """Age band label: ``<25``, ``25-35``, ``36-45`` or ``>45``."""
    for upper_bound, label in AGE_BUCKETS:
        if age <= upper_bound:
            return label
    return AGE_BUCKET_OVERFLOW


BUCKET_EXTRACTORS: Dict[str, BucketExtractor] = {
    CRITERION_GENDER: lambda p: p.gender.value,
    CRITERION_FRENCH_FLUENCY: lambda p: str(p.french_fluency),
    CRITERION_FORMER_DWWM: lambda p: BUCKET_YES if p.former_dwwm else BUCKET_NO,
    CRITERION_TECHNICAL_LEVEL: lambda p: str(p.technical_level),
    CRITERION_PROFILE: lambda p: p.profile.value,
    CRITERION_AGE: lambda p: age_bucket(p.age),
}


# ========== Distribution check ==========


def max_deviation_for(ideal: float) -> int:
    return max(MIN_DEVIATION, math.floor(ideal * DEVIATION_FACTOR))


def check_distribution(
    groups: Sequence[Group], extractor: BucketExtractor, criterion: str = ""
) -> CriterionResult:
    """Compare each group's bucket counts with the proportional share.

    Buckets held by a single person overall are skipped: they cannot be
    spread.
    """
    group_counts = [Counter(extractor(p) for p in g.people) for g in groups]
    totals: Counter = Counter()
    for counts in group_counts:
        totals.update(counts)

    deviations = []
    for bucket, total in totals.items():
        if total <= 1:
            continue
        ideal = total / len(groups)
        max_deviation = max_deviation_for(ideal)
        for group, counts in zip(groups, group_counts):
            if abs(counts[bucket] - ideal) > max_deviation:
                deviations.append(
                    BucketDeviation(
                        bucket=bucket,
                        group_name=group.name,
                        count=counts[bucket],
                        ideal=ideal,
                        max_deviation=max_deviation,
                    )
                )

    status = CriterionStatus.UNBALANCED if deviations else CriterionStatus.BALANCED
    return CriterionResult(
        criterion=criterion, status=status, totals=dict(totals), deviations=deviations
    )


def _check_criterion(groups: Sequence[Group], criterion: str) -> CriterionResult:
    return check_distribution(groups, BUCKET_EXTRACTORS[criterion], criterion)


def build_mix_report(
    groups: Sequence[Group], criteria: PartitionCriteria
) -> MixReport:
    """Check every criterion and collect the detailed results.

    Disabled criteria, and all criteria when there are fewer than two
    groups, are reported as NOT_APPLICABLE.
    """
    report = MixReport(group_count=len(groups))
    enabled = set(criteria.enabled()) if len(groups) > 1 else set()
    for criterion in BUCKET_EXTRACTORS:
        if criterion in enabled:
            report.criteria_results.append(_check_criterion(groups, criterion))
        else:
            report.criteria_results.append(
                CriterionResult(
                    criterion=criterion, status=CriterionStatus.NOT_APPLICABLE
                )
            )
    logger.debug("Mix report: %s", report.summary())
    return report


def validate(groups: Sequence[Group], criteria: PartitionCriteria) -> bool:
    """Tell whether a partition is balanced on every enabled criterion.

    Partitions with zero or one group are always balanced.
    """
    if len(groups) <= 1:
        return True

    for criterion in criteria.enabled():
        result = _check_criterion(groups, criterion)
        if result.status == CriterionStatus.UNBALANCED:
            logger.debug(
                "%s is unbalanced: %s",
                CRITERION_NAMES[criterion],
                [(d.group_name, d.bucket, d.count) for d in result.deviations],
            )
            return False
    return True

