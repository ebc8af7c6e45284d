"""Example script showing the group allocation API.

Builds a random roster with a few past draws, allocates new groups that try
to avoid previous group mates, and prints the mix report.
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

import random
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from groupmixer.allocation import default_group_names, try_allocate
from groupmixer.models import PairHistoryIndex, PartitionCriteria, PartitionDraw
from groupmixer.testing import RandomRosterGenerator, RosterConfig
from groupmixer.validation import CriterionStatus, build_mix_report


def example_allocation():
    """Example: allocating a roster with history."""

    print("\n" + "=" * 70)
    print("EXAMPLE 1: Allocation with pairing history")
    print("=" * 70 + "\n")

    generator = RandomRosterGenerator(RosterConfig(num_people=17, seed=2025))
    people = generator.generate_roster()
    history = generator.generate_history(people, num_draws=3, number_of_groups=4)
    print(
        f"Roster: {len(people)} people, "
        f"{PairHistoryIndex.from_draws(history).pair_count()} known pairs\n"
    )

    criteria = PartitionCriteria(mix_gender=True, mix_technical_level=True)
    result = try_allocate(
        people, 4, default_group_names(4), criteria, history, rng=random.Random(7)
    )
    if not result.ok:
        print(f"Allocation failed: {result.error}")
        return

    for group in result.groups:
        members = ", ".join(person.name for person in group.people)
        print(f"{group.name} ({len(group)}): {members}")

    report = build_mix_report(result.groups, criteria)
    print(f"\n{report.summary()}")
    for criterion in report.criteria_results:
        if criterion.status != CriterionStatus.NOT_APPLICABLE:
            print(f"  {criterion.name}: {criterion.status.value} {criterion.totals}")

    draw = PartitionDraw.from_groups(1, result.groups, criteria)
    print(f"\nDraw ready to store: {len(draw.to_dict()['groups'])} groups")


def example_rejected_request():
    """Example: a request the engine refuses."""

    print("\n" + "=" * 70)
    print("EXAMPLE 2: Rejected request")
    print("=" * 70 + "\n")

    people = RandomRosterGenerator(RosterConfig(num_people=3, seed=1)).generate_roster()
    result = try_allocate(people, 5, default_group_names(5), PartitionCriteria.all())
    print(f"ok={result.ok}: {result.error}")


if __name__ == "__main__":
    example_allocation()
    example_rejected_request()
