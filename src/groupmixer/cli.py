"""Command-line interface for Group Mixer.

Sub-commands work on JSON files: ``allocate`` builds groups from a roster,
``validate`` scores a saved draw, ``generate`` writes a random roster and
``interactive`` asks for the allocation settings at the prompt.
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

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from groupmixer.allocation import allocate, default_group_names
from groupmixer.constants import CRITERIA_ORDER, CRITERION_NAMES
from groupmixer.exceptions import (
    FileLoadException,
    FileSaveException,
    GroupMixerException,
)
from groupmixer.models import Group, PartitionCriteria, PartitionDraw, Roster
from groupmixer.testing import RandomRosterGenerator, RosterConfig
from groupmixer.utils import set_log_level, setup_logger
from groupmixer.validation import CriterionStatus, build_mix_report, validate

logger = setup_logger(__name__)

EXIT_OK = 0
EXIT_UNBALANCED = 1
EXIT_ERROR = 2


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# ========== Argument parsing helpers ==========


def parse_criteria(value: str) -> PartitionCriteria:
    """Parse ``all``, ``none`` or a comma separated list of criterion keys.

    Raises:
        argparse.ArgumentTypeError: If a key is unknown

    Examples:
        >>> parse_criteria("gender,age").enabled()
        ['gender', 'age']
    """
    value = value.strip().lower()
    if value == "all":
        return PartitionCriteria.all()
    if value in ("", "none"):
        return PartitionCriteria.none()
    try:
        return PartitionCriteria.from_keys(k for k in value.split(",") if k.strip())
    except GroupMixerException as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_names(value: str) -> List[str]:
    """Parse a comma separated list of group names."""
    names = [name.strip() for name in value.split(",")]
    if any(not name for name in names):
        raise argparse.ArgumentTypeError(f"Empty group name in '{value}'")
    return names


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid integer '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"Value must be at least 1, got {number}")
    return number


# ========== File helpers ==========


def load_json(path: Path) -> Any:
    """Read a JSON document.

    Raises:
        FileLoadException: If the file is missing or not valid JSON
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise FileLoadException(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise FileLoadException(f"Invalid JSON in {path}: {e}") from e


def save_json(path: Path, data: Any) -> None:
    """Write a JSON document.

    Raises:
        FileSaveException: If the file cannot be written
    """
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise FileSaveException(f"Cannot write {path}: {e}") from e


def load_roster(path: Path) -> Roster:
    """Load a roster file.

    Accepts a roster object (``{"id", "name", "people", "draws"}``) or a
    bare list of people.
    """
    data = load_json(path)
    if isinstance(data, list):
        data = {"id": 0, "name": path.stem, "people": data}
    if not isinstance(data, dict):
        raise FileLoadException(f"Unexpected roster format in {path}")
    try:
        roster = Roster.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise FileLoadException(f"Invalid roster file {path}: {e}") from e
    logger.info(
        "Loaded roster '%s': %s people, %s draws",
        roster.name,
        len(roster.people),
        len(roster.draws),
    )
    return roster


def load_draws(path: Path, roster: Roster) -> List[PartitionDraw]:
    """Load extra history draws (a draw or a list of draws)."""
    data = load_json(path)
    entries = data if isinstance(data, list) else [data]
    people_by_id = roster.people_by_id()
    try:
        return [PartitionDraw.from_dict(entry, people_by_id) for entry in entries]
    except (KeyError, TypeError, ValueError) as e:
        raise FileLoadException(f"Invalid history file {path}: {e}") from e


# ========== Output ==========


def print_groups(groups: Sequence[Group]) -> None:
    for group in groups:
        print(f"\n{Colors.BOLD}{group.name}{Colors.ENDC} ({len(group)})")
        for person in group.people:
            print(f"  - {person.name}")


def print_verdict(
    groups: Sequence[Group], criteria: PartitionCriteria, detailed: bool
) -> bool:
    report = build_mix_report(groups, criteria)
    colour = Colors.OKGREEN if report.is_balanced else Colors.WARNING
    print(f"\n{colour}{report.summary()}{Colors.ENDC}")

    if detailed:
        for result in report.criteria_results:
            if result.status == CriterionStatus.NOT_APPLICABLE:
                continue
            print(f"  {result.name}: {result.status.value}")
            for deviation in result.deviations:
                print(
                    f"    {deviation.group_name}: {deviation.bucket} x{deviation.count}"
                    f" (ideal {deviation.ideal:.2f},"
                    f" allowed +/-{deviation.max_deviation})"
                )
    return report.is_balanced


# ========== Commands ==========


def run_allocate_command(args: argparse.Namespace) -> int:
    """Run the allocate command."""
    roster = load_roster(Path(args.roster))
    history = list(roster.draws)
    if args.history:
        history.extend(load_draws(Path(args.history), roster))

    names = args.names or default_group_names(args.groups)
    rng = random.Random(args.seed) if args.seed is not None else random.Random()

    groups = allocate(
        roster.people, args.groups, names, args.criteria, history, rng=rng
    )
    print_groups(groups)
    print_verdict(groups, args.criteria, args.detailed)

    if args.output:
        draw = PartitionDraw.from_groups(roster.id, groups, args.criteria)
        save_json(Path(args.output), draw.to_dict())
        print(f"\n{Colors.OKGREEN}Draw saved to: {args.output}{Colors.ENDC}")
    return EXIT_OK


def run_validate_command(args: argparse.Namespace) -> int:
    """Run the validate command."""
    try:
        draw = PartitionDraw.from_dict(load_json(Path(args.draw)))
    except (KeyError, TypeError, ValueError) as e:
        raise FileLoadException(f"Invalid draw file {args.draw}: {e}") from e
    criteria = args.criteria if args.criteria is not None else draw.criteria

    if not args.detailed:
        balanced = validate(draw.groups, criteria)
        print("balanced" if balanced else "unbalanced")
    else:
        balanced = print_verdict(draw.groups, criteria, detailed=True)
    return EXIT_OK if balanced else EXIT_UNBALANCED


def run_generate_command(args: argparse.Namespace) -> int:
    """Run the generate command."""
    config = RosterConfig(num_people=args.people, seed=args.seed, list_id=args.list_id)
    generator = RandomRosterGenerator(config)
    people = generator.generate_roster()

    draws = []
    if args.draws:
        draws = generator.generate_history(people, args.draws, args.groups)

    roster = Roster(id=args.list_id, name=args.name, people=people, draws=draws)
    save_json(Path(args.output), roster.to_dict())
    print(
        f"{Colors.OKGREEN}Roster of {len(people)} people "
        f"({len(draws)} draws) saved to: {args.output}{Colors.ENDC}"
    )
    return EXIT_OK


# ========== Interactive mode ==========


def _ask_int(session: PromptSession, message: str, default: int) -> int:
    while True:
        answer = session.prompt(f"{message} [{default}]: ").strip()
        if not answer:
            return default
        try:
            return positive_int(answer)
        except argparse.ArgumentTypeError as e:
            print(f"{Colors.FAIL}{e}{Colors.ENDC}")


def _ask_criteria(session: PromptSession) -> PartitionCriteria:
    completer = WordCompleter(["all", "none"] + CRITERIA_ORDER)
    labels = [f"{key} ({CRITERION_NAMES[key]})" for key in CRITERIA_ORDER]
    print("Criteria: " + ", ".join(labels))
    while True:
        answer = session.prompt("Criteria to mix [all]: ", completer=completer)
        try:
            return parse_criteria(answer or "all")
        except argparse.ArgumentTypeError as e:
            print(f"{Colors.FAIL}{e}{Colors.ENDC}")


def run_interactive_command(args: argparse.Namespace) -> int:
    """Ask for allocation settings at the prompt, then allocate."""
    roster = load_roster(Path(args.roster))
    session = PromptSession(
        history=InMemoryHistory(),
        style=Style.from_dict({"prompt": "#00aa00 bold"}),
    )

    title = roster.name or "Roster"
    print(f"{Colors.BOLD}{title}{Colors.ENDC}: {len(roster.people)} people")
    number_of_groups = _ask_int(session, "Number of groups", 2)
    names = []
    for default in default_group_names(number_of_groups):
        answer = session.prompt(f"Name for {default} [{default}]: ").strip()
        names.append(answer or default)
    criteria = _ask_criteria(session)

    while True:
        groups = allocate(
            roster.people, number_of_groups, names, criteria, roster.draws
        )
        print_groups(groups)
        print_verdict(groups, criteria, detailed=False)

        answer = session.prompt("\n(r)egenerate, (s)ave or (q)uit? ").strip().lower()
        if answer.startswith("r"):
            continue
        if answer.startswith("s"):
            output = session.prompt("Save draw to: ").strip()
            if output:
                draw = PartitionDraw.from_groups(roster.id, groups, criteria)
                save_json(Path(output), draw.to_dict())
                print(f"{Colors.OKGREEN}Draw saved to: {output}{Colors.ENDC}")
        return EXIT_OK


# ========== Parser ==========


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="groupmixer",
        description="Split a roster into balanced groups that avoid repeat pairings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Four groups mixing gender and age
  groupmixer allocate roster.json --groups 4 --criteria gender,age --seed 7

  # Check a saved draw
  groupmixer validate draw.json --detailed

  # Random roster of 20 people with 3 past draws
  groupmixer generate --people 20 --draws 3 --groups 4 --output roster.json
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.required = True

    # Allocate subcommand
    alloc_parser = subparsers.add_parser("allocate", help="Build groups from a roster")
    alloc_parser.add_argument("roster", help="Roster file (JSON)")
    alloc_parser.add_argument("--groups", type=positive_int, required=True)
    alloc_parser.add_argument("--names", type=parse_names, help="Comma separated")
    alloc_parser.add_argument(
        "--criteria",
        type=parse_criteria,
        default=PartitionCriteria.none(),
        help="all, none, or comma separated: " + ",".join(CRITERIA_ORDER),
    )
    alloc_parser.add_argument("--history", help="Extra previous draws (JSON)")
    alloc_parser.add_argument("--seed", type=int, help="Random seed")
    alloc_parser.add_argument("--output", help="Write the draw to this file")
    alloc_parser.add_argument("--detailed", action="store_true")
    alloc_parser.set_defaults(func=run_allocate_command)

    # Validate subcommand
    val_parser = subparsers.add_parser("validate", help="Check a draw's mix")
    val_parser.add_argument("draw", help="Draw file (JSON)")
    val_parser.add_argument(
        "--criteria", type=parse_criteria, help="Override the draw's criteria"
    )
    val_parser.add_argument("--detailed", action="store_true")
    val_parser.set_defaults(func=run_validate_command)

    # Generate subcommand
    gen_parser = subparsers.add_parser("generate", help="Write a random roster")
    gen_parser.add_argument("--people", type=positive_int, default=20)
    gen_parser.add_argument("--seed", type=int)
    gen_parser.add_argument("--draws", type=int, default=0, help="Past draws to add")
    gen_parser.add_argument("--groups", type=positive_int, default=4)
    gen_parser.add_argument("--name", default="Generated roster")
    gen_parser.add_argument("--list-id", type=int, default=1)
    gen_parser.add_argument("--output", required=True)
    gen_parser.set_defaults(func=run_generate_command)

    # Interactive subcommand
    int_parser = subparsers.add_parser("interactive", help="Allocate at the prompt")
    int_parser.add_argument("roster", help="Roster file (JSON)")
    int_parser.set_defaults(func=run_interactive_command)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the groupmixer CLI."""
    parser = create_main_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)

    try:
        return args.func(args)
    except GroupMixerException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}", file=sys.stderr)
        return EXIT_ERROR
    except (KeyboardInterrupt, EOFError):
        print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}")
        return EXIT_OK
