"""
Command line entry point: summarize a saved units-tree payload.

Usage:
    curriculum-tree payload.json --grade 1 --include-problems
    curriculum-tree payload.json --include-problems --select 101 102
    curriculum-tree payload.json --output response.json --verbose
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from curriculum_toolkit import __version__
from curriculum_toolkit.core.models import SUPPORTED_GRADES
from curriculum_toolkit.core.utils.serialization import PayloadError, save_response_json
from curriculum_toolkit.units_tree import (
    EnvelopeError,
    ShapeError,
    UnitsTreeConfig,
    convert_units_tree_for_component,
    group_selected_problems_by_unit,
    load_units_tree,
)

logger = logging.getLogger("curriculum_tree")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="curriculum-tree",
        description="Convert a saved curriculum units-tree payload and print its statistics",
    )
    parser.add_argument("payload", type=Path, help="JSON file with a node array or {result, message, data} envelope")
    parser.add_argument(
        "--grade", "-g",
        choices=[str(grade) for grade in SUPPORTED_GRADES],
        help="Grade the payload was fetched for",
    )
    parser.add_argument("--include-problems", "-p", action="store_true", help="Payload was fetched with problems")
    parser.add_argument("--strict", action="store_true", help="Validate the node array against the JSON schema")
    parser.add_argument("--select", nargs="+", metavar="PROBLEM_ID", default=[], help="Problem ids to group by unit")
    parser.add_argument("--output", "-o", type=Path, help="Write the assembled response as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")

    try:
        config = UnitsTreeConfig(grade=args.grade, include_problems=args.include_problems, strict=args.strict)
    except ValueError as e:
        parser.error(str(e))

    try:
        response = load_units_tree(args.payload, config)
    except (PayloadError, EnvelopeError, ShapeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    stats = response.stats
    print(f"Grade:          {response.grade.display_name if response.grade else 'all'}")
    print(f"Categories:     {stats.category_count}")
    print(f"Subcategories:  {stats.subcategory_count}")
    print(f"Units:          {stats.unit_count}")
    if stats.total_problems_count is not None:
        print(f"Problems:       {stats.total_problems_count}")
    if response.dropped_node_count:
        print(f"Dropped:        {response.dropped_node_count}")
        for issue in response.dropped:
            logger.debug(f"  {issue}")

    if args.select:
        tree = convert_units_tree_for_component(response.categories)
        groups = group_selected_problems_by_unit(tree, set(args.select))
        print(f"\nSelected problems ({sum(len(g.problems) for g in groups)} in {len(groups)} units):")
        for group in groups:
            print(f"  {group.unit_name} [{group.unit_id}]")
            for entry in group.problems:
                print(f"    - {entry.name} ({entry.kind}, {entry.difficulty})")

    if args.output:
        save_response_json(response, args.output)
        print(f"\nResponse written to: {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
