"""
Demo drivers for the three design principle examples.

Each demo runs one fixed scenario and prints its results:

- dependency_inversion_demo: Research over a RelationshipBrowser
- open_closed_demo: BetterFilter with composed specifications
- single_responsibility_demo: Journal saved by PersistenceManager

Run all of them with `solidkit-demo`, or one with `solidkit-demo dip|ocp|srp`.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from solidkit.core.config import SolidKitConfig
from solidkit.core.logger import configure_logging
from solidkit.core.models import Color, Person, Product, Size
from solidkit.core.sequence import EntrySequence
from solidkit.interface.research import Research
from solidkit.journal.journal import Journal
from solidkit.journal.persistence import PersistenceError, PersistenceManager
from solidkit.query.filter import BetterFilter
from solidkit.query.specification import (
    AndSpecification,
    ColorSpecification,
    SizeSpecification,
)
from solidkit.storage.engine import Relationships

logger = logging.getLogger(__name__)


def dependency_inversion_demo(config: Optional[SolidKitConfig] = None) -> Research:
    """Record John's two children and let Research report them."""
    config = config or SolidKitConfig()

    parent = Person(name="John")
    child1 = Person(name="Chris")
    child2 = Person(name="Matt")

    relationships = Relationships()
    relationships.add_parent_and_child(parent, child1)
    relationships.add_parent_and_child(parent, child2)

    return Research(relationships, name=config.research_subject)


def open_closed_demo(config: Optional[SolidKitConfig] = None) -> list[Product]:
    """Filter three products by color, then by color and size."""
    apple = Product(name="Apple", color=Color.GREEN, size=Size.SMALL)
    tree = Product(name="Tree", color=Color.GREEN, size=Size.LARGE)
    house = Product(name="House", color=Color.BLUE, size=Size.LARGE)

    all_products = [apple, tree, house]

    bf = BetterFilter()
    green = ColorSpecification(Color.GREEN)
    for x in bf.filter(all_products, green):
        print(f"{x.name} is green")

    large = SizeSpecification(Size.LARGE)
    green_and_large = AndSpecification(green, large)
    for x in bf.filter(all_products, green_and_large):
        print(f"{x.name} is green and large")

    # same thing with the operator
    spec = green & large
    matches = bf.filter(all_products, spec)
    for x in matches:
        print(f"{x.name} is green and large")

    return matches


def single_responsibility_demo(config: Optional[SolidKitConfig] = None) -> Path:
    """Write two diary entries and save them to the configured path."""
    config = config or SolidKitConfig()

    journal = Journal("Dear Diary", sequence=EntrySequence())
    journal.add("I ate a bug")
    journal.add("I cried today")

    path = PersistenceManager.save(journal, config.journal_path)
    print(f"Saved {len(journal)} entries to {path}")
    return path


DEMOS: dict[str, Callable[[Optional[SolidKitConfig]], object]] = {
    "dip": dependency_inversion_demo,
    "ocp": open_closed_demo,
    "srp": single_responsibility_demo,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solidkit-demo",
        description="Run the SOLID design principle demos.",
    )
    parser.add_argument(
        "demo",
        nargs="?",
        default="all",
        choices=[*DEMOS, "all"],
        help="Demo to run (default: all)",
    )
    parser.add_argument("--journal-path", type=Path, help="Where the srp demo saves its journal")
    parser.add_argument("--subject", help="Whose children the dip demo reports")
    parser.add_argument("--log-level", help="Logging level (default: WARNING)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = SolidKitConfig.from_env(
            journal_path=args.journal_path,
            research_subject=args.subject,
            log_level=args.log_level,
        )
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    configure_logging(config.log_level)

    names = list(DEMOS) if args.demo == "all" else [args.demo]
    for name in names:
        logger.debug(f"Running {name} demo")
        try:
            DEMOS[name](config)
        except PersistenceError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
