"""
solidkit Quickstart Example

This example walks through the three principles with the public API:

1. Dependency inversion: one Research, two interchangeable stores
2. Open/closed: new filtering rules without touching the filter
3. Single responsibility: journals recorded in one place, saved in another
"""

import tempfile
from pathlib import Path

from solidkit import (
    BetterFilter,
    Color,
    ColorSpecification,
    EntrySequence,
    Journal,
    Person,
    PersistenceManager,
    Product,
    Relationships,
    Research,
    Size,
    SizeSpecification,
    SQLiteRelationships,
)


def main():
    print("=" * 60)
    print("solidkit Quickstart")
    print("=" * 60)

    # ==========================================================================
    # Dependency inversion
    # ==========================================================================
    print("\n" + "-" * 40)
    print("Step 1: Research over two different stores")
    print("-" * 40)

    john = Person(name="John")
    children = [Person(name="Chris"), Person(name="Matt")]

    in_memory = Relationships()
    on_disk = SQLiteRelationships(":memory:")
    for child in children:
        in_memory.add_parent_and_child(john, child)
        on_disk.add_parent_and_child(john, child)

    print("In-memory store:")
    Research(in_memory)
    print("SQLite store:")
    Research(on_disk)
    print(f"Chris's parents: {[p.name for p in in_memory.find_all_parents_of('Chris')]}")
    on_disk.close()

    # ==========================================================================
    # Open/closed
    # ==========================================================================
    print("\n" + "-" * 40)
    print("Step 2: Composing specifications")
    print("-" * 40)

    products = [
        Product(name="Apple", color=Color.GREEN, size=Size.SMALL),
        Product(name="Tree", color=Color.GREEN, size=Size.LARGE),
        Product(name="House", color=Color.BLUE, size=Size.LARGE),
        Product(name="Cherry", color=Color.RED, size=Size.SMALL),
    ]

    bf = BetterFilter()
    green = ColorSpecification(Color.GREEN)
    large = SizeSpecification(Size.LARGE)

    for label, spec in [
        ("green and large", green & large),
        ("green or large", green | large),
        ("not green", ~green),
    ]:
        names = [p.name for p in bf.filter(products, spec)]
        print(f"{label}: {names}")

    # ==========================================================================
    # Single responsibility
    # ==========================================================================
    print("\n" + "-" * 40)
    print("Step 3: Saving a journal")
    print("-" * 40)

    journal = Journal("Dear Diary", sequence=EntrySequence())
    journal.add("I ate a bug")
    journal.add("I cried today")

    with tempfile.TemporaryDirectory() as tmp:
        path = PersistenceManager.save(journal, Path(tmp) / "diary.txt")
        print(f"Saved to {path}:")
        for line in PersistenceManager.load(path):
            print(f"  {line}")


if __name__ == "__main__":
    main()
