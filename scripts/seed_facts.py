"""Insert a few sample facts into the remote store."""

import argparse
import asyncio

from til.core.settings import get_settings
from til.db.supabase import close_store_client, get_store_client
from til.features.facts.repositories import PostgrestFactRepository, RemoteStoreError
from til.features.facts.usecases import CreateFactUseCaseImpl, FactValidationError

SAMPLE_FACTS = [
    {
        "text": "React is being developed by Meta (formerly facebook)",
        "source": "https://opensource.fb.com/",
        "category": "technology",
    },
    {
        "text": (
            "Millennial dads spend 3 times as much time with their kids than their "
            "fathers spent with them. In 1982, 43% of fathers had never changed a "
            "diaper. Today, that number is down to 3%"
        ),
        "source": (
            "https://www.mother.ly/parenting/"
            "millennial-dads-spend-more-time-with-their-kids"
        ),
        "category": "society",
    },
    {
        "text": "Lisbon is the capital of Portugal",
        "source": "https://en.wikipedia.org/wiki/Lisbon",
        "category": "society",
    },
]


async def seed_facts(dry_run: bool = False) -> int:
    """Insert the sample facts. Returns the number of facts created."""
    settings = get_settings()
    if dry_run:
        for fact in SAMPLE_FACTS:
            print(f"[dry-run] {fact['category']}: {fact['text']}")
        return 0

    client = await get_store_client()
    use_case = CreateFactUseCaseImpl(
        repository=PostgrestFactRepository(client, table=settings.facts_table),
        max_length=settings.max_fact_length,
    )

    created = 0
    try:
        for fact in SAMPLE_FACTS:
            try:
                new_fact = await use_case.execute(**fact)
            except FactValidationError as e:
                print(f"Skipping invalid sample fact: {e}")
                continue
            except RemoteStoreError as e:
                print(f"Remote store rejected a sample fact: {e}")
                return created
            created += 1
            print(f"Created fact {new_fact.id} ({new_fact.category.value})")
    finally:
        await close_store_client()

    return created


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the sample facts instead of inserting them",
    )
    args = parser.parse_args()

    count = asyncio.run(seed_facts(dry_run=args.dry_run))
    print(f"{count} facts created.")
