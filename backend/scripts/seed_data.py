"""Seed the database with the SpaceMate demo catalogue.

Creates the tables if needed and inserts the six demo hotels and five demo
office spaces. With ``--reset`` the ownerless demo listings are removed and
re-inserted; owner-created listings and all bookings are left alone.

Run from the backend directory with ``STORAGE_BACKEND=sql``:
    python -m scripts.seed_data [--reset]
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add backend to path so imports work when run as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import delete

from spacemate.database import async_session_factory, create_tables, engine
from spacemate.models.property import Property
from spacemate.seed_data import DEMO_PROPERTIES, seed_database


async def seed(reset: bool = False) -> None:
    """Populate the database with the demo listings."""
    await create_tables()

    async with async_session_factory() as session:
        if reset:
            result = await session.execute(delete(Property).where(Property.owner_id.is_(None)))
            print(f"⚠️  Removed {result.rowcount} demo properties, re-seeding...")
            await session.flush()

        inserted = await seed_database(session)
        await session.commit()

    await engine.dispose()

    if inserted:
        hotels = sum(1 for p in DEMO_PROPERTIES if p["property_type"] == "hotel")
        print(f"✅ Created {inserted} properties ({hotels} hotels, {inserted - hotels} offices)")
    else:
        print("Demo listings already present; nothing to seed (use --reset to replace demo data).")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--reset", action="store_true", help="replace existing demo listings")
    args = parser.parse_args()
    asyncio.run(seed(reset=args.reset))
