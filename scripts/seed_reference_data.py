"""Create the schema and fill the categories and locations tables.

Usage::

    python scripts/seed_reference_data.py

Existing names are left alone, so the script can be re-run safely.
"""

from sqlalchemy.exc import SQLAlchemyError

from lostfound.infrastructure.database import Base, SessionLocal, engine
from lostfound.domain.models.account import Account  # noqa: F401
from lostfound.domain.models.item import Item  # noqa: F401
from lostfound.domain.models.reference import Category, Location

CATEGORIES = [
    "Bags",
    "Books & Stationery",
    "Clothing",
    "Electronics",
    "ID & Cards",
    "Jewellery",
    "Keys",
    "Other",
    "Wallets & Purses",
]

LOCATIONS = [
    "Cafeteria",
    "Engineering Building",
    "Library",
    "Lecture Hall",
    "Parking Area",
    "Residence",
    "Sports Field",
    "Student Centre",
]


def _seed(db, model, names) -> int:
    existing = {r[0] for r in db.query(model.name).all()}
    new = [model(name=n) for n in names if n not in existing]
    db.add_all(new)
    return len(new)


def seed():
    print("Creating tables...")
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        added_categories = _seed(db, Category, CATEGORIES)
        added_locations = _seed(db, Location, LOCATIONS)
        db.commit()
        print(f"Seed successful: {added_categories} categories, {added_locations} locations added.")
    except SQLAlchemyError as e:
        print(f"Seed failed: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed()
