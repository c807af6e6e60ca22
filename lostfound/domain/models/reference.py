"""Reference data: categories and campus locations used by item reports."""

from sqlalchemy import Column, Integer, String

from lostfound.infrastructure.database import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column("CategoryID", Integer, primary_key=True, autoincrement=True)
    name = Column("CategoryName", String(100), unique=True, nullable=False)

    def __repr__(self):
        return f"<Category {self.name}>"


class Location(Base):
    __tablename__ = "locations"

    id = Column("LocationID", Integer, primary_key=True, autoincrement=True)
    name = Column("LocationName", String(100), unique=True, nullable=False)

    def __repr__(self):
        return f"<Location {self.name}>"
