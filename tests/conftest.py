import os

# Must be set before lostfound.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from lostfound.infrastructure.database import Base, SessionLocal, engine
from lostfound.domain.models.reference import Category, Location
from lostfound.main import app


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def reference_data(db):
    categories = [Category(name="Keys"), Category(name="Electronics")]
    locations = [Location(name="Library"), Location(name="Cafeteria")]
    db.add_all(categories + locations)
    db.commit()
    return {
        "category_id": categories[1].id,
        "location_id": locations[0].id,
    }


@pytest.fixture
def student(client):
    body = {
        "userId": "221234567",
        "name": "Thandi Mokoena",
        "email": "221234567@mycput.ac.za",
        "phoneNumber": "0821234567",
        "password": "s3cret-pass",
    }
    resp = client.post("/register", json=body)
    assert resp.status_code == 201
    return body


@pytest.fixture
def report(client):
    """POST a lost or found report and return the response."""

    def _report(kind, reference_data, user_id, title="Black backpack"):
        return client.post(
            f"/{kind}",
            json={
                "title": title,
                "description": f"{title}, last seen near the entrance",
                "date_lost_found": "2024-05-02",
                "reported_by_user_id": user_id,
                "image_url": None,
                **reference_data,
            },
        )

    return _report
