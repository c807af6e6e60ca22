from sqlalchemy.exc import OperationalError

from lostfound.interfaces.deps import get_category_repository, get_location_repository


def test_categories_are_alphabetical(client, reference_data):
    resp = client.get("/categories")

    assert resp.status_code == 200
    assert [c["name"] for c in resp.json()] == ["Electronics", "Keys"]
    assert resp.json()[0]["id"] == reference_data["category_id"]


def test_locations_are_alphabetical(client, reference_data):
    resp = client.get("/locations")

    assert resp.status_code == 200
    assert [c["name"] for c in resp.json()] == ["Cafeteria", "Library"]


def test_empty_reference_tables(client):
    assert client.get("/categories").json() == []
    assert client.get("/locations").json() == []


class BrokenReferenceRepository:
    def list_all(self):
        raise OperationalError("SELECT 1", {}, Exception("gone away"))


def test_reference_store_failure(client):
    client.app.dependency_overrides[get_category_repository] = BrokenReferenceRepository
    client.app.dependency_overrides[get_location_repository] = BrokenReferenceRepository

    categories = client.get("/categories")
    locations = client.get("/locations")

    assert categories.status_code == locations.status_code == 500
    assert categories.json()["error"]["message"] == "Error fetching categories."
    assert locations.json()["error"]["message"] == "Error fetching locations."


def test_root_and_health(client):
    assert client.get("/").text == "Lost & Found API running..."
    assert client.get("/health").json() == {"status": "healthy"}


def test_request_id_header_is_returned(client):
    resp = client.get("/health", headers={"X-Request-ID": "4f0c6b3e2b1d4f8a9c7e5d3b1a2f4e6c"})

    assert resp.headers["X-Request-ID"] == "4f0c6b3e2b1d4f8a9c7e5d3b1a2f4e6c"
