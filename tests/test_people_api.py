"""HTTP tests for the people endpoints."""
import pytest

from people_api.api.routing import is_person_id

MISSING_ID = "12345678-1234-1234-1234-123456789abc"
NOT_FOUND = {"message": "not found"}
INVALID_DATA = {"message": "invalid data"}


class TestList:

    def test_empty(self, client):
        response = client.get("/api/users")
        assert response.status_code == 200
        assert response.json() == []

    def test_returns_creates_in_order(self, client, created):
        people = [created(name, age) for name, age in [("Tom", 37), ("Bob", 41), ("Sam", 24)]]

        response = client.get("/api/users")

        assert response.status_code == 200
        assert response.json() == people


class TestCreate:

    def test_returns_record_with_generated_id(self, client):
        response = client.post("/api/users", json={"name": "Ann", "age": 30})

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"id", "name", "age"}
        assert is_person_id(body["id"])
        assert (body["name"], body["age"]) == ("Ann", 30)

    def test_client_supplied_id_is_ignored(self, client, created):
        person = created("Ann", 30, id=MISSING_ID)
        assert person["id"] != MISSING_ID
        assert client.get(f"/api/users/{MISSING_ID}").status_code == 404

    def test_ids_are_distinct(self, created):
        ids = [created(f"p{i}", i)["id"] for i in range(10)]
        assert len(set(ids)) == 10

    def test_missing_fields_take_defaults(self, client):
        response = client.post("/api/users", json={})
        assert response.status_code == 200
        assert response.json()["name"] == ""
        assert response.json()["age"] == 0

    @pytest.mark.parametrize("content", [
        b"",
        b"null",
        b"{not json",
        b"[]",
        b'"Ann"',
        b'{"name": "Ann", "age": "thirty"}',
        b'{"name": null, "age": 30}',
        b'{"name": "Ann", "age": true}',
        b'{"name": "Ann", "age": "30"}',
        b'{"name": "Ann", "age": 30.5}',
        b'{"name": 5, "age": 30}',
        b'{"id": 7, "name": "Ann", "age": 30}',
    ])
    def test_invalid_body_is_rejected(self, client, store, content):
        response = client.post(
            "/api/users",
            content=content,
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == INVALID_DATA
        assert len(store) == 0


class TestGet:

    def test_found(self, client, created):
        person = created("Ann", 30)
        response = client.get(f"/api/users/{person['id']}")
        assert response.status_code == 200
        assert response.json() == person

    def test_uppercase_id_is_routed(self, client):
        response = client.get(f"/api/users/{MISSING_ID.upper()}")
        assert response.status_code == 404
        assert response.json() == NOT_FOUND

    def test_not_found(self, client, created):
        created("Ann", 30)
        response = client.get(f"/api/users/{MISSING_ID}")
        assert response.status_code == 404
        assert response.json() == NOT_FOUND


class TestUpdate:

    def test_changes_name_and_age_only(self, client, created):
        person = created("Ann", 30)

        response = client.put("/api/users", json={"id": person["id"], "name": "Anna", "age": 31})

        assert response.status_code == 200
        assert response.json() == {"id": person["id"], "name": "Anna", "age": 31}
        assert client.get(f"/api/users/{person['id']}").json()["name"] == "Anna"

    def test_unknown_id_leaves_store_unchanged(self, client, created):
        created("Ann", 30)
        before = client.get("/api/users").json()

        response = client.put("/api/users", json={"id": MISSING_ID, "name": "X", "age": 1})

        assert response.status_code == 404
        assert response.json() == NOT_FOUND
        assert client.get("/api/users").json() == before

    def test_missing_id_is_not_found(self, client, created):
        created("Ann", 30)
        response = client.put("/api/users", json={"name": "X", "age": 1})
        assert response.status_code == 404
        assert response.json() == NOT_FOUND

    def test_invalid_body_is_rejected(self, client, created):
        person = created("Ann", 30)
        response = client.put(
            "/api/users",
            content=b'{"id": "' + person["id"].encode() + b'", "age": ',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == INVALID_DATA
        assert client.get(f"/api/users/{person['id']}").json() == person

    def test_wrong_field_type_is_rejected(self, client, created):
        person = created("Ann", 30)
        response = client.put("/api/users", json={"id": person["id"], "name": "Ann", "age": True})
        assert response.status_code == 400
        assert response.json() == INVALID_DATA
        assert client.get(f"/api/users/{person['id']}").json() == person


class TestDelete:

    def test_removes_and_returns_record(self, client, created):
        ann = created("Ann", 30)
        bob = created("Bob", 41)

        response = client.delete(f"/api/users/{ann['id']}")

        assert response.status_code == 200
        assert response.json() == ann
        assert client.get("/api/users").json() == [bob]

    def test_not_found(self, client):
        response = client.delete(f"/api/users/{MISSING_ID}")
        assert response.status_code == 404
        assert response.json() == NOT_FOUND


def test_create_get_delete_walkthrough(client):
    created = client.post("/api/users", json={"name": "Ann", "age": 30})
    assert created.status_code == 200
    person = created.json()
    assert (person["name"], person["age"]) == ("Ann", 30)

    fetched = client.get(f"/api/users/{person['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == person

    deleted = client.delete(f"/api/users/{person['id']}")
    assert deleted.status_code == 200
    assert deleted.json() == person

    gone = client.get(f"/api/users/{person['id']}")
    assert gone.status_code == 404
    assert gone.json() == {"message": "not found"}
