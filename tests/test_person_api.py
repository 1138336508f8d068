import pytest
from fastapi.testclient import TestClient

from devtalk_api.app.main import create_app

pytestmark = pytest.mark.testclient

BASE = "/api/v1/person"


def test_list_people(client):
    resp = client.get(BASE)
    assert resp.status_code == 200
    people = resp.json()
    assert [p["Id"] for p in people] == [1, 2, 3]
    assert people[0] == {"Id": 1, "FirstName": "John", "LastName": "Smith", "Age": 34}


def test_list_people_with_trailing_slash(client):
    resp = client.get(f"{BASE}/")
    assert resp.status_code == 200
    assert len(resp.json()) == 3


def test_list_people_skip_and_take(client):
    resp = client.get(BASE, params={"skip": 1, "take": 1})
    assert resp.status_code == 200
    assert [p["Id"] for p in resp.json()] == [2]

    resp = client.get(BASE, params={"skip": -3})
    assert [p["Id"] for p in resp.json()] == [1, 2, 3]

    resp = client.get(BASE, params={"skip": 10})
    assert resp.json() == []


def test_list_people_rejects_non_integer_query(client):
    resp = client.get(BASE, params={"take": "many"})
    assert resp.status_code == 422


def test_scenario_from_seed(client):
    resp = client.get(f"{BASE}/2")
    assert resp.status_code == 200
    assert resp.json() == {"Id": 2, "FirstName": "Jane", "LastName": "Doe", "Age": 23}

    resp = client.delete(f"{BASE}/4")
    assert resp.status_code == 404

    resp = client.delete(f"{BASE}/1")
    assert resp.status_code == 204
    assert resp.content == b""
    assert [p["Id"] for p in client.get(BASE).json()] == [2, 3]

    resp = client.patch(f"{BASE}/3", json={"FirstName": "Bob", "LastName": "R", "Age": 99})
    assert resp.status_code == 200
    assert resp.json() == {"Id": 3, "FirstName": "Bob", "LastName": "R", "Age": 99}
    assert len(client.get(BASE).json()) == 2


def test_get_missing_person(client):
    resp = client.get(f"{BASE}/999")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Person not found"


def test_put_creates_with_location(client):
    resp = client.put(f"{BASE}/10", json={"Id": 3, "FirstName": "Ada", "LastName": "Lovelace", "Age": 36})
    assert resp.status_code == 201
    assert resp.headers["location"] == f"{BASE}/10"
    assert resp.json()["Id"] == 10

    resp = client.get(f"{BASE}/10")
    assert resp.status_code == 200
    assert resp.json()["FirstName"] == "Ada"
    # the body id was ignored, person 3 is untouched
    assert client.get(f"{BASE}/3").json()["FirstName"] == "Bob"


def test_put_existing_id_does_not_duplicate(client):
    resp = client.put(f"{BASE}/1", json={"FirstName": "Johnny"})
    assert resp.status_code == 201
    ids = [p["Id"] for p in client.get(BASE).json()]
    assert ids.count(1) == 1


def test_patch_missing_person(client):
    resp = client.patch(f"{BASE}/42", json={"FirstName": "Nobody"})
    assert resp.status_code == 404
    assert len(client.store) == 3


def test_patch_discards_old_fields(client):
    resp = client.patch(f"{BASE}/1", json={"FirstName": "Jon"})
    assert resp.status_code == 200
    assert resp.json() == {"Id": 1, "FirstName": "Jon", "LastName": None, "Age": 0}


def test_post_creates_new_person(client):
    resp = client.post(BASE, json={"FirstName": "Grace", "LastName": "Hopper", "Age": 85})
    assert resp.status_code == 200
    assert resp.json()["Id"] == 4
    assert client.get(f"{BASE}/4").json()["LastName"] == "Hopper"


def test_post_updates_existing_person(client):
    resp = client.post(f"{BASE}/", json={"Id": 2, "FirstName": "Janet", "LastName": "Doe", "Age": 24})
    assert resp.status_code == 200
    assert resp.json()["Id"] == 2
    assert client.get(f"{BASE}/2").json()["FirstName"] == "Janet"
    assert len(client.get(BASE).json()) == 3


def test_post_accepts_python_field_names(client):
    resp = client.post(BASE, json={"first_name": "Linus", "age": 30})
    assert resp.status_code == 200
    assert resp.json() == {"Id": 4, "FirstName": "Linus", "LastName": None, "Age": 30}


def test_invalid_body_is_rejected(client):
    resp = client.post(BASE, json={"Age": "old"})
    assert resp.status_code == 422
    assert len(client.store) == 3


def test_each_app_starts_from_seed():
    with TestClient(create_app()) as first:
        assert first.delete(f"{BASE}/1").status_code == 204
    with TestClient(create_app()) as second:
        assert [p["Id"] for p in second.get(BASE).json()] == [1, 2, 3]
