"""
Tests for the HTTP API.
"""

from fastapi.testclient import TestClient

from conftest import make_roster
from lineup_app.main import app
from lineup_app.core.config import DEFAULT_ROSTER, INNINGS

client = TestClient(app)


def roster_json(size, eligible=()):
    return [
        {"id": p.id, "name": p.name, "can_play_first": p.can_play_first}
        for p in make_roster(size, eligible)
    ]


def test_root_and_health():
    assert client.get("/").json()["endpoints"]["lineup"] == "/api/lineup"
    assert client.get("/api/health").json()["status"] == "healthy"


def test_config():
    data = client.get("/api/config").json()

    assert data["innings"] == INNINGS
    assert data["field_spots"] == 10
    assert data["zones"]["outfield"] == ["LF", "LC", "RC", "RF"]
    assert data["restricted_position"] == "1B"


def test_generate_lineup():
    response = client.post("/api/lineup", json={"players": DEFAULT_ROSTER})
    assert response.status_code == 200

    data = response.json()
    assert data["success"] is True
    assert len(data["innings"]) == INNINGS
    assert data["validation"]["is_valid"] is True

    eligible = {row["id"] for row in DEFAULT_ROSTER if row["can_play_first"]}
    for inning in data["innings"]:
        assignments = inning["assignments"]
        assert list(assignments.values()).count("BENCH") == 3
        first_base = [pid for pid, pos in assignments.items() if pos == "1B"]
        assert first_base and first_base[0] in eligible

    for entry in data["summary"]:
        assert entry["played"] + entry["bench"] == INNINGS


def test_generate_lineup_integer_ids():
    players = [{"id": i, "name": f"Player {i}"} for i in range(10)]
    response = client.post("/api/lineup", json={"players": players})

    assert response.status_code == 200
    assert set(response.json()["innings"][0]["assignments"].keys()) == {str(i) for i in range(10)}


def test_roster_too_small():
    response = client.post("/api/lineup", json={"players": roster_json(9)})

    assert response.status_code == 400
    assert "at least 10" in response.json()["detail"]


def test_duplicate_ids_rejected():
    players = roster_json(10)
    players[1]["id"] = players[0]["id"]

    response = client.post("/api/lineup", json={"players": players})

    assert response.status_code == 422


def test_ids_equal_as_strings_rejected():
    """An int id and the same id as a string collide once stringified."""
    players = [{"id": i, "name": f"Player {i}"} for i in range(10)]
    players.append({"id": "1", "name": "Shadow"})

    response = client.post("/api/lineup", json={"players": players})

    assert response.status_code == 422
    assert "Duplicate player id" in response.text


def test_batting_order():
    players = roster_json(13)
    response = client.post("/api/batting-order", json={"players": players})

    assert response.status_code == 200
    order = response.json()["players"]
    assert sorted(p["id"] for p in order) == sorted(p["id"] for p in players)


def test_roster_import():
    response = client.post("/api/roster/import", json={"text": "Alex\n\n Bailey \nCameron"})

    assert response.status_code == 200
    data = response.json()
    assert [p["name"] for p in data["players"]] == ["Alex", "Bailey", "Cameron"]
    assert data["count"] == 3
    assert data["ready"] is False


def test_roster_import_empty():
    response = client.post("/api/roster/import", json={"text": "\n\n"})

    assert response.status_code == 400
