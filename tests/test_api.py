"""Tests for the tracker HTTP API."""

from fastapi.testclient import TestClient

from food_tracker.services.tracker import TrackerService
from tests.conftest import RecordingKeyValueStore


def _fill(client: TestClient, **fields: str) -> None:
    for field, value in fields.items():
        response = client.post("/api/fields", json={"field": field, "value": value})
        assert response.status_code == 200


def _add_rice(client: TestClient) -> dict:
    _fill(client, name="Rice", amount="150", caloriesPerGm="1.3", proteinsPerGm="0.027")
    response = client.post("/api/entries")
    assert response.status_code == 200
    return response.json()


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_page_serves_html(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert "Nutrition Tracker" in response.text
    assert "/api/state" in response.text


def test_page_escapes_quotes_in_food_names(client: TestClient) -> None:
    page = client.get("/").text

    assert "'\"': '&quot;'" in page
    assert "\"'\": '&#39;'" in page
    assert "innerHTML;\n" not in page


def test_page_sends_requests_in_order(client: TestClient) -> None:
    page = client.get("/").text

    assert "pending = pending.catch(() => null).then(" in page
    assert page.count("fetch(") == 1


def test_initial_state(client: TestClient) -> None:
    data = client.get("/api/state").json()

    assert data["show_list"] is False
    assert data["submit_label"] == "Add Entry"
    assert data["fields"]["calorieReq"] == "2000"
    assert len(data["charts"]) == 2


def test_add_entry(client: TestClient, key_value_store: RecordingKeyValueStore) -> None:
    data = _add_rice(client)

    assert data["show_list"] is True
    assert data["rows"][0]["name"] == "Rice"
    assert data["rows"][0]["total_calories"] == "195.00"
    assert data["fields"]["name"] == ""
    assert data["charts"][0]["upper_bound"] == 2000
    assert "foods" in key_value_store.values


def test_incomplete_submission_is_ignored(client: TestClient) -> None:
    _fill(client, name="Rice", amount="150")

    data = client.post("/api/entries").json()

    assert data["rows"] == []
    assert data["fields"]["name"] == "Rice"
    assert data["fields"]["amount"] == "150"


def test_invalid_number_renders_nan(client: TestClient) -> None:
    _fill(client, name="Mystery", amount="abc", caloriesPerGm="2", proteinsPerGm="0.1")

    data = client.post("/api/entries").json()

    assert data["rows"][0]["total_calories"] == "NaN"
    assert data["charts"][0]["upper_bound"] is None
    assert data["charts"][0]["segments"][0]["value"] is None


def test_edit_and_update(client: TestClient, tracker: TrackerService) -> None:
    _add_rice(client)
    entry_id = tracker.state.foods[0].id

    editing = client.post("/api/entries/0/edit").json()
    assert editing["submit_label"] == "Update Entry"
    assert editing["fields"]["amount"] == "150"

    _fill(client, amount="300")
    data = client.post("/api/entries").json()

    assert data["submit_label"] == "Add Entry"
    assert len(data["rows"]) == 1
    assert data["rows"][0]["total_calories"] == "390.00"
    assert data["rows"][0]["id"] == str(entry_id)


def test_edit_missing_entry_returns_404(client: TestClient) -> None:
    assert client.post("/api/entries/3/edit").status_code == 404


def test_unknown_field_returns_400(client: TestClient) -> None:
    response = client.post("/api/fields", json={"field": "fat", "value": "1"})

    assert response.status_code == 400


def test_reset_clears_form(client: TestClient) -> None:
    _add_rice(client)
    client.post("/api/entries/0/edit")

    data = client.post("/api/form/reset").json()

    assert data["mode"] == "idle"
    assert data["fields"]["name"] == ""
    assert len(data["rows"]) == 1


def test_clear_all(client: TestClient, key_value_store: RecordingKeyValueStore) -> None:
    _add_rice(client)

    data = client.delete("/api/entries").json()

    assert data["show_list"] is False
    assert "foods" not in key_value_store.values


def test_chart_endpoint(client: TestClient) -> None:
    _add_rice(client)
    _fill(client, calorieReq="100")

    data = client.get("/api/charts/calories").json()

    assert data["requirement"] == 100
    assert data["upper_bound"] == 195
    assert data["segments"][0]["width_percent"] == 100.0
    assert client.get("/api/charts/fat").status_code == 404
