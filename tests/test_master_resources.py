"""Categories, tickets and the priced catalogue entries."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


def _post(client: TestClient, path: str, payload: dict, headers: dict | None = None) -> dict:
    resp = client.post(path, json=payload, headers=headers or {})
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


class TestCategories:
    def test_anonymous_create_falls_back_to_default_creator(self, client: TestClient) -> None:
        data = _post(client, "/api/master/category/create", {"category_name": "Weddings"})
        assert data["category_id"] == 1
        assert data["created_by"] == 1

    def test_presence_status_filter(self, client: TestClient, auth_headers) -> None:
        headers = auth_headers(7)
        active = _post(client, "/api/master/category/create", {"category_name": "a"}, headers)
        deleted = _post(client, "/api/master/category/create", {"category_name": "b"}, headers)
        client.delete(f"/api/master/category/delete/{deleted['category_id']}", headers=headers)

        # Any status value restricts the listing to active categories.
        resp = client.get(
            "/api/master/category/getAll", params={"status": "false"}, headers=headers
        )
        assert [c["category_id"] for c in resp.json()["data"]] == [active["category_id"]]

        resp = client.get("/api/master/category/getAll", headers=headers)
        assert resp.json()["pagination"]["totalItems"] == 2

    def test_get_by_auth(self, client: TestClient, auth_headers) -> None:
        _post(client, "/api/master/category/create", {"category_name": "mine"}, auth_headers(5))
        _post(client, "/api/master/category/create", {"category_name": "other"}, auth_headers(6))

        resp = client.get("/api/master/category/getByAuth", headers=auth_headers(5))
        body = resp.json()
        assert body["message"] == "User categories retrieved successfully"
        assert [c["category_name"] for c in body["data"]] == ["mine"]

    def test_soft_delete_returns_record(self, client: TestClient, auth_headers) -> None:
        headers = auth_headers(7)
        created = _post(client, "/api/master/category/create", {"category_name": "x"}, headers)

        resp = client.delete(
            f"/api/master/category/delete/{created['category_id']}", headers=headers
        )
        body = resp.json()
        assert body["message"] == "Category deleted successfully"
        assert body["data"]["status"] is False
        assert body["data"]["updated_by"] == 7

        resp = client.get(
            f"/api/master/category/getById/{created['category_id']}", headers=headers
        )
        assert resp.status_code == 200

    def test_update_rejects_null_name(self, client: TestClient, auth_headers) -> None:
        headers = auth_headers(7)
        created = _post(client, "/api/master/category/create", {"category_name": "x"}, headers)
        resp = client.put(
            "/api/master/category/update",
            json={"id": created["category_id"], "category_name": None},
            headers=headers,
        )
        assert resp.status_code == 400


class TestTickets:
    def test_ticket_routes(self, client: TestClient, auth_headers) -> None:
        headers = auth_headers(3)
        created = _post(
            client,
            "/api/master/tickets/create",
            {
                "event_id": 10,
                "ticket_type_id": 2,
                "max_capacity": 50,
                "ticket_details": [{"ticket_type_id": 2, "price": 25.5}],
                "ticket_query": "Is parking included?",
            },
            headers,
        )
        assert created["ticket_details"] == [{"ticket_type_id": 2, "price": 25.5}]
        assert created["reply"] == ""
        ticket_id = created["ticket_id"]

        resp = client.get(f"/api/master/tickets/getTicketById/{ticket_id}", headers=headers)
        assert resp.json()["data"]["max_capacity"] == 50

        resp = client.put(
            "/api/master/tickets/updateTicketById",
            json={"id": ticket_id, "reply": "Yes, parking is free"},
            headers=headers,
        )
        assert resp.json()["data"]["reply"] == "Yes, parking is free"

        resp = client.get(
            "/api/master/tickets/getAll", params={"search": "parking"}, headers=headers
        )
        assert resp.json()["pagination"]["totalItems"] == 1

        resp = client.get("/api/master/tickets/getTicketByAuth", headers=auth_headers(4))
        assert resp.json()["data"] == []

        resp = client.delete(f"/api/master/tickets/deleteTicketById/{ticket_id}", headers=headers)
        assert resp.json()["data"]["status"] is False

    def test_ticket_detail_price_validated(self, client: TestClient, auth_headers) -> None:
        resp = client.post(
            "/api/master/tickets/create",
            json={"ticket_details": [{"ticket_type_id": 1, "price": -5}]},
            headers=auth_headers(3),
        )
        assert resp.status_code == 400

    def test_default_paths_absent(self, client: TestClient, auth_headers) -> None:
        resp = client.get("/api/master/tickets/getById/1", headers=auth_headers(3))
        assert resp.status_code == 404
        assert resp.json()["message"] == "Not Found"


class TestTicketTypes:
    def test_create_requires_token(self, client: TestClient) -> None:
        resp = client.post("/api/master/ticket-types/create", json={"ticket_type": "VIP"})
        assert resp.status_code == 401

    def test_search(self, client: TestClient, auth_headers) -> None:
        headers = auth_headers(1)
        _post(client, "/api/master/ticket-types/create", {"ticket_type": "VIP"}, headers)
        _post(client, "/api/master/ticket-types/create", {"ticket_type": "Standard"}, headers)

        resp = client.get(
            "/api/master/ticket-types/getAll", params={"search": "vi"}, headers=headers
        )
        assert [t["ticket_type"] for t in resp.json()["data"]] == ["VIP"]


@pytest.mark.parametrize(
    ("prefix", "payload", "search", "id_field"),
    [
        (
            "/api/master/food",
            {"food_name": "Paneer Tikka", "food_price": 12, "food_type": "Veg"},
            "veg",
            "food_id",
        ),
        (
            "/api/master/drinks",
            {"drinks_name": "Mojito", "drinks_price": 8, "brand_name": "Bacardi"},
            "bacardi",
            "drinks_id",
        ),
        (
            "/api/master/decorations",
            {"decorations_name": "Balloons", "decorations_price": 3, "decorations_type": "Party"},
            "party",
            "decorations_id",
        ),
        (
            "/api/master/entertainment",
            {"entertainment_name": "DJ", "entertainment_price": 300, "entertainment_type": "Music"},
            "music",
            "entertainment_id",
        ),
        ("/api/master/event-theme", {"event_theme_name": "Retro"}, "retr", "event_theme_id"),
        ("/api/master/dress-code", {"dress_code_name": "Black tie"}, "black", "dress_code_id"),
    ],
)
def test_catalogue_resources(
    client: TestClient, auth_headers, prefix: str, payload: dict, search: str, id_field: str
) -> None:
    headers = auth_headers(2)
    created = _post(client, f"{prefix}/create", payload, headers)
    assert created[id_field] == 1
    assert created["created_by"] == 2

    resp = client.get(f"{prefix}/getAll", params={"search": search}, headers=headers)
    assert resp.json()["pagination"]["totalItems"] == 1

    resp = client.delete(f"{prefix}/delete/{created[id_field]}", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["status"] is False


def test_catalogue_price_must_not_be_negative(client: TestClient, auth_headers) -> None:
    resp = client.post(
        "/api/master/food/create",
        json={"food_name": "Soup", "food_price": -1},
        headers=auth_headers(2),
    )
    assert resp.status_code == 400
