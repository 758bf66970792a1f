"""Tests for the generic CRUD router factories using minimal Gadget models."""

from __future__ import annotations

from datetime import datetime

import pytest
import sqlalchemy as sa
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import Field
from sqlalchemy import Integer, String, select
from sqlalchemy.orm import Mapped, Session, mapped_column, sessionmaker

from vibes_api.api.generic import (
    FilterField,
    PaginationStyle,
    ResourceDescriptor,
    RoutePaths,
    StatusFilter,
    create_crud_router,
)
from vibes_api.core.errors import register_exception_handlers
from vibes_api.db.base import AUTOINCREMENT_TABLE_ARGS, AuditedBase, Base
from vibes_api.db.session import get_db
from vibes_api.schemas.generic import (
    CamelAuditResponse,
    CreatePayload,
    PatchPayload,
    SnakeAuditResponse,
    UpdatePayload,
)


# --- Test models and schemas ---


class Gadget(AuditedBase):
    """Soft-deleting resource with body-addressed updates."""

    __tablename__ = "gadgets_router"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    gadget_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    name: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    shelf_id: Mapped[int | None] = mapped_column(Integer, default=None)


class GadgetCreate(CreatePayload):
    name: str = Field(min_length=1, max_length=128)
    shelf_id: int | None = None


class GadgetUpdate(UpdatePayload):
    name: str | None = Field(default=None, min_length=1, max_length=128)
    shelf_id: int | None = None


class GadgetResponse(SnakeAuditResponse):
    gadget_id: int
    name: str
    shelf_id: int | None = None


class Sprocket(AuditedBase):
    """Hard-deleting resource with path-addressed updates and classic paging."""

    __tablename__ = "sprockets_router"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    sprocket_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    label: Mapped[str | None] = mapped_column(String(64), default=None)


class SprocketCreate(CreatePayload):
    label: str | None = None


class SprocketUpdate(PatchPayload):
    label: str | None = None


class SprocketResponse(CamelAuditResponse):
    sprocket_id: int
    label: str | None = None


GADGETS = ResourceDescriptor(
    name="Gadget",
    label="Gadget",
    plural_label="Gadgets",
    prefix="/gadgets",
    model=Gadget,
    id_field="gadget_id",
    response_schema=GadgetResponse,
    create_schema=GadgetCreate,
    update_schema=GadgetUpdate,
    search_columns=("name",),
    filter_fields=(FilterField("shelf_id"),),
    status_filter=StatusFilter.PARSED,
    paths=RoutePaths(owned="/mine"),
)

SPROCKETS = ResourceDescriptor(
    name="Sprocket",
    label="Sprocket",
    plural_label="Sprockets",
    prefix="/sprockets",
    model=Sprocket,
    id_field="sprocket_id",
    response_schema=SprocketResponse,
    create_schema=SprocketCreate,
    update_schema=SprocketUpdate,
    status_filter=StatusFilter.IGNORED,
    soft_delete=False,
    pagination_style=PaginationStyle.CLASSIC,
    anonymous_create=True,
    default_creator=1,
    public_reads=True,
    update_id_in_path=True,
    paths=RoutePaths(update="/update/{item_id}"),
)


# --- Fixtures ---


@pytest.fixture
def gadget_engine():
    engine = sa.create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=sa.pool.StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def gadget_session(gadget_engine) -> Session:
    session = Session(gadget_engine)
    yield session
    session.close()


@pytest.fixture
def gadget_app(gadget_engine, gadget_session: Session) -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)
    app.state.db_engine = gadget_engine
    app.state.db_session_factory = sessionmaker(bind=gadget_engine)

    def override_get_db():
        yield gadget_session

    app.dependency_overrides[get_db] = override_get_db
    app.include_router(create_crud_router(GADGETS))
    app.include_router(create_crud_router(SPROCKETS))
    return app


@pytest.fixture
def gadget_client(gadget_app: FastAPI) -> TestClient:
    return TestClient(gadget_app)


@pytest.fixture
def headers(auth_headers) -> dict[str, str]:
    return auth_headers(7)


def _create_gadget(client: TestClient, headers: dict, **kwargs) -> dict:
    """Helper to create a gadget and return the record JSON."""
    payload = {"name": "gadget", **kwargs}
    resp = client.post("/gadgets/create", json=payload, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


# --- Create ---


class TestGenericCreate:
    def test_create_returns_envelope(self, gadget_client: TestClient, headers) -> None:
        resp = gadget_client.post(
            "/gadgets/create", json={"name": "sprinkler"}, headers=headers
        )
        assert resp.status_code == 201
        body = resp.json()
        assert body["status"] == 201
        assert body["message"] == "Gadget created successfully"
        data = body["data"]
        assert data["gadget_id"] == 1
        assert data["name"] == "sprinkler"
        assert data["status"] is True
        assert data["created_by"] == 7
        assert data["updated_by"] is None
        assert data["created_at"]
        assert data["updated_at"]

    def test_ids_increase_monotonically(self, gadget_client: TestClient, headers) -> None:
        first = _create_gadget(gadget_client, headers, name="a")
        second = _create_gadget(gadget_client, headers, name="b")
        assert second["gadget_id"] > first["gadget_id"]

    def test_create_requires_token(self, gadget_client: TestClient) -> None:
        resp = gadget_client.post("/gadgets/create", json={"name": "x"})
        assert resp.status_code == 401
        assert resp.json() == {"status": 401, "message": "Access token is required"}

    def test_invalid_token_rejected(self, gadget_client: TestClient) -> None:
        resp = gadget_client.post(
            "/gadgets/create",
            json={"name": "x"},
            headers={"Authorization": "Bearer not-a-jwt"},
        )
        assert resp.status_code == 401
        assert resp.json()["message"] == "Invalid or expired token"

    def test_missing_required_field_is_400(self, gadget_client: TestClient, headers) -> None:
        resp = gadget_client.post("/gadgets/create", json={}, headers=headers)
        assert resp.status_code == 400
        body = resp.json()
        assert body["message"] == "Validation failed"
        assert body["errors"][0]["field"] == "name"

    def test_unknown_fields_ignored(self, gadget_client: TestClient, headers) -> None:
        data = _create_gadget(gadget_client, headers, name="n", created_by=99)
        assert data["created_by"] == 7

    def test_uniqueness_violation_is_400(self, gadget_client: TestClient, headers) -> None:
        _create_gadget(gadget_client, headers, name="dup")
        resp = gadget_client.post("/gadgets/create", json={"name": "dup"}, headers=headers)
        assert resp.status_code == 400
        assert resp.json()["message"] == "Record conflicts with an existing entry"

    def test_anonymous_create_uses_default_creator(self, gadget_client: TestClient) -> None:
        resp = gadget_client.post("/sprockets/create", json={"label": "s"})
        assert resp.status_code == 201
        assert resp.json()["data"]["createdBy"] == 1

    def test_anonymous_resource_still_records_requester(
        self, gadget_client: TestClient, headers
    ) -> None:
        resp = gadget_client.post("/sprockets/create", json={"label": "s"}, headers=headers)
        assert resp.json()["data"]["createdBy"] == 7


# --- List ---


class TestGenericList:
    def test_empty_list(self, gadget_client: TestClient, headers) -> None:
        resp = gadget_client.get("/gadgets/getAll", headers=headers)
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Gadgets retrieved successfully"
        assert body["data"] == []
        assert body["pagination"] == {
            "currentPage": 1,
            "totalPages": 0,
            "totalItems": 0,
            "itemsPerPage": 10,
            "hasNextPage": False,
            "hasPrevPage": False,
        }

    def test_pages(self, gadget_client: TestClient, headers) -> None:
        for i in range(5):
            _create_gadget(gadget_client, headers, name=f"g-{i}")

        resp = gadget_client.get(
            "/gadgets/getAll", params={"page": 2, "limit": 2}, headers=headers
        )
        body = resp.json()
        assert len(body["data"]) == 2
        assert body["pagination"]["totalPages"] == 3
        assert body["pagination"]["hasNextPage"] is True
        assert body["pagination"]["hasPrevPage"] is True

    def test_last_page_has_no_next(self, gadget_client: TestClient, headers) -> None:
        for i in range(4):
            _create_gadget(gadget_client, headers, name=f"g-{i}")

        resp = gadget_client.get(
            "/gadgets/getAll", params={"page": 2, "limit": 2}, headers=headers
        )
        assert resp.json()["pagination"]["hasNextPage"] is False

    def test_page_beyond_last_is_empty(self, gadget_client: TestClient, headers) -> None:
        _create_gadget(gadget_client, headers)
        resp = gadget_client.get("/gadgets/getAll", params={"page": 9}, headers=headers)
        assert resp.status_code == 200
        assert resp.json()["data"] == []
        assert resp.json()["pagination"]["totalItems"] == 1

    def test_huge_page_is_empty_not_an_error(
        self, gadget_client: TestClient, headers
    ) -> None:
        _create_gadget(gadget_client, headers)
        resp = gadget_client.get(
            "/gadgets/getAll", params={"page": 10**17, "limit": 100}, headers=headers
        )
        assert resp.status_code == 200
        assert resp.json()["data"] == []
        assert resp.json()["pagination"]["hasNextPage"] is False
        assert resp.json()["pagination"]["hasPrevPage"] is True

    @pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"limit": 101}])
    def test_bad_paging_is_400(self, gadget_client: TestClient, headers, params) -> None:
        resp = gadget_client.get("/gadgets/getAll", params=params, headers=headers)
        assert resp.status_code == 400

    def test_default_order_is_newest_first(self, gadget_client: TestClient, headers) -> None:
        for name in ("first", "second", "third"):
            _create_gadget(gadget_client, headers, name=name)

        resp = gadget_client.get("/gadgets/getAll", headers=headers)
        assert [g["name"] for g in resp.json()["data"]] == ["third", "second", "first"]

    def test_sort_ascending_by_name(self, gadget_client: TestClient, headers) -> None:
        for name in ("b", "c", "a"):
            _create_gadget(gadget_client, headers, name=name)

        resp = gadget_client.get(
            "/gadgets/getAll", params={"sortBy": "name", "sortOrder": "asc"}, headers=headers
        )
        assert [g["name"] for g in resp.json()["data"]] == ["a", "b", "c"]

    def test_unknown_sort_field_is_400(self, gadget_client: TestClient, headers) -> None:
        resp = gadget_client.get("/gadgets/getAll", params={"sortBy": "nope"}, headers=headers)
        assert resp.status_code == 400
        assert resp.json()["message"] == "Cannot sort by 'nope'"

    def test_search_and_scoping(self, gadget_client: TestClient, headers) -> None:
        _create_gadget(gadget_client, headers, name="blue lamp", shelf_id=1)
        _create_gadget(gadget_client, headers, name="blue vase", shelf_id=2)
        _create_gadget(gadget_client, headers, name="red lamp", shelf_id=1)

        resp = gadget_client.get(
            "/gadgets/getAll", params={"search": "BLUE", "shelf_id": 1}, headers=headers
        )
        assert [g["name"] for g in resp.json()["data"]] == ["blue lamp"]

    def test_list_requires_token(self, gadget_client: TestClient) -> None:
        assert gadget_client.get("/gadgets/getAll").status_code == 401

    def test_owned_list(self, gadget_client: TestClient, auth_headers) -> None:
        _create_gadget(gadget_client, auth_headers(7), name="mine")
        _create_gadget(gadget_client, auth_headers(8), name="theirs")

        resp = gadget_client.get("/gadgets/mine", headers=auth_headers(7))
        body = resp.json()
        assert body["message"] == "User gadgets retrieved successfully"
        assert [g["name"] for g in body["data"]] == ["mine"]

    def test_classic_pagination_keys(self, gadget_client: TestClient) -> None:
        for i in range(3):
            gadget_client.post("/sprockets/create", json={"label": f"s{i}"})

        resp = gadget_client.get("/sprockets/getAll", params={"limit": 2})
        assert resp.status_code == 200
        assert resp.json()["pagination"] == {"current": 1, "pages": 2, "total": 3, "limit": 2}


# --- Get by id ---


class TestGenericGet:
    def test_get_existing(self, gadget_client: TestClient, headers) -> None:
        created = _create_gadget(gadget_client, headers, name="x")
        resp = gadget_client.get(f"/gadgets/getById/{created['gadget_id']}", headers=headers)
        assert resp.status_code == 200
        assert resp.json()["message"] == "Gadget retrieved successfully"
        assert resp.json()["data"]["name"] == "x"

    def test_get_missing(self, gadget_client: TestClient, headers) -> None:
        resp = gadget_client.get("/gadgets/getById/99", headers=headers)
        assert resp.status_code == 404
        assert resp.json() == {"status": 404, "message": "Gadget not found", "data": {}}

    def test_non_numeric_id_is_400(self, gadget_client: TestClient, headers) -> None:
        resp = gadget_client.get("/gadgets/getById/abc", headers=headers)
        assert resp.status_code == 400


# --- Update ---


class TestGenericUpdate:
    def test_partial_update(self, gadget_client: TestClient, auth_headers) -> None:
        created = _create_gadget(gadget_client, auth_headers(7), name="old", shelf_id=3)
        resp = gadget_client.put(
            "/gadgets/update",
            json={"id": created["gadget_id"], "name": "new"},
            headers=auth_headers(9),
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Gadget updated successfully"
        data = body["data"]
        assert data["name"] == "new"
        assert data["shelf_id"] == 3
        assert data["created_by"] == 7
        assert data["updated_by"] == 9
        updated_at = datetime.fromisoformat(data["updated_at"]).replace(tzinfo=None)
        created_at = datetime.fromisoformat(created["updated_at"]).replace(tzinfo=None)
        assert updated_at >= created_at

    def test_update_missing_leaves_store_unchanged(
        self, gadget_client: TestClient, gadget_session: Session, headers
    ) -> None:
        _create_gadget(gadget_client, headers, name="keep")
        resp = gadget_client.put(
            "/gadgets/update", json={"id": 42, "name": "changed"}, headers=headers
        )
        assert resp.status_code == 404
        assert resp.json()["message"] == "Gadget not found"
        names = gadget_session.execute(select(Gadget.name)).scalars().all()
        assert names == ["keep"]

    def test_update_without_changes_is_400(self, gadget_client: TestClient, headers) -> None:
        created = _create_gadget(gadget_client, headers)
        resp = gadget_client.put(
            "/gadgets/update", json={"id": created["gadget_id"]}, headers=headers
        )
        assert resp.status_code == 400

    def test_update_null_status_is_400(self, gadget_client: TestClient, headers) -> None:
        created = _create_gadget(gadget_client, headers)
        resp = gadget_client.put(
            "/gadgets/update",
            json={"id": created["gadget_id"], "status": None},
            headers=headers,
        )
        assert resp.status_code == 400

    def test_update_requires_token(self, gadget_client: TestClient) -> None:
        resp = gadget_client.put("/gadgets/update", json={"id": 1, "name": "x"})
        assert resp.status_code == 401

    def test_update_by_path(self, gadget_client: TestClient, headers) -> None:
        created = gadget_client.post("/sprockets/create", json={"label": "a"}).json()["data"]
        resp = gadget_client.put(
            f"/sprockets/update/{created['sprocket_id']}", json={"label": "b"}, headers=headers
        )
        assert resp.status_code == 200
        assert resp.json()["data"]["label"] == "b"
        assert resp.json()["data"]["updatedBy"] == 7


# --- Delete ---


class TestGenericDelete:
    def test_soft_delete_flips_status(
        self, gadget_client: TestClient, gadget_session: Session, headers
    ) -> None:
        created = _create_gadget(gadget_client, headers)
        resp = gadget_client.delete(f"/gadgets/delete/{created['gadget_id']}", headers=headers)
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Gadget deleted successfully"
        assert body["data"]["status"] is False
        assert body["data"]["updated_by"] == 7

        # Record is retained; the total count is unchanged.
        total = gadget_session.execute(select(sa.func.count()).select_from(Gadget)).scalar()
        assert total == 1

    def test_soft_deleted_filtered_by_status(self, gadget_client: TestClient, headers) -> None:
        kept = _create_gadget(gadget_client, headers, name="kept")
        gone = _create_gadget(gadget_client, headers, name="gone")
        gadget_client.delete(f"/gadgets/delete/{gone['gadget_id']}", headers=headers)

        resp = gadget_client.get("/gadgets/getAll", params={"status": "true"}, headers=headers)
        assert [g["gadget_id"] for g in resp.json()["data"]] == [kept["gadget_id"]]

    def test_hard_delete_removes_row(
        self, gadget_client: TestClient, gadget_session: Session, headers
    ) -> None:
        created = gadget_client.post("/sprockets/create", json={"label": "a"}).json()["data"]
        resp = gadget_client.delete(
            f"/sprockets/delete/{created['sprocket_id']}", headers=headers
        )
        assert resp.status_code == 200
        assert resp.json() == {
            "status": 200,
            "message": "Sprocket deleted successfully",
            "data": None,
        }
        assert gadget_session.execute(select(Sprocket)).first() is None

    def test_delete_missing_is_404(self, gadget_client: TestClient, headers) -> None:
        resp = gadget_client.delete("/gadgets/delete/5", headers=headers)
        assert resp.status_code == 404
        assert resp.json()["message"] == "Gadget not found"

    def test_hard_delete_ids_not_reused(self, gadget_client: TestClient, headers) -> None:
        first = gadget_client.post("/sprockets/create", json={}).json()["data"]
        gadget_client.delete(f"/sprockets/delete/{first['sprocket_id']}", headers=headers)
        second = gadget_client.post("/sprockets/create", json={}).json()["data"]
        assert second["sprocket_id"] > first["sprocket_id"]
