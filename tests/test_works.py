from datetime import date, timedelta

import pytest

from shelflife.core.errors import NotFound
from shelflife.models import WorkStatus, WorkType
from shelflife.schemas.work import WorkCreateUpdateRequest
from shelflife.services import works as work_service


def test_create_applies_defaults(client, auth_headers, create_work):
    work = create_work(auth_headers, title="Dune")
    assert work["type"] == "BOOK"
    assert work["status"] == "TO_EXPLORE"
    assert work["id"] > 0


def test_create_full_detail(client, auth_headers, create_work):
    work = create_work(
        auth_headers,
        title="Outer Wilds",
        type="GAME",
        creator="Mobius Digital",
        genre="Adventure",
        status="IN_PROGRESS",
        totalUnits=22,
        coverUrl="https://example.com/ow.png",
        startedAt="2024-03-01",
    )
    r = client.get(f"/api/works/{work['id']}", headers=auth_headers)
    assert r.status_code == 200
    body = r.json()
    assert body["type"] == "GAME"
    assert body["creator"] == "Mobius Digital"
    assert body["totalUnits"] == 22
    assert body["startedAt"] == "2024-03-01"
    assert body["finishedAt"] is None


def test_list_is_ordered_by_status_then_title(client, auth_headers, create_work):
    create_work(auth_headers, title="B", status="FINISHED")
    create_work(auth_headers, title="A", status="TO_EXPLORE")
    create_work(auth_headers, title="C", status="IN_PROGRESS")
    first = client.get("/api/works", headers=auth_headers).json()
    assert [(w["status"], w["title"]) for w in first] == [
        ("TO_EXPLORE", "A"),
        ("IN_PROGRESS", "C"),
        ("FINISHED", "B"),
    ]
    # idempotent
    assert client.get("/api/works", headers=auth_headers).json() == first


def test_title_order_is_case_insensitive(client, auth_headers, create_work):
    for title in ["banana", "Apple", "cherry"]:
        create_work(auth_headers, title=title)
    titles = [w["title"] for w in client.get("/api/works", headers=auth_headers).json()]
    assert titles == ["Apple", "banana", "cherry"]


def test_list_filters(client, auth_headers, create_work):
    create_work(auth_headers, title="Heat", type="MOVIE", status="FINISHED")
    create_work(auth_headers, title="Dune", type="BOOK", status="FINISHED")
    create_work(auth_headers, title="Emma", type="BOOK")
    r = client.get("/api/works", params={"status": "FINISHED", "type": "BOOK"}, headers=auth_headers)
    assert [w["title"] for w in r.json()] == ["Dune"]
    assert client.get("/api/works", params={"type": "VINYL"}, headers=auth_headers).status_code == 400


def test_list_works_service_filters(db, make_user):
    profile, _ = make_user()
    work_service.create_work(db, profile["id"], WorkCreateUpdateRequest(title="Heat", type="MOVIE"))
    work_service.create_work(db, profile["id"], WorkCreateUpdateRequest(title="Dune", status="IN_PROGRESS"))
    movies = work_service.list_works(db, profile["id"], work_type=WorkType.MOVIE)
    assert [w.title for w in movies] == ["Heat"]
    going = work_service.list_works(db, profile["id"], work_status=WorkStatus.IN_PROGRESS)
    assert [w.title for w in going] == ["Dune"]


def test_list_only_shows_own_works(client, make_user, create_work):
    _, alice = make_user()
    _, bob = make_user()
    create_work(alice, title="Mine")
    assert client.get("/api/works", headers=bob).json() == []


def test_update_replaces_fields(client, auth_headers, create_work):
    work = create_work(auth_headers, title="Dune", creator="Herbert", genre="SF", status="IN_PROGRESS")
    r = client.put(f"/api/works/{work['id']}", json={"title": "Dune Messiah"}, headers=auth_headers)
    assert r.status_code == 200
    body = r.json()
    assert body["title"] == "Dune Messiah"
    assert body["creator"] is None
    assert body["genre"] is None
    assert body["status"] == "TO_EXPLORE"


def test_update_refreshes_updated_at_only(db, make_user):
    profile, _ = make_user()
    created = work_service.create_work(db, profile["id"], WorkCreateUpdateRequest(title="X"))
    updated = work_service.update_work(db, profile["id"], created.id, WorkCreateUpdateRequest(title="Y"))
    assert updated.created_at == created.created_at
    assert updated.updated_at >= created.updated_at


def test_validation_errors(client, auth_headers):
    r = client.post("/api/works", json={"title": "   "}, headers=auth_headers)
    assert r.status_code == 400
    assert "title" in r.json()["errors"]
    r = client.post("/api/works", json={"title": "X", "totalUnits": 0}, headers=auth_headers)
    assert r.status_code == 400
    assert "totalUnits" in r.json()["errors"]
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    r = client.post("/api/works", json={"title": "X", "finishedAt": tomorrow}, headers=auth_headers)
    assert r.status_code == 400


def test_other_users_work_is_not_found(client, make_user, create_work):
    _, alice = make_user()
    _, bob = make_user()
    work = create_work(alice, title="Private")
    foreign = client.get(f"/api/works/{work['id']}", headers=bob)
    missing = client.get("/api/works/99999", headers=bob)
    assert foreign.status_code == missing.status_code == 404
    assert foreign.json()["message"] == missing.json()["message"]
    assert client.put(f"/api/works/{work['id']}", json={"title": "Hijack"}, headers=bob).status_code == 404
    assert client.delete(f"/api/works/{work['id']}", headers=bob).status_code == 404
    assert client.get(f"/api/works/{work['id']}", headers=alice).json()["title"] == "Private"


def test_delete_work(client, auth_headers, create_work):
    work = create_work(auth_headers)
    assert client.delete(f"/api/works/{work['id']}", headers=auth_headers).status_code == 204
    assert client.get(f"/api/works/{work['id']}", headers=auth_headers).status_code == 404


def test_create_for_unknown_user_is_not_found(db):
    with pytest.raises(NotFound):
        work_service.create_work(db, 12345, WorkCreateUpdateRequest(title="Orphan"))
