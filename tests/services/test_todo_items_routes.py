"""Todo Item Routes — HTTP contract of /api/v1/todo-items over a test database.

Tests cover:
    - POST creates (201) with repository-allocated ids; invalid category → 400
    - PUT/DELETE honor the > 50% lockout (409) and report missing items (404)
    - progression rules surface as 400 INVALID_PROGRESSION with the failing rule
    - malformed bodies → 400 VALIDATION_ERROR envelope
    - GET lists ascending by id; /report renders text; /categories lists settings
"""

from datetime import datetime, timezone
from decimal import Decimal

from todolist.models.progression import ProgressionModel
from todolist.models.todo_item import TodoItemModel

BASE = "/api/v1/todo-items"


async def _create(client, title="Learn X", category="Work") -> dict:
    res = await client.post(BASE, json={
        "title": title, "description": "desc", "category": category,
    })
    assert res.status_code == 201
    return res.json()


async def _progress(client, item_id, date, percent):
    return await client.post(
        f"{BASE}/{item_id}/progressions",
        json={"date": f"{date}T00:00:00Z", "percent": percent},
    )


# ─── Create ──────────────────────────────────────────────────────

async def test_create_item(client):
    body = await _create(client)
    assert body["id"] == 1
    assert body["title"] == "Learn X"
    assert body["is_completed"] is False
    assert Decimal(body["total_progress"]) == 0
    assert body["progressions"] == []


async def test_create_allocates_sequential_ids(client):
    first = await _create(client)
    second = await _create(client, title="Other")
    assert (first["id"], second["id"]) == (1, 2)


async def test_create_invalid_category_returns_400(client):
    res = await client.post(BASE, json={
        "title": "t", "description": "d", "category": "Bogus",
    })
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_CATEGORY"
    assert res.json()["error"]["context"]["details"] == {"category": "Bogus"}


async def test_create_category_case_insensitive(client):
    body = await _create(client, category="work")
    assert body["category"] == "work"


async def test_create_missing_title_returns_validation_error(client):
    res = await client.post(BASE, json={"description": "d", "category": "Work"})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any(d["field"].endswith("title") for d in error["details"])


# ─── Update / Delete ─────────────────────────────────────────────

async def test_update_description(client):
    item = await _create(client)
    res = await client.put(f"{BASE}/{item['id']}", json={"description": "new"})
    assert res.status_code == 200
    assert res.json()["description"] == "new"


async def test_update_missing_item_returns_404(client):
    res = await client.put(f"{BASE}/99", json={"description": "new"})
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "ITEM_NOT_FOUND"


async def test_delete_item_returns_204(client):
    item = await _create(client)
    res = await client.delete(f"{BASE}/{item['id']}")
    assert res.status_code == 204
    assert (await client.get(f"{BASE}/{item['id']}")).status_code == 404


async def test_delete_missing_item_returns_404(client):
    res = await client.delete(f"{BASE}/99")
    assert res.status_code == 404


async def test_exactly_fifty_percent_still_modifiable(client):
    item = await _create(client)
    await _progress(client, item["id"], "2024-01-01", "50")
    res = await client.put(f"{BASE}/{item['id']}", json={"description": "ok"})
    assert res.status_code == 200


async def test_locked_item_returns_409(client):
    item = await _create(client)
    await _progress(client, item["id"], "2024-01-01", "50.01")

    res = await client.put(f"{BASE}/{item['id']}", json={"description": "x"})
    assert res.status_code == 409
    error = res.json()["error"]
    assert error["code"] == "CANNOT_MODIFY"
    assert error["context"]["details"] == {"current_progress": "50.01"}

    res = await client.delete(f"{BASE}/{item['id']}")
    assert res.status_code == 409


# ─── Progressions ────────────────────────────────────────────────

async def test_register_progressions(client):
    item = await _create(client)
    await _progress(client, item["id"], "2024-01-01", "30")
    res = await _progress(client, item["id"], "2024-01-02", "70")
    assert res.status_code == 201
    body = res.json()
    assert Decimal(body["total_progress"]) == 100
    assert body["is_completed"] is True
    assert [Decimal(p["percent"]) for p in body["progressions"]] == [30, 70]
    assert body["last_progression_date"].startswith("2024-01-02T00:00:00")


async def test_progression_out_of_bounds_returns_400(client):
    item = await _create(client)
    res = await _progress(client, item["id"], "2024-01-01", "100")
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "INVALID_PROGRESSION"
    assert error["context"]["details"] == {"rule": "percent_bounds"}
    assert error["message"] == "Percent must be less than 100."


async def test_progression_out_of_order_returns_400(client):
    item = await _create(client)
    await _progress(client, item["id"], "2024-01-05", "10")
    res = await _progress(client, item["id"], "2024-01-05", "10")
    assert res.status_code == 400
    assert res.json()["error"]["context"]["details"] == {"rule": "chronological_order"}


async def test_progression_over_ceiling_returns_400(client):
    item = await _create(client)
    await _progress(client, item["id"], "2024-01-01", "60")
    res = await _progress(client, item["id"], "2024-01-02", "41")
    assert res.status_code == 400
    assert res.json()["error"]["context"]["details"] == {"rule": "progress_ceiling"}
    listed = (await client.get(BASE)).json()["items"][0]
    assert Decimal(listed["total_progress"]) == 60


async def test_progression_on_missing_item_returns_404(client):
    res = await _progress(client, 99, "2024-01-01", "10")
    assert res.status_code == 404


async def test_progression_bad_percent_returns_validation_error(client):
    item = await _create(client)
    res = await _progress(client, item["id"], "2024-01-01", "ten")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


# ─── Queries ─────────────────────────────────────────────────────

async def test_list_items_ascending(client):
    for title in ("A", "B", "C"):
        await _create(client, title=title)
    await client.delete(f"{BASE}/2")
    items = (await client.get(BASE)).json()["items"]
    assert [i["id"] for i in items] == [1, 3]


async def test_get_single_item(client):
    item = await _create(client)
    res = await client.get(f"{BASE}/{item['id']}")
    assert res.status_code == 200
    assert res.json()["title"] == "Learn X"


async def test_report_plain_text(client):
    item = await _create(client)
    await _progress(client, item["id"], "2024-01-01", "30")
    res = await client.get(f"{BASE}/report")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/plain")
    lines = res.text.split("\n")
    assert lines[0] == "1) Learn X - desc (Work) Completed:False"
    assert lines[1].startswith("2024-01-01 - 30")
    assert lines[1].endswith("|" + "O" * 15 + " " * 35 + "|")


async def test_categories(client):
    res = await client.get(f"{BASE}/categories")
    assert res.status_code == 200
    assert res.json()["categories"] == sorted(
        ["Work", "Personal", "Education", "Health", "Finance", "Other"],
    )


# ─── Stored state ────────────────────────────────────────────────

async def test_corrupt_stored_progressions_return_500(client, test_db):
    row = TodoItemModel(id=1, title="t", description="d", category="Work")
    row.progressions = [
        ProgressionModel(date=datetime(2024, 1, 1, tzinfo=timezone.utc), percent=Decimal("80")),
        ProgressionModel(date=datetime(2024, 1, 2, tzinfo=timezone.utc), percent=Decimal("30")),
    ]
    test_db.add(row)
    await test_db.commit()

    res = await client.get(BASE)
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "STORED_STATE_INVALID"
