"""People routes: HTTP contract of the five CRUD endpoints.

Invariants:
    - Validation failures are 400 {"message": ...}, first failing field wins
    - POST returns the created person; PUT/DELETE return affected row counts
    - GET by unknown id is 200 null; PUT/DELETE on unknown id are 200 0
    - PUT stores the birth date one calendar day after the sent one
    - Duplicate POST is 409
"""

import pytest

from people_api.api.dependencies import get_locale
from people_api.core.domain_types import Locale
from people_api.main import app

VALID = {
    "id": "12345678901",
    "name": "Maria Silva",
    "phone": "11999990000",
    "birthDate": "2020-1-30",
}


def _without(key: str) -> dict:
    return {k: v for k, v in VALID.items() if k != key}


# ─── GET /people ─────────────────────────────────────────────────

async def test_list_empty_store_returns_empty_array(client):
    res = await client.get("/people")
    assert res.status_code == 200
    assert res.json() == []


async def test_list_returns_created_people(client):
    await client.post("/people", json=VALID)
    await client.post("/people", json={**VALID, "id": "98765432100", "name": "João"})

    res = await client.get("/people")
    assert res.status_code == 200
    body = res.json()
    assert isinstance(body, list)
    assert {p["id"] for p in body} == {"12345678901", "98765432100"}


# ─── POST /people ────────────────────────────────────────────────

async def test_create_returns_created_person(client):
    res = await client.post("/people", json=VALID)

    assert res.status_code == 200
    body = res.json()
    assert body["id"] == VALID["id"]
    assert body["name"] == VALID["name"]
    assert body["phone"] == VALID["phone"]
    assert body["birthDate"] == "2020-1-30"
    assert "createdAt" in body
    assert "updatedAt" in body


async def test_create_then_get_keeps_sent_birth_date(client):
    await client.post("/people", json=VALID)

    res = await client.get(f"/people/{VALID['id']}")
    assert res.status_code == 200
    body = res.json()
    assert body["name"] == VALID["name"]
    assert body["phone"] == VALID["phone"]
    assert body["birthDate"] == VALID["birthDate"]


@pytest.mark.parametrize("cpf", ["1234567890", "123456789012", "", 12345678901])
async def test_create_rejects_bad_cpf(client, cpf):
    res = await client.post("/people", json={**VALID, "id": cpf})
    assert res.status_code == 400
    assert res.json() == {"message": "CPF inválido"}


async def test_create_rejects_missing_cpf(client):
    res = await client.post("/people", json=_without("id"))
    assert res.status_code == 400
    assert res.json() == {"message": "CPF inválido"}


@pytest.mark.parametrize("field,message", [
    ("name", "Nome inválido"),
    ("phone", "Telefone inválido"),
    ("birthDate", "Data de nascimento inválida"),
])
async def test_create_rejects_missing_field(client, field, message):
    res = await client.post("/people", json=_without(field))
    assert res.status_code == 400
    assert res.json() == {"message": message}


@pytest.mark.parametrize("birth_date", [
    "30/01/2020", "2020-1", "2020-01-30T00:00:00", "2020-13-1", "1" * 5000 + "-1-1",
])
async def test_create_rejects_bad_birth_date(client, birth_date):
    res = await client.post("/people", json={**VALID, "birthDate": birth_date})
    assert res.status_code == 400
    assert res.json() == {"message": "Data de nascimento inválida"}


async def test_create_first_failing_field_wins(client):
    res = await client.post(
        "/people", json={"id": "12345678901", "name": "", "phone": "", "birthDate": "x"},
    )
    assert res.json() == {"message": "Nome inválido"}


async def test_create_invalid_does_not_persist(client):
    await client.post("/people", json={**VALID, "phone": ""})

    res = await client.get("/people")
    assert res.json() == []


async def test_create_duplicate_id_returns_409(client):
    first = await client.post("/people", json=VALID)
    second = await client.post("/people", json={**VALID, "name": "Outra"})

    assert first.status_code == 200
    assert second.status_code == 409
    assert second.json() == {"message": "CPF já cadastrado"}

    res = await client.get(f"/people/{VALID['id']}")
    assert res.json()["name"] == VALID["name"]


async def test_create_non_object_body_returns_400(client):
    res = await client.post("/people", json=["not", "an", "object"])
    assert res.status_code == 400
    assert res.json() == {"message": "Requisição inválida"}


async def test_create_messages_follow_locale(client):
    app.dependency_overrides[get_locale] = lambda: Locale.EN

    res = await client.post("/people", json={**VALID, "id": "1"})
    assert res.status_code == 400
    assert res.json() == {"message": "Invalid CPF"}


# ─── GET /people/{id} ────────────────────────────────────────────

async def test_get_unknown_id_returns_null(client):
    res = await client.get("/people/00000000000")
    assert res.status_code == 200
    assert res.json() is None


# ─── PUT /people/{id} ────────────────────────────────────────────

async def test_update_returns_affected_count(client):
    await client.post("/people", json=VALID)

    res = await client.put(
        f"/people/{VALID['id']}",
        json={"name": "Maria Souza", "phone": "2133334444", "birthDate": "1990-5-17"},
    )
    assert res.status_code == 200
    assert res.json() == 1

    body = (await client.get(f"/people/{VALID['id']}")).json()
    assert body["name"] == "Maria Souza"
    assert body["phone"] == "2133334444"


async def test_update_shifts_birth_date_by_one_day(client):
    await client.post("/people", json=VALID)

    await client.put(
        f"/people/{VALID['id']}",
        json={"name": "Maria", "phone": "1", "birthDate": "2020-1-30"},
    )

    body = (await client.get(f"/people/{VALID['id']}")).json()
    assert body["birthDate"] == "2020-1-31"


async def test_update_birth_date_offset_rolls_into_next_month(client):
    await client.post("/people", json=VALID)

    await client.put(
        f"/people/{VALID['id']}",
        json={"name": "Maria", "phone": "1", "birthDate": "2020-1-31"},
    )

    body = (await client.get(f"/people/{VALID['id']}")).json()
    assert body["birthDate"] == "2020-2-1"


async def test_update_unknown_id_returns_zero(client):
    res = await client.put(
        "/people/00000000000",
        json={"name": "X", "phone": "Y", "birthDate": "2000-1-1"},
    )
    assert res.status_code == 200
    assert res.json() == 0


async def test_update_does_not_validate_path_id(client):
    res = await client.put(
        "/people/short",
        json={"name": "X", "phone": "Y", "birthDate": "2000-1-1"},
    )
    assert res.status_code == 200
    assert res.json() == 0


async def test_update_ignores_id_in_body(client):
    await client.post("/people", json=VALID)

    await client.put(
        f"/people/{VALID['id']}",
        json={"id": "99999999999", "name": "X", "phone": "Y", "birthDate": "2000-1-1"},
    )

    assert (await client.get("/people/99999999999")).json() is None
    assert (await client.get(f"/people/{VALID['id']}")).json()["name"] == "X"


@pytest.mark.parametrize("body,message", [
    ({"phone": "Y", "birthDate": "2000-1-1"}, "Nome inválido"),
    ({"name": "X", "birthDate": "2000-1-1"}, "Telefone inválido"),
    ({"name": "X", "phone": "Y", "birthDate": "2000/1/1"}, "Data de nascimento inválida"),
    ({"name": "X", "phone": "Y", "birthDate": "2020-1-" + "9" * 5000}, "Data de nascimento inválida"),
])
async def test_update_validation_messages(client, body, message):
    await client.post("/people", json=VALID)

    res = await client.put(f"/people/{VALID['id']}", json=body)
    assert res.status_code == 400
    assert res.json() == {"message": message}

    stored = (await client.get(f"/people/{VALID['id']}")).json()
    assert stored["name"] == VALID["name"]


# ─── DELETE /people/{id} ─────────────────────────────────────────

async def test_delete_returns_affected_count(client):
    await client.post("/people", json=VALID)

    res = await client.delete(f"/people/{VALID['id']}")
    assert res.status_code == 200
    assert res.json() == 1
    assert (await client.get(f"/people/{VALID['id']}")).json() is None


async def test_delete_unknown_id_returns_zero(client):
    res = await client.delete("/people/00000000000")
    assert res.status_code == 200
    assert res.json() == 0
