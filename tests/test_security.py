"""API key authentication tests."""
from datetime import timedelta

import pytest

from app.models import ApiKey
from app.utils.apikey import gen_key, hash_key


@pytest.mark.anyio("asyncio")
async def test_missing_key_is_rejected(client):
    resp = await client.get("/v1/payments/1")

    assert resp.status_code == 401
    assert resp.json()["error"]["code"] == "NO_API_KEY"


@pytest.mark.anyio("asyncio")
async def test_unknown_key_is_rejected(client):
    resp = await client.get("/v1/payments/1", headers={"Authorization": "Bearer bk_nope.nope"})

    assert resp.status_code == 401
    assert resp.json()["error"]["code"] == "INVALID_API_KEY"


@pytest.mark.anyio("asyncio")
async def test_expired_key_is_rejected(client, make_user, make_api_key):
    token = make_api_key(make_user(), expires_in=timedelta(minutes=-1))

    resp = await client.get("/v1/payments/1", headers={"Authorization": f"Bearer {token}"})

    assert resp.status_code == 401
    assert resp.json()["error"]["code"] == "INVALID_API_KEY"


@pytest.mark.anyio("asyncio")
async def test_inactive_key_is_rejected(client, make_user, make_api_key):
    token = make_api_key(make_user(), is_active=False)

    resp = await client.get("/v1/payments/1", headers={"X-API-Key": token})

    assert resp.status_code == 401


@pytest.mark.anyio("asyncio")
async def test_key_accepted_from_header_or_query(client, make_user, make_booking, make_payment, make_api_key):
    owner = make_user()
    payment = make_payment(make_booking(owner))
    token = make_api_key(owner, expires_in=timedelta(days=30))

    by_header = await client.get(f"/v1/payments/{payment.id}", headers={"X-API-Key": token})
    by_query = await client.get(f"/v1/payments/{payment.id}", params={"apiKey": token})

    assert by_header.status_code == 200
    assert by_query.status_code == 200


@pytest.mark.anyio("asyncio")
async def test_key_usage_is_recorded(client, db_session, make_user, make_api_key):
    token = make_api_key(make_user())

    await client.get("/v1/payments/999", headers={"Authorization": f"Bearer {token}"})

    key = db_session.query(ApiKey).filter(ApiKey.key_hash == hash_key(token)).one()
    assert key.last_used_at is not None


def test_generated_key_matches_stored_hash():
    raw, prefix, key_hash = gen_key()

    assert raw.startswith(f"{prefix}.")
    assert prefix.startswith("bk_")
    assert hash_key(raw) == key_hash
