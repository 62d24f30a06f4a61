"""Tests for the bearer token guard on chat routes."""

import pytest


pytestmark = pytest.mark.asyncio


async def test_message_without_header(client):
    resp = await client.post("/message", json={"content": "hi"})
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "error": "Missing Authorization header"}


async def test_message_with_non_bearer_scheme(client, token):
    resp = await client.post("/message", json={"content": "hi"},
                             headers={"Authorization": f"Basic {token}"})
    assert resp.status_code == 401


async def test_message_with_unknown_token(client):
    resp = await client.post("/message", json={"content": "hi"},
                             headers={"Authorization": "Bearer not-a-token"})
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "error": "Invalid or expired token"}


@pytest.mark.parametrize("body", [b"{broken", b"", b'{"content": ""}', b'{"content": 12}'])
async def test_bad_token_wins_over_bad_body(client, body):
    """Without a valid token the answer is 401 whatever the body holds."""
    resp = await client.post(
        "/message",
        content=body,
        headers={"Authorization": "Bearer nope", "Content-Type": "application/json"},
    )
    assert resp.status_code == 401


async def test_poll_without_token(client):
    resp = await client.get("/messages", params={"since": 0})
    assert resp.status_code == 401


async def test_expired_token_rejected_before_sweep(client, token, clock, chat_app):
    clock.advance(3600)
    assert token in chat_app.state.session_registry

    resp = await client.get("/messages", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


async def test_swept_token_rejected(client, token, clock, chat_app):
    auth = {"Authorization": f"Bearer {token}"}
    assert (await client.get("/messages", headers=auth)).status_code == 200

    clock.advance(3601)
    chat_app.state.session_registry.sweep()
    assert token not in chat_app.state.session_registry

    resp = await client.post("/message", json={"content": "late"}, headers=auth)
    assert resp.status_code == 401
    assert len(chat_app.state.message_log) == 0


async def test_join_needs_no_token(client):
    resp = await client.post("/join", json={"username": "A", "placeId": 1, "jobId": "j"})
    assert resp.status_code == 200
