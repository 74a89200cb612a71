"""Tests for the dislike toggle service, including concurrent interleavings."""

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import OperationalError

from dislike_service.core.constant import FAIL_DISLIKE_DELETE, FAIL_DISLIKE_TOGGLE
from dislike_service.services import dislikes as dislikes_service
from tests.helpers import get_dislikes, get_post


def rival_toggle_after_lookup(monkeypatch: pytest.MonkeyPatch, pool) -> None:
    """
    Make a second request complete its toggle right after the first one
    looked up the existing dislike.
    """
    original_lookup = dislikes_service.find_user_dislikes_post
    state = {"rival_done": False}

    async def lookup_then_rival(db, user_id, post_id):
        found = await original_lookup(db, user_id, post_id)
        if not state["rival_done"]:
            state["rival_done"] = True
            async with pool() as rival_db:
                await dislikes_service.toggle_dislike(rival_db, user_id, post_id)
        return found

    monkeypatch.setattr(dislikes_service, "find_user_dislikes_post", lookup_then_rival)


@pytest.mark.asyncio
async def test_toggle_returns_new_state(db_session, seeded, pool):
    assert await dislikes_service.toggle_dislike(db_session, "u1", "p1") is True
    assert await dislikes_service.count_dislikes(db_session, "p1") == 1

    assert await dislikes_service.toggle_dislike(db_session, "u1", "p1") is False
    assert await dislikes_service.count_dislikes(db_session, "p1") == 0
    assert (await get_post(pool, "p1")).dislikes == 3


@pytest.mark.asyncio
async def test_concurrent_dislike_creates_single_record(db_session, seeded, pool, monkeypatch):
    rival_toggle_after_lookup(monkeypatch, pool)

    with pytest.raises(HTTPException) as exc_info:
        await dislikes_service.toggle_dislike(db_session, "u1", "p1")
    assert exc_info.value.status_code == 409

    assert len(await get_dislikes(pool, "p1")) == 1
    assert (await get_post(pool, "p1")).dislikes == 4


@pytest.mark.asyncio
async def test_concurrent_undislike_removes_once(db_session, seeded, pool, monkeypatch):
    async with pool() as session:
        await dislikes_service.toggle_dislike(session, "u1", "p1")
    assert (await get_post(pool, "p1")).dislikes == 4

    rival_toggle_after_lookup(monkeypatch, pool)

    with pytest.raises(HTTPException) as exc_info:
        await dislikes_service.toggle_dislike(db_session, "u1", "p1")
    assert exc_info.value.status_code == 409

    assert await get_dislikes(pool, "p1") == []
    assert (await get_post(pool, "p1")).dislikes == 3


@pytest.mark.asyncio
async def test_session_usable_after_conflict(db_session, seeded, pool, monkeypatch):
    rival_toggle_after_lookup(monkeypatch, pool)

    with pytest.raises(HTTPException):
        await dislikes_service.toggle_dislike(db_session, "u1", "p1")

    # the retry sees the rival's dislike and removes it
    assert await dislikes_service.toggle_dislike(db_session, "u1", "p1") is False
    assert (await get_post(pool, "p1")).dislikes == 3


@pytest.mark.asyncio
async def test_posts_disliked_by_user_load_author(db_session, seeded, pool):
    await dislikes_service.toggle_dislike(db_session, "u2", "p1")

    async with pool() as session:
        posts = await dislikes_service.find_all_posts_disliked_by_user(session, "u2")
        assert [p.id for p in posts] == ["p1"]
        assert posts[0].author.username == "alice"
        assert posts[0].stats["dislikes"] == 4

        assert await dislikes_service.find_all_posts_disliked_by_user(session, "u1") == []


def failing(statement: str):
    async def raise_operational_error(*args, **kwargs):
        raise OperationalError(statement, {}, Exception("database is locked"))

    return raise_operational_error


@pytest.mark.asyncio
async def test_failed_counter_update_rolls_back_new_dislike(db_session, seeded, pool, monkeypatch):
    monkeypatch.setattr(dislikes_service, "update_dislikes", failing("UPDATE posts"))

    with pytest.raises(HTTPException) as exc_info:
        await dislikes_service.toggle_dislike(db_session, "u1", "p1")
    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == FAIL_DISLIKE_TOGGLE

    assert await get_dislikes(pool, "p1") == []
    assert (await get_post(pool, "p1")).dislikes == 3


@pytest.mark.asyncio
async def test_failed_lookup_is_reported_as_generic_failure(db_session, seeded, pool, monkeypatch):
    monkeypatch.setattr(dislikes_service, "find_post_by_id", failing("SELECT posts"))

    with pytest.raises(HTTPException) as exc_info:
        await dislikes_service.toggle_dislike(db_session, "u1", "p1")
    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == FAIL_DISLIKE_TOGGLE


@pytest.mark.asyncio
async def test_failed_delete_by_id_keeps_record(db_session, seeded, pool, monkeypatch):
    async with pool() as session:
        await dislikes_service.toggle_dislike(session, "u2", "p1")
    [record] = await get_dislikes(pool, "p1")

    monkeypatch.setattr(dislikes_service, "update_dislikes", failing("UPDATE posts"))

    with pytest.raises(HTTPException) as exc_info:
        await dislikes_service.delete_dislike(db_session, record.id)
    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == FAIL_DISLIKE_DELETE

    assert [d.id for d in await get_dislikes(pool, "p1")] == [record.id]
    assert (await get_post(pool, "p1")).dislikes == 4
