"""
Draft visibility tests: an unpublished article is reachable only by its
author, both by id and through the drafts listing.
"""
import pytest
from httpx import AsyncClient

OTHER_VIEWER = {"X-Viewer-Name": "Riley Park"}


async def _create_draft(client: AsyncClient, headers: dict, title: str = "Work in progress") -> str:
    resp = await client.post(
        "/api/v1/articles", json={"title": title, "content": "## Outline\n- point"}, headers=headers
    )
    assert resp.status_code == 201
    return resp.json()["article"]["id"]


# ---------------------------------------------------------------------------
# Reading a draft by id
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_draft_hidden_from_anonymous_viewer(async_client: AsyncClient, signed_in):
    draft_id = await _create_draft(async_client, signed_in)
    resp = await async_client.get(f"/api/v1/articles/{draft_id}")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Article not found"


@pytest.mark.asyncio
async def test_draft_hidden_from_other_viewer(async_client: AsyncClient, signed_in):
    draft_id = await _create_draft(async_client, signed_in)
    resp = await async_client.get(f"/api/v1/articles/{draft_id}", headers=OTHER_VIEWER)
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_author_reads_own_draft(async_client: AsyncClient, signed_in):
    draft_id = await _create_draft(async_client, signed_in)
    resp = await async_client.get(f"/api/v1/articles/{draft_id}", headers=signed_in)
    assert resp.status_code == 200
    assert resp.json()["article"]["status"] == "draft"


# ---------------------------------------------------------------------------
# Likes and comments on a draft
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_other_viewer_cannot_like_draft(async_client: AsyncClient, repo, signed_in):
    draft_id = await _create_draft(async_client, signed_in)
    resp = await async_client.post(f"/api/v1/articles/{draft_id}/like", headers=OTHER_VIEWER)
    assert resp.status_code == 404
    assert repo.get(draft_id).like_count == 0


@pytest.mark.asyncio
async def test_other_viewer_cannot_comment_on_draft(async_client: AsyncClient, repo, signed_in):
    draft_id = await _create_draft(async_client, signed_in)
    resp = await async_client.post(
        f"/api/v1/articles/{draft_id}/comments", json={"body": "Sneak peek"}, headers=OTHER_VIEWER
    )
    assert resp.status_code == 404
    assert repo.get(draft_id).comment_count == 0


@pytest.mark.asyncio
async def test_anonymous_like_on_draft_is_not_found(async_client: AsyncClient, signed_in):
    draft_id = await _create_draft(async_client, signed_in)
    resp = await async_client.post(f"/api/v1/articles/{draft_id}/like")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_author_can_like_and_comment_on_own_draft(async_client: AsyncClient, signed_in):
    draft_id = await _create_draft(async_client, signed_in)

    liked = await async_client.post(f"/api/v1/articles/{draft_id}/like", headers=signed_in)
    assert liked.status_code == 200
    assert liked.json()["article"]["like_count"] == 1

    commented = await async_client.post(
        f"/api/v1/articles/{draft_id}/comments", json={"body": "Note to self"}, headers=signed_in
    )
    assert commented.status_code == 201
    assert commented.json()["article"]["comment_count"] == 1


# ---------------------------------------------------------------------------
# Drafts listing
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_drafts_listing_requires_sign_in(async_client: AsyncClient):
    resp = await async_client.get("/api/v1/articles/drafts")
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_drafts_listing_shows_only_own_drafts(async_client: AsyncClient, signed_in):
    mine = await _create_draft(async_client, signed_in, title="Mine")
    await _create_draft(async_client, OTHER_VIEWER, title="Theirs")
    await async_client.post(
        "/api/v1/articles",
        json={"title": "Already out", "content": "Body", "publish": True},
        headers=signed_in,
    )

    resp = await async_client.get("/api/v1/articles/drafts", headers=signed_in)
    assert resp.status_code == 200
    data = resp.json()
    assert [a["id"] for a in data["items"]] == [mine]
    assert data["total"] == 1
    assert data["items"][0]["status"] == "draft"


@pytest.mark.asyncio
async def test_drafts_listing_empty_for_viewer_without_drafts(async_client: AsyncClient):
    resp = await async_client.get("/api/v1/articles/drafts", headers=OTHER_VIEWER)
    assert resp.status_code == 200
    assert resp.json()["items"] == []


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_list_summaries_author_and_draft_filters(async_client: AsyncClient, repo, signed_in):
    draft_id = await _create_draft(async_client, signed_in)

    assert draft_id not in [s.id for s in repo.list_summaries()]
    assert draft_id in [s.id for s in repo.list_summaries(include_drafts=True)]
    assert [s.id for s in repo.list_summaries(include_drafts=True, author_name="Jordan Lee")] == [
        draft_id
    ]
    assert repo.list_summaries(author_name="Jordan Lee") == []
