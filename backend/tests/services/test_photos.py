"""Photo Library - provider search, saving, tagging, tag search and search history.

Invariants:
    - Saving creates one Tag row per tag; rejected tag additions write nothing
    - Tag search: case-insensitive membership, full tag list per photo, 404 on no match
    - History: recorded after a successful search only, deduplicated per (user, query),
      never able to fail the search response

Design Decisions:
    - Background tasks run before the httpx test client returns, so history rows can be
      asserted right after the request
"""

from sqlalchemy import func, select

from mediashelf.models.search_history import SearchHistory
from mediashelf.models.tag import Tag
from tests.services.mock_providers import unsplash_result

IMAGE_URL = "https://images.unsplash.com/x"


async def _create_user(client, username="ana_p", email="ana@example.com") -> int:
    res = await client.post("/api/users", json={"username": username, "email": email})
    return res.json()["user"]["id"]


async def _save_photo(client, tags, user_id=None, image_url=IMAGE_URL):
    body = {"imageUrl": image_url, "tags": tags, "description": "A quiet forest"}
    if user_id is not None:
        body["userId"] = user_id
    return await client.post("/api/photos", json=body)


async def _count(db, column) -> int:
    return (await db.execute(select(func.count(column)))).scalar_one()


# -- provider search -----------------------------------------------------------


async def test_search_returns_normalized_photos(client, unsplash_api):
    unsplash_api.results = [unsplash_result("abc", "Pine trees")]

    res = await client.get("/api/photos/search", params={"query": "forest"})

    assert res.status_code == 200
    assert res.json() == {"photos": [{
        "imageUrl": "https://images.unsplash.com/abc?w=400",
        "description": "Pine trees",
        "altDescription": "abc alt",
    }]}
    sent = unsplash_api.requests[0]
    assert sent.url.params["query"] == "forest"
    assert sent.headers["Authorization"] == "Client-ID test-unsplash-key"


async def test_search_with_no_results_returns_message(client):
    res = await client.get("/api/photos/search", params={"query": "zzzz"})
    assert res.status_code == 200
    assert res.json() == {"message": "No images found for the given query."}


async def test_search_without_query_returns_400_and_skips_provider(client, unsplash_api):
    res = await client.get("/api/photos/search")
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Query parameter is required."
    assert unsplash_api.requests == []


async def test_search_provider_failure_returns_500(client, unsplash_api):
    unsplash_api.status_code = 503
    res = await client.get("/api/photos/search", params={"query": "forest"})
    assert res.status_code == 500
    assert res.json()["error"]["message"] == "Failed to fetch images from Unsplash."


# -- saving --------------------------------------------------------------------


async def test_save_photo_creates_tag_rows_and_is_searchable(client, test_db):
    res = await _save_photo(client, ["nature", "forest"])
    assert res.status_code == 201
    assert res.json()["message"] == "Photo saved successfully"
    assert await _count(test_db, Tag.id) == 2

    search = await client.get("/api/photos/tag/search", params={"tags": "nature"})
    assert search.status_code == 200
    photos = search.json()["photos"]
    assert len(photos) == 1
    assert photos[0]["imageUrl"] == IMAGE_URL
    assert photos[0]["tags"] == ["nature", "forest"]


async def test_save_photo_rejects_non_unsplash_url(client, test_db):
    res = await _save_photo(client, ["nature"], image_url="https://example.com/x.jpg")
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Invalid image URL. Must be from Unsplash HTTPS."
    assert await _count(test_db, Tag.id) == 0


async def test_save_photo_rejects_too_many_tags(client):
    res = await _save_photo(client, ["a", "b", "c", "d", "e", "f"])
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Too many tags. Maximum is 5."


async def test_save_photo_for_user(client):
    user_id = await _create_user(client)
    res = await _save_photo(client, ["nature"], user_id=user_id)
    assert res.status_code == 201
    assert res.json()["photo"]["userId"] == user_id


async def test_save_photo_with_duplicate_tags_returns_400(client, test_db):
    res = await _save_photo(client, ["nature", "Nature"])
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Duplicate tags are not allowed."
    assert await _count(test_db, Tag.id) == 0


async def test_save_photo_for_unknown_user_returns_404(client, test_db):
    res = await _save_photo(client, ["nature"], user_id=999)
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "User not found."
    assert await _count(test_db, Tag.id) == 0


# -- tagging -------------------------------------------------------------------


async def test_add_tags_returns_new_count(client):
    photo_id = (await _save_photo(client, ["nature"])).json()["photo"]["id"]

    res = await client.post(f"/api/photos/{photo_id}/tags", json={"tags": ["forest", "green"]})

    assert res.status_code == 200
    assert res.json()["message"] == "Tags added successfully"
    assert res.json()["tagCount"] == 3


async def test_add_tags_over_limit_writes_nothing(client, test_db):
    photo_id = (await _save_photo(client, ["a", "b", "c", "d"])).json()["photo"]["id"]

    res = await client.post(f"/api/photos/{photo_id}/tags", json={"tags": ["e", "f"]})

    assert res.status_code == 400
    assert res.json()["error"]["message"] == (
        "A photo can have no more than 5 tags in total. Current total: 6"
    )
    assert await _count(test_db, Tag.id) == 4


async def test_add_duplicate_tag_case_insensitive_rejected(client, test_db):
    photo_id = (await _save_photo(client, ["Nature"])).json()["photo"]["id"]

    res = await client.post(f"/api/photos/{photo_id}/tags", json={"tags": ["nature"]})

    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Duplicate tags are not allowed."
    assert await _count(test_db, Tag.id) == 1


async def test_add_tags_to_missing_photo_returns_404(client):
    res = await client.post("/api/photos/999/tags", json={"tags": ["forest"]})
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Photo not found."


# -- tag search & history ------------------------------------------------------


async def test_tag_search_matches_any_requested_tag_case_insensitively(client):
    await _save_photo(client, ["nature"])
    await _save_photo(client, ["City"])
    await _save_photo(client, ["food"])

    res = await client.get(
        "/api/photos/tag/search", params=[("tags", "NATURE"), ("tags", "city")],
    )

    assert res.status_code == 200
    assert res.json()["count"] == 2


async def test_tag_search_sort_desc_returns_newest_first(client):
    first = (await _save_photo(client, ["sky"], image_url="https://images.unsplash.com/1")).json()
    second = (await _save_photo(client, ["sky"], image_url="https://images.unsplash.com/2")).json()

    res = await client.get("/api/photos/tag/search", params={"tags": "sky", "sort": "desc"})

    urls = [p["imageUrl"] for p in res.json()["photos"]]
    assert urls == [second["photo"]["imageUrl"], first["photo"]["imageUrl"]]


async def test_tag_search_accepts_sort_order_param(client):
    first = (await _save_photo(client, ["sky"], image_url="https://images.unsplash.com/1")).json()
    second = (await _save_photo(client, ["sky"], image_url="https://images.unsplash.com/2")).json()

    res = await client.get(
        "/api/photos/tag/search", params={"tags": "sky", "sortOrder": "DESC"},
    )

    urls = [p["imageUrl"] for p in res.json()["photos"]]
    assert urls == [second["photo"]["imageUrl"], first["photo"]["imageUrl"]]


async def test_tag_search_invalid_sort_returns_400(client):
    res = await client.get("/api/photos/tag/search", params={"tags": "sky", "sort": "up"})
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Invalid sort order. Must be 'ASC' or 'DESC'."


async def test_tag_search_without_tags_returns_400(client):
    res = await client.get("/api/photos/tag/search")
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Tags are required."


async def test_tag_search_no_match_returns_404_and_records_no_history(client, test_db):
    user_id = await _create_user(client)

    res = await client.get(
        "/api/photos/tag/search", params={"tags": "missing", "userId": user_id},
    )

    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Tag not found."
    assert await _count(test_db, SearchHistory.id) == 0


async def test_tag_search_records_history_once_per_query(client, test_db):
    user_id = await _create_user(client)
    await _save_photo(client, ["nature"], user_id=user_id)

    for _ in range(2):
        res = await client.get(
            "/api/photos/tag/search", params={"tags": "nature", "userId": user_id},
        )
        assert res.status_code == 200

    assert await _count(test_db, SearchHistory.id) == 1

    history = await client.get("/api/search-history", params={"userId": user_id})
    assert history.status_code == 200
    entries = history.json()["searchHistory"]
    assert [e["query"] for e in entries] == ["nature"]
    assert entries[0]["userId"] == user_id


async def test_history_failure_does_not_fail_search(client, test_db):
    await _save_photo(client, ["nature"])

    # No such user: the history insert violates the foreign key and is swallowed
    res = await client.get(
        "/api/photos/tag/search", params={"tags": "nature", "userId": 4242},
    )

    assert res.status_code == 200
    assert res.json()["count"] == 1
    assert await _count(test_db, SearchHistory.id) == 0


async def test_search_history_invalid_user_id_returns_400(client):
    res = await client.get("/api/search-history", params={"userId": "abc"})
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "User ID must be a positive integer."


async def test_search_history_empty_returns_404(client):
    user_id = await _create_user(client)
    res = await client.get("/api/search-history", params={"userId": user_id})
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Search history not found."
