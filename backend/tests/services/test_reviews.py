"""Reviews - rating/text validation first, then the movie must already be stored."""

from sqlalchemy import func, select

from mediashelf.models.movie import Movie
from mediashelf.models.review import Review


async def _seed_movie(db, tmdb_id=603):
    db.add(Movie(tmdb_id=tmdb_id, title="The Matrix", rating=8.2))
    await db.commit()


async def test_add_review_returns_201(client, test_db):
    await _seed_movie(test_db)

    res = await client.post(
        "/api/movies/603/reviews", json={"rating": 9.5, "reviewText": "Still holds up."},
    )

    assert res.status_code == 201
    assert res.json() == {"message": "Review added successfully."}
    review = (await test_db.execute(select(Review))).scalar_one()
    assert review.rating == 9.5
    assert review.review_text == "Still holds up."


async def test_add_review_unknown_movie_returns_404(client, tmdb_api):
    res = await client.post(
        "/api/movies/603/reviews", json={"rating": 7, "reviewText": "Fine."},
    )
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Movie not found."
    assert tmdb_api.requests == []


async def test_rating_out_of_range_returns_400(client, test_db):
    await _seed_movie(test_db)
    res = await client.post(
        "/api/movies/603/reviews", json={"rating": 11, "reviewText": "Too good."},
    )
    assert res.status_code == 400
    assert res.json()["error"]["message"] == (
        "Rating must be between 0 and 10 and should be a number."
    )


async def test_review_text_too_long_returns_400(client, test_db):
    await _seed_movie(test_db)
    res = await client.post(
        "/api/movies/603/reviews", json={"rating": 5, "reviewText": "x" * 501},
    )
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Review text must not exceed 500 characters."
    count = (await test_db.execute(select(func.count(Review.id)))).scalar_one()
    assert count == 0


async def test_validation_runs_before_movie_lookup(client):
    res = await client.post(
        "/api/movies/603/reviews", json={"rating": -1, "reviewText": "Nope."},
    )
    assert res.status_code == 400
