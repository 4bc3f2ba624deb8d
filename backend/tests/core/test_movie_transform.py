"""Movie Transform - provider payloads shaped into Movie columns and response rows.

Tests:
    - build_movie_fields maps details+credits, skips non-directors, caps cast
    - Payloads without id or title are rejected (None), never partially stored
    - Search summaries keep only acting cast
    - review_summary counts words after stripping punctuation, with a sentinel for no review
"""

from mediashelf.core.movie_transform import (
    NO_REVIEW_TEXT, build_movie_fields, cast_names, director_names, extract_year,
    join_genre_names, review_summary, summarize_search_result, word_count,
)


def _details(**overrides):
    payload = {
        "id": 27205,
        "title": "Inception",
        "genres": [{"id": 878, "name": "Science Fiction"}, {"id": 28, "name": "Action"}],
        "release_date": "2010-07-16",
        "vote_average": 8.4,
        "overview": "Dreams within dreams.",
        "credits": {
            "cast": [{"name": f"Actor {i}"} for i in range(8)],
            "crew": [
                {"name": "Christopher Nolan", "job": "Director"},
                {"name": "Christopher Nolan", "job": "Director"},
                {"name": "Hans Zimmer", "job": "Original Music Composer"},
            ],
        },
    }
    payload.update(overrides)
    return payload


def test_build_movie_fields_maps_payload():
    fields = build_movie_fields(_details())
    assert fields == {
        "tmdb_id": 27205,
        "title": "Inception",
        "genre": "Science Fiction, Action",
        "actors": "Actor 0, Actor 1, Actor 2, Actor 3, Actor 4",
        "director": "Christopher Nolan",
        "release_year": 2010,
        "rating": 8.4,
        "description": "Dreams within dreams.",
    }


def test_build_movie_fields_defaults_for_sparse_payload():
    fields = build_movie_fields({"id": 1, "title": "Untitled"})
    assert fields["genre"] == "Unknown"
    assert fields["actors"] == ""
    assert fields["director"] is None
    assert fields["release_year"] is None
    assert fields["rating"] is None
    assert fields["description"] == ""


def test_build_movie_fields_rejects_missing_identity():
    assert build_movie_fields(None) is None
    assert build_movie_fields({"title": "No id"}) is None
    assert build_movie_fields({"id": 5}) is None


def test_extract_year():
    assert extract_year("1999-03-31") == 1999
    assert extract_year("") is None
    assert extract_year("n/a") is None


def test_director_names_deduplicates():
    assert director_names(_details()["credits"]) == ["Christopher Nolan"]
    assert director_names(None) == []


def test_cast_names_acting_only():
    cast = [
        {"name": "A", "known_for_department": "Acting"},
        {"name": "B", "known_for_department": "Directing"},
        {"name": "C", "known_for_department": "Acting"},
    ]
    assert cast_names(cast, acting_only=True) == ["A", "C"]
    assert cast_names(cast, limit=2) == ["A", "B"]


def test_summarize_search_result():
    raw = {
        "id": 603, "title": "The Matrix", "release_date": "1999-03-31",
        "vote_average": 8.2, "overview": "Wake up.",
    }
    cast = [{"name": "Keanu Reeves", "known_for_department": "Acting"}]
    assert summarize_search_result(raw, cast, "Action") == {
        "title": "The Matrix",
        "tmdbId": 603,
        "genre": "Action",
        "actors": "Keanu Reeves",
        "releaseYear": 1999,
        "rating": 8.2,
        "description": "Wake up.",
    }


def test_join_genre_names_unknown_ids():
    genres = {28: "Action"}
    assert join_genre_names([28, 99], genres) == "Action, Unknown"
    assert join_genre_names([], genres) == "Unknown"


def test_word_count_strips_punctuation():
    assert word_count("Great movie!!! 10/10, would watch again.") == 6
    assert word_count("...") == 0


def test_review_summary_sentinel_when_no_review():
    assert review_summary(None) == {"text": NO_REVIEW_TEXT, "wordCount": 3}
    assert review_summary("   ")["text"] == NO_REVIEW_TEXT


def test_review_summary_counts_words():
    assert review_summary("Mind-bending and brilliant.") == {
        "text": "Mind-bending and brilliant.",
        "wordCount": 3,
    }
