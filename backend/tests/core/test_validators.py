"""Input Validators - pure checks return None or the exact user-facing message.

Tests:
    - first_error short-circuits in argument order
    - Photo/tag rules: URL host, tag count and character rules, combined budget, duplicates
    - Movie rules: id, rating range, review length, filter and sort parameters
    - Shared rules: required text, missing-field lists, folder types
"""

import pytest

from mediashelf.core.errors import InvalidInputError
from mediashelf.core.validators import (
    first_error, missing_fields, parse_sort_order, raise_for_invalid,
    validate_email, validate_folder_type, validate_image_url, validate_movie_filters,
    validate_movie_id, validate_positive_int, validate_rating, validate_review_text,
    validate_single_tag, validate_sort_order, validate_sort_params, validate_tag_count,
    validate_tags, validate_tags_array, validate_user_id, validate_username,
)
from mediashelf.core.domain_types import SortOrder


def test_first_error_returns_first_failure():
    assert first_error(None, "a", "b") == "a"
    assert first_error(None, None) is None


def test_raise_for_invalid_carries_field():
    with pytest.raises(InvalidInputError) as exc:
        raise_for_invalid("bad", field="tags")
    assert exc.value.http_status == 400
    assert exc.value.field == "tags"
    raise_for_invalid(None)


# -- users ---------------------------------------------------------------------


@pytest.mark.parametrize("username,expected", [
    ("", "Username is required."),
    ("ab", "Username must be between 3 and 30 characters."),
    ("a" * 31, "Username must be between 3 and 30 characters."),
    ("bad name", "Username can only contain letters, numbers, underscores, and hyphens."),
    ("good_name-1", None),
])
def test_validate_username(username, expected):
    assert validate_username(username) == expected


def test_validate_email():
    assert validate_email("") == "Email is required."
    assert validate_email("not-an-email") == "Invalid email format."
    assert validate_email("ana@example.com") is None


@pytest.mark.parametrize("value,ok", [
    ("7", True), (7, True), ("0", False), ("-3", False), ("abc", False), (True, False),
])
def test_validate_user_id(value, ok):
    assert (validate_user_id(value) is None) is ok


def test_validate_user_id_missing():
    assert validate_user_id(None) == "User ID is required."


# -- photos & tags -------------------------------------------------------------


def test_image_url_must_be_unsplash_https():
    assert validate_image_url("https://images.unsplash.com/photo-1") is None
    assert validate_image_url("http://images.unsplash.com/photo-1") == (
        "Invalid image URL. Must be from Unsplash HTTPS."
    )
    assert validate_image_url("https://example.com/cat.jpg") == (
        "Invalid image URL. Must be from Unsplash HTTPS."
    )
    assert validate_image_url("not a url") == "Invalid URL format."
    assert validate_image_url(None) == "Image URL is required."


def test_validate_tags_limits():
    assert validate_tags(["nature", "sky"]) is None
    assert validate_tags([]) == "At least one tag is required."
    assert validate_tags("nature") == "Tags must be an array."
    assert validate_tags(["a", "b", "c", "d", "e", "f"]) == "Too many tags. Maximum is 5."
    assert validate_tags(["   "]) == "Empty tags are not allowed."
    assert "too long" in validate_tags(["x" * 21])
    assert "invalid characters" in validate_tags(["hello world!"])
    assert validate_tags(["nature", "Nature"]) == "Duplicate tags are not allowed."


def test_validate_tags_array_shape_only():
    assert validate_tags_array(["a"]) is None
    assert validate_tags_array([]) is None
    assert validate_tags_array([""]) == "Tags must be non-empty strings."
    assert validate_tags_array(None) == "Tags must be an array."


def test_tag_count_over_budget_reports_total():
    existing = ["a", "b", "c", "d"]
    assert validate_tag_count(existing, ["e", "f"]) == (
        "A photo can have no more than 5 tags in total. Current total: 6"
    )
    assert validate_tag_count(existing, ["e"]) is None


def test_tag_count_rejects_case_insensitive_duplicates():
    assert validate_tag_count(["Nature"], ["nature"]) == "Duplicate tags are not allowed."


def test_validate_single_tag():
    assert validate_single_tag("sunset") is None
    assert validate_single_tag("") == "Tag is required."
    assert validate_single_tag("  ") == "Tag cannot be empty."
    assert validate_single_tag("a" * 21) == "Tag cannot be longer than 20 characters."
    assert validate_single_tag("no spaces") == (
        "Tag can only contain letters, numbers, hyphens, and underscores."
    )


def test_sort_order_case_insensitive_and_optional():
    assert validate_sort_order(None) is None
    assert validate_sort_order("desc") is None
    assert validate_sort_order("sideways") == "Invalid sort order. Must be 'ASC' or 'DESC'."
    assert parse_sort_order(None) is SortOrder.ASC
    assert parse_sort_order("desc") is SortOrder.DESC


# -- movies --------------------------------------------------------------------


def test_validate_movie_id():
    assert validate_movie_id(27205) is None
    assert validate_movie_id(None) == "Movie ID is required."
    assert validate_movie_id(0) == "Movie ID must be a positive integer."


@pytest.mark.parametrize("rating,ok", [
    (0, True), (10, True), (7.5, True), (-0.1, False), (10.5, False), ("8", False), (None, False),
])
def test_validate_rating(rating, ok):
    assert (validate_rating(rating) is None) is ok


def test_review_text_limit():
    assert validate_review_text("x" * 500) is None
    assert validate_review_text("x" * 501) == "Review text must not exceed 500 characters."


def test_movie_filters_require_one_parameter():
    assert validate_movie_filters(None, None, None, None) == (
        "At least one query parameter must be provided."
    )
    assert validate_movie_filters("Action", None, None, None) is None


def test_movie_filters_reject_empty_strings():
    assert validate_movie_filters("", None, None, None) == (
        "Invalid genre parameter. Genre must be a non-empty string."
    )
    assert validate_movie_filters(None, "", None, None) == (
        "Invalid actor parameter. Actor must be a non-empty string."
    )


def test_movie_filters_reject_unknown_list_type():
    assert validate_movie_filters(None, None, None, "favourites") == (
        "Invalid listType parameter. Valid options are: watchlist, wishlist, curatedList."
    )


def test_sort_params():
    assert validate_sort_params("watchlist", "rating", "DESC") is None
    assert validate_sort_params("watchlist", "rating", None) is None
    assert validate_sort_params("favourites", "rating", None).startswith(
        "Invalid list parameter.",
    )
    assert validate_sort_params("watchlist", "title", None).startswith(
        "Invalid sortBy parameter.",
    )
    assert validate_sort_params("watchlist", "rating", "desc") == (
        "Invalid order parameter. Allowed values: ASC, DESC."
    )


# -- shared --------------------------------------------------------------------


def test_missing_fields_lists_every_blank_field():
    assert missing_fields(name="", description=None) == (
        "Missing required fields: name, description"
    )
    assert missing_fields(name="Noir", description="Classics") is None


def test_folder_type_and_positive_int():
    assert validate_folder_type("pdf") is None
    assert validate_folder_type("docx").startswith("Invalid folder type.")
    assert validate_positive_int(3, "size") is None
    assert validate_positive_int(0, "size") == "size must be a positive integer."
    assert validate_positive_int(True, "size") == "size must be a positive integer."
