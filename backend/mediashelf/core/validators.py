"""Input Validators - pure field checks shared by every request handler.

Invariants:
    - Every validator is PURE: returns None on success or a human-readable message
    - No validator touches storage; uniqueness checks live in services
    - first_error() short-circuits on the first failing message (request order matters)

Design Decisions:
    - Message strings over exceptions: validators compose like the enforce_* rules, the shell
      decides how to fail (raise_for_invalid -> InvalidInputError -> HTTP 400)
"""

import re
from typing import Any
from urllib.parse import urlparse

from mediashelf.core.domain_types import (
    FolderType, ListType, MovieSortKey, SortOrder,
    MAX_REVIEW_LENGTH, MAX_TAG_LENGTH, MAX_TAGS_PER_PHOTO,
)
from mediashelf.core.errors import InvalidInputError


USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")
TAG_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
IMAGE_HOST_SUFFIX = "unsplash.com"


def first_error(*messages: str | None) -> str | None:
    """Return the first non-None message, or None when every check passed."""
    for message in messages:
        if message:
            return message
    return None


def raise_for_invalid(message: str | None, field: str | None = None) -> None:
    """Shell helper: turn a validator message into InvalidInputError."""
    if message:
        raise InvalidInputError(message, field=field)


# ─── Users ───────────────────────────────────────────────────────

def validate_username(username: Any) -> str | None:
    if not username:
        return "Username is required."
    if not isinstance(username, str):
        return "Username must be a string."
    if len(username) < 3 or len(username) > 30:
        return "Username must be between 3 and 30 characters."
    if not USERNAME_PATTERN.match(username):
        return "Username can only contain letters, numbers, underscores, and hyphens."
    return None


def validate_email(email: Any) -> str | None:
    if not email:
        return "Email is required."
    if not isinstance(email, str) or not EMAIL_PATTERN.match(email):
        return "Invalid email format."
    return None


def validate_user_id(user_id: Any) -> str | None:
    """Positive integer, given as int or numeric string (query parameters arrive as str)."""
    if user_id is None or user_id == "":
        return "User ID is required."
    if isinstance(user_id, bool):
        return "User ID must be a positive integer."
    try:
        value = int(str(user_id).strip())
    except ValueError:
        return "User ID must be a positive integer."
    if value <= 0:
        return "User ID must be a positive integer."
    return None


# ─── Photos & Tags ───────────────────────────────────────────────

def validate_image_url(image_url: Any) -> str | None:
    if not image_url:
        return "Image URL is required."
    if not isinstance(image_url, str):
        return "Image URL must be a string."
    parsed = urlparse(image_url)
    if not parsed.scheme or not parsed.hostname:
        return "Invalid URL format."
    if parsed.scheme != "https" or not parsed.hostname.endswith(IMAGE_HOST_SUFFIX):
        return "Invalid image URL. Must be from Unsplash HTTPS."
    return None


def _check_tag_text(tag: str) -> str | None:
    trimmed = tag.strip()
    if not trimmed:
        return "Empty tags are not allowed."
    if len(trimmed) > MAX_TAG_LENGTH:
        return f'Tag "{tag}" is too long. Maximum length is {MAX_TAG_LENGTH} characters.'
    if not TAG_PATTERN.match(trimmed):
        return (
            f'Tag "{tag}" contains invalid characters. '
            "Use only letters, numbers, hyphens, and underscores."
        )
    return None


def validate_tags(tags: Any) -> str | None:
    """Tags supplied when a photo is first saved."""
    if not isinstance(tags, list):
        return "Tags must be an array."
    if not tags:
        return "At least one tag is required."
    if len(tags) > MAX_TAGS_PER_PHOTO:
        return f"Too many tags. Maximum is {MAX_TAGS_PER_PHOTO}."
    for tag in tags:
        if not isinstance(tag, str):
            return "All tags must be strings."
        error = _check_tag_text(tag)
        if error:
            return error
    return validate_tag_count([], tags)


def validate_tags_array(tags: Any) -> str | None:
    """Shape check for tags appended to an existing photo."""
    if not isinstance(tags, list):
        return "Tags must be an array."
    for tag in tags:
        if not isinstance(tag, str) or not tag.strip():
            return "Tags must be non-empty strings."
    return None


def validate_tag_count(existing_tags: list[str], new_tags: list[str]) -> str | None:
    """Combined tag budget and case-insensitive uniqueness for one photo."""
    total = len(existing_tags) + len(new_tags)
    if total == 0:
        return "At least one tag is required."
    if total > MAX_TAGS_PER_PHOTO:
        return (
            f"A photo can have no more than {MAX_TAGS_PER_PHOTO} tags in total. "
            f"Current total: {total}"
        )
    lowered = [t.strip().lower() for t in [*existing_tags, *new_tags]]
    if len(set(lowered)) != len(lowered):
        return "Duplicate tags are not allowed."
    return None


def validate_single_tag(tag: Any) -> str | None:
    if not tag:
        return "Tag is required."
    if not isinstance(tag, str):
        return "Tag must be a string."
    trimmed = tag.strip()
    if not trimmed:
        return "Tag cannot be empty."
    if len(trimmed) > MAX_TAG_LENGTH:
        return f"Tag cannot be longer than {MAX_TAG_LENGTH} characters."
    if not TAG_PATTERN.match(trimmed):
        return "Tag can only contain letters, numbers, hyphens, and underscores."
    return None


def validate_sort_order(sort: Any) -> str | None:
    """Optional ASC/DESC, case-insensitive."""
    if sort is None or sort == "":
        return None
    if not isinstance(sort, str) or sort.upper() not in SortOrder.__members__:
        return "Invalid sort order. Must be 'ASC' or 'DESC'."
    return None


def parse_sort_order(sort: str | None) -> SortOrder:
    """Normalize an already-validated sort value; absent means ASC."""
    return SortOrder(sort.upper()) if sort else SortOrder.ASC


# ─── Movies ──────────────────────────────────────────────────────

def validate_movie_id(movie_id: Any) -> str | None:
    if movie_id is None or isinstance(movie_id, bool):
        return "Movie ID is required."
    if not isinstance(movie_id, int) or movie_id <= 0:
        return "Movie ID must be a positive integer."
    return None


def validate_rating(rating: Any) -> str | None:
    if isinstance(rating, bool) or not isinstance(rating, (int, float)) or not 0 <= rating <= 10:
        return "Rating must be between 0 and 10 and should be a number."
    return None


def validate_review_text(review_text: Any) -> str | None:
    if not isinstance(review_text, str) or len(review_text) > MAX_REVIEW_LENGTH:
        return f"Review text must not exceed {MAX_REVIEW_LENGTH} characters."
    return None


def _enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


def validate_movie_filters(
    genre: str | None,
    actor: str | None,
    director: str | None,
    list_type: str | None,
) -> str | None:
    """Empty string is rejected explicitly; absent (None) means 'no filter'."""
    if genre == "":
        return "Invalid genre parameter. Genre must be a non-empty string."
    if actor == "":
        return "Invalid actor parameter. Actor must be a non-empty string."
    if director == "":
        return "Invalid director parameter. Director must be a non-empty string."
    if not genre and not actor and not director and not list_type:
        return "At least one query parameter must be provided."
    if list_type and list_type not in _enum_values(ListType):
        return (
            "Invalid listType parameter. Valid options are: "
            f"{', '.join(_enum_values(ListType))}."
        )
    return None


def validate_sort_params(
    list_type: str | None, sort_by: str | None, order: str | None,
) -> str | None:
    if not list_type or list_type not in _enum_values(ListType):
        return (
            "Invalid list parameter. Allowed values: "
            f"{', '.join(_enum_values(ListType))}."
        )
    if not sort_by or sort_by not in _enum_values(MovieSortKey):
        return (
            "Invalid sortBy parameter. Allowed values: "
            f"{', '.join(_enum_values(MovieSortKey))}."
        )
    if order is not None and order not in _enum_values(SortOrder):
        return "Invalid order parameter. Allowed values: ASC, DESC."
    return None


# ─── Shared ──────────────────────────────────────────────────────

def validate_required_text(value: Any, field: str) -> str | None:
    if not isinstance(value, str) or not value.strip():
        return f"{field} is required."
    return None


def missing_fields(**values: Any) -> str | None:
    """'Missing required fields: a, b' for every blank keyword value."""
    missing = [
        name for name, value in values.items()
        if not isinstance(value, str) or not value.strip()
    ]
    if missing:
        return f"Missing required fields: {', '.join(missing)}"
    return None


def validate_folder_type(folder_type: Any) -> str | None:
    if folder_type not in _enum_values(FolderType):
        return (
            "Invalid folder type. Allowed values: "
            f"{', '.join(_enum_values(FolderType))}."
        )
    return None


def validate_positive_int(value: Any, field: str) -> str | None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return f"{field} must be a positive integer."
    return None
