"""Domain Types - closed enumerations that replace raw string matching.

Invariants:
    - Every query-string enumeration (sort order, list type, sort key, folder type) is an Enum
    - Unknown values are rejected at the boundary, never looked up dynamically

Design Decisions:
    - str Enums: serialize to JSON without custom encoders and compare equal to the wire value
"""

from enum import Enum


# ─── Limits ──────────────────────────────────────────────────────

MAX_TAGS_PER_PHOTO: int = 5
MAX_TAG_LENGTH: int = 20
MAX_REVIEW_LENGTH: int = 500
TOP_MOVIES_LIMIT: int = 5
CAST_LIMIT: int = 5


# ─── Enums ───────────────────────────────────────────────────────

class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class ListType(str, Enum):
    """Movie collections a movie can be a member of."""
    WATCHLIST = "watchlist"
    WISHLIST = "wishlist"
    CURATED_LIST = "curatedList"


class MovieSortKey(str, Enum):
    RATING = "rating"
    RELEASE_YEAR = "releaseYear"


class FolderType(str, Enum):
    """File kinds a folder may hold; a folder accepts only its own kind."""
    CSV = "csv"
    IMG = "img"
    PDF = "pdf"
    PPT = "ppt"
