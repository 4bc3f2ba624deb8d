"""ORM Models - SQLAlchemy declarative models for all three backends.

Invariants:
    - All models inherit from Base (db/base.py)
    - Child rows (tags, memberships, reviews, files) cascade on parent delete

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs (ADR: standard SQLAlchemy pattern)
"""

from mediashelf.models.user import User  # noqa: F401
from mediashelf.models.photo import Photo  # noqa: F401
from mediashelf.models.tag import Tag  # noqa: F401
from mediashelf.models.search_history import SearchHistory  # noqa: F401
from mediashelf.models.movie import Movie  # noqa: F401
from mediashelf.models.watchlist import Watchlist  # noqa: F401
from mediashelf.models.wishlist import Wishlist  # noqa: F401
from mediashelf.models.curated_list import CuratedList  # noqa: F401
from mediashelf.models.curated_list_item import CuratedListItem  # noqa: F401
from mediashelf.models.review import Review  # noqa: F401
from mediashelf.models.folder import Folder  # noqa: F401
from mediashelf.models.file import File  # noqa: F401
