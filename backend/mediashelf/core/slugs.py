"""Slug generation for curated lists.

A slug is the lowercased name with punctuation removed and whitespace collapsed
to single hyphens, followed by a random 6-character base36 suffix.
"""

import random
import re
import string

SUFFIX_LENGTH = 6
_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits


def slugify(name: str) -> str:
    slug = re.sub(r"[^\w\s-]", "", name.lower())
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def random_suffix(rng: random.Random | None = None) -> str:
    rng = rng or random
    return "".join(rng.choice(_SUFFIX_ALPHABET) for _ in range(SUFFIX_LENGTH))


def generate_slug(name: str, rng: random.Random | None = None) -> str:
    base = slugify(name)
    suffix = random_suffix(rng)
    return f"{base}-{suffix}" if base else suffix
