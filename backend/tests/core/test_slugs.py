"""Slug generation - name-derived base plus a random base36 suffix."""

import random
import re

from mediashelf.core.slugs import SUFFIX_LENGTH, generate_slug, random_suffix, slugify


def test_slugify_lowercases_and_hyphenates():
    assert slugify("Best Sci-Fi of 2010!") == "best-sci-fi-of-2010"


def test_slugify_collapses_whitespace_and_hyphens():
    assert slugify("  Noir   --  Classics ") == "noir-classics"


def test_random_suffix_is_base36():
    suffix = random_suffix(random.Random(7))
    assert len(suffix) == SUFFIX_LENGTH
    assert re.fullmatch(r"[a-z0-9]+", suffix)


def test_generate_slug_is_deterministic_with_seeded_rng():
    a = generate_slug("Weekend Picks", random.Random(42))
    b = generate_slug("Weekend Picks", random.Random(42))
    assert a == b
    assert a.startswith("weekend-picks-")


def test_generate_slug_for_punctuation_only_name_is_just_suffix():
    slug = generate_slug("!!!", random.Random(1))
    assert len(slug) == SUFFIX_LENGTH
