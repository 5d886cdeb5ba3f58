from typing import Callable

from slugify import slugify

SLUG_MAX_LENGTH = 80


def unique_slug(text: str, exists: Callable[[str], bool]) -> str:
    """Slug for ``text``, suffixed ``-2``, ``-3``... until ``exists`` says it is free.

    Non-Latin titles are transliterated to ASCII.
    """
    base = slugify(text, max_length=SLUG_MAX_LENGTH, word_boundary=True) or "untitled"
    candidate = base
    suffix = 2
    while exists(candidate):
        candidate = f"{base}-{suffix}"
        suffix += 1
    return candidate
