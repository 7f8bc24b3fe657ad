from __future__ import annotations

import math
import re

FRONT_MATTER_RE = re.compile(
    r"\A---[ \t]*\n(?P<header>.*?)^---[ \t]*$\n?(?P<body>.*)\Z",
    re.DOTALL | re.MULTILINE,
)
WORDS_PER_MINUTE = 200


class MissingFrontmatterError(ValueError):
    """Raised when a post does not open with a ``---`` delimited header."""

    def __init__(self, message: str = "No frontmatter found") -> None:
        super().__init__(message)


def strip_quotes(value: str) -> str:
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


def parse_front_matter(text: str) -> tuple[dict[str, str], str]:
    """Split post text into its header mapping and the raw markdown body.

    The header sits between two lines holding only ``---``. Each header line
    is split on its first colon; lines without a colon are skipped.
    """
    clean_text = text.lstrip("\ufeff").replace("\r\n", "\n")
    match = FRONT_MATTER_RE.match(clean_text)
    if match is None:
        raise MissingFrontmatterError()

    meta: dict[str, str] = {}
    for line in match.group("header").split("\n"):
        if ":" not in line:
            continue
        key, value = line.split(":", 1)
        meta[key.strip()] = strip_quotes(value.strip())
    return meta, match.group("body")


def parse_tags(value: str | None) -> list[str]:
    if not value:
        return []
    items = [item.strip() for item in value.split(",")]
    return [item for item in items if item]


def count_words(text: str) -> int:
    return len(text.split())


def reading_time(text: str, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    words_per_minute = max(1, words_per_minute)
    return max(1, math.ceil(count_words(text) / words_per_minute))
