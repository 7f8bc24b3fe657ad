from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PostRecord:
    title: str
    description: str
    date: str
    read_time: int
    tags: tuple[str, ...] = ()
    slug: str = ""
    content: str = ""
    output_file: str = ""
