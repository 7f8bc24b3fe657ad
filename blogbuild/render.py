from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path
from typing import Iterable, Mapping, Sequence

import markdown

from .highlight import CODE_FENCES

PLACEHOLDER_PATTERN = r"\{\{(?P<key>\w+)\}\}"
TAG_JOINER = "\n                    "
MARKDOWN_EXTENSIONS = [
    "tables",
    "sane_lists",
    "nl2br",
    "pymdownx.superfences",
    "pymdownx.tilde",
    "pymdownx.magiclink",
    "pymdownx.tasklist",
]
MARKDOWN_EXTENSION_CONFIGS = {
    "pymdownx.superfences": {"custom_fences": CODE_FENCES},
    "pymdownx.tilde": {"subscript": False},
}


def markdown_to_html(text: str) -> str:
    md = markdown.Markdown(
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs=MARKDOWN_EXTENSION_CONFIGS,
    )
    return md.convert(text)


def render_tag_chips(tags: Sequence[str], joiner: str = TAG_JOINER) -> str:
    return joiner.join(f'<span class="tag">{tag}</span>' for tag in tags)


def template_token_re(list_names: Iterable[str]) -> re.Pattern:
    names = "|".join(re.escape(name) for name in list_names)
    if not names:
        return re.compile(PLACEHOLDER_PATTERN)
    each_pattern = r"\{\{#each (?P<list>" + names + r")\}\}.*?\{\{/each\}\}"
    return re.compile(f"{each_pattern}|{PLACEHOLDER_PATTERN}", re.DOTALL)


def render_template(
    template: str,
    context: Mapping[str, str],
    lists: Mapping[str, Sequence[str]] | None = None,
) -> str:
    """Fill ``{{key}}`` placeholders and ``{{#each name}}`` blocks in one scan.

    Replacement text is never scanned again, so a value that itself looks
    like a placeholder comes out literally. Unknown keys and ``each`` blocks
    over lists that were not passed in are left as they are. A known
    ``each`` block becomes one tag chip per item, or nothing for an empty
    list.
    """
    lists = lists or {}

    def repl(match: re.Match) -> str:
        list_name = match.groupdict().get("list")
        if list_name is not None:
            return render_tag_chips(lists[list_name])
        key = match.group("key")
        if key in context:
            return context[key]
        return match.group(0)

    return template_token_re(lists).sub(repl, template)


def read_template(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def write_text(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` through a sibling temp file and an atomic rename."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
