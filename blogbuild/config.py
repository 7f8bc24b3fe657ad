from __future__ import annotations

import datetime as dt
import json
import sys
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from .content import WORDS_PER_MINUTE

DEFAULT_CONFIG = "blog.toml"
CONFIG_KEYS = {
    "posts",
    "output",
    "template",
    "site_name",
    "site_description",
    "back_link",
    "back_link_text",
    "words_per_minute",
}


@dataclass
class BuildConfig:
    """Everything a build needs, resolved up front by the caller."""

    posts_dir: Path = Path("blog/posts")
    output_dir: Path = Path("blog")
    template: Path = Path("blog/template.html")
    site_name: str = "Technical Blog"
    site_description: str = (
        "Articles about systems engineering, infrastructure automation, and software development"
    )
    back_link: str = "../index.html"
    back_link_text: str = "Back to Portfolio"
    words_per_minute: int = WORDS_PER_MINUTE
    today: Optional[dt.date] = field(default=None)

    def __post_init__(self) -> None:
        self.posts_dir = Path(self.posts_dir)
        self.output_dir = Path(self.output_dir)
        self.template = Path(self.template)

    def current_date(self) -> dt.date:
        return self.today or dt.date.today()


def parse_config_text(text: str, suffix: str) -> object:
    if suffix == ".toml":
        return tomllib.loads(text)
    if suffix in {".yml", ".yaml"}:
        return yaml.safe_load(text) or {}
    return json.loads(text)


def load_config(path: Path) -> dict:
    """Read CLI defaults from a TOML, YAML or JSON file; a missing file means none."""
    if not path.exists():
        return {}
    try:
        data = parse_config_text(path.read_text(encoding="utf-8"), path.suffix.lower())
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as exc:
        print(f"Invalid config file {path}: {exc}", file=sys.stderr)
        sys.exit(1)
    if not isinstance(data, dict):
        print(f"Config file must be a mapping: {path}", file=sys.stderr)
        sys.exit(1)
    unknown = sorted(set(data) - CONFIG_KEYS)
    if unknown:
        print(f"Ignoring unknown keys in {path}: {', '.join(unknown)}", file=sys.stderr)
    return {key: value for key, value in data.items() if key in CONFIG_KEYS}
