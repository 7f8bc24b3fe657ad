from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

try:
    import markdown  # noqa: F401
except ImportError:
    print("Missing dependency: markdown. Install with pip install markdown", file=sys.stderr)
    sys.exit(1)

from .config import DEFAULT_CONFIG, BuildConfig, load_config
from .models import PostRecord
from .pages import build_index, render_post_file
from .utils import parse_int


def build_site(config: BuildConfig) -> list[PostRecord]:
    posts_dir = config.posts_dir
    output_dir = config.output_dir

    if not posts_dir.is_dir():
        print(f"Posts directory not found: {posts_dir}", file=sys.stderr)
        sys.exit(1)
    if not config.template.is_file():
        print(f"Template file not found: {config.template}", file=sys.stderr)
        sys.exit(1)

    output_dir.mkdir(parents=True, exist_ok=True)

    post_files = sorted(
        (path for path in posts_dir.iterdir() if path.is_file() and path.suffix == ".md"),
        key=lambda p: p.name,
    )
    if not post_files:
        print(f"No markdown files found in {posts_dir}")
        return []

    posts: list[PostRecord] = []
    seen_slugs: set[str] = set()
    for md_file in post_files:
        post = render_post_file(md_file, config)
        if post is None:
            continue
        if post.slug in seen_slugs:
            print(f"Warning: slug {post.slug!r} from {md_file.name} overwrote an earlier post", file=sys.stderr)
            posts = [item for item in posts if item.slug != post.slug]
        seen_slugs.add(post.slug)
        posts.append(post)

    if posts:
        build_index(posts, config)
    return posts


def main(argv: list[str] | None = None) -> None:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG,
        help="Path to blog config file (TOML/YAML/JSON).",
    )
    pre_args, _ = pre_parser.parse_known_args(argv)
    config = load_config(Path(pre_args.config))
    defaults = BuildConfig()

    def cfg_str(key: str, default: object) -> str:
        value = config.get(key)
        return str(default) if value is None else str(value)

    parser = argparse.ArgumentParser(description="Build HTML pages and an index from markdown blog posts.")
    parser.add_argument("--config", default=pre_args.config, help="Path to blog config file (TOML/YAML/JSON).")
    parser.add_argument("--posts", default=cfg_str("posts", defaults.posts_dir), help="Directory containing Markdown posts.")
    parser.add_argument("--output", default=cfg_str("output", defaults.output_dir), help="Output directory for HTML files.")
    parser.add_argument(
        "--template",
        default=cfg_str("template", defaults.template),
        help="HTML template used for every post.",
    )
    parser.add_argument("--site-name", default=cfg_str("site_name", defaults.site_name), help="Index page title.")
    parser.add_argument(
        "--site-description",
        default=cfg_str("site_description", defaults.site_description),
        help="Index page description.",
    )
    parser.add_argument(
        "--back-link",
        default=cfg_str("back_link", defaults.back_link),
        help="URL of the back link in the index header.",
    )
    parser.add_argument(
        "--back-link-text",
        default=cfg_str("back_link_text", defaults.back_link_text),
        help="Label of the back link in the index header.",
    )
    parser.add_argument(
        "--words-per-minute",
        default=parse_int(config.get("words_per_minute"), defaults.words_per_minute),
        type=int,
        help="Reading speed used to estimate read time.",
    )
    args = parser.parse_args(argv)

    build_config = BuildConfig(
        posts_dir=Path(args.posts),
        output_dir=Path(args.output),
        template=Path(args.template),
        site_name=args.site_name,
        site_description=args.site_description,
        back_link=args.back_link,
        back_link_text=args.back_link_text,
        words_per_minute=args.words_per_minute,
    )
    print("Building blog...")
    start = time.perf_counter()
    posts = build_site(build_config)
    elapsed = time.perf_counter() - start
    print(f"Blog build complete! Generated {len(posts)} posts.")
    print(f"Files created in: {build_config.output_dir.resolve()}")
    print(f"Build completed in {elapsed:.2f}s.")
