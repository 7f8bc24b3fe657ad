from __future__ import annotations

import datetime as dt
import html
import sys
from pathlib import Path
from typing import Optional

from .config import BuildConfig
from .content import parse_front_matter, parse_tags, reading_time
from .models import PostRecord
from .render import markdown_to_html, read_template, render_template, write_text
from .utils import format_display_date, parse_positive_int, parse_sort_date

INDEX_FILE = "index.html"

INDEX_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{site_name}}</title>
    <meta name="description" content="{{site_description}}">
    <style>
        @import url('https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@300;400;500;600;700&family=Inter:wght@300;400;500;600;700&display=swap');

        :root {
            --terminal-bg: #0d1117;
            --terminal-dark: #010409;
            --terminal-border: #21262d;
            --terminal-text: #c9d1d9;
            --terminal-text-dim: #8b949e;
            --accent-cyan: #39d0d8;
            --card-bg: #161b22;
            --card-border: #30363d;
            --terminal-green: #56d364;
        }

        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }

        body {
            font-family: 'Inter', 'JetBrains Mono', monospace;
            background: var(--terminal-bg);
            color: var(--terminal-text);
            line-height: 1.6;
            min-height: 100vh;
        }

        .container {
            max-width: 900px;
            margin: 0 auto;
            padding: 0 20px;
        }

        header {
            background: var(--terminal-dark);
            border-bottom: 1px solid var(--terminal-border);
            padding: 2rem 0;
            text-align: center;
        }

        .blog-title {
            font-size: 2.5rem;
            font-weight: 700;
            margin-bottom: 1rem;
        }

        .blog-description {
            font-size: 1.1rem;
            color: var(--terminal-text-dim);
            margin-bottom: 2rem;
        }

        .back-link {
            color: var(--accent-cyan);
            text-decoration: none;
            font-family: 'JetBrains Mono', monospace;
        }

        .back-link::before {
            content: '\\2190  ';
        }

        .posts {
            padding: 3rem 0;
        }

        .post-card {
            background: var(--card-bg);
            border: 1px solid var(--card-border);
            border-radius: 8px;
            padding: 2rem;
            margin-bottom: 2rem;
            transition: border-color 0.3s ease;
        }

        .post-card:hover {
            border-color: var(--accent-cyan);
        }

        .post-title {
            font-size: 1.5rem;
            font-weight: 600;
            margin-bottom: 0.5rem;
        }

        .post-title a {
            color: inherit;
            text-decoration: none;
        }

        .post-title a:hover {
            color: var(--accent-cyan);
        }

        .post-meta {
            display: flex;
            gap: 1rem;
            margin-bottom: 1rem;
            font-size: 0.9rem;
            color: var(--terminal-text-dim);
        }

        .post-description {
            color: var(--terminal-text-dim);
            margin-bottom: 1rem;
        }

        .post-tags {
            display: flex;
            gap: 0.5rem;
            flex-wrap: wrap;
        }

        .tag {
            background: rgba(57, 208, 216, 0.1);
            color: var(--accent-cyan);
            padding: 0.2rem 0.6rem;
            border-radius: 12px;
            font-size: 0.8rem;
            font-family: 'JetBrains Mono', monospace;
        }

        .read-more {
            color: var(--accent-cyan);
            text-decoration: none;
            font-weight: 500;
            margin-top: 1rem;
            display: inline-block;
        }

        .read-more::after {
            content: ' \\2192';
        }

        @media (max-width: 768px) {
            .blog-title {
                font-size: 2rem;
            }

            .post-meta {
                flex-direction: column;
                gap: 0.5rem;
            }
        }
    </style>
</head>
<body>
    <header>
        <div class="container">
            <h1 class="blog-title">{{site_name}}</h1>
            <p class="blog-description">{{site_description}}</p>
            <a href="{{back_link}}" class="back-link">{{back_link_text}}</a>
        </div>
    </header>

    <main class="posts">
        <div class="container">
{{posts}}
        </div>
    </main>
</body>
</html>
"""


class UnsafeSlugError(ValueError):
    pass


def check_slug(slug: str) -> str:
    if not slug or slug in {".", ".."} or "/" in slug or "\\" in slug:
        raise UnsafeSlugError(f"Unsafe slug: {slug!r}")
    return slug


def build_post(md_file: Path, config: BuildConfig) -> PostRecord:
    """Render one markdown post into ``<slug>.html`` and return its record.

    Errors propagate to the caller; the output file is only written once the
    whole page has been rendered.
    """
    raw_text = md_file.read_text(encoding="utf-8")
    meta, body = parse_front_matter(raw_text)
    html_content = markdown_to_html(body)

    read_time = parse_positive_int(meta.get("readTime"))
    if read_time is None:
        read_time = reading_time(body, config.words_per_minute)
    title = meta.get("title") or "Untitled"
    description = meta.get("description") or ""
    date = meta.get("date") or config.current_date().isoformat()
    tags_value = meta.get("tags") or ""
    tags = parse_tags(tags_value)
    slug = check_slug(meta.get("slug") or md_file.stem)

    template = read_template(config.template)
    html_doc = render_template(
        template,
        {
            "title": title,
            "description": description,
            "date": date,
            "readTime": str(read_time),
            "tags": tags_value,
            "slug": slug,
            "content": html_content,
        },
        lists={"tagList": tags},
    )

    output_file = f"{slug}.html"
    write_text(config.output_dir / output_file, html_doc)
    return PostRecord(
        title=title,
        description=description,
        date=date,
        read_time=read_time,
        tags=tuple(tags),
        slug=slug,
        content=html_content,
        output_file=output_file,
    )


def render_post_file(md_file: Path, config: BuildConfig) -> Optional[PostRecord]:
    print(f"Processing {md_file.name}...")
    try:
        post = build_post(md_file, config)
    except Exception as exc:
        print(f"Error processing {md_file.name}: {exc}", file=sys.stderr)
        return None
    print(f"Generated {config.output_dir / post.output_file}")
    return post


def sort_posts(posts: list[PostRecord]) -> list[PostRecord]:
    return sorted(posts, key=lambda post: parse_sort_date(post.date), reverse=True)


def build_post_cards(posts: list[PostRecord]) -> str:
    cards = []
    for post in posts:
        url = post.output_file
        sort_date = parse_sort_date(post.date)
        datetime_attr = sort_date.isoformat() if sort_date != dt.date.min else post.date
        tag_chips = "".join(f'<span class="tag">{tag}</span>' for tag in post.tags)
        cards.append(
            '            <article class="post-card">\n'
            '                <h2 class="post-title">\n'
            f'                    <a href="{url}">{post.title}</a>\n'
            "                </h2>\n"
            '                <div class="post-meta">\n'
            f'                    <span><time datetime="{datetime_attr}">'
            f"{format_display_date(post.date)}</time></span>\n"
            f"                    <span>{post.read_time} min read</span>\n"
            "                </div>\n"
            f'                <p class="post-description">{post.description}</p>\n'
            f'                <div class="post-tags">{tag_chips}</div>\n'
            f'                <a href="{url}" class="read-more">Read Article</a>\n'
            "            </article>"
        )
    return "\n".join(cards)


def build_index(posts: list[PostRecord], config: BuildConfig) -> Path:
    """Write ``index.html`` listing ``posts`` newest first.

    Posts sharing a date keep their input order; dates that do not parse
    sort after every valid one. Callers skip this when nothing rendered.
    """
    print("Generating blog index...")
    html_doc = render_template(
        INDEX_TEMPLATE,
        {
            "site_name": html.escape(config.site_name),
            "site_description": html.escape(config.site_description),
            "back_link": html.escape(config.back_link),
            "back_link_text": html.escape(config.back_link_text),
            "posts": build_post_cards(sort_posts(posts)),
        },
    )
    index_path = config.output_dir / INDEX_FILE
    write_text(index_path, html_doc)
    print(f"Generated {index_path}")
    return index_path
