"""Shared fixtures for blogbuild tests."""

import datetime as dt

import pytest

from blogbuild.config import BuildConfig

TEMPLATE = """<html>
<head><title>{{title}}</title><meta name="description" content="{{description}}"></head>
<body>
<p class="meta">{{date}} | {{readTime}} min | {{tags}} | {{slug}}</p>
<div class="tags">{{#each tagList}}<span class="tag">{{this}}</span>{{/each}}</div>
<article>{{content}}</article>
</body>
</html>
"""


def make_post(front_matter: dict, body: str = "Hello world.\n") -> str:
    header = "\n".join(f"{key}: {value}" for key, value in front_matter.items())
    return f"---\n{header}\n---\n{body}"


@pytest.fixture
def blog(tmp_path):
    """A posts directory, a template and an output directory under tmp_path."""
    posts_dir = tmp_path / "posts"
    posts_dir.mkdir()
    template = tmp_path / "template.html"
    template.write_text(TEMPLATE, encoding="utf-8")
    return BuildConfig(
        posts_dir=posts_dir,
        output_dir=tmp_path / "out",
        template=template,
        today=dt.date(2024, 6, 15),
    )


@pytest.fixture
def write_post(blog):
    def _write(name: str, front_matter: dict, body: str = "Hello world.\n"):
        path = blog.posts_dir / name
        path.write_text(make_post(front_matter, body), encoding="utf-8")
        return path

    return _write
