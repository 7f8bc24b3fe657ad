"""Tests for blogbuild.content."""

import pytest

from blogbuild.content import (
    MissingFrontmatterError,
    count_words,
    parse_front_matter,
    parse_tags,
    reading_time,
)


class TestParseFrontMatter:
    def test_header_and_body(self):
        meta, body = parse_front_matter("---\ntitle: Hello\ndate: 2024-05-01\n---\n# Heading\n\nText\n")
        assert meta == {"title": "Hello", "date": "2024-05-01"}
        assert body == "# Heading\n\nText\n"

    def test_strips_one_pair_of_double_quotes(self):
        meta, _ = parse_front_matter('---\ntitle: "Hello"\nquote: ""nested""\n---\nbody')
        assert meta["title"] == "Hello"
        assert meta["quote"] == '"nested"'

    def test_single_quotes_are_kept(self):
        meta, _ = parse_front_matter("---\ntitle: 'Hello'\n---\nbody")
        assert meta["title"] == "'Hello'"

    def test_splits_on_first_colon_only(self):
        meta, _ = parse_front_matter("---\ndescription: Time: 10:30\n---\nbody")
        assert meta["description"] == "Time: 10:30"

    def test_trims_keys_and_values(self):
        meta, _ = parse_front_matter("---\n  title  :   Spaced out   \n---\nbody")
        assert meta == {"title": "Spaced out"}

    def test_lines_without_colon_are_ignored(self):
        meta, _ = parse_front_matter("---\njust some words\ntitle: Kept\n\n---\nbody")
        assert meta == {"title": "Kept"}

    def test_keys_are_case_sensitive(self):
        meta, _ = parse_front_matter("---\nreadTime: 4\n---\nbody")
        assert meta == {"readTime": "4"}

    def test_empty_header(self):
        meta, body = parse_front_matter("---\n---\nbody")
        assert meta == {}
        assert body == "body"

    def test_empty_body(self):
        meta, body = parse_front_matter("---\ntitle: Only header\n---\n")
        assert meta == {"title": "Only header"}
        assert body == ""

    def test_file_ending_at_closing_delimiter(self):
        meta, body = parse_front_matter("---\ntitle: x\n---")
        assert meta == {"title": "x"}
        assert body == ""

    def test_windows_line_endings_and_bom(self):
        meta, body = parse_front_matter("\ufeff---\r\ntitle: Win\r\n---\r\nline\r\n")
        assert meta == {"title": "Win"}
        assert body == "line\n"

    def test_later_delimiters_belong_to_body(self):
        _, body = parse_front_matter("---\ntitle: x\n---\nabove\n---\nbelow\n")
        assert body == "above\n---\nbelow\n"

    def test_scalar_values_round_trip(self):
        values = {"title": "A: B", "description": "plain text", "date": "2024-01-02", "slug": "a-b"}
        text = "---\n" + "\n".join(f'{k}: "{v}"' for k, v in values.items()) + "\n---\n"
        meta, _ = parse_front_matter(text)
        assert meta == values

    def test_missing_closing_delimiter_raises(self):
        with pytest.raises(MissingFrontmatterError):
            parse_front_matter("---\ntitle: Broken\n\nNo closing line\n")

    def test_missing_header_raises(self):
        with pytest.raises(MissingFrontmatterError):
            parse_front_matter("# Just markdown\n")

    def test_header_must_start_the_file(self):
        with pytest.raises(MissingFrontmatterError):
            parse_front_matter("intro\n---\ntitle: x\n---\nbody")

    def test_delimiter_must_be_alone_on_its_line(self):
        with pytest.raises(MissingFrontmatterError):
            parse_front_matter("---\ntitle: x\n----\nbody")

    def test_error_is_a_value_error(self):
        assert issubclass(MissingFrontmatterError, ValueError)


class TestParseTags:
    def test_trims_entries(self):
        assert parse_tags("a, b ,c") == ["a", "b", "c"]

    def test_empty_and_missing(self):
        assert parse_tags("") == []
        assert parse_tags(None) == []

    def test_drops_blank_entries(self):
        assert parse_tags("a,, ,b,") == ["a", "b"]

    def test_keeps_order(self):
        assert parse_tags("zeta, alpha") == ["zeta", "alpha"]


class TestReadingTime:
    def test_count_words_on_any_whitespace(self):
        assert count_words("one  two\tthree\nfour") == 4
        assert count_words("   ") == 0

    def test_four_hundred_words(self):
        assert reading_time("word " * 400) == 2

    def test_one_word(self):
        assert reading_time("word") == 1

    def test_empty_body_is_one_minute(self):
        assert reading_time("") == 1

    def test_rounds_up(self):
        assert reading_time("word " * 201) == 2
        assert reading_time("word " * 600) == 3

    def test_custom_speed(self):
        assert reading_time("word " * 100, words_per_minute=50) == 2
