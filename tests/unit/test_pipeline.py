"""
Unit tests for the parse / parse_reply entry points.
"""
import logging

import pytest

from mailstrip.config import settings
from mailstrip.exceptions import LineTooLongError
from mailstrip.models.parsed_email import Email
from mailstrip.parsing.pipeline import parse, parse_reply


class TestParse:
    """Tests for parse()."""

    def test_returns_email(self, plain_body):
        email = parse(plain_body)
        assert isinstance(email, Email)
        assert len(email) == 1
        assert email[0].content == plain_body
        assert not email[0].hidden

    def test_top_post(self, parsed_top_post):
        assert [f.quoted for f in parsed_top_post] == [False, False, True, False]
        assert [f.signature for f in parsed_top_post] == [False, True, False, False]
        assert [f.hidden for f in parsed_top_post] == [False, True, True, True]
        assert parsed_top_post[0].content == "Yeah, that works!\n"
        assert parsed_top_post[1].content == "-Bob"
        assert parsed_top_post[2].content.startswith("\nOn 01/03/11 7:07 PM, Alice wrote:\n> Hi Bob,")
        assert parsed_top_post[3].content == ""
        assert str(parsed_top_post) == "Yeah, that works!"

    def test_empty_body(self):
        email = parse("")
        assert len(email) == 1
        assert email[0].content == ""
        assert email[0].hidden
        assert str(email) == ""

    def test_crlf_matches_lf(self, top_post_body):
        crlf = parse(top_post_body.replace("\n", "\r\n"))
        lf = parse(top_post_body)
        assert [f.content for f in crlf] == [f.content for f in lf]
        assert [f.hidden for f in crlf] == [f.hidden for f in lf]

    def test_trailing_whitespace_dropped(self):
        email = parse("Hello   \nworld\t\n")
        assert email[0].content == "Hello\nworld\n"

    def test_nested_headers_flattened_into_quoted_fragment(self):
        email = parse("Hi\n\nOn Mon, Ann wrote:\n> a\n> \n> On Sun, Bob wrote:\n>> b\n")
        assert [f.content for f in email] == [
            "Hi",
            "\nOn Mon, Ann wrote:> a> > On Sun, Bob wrote:\n>> b",
            "",
        ]
        assert [f.quoted for f in email] == [False, True, False]
        assert str(email) == "Hi"

    def test_separator_controls_are_not_trimmed(self):
        email = parse("x\x1c\n\n> q\n")
        assert email[0].content == "x\x1c"
        assert str(email) == "x\x1c"

    def test_every_fragment_finished(self, parsed_top_post):
        assert all(f.finished for f in parsed_top_post)
        assert all(f.lines == [] for f in parsed_top_post)

    def test_deterministic(self, top_post_body):
        first = parse(top_post_body)
        second = parse(top_post_body)
        assert [f.to_dict() for f in first] == [f.to_dict() for f in second]


class TestLineLimit:

    def test_explicit_limit(self):
        with pytest.raises(LineTooLongError) as exc_info:
            parse("ok\n" + "x" * 33, max_line_bytes=32)
        assert exc_info.value.line_number == 2
        assert exc_info.value.size == 33
        assert exc_info.value.limit == 32

    def test_default_limit_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "MAX_LINE_BYTES", 16)
        with pytest.raises(LineTooLongError) as exc_info:
            parse("y" * 17)
        assert exc_info.value.limit == 16

    def test_default_limit_is_64_kib(self):
        body = "z" * (64 * 1024)
        assert parse(body)[0].content == body
        with pytest.raises(LineTooLongError):
            parse(body + "z")

    def test_failure_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="mailstrip.parsing.pipeline"):
            with pytest.raises(LineTooLongError):
                parse("x" * 10, max_line_bytes=5)
        assert "Parse aborted" in caplog.text


class TestParseReply:

    def test_visible_reply(self, top_post_body):
        assert parse_reply(top_post_body) == "Yeah, that works!"

    def test_limit_passed_through(self):
        with pytest.raises(LineTooLongError):
            parse_reply("x" * 10, max_line_bytes=5)
