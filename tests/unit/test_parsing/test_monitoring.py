"""
Unit tests for the monitoring-format tokenizer.
"""

import logging

import pytest

from eosmon.parsing import format_line, split_lines, split_tokens, tokenize


@pytest.mark.unit
class TestTokenize:
    """Test cases for tokenize()."""

    def test_plain_and_quoted_values(self):
        """Double-quoted values keep embedded whitespace without the quotes."""
        kv = tokenize('hostport=fst01:1095 status=online stat.errmsg="disk full" nofs=12')

        assert kv == {
            "hostport": "fst01:1095",
            "status": "online",
            "stat.errmsg": "disk full",
            "nofs": "12",
        }

    def test_single_quotes(self):
        kv = tokenize("a='x  y' b=2")

        assert kv == {"a": "x  y", "b": "2"}

    def test_other_quote_char_is_literal_inside_quotes(self):
        kv = tokenize("""msg='say "hi"' next="it's" """)

        assert kv == {"msg": 'say "hi"', "next": "it's"}

    def test_whitespace_runs_and_tabs(self):
        kv = tokenize("  a=1 \t b=2   ")

        assert kv == {"a": "1", "b": "2"}

    def test_empty_line(self):
        assert tokenize("") == {}
        assert tokenize("   ") == {}

    def test_split_on_first_equals(self):
        """Values may contain '=' themselves."""
        assert tokenize("url=root://host//path?x=1") == {"url": "root://host//path?x=1"}

    def test_empty_value(self):
        assert tokenize("a= b=2") == {"a": "", "b": "2"}

    def test_last_key_wins(self):
        kv = tokenize("a=1 b=2 a=3")

        assert kv == {"a": "3", "b": "2"}
        assert list(kv) == ["a", "b"]

    def test_token_without_separator_is_skipped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="eosmon.parsing.monitoring"):
            kv = tokenize("a=1 garbage b=2")

        assert kv == {"a": "1", "b": "2"}
        assert "garbage" in caplog.text

    def test_unterminated_quote_runs_to_end_of_line(self):
        assert tokenize('a="open value b=2') == {"a": "open value b=2"}

    def test_special_characters_in_keys(self):
        kv = tokenize("sum.<n>?configstatus@rw=90 sum.stat.disk.iops?configstatus@rw=12")

        assert kv["sum.<n>?configstatus@rw"] == "90"
        assert kv["sum.stat.disk.iops?configstatus@rw"] == "12"


@pytest.mark.unit
class TestSplitHelpers:
    """Test cases for split_tokens() and split_lines()."""

    def test_split_tokens_keeps_quoted_whitespace(self):
        assert split_tokens('a=1 b="x y"') == ["a=1", "b=x y"]

    def test_empty_quotes_produce_token(self):
        assert split_tokens('a="" b=1') == ["a=", "b=1"]

    def test_split_lines_skips_blank_lines(self):
        raw = "a=1\n\n   \nb=2\r\nc=3"

        assert list(split_lines(raw)) == ["a=1", "b=2", "c=3"]

    @pytest.mark.parametrize("separator", ["\x0b", "\x0c", "\x1c", "\x1e", "\x85", "\u2028"])
    def test_split_lines_only_breaks_on_line_feed(self, separator):
        raw = f'a="x{separator}y" b=1\nc=2\n'

        lines = list(split_lines(raw))

        assert lines == [f'a="x{separator}y" b=1', "c=2"]
        assert tokenize(lines[0]) == {"a": f"x{separator}y", "b": "1"}


@pytest.mark.unit
class TestFormatLine:
    """Test cases for format_line()."""

    @pytest.mark.parametrize(
        "mapping",
        [
            {"hostport": "fst01:1095", "status": "online"},
            {"stat.errmsg": "disk full", "note": 'said "no"'},
            {"a": "", "b": "it's"},
        ],
    )
    def test_tokenize_inverts_format_line(self, mapping):
        assert tokenize(format_line(mapping)) == mapping

    def test_plain_values_are_not_quoted(self):
        assert format_line({"a": "1", "b": "x"}) == "a=1 b=x"

    def test_key_with_equals_is_rejected(self):
        with pytest.raises(ValueError):
            format_line({"a=b": "1"})

    def test_value_with_both_quotes_is_rejected(self):
        with pytest.raises(ValueError):
            format_line({"a": "\"it's\""})
