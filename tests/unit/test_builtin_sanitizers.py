"""
Unit tests for the built-in transformation table
(field_sanitizer.builtin_sanitizers).

Checks the PHP-style helpers whose behaviour differs from the nearest
``str`` method, and the shape of the table itself.
"""

from __future__ import annotations

import pytest

from field_sanitizer.builtin_sanitizers import (
    BUILTIN_SANITIZERS,
    addslashes,
    base64_decode,
    base64_encode,
    boolval,
    floatval,
    intval,
    lcfirst,
    ltrim,
    nl2br,
    rtrim,
    strip_tags,
    stripslashes,
    trim,
    ucfirst,
    ucwords,
)


class TestTable:
    """Tests for the BUILTIN_SANITIZERS mapping."""

    @pytest.mark.parametrize(
        "name",
        ["strtolower", "strtoupper", "trim", "ucwords", "lower", "strip", "title", "int"],
    )
    def test_known_names_present(self, name):
        assert name in BUILTIN_SANITIZERS
        assert callable(BUILTIN_SANITIZERS[name])

    def test_read_only(self):
        with pytest.raises(TypeError):
            BUILTIN_SANITIZERS["evil"] = str.upper  # type: ignore[index]

    def test_case_sensitive(self):
        assert "StrToLower" not in BUILTIN_SANITIZERS

    def test_aliases_agree(self):
        assert BUILTIN_SANITIZERS["strtolower"]("AbC") == BUILTIN_SANITIZERS["lower"]("AbC")
        assert BUILTIN_SANITIZERS["strtoupper"]("AbC") == BUILTIN_SANITIZERS["upper"]("AbC")


class TestTrim:
    """Tests for trim/ltrim/rtrim."""

    def test_trim_whitespace_and_nul(self):
        assert trim(" \t\n\r\0\x0bvalue\x0b\0 \n") == "value"

    def test_trim_leaves_inner_whitespace(self):
        assert trim("  a  b  ") == "a  b"

    def test_trim_keeps_form_feed(self):
        """Form feed is not in the trim set."""
        assert trim("\fx\f") == "\fx\f"

    def test_ltrim_rtrim(self):
        assert ltrim("  x  ") == "x  "
        assert rtrim("  x  ") == "  x"


class TestCase:
    """Tests for ucfirst/lcfirst/ucwords."""

    def test_ucfirst(self):
        assert ucfirst("hello world") == "Hello world"
        assert ucfirst("") == ""

    def test_lcfirst(self):
        assert lcfirst("Hello World") == "hello World"

    def test_ucwords(self):
        assert ucwords("hello big world") == "Hello Big World"

    def test_ucwords_keeps_leading_whitespace(self):
        assert ucwords("  john") == "  John"

    def test_ucwords_does_not_lowercase(self):
        """Only first letters change, unlike str.title."""
        assert ucwords("mcDonald's o'neil") == "McDonald's O'neil"

    def test_ucwords_mixed_whitespace(self):
        assert ucwords("a\tb\nc") == "A\tB\nC"


class TestMarkup:
    """Tests for strip_tags/nl2br/addslashes/stripslashes."""

    def test_strip_tags(self):
        assert strip_tags("<p>Hello <b>there</b></p>") == "Hello there"

    def test_nl2br(self):
        assert nl2br("a\nb\r\nc") == "a<br />\nb<br />\r\nc"

    def test_htmlspecialchars(self):
        fn = BUILTIN_SANITIZERS["htmlspecialchars"]
        assert fn('<a href="x">') == "&lt;a href=&quot;x&quot;&gt;"

    def test_addslashes(self):
        assert addslashes("O'Re\"il\\ly") == "O\\'Re\\\"il\\\\ly"

    def test_stripslashes_reverses_addslashes(self):
        original = "O'Re\"il\\ly"
        assert stripslashes(addslashes(original)) == original


class TestEncoding:
    """Tests for base64/url helpers."""

    def test_base64(self):
        assert base64_encode("hello") == "aGVsbG8="
        assert base64_decode("aGVsbG8=") == "hello"

    def test_urlencode(self):
        assert BUILTIN_SANITIZERS["urlencode"]("a b&c") == "a+b%26c"
        assert BUILTIN_SANITIZERS["rawurlencode"]("a b&c") == "a%20b%26c"
        assert BUILTIN_SANITIZERS["urldecode"]("a+b%26c") == "a b&c"


class TestNonStringInput:
    """PHP-style helpers convert non-strings before working on them."""

    @pytest.mark.parametrize(
        "name, value, expected",
        [
            ("trim", 42, "42"),
            ("ltrim", 4.5, "4.5"),
            ("rtrim", None, ""),
            ("strtolower", True, "1"),
            ("strtoupper", False, ""),
            ("ucfirst", 7, "7"),
            ("lcfirst", 7, "7"),
            ("ucwords", 12, "12"),
            ("strrev", 123, "321"),
            ("strlen", 12345, 5),
            ("strip_tags", 0, "0"),
            ("htmlspecialchars", 3, "3"),
            ("addslashes", None, ""),
            ("nl2br", 1, "1"),
            ("urlencode", 10, "10"),
            ("rawurlencode", 10, "10"),
            ("strval", None, ""),
            ("md5", 1, "c4ca4238a0b923820dcc509a6f75849b"),
        ],
    )
    def test_converts_to_string(self, name, value, expected):
        assert BUILTIN_SANITIZERS[name](value) == expected

    def test_base64_of_int(self):
        assert base64_encode(42) == "NDI="


class TestNumeric:
    """Tests for intval/floatval/boolval."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("42", 42), (" 42abc", 42), ("-7", -7), ("abc", 0), ("", 0), (3.9, 3), (None, 0),
            (float("inf"), 0), (float("-inf"), 0), (float("nan"), 0),
        ],
    )
    def test_intval(self, value, expected):
        assert intval(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("3.14", 3.14), ("1e3x", 1000.0), (".5", 0.5), ("x", 0.0), (2, 2.0),
            (10 ** 400, 0.0), (-(10 ** 400), 0.0),
        ],
    )
    def test_floatval(self, value, expected):
        assert floatval(value) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "value, expected",
        [("0", False), ("", False), ("false", True), (0, False), ([], False), ("a", True)],
    )
    def test_boolval(self, value, expected):
        assert boolval(value) is expected
