"""Tests for literal escaping and glob translation."""

from url_redirector.rules.patterns import escape_pattern, glob_to_regex, host_end


def test_escape_pattern_covers_regex_metacharacters() -> None:
    assert escape_pattern(".*+?^${}()|[]\\") == "\\.\\*\\+\\?\\^\\$\\{\\}\\(\\)\\|\\[\\]\\\\"


def test_escape_pattern_leaves_url_punctuation() -> None:
    assert escape_pattern("https://a-b.example/~x&y=1") == "https://a-b\\.example/~x&y=1"


def test_host_end() -> None:
    assert host_end("https://*.example.com/*") == 21
    assert host_end("https://*") == -1
    assert host_end("*google*") == -1
    assert host_end("*://*.example.com/*") == 17
    assert host_end("*/r?u=https://evil.com/*") == -1


def test_glob_is_anchored() -> None:
    regex = glob_to_regex("https://example.com/*")
    assert regex.fullmatch("https://example.com/")
    assert regex.fullmatch("https://example.com/a/b?c=d")
    assert not regex.fullmatch("xhttps://example.com/a")
    assert not regex.fullmatch("https://exampleXcom/a")


def test_glob_host_star_does_not_cross_slash() -> None:
    regex = glob_to_regex("https://*.example.com/*")
    assert regex.fullmatch("https://sub.example.com/page")
    assert regex.fullmatch("https://a.b.example.com/")
    assert not regex.fullmatch("https://evil.com/https://sub.example.com/page")


def test_glob_without_bounded_host_matches_anything() -> None:
    assert glob_to_regex("https://*").fullmatch("https://a.example/b/c")
    assert glob_to_regex("*google*").fullmatch("https://www.google.com/search?q=1")


def test_glob_embedded_scheme_does_not_bound_leading_star() -> None:
    regex = glob_to_regex("*/r?u=https://evil.com/*")
    assert regex.fullmatch("https://site.com/r?u=https://evil.com/x")
    assert regex.fullmatch("https://site.com/deep/path/r?u=https://evil.com/")
    assert not regex.fullmatch("https://site.com/r?u=https://good.com/x")


def test_glob_treats_question_mark_literally() -> None:
    regex = glob_to_regex("https://example.com/?q=*")
    assert regex.fullmatch("https://example.com/?q=cats")
    assert not regex.fullmatch("https://example.com/q=cats")
