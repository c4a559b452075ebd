import re

from arbiter.analyze import (
    RegexMatcher,
    count_inline_styles,
    extract_script_block,
    extract_style_block,
    extract_title,
)


def test_extract_style_block_first_only():
    html = "<style media='all'>a{}</style><style>b{}</style>"
    assert extract_style_block(html) == "a{}"


def test_extract_blocks_missing():
    assert extract_style_block("<p>no css</p>") == ""
    assert extract_script_block("<p>no js</p>") == ""


def test_extract_script_block_spans_lines():
    html = "<SCRIPT type=\"module\">\nconst a = 1;\nconst b = 2;\n</SCRIPT>"
    assert extract_script_block(html) == "\nconst a = 1;\nconst b = 2;\n"


def test_extract_unclosed_block_is_empty():
    assert extract_script_block("<script>const a = 1;") == ""


def test_count_inline_styles_accepts_both_quotes():
    html = """<p style="a"></p><p style='b'></p><p style=""></p>"""
    assert count_inline_styles(html) == 3


def test_extract_title():
    assert extract_title("<html><head><title>  Canvas\n  Rain </title></head></html>") == "Canvas Rain"
    assert extract_title("<html><body>untitled</body></html>") is None


def test_regex_matcher_is_case_insensitive_by_default():
    m = RegexMatcher()
    assert m.search(r"<!DOCTYPE html>", "<!doctype HTML>")
    assert not m.search(r"@media", "a { color: red; }")


def test_regex_matcher_count_flags_override():
    m = RegexMatcher()
    text = "ab AB ab"
    assert m.count("ab", text) == 3
    assert m.count("ab", text, flags=0) == 2


def test_regex_matcher_custom_flags():
    m = RegexMatcher(flags=0)
    assert not m.search("ROOT", ":root")
    assert m.count("root", ":root :ROOT", flags=re.I) == 2
