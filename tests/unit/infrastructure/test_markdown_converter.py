"""Unit tests for markdown rendering."""

from infrastructure.markdown.converter import MarkdownConverter


def test_renders_markdown():
    html = MarkdownConverter().to_html("# Title\n\n- one\n- two")

    assert "<h1>Title</h1>" in html
    assert "<li>one</li>" in html


def test_empty_text_renders_nothing():
    assert MarkdownConverter().to_html("") == ""


def test_custom_extensions():
    html = MarkdownConverter(extensions=["extra"]).to_html("| a | b |\n| --- | --- |\n| 1 | 2 |")

    assert "<table>" in html


def test_unsafe_link_target_is_dropped_from_output():
    html = MarkdownConverter().to_html("[c](javascript:alert(3))")

    assert "javascript" not in html
    assert ">c</a>" in html


def test_raw_html_with_slash_attributes_is_dropped_from_output():
    html = MarkdownConverter().to_html("Hi <img/src=x onerror=alert(1)> <svg/onload=alert(2)>")

    assert "<img" not in html
    assert "<svg" not in html


def test_safe_link_is_kept():
    html = MarkdownConverter().to_html("[MiXiT](https://mixitconf.org)")

    assert 'href="https://mixitconf.org"' in html
