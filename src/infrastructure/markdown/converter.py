"""Markdown rendering."""

import markdown
import nh3

from domain.validators import ALLOWED_TAGS

# Block-level output of the markdown extensions, on top of the inline tags
# users may write themselves.
RENDERED_TAGS = ALLOWED_TAGS | {
    "h1", "h2", "h3", "h4", "h5", "h6", "hr", "sup", "abbr", "dl", "dt", "dd",
    "table", "thead", "tbody", "tr", "th", "td",
}
RENDERED_ATTRIBUTES = {"a": {"href", "title"}, "abbr": {"title"}}
URL_SCHEMES = {"http", "https", "mailto"}


class MarkdownConverter:
    """Render markdown text to HTML with the extensions used on profile pages.

    The HTML is cleaned against an allow-list, so raw HTML or link targets
    that slipped into stored text never reach the page.
    """

    def __init__(self, extensions: list[str] | None = None) -> None:
        self._extensions = extensions or ["extra", "sane_lists"]

    def to_html(self, markdown_text: str) -> str:
        if not markdown_text:
            return ""
        html = markdown.markdown(markdown_text, extensions=self._extensions)
        return nh3.clean(
            html,
            tags=set(RENDERED_TAGS),
            attributes=RENDERED_ATTRIBUTES,
            url_schemes=URL_SCHEMES,
            link_rel="nofollow noopener noreferrer",
        )
