"""Field validators for profile data.

Every validator is a total predicate: invalid input yields ``False``,
never an exception.
"""

import re

from pydantic import EmailStr, HttpUrl, TypeAdapter, ValidationError

MARKDOWN_MAX_LENGTH = 2000

ALLOWED_TAGS = frozenset(
    {"a", "b", "blockquote", "br", "code", "em", "i", "li", "ol", "p", "pre", "strong", "ul"}
)
SAFE_LINK_SCHEMES = ("http://", "https://", "mailto:")

_email_adapter = TypeAdapter(EmailStr)
_url_adapter = TypeAdapter(HttpUrl)

_BLOCKED_ELEMENTS = re.compile(
    r"<(script|style|iframe|object|embed)\b[^>]*>.*?</\1\s*>",
    re.IGNORECASE | re.DOTALL,
)
# The name must be followed by whitespace, "/" or ">" so that markdown
# autolinks such as <https://mixitconf.org> are left alone.
_TAG = re.compile(r"<(/?)([a-zA-Z][a-zA-Z0-9]*)((?:[\s/][^>]*)?)>")
_HREF = re.compile(r"""\bhref\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s>]+))""", re.IGNORECASE)
# Inline `](target` and reference `[label]: target` markdown link targets.
_LINK_TARGET = re.compile(r"(\]\(\s*<?|^[ ]{0,3}\[[^\]\n]+\]:[ \t]*<?)([^\s)>]+)", re.MULTILINE)


def is_valid_email(value: str | None) -> bool:
    """Check email address syntax (no deliverability lookup)."""
    if not value:
        return False
    try:
        _email_adapter.validate_python(value)
    except ValidationError:
        return False
    return True


def is_valid_url(value: str | None) -> bool:
    """Check an optional URL. Empty or missing values are valid."""
    if not value:
        return True
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        return False
    return True


def is_valid_max_length(value: str | None, max_length: int) -> bool:
    """Check that an optional value is at most ``max_length`` characters."""
    return value is None or len(value) <= max_length


def _is_safe_link(url: str) -> bool:
    """Relative links, or absolute ones with an http(s)/mailto scheme."""
    if any(char in url for char in "\"'<>`"):
        return False
    if url.lower().startswith(SAFE_LINK_SCHEMES):
        return True
    return ":" not in url and "&" not in url


def _clean_link_target(match: re.Match[str]) -> str:
    prefix, target = match.groups()
    return match.group(0) if _is_safe_link(target) else f"{prefix}#"


def _clean_tag(match: re.Match[str]) -> str:
    closing, name, attributes = match.groups()
    name = name.lower()
    if name not in ALLOWED_TAGS:
        return ""
    if closing:
        return f"</{name}>"
    if name == "a":
        href = _HREF.search(attributes)
        if href:
            url = next(group for group in href.groups() if group is not None)
            if url.lower().startswith(SAFE_LINK_SCHEMES) and _is_safe_link(url):
                return f'<a href="{url}">'
    return f"<{name}>"


def sanitize(value: str | None) -> str:
    """Strip disallowed HTML from markdown text before storage."""
    if not value or not value.strip():
        return ""
    cleaned = _BLOCKED_ELEMENTS.sub("", value)
    cleaned = _TAG.sub(_clean_tag, cleaned)
    return _LINK_TARGET.sub(_clean_link_target, cleaned)


def is_valid_markdown(value: str | None) -> bool:
    """Check markdown is non-blank, not too long and already sanitized."""
    if not value or not value.strip():
        return False
    if len(value) > MARKDOWN_MAX_LENGTH:
        return False
    return sanitize(value) == value
