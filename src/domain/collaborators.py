"""Protocols for the pure collaborators used by domain services."""

from typing import Protocol


class ICryptographer(Protocol):
    """Reversible encryption of sensitive values such as emails."""

    def encrypt(self, plaintext: str) -> str:
        ...

    def decrypt(self, ciphertext: str) -> str:
        ...


class IMarkdownConverter(Protocol):
    """Markdown to HTML rendering."""

    def to_html(self, markdown_text: str) -> str:
        ...
