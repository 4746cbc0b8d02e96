"""AES-SIV email encryption.

AES-SIV is deterministic: the same plaintext always yields the same
ciphertext, which lets encrypted emails be used as lookup keys.
"""

import base64
import binascii

import structlog
from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESSIV

from core.config import settings
from core.exceptions import EncryptionError

logger = structlog.get_logger()


class Cryptographer:
    """Encrypts and decrypts short strings with a configured AES-SIV key."""

    def __init__(self, key: str | None = None) -> None:
        raw_key = base64.urlsafe_b64decode(key or settings.email_encryption_key)
        self._cipher = AESSIV(raw_key)

    def encrypt(self, plaintext: str) -> str:
        """Encrypt to url-safe base64. Empty input stays empty."""
        if not plaintext:
            return ""
        ciphertext = self._cipher.encrypt(plaintext.encode("utf-8"), None)
        return base64.urlsafe_b64encode(ciphertext).decode("ascii")

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt a value produced by :meth:`encrypt`.

        Raises:
            EncryptionError: If the value is not a valid ciphertext for this key
        """
        if not ciphertext:
            return ""
        try:
            data = base64.urlsafe_b64decode(ciphertext.encode("ascii"))
            return self._cipher.decrypt(data, None).decode("utf-8")
        except (InvalidTag, binascii.Error, ValueError) as e:
            logger.error("decrypt_failed", error_type=type(e).__name__)
            raise EncryptionError("Invalid ciphertext - decryption failed") from e
