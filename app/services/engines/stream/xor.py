"""
Repeating-key XOR cipher.

Each character's code point is XORed with the key character at the same
position (the key repeats), and the result is written as two lowercase hex
digits. This is a teaching device, not encryption: the key is recoverable
from any known plaintext.

Only single-byte text (code points up to U+00FF) is accepted, since a wider
code point would not fit the two-digit-per-character hex format and could
not be read back.
"""
import random
import string
from typing import ClassVar

from app.core.exceptions import InvalidInputError, InvalidKeyError
from app.models.schemas import CipherFamily, CipherKey, CipherType
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry

MAX_CODE_UNIT = 0xFF
HEX_DIGITS = frozenset(string.hexdigits)


@EngineRegistry.register
class XorEngine(CipherEngine):
    """
    Byte-wise XOR cipher engine with hex-encoded ciphertext.

    An empty key is a no-op that yields an empty result in both directions.
    """

    name = "XOR Cipher"
    cipher_type = CipherType.XOR
    cipher_family = CipherFamily.STREAM
    description = (
        "Each character is combined with the repeating key using bitwise "
        "exclusive-or and written as hexadecimal. Applying the same key again "
        "restores the text, which is also why key reuse is fatal."
    )
    key_kind = "text"
    default_key = "secret"

    COMMON_WORDS: ClassVar[list[str]] = [
        "secret", "key", "xor", "password", "hidden", "stream", "byte",
    ]

    def parse_key(self, key: CipherKey) -> str:
        """Accept the key as text; every character must be a single byte."""
        value = self._unwrap_key(key)
        if not isinstance(value, str):
            raise InvalidKeyError(self.name, key, "key must be text")

        wide = self._first_wide_char(value)
        if wide is not None:
            raise InvalidKeyError(
                self.name,
                key,
                f"character {value[wide]!r} at position {wide} is outside the single-byte range",
            )
        return value

    def encrypt(self, plaintext: str, key: CipherKey) -> str:
        """XOR plaintext with the key and return lowercase hex."""
        return self._encrypt(plaintext, self.parse_key(key))

    def decrypt(self, ciphertext: str, key: CipherKey) -> str:
        """Parse hex ciphertext and XOR it back with the key."""
        return self._decrypt(ciphertext, self.parse_key(key))

    def generate_random_key(self) -> str:
        """Pick a key from a list of common words."""
        return random.choice(self.COMMON_WORDS)

    def explain(self, ciphertext: str, plaintext: str, key: CipherKey) -> str:
        """Generate human-readable explanation."""
        xor_key = self.parse_key(key)

        if not xor_key:
            return "XOR cipher with an empty key. There is nothing to combine with, so the result is empty."

        key_bytes = " ".join(f"{ord(char):02x}" for char in xor_key)
        return (
            f"XOR cipher with key '{xor_key}' (bytes {key_bytes}). "
            f"Each character code was XORed with the key byte at the same position, "
            f"repeating the key every {len(xor_key)} characters. "
            f"Ciphertext is written as two hex digits per character."
        )

    def _encrypt(self, plaintext: str, key: str) -> str:
        """Encrypt using repeating-key XOR."""
        if not key:
            return ""

        wide = self._first_wide_char(plaintext)
        if wide is not None:
            raise InvalidInputError(
                f"Character {plaintext[wide]!r} at position {wide} is outside the "
                f"single-byte range and cannot be XOR-encoded",
                {"position": wide, "code_point": ord(plaintext[wide])},
            )

        return "".join(
            f"{ord(char) ^ ord(key[i % len(key)]):02x}"
            for i, char in enumerate(plaintext)
        )

    def _decrypt(self, ciphertext: str, key: str) -> str:
        """Decrypt hex produced by _encrypt."""
        if not ciphertext or not key:
            return ""

        if len(ciphertext) % 2:
            raise InvalidInputError(
                f"Hex ciphertext must have an even number of digits, got {len(ciphertext)}",
                {"length": len(ciphertext)},
            )

        for i, char in enumerate(ciphertext):
            if char not in HEX_DIGITS:
                raise InvalidInputError(
                    f"Invalid hex digit {char!r} at position {i}",
                    {"position": i},
                )

        result = []
        for i in range(0, len(ciphertext), 2):
            byte = int(ciphertext[i:i + 2], 16)
            result.append(chr(byte ^ ord(key[(i // 2) % len(key)])))

        return "".join(result)

    @staticmethod
    def _first_wide_char(text: str) -> int | None:
        """Position of the first character above U+00FF, if any."""
        for i, char in enumerate(text):
            if ord(char) > MAX_CODE_UNIT:
                return i
        return None
