import random
from typing import ClassVar

from app.core.exceptions import InvalidKeyError
from app.models.schemas import CipherFamily, CipherKey, CipherType
from app.services.engines.alphabet import normalize_shift, shift_letter
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class CaesarEngine(CipherEngine):
    """
    Caesar cipher engine.

    The Caesar cipher is a simple substitution cipher that shifts each letter
    by a fixed amount. Upper- and lowercase letters rotate within their own
    alphabet; digits, punctuation and whitespace pass through untouched.
    """

    name = "Caesar Cipher"
    cipher_type = CipherType.CAESAR
    cipher_family = CipherFamily.MONOALPHABETIC
    description = (
        "A substitution cipher where each letter is shifted by a fixed amount. "
        "Named after Julius Caesar who used it for military communications."
    )
    key_kind = "integer"
    default_key = 3

    KEY_FIELDS: ClassVar[tuple[str, ...]] = ("shift", "key")

    def parse_key(self, key: CipherKey) -> int:
        """Parse key to an integer shift; negative shifts are allowed."""
        value = self._unwrap_key(key)
        if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
            raise InvalidKeyError(self.name, key, "shift must be an integer")
        try:
            return int(value)
        except (TypeError, ValueError):
            raise InvalidKeyError(self.name, key, "shift must be an integer")

    def encrypt(self, plaintext: str, key: CipherKey) -> str:
        """Encrypt plaintext with the given shift."""
        return self._encrypt(plaintext, self.parse_key(key))

    def decrypt(self, ciphertext: str, key: CipherKey) -> str:
        """Decrypt by shifting in reverse."""
        return self._encrypt(ciphertext, -self.parse_key(key))

    def generate_random_key(self) -> int:
        """Generate a random shift (1-25, excluding 0 and 26)."""
        return random.randint(1, 25)

    def explain(self, ciphertext: str, plaintext: str, key: CipherKey) -> str:
        """Generate human-readable explanation."""
        shift = self.parse_key(key)

        return (
            f"Caesar cipher with shift of {shift} "
            f"(effective rotation {normalize_shift(shift)}). "
            f"Each letter was shifted back {shift} positions in the alphabet, keeping its case. "
            f"For example, the first ciphertext character '{ciphertext[0] if ciphertext else 'N/A'}' "
            f"corresponds to '{plaintext[0] if plaintext else 'N/A'}'."
        )

    def _encrypt(self, plaintext: str, shift: int) -> str:
        """Encrypt using Caesar cipher."""
        return "".join(shift_letter(char, shift) for char in plaintext)
