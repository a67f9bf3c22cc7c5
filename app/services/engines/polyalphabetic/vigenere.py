import random
from typing import ClassVar

from app.core.exceptions import InvalidKeyError
from app.models.schemas import CipherFamily, CipherKey, CipherType
from app.services.engines.alphabet import is_latin_letter, shift_letter
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class VigenereEngine(CipherEngine):
    """
    Vigenère cipher engine.

    A polyalphabetic substitution cipher that uses a keyword to determine
    the shift for each letter. Each letter of the keyword represents a
    different Caesar shift applied in sequence.

    Only the letters of the keyword count; digits and punctuation in the key
    are dropped and case is ignored. A keyword without any letters leaves
    the text untouched. Non-letters in the text are copied through and do
    not consume a key position.
    """

    name = "Vigenère Cipher"
    cipher_type = CipherType.VIGENERE
    cipher_family = CipherFamily.POLYALPHABETIC
    description = (
        "A polyalphabetic cipher where each letter is shifted by a different amount "
        "based on a repeating keyword. More secure than Caesar but vulnerable to "
        "Kasiski examination and frequency analysis per key position."
    )
    key_kind = "text"
    default_key = "KEY"

    COMMON_WORDS: ClassVar[list[str]] = [
        "KEY", "SECRET", "PASSWORD", "CIPHER", "CODE", "CRYPTO",
        "HIDDEN", "LOCK", "SAFE", "SECURE", "VIGENERE",
    ]

    def parse_key(self, key: CipherKey) -> str:
        """Accept the keyword as text; integers are not keywords."""
        value = self._unwrap_key(key)
        if not isinstance(value, str):
            raise InvalidKeyError(self.name, key, "keyword must be text")
        return value

    def encrypt(self, plaintext: str, key: CipherKey) -> str:
        """Encrypt plaintext with the given keyword."""
        return self._transform(plaintext, self.parse_key(key), 1)

    def decrypt(self, ciphertext: str, key: CipherKey) -> str:
        """Decrypt ciphertext with the given keyword."""
        return self._transform(ciphertext, self.parse_key(key), -1)

    def generate_random_key(self) -> str:
        """Pick a keyword from a list of common words."""
        return random.choice(self.COMMON_WORDS)

    def explain(self, ciphertext: str, plaintext: str, key: CipherKey) -> str:
        """Generate human-readable explanation."""
        shifts = self.key_shifts(self.parse_key(key))

        if not shifts:
            return (
                "Vigenère cipher with a keyword that contains no letters. "
                "Without key letters there is nothing to shift by, so the text is unchanged."
            )

        keyword = "".join(chr(shift + ord("A")) for shift in shifts)
        return (
            f"Vigenère cipher with keyword '{keyword}' (length {len(shifts)}). "
            f"Key letters give the shifts {shifts}, applied in turn to each letter; "
            f"non-letters are kept and do not use up a key letter."
        )

    @staticmethod
    def key_shifts(key: str) -> list[int]:
        """Reduce a keyword to its per-letter shifts (A=0 .. Z=25)."""
        return [ord(char.upper()) - ord("A") for char in key if is_latin_letter(char)]

    def _transform(self, text: str, key: str, direction: int) -> str:
        """Shift each letter by the current key letter, forwards or backwards."""
        shifts = self.key_shifts(key)
        if not shifts:
            return text

        result = []
        key_idx = 0

        for char in text:
            if is_latin_letter(char):
                result.append(shift_letter(char, direction * shifts[key_idx % len(shifts)]))
                key_idx += 1
            else:
                result.append(char)

        return "".join(result)
