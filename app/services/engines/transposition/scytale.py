import math
import random

from app.core.exceptions import InvalidKeyError
from app.models.schemas import CipherFamily, CipherKey, CipherType
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class ScytaleEngine(CipherEngine):
    """
    Scytale cipher engine.

    The Spartan scytale wraps a strip of leather around a rod. Writing along
    the rod and unwinding the strip deals the letters out round-robin onto
    a fixed number of rows; the ciphertext reads each row in turn.

    Example with 3 rows:
    Plaintext: HELLOWORLD

    Row 0: H . . L . . O . . D   (positions 0, 3, 6, 9)
    Row 1: . E . . O . . R . .   (positions 1, 4, 7)
    Row 2: . . L . . W . . L .   (positions 2, 5, 8)

    Read off rows: HLOD + EOR + LWL
    """

    name = "Scytale Cipher"
    cipher_type = CipherType.SCYTALE
    cipher_family = CipherFamily.TRANSPOSITION
    description = (
        "A transposition cipher from ancient Sparta. Letters are dealt "
        "round-robin onto a number of rows, set by the rod's thickness, "
        "and the rows are read one after another."
    )
    key_kind = "integer"
    default_key = 4

    KEY_FIELDS = ("rows", "key")

    def parse_key(self, key: CipherKey) -> int:
        """
        Parse key to a row count.

        Fractional values are floored and anything below one becomes one,
        which makes the transform an identity.
        """
        value = self._unwrap_key(key)
        if isinstance(value, bool):
            raise InvalidKeyError(self.name, key, "row count must be a number")
        try:
            rows = math.floor(float(value))
        except (TypeError, ValueError, OverflowError):
            raise InvalidKeyError(self.name, key, "row count must be a number")
        return max(1, rows)

    def encrypt(self, plaintext: str, key: CipherKey) -> str:
        """Encrypt using the specified number of rows."""
        return self._encrypt(plaintext, self.parse_key(key))

    def decrypt(self, ciphertext: str, key: CipherKey) -> str:
        """Decrypt using the specified number of rows."""
        return self._decrypt(ciphertext, self.parse_key(key))

    def generate_random_key(self) -> int:
        """Generate a random number of rows (2-8)."""
        return random.randint(2, 8)

    def explain(self, ciphertext: str, plaintext: str, key: CipherKey) -> str:
        """Generate human-readable explanation."""
        rows = self.parse_key(key)

        if rows <= 1:
            return "Scytale cipher with a single row. Every letter stays in place."

        layout = ", ".join(f"row {i}: '{row}'" for i, row in enumerate(self.rows(plaintext, rows)))

        return (
            f"Scytale cipher with {rows} rows. "
            f"Letters are dealt round-robin onto the rows ({layout}), "
            f"and the ciphertext reads the rows one after another. "
            f"Decryption cuts the ciphertext back into rows and deals them out again."
        )

    def rows(self, text: str, rows: int) -> list[str]:
        """
        Contents of each row after dealing out text.

        Rows beyond the text length would stay empty and are left out.
        """
        rows = min(rows, len(text))
        if rows <= 1:
            return [text]

        buckets: list[list[str]] = [[] for _ in range(rows)]
        for i, char in enumerate(text):
            buckets[i % rows].append(char)

        return ["".join(bucket) for bucket in buckets]

    @staticmethod
    def row_lengths(length: int, rows: int) -> list[int]:
        """How many characters of a message of the given length land on each non-empty row."""
        rows = max(1, min(rows, length))
        return [(length - 1 - row) // rows + 1 for row in range(rows)]

    def _encrypt(self, plaintext: str, rows: int) -> str:
        """Encrypt using Scytale cipher."""
        # At least as many rows as characters leaves every character in place
        if min(rows, len(plaintext)) <= 1:
            return plaintext

        return "".join(self.rows(plaintext, rows))

    def _decrypt(self, ciphertext: str, rows: int) -> str:
        """Decrypt using Scytale cipher."""
        n = len(ciphertext)
        rows = min(rows, n)
        if rows <= 1:
            return ciphertext

        # Split ciphertext into rows
        fence = []
        idx = 0
        for length in self.row_lengths(n, rows):
            fence.append(ciphertext[idx:idx + length])
            idx += length

        # Deal the rows back out in round-robin order
        result = []
        row_indices = [0] * rows

        for i in range(n):
            row = i % rows
            result.append(fence[row][row_indices[row]])
            row_indices[row] += 1

        return "".join(result)
