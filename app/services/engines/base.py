from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from app.core.exceptions import InvalidKeyError
from app.models.schemas import CipherFamily, CipherKey, CipherType


@dataclass
class DecryptionResult:
    """Result of a decryption operation."""

    plaintext: str
    key: int | str
    explanation: str


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    Each cipher implementation must provide:
    - parse_key(): Coerce a loosely typed key into the cipher's key type
    - encrypt(): Encrypt plaintext
    - decrypt(): Decrypt ciphertext with a known key
    - generate_random_key(): Produce a key for demonstrations
    - explain(): Generate human-readable explanation

    Encryption and decryption are pure functions of (text, key): engines
    hold no per-call state, so a single instance may be shared freely.
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str
    key_kind: ClassVar[str]
    default_key: ClassVar[int | str]

    # Keys accepted inside dict-shaped payloads, in lookup order
    KEY_FIELDS: ClassVar[tuple[str, ...]] = ("key",)

    @abstractmethod
    def parse_key(self, key: CipherKey) -> int | str:
        """
        Coerce a key into the form used by this cipher.

        Args:
            key: Integer, string or dict payload

        Returns:
            Normalized key

        Raises:
            InvalidKeyError: If the key cannot be interpreted
        """
        pass

    @abstractmethod
    def encrypt(self, plaintext: str, key: CipherKey) -> str:
        """
        Encrypt plaintext with the given key.

        Args:
            plaintext: The plaintext to encrypt
            key: The encryption key

        Returns:
            Ciphertext
        """
        pass

    @abstractmethod
    def decrypt(self, ciphertext: str, key: CipherKey) -> str:
        """
        Decrypt ciphertext with the given key.

        Args:
            ciphertext: The ciphertext to decrypt
            key: The decryption key

        Returns:
            Plaintext
        """
        pass

    @abstractmethod
    def generate_random_key(self) -> int | str:
        """
        Generate a random valid key for this cipher.

        Returns:
            A randomly generated key
        """
        pass

    @abstractmethod
    def explain(self, ciphertext: str, plaintext: str, key: CipherKey) -> str:
        """
        Generate human-readable explanation of a decryption.

        Args:
            ciphertext: The ciphertext
            plaintext: The plaintext
            key: The key used

        Returns:
            Explanation string
        """
        pass

    def decrypt_with_key(self, ciphertext: str, key: CipherKey) -> DecryptionResult:
        """Decrypt with a known key and attach an explanation."""
        parsed = self.parse_key(key)
        plaintext = self.decrypt(ciphertext, parsed)

        return DecryptionResult(
            plaintext=plaintext,
            key=parsed,
            explanation=self.explain(ciphertext, plaintext, parsed),
        )

    def validate_key(self, key: CipherKey) -> bool:
        """
        Validate that a key is usable for this cipher.

        Args:
            key: The key to validate

        Returns:
            True if key is valid
        """
        try:
            self.parse_key(key)
        except InvalidKeyError:
            return False
        return True

    def _unwrap_key(self, key: CipherKey) -> Any:
        """Pull the key value out of a dict payload."""
        if isinstance(key, dict):
            for field in self.KEY_FIELDS:
                if field in key:
                    return key[field]
            return None
        return key
