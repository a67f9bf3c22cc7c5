"""
Playground runner - the interactive cipher page in one call.

Takes one source text and a key per cipher and produces, for each cipher,
an encrypted and a decrypted rendering:
1. Caesar and Vigenère decrypt the source itself (the shift run backwards)
2. XOR and Scytale decrypt their own ciphertext (a reconstruction check)
"""

import logging
from dataclasses import dataclass, field
from typing import ClassVar

from app.core.exceptions import ValidationError
from app.models.schemas import CipherKey, CipherType
from app.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)


@dataclass
class PlaygroundKeys:
    """One key per cipher shown in the playground."""

    caesar_shift: int = 3
    vigenere_key: str = "KEY"
    xor_key: str = "secret"
    scytale_rows: float = 4

    def for_cipher(self, cipher_type: CipherType) -> CipherKey:
        return {
            CipherType.CAESAR: self.caesar_shift,
            CipherType.VIGENERE: self.vigenere_key,
            CipherType.XOR: self.xor_key,
            CipherType.SCYTALE: self.scytale_rows,
        }[cipher_type]


@dataclass
class CardResult:
    """Output of one cipher for the playground source."""

    cipher_type: CipherType
    key_used: int | str
    encrypted: str | None = None
    decrypted: str | None = None
    error: str | None = None


@dataclass
class PlaygroundResult:
    """All cards for one source text."""

    source: str
    cards: list[CardResult] = field(default_factory=list)


class PlaygroundRunner:
    """
    Runs every playground cipher over the same source text.

    A cipher that rejects the source (XOR on text outside the single-byte
    range) reports the problem on its own card; the other cards still render.
    """

    CARD_ORDER: ClassVar[list[CipherType]] = [
        CipherType.SCYTALE,
        CipherType.CAESAR,
        CipherType.VIGENERE,
        CipherType.XOR,
    ]

    # Ciphers whose "decrypted" output reconstructs the source from the ciphertext
    ROUND_TRIP_CIPHERS: ClassVar[frozenset[CipherType]] = frozenset({
        CipherType.XOR,
        CipherType.SCYTALE,
    })

    def __init__(self, registry: EngineRegistry | None = None):
        self.registry = registry or EngineRegistry()

    def run(self, source: str, keys: PlaygroundKeys) -> PlaygroundResult:
        """Render every card for the source text."""
        result = PlaygroundResult(source=source)

        for cipher_type in self.CARD_ORDER:
            result.cards.append(self._run_card(cipher_type, source, keys.for_cipher(cipher_type)))

        return result

    def _run_card(self, cipher_type: CipherType, source: str, key: CipherKey) -> CardResult:
        engine = self.registry.require_engine(cipher_type)

        try:
            parsed = engine.parse_key(key)
        except ValidationError as e:
            return CardResult(cipher_type=cipher_type, key_used=str(key), error=e.message)

        card = CardResult(cipher_type=cipher_type, key_used=parsed)
        try:
            card.encrypted = engine.encrypt(source, parsed)
            if cipher_type in self.ROUND_TRIP_CIPHERS:
                card.decrypted = engine.decrypt(card.encrypted, parsed)
            else:
                card.decrypted = engine.decrypt(source, parsed)
        except ValidationError as e:
            logger.info("%s card skipped: %s", engine.name, e.message)
            card.error = e.message

        return card
