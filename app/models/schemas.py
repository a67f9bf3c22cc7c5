from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    MONOALPHABETIC = "monoalphabetic"
    POLYALPHABETIC = "polyalphabetic"
    STREAM = "stream"
    TRANSPOSITION = "transposition"


class CipherType(str, Enum):
    """Specific cipher types."""

    CAESAR = "caesar"
    VIGENERE = "vigenere"
    XOR = "xor"
    SCYTALE = "scytale"


CipherKey = int | str | dict[str, Any]


# ============================================================================
# Cipher Catalogue Schemas
# ============================================================================


class CipherInfo(BaseModel):
    """Metadata describing a registered cipher engine."""

    cipher_type: CipherType
    cipher_family: CipherFamily
    name: str
    description: str
    key_kind: str
    default_key: int | str


class CipherListResponse(BaseModel):
    """Response schema for /ciphers endpoint."""

    ciphers: list[CipherInfo]


# ============================================================================
# Request Schemas
# ============================================================================


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    plaintext: str = Field(max_length=100_000)
    cipher_type: CipherType
    key: CipherKey | None = None


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    ciphertext: str = Field(max_length=100_000)
    cipher_type: CipherType
    key: CipherKey


class PlaygroundRequest(BaseModel):
    """
    Request schema for /playground endpoint.

    Fields left unset fall back to the configured playground defaults.
    """

    source: str | None = Field(default=None, max_length=100_000)
    caesar_shift: int | None = None
    vigenere_key: str | None = None
    xor_key: str | None = None
    scytale_rows: float | None = None


# ============================================================================
# Response Schemas
# ============================================================================


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    cipher_type: CipherType
    key_used: int | str


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    cipher_type: CipherType
    key_used: int | str
    explanation: str


class PlaygroundCard(BaseModel):
    """Output of one cipher in the playground."""

    cipher_type: CipherType
    key_used: int | str
    encrypted: str | None = None
    decrypted: str | None = None
    error: str | None = None


class PlaygroundResponse(BaseModel):
    """Response schema for /playground endpoint."""

    source: str
    cards: list[PlaygroundCard]


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
