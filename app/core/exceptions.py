from typing import Any


class CipherLabError(Exception):
    """Base exception for all cipher workbench errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CipherLabError):
    """Raised when input validation fails."""

    pass


class TextTooLongError(ValidationError):
    """Raised when input text exceeds maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Text length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class InvalidKeyError(ValidationError):
    """Raised when a key cannot be interpreted for a cipher."""

    def __init__(self, cipher_name: str, key: Any, reason: str):
        super().__init__(
            f"Invalid key for {cipher_name}: {reason}",
            {"cipher": cipher_name, "key": repr(key)},
        )


class InvalidInputError(ValidationError):
    """Raised when text or ciphertext is outside a cipher's input domain."""

    pass


class EngineError(CipherLabError):
    """Base exception for cipher engine errors."""

    pass


class EngineNotFoundError(EngineError):
    """Raised when requested cipher engine is not found."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )
