"""Latin alphabet rotation shared by the shift ciphers."""

ALPHABET_SIZE = 26


def is_latin_letter(char: str) -> bool:
    """True only for A-Z and a-z; accented and non-Latin letters are excluded."""
    return "A" <= char <= "Z" or "a" <= char <= "z"


def normalize_shift(shift: int) -> int:
    """Bring any integer shift into [0, 26)."""
    return ((shift % ALPHABET_SIZE) + ALPHABET_SIZE) % ALPHABET_SIZE


def shift_letter(char: str, shift: int) -> str:
    """
    Rotate a Latin letter within its own case.

    Characters outside A-Z / a-z are returned unchanged.
    """
    if "A" <= char <= "Z":
        base = ord("A")
    elif "a" <= char <= "z":
        base = ord("a")
    else:
        return char

    return chr((ord(char) - base + normalize_shift(shift)) % ALPHABET_SIZE + base)
