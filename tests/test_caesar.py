"""Tests for Caesar cipher engine."""

import pytest

from app.core.exceptions import InvalidKeyError
from app.services.engines.alphabet import is_latin_letter, normalize_shift, shift_letter
from app.services.engines.monoalphabetic.caesar import CaesarEngine


class TestCaesarEngine:
    """Test suite for Caesar cipher engine."""

    @pytest.fixture
    def engine(self):
        return CaesarEngine()

    @pytest.fixture
    def sample_plaintext(self):
        return "The Quick Brown Fox, jumps 123 times!"

    def test_encrypt_decrypt_roundtrip(self, engine, sample_plaintext):
        """Test that encrypt followed by decrypt returns original."""
        for shift in range(-60, 61):
            ciphertext = engine.encrypt(sample_plaintext, shift)
            assert engine.decrypt(ciphertext, shift) == sample_plaintext

    def test_known_example(self, engine):
        assert engine.encrypt("ABC", 3) == "DEF"
        assert engine.decrypt("DEF", 3) == "ABC"

    def test_encrypt_shift_7(self, engine):
        """Test specific encryption with shift 7."""
        assert engine.encrypt("HELLO", "7") == "OLSSV"

    def test_preserves_case(self, engine):
        assert engine.encrypt("Hello, World!", 3) == "Khoor, Zruog!"
        assert engine.encrypt("xYz", 3) == "aBc"

    def test_non_letters_unchanged(self, engine):
        """Digits, punctuation, whitespace and non-Latin letters stay in place."""
        plaintext = "0123456789 .,;:!?-_()\t\n café ß Ω"
        ciphertext = engine.encrypt(plaintext, 5)

        for original, encrypted in zip(plaintext, ciphertext):
            if is_latin_letter(original):
                assert encrypted != original
            else:
                assert encrypted == original

    def test_negative_and_large_shifts(self, engine):
        assert engine.encrypt("abc", -1) == "zab"
        assert engine.encrypt("ABC", 29) == "DEF"
        assert engine.encrypt("ABC", -23) == "DEF"
        assert engine.encrypt("ABC", 26) == "ABC"

    def test_empty_text(self, engine):
        assert engine.encrypt("", 3) == ""
        assert engine.decrypt("", 3) == ""

    def test_dict_key(self, engine):
        assert engine.encrypt("ABC", {"shift": 1}) == "BCD"
        assert engine.encrypt("ABC", {"key": 2}) == "CDE"

    def test_decrypt_with_key(self, engine):
        result = engine.decrypt_with_key("OLSSV", "7")

        assert result.plaintext == "HELLO"
        assert result.key == 7
        assert "7" in result.explanation

    def test_generate_random_key(self, engine):
        """Test random key generation."""
        keys = [engine.generate_random_key() for _ in range(100)]

        for key in keys:
            assert engine.validate_key(key)
            assert 1 <= key <= 25  # Excludes 0 (no encryption)

    def test_validate_key(self, engine):
        """Test key validation."""
        for i in range(26):
            assert engine.validate_key(str(i)) is True

        assert engine.validate_key("-1") is True
        assert engine.validate_key("100") is True
        assert engine.validate_key("abc") is False
        assert engine.validate_key("1.5") is False
        assert engine.validate_key(True) is False

    def test_float_keys(self, engine):
        """Whole floats are accepted, fractional ones are rejected."""
        assert engine.parse_key(3.0) == 3
        assert engine.encrypt("ABC", 3.0) == "DEF"
        assert engine.validate_key(3.7) is False
        assert engine.validate_key(float("nan")) is False
        assert engine.validate_key(float("inf")) is False

        with pytest.raises(InvalidKeyError):
            engine.encrypt("ABC", 2.5)

    def test_explain(self, engine):
        """Test explanation generation."""
        explanation = engine.explain("OLSSV", "HELLO", 7)

        assert "7" in explanation
        assert "shift" in explanation.lower()


class TestAlphabetHelpers:
    """Test suite for the shared alphabet rotation helpers."""

    def test_normalize_shift(self):
        assert normalize_shift(0) == 0
        assert normalize_shift(26) == 0
        assert normalize_shift(-1) == 25
        assert normalize_shift(-27) == 25
        assert normalize_shift(53) == 1

    def test_shift_letter_wraps(self):
        assert shift_letter("Z", 1) == "A"
        assert shift_letter("z", 1) == "a"
        assert shift_letter("a", -1) == "z"

    def test_shift_letter_ignores_others(self):
        for char in "5 !é":
            assert shift_letter(char, 7) == char

    def test_is_latin_letter(self):
        assert is_latin_letter("A")
        assert is_latin_letter("z")
        assert not is_latin_letter("é")
        assert not is_latin_letter("[")
        assert not is_latin_letter("`")
