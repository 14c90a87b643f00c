"""Test local CSPRNG password generation."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from keymint.errors import InvalidLengthError, InvalidSymbolsError
from keymint.keys import gen_secure_random_password
from keymint.utils.crypto import STANDARD_SYMBOLS


@pytest.mark.local
class TestLocalPasswordGenerator:
    """Test LocalPasswordGenerator behaviour."""

    @pytest.mark.parametrize("length", [1, 2, 17, 256, 4096])
    def test_password_has_requested_length(self, local_generator, length):
        """Passwords are exactly as long as requested."""
        password = local_generator.generate(length)

        assert len(password) == length
        assert set(password) <= set(STANDARD_SYMBOLS)

    @pytest.mark.parametrize("length", [0, -1, 4097, 10_000])
    def test_out_of_range_length_rejected(self, local_generator, length):
        """Lengths outside 1..4096 raise before any generation."""
        with pytest.raises(InvalidLengthError) as exc_info:
            local_generator.generate(length)

        assert exc_info.value.error_code == "invalid_length"
        assert "1 to 4096" in str(exc_info.value)

    def test_non_integer_length_rejected(self, local_generator):
        with pytest.raises(InvalidLengthError):
            local_generator.generate("12")

    def test_custom_symbols(self, local_generator):
        """Only supplied symbols appear in the password."""
        password = local_generator.generate(512, symbols="xyz")

        assert set(password) <= {"x", "y", "z"}

    def test_symbols_as_character_sequence(self, local_generator):
        password = local_generator.generate(64, symbols=["a", "b", "c"])

        assert set(password) <= {"a", "b", "c"}

    def test_last_symbol_is_reachable(self, local_generator):
        """Every symbol of the alphabet can be drawn, including the last."""
        password = local_generator.generate(4096, symbols="ab")

        assert "a" in password
        assert "b" in password

    def test_single_symbol_alphabet(self, local_generator):
        assert local_generator.generate(5, symbols="q") == "qqqqq"

    def test_empty_symbols_rejected(self, local_generator):
        with pytest.raises(InvalidSymbolsError):
            local_generator.generate(8, symbols="")

    def test_non_string_symbols_rejected(self, local_generator):
        with pytest.raises(InvalidSymbolsError) as exc_info:
            local_generator.generate(8, symbols=["a", 1])

        assert isinstance(exc_info.value.original_error, TypeError)

    def test_outputs_differ_between_calls(self, local_generator):
        """Identical inputs do not reproduce the same password."""
        passwords = {local_generator.generate(32) for _ in range(100)}

        assert len(passwords) == 100

    def test_concurrent_generation(self, local_generator):
        """Concurrent callers share the random source without collisions."""
        with ThreadPoolExecutor(max_workers=8) as executor:
            passwords = list(
                executor.map(lambda _: local_generator.generate(32), range(1000))
            )

        assert len(passwords) == 1000
        assert len(set(passwords)) == 1000
        assert all(len(p) == 32 for p in passwords)
        assert all(set(p) <= set(STANDARD_SYMBOLS) for p in passwords)

    def test_password_not_logged(self, local_generator, caplog):
        """Audit entries describe the password without containing it."""
        caplog.set_level("DEBUG", logger="keymint")

        password = local_generator.generate(48)

        assert any(
            getattr(record, "action", None) == "generate_local_password"
            for record in caplog.records
        )
        assert password not in caplog.text

    def test_module_level_convenience(self):
        assert len(gen_secure_random_password(20)) == 20
