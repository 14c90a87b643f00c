"""Test option and wire format schemas."""

import pytest
from pydantic import ValidationError

from keymint.errors import (
    InvalidKeySizeError,
    InvalidLengthError,
    InvalidSymbolsError,
)
from keymint.models.key_pair import KeySize
from keymint.schemas import (
    KeyPairOptions,
    PasswordOptions,
    RandomOrgRequest,
    RandomOrgResponse,
)
from keymint.utils.crypto import STANDARD_SYMBOLS


@pytest.mark.schemas
class TestOptions:
    def test_password_defaults(self):
        options = PasswordOptions(length=16)

        assert options.symbols == STANDARD_SYMBOLS

    def test_password_options_are_frozen(self):
        options = PasswordOptions(length=16)

        with pytest.raises(ValidationError):
            options.length = 20

    def test_password_length_bounds(self):
        assert PasswordOptions(length=4096).length == 4096
        with pytest.raises(InvalidLengthError):
            PasswordOptions(length=4097)

    def test_password_symbols_must_be_strings(self):
        with pytest.raises(InvalidSymbolsError):
            PasswordOptions(length=8, symbols=[1, 2, 3])

    def test_key_pair_defaults(self):
        assert KeyPairOptions().key_size is KeySize.RSA_4096
        assert KeyPairOptions(key_size=2048).key_size is KeySize.RSA_2048

    def test_key_pair_rejects_other_sizes(self):
        with pytest.raises(InvalidKeySizeError):
            KeyPairOptions(key_size=3072)


@pytest.mark.schemas
class TestRandomOrgSchemas:
    def test_request_payload(self):
        payload = RandomOrgRequest.for_samples("abc-123", 4).to_payload()

        assert payload == {
            "jsonrpc": "2.0",
            "method": "generateIntegers",
            "params": {
                "apiKey": "abc-123",
                "n": 4,
                "min": 0,
                "max": 255,
                "replacement": True,
                "base": 16,
            },
            "id": 1,
        }

    def test_request_repr_hides_api_key(self):
        request = RandomOrgRequest.for_samples("abc-123", 4)

        assert "abc-123" not in repr(request)

    def test_request_requires_samples(self):
        with pytest.raises(ValidationError):
            RandomOrgRequest.for_samples("abc-123", 0)

    def test_response_success(self):
        response = RandomOrgResponse.model_validate(
            {"result": {"random": {"data": ["a1", "b2"]}, "bitsUsed": 16}}
        )

        assert not response.is_error
        assert response.result.random.data == ["a1", "b2"]
        assert response.result.bits_used == 16

    def test_response_error(self):
        response = RandomOrgResponse.model_validate(
            {"error": {"code": 401, "message": "invalid key"}}
        )

        assert response.is_error
        assert response.error.message == "invalid key"
        assert response.result is None
