"""
Unit tests for error types and codes.
"""

import pytest

from mathsets import (
    ConfigError,
    EnumerationError,
    MaterializationError,
    MathSetError,
    PreconditionError,
)
from mathsets.errors import ERROR_DESCRIPTIONS, ErrorCode


class TestErrorCodes:
    def test_every_code_described(self):
        codes = [v for k, v in vars(ErrorCode).items() if k.startswith("S")]
        assert sorted(codes) == sorted(ERROR_DESCRIPTIONS)

    @pytest.mark.parametrize(
        "error_type, code",
        [
            (MaterializationError, ErrorCode.S0101),
            (EnumerationError, ErrorCode.S0102),
            (PreconditionError, ErrorCode.S0201),
            (ConfigError, ErrorCode.S0301),
        ],
    )
    def test_default_codes(self, error_type, code):
        error = error_type("boom")
        assert error.code == code
        assert isinstance(error, MathSetError)


class TestMessages:
    def test_code_prefix(self):
        error = PreconditionError("too big", code=ErrorCode.S0202)
        assert str(error) == "[S0202] too big"
        assert error.message == "too big"

    def test_base_without_code(self):
        assert str(MathSetError("plain")) == "plain"
