"""
Error types and error codes for the mathsets engine.
"""

from typing import Optional


class ErrorCode:
    """
    Centralized catalog of error codes for set operations.

    Error codes are organized by category:
    - S01xx: Enumeration and materialization errors
    - S02xx: Precondition errors
    - S03xx: Configuration errors
    """

    # Enumeration / materialization: S01xx
    S0101 = "S0101"  # cannot materialize a non-finite set
    S0102 = "S0102"  # set cannot be enumerated

    # Preconditions: S02xx
    S0201 = "S0201"  # operand finiteness precondition unmet
    S0202 = "S0202"  # power set origin exceeds the enumeration bound

    # Configuration: S03xx
    S0301 = "S0301"  # invalid configuration


ERROR_DESCRIPTIONS: dict[str, str] = {
    ErrorCode.S0101: "cannot materialize a non-finite set",
    ErrorCode.S0102: "set cannot be enumerated",
    ErrorCode.S0201: "operand finiteness precondition unmet",
    ErrorCode.S0202: "power set origin exceeds the enumeration bound",
    ErrorCode.S0301: "invalid configuration",
}


class MathSetError(Exception):
    """Base exception for all mathsets errors."""

    default_code: str = ""

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        self.message = message
        self.code = code or self.default_code
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class MaterializationError(MathSetError):
    """
    Raised when a set cannot be forced into a finite explicit set.

    This happens whenever the set's cardinality is not finite, or when a
    derived operation would need to materialize such a set.
    """

    default_code = ErrorCode.S0101


class EnumerationError(MathSetError):
    """
    Raised by elements() on sets that cannot be enumerated at all.

    Membership tests stay valid on such sets.
    """

    default_code = ErrorCode.S0102


class PreconditionError(MathSetError):
    """
    Raised when an operation's finiteness or size precondition is unmet.

    This error is raised when:
    - isSubsetOf is called on an operand that is not finite
    - isDisjointWith is called with two non-finite operands
    - a power set origin exceeds the configured enumeration bound
    """

    default_code = ErrorCode.S0201


class ConfigError(MathSetError):
    """Raised when a configuration file or value is invalid."""

    default_code = ErrorCode.S0301
