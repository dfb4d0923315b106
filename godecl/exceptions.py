"""
godecl Exception Hierarchy

Centralized exception classes for structured error handling across the codebase.
All godecl-specific exceptions inherit from GodeclError.

Usage:
    from godecl.exceptions import GodeclError, TranslationError

    try:
        declarations = translate_declarations(file.decls)
    except TranslationError as e:
        logger.error(f"Translation failed [{e.kind.value}]: {e}")
"""

from enum import Enum


class GodeclError(Exception):
    """Base exception for all godecl errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(GodeclError):
    """Error in godecl configuration."""

    pass


# =============================================================================
# Source Errors
# =============================================================================


class SourceError(GodeclError):
    """Base class for errors reading or parsing Go source."""

    pass


class SourceFileError(SourceError):
    """Source file could not be opened or read."""

    pass


class ParseError(SourceError):
    """The parser reported syntax errors in the source."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
    ):
        details = {}
        if line is not None:
            details["line"] = line
        if column is not None:
            details["column"] = column
        super().__init__(message, details)
        self.line = line
        self.column = column


# =============================================================================
# Translation Errors
# =============================================================================


class ErrorKind(Enum):
    """Stable names of the constructs the translator refuses."""

    UNSUPPORTED_ARRAY_LENGTH = "UnsupportedArrayLength"
    NAMELESS_FIELD_NOT_SUPPORTED = "NamelessFieldNotSupported"
    NAMELESS_METHOD_NOT_SUPPORTED = "NamelessMethodNotSupported"
    UNSUPPORTED_UNARY_OPERATOR = "UnsupportedUnaryOperator"
    UNSUPPORTED_BINARY_OPERATOR = "UnsupportedBinaryOperator"
    UNKNOWN_TYPE_EXPRESSION = "UnknownTypeExpression"
    UNEXPECTED_DECLARATION_KEYWORD = "UnexpectedDeclarationKeyword"
    UNEXPECTED_RECEIVER_ARITY = "UnexpectedReceiverArity"
    UNNAMED_PARAMETER_NOT_SUPPORTED = "UnnamedParameterNotSupported"


class TranslationError(GodeclError):
    """A declaration uses a construct that has no tagged-variant form."""

    def __init__(self, kind: ErrorKind, message: str, details: dict | None = None):
        super().__init__(message, details)
        self.kind = kind

    def __str__(self) -> str:
        return f"{self.kind.value}: {super().__str__()}"
