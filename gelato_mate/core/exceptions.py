"""
Exception classes for the protocol client.

Two kinds of errors are kept apart:
- Domain errors derive from MetaException and are built by callers,
  usually from the envelope that failed an assertion
- Programmer errors (ContractViolationError) signal that an API was
  called with a missing argument and are never caught by the library
"""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class UnaryException(Protocol):
    """
    Anything that can stand in for an error code.

    Typically an Enum whose members carry a ``code`` attribute:

        class UserError(Enum):
            NOT_FOUND = "user.not_found"

            @property
            def code(self) -> str:
                return self.value
    """

    @property
    def code(self) -> Any: ...


# ============================================================================
# DOMAIN EXCEPTIONS (built by caller-supplied mappers)
# ============================================================================


class MetaException(Exception):
    """
    Base exception for all domain errors raised through a ProtocolContext.

    Carries a code, optional placeholder arguments and an optional cause.
    The code may be given directly or through a UnaryException.
    """

    def __init__(
            self,
            code: Any = None,
            *placeholders: Any,
            message: Optional[str] = None,
            cause: Optional[BaseException] = None,
    ):
        if isinstance(code, UnaryException):
            code = code.code
        self._code = code
        self.placeholders = placeholders
        self.message = message if message is not None else self._default_message()
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause

    @property
    def code(self) -> Any:
        return self._code

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__

    def _default_message(self) -> str:
        if self._code is None:
            return "A domain error occurred"
        return str(self._code)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self._code!r}, placeholders={self.placeholders!r})"


class I18nException(MetaException):
    """
    Domain error whose code is a message key in a translation catalog.

    The placeholders are substituted when the message is rendered:

        >>> catalog = {"user.locked": "User {0} is locked"}
        >>> I18nException("user.locked", "alice").render(catalog)
        'User alice is locked'
    """

    @property
    def code(self) -> str:
        return str(self._code)

    def render(self, catalog: Mapping[str, str]) -> str:
        """Return the localized message, or the code when the catalog has no entry."""
        template = catalog.get(self.code)
        if template is None:
            return self.code
        return template.format(*self.placeholders)


# ============================================================================
# PROGRAMMER ERRORS
# ============================================================================


class ContractViolationError(TypeError):
    """
    Raised when a required argument is missing (None).

    This is a bug in the calling code, not a data condition.
    """

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"null argument: '{parameter}' must not be None")
