"""
Fluent wrapper over a tri-field response envelope.

Typical use on the client side of a service call:

    gender = (
        ProtocolContext.of(envelope)
        .assert_code(200, lambda r: I18nException("error.remote", r.code))
        .assert_data(lambda d: d is not None, lambda r: I18nException("error.empty"))
        .get_data()
    )

Assertions raise the error built by the mapper and otherwise return the
same context, so the chain reads top to bottom without if-statements.
"""

from typing import Any, Callable, Generic, Optional, TypeVar, overload

from gelato_mate.core.exceptions import ContractViolationError, MetaException
from gelato_mate.schemas.protocol import TerResult
from gelato_mate.utils.logger import get_logger, log_execution_time

logger = get_logger(__name__)

P = TypeVar("P", bound=TerResult[Any, Any, Any])
T = TypeVar("T")
U = TypeVar("U")
S = TypeVar("S")
Q = TypeVar("Q", bound=TerResult[Any, Any, Any])
R = TypeVar("R")

ErrorMapper = Callable[[P], MetaException]

_UNSET: Any = object()


def _require(**arguments: Any) -> None:
    """Raise ContractViolationError for the first argument that is None."""
    for name, value in arguments.items():
        if value is None:
            raise ContractViolationError(name)


class ProtocolContext(Generic[P, T, U, S]):
    """
    Immutable view over one envelope exposing code, message and data.

    Args:
        P: the envelope type, conforming to TerResult
        T: the code type
        U: the message type
        S: the payload type

    Predicates, mappers and consumers handed to this class must be
    stateless and non-interfering. Each is called at most once per call.
    """

    __slots__ = ("_original",)

    def __init__(self, original: P):
        self._original = original

    @classmethod
    def of(cls, original: P) -> "ProtocolContext[P, T, U, S]":
        """
        Wrap an envelope.

        Raises:
            ContractViolationError: When original is None
        """
        _require(original=original)
        return cls(original)

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_original"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return f"ProtocolContext({self._original!r})"

    # -------------------------
    # Accessors
    # -------------------------

    def get_code(self) -> T:
        return self._original.code

    def get_message(self) -> Optional[U]:
        return self._original.message

    @overload
    def get_data(self) -> Optional[S]: ...

    @overload
    def get_data(self, predicate: Callable[[P], bool]) -> Optional[S]: ...

    def get_data(self, predicate=_UNSET):
        """
        Return the payload, or None when it is absent.

        With a predicate, the payload is returned only if the predicate
        holds for the whole envelope.
        """
        if predicate is _UNSET:
            return self._original.data
        _require(predicate=predicate)
        return self._original.data if predicate(self._original) else None

    def peek(self) -> P:
        """Return the wrapped envelope unchanged."""
        return self._original

    # -------------------------
    # Code comparison
    # -------------------------

    def code_equals(self, value: Optional[T]) -> bool:
        return self._original.code == value

    def code_not_equals(self, value: Optional[T]) -> bool:
        return not self.code_equals(value)

    # -------------------------
    # Assertions
    # -------------------------

    def _fail(self, mapper: ErrorMapper) -> None:
        error = mapper(self._original)
        if not isinstance(error, MetaException):
            raise ContractViolationError("mapper result")
        raise error

    @overload
    def assert_code(self, expected: T, mapper: ErrorMapper) -> "ProtocolContext[P, T, U, S]": ...

    @overload
    def assert_code(
            self, expected: Callable[[T], bool], mapper: ErrorMapper
    ) -> "ProtocolContext[P, T, U, S]": ...

    def assert_code(self, expected, mapper):
        """
        Assert on the business code.

        ``expected`` is either the code the envelope must carry or a
        predicate over the code. Codes are plain values, so any callable
        is treated as a predicate.

        Raises:
            MetaException: The error built by ``mapper`` when the check fails
            ContractViolationError: When expected or mapper is None
        """
        _require(expected=expected, mapper=mapper)
        if callable(expected):
            passed = expected(self._original.code)
        else:
            passed = self.code_equals(expected)
        if not passed:
            self._fail(mapper)
        return self

    def assert_data(
            self, predicate: Callable[[Optional[S]], bool], mapper: ErrorMapper
    ) -> "ProtocolContext[P, T, U, S]":
        """
        Assert on the payload.

        The raw payload is handed to the predicate, None included, so a
        predicate such as ``lambda d: d is not None`` doubles as a presence
        check. Predicates that dereference the payload must handle None.

        Raises:
            MetaException: The error built by ``mapper`` when the check fails
            ContractViolationError: When predicate or mapper is None
        """
        _require(predicate=predicate, mapper=mapper)
        if not predicate(self._original.data):
            self._fail(mapper)
        return self

    # -------------------------
    # Transformation
    # -------------------------

    @log_execution_time
    def map(self, fn: Callable[[P], Q]) -> "ProtocolContext[Q, T, U, R]":
        """
        Transform the envelope into a new one, usually with another payload type.

        The code and message types are expected to carry over.

        Raises:
            ContractViolationError: When fn is None or returns None
        """
        _require(fn=fn)
        mapped = fn(self._original)
        logger.debug("Mapped %s to %s", type(self._original).__name__, type(mapped).__name__)
        return ProtocolContext.of(mapped)

    # -------------------------
    # Consumers
    # -------------------------

    @overload
    def accept(self, consumer: Callable[[Optional[S]], Any]) -> None: ...

    @overload
    def accept(self, predicate: Callable[[P], bool], consumer: Callable[[Optional[S]], Any]) -> None: ...

    def accept(self, predicate_or_consumer, consumer=_UNSET):
        """
        Hand the payload (possibly None) to a consumer.

        With two arguments, the first is a predicate on the whole envelope
        and the consumer only runs when it holds.
        """
        if consumer is _UNSET:
            _require(consumer=predicate_or_consumer)
            predicate_or_consumer(self._original.data)
            return

        _require(predicate=predicate_or_consumer, consumer=consumer)
        if predicate_or_consumer(self._original):
            consumer(self._original.data)
