from typing import Optional, Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)
U_co = TypeVar("U_co", covariant=True)
S_co = TypeVar("S_co", covariant=True)


@runtime_checkable
class TerResult(Protocol[T_co, U_co, S_co]):
    """
    Tri-field response contract: a code, a message and a data payload.

    Conformance is structural. Any object exposing the three attributes
    can be wrapped in a ProtocolContext, whether it is a pydantic model,
    a dataclass or a plain class.
    """

    @property
    def code(self) -> T_co: ...

    @property
    def message(self) -> Optional[U_co]: ...

    @property
    def data(self) -> Optional[S_co]: ...
