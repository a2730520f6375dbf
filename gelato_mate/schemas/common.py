from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from gelato_mate.core.config import get_settings

S = TypeVar("S")


class Envelope(BaseModel, Generic[S]):
    """
    Concrete tri-field response envelope.

    Instances are frozen; the ``with_*`` helpers return modified copies.
    """

    code: int
    message: Optional[str] = None
    data: Optional[S] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls) -> "Envelope[Any]":
        """Empty envelope carrying the configured success code."""
        return cls(code=get_settings().success_code)

    @classmethod
    def success(cls, data: Optional[S] = None, message: Optional[str] = None) -> "Envelope[S]":
        settings = get_settings()
        return cls(
            code=settings.success_code,
            message=message if message is not None else settings.success_message,
            data=data,
        )

    def failure(self, code: Optional[int] = None, message: Optional[str] = None) -> "Envelope[S]":
        """
        Build a payload-less envelope reporting a failure.

        Falls back to the configured failure code and message (500, "failure").
        """
        settings = get_settings()
        return type(self)(
            code=code if code is not None else settings.failure_code,
            message=message if message is not None else settings.failure_message,
        )

    def with_code(self, code: int) -> "Envelope[S]":
        return self.model_copy(update={"code": code})

    def with_message(self, message: Optional[str]) -> "Envelope[S]":
        return self.model_copy(update={"message": message})

    def with_data(self, data: Any) -> "Envelope[Any]":
        # Rebuilt rather than copied so the payload type may change
        return Envelope(code=self.code, message=self.message, data=data)

    def __str__(self) -> str:
        message = f"'{self.message}'" if self.message is not None else None
        return f"Envelope{{code={self.code}, message={message}, data={self.data}}}"
