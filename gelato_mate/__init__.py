# gelato_mate/__init__.py
from gelato_mate.client.context import ProtocolContext
from gelato_mate.core.exceptions import (
    ContractViolationError,
    I18nException,
    MetaException,
    UnaryException,
)
from gelato_mate.schemas.common import Envelope
from gelato_mate.schemas.protocol import TerResult

__all__ = [
    "ProtocolContext",
    "ContractViolationError",
    "I18nException",
    "MetaException",
    "UnaryException",
    "Envelope",
    "TerResult",
]
