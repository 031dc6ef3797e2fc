"""Core primitives for errchain."""

from errchain.core.errors import INTERNAL_MESSAGE, Causer, Error, Kind, Kinder, Operator
from errchain.core.inspection import cause, is_kind, kind_of, op_of, ops, unwrap
from errchain.core.telemetry import instrument_errchain

__all__ = [
    "INTERNAL_MESSAGE",
    "Causer",
    "Error",
    "Kind",
    "Kinder",
    "Operator",
    "cause",
    "instrument_errchain",
    "is_kind",
    "kind_of",
    "op_of",
    "ops",
    "unwrap",
]
