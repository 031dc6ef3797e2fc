"""errchain public API."""

from errchain.core import (
    INTERNAL_MESSAGE,
    Causer,
    Error,
    Kind,
    Kinder,
    Operator,
    cause,
    instrument_errchain,
    is_kind,
    kind_of,
    op_of,
    ops,
    unwrap,
)

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
