"""Error definitions for errchain."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Protocol, runtime_checkable

INTERNAL_MESSAGE = "Internal error or inconsistency"


class Kind(str, Enum):
    """Stable error kinds for caller decisions.

    Consumers needing more kinds can declare their own ``str`` enum; kinds are
    compared by value, so ``kind_of`` passes them through untouched.
    """

    INTERNAL = "internal"
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    PERMISSION = "permission"
    EXIST = "exist"
    IO = "io"
    OTHER = "other"


@runtime_checkable
class Causer(Protocol):
    """Errors that expose the error they wrap.

    A ``cause`` of ``None`` ends the chain. Inspection detects these members
    statically, as ``isinstance`` does on Python 3.12+, so a class-level
    ``__getattr__`` does not make an error a causer. Accessors must not raise.
    """

    @property
    def cause(self) -> BaseException | None: ...


@runtime_checkable
class Kinder(Protocol):
    """Errors that expose a classification."""

    @property
    def kind(self) -> Kind: ...


@runtime_checkable
class Operator(Protocol):
    """Errors that expose the operation being performed when they happened."""

    @property
    def op(self) -> str | None: ...


@dataclass
class Error(Exception):
    """Structured error type for errchain.

    Attributes:
        kind: Stable, actionable error kind.
        message: Human-readable description.
        cause: Wrapped error, the next link in the chain.
        op: Operation being performed, e.g. ``"store.get"``.
    """

    kind: Kind
    message: str
    cause: BaseException | None = None
    op: str | None = None

    def __str__(self) -> str:
        kind = self.kind.value if isinstance(self.kind, Enum) else self.kind
        if self.op:
            return f"{self.op}: [{kind}] {self.message}"
        return f"[{kind}] {self.message}"

    def with_cause(self, cause: BaseException) -> Error:
        return replace(self, cause=cause)
