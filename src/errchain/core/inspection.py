"""Inspection of error chains.

A chain starts at some error and follows its ``cause`` until reaching a value
that does not expose one, or until a ``cause`` comes back ``None``. Every
function here accepts ``None`` and plain exceptions, and none of them raise.

Capabilities are detected with :func:`inspect.getattr_static`, so a dynamic
``__getattr__`` never runs during detection. The ``cause``, ``kind`` and ``op``
accessors themselves are read normally and are expected not to raise.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from errchain.core import telemetry
from errchain.core.errors import INTERNAL_MESSAGE, Error, Kind

logger = logging.getLogger(__name__)

_MISSING = object()


def _exposes(err: BaseException, name: str) -> bool:
    return inspect.getattr_static(err, name, _MISSING) is not _MISSING


@dataclass
class _Walk:
    links: list[BaseException] = field(default_factory=list)
    found: BaseException | None = None
    # None when the last causer reported no cause
    end: BaseException | None = None
    cycle: bool = False


def _walk(err: BaseException | None, match: Callable[[BaseException], bool] | None = None) -> _Walk:
    walk = _Walk()
    seen: set[int] = set()
    link = err
    while link is not None:
        if id(link) in seen:
            walk.cycle = True
            logger.warning("error chain cycles back to %r after %d links; stopping walk", link, len(walk.links))
            telemetry.record_cycle(link, len(walk.links))
            break
        seen.add(id(link))
        walk.links.append(link)
        walk.end = link
        if match is not None and match(link):
            walk.found = link
            break
        if not _exposes(link, "cause"):
            break
        link = link.cause  # type: ignore[attr-defined]
        if link is None:
            walk.end = None
    return walk


def cause(err: BaseException | None) -> BaseException | None:
    """Return the deepest cause of ``err``.

    Errors without a ``cause`` are returned unchanged. ``None`` yields ``None``,
    and so does a chain whose last causer reports no cause.
    """
    return _walk(err).end


def unwrap(err: BaseException | None) -> Error | None:
    """Return the first :class:`Error` in the chain.

    When the chain holds none, a new ``Kind.INTERNAL`` error is synthesized
    around the end of the chain.
    """
    if err is None:
        return None
    walk = _walk(err, lambda link: isinstance(link, Error))
    if walk.found is not None:
        return walk.found  # type: ignore[return-value]
    telemetry.record_synthesis(walk.end, len(walk.links), walk.cycle)
    return Error(Kind.INTERNAL, INTERNAL_MESSAGE, cause=walk.end)


def kind_of(err: BaseException | None) -> Kind:
    """Return the kind declared by the first kinder in the chain, else ``Kind.INTERNAL``."""
    found = _walk(err, lambda link: _exposes(link, "kind")).found
    if found is None:
        return Kind.INTERNAL
    return found.kind  # type: ignore[attr-defined]


def is_kind(err: BaseException | None, kind: Kind) -> bool:
    """Report whether ``kind_of(err)`` equals ``kind``."""
    return kind_of(err) == kind


def op_of(err: BaseException | None) -> str | None:
    found = _walk(err, lambda link: _exposes(link, "op") and bool(link.op)).found  # type: ignore[attr-defined]
    if found is None:
        return None
    return found.op  # type: ignore[attr-defined]


def ops(err: BaseException | None) -> list[str]:
    """Return every operation along the chain, outermost first."""
    return [link.op for link in _walk(err).links if _exposes(link, "op") and link.op]  # type: ignore[attr-defined]
