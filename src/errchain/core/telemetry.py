"""Logfire events for chain walks that end somewhere unexpected.

Two outcomes are worth reporting to an operator: ``unwrap`` finding no
structured error and synthesizing one, and the walker meeting a chain that
loops back on itself. Both are silent until :func:`instrument_errchain` runs.
"""

from __future__ import annotations

try:  # pragma: no cover - optional dependency
    import logfire  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    logfire = None

from errchain.core.errors import Error, Kind

_INSTRUMENTED = False


def _active() -> bool:
    return _INSTRUMENTED and logfire is not None


def record_synthesis(terminal: BaseException | None, depth: int, cycle: bool) -> None:
    """Report an ``unwrap`` fallback with the shape of the chain it walked."""
    if not _active():
        return
    logfire.info(
        "errchain.unwrap.synthesize",
        terminal_type=type(terminal).__name__ if terminal is not None else None,
        chain_depth=depth,
        cycle=cycle,
    )


def record_cycle(link: BaseException, depth: int) -> None:
    if not _active():
        return
    logfire.warn("errchain.walk.cycle", link_type=type(link).__name__, chain_depth=depth)


def instrument_errchain() -> None:
    """Send errchain's chain events to Logfire; configure Logfire first."""
    if logfire is None:
        raise Error(
            Kind.OTHER,
            "Logfire is not installed. Install with 'errchain[observability]' to report chain events.",
        )
    global _INSTRUMENTED
    _INSTRUMENTED = True
