from __future__ import annotations

from errchain import INTERNAL_MESSAGE, Causer, Error, Kind, Kinder, Operator


def test_error_str_includes_kind_value() -> None:
    err = Error(Kind.NOT_FOUND, "user 42 missing")
    assert str(err) == "[not_found] user 42 missing"


def test_error_str_prefixes_op() -> None:
    err = Error(Kind.PERMISSION, "denied", op="store.get")
    assert str(err) == "store.get: [permission] denied"


def test_error_accepts_consumer_kind_tokens() -> None:
    err = Error("quota", "over quota")  # type: ignore[arg-type]
    assert str(err) == "[quota] over quota"


def test_with_cause_returns_copy() -> None:
    base = ValueError("boom")
    err = Error(Kind.IO, "read failed", op="file.read")
    wrapped = err.with_cause(base)

    assert wrapped is not err
    assert err.cause is None
    assert wrapped.cause is base
    assert wrapped.kind == Kind.IO
    assert wrapped.op == "file.read"


def test_error_is_raisable() -> None:
    try:
        raise Error(Kind.INVALID, "bad input")
    except Error as exc:
        assert exc.kind == Kind.INVALID


def test_error_satisfies_all_capabilities() -> None:
    err = Error(Kind.INTERNAL, INTERNAL_MESSAGE)
    assert isinstance(err, Causer)
    assert isinstance(err, Kinder)
    assert isinstance(err, Operator)


def test_plain_exception_has_no_capabilities() -> None:
    err = RuntimeError("boom")
    assert not isinstance(err, Causer)
    assert not isinstance(err, Kinder)
    assert not isinstance(err, Operator)


def test_kind_compares_with_its_value() -> None:
    assert Kind.INTERNAL == "internal"
    assert Kind("not_found") is Kind.NOT_FOUND
