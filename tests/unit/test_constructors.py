# tests/unit/test_constructors.py
from __future__ import annotations

import sys

import pytest

from unifyerr import (
    Backtrace,
    BoxedError,
    UnifiedError,
    from_boxed,
    from_error,
    from_message,
    unify,
)


def raised(exc: BaseException) -> BaseException:
    """Return ``exc`` after raising it once so it carries a traceback"""
    try:
        raise exc
    except BaseException as e:
        return e


def chained(outer: BaseException, cause: BaseException) -> BaseException:
    try:
        try:
            raise cause
        except BaseException as inner:
            raise outer from inner
    except BaseException as e:
        return e


def this_line() -> int:
    return sys._getframe(1).f_lineno


# -------- adhoc --------

def test_disk_full_message():
    err = unify("disk full")

    assert isinstance(err, UnifiedError)
    assert str(err) == "disk full"
    assert err.source() is None
    assert list(err.causes()) == []
    assert err.inner is None


def test_adhoc_display_is_fixed_at_construction():
    items = ["a"]
    err = unify(items)
    items.append("b")

    assert str(err) == "['a']"
    assert repr(err) == "UnifiedError(['a'])"


def test_adhoc_always_captures_backtrace():
    err = unify("no space left")

    assert err.backtrace is not None
    assert len(err.backtrace) > 0
    # newest frame is the construction site, not library internals
    assert err.backtrace.frames[-1].filename == __file__
    assert err.backtrace.frames[-1].name == "test_adhoc_always_captures_backtrace"


def test_adhoc_without_backtrace_when_disabled(capture_disabled):
    err = unify("no space left")

    assert err.backtrace is None
    assert err.location is None


def test_from_message_treats_exception_as_plain_text():
    cause = ValueError("inner")
    exc = chained(RuntimeError("outer"), cause)

    err = from_message(exc)

    assert str(err) == "outer"
    assert err.source() is None


# -------- structured cause --------

def test_structured_cause_keeps_one_level_of_chain():
    e2 = ValueError("bad sector")
    e1 = chained(OSError("read failed"), e2)

    err = unify(e1)

    assert str(err) == "read failed"
    assert err.inner is e1
    assert err.source() is e2
    assert str(err.source()) == str(e2)


def test_structured_cause_follows_implicit_context():
    try:
        try:
            raise KeyError("missing")
        except KeyError:
            raise RuntimeError("lookup failed")
    except RuntimeError as e:
        err = unify(e)

    assert [str(c) for c in err.causes()] == ["'missing'"]


def test_structured_cause_respects_suppressed_context():
    try:
        try:
            raise KeyError("missing")
        except KeyError:
            raise RuntimeError("lookup failed") from None
    except RuntimeError as e:
        err = unify(e)

    assert err.source() is None


def test_structured_cause_reuses_traceback_of_raised_error():
    exc = raised(ValueError("bad"))

    err = unify(exc)

    assert err.backtrace is not None
    assert err.backtrace.frames[-1].name == "raised"


def test_structured_cause_does_not_capture_for_unraised_error():
    err = unify(ValueError("never raised"))

    assert err.backtrace is None
    assert err.location is not None


def test_unified_error_converts_to_itself_with_new_location():
    first = unify("disk full")
    first_location = first.location

    again = unify(first)

    assert again is first
    assert again.location != first_location
    assert again.location.line == first_location.line + 3


def test_from_error_requires_an_exception():
    with pytest.raises(TypeError):
        from_error("not an exception")


# -------- boxed --------

def test_boxed_keeps_existing_backtrace():
    box = BoxedError(raised(ValueError("bad")))
    original = box.backtrace

    err = unify(box)

    assert original is not None
    assert err.backtrace is original


def test_boxed_keeps_explicit_backtrace():
    bt = Backtrace.from_traceback(raised(ValueError("bad")).__traceback__)
    box = BoxedError(ValueError("other"), backtrace=bt)

    err = unify(box)

    assert err.backtrace is bt


def test_boxed_without_backtrace_gets_fresh_capture():
    box = BoxedError(ValueError("bad"))
    assert box.backtrace is None

    err = unify(box)

    assert err.backtrace is not None
    assert len(err.backtrace) > 0
    assert err.backtrace.frames[-1].name == "test_boxed_without_backtrace_gets_fresh_capture"


def test_boxed_without_backtrace_when_disabled(capture_disabled):
    err = unify(BoxedError(ValueError("bad")))

    assert err.backtrace is None
    assert err.location is None


def test_box_raised_after_boxing_reports_its_raise_traceback():
    box = BoxedError(ValueError("never raised"))
    assert box.backtrace is None
    try:
        raise box
    except BoxedError:
        pass

    err = unify(box)

    assert box.backtrace is not None
    assert box.backtrace is box.backtrace
    assert err.backtrace is box.backtrace
    assert box.backtrace.frames[-1].name == "test_box_raised_after_boxing_reports_its_raise_traceback"


def test_boxed_identity_and_chain_preserved():
    e2 = ValueError("root")
    box = BoxedError(chained(RuntimeError("worker failed"), e2))

    err = unify(box)

    assert err.inner is box
    assert str(err) == "worker failed"
    assert err.source() is e2


def test_boxed_path_chosen_over_structured_path():
    box = BoxedError(ValueError("bad"))

    via_resolver = unify(box)
    via_structured = from_error(box)

    # the boxed path captures a backtrace the structured path never does
    assert via_resolver.inner is box
    assert via_resolver.backtrace is not None
    assert via_structured.backtrace is None


def test_from_boxed_boxes_bare_exception():
    exc = ValueError("bad")

    err = from_boxed(exc)

    assert isinstance(err.inner, BoxedError)
    assert err.inner.error is exc
    assert str(err) == "bad"


# -------- location --------

def test_distinct_lines_give_distinct_locations():
    first = unify("a")
    second = unify("a")

    assert first.location is not None
    assert second.location is not None
    assert first.location != second.location
    assert second.location.line == first.location.line + 1
    assert first.location.file == __file__
    assert first.location.function == "test_distinct_lines_give_distinct_locations"


def test_location_points_at_caller_line():
    line = this_line() + 1
    err = unify(ValueError("bad"))

    assert err.location.line == line


def test_locations_absent_when_tracking_disabled(capture_disabled):
    first = unify("a")
    second = unify(ValueError("b"))

    assert first.location is None
    assert second.location is None


def test_stacklevel_attributes_helper_callers():
    def fail(message):
        return unify(message, stacklevel=2)

    line = this_line() + 1
    err = fail("from helper")

    assert err.location.line == line
    assert err.backtrace.frames[-1].lineno == line
