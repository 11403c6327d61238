# tests/unit/test_capture.py
from __future__ import annotations

from unifyerr.config import CaptureConfig, configure, detect_capabilities, effective_capabilities
from unifyerr.core.capture import (
    Backtrace,
    Location,
    backtrace_if_absent,
    backtrace_of,
    capture_backtrace,
    caller_location,
)


def nested(depth: int, fn):
    if depth == 0:
        return fn()
    return nested(depth - 1, fn)


def test_host_supports_frames():
    host = detect_capabilities()

    assert host.backtrace is True
    assert host.track_caller is True
    assert "Backtrace: enabled" in str(host)


def test_effective_capabilities_follow_config():
    configure(CaptureConfig(backtrace=False, track_caller=True))

    caps = effective_capabilities()

    assert caps.backtrace is False
    assert caps.track_caller is True
    assert caps.to_dict() == {"backtrace": False, "track_caller": True}


def test_capture_backtrace_ends_at_caller():
    # stacklevel 0 is the function asking for the capture
    bt = capture_backtrace(0)

    assert bt.frames[-1].name == "test_capture_backtrace_ends_at_caller"
    assert "test_capture_backtrace_ends_at_caller" in str(bt)


def test_capture_backtrace_respects_max_frames():
    configure(CaptureConfig(max_frames=3))

    bt = nested(10, capture_backtrace)

    assert len(bt) == 3
    assert [f.name for f in bt] == ["nested", "nested", "nested"]


def test_capture_backtrace_disabled():
    configure(CaptureConfig(backtrace=False))

    assert capture_backtrace() is None


def test_backtrace_of_prefers_explicit_attribute():
    explicit = capture_backtrace()

    class WithBacktrace(Exception):
        backtrace = explicit

    try:
        raise WithBacktrace()
    except WithBacktrace as e:
        assert backtrace_of(e) is explicit


def test_backtrace_of_unraised_error_is_none():
    assert backtrace_of(ValueError("never raised")) is None
    assert backtrace_of("not an error") is None


def test_backtrace_if_absent():
    try:
        raise ValueError("raised")
    except ValueError as e:
        assert backtrace_if_absent(e) is None

    fresh = backtrace_if_absent(ValueError("never raised"), 0)
    assert fresh is not None
    assert fresh.frames[-1].name == "test_backtrace_if_absent"


def test_backtrace_to_list():
    bt = capture_backtrace(0)

    last = bt.to_list()[-1]

    assert last["function"] == "test_backtrace_to_list"
    assert last["file"] == __file__
    assert isinstance(last["line"], int)


def test_backtrace_from_traceback():
    try:
        nested(2, lambda: 1 / 0)
    except ZeroDivisionError as e:
        bt = Backtrace.from_traceback(e.__traceback__)

    assert bt.frames[0].name == "test_backtrace_from_traceback"
    assert bt.frames[-1].name == "<lambda>"


def test_caller_location():
    def where():
        return caller_location()

    loc = where()

    assert isinstance(loc, Location)
    assert loc.function == "test_caller_location"
    assert str(loc) == f"{__file__}:{loc.line}"
    assert loc.to_dict()["line"] == loc.line


def test_caller_location_disabled():
    configure(CaptureConfig(track_caller=False))

    assert caller_location() is None


def test_caller_location_beyond_stack_top():
    assert caller_location(10_000) is None
