"""Tests for the classified error value and its constructor.

Line numbers are read back with ``inspect.currentframe().f_lineno`` on the
line after each call, so those ``new(...)`` calls stay on a single line.
"""

from __future__ import annotations

import inspect
import pickle
import re

import pytest

from odinerr import ClassifiedError, ErrorProtocol, SourceLocation, new

FORMAT_RE = re.compile(
    r"^\((?P<file>[^:]*):(?P<line>\d+)\) \(code:(?P<code>.*)\) "
    r"\(msg:(?P<msg>.*)\) \(err:(?P<err>.*)\)$"
)


def _make_not_found() -> ClassifiedError:
    return new("NOT_FOUND", "missing", stacklevel=2)


class TestClassifiedErrorAccessors:
    """Tests for the capability accessors."""

    def test_values_are_preserved(self) -> None:
        cause = OSError("disk full")
        error = new("E1", "boom", cause)

        assert error.code == "E1"
        assert error.message == "boom"
        assert error.orig_err is cause

    def test_orig_err_defaults_to_none(self) -> None:
        error = new("E1", "boom")

        assert error.orig_err is None

    def test_empty_strings_are_accepted(self) -> None:
        error = new("", "")

        assert error.code == ""
        assert error.message == ""
        assert "(code:) (msg:) (err:)" in str(error)

    def test_accessors_are_idempotent(self) -> None:
        error = new("E1", "boom", ValueError("bad"))

        assert error.code == error.code
        assert error.message == error.message
        assert error.orig_err is error.orig_err
        assert str(error) == str(error)

    @pytest.mark.parametrize(
        "attr", ["code", "message", "orig_err", "location", "source_file", "source_line"]
    )
    def test_attributes_are_read_only(self, attr: str) -> None:
        error = new("E1", "boom")

        with pytest.raises(AttributeError):
            setattr(error, attr, "changed")

    def test_satisfies_error_protocol(self) -> None:
        assert isinstance(new("E1", "boom"), ErrorProtocol)

    def test_is_an_exception(self) -> None:
        with pytest.raises(ClassifiedError) as exc_info:
            raise new("E1", "boom")

        assert exc_info.value.code == "E1"

    def test_cause_is_chained(self) -> None:
        cause = KeyError("id")
        error = new("E1", "boom", cause)

        assert error.__cause__ is cause


class TestClassifiedErrorFormat:
    """Tests for the canonical string representation."""

    def test_format_with_cause(self) -> None:
        error = new("E1", "boom", OSError("disk full"))
        line = inspect.currentframe().f_lineno - 1

        assert str(error) == f"(test_errors_base.py:{line}) (code:E1) (msg:boom) (err:disk full)"

    def test_format_without_cause(self) -> None:
        error = new("E1", "boom")

        match = FORMAT_RE.match(str(error))
        assert match is not None
        assert match.group("err") == ""
        assert str(error).endswith("(err:)")

    def test_format_with_classified_cause(self) -> None:
        inner = ClassifiedError("INNER", "low level", location=SourceLocation("db.py", 7))
        outer = ClassifiedError("OUTER", "high level", inner, SourceLocation("api.py", 3))

        assert str(outer) == (
            "(api.py:3) (code:OUTER) (msg:high level) "
            "(err:(db.py:7) (code:INNER) (msg:low level) (err:))"
        )

    def test_repr_names_fields(self) -> None:
        error = ClassifiedError("E1", "boom", location=SourceLocation("a.py", 1))

        assert repr(error) == (
            "ClassifiedError(code='E1', message='boom', orig_err=None, "
            "location=SourceLocation(file='a.py', line=1))"
        )


class TestCallSiteCapture:
    """Tests for the location recorded by new()."""

    def test_location_is_callers_file_base_name(self) -> None:
        error = new("E1", "boom")

        assert error.source_file == "test_errors_base.py"

    def test_location_is_callers_line(self) -> None:
        error = new("E1", "boom")
        line = inspect.currentframe().f_lineno - 1

        assert error.source_line == line
        assert error.location == SourceLocation("test_errors_base.py", line)

    def test_distinct_call_sites_have_distinct_lines(self) -> None:
        first = new("E1", "boom")
        second = new("E1", "boom")

        assert first.source_file == second.source_file
        assert second.source_line == first.source_line + 1

    def test_stacklevel_attributes_to_helper_caller(self) -> None:
        error = _make_not_found()
        line = inspect.currentframe().f_lineno - 1

        assert error.source_file == "test_errors_base.py"
        assert error.source_line == line

    def test_explicit_location_is_used_verbatim(self) -> None:
        error = new("E1", "boom", location=SourceLocation("handler.py", 42))

        assert error.source_file == "handler.py"
        assert error.source_line == 42
        assert str(error).startswith("(handler.py:42) ")

    def test_direct_construction_has_unknown_location(self) -> None:
        error = ClassifiedError("E1", "boom")

        assert error.location == SourceLocation()
        assert str(error) == "(:0) (code:E1) (msg:boom) (err:)"

    def test_capture_disabled_renders_unknown_location(
        self, location_capture_disabled: None
    ) -> None:
        error = new("E1", "boom", ValueError("bad"))

        assert error.source_file == ""
        assert error.source_line == 0
        assert str(error) == "(:0) (code:E1) (msg:boom) (err:bad)"

    def test_capture_disabled_still_honors_explicit_location(
        self, location_capture_disabled: None
    ) -> None:
        error = new("E1", "boom", location=SourceLocation("x.py", 9))

        assert str(error).startswith("(x.py:9) ")

    def test_missing_frame_degrades_to_unknown(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(inspect, "currentframe", lambda: None)

        error = new("E1", "boom")

        assert error.location == SourceLocation()

    def test_stack_too_shallow_degrades_to_unknown(self) -> None:
        error = new("E1", "boom", stacklevel=10_000)

        assert error.location == SourceLocation()
        assert str(error).startswith("(:0) ")


    @pytest.mark.parametrize("stacklevel", [0, -3])
    def test_stacklevel_below_one_means_direct_caller(self, stacklevel: int) -> None:
        error = new("E1", "boom", stacklevel=stacklevel)
        line = inspect.currentframe().f_lineno - 1

        assert error.location == SourceLocation("test_errors_base.py", line)

    def test_malformed_setting_does_not_break_construction(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ODINERR_CAPTURE_LOCATION", "sometimes")

        error = new("E1", "boom", ValueError("bad"))
        line = inspect.currentframe().f_lineno - 1

        assert isinstance(error, ClassifiedError)
        assert str(error) == f"(test_errors_base.py:{line}) (code:E1) (msg:boom) (err:bad)"


class TestImmutability:
    def test_reinitialization_is_rejected(self) -> None:
        error = new("E1", "boom")

        with pytest.raises(AttributeError):
            error.__init__("E2", "other")

        assert error.code == "E1"
        assert error.message == "boom"

    def test_args_do_not_change_rendering(self) -> None:
        error = ClassifiedError("E1", "boom", location=SourceLocation("a.py", 1))
        error.args = ("changed",)

        assert str(error) == "(a.py:1) (code:E1) (msg:boom) (err:)"


class TestPickling:
    """Classified errors cross process boundaries intact."""

    def test_pickle_keeps_notes(self) -> None:
        error = new("E1", "boom")
        error.add_note("while loading user 42")

        restored = pickle.loads(pickle.dumps(error))

        assert restored.__notes__ == ["while loading user 42"]
        assert restored.code == "E1"

    def test_pickle_preserves_fields(self) -> None:
        error = new("E1", "boom", ValueError("bad"))

        restored = pickle.loads(pickle.dumps(error))

        assert restored.code == "E1"
        assert restored.message == "boom"
        assert isinstance(restored.orig_err, ValueError)
        assert restored.location == error.location
        assert str(restored) == str(error)
