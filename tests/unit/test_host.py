"""Tests for host runtimes and stack capture."""

from __future__ import annotations

from pathlib import Path

import pytest

from stackmask.errors import capture_stack_trace
from stackmask.grammar import parse_frame
from stackmask.host import (
    UnsupportedHostError,
    available_hosts,
    get_host,
    register_host,
    registry,
)
from stackmask.host.null import NullHost
from stackmask.host.python import PythonHost
from stackmask.masking.scrubber import INTERNAL_PATHS
from stackmask.settings import Settings, reset_settings


def _outer(before: object = None) -> ValueError:
    return _inner(before)


def _inner(before: object = None) -> ValueError:
    if before == "inner":
        before = _inner
    return capture_stack_trace(ValueError("boom"), before=before)  # type: ignore[arg-type]


class TestHostRegistry:
    def test_builtin_hosts(self) -> None:
        assert {"null", "python"} <= set(available_hosts())
        assert isinstance(get_host("null"), NullHost)
        assert isinstance(get_host("python"), PythonHost)

    def test_unknown_host(self) -> None:
        with pytest.raises(UnsupportedHostError, match="Unsupported host 'v8'"):
            get_host("v8")

    def test_instances_shared(self) -> None:
        assert get_host("python") is get_host("python")

    def test_name_from_settings(self) -> None:
        settings = Settings(_env_file=None, host="python")
        assert isinstance(get_host(settings=settings), PythonHost)

    def test_default_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STACKMASK_HOST", "python")
        reset_settings()
        assert get_host().name == "python"

    def test_register_replaces_class(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(registry, "_host_classes", dict(registry._host_classes))
        monkeypatch.setattr(registry, "_host_instances", dict(registry._host_instances))

        @register_host("recording")
        class FirstHost(NullHost):
            pass

        first = get_host("recording")
        assert type(first) is FirstHost
        assert "recording" in available_hosts()

        @register_host("recording")
        class SecondHost(NullHost):
            pass

        second = get_host("recording")
        assert type(second) is SecondHost
        assert second is not first


class TestCaptureStack:
    def test_header_and_frames(self) -> None:
        error = capture_stack_trace(ValueError("boom"))
        lines = error.stack.split("\n")  # type: ignore[attr-defined]
        assert lines[0] == "ValueError: boom"
        location = parse_frame(lines[1])
        assert location is not None
        assert Path(location.file_path or "").name == "test_host.py"
        assert lines[1].startswith("    at test_header_and_frames (")

    def test_engine_frames_left_out(self) -> None:
        error = capture_stack_trace(ValueError("boom"))
        assert INTERNAL_PATHS[0] not in error.stack  # type: ignore[attr-defined]

    def test_frames_newest_first(self) -> None:
        lines = _outer().stack.split("\n")  # type: ignore[attr-defined]
        assert lines[1].startswith("    at _inner (")
        assert lines[2].startswith("    at _outer (")

    def test_before_cuts_frames(self) -> None:
        lines = _outer("inner").stack.split("\n")  # type: ignore[attr-defined]
        assert lines[1].startswith("    at _outer (")

    def test_before_not_on_stack(self) -> None:
        def elsewhere() -> None: ...

        error = capture_stack_trace(ValueError(), before=elsewhere)
        assert error.stack == "ValueError"  # type: ignore[attr-defined]

    def test_explicit_host(self) -> None:
        error = capture_stack_trace(ValueError("x"), host=PythonHost())
        assert error.stack.startswith("ValueError: x\n    at ")  # type: ignore[attr-defined]


class TestSuppression:
    def test_null_host_is_noop(self) -> None:
        error = SyntaxError("bad", ("/a.py", 1, 1, "x ="))
        NullHost().suppress_decoration(error)
        assert error.text == "x ="

    def test_python_host_ignores_runtime_errors(self) -> None:
        error = TypeError("bad")
        PythonHost().suppress_decoration(error)
        assert str(error) == "bad"
