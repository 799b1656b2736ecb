"""Optional host-runtime capabilities used while masking."""

from __future__ import annotations

import traceback
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from stackmask.grammar import failure_header, format_frames
from stackmask.masking.scrubber import is_internal_path


class HostCapabilityError(Exception):
    """Raised by a host that cannot provide a requested capability."""

    def __init__(self, host: str, capability: str) -> None:
        self.host = host
        self.capability = capability
        super().__init__(f"Host '{host}' does not support {capability}")


class HostRuntime(ABC):
    """Hooks into the runtime that owns the failures being masked.

    Every capability has a working default so the maskers can run without
    any particular runtime present.
    """

    @property
    @abstractmethod
    def name(self) -> str: ...

    def suppress_decoration(self, error: BaseException) -> None:
        """Stop the runtime from adding its own context to ``error``."""

    def capture_stack(
        self, error: BaseException, before: Callable[..., Any] | None = None
    ) -> str:
        """Render the current call stack as raw diagnostic text for ``error``.

        Frames are listed newest first. The engine's own frames are left out,
        and when ``before`` is given so is every frame from its most recent
        call inward.
        """
        frames = traceback.extract_stack()
        while frames and is_internal_path(frames[-1].filename):
            frames.pop()

        if before is not None:
            frames = _frames_before(frames, before)

        return "\n".join([failure_header(error), *format_frames(frames)])


def _frames_before(
    frames: traceback.StackSummary, before: Callable[..., Any]
) -> traceback.StackSummary:
    code = getattr(getattr(before, "__func__", before), "__code__", None)
    if code is None:
        return frames
    for index in range(len(frames) - 1, -1, -1):
        frame = frames[index]
        if frame.name == code.co_name and frame.filename == code.co_filename:
            return traceback.StackSummary.from_list(frames[:index])
    # Like the host runtimes this mirrors: no call to ``before``, no frames.
    return traceback.StackSummary.from_list([])
