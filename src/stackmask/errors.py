"""Entry points used by the transformation pipeline."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from stackmask.host import HostRuntime, get_host
from stackmask.masking.buffers import SourceProducer
from stackmask.settings import Settings
from stackmask.wrapper import MaskedFailure

E = TypeVar("E", bound=BaseException)


def capture_stack_trace(
    error: E,
    before: Callable[..., Any] | None = None,
    *,
    host: HostRuntime | None = None,
) -> E:
    """Attach the current call stack to ``error`` as its raw ``stack`` text."""
    host = host or get_host()
    error.stack = host.capture_stack(error, before)  # type: ignore[attr-defined]
    return error


def mask_stack_trace(
    error: BaseException,
    source: str | SourceProducer,
    compiled: str | None = None,
    *,
    host: HostRuntime | None = None,
    settings: Settings | None = None,
) -> MaskedFailure:
    """Wrap ``error`` so its stack points at ``source`` when first read.

    ``source`` may be a zero-argument callable; it is invoked at most once,
    on the first read of ``stack``. Pass ``compiled`` for failures raised
    while running the transformed text.
    """
    return MaskedFailure(error, source, compiled, host=host, settings=settings)
