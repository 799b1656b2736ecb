"""Deferred decoration: mask a failure's stack the first time it is read."""

from __future__ import annotations

import logging
import threading
import traceback
from typing import Any

from stackmask.grammar import failure_header, format_frames
from stackmask.host import HostCapabilityError, HostRuntime, get_host
from stackmask.masking.buffers import SourceProducer, resolve_source
from stackmask.masking.parser import mask_parser_stack
from stackmask.masking.runtime import mask_stack
from stackmask.models.failure import FailureKind, MaskIssue, failure_kind
from stackmask.settings import Settings, get_settings

logger = logging.getLogger("stackmask.wrapper")

# Set on failures whose ``stack`` already holds masked text.
MASKED_ATTR = "_stackmask_masked"

_PROXY_FIELDS = frozenset(
    {"_error", "_source", "_compiled", "_host", "_settings", "_lock", "_computed", "_stack"}
)


class MaskedFailure:
    """Transparent proxy over a failure whose ``stack`` is masked lazily.

    Every attribute other than ``stack`` is read from and written to the
    wrapped failure. ``stack`` is computed once, on first read, and cached;
    the source producer (if any) is only called then. Use :meth:`unwrap`
    to get the failure back for ``raise``.
    """

    def __init__(
        self,
        error: BaseException,
        source: str | SourceProducer,
        compiled: str | None = None,
        *,
        host: HostRuntime | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or get_settings()
        object.__setattr__(self, "_error", error)
        object.__setattr__(self, "_source", source)
        object.__setattr__(self, "_compiled", compiled)
        object.__setattr__(self, "_host", host or get_host(settings=settings))
        object.__setattr__(self, "_settings", settings)
        object.__setattr__(self, "_lock", threading.Lock())
        object.__setattr__(self, "_computed", False)
        object.__setattr__(self, "_stack", None)

    # -- stack ---------------------------------------------------------------

    @property
    def stack(self) -> str:
        if not self._computed:
            with self._lock:
                if not self._computed:
                    object.__setattr__(self, "_stack", self._decorate())
                    object.__setattr__(self, "_computed", True)
        return self._stack

    @stack.setter
    def stack(self, value: str) -> None:
        with self._lock:
            self._error.stack = value
            object.__setattr__(self, "_stack", value)
            object.__setattr__(self, "_computed", True)

    def _decorate(self) -> str:
        error = self._error
        if getattr(error, MASKED_ATTR, False):
            return error.stack

        source = resolve_source(self._source)
        object.__setattr__(self, "_source", source)
        self._suppress_decoration(error)

        raw = _raw_stack(error)
        if failure_kind(error) is FailureKind.PARSE:
            text = mask_parser_stack(raw, source, settings=self._settings)
        else:
            text = mask_stack(raw, source, self._compiled, settings=self._settings)

        try:
            error.stack = text
            setattr(error, MASKED_ATTR, True)
        except (AttributeError, TypeError):
            logger.debug(
                "Failure %s does not accept attributes; stack kept on the proxy",
                type(error).__name__,
            )
        return text

    def _suppress_decoration(self, error: BaseException) -> None:
        suppress = getattr(self._host, "suppress_decoration", None)
        if suppress is None:
            logger.debug("%s: host cannot suppress decoration", MaskIssue.CAPABILITY_UNAVAILABLE)
            return
        try:
            suppress(error)
        except HostCapabilityError as exc:
            logger.debug("%s: %s", MaskIssue.CAPABILITY_UNAVAILABLE, exc)

    # -- delegation ----------------------------------------------------------

    def unwrap(self) -> BaseException:
        return self._error

    @property  # type: ignore[misc]
    def __class__(self) -> type:
        return type(self._error)

    def __getattr__(self, name: str) -> Any:
        if name in _PROXY_FIELDS:
            raise AttributeError(name)
        return getattr(self._error, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "stack":
            object.__setattr__(self, name, value)
        else:
            setattr(self._error, name, value)

    def __delattr__(self, name: str) -> None:
        delattr(self._error, name)

    def __str__(self) -> str:
        return str(self._error)

    def __repr__(self) -> str:
        return repr(self._error)


def _raw_stack(error: BaseException) -> str:
    """The unmasked diagnostic text of ``error``.

    Without a captured ``stack`` the text is built from the failure itself:
    a ``SyntaxError`` header in the one-line parse failure form, followed by
    the frames of ``__traceback__`` when the failure was raised.
    """
    stack = getattr(error, "stack", None)
    if isinstance(stack, str):
        return stack

    lines = [failure_header(error)]
    if error.__traceback__ is not None:
        lines.extend(format_frames(traceback.extract_tb(error.__traceback__)))
    return "\n".join(lines)
