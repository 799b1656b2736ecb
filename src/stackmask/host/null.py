"""Host without decoration hooks."""

from __future__ import annotations

from stackmask.host.base import HostRuntime
from stackmask.host.registry import register_host


@register_host("null")
class NullHost(HostRuntime):
    """Leaves failures untouched; only stack capture is available."""

    @property
    def name(self) -> str:
        return "null"
