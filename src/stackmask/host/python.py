"""CPython host: suppresses the interpreter's own syntax error context."""

from __future__ import annotations

from stackmask.host.base import HostCapabilityError, HostRuntime
from stackmask.host.registry import register_host


@register_host("python")
class PythonHost(HostRuntime):
    @property
    def name(self) -> str:
        return "python"

    def suppress_decoration(self, error: BaseException) -> None:
        """Clear ``SyntaxError.text`` so tracebacks print no source line or caret.

        The masked stack already carries that context.
        """
        if not isinstance(error, SyntaxError):
            return
        try:
            error.text = None
        except (AttributeError, TypeError) as exc:
            raise HostCapabilityError(self.name, "suppress_decoration") from exc
