"""Host runtime lookup: hosts register by name and are shared once built."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from stackmask.host.base import HostRuntime
from stackmask.settings import Settings, get_settings

H = TypeVar("H", bound=HostRuntime)

_host_classes: dict[str, type[HostRuntime]] = {}
_host_instances: dict[str, HostRuntime] = {}


class UnsupportedHostError(LookupError):
    """The configured host name has no registered implementation."""

    def __init__(self, name: str) -> None:
        self.host_name = name
        super().__init__(
            f"Unsupported host '{name}'. Available: {', '.join(available_hosts())}"
        )


def register_host(name: str) -> Callable[[type[H]], type[H]]:
    """Class decorator registering a host under ``name``.

    Registering a name again replaces the class and drops the shared instance.
    """

    def decorator(host_class: type[H]) -> type[H]:
        _host_classes[name] = host_class
        _host_instances.pop(name, None)
        return host_class

    return decorator


def get_host(name: str | None = None, settings: Settings | None = None) -> HostRuntime:
    """Return the shared host named ``name``, or the one ``Settings.host`` names.

    Hosts hold no per-failure state, so one instance per name is reused.
    """
    if name is None:
        name = (settings or get_settings()).host
    host = _host_instances.get(name)
    if host is None:
        if name not in _host_classes:
            raise UnsupportedHostError(name)
        host = _host_instances[name] = _host_classes[name]()
    return host


def available_hosts() -> list[str]:
    return sorted(_host_classes)
