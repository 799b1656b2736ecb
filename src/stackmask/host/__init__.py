"""Host runtime plugins for stackmask."""

# Import hosts to trigger registration
import stackmask.host.null as _null  # noqa: F401
import stackmask.host.python as _python  # noqa: F401
from stackmask.host.base import HostCapabilityError, HostRuntime
from stackmask.host.registry import (
    UnsupportedHostError,
    available_hosts,
    get_host,
    register_host,
)

__all__ = [
    "HostCapabilityError",
    "HostRuntime",
    "UnsupportedHostError",
    "available_hosts",
    "get_host",
    "register_host",
]
