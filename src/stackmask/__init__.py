"""stackmask: point failure diagnostics of transformed code back at the original source."""

from stackmask.errors import capture_stack_trace, mask_stack_trace
from stackmask.masking import mask_parser_stack, mask_stack, recover_column, scrub_stack
from stackmask.models import FailureKind, Location
from stackmask.settings import Settings
from stackmask.wrapper import MaskedFailure

__version__ = "0.1.0"

__all__ = [
    "FailureKind",
    "Location",
    "MaskedFailure",
    "Settings",
    "capture_stack_trace",
    "mask_parser_stack",
    "mask_stack",
    "mask_stack_trace",
    "recover_column",
    "scrub_stack",
]
