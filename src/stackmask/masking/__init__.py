"""Diagnostic text masking: scrubbing, column recovery, runtime and parser maskers."""

from stackmask.masking.column import recover_column
from stackmask.masking.parser import mask_parser_stack
from stackmask.masking.runtime import mask_stack
from stackmask.masking.scrubber import INTERNAL_PATHS, scrub_stack

__all__ = [
    "INTERNAL_PATHS",
    "mask_parser_stack",
    "mask_stack",
    "recover_column",
    "scrub_stack",
]
