"""Line reclassifier: rebuilds readable, numbered lines from raw PDF text.

This module provides:
- ReclassifierPipeline: configurable composition of the text passes
- normalize: one-off convenience wrapper around the pipeline
- passes: the individual whole-document passes
- NormalizationError: raised for non-string input
"""

from billtext.config.models import ReclassifierMode

from .exceptions import NormalizationError
from .passes import (
    apply_structural_spacing,
    final_cleanup,
    join_district_references,
    normalize_whitespace,
    prune_sequence_gaps,
    remove_blank_lines,
    reposition_line_numbers,
    trim_to_act,
)
from .pipeline import ReclassifierPass, ReclassifierPipeline, normalize

__all__ = [
    "ReclassifierPipeline",
    "ReclassifierPass",
    "ReclassifierMode",
    "normalize",
    "NormalizationError",
    # Passes
    "trim_to_act",
    "normalize_whitespace",
    "remove_blank_lines",
    "join_district_references",
    "reposition_line_numbers",
    "prune_sequence_gaps",
    "apply_structural_spacing",
    "final_cleanup",
]
