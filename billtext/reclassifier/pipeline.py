"""Configurable composition of the reclassifier passes."""

import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, List, Optional, Union

from billtext.config.models import ReclassifierConfig, ReclassifierMode
from billtext.logging import get_logger

from . import passes
from .exceptions import NormalizationError

logger = get_logger(__name__, component="reclassifier")


@dataclass(frozen=True)
class ReclassifierPass:
    """A named whole-document transformation."""

    name: str
    apply: Callable[[str], str]


class ReclassifierPipeline:
    """Rebuilds logical, numbered lines from raw extracted PDF text.

    Both modes share the prefix trim, whitespace, blank-line, district-join,
    line-number and cleanup passes. STRICT then drops out-of-sequence
    numbered lines; STRUCTURAL instead spaces out headers and joins wrapped
    fragments onto their numbered line.

    Example:
        >>> pipeline = ReclassifierPipeline(mode="strict")
        >>> pipeline.run("cover\\nAN ACT CONCERNING X.\\nfirst line 1")
        'AN ACT CONCERNING X.\\n1       first line'
    """

    def __init__(
        self,
        mode: Union[ReclassifierMode, str] = ReclassifierMode.STRUCTURAL,
        line_number_width: int = passes.DEFAULT_LINE_NUMBER_WIDTH,
        max_join_length: int = passes.DEFAULT_MAX_JOIN_LENGTH,
        logger_instance: Optional[logging.Logger] = None,
    ):
        self.mode = ReclassifierMode(mode)
        self.line_number_width = line_number_width
        self.max_join_length = max_join_length
        self.logger = logger_instance or logger
        self.passes = self._build_passes()

    @classmethod
    def from_config(cls, config: ReclassifierConfig) -> "ReclassifierPipeline":
        return cls(
            mode=config.mode,
            line_number_width=config.line_number_width,
            max_join_length=config.max_join_length,
        )

    def _build_passes(self) -> List[ReclassifierPass]:
        steps = [
            ReclassifierPass("trim_to_act", passes.trim_to_act),
            ReclassifierPass("normalize_whitespace", passes.normalize_whitespace),
            ReclassifierPass("remove_blank_lines", passes.remove_blank_lines),
            ReclassifierPass("join_district_references", passes.join_district_references),
            ReclassifierPass(
                "reposition_line_numbers",
                partial(passes.reposition_line_numbers, width=self.line_number_width),
            ),
        ]

        if self.mode is ReclassifierMode.STRICT:
            steps.append(ReclassifierPass("prune_sequence_gaps", passes.prune_sequence_gaps))
        else:
            steps.append(
                ReclassifierPass(
                    "apply_structural_spacing",
                    partial(passes.apply_structural_spacing, max_join_length=self.max_join_length),
                )
            )

        steps.append(ReclassifierPass("final_cleanup", passes.final_cleanup))
        return steps

    @property
    def pass_names(self) -> List[str]:
        return [step.name for step in self.passes]

    def run(self, text: str) -> str:
        """Apply every pass in order and return the normalized document.

        Args:
            text: Raw text extracted from a PDF

        Returns:
            Normalized text (empty string for empty input)

        Raises:
            NormalizationError: If text is not a string
        """
        if not isinstance(text, str):
            raise NormalizationError(
                f"Reclassifier expects str input, got {type(text).__name__}"
            )

        if not text:
            return ""

        input_lines = text.count("\n") + 1
        result = text
        for step in self.passes:
            result = step.apply(result)
            self.logger.debug(
                f"Applied pass {step.name}",
                extra={
                    "event": "reclassifier.pass.applied",
                    "pass_name": step.name,
                    "line_count": result.count("\n") + 1 if result else 0,
                },
            )

        self.logger.info(
            "Reclassified document text",
            extra={
                "event": "reclassifier.run.completed",
                "mode": self.mode.value,
                "input_lines": input_lines,
                "output_lines": result.count("\n") + 1 if result else 0,
            },
        )

        return result


def normalize(
    text: str,
    mode: Union[ReclassifierMode, str] = ReclassifierMode.STRICT,
    line_number_width: int = passes.DEFAULT_LINE_NUMBER_WIDTH,
    max_join_length: int = passes.DEFAULT_MAX_JOIN_LENGTH,
) -> str:
    """Normalize raw PDF text with a one-off pipeline."""
    pipeline = ReclassifierPipeline(
        mode=mode,
        line_number_width=line_number_width,
        max_join_length=max_join_length,
    )
    return pipeline.run(text)
