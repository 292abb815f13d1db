"""Custom exceptions for configuration management."""

from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

_TYPE_ERRORS = frozenset({"string_type", "int_type", "int_parsing", "bool_type", "bool_parsing"})

DEFAULT_SUGGESTIONS = [
    "Review config.example.yaml for correct format",
    "Verify field types match the expected schema",
]


class ConfigurationError(Exception):
    """Raised when the YAML file or the environment holds unusable settings.

    ``source`` names where the bad settings came from (a config file path or
    ``"environment"``). Every problem found is listed, numbered, in the
    message, followed by suggestions for fixing them.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None,
        source: Optional[Union[Path, str]] = None,
    ):
        self.message = message
        self.errors = list(errors or [])
        self.suggestions = list(suggestions or [])
        self.source = str(source) if source is not None else None
        super().__init__(self._format_message())

    @classmethod
    def from_validation_error(
        cls, error: ValidationError, source: Optional[Union[Path, str]] = None
    ) -> "ConfigurationError":
        """Translate pydantic errors into one line per offending field."""
        errors = []
        for detail in error.errors():
            field_path = " -> ".join(str(loc) for loc in detail["loc"])

            if detail["type"] in _TYPE_ERRORS:
                errors.append(
                    f"Invalid type for '{field_path}': {detail['msg']}, got {detail.get('input')!r}"
                )
            elif detail["type"] == "enum":
                errors.append(f"Invalid value for '{field_path}': {detail['msg']}")
            else:
                errors.append(f"{field_path}: {detail['msg']}")

        return cls(
            "Configuration validation failed",
            errors=errors,
            suggestions=DEFAULT_SUGGESTIONS,
            source=source,
        )

    def _format_message(self) -> str:
        header = self.message
        if self.source:
            header = f"{header} ({self.source})"

        lines = [header]
        if self.errors:
            lines.append("\nValidation Errors:")
            lines.extend(f"  {number}. {error}" for number, error in enumerate(self.errors, 1))
        if self.suggestions:
            lines.append("\nSuggestions:")
            lines.extend(f"  - {suggestion}" for suggestion in self.suggestions)

        return "\n".join(lines)
