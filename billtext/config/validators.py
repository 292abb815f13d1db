"""Non-fatal configuration checks."""

import warnings
from typing import Any, Dict, List

LONG_JOIN_THRESHOLD = 200


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """Return warnings for settings that are valid but risky.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    http = config_dict.get("http", {})
    if isinstance(http, dict) and http.get("verify_ssl") is False:
        warning_messages.append(
            "http.verify_ssl is false: TLS certificates of PDF hosts will not be validated"
        )

    reclassifier = config_dict.get("reclassifier", {})
    if isinstance(reclassifier, dict):
        max_join = reclassifier.get("max_join_length")
        if isinstance(max_join, int) and max_join > LONG_JOIN_THRESHOLD:
            warning_messages.append(
                f"Large reclassifier.max_join_length ({max_join}) may merge separate clauses"
            )

        mode = reclassifier.get("mode")
        filtering = config_dict.get("filtering", {})
        if mode == "strict" and isinstance(filtering, dict) and filtering.get("enabled") is False:
            warning_messages.append(
                "Strict mode without filtering keeps page footers and attribution lines in diffs"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """Emit warning messages through the warnings module."""
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
