"""HTML rendering of diffs using Jinja2 templates."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError

from billtext.logging import get_logger

from .exceptions import DiffRenderError
from .models import LineDiffResult
from .rendering import render_combined, render_side_by_side

logger = get_logger(__name__, component="diffing")

SIDE_BY_SIDE_TEMPLATE = "side_by_side.html.j2"
COMBINED_TEMPLATE = "combined.html.j2"
DOCUMENT_TEMPLATE = "document.html.j2"


class DiffHtmlRenderer:
    """Renders diffs to standalone HTML pages.

    Templates live in the billtext.diffing ``templates`` directory and are
    cached by the Jinja2 environment after the first load.
    """

    def __init__(
        self,
        template_dir: str = "templates",
        logger_instance: Optional[logging.Logger] = None,
    ):
        self.env = Environment(
            loader=PackageLoader("billtext.diffing", template_dir),
            autoescape=True,
            undefined=StrictUndefined,
        )
        self.logger = logger_instance or logger

    def render_side_by_side(
        self,
        result: LineDiffResult,
        left_label: str = "Left",
        right_label: str = "Right",
        title: str = "Document comparison",
    ) -> str:
        """Render a two-pane HTML page."""
        context = {
            "title": title,
            "left_label": left_label,
            "right_label": right_label,
            "view": render_side_by_side(result),
        }
        return self._render(SIDE_BY_SIDE_TEMPLATE, context, result)

    def render_combined(
        self,
        result: LineDiffResult,
        left_label: str = "Left",
        right_label: str = "Right",
        title: str = "Document comparison",
    ) -> str:
        """Render a single-column HTML page with removed and added lines interleaved."""
        context = {
            "title": title,
            "left_label": left_label,
            "right_label": right_label,
            "lines": render_combined(result),
        }
        return self._render(COMBINED_TEMPLATE, context, result)

    def render_document(
        self,
        text: str,
        label: str,
        notices: Optional[List[str]] = None,
        title: str = "Document text",
    ) -> str:
        """Render one document on its own, e.g. when the other side of a comparison failed."""
        context = {
            "title": title,
            "label": label,
            "notices": notices or [],
            "lines": text.splitlines(),
        }
        return self._render(DOCUMENT_TEMPLATE, context)

    def _render(
        self,
        template_name: str,
        context: Dict[str, Any],
        result: Optional[LineDiffResult] = None,
    ) -> str:
        context = {
            **context,
            "generated_at": datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC"),
        }
        if result is not None:
            context["stats"] = result.stats

        try:
            template = self.env.get_template(template_name)
            html = template.render(context)
        except TemplateError as e:
            error_msg = f"Diff rendering failed for {template_name}: {e}"
            self.logger.error(
                error_msg,
                extra={"event": "diff.render.failed", "template": template_name},
                exc_info=True,
            )
            raise DiffRenderError(error_msg) from e

        self.logger.debug(
            "Rendered diff HTML",
            extra={"event": "diff.rendered", "template": template_name, "size": len(html)},
        )
        return html
