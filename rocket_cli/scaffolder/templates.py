"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which renders the text of a single
bundled template against a flat, string-valued context.  Context values are
substituted as-is: there is no autoescaping and no type coercion, so
structured values (the dependency block, the author list) must already be
formatted by the caller.  Referencing a key missing from the context is an
error rather than an empty substitution.
"""

from __future__ import annotations

from collections.abc import Mapping

from jinja2 import BaseLoader, Environment, StrictUndefined, TemplateError

from .errors import TemplateRenderError


class TemplateRenderer:
    """Renders template text with Jinja2.

    The environment has no loader: templates come from the in-memory store
    as strings, never from disk.
    """

    def __init__(self) -> None:
        self.env = Environment(
            loader=BaseLoader(),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render(self, template_text: str, context: Mapping[str, str], *, name: str = "") -> str:
        """Render *template_text* with the provided context.

        Args:
            template_text: Template source.
            context: Variables available inside the template.
            name: Optional template path, used only in error messages.

        Returns:
            The rendered text.

        Raises:
            TemplateRenderError: If the template does not parse or refers to
                a variable missing from *context*.
        """
        try:
            template = self.env.from_string(template_text)
            return template.render(**context)
        except TemplateError as exc:
            label = f" {name}" if name else ""
            raise TemplateRenderError(
                f"Failed to render template{label}: {exc}", template=name
            ) from exc
