"""Error taxonomy for project generation.

Every failure the scaffolder can surface derives from ``ScaffoldError`` so
callers (the CLI in particular) can catch one type.  Low-level causes
(``OSError``, ``UnicodeDecodeError``, ``jinja2.TemplateError``) are chained
with ``raise ... from`` rather than swallowed.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all project generation failures."""

    description = "Project generation failed."


class InvalidNameError(ScaffoldError):
    """Raised when the project name fails validation."""

    description = "The project name is invalid."

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid project name: {name!r}.")


class ProjectExistsError(ScaffoldError):
    """Raised when the target directory already exists."""

    description = "A file or directory with the given name already exists."

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Path already exists: {path}.")


class UnknownTemplateError(ScaffoldError):
    """Raised when a layer name is not present in the template store."""

    description = "The template required is not known."

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown template layer: {name!r}.")


class ScaffoldIOError(ScaffoldError):
    """Raised when a filesystem operation fails."""

    description = "An I/O error occurred."

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"I/O error at {path}: {cause}")


class TemplateEncodingError(ScaffoldError):
    """Raised when a bundled template is not valid UTF-8."""

    description = "Internal error: template contained invalid UTF-8."

    def __init__(self, path: str, cause: UnicodeDecodeError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Template {path} is not valid UTF-8: {cause}")


class TemplateRenderError(ScaffoldError):
    """Raised when the template engine rejects a template or its context."""

    description = "Internal error: failed to render an internal template."

    def __init__(self, message: str, template: str = "") -> None:
        self.template = template
        super().__init__(message)
