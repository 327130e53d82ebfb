"""Project generation orchestrator.

Validates the project name, builds the render context, creates the project
root and applies the template layers required by the dependency mode:
``base`` first, then each additional layer in order.  A later layer
overrides files written by an earlier one at the same path.

Generation stops at the first error.  Nothing already written is rolled
back, so a failed run can leave an incomplete project directory behind.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path, PurePosixPath

from pydantic import BaseModel, ConfigDict, Field

from rocket_cli.config import Config
from rocket_cli.utils import debug, is_valid_name

from .deps import Git, Local, Upstream, additional_layers, dependency_declaration
from .errors import (
    InvalidNameError,
    ProjectExistsError,
    ScaffoldIOError,
    TemplateEncodingError,
    UnknownTemplateError,
)
from .store import TemplateFile, TemplateStore, is_ignored, load_bundled_store
from .templates import TemplateRenderer

BASE_LAYER = "base"


# ---------------------------------------------------------------------------
# Render context
# ---------------------------------------------------------------------------


class RenderContext(BaseModel):
    """Variables available to every bundled template.

    Exactly these four keys exist; a template referring to anything else
    fails to render.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Validated project name")
    version: str = Field(..., description="Version of the generated crate")
    authors: str = Field(..., description="Author list, pre-rendered as an array literal")
    dependencies: str = Field(..., description="Pre-rendered [dependencies] lines")

    def as_dict(self) -> dict[str, str]:
        return self.model_dump()


def build_context(name: str, mode: Upstream | Git | Local, config: Config | None = None) -> RenderContext:
    """Build the render context shared by every file of every layer."""
    config = config or Config()
    return RenderContext(
        name=name,
        version=config.project_version,
        authors=config.authors_literal(),
        dependencies=dependency_declaration(mode, config.upstream_version),
    )


def layers_for(mode: Upstream | Git | Local) -> list[str]:
    """Return every layer applied for *mode*, in application order."""
    return [BASE_LAYER, *additional_layers(mode)]


# ---------------------------------------------------------------------------
# Project generation
# ---------------------------------------------------------------------------


def generate_project(
    name: str,
    mode: Upstream | Git | Local,
    *,
    config: Config | None = None,
    output_dir: str | Path = ".",
    store: TemplateStore | None = None,
) -> Path:
    """Generate a new project called *name* inside *output_dir*.

    Args:
        name: Project name; also the name of the created directory.
        mode: Where the generated dependency declarations point.
        config: Generation constants.  Defaults to ``Config()``.
        output_dir: Parent directory of the project.  Defaults to the
            current working directory.
        store: Template store to read layers from.  Defaults to the
            bundled templates.

    Returns:
        Path to the generated project root.

    Raises:
        InvalidNameError: *name* is not a valid project name.  Nothing is
            touched on disk.
        ProjectExistsError: Something already exists at the target path.
        ScaffoldError: Any failure while creating the root or applying a
            layer.  Files written before the failure are left in place.
    """
    if not is_valid_name(name):
        raise InvalidNameError(name)

    # Not atomic with the mkdir below; a concurrent creator can slip in.
    project_path = Path(output_dir) / name
    if project_path.exists():
        raise ProjectExistsError(project_path)

    context = build_context(name, mode, config)

    try:
        project_path.mkdir()
    except OSError as exc:
        raise ScaffoldIOError(project_path, exc) from exc

    store = store or load_bundled_store()
    renderer = TemplateRenderer()
    for layer_name in layers_for(mode):
        apply_template(layer_name, project_path, context, store=store, renderer=renderer)

    # TODO: initialize a git repository in the new project.
    return project_path


def apply_template(
    layer_name: str,
    target_root: Path,
    context: RenderContext | Mapping[str, str],
    *,
    store: TemplateStore | None = None,
    renderer: TemplateRenderer | None = None,
) -> list[Path]:
    """Materialize the layer *layer_name* under *target_root*.

    Each entry is applied against the current state of its destination:

    - an existing regular file is removed first, so a later layer replaces
      what an earlier one wrote;
    - a directory is created unless one is already there;
    - a file is decoded as UTF-8, rendered with *context* and written.

    Ignore markers are skipped.

    Returns:
        Paths of the files and directories that were written, in walk order.

    Raises:
        UnknownTemplateError: The store has no layer called *layer_name*.
        ScaffoldIOError: A filesystem operation failed.
        TemplateEncodingError: A template file is not valid UTF-8.
        TemplateRenderError: The template engine rejected a file.
    """
    store = store or load_bundled_store()
    layer = store.get(layer_name)
    if layer is None:
        raise UnknownTemplateError(layer_name)

    debug(f"Applying template '{layer_name}' at '{target_root}'.")

    renderer = renderer or TemplateRenderer()
    values = context.as_dict() if isinstance(context, RenderContext) else dict(context)
    written: list[Path] = []

    for entry in layer.walk():
        if is_ignored(entry):
            continue

        relative = PurePosixPath(entry.path).relative_to(layer.path)
        new_path = target_root.joinpath(*relative.parts)

        try:
            if new_path.is_file():
                debug(f"Removing existing file: {new_path}")
                new_path.unlink()

            if isinstance(entry, TemplateFile):
                debug(f"Creating file: {new_path}")
                rendered = renderer.render(_decode(entry), values, name=entry.path)
                new_path.write_bytes(rendered.encode("utf-8"))
            elif not new_path.is_dir():
                debug(f"Creating dir: {new_path}")
                new_path.mkdir()
            else:
                continue
        except OSError as exc:
            raise ScaffoldIOError(new_path, exc) from exc

        written.append(new_path)

    return written


def _decode(entry: TemplateFile) -> str:
    try:
        return entry.contents.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TemplateEncodingError(entry.path, exc) from exc
