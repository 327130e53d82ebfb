"""Rocket project scaffolder -- materializes bundled template layers.

The ``base`` layer is always applied; the dependency mode decides which
layers follow it and what the generated ``[dependencies]`` block contains.

Quick usage::

    from rocket_cli.scaffolder import Git, generate_project

    project_path = generate_project(
        "hello", Git(url="https://github.com/SergioBenitez/Rocket")
    )
"""

from rocket_cli.scaffolder.deps import (
    DependencyMode,
    Git,
    Local,
    Upstream,
    additional_layers,
    dependency_declaration,
)
from rocket_cli.scaffolder.errors import (
    InvalidNameError,
    ProjectExistsError,
    ScaffoldError,
    ScaffoldIOError,
    TemplateEncodingError,
    TemplateRenderError,
    UnknownTemplateError,
)
from rocket_cli.scaffolder.generator import (
    RenderContext,
    apply_template,
    build_context,
    generate_project,
    layers_for,
)
from rocket_cli.scaffolder.store import TemplateDir, TemplateFile, TemplateStore, load_bundled_store
from rocket_cli.scaffolder.templates import TemplateRenderer

__all__ = [
    "DependencyMode",
    "Git",
    "InvalidNameError",
    "Local",
    "ProjectExistsError",
    "RenderContext",
    "ScaffoldError",
    "ScaffoldIOError",
    "TemplateDir",
    "TemplateEncodingError",
    "TemplateFile",
    "TemplateRenderError",
    "TemplateRenderer",
    "TemplateStore",
    "UnknownTemplateError",
    "Upstream",
    "additional_layers",
    "apply_template",
    "build_context",
    "dependency_declaration",
    "generate_project",
    "layers_for",
    "load_bundled_store",
]
