"""Dependency source modes for generated projects.

A generated ``Cargo.toml`` can point its Rocket dependencies at one of three
sources:

- ``Upstream``: the released crates, pinned to a fixed version.
- ``Git``: a git repository, tracking the branch tip (no revision pin).
- ``Local``: a checkout on the local filesystem.

Each mode determines the dependency block substituted into the manifest and
the template layers applied on top of ``base``.  The set of modes is closed;
the queries dispatch on the concrete variant instead of relying on
subclass overrides.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from rocket_cli.config import UPSTREAM_VERSION

_URL_ADAPTER = TypeAdapter(AnyUrl)


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


class Upstream(BaseModel):
    """Use the released crates from the package registry."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["upstream"] = "upstream"

    def additional_layers(self) -> tuple[str, ...]:
        return additional_layers(self)

    def dependency_declaration(self, upstream_version: str = UPSTREAM_VERSION) -> str:
        return dependency_declaration(self, upstream_version)


class Git(BaseModel):
    """Use the crates from a git repository.

    The URL is validated but stored exactly as given, so it appears verbatim
    in the generated manifest.  Quotes and backslashes are rejected.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["git"] = "git"
    url: str = Field(..., description="Repository URL")

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        # Written unescaped into a TOML basic string.
        if '"' in value or "\\" in value:
            raise ValueError(f"invalid git URL: {value!r}")
        try:
            _URL_ADAPTER.validate_python(value)
        except ValidationError as exc:
            raise ValueError(f"invalid git URL: {value!r}") from exc
        return value

    def additional_layers(self) -> tuple[str, ...]:
        return additional_layers(self)

    def dependency_declaration(self, upstream_version: str = UPSTREAM_VERSION) -> str:
        return dependency_declaration(self, upstream_version)


class Local(BaseModel):
    """Use the crates from a local checkout.

    The path is canonicalized when the model is constructed; a path that
    does not exist, or whose canonical form is not valid UTF-8, is rejected
    with a validation error.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["local"] = "local"
    path: Path = Field(..., description="Root of a local Rocket checkout")

    @field_validator("path")
    @classmethod
    def _canonicalize(cls, value: Path) -> Path:
        try:
            resolved = value.resolve(strict=True)
        except OSError as exc:
            raise ValueError(f"Local path {str(value)!r} is invalid: {exc}") from exc
        try:
            str(resolved).encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError(f"Local path {str(value)!r} is not valid UTF-8") from exc
        return resolved

    def additional_layers(self) -> tuple[str, ...]:
        return additional_layers(self)

    def dependency_declaration(self, upstream_version: str = UPSTREAM_VERSION) -> str:
        return dependency_declaration(self, upstream_version)


DependencyMode = Annotated[Union[Upstream, Git, Local], Field(discriminator="kind")]


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

_MASTER_LAYERS: tuple[str, ...] = ("master",)


def additional_layers(mode: Upstream | Git | Local) -> tuple[str, ...]:
    """Return the layers to apply after ``base``, in application order."""
    if isinstance(mode, Upstream):
        return ()
    if isinstance(mode, (Git, Local)):
        return _MASTER_LAYERS
    raise TypeError(f"Unknown dependency mode: {mode!r}")


def dependency_declaration(
    mode: Upstream | Git | Local, upstream_version: str = UPSTREAM_VERSION
) -> str:
    """Return the ``[dependencies]`` lines for *mode*.

    Always two lines, one for ``rocket`` and one for ``rocket_codegen``::

        rocket = "0.3"
        rocket_codegen = "0.3"
    """
    if isinstance(mode, Upstream):
        lib_val = f'"{upstream_version}"'
        codegen_val = f'"{upstream_version}"'
    elif isinstance(mode, Git):
        lib_val = f'{{ git = "{mode.url}" }}'
        codegen_val = f'{{ git = "{mode.url}" }}'
    elif isinstance(mode, Local):
        root = mode.path.as_posix()
        lib_val = f'{{ path = "{root}/lib" }}'
        codegen_val = f'{{ path = "{root}/codegen" }}'
    else:
        raise TypeError(f"Unknown dependency mode: {mode!r}")

    return f"rocket = {lib_val}\nrocket_codegen = {codegen_val}"


def describe(mode: Upstream | Git | Local) -> str:
    """Return a short human-readable label for *mode*."""
    if isinstance(mode, Upstream):
        return "upstream release"
    if isinstance(mode, Git):
        return f"git ({mode.url})"
    if isinstance(mode, Local):
        return f"local ({mode.path})"
    raise TypeError(f"Unknown dependency mode: {mode!r}")
