"""Read-only in-memory store of bundled template layers.

The bundled ``templates/`` directory is read once per process into an
immutable tree.  Each top-level directory of the tree is a *layer*
(``base``, ``master``, ...).  Paths stored on entries are POSIX paths
relative to the store root, so they include the layer name as their first
component (``base/src/main.rs``).

Entries whose path ends with :data:`IGNORE_SUFFIX` exist only so that an
otherwise empty directory is bundled; they are walked like any other entry
but never materialized.
"""

from __future__ import annotations

import functools
import importlib.resources as ilr
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from importlib.resources.abc import Traversable
from pathlib import PurePosixPath

IGNORE_SUFFIX = ".ignore"


# ---------------------------------------------------------------------------
# Tree nodes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TemplateFile:
    """A template file: relative path plus raw bytes."""

    path: str
    contents: bytes

    @property
    def name(self) -> str:
        return PurePosixPath(self.path).name


@dataclass(frozen=True)
class TemplateDir:
    """A template directory and its children, in stored order."""

    path: str
    entries: tuple[TemplateDir | TemplateFile, ...] = ()

    @property
    def name(self) -> str:
        return PurePosixPath(self.path).name

    def walk(self) -> Iterator[TemplateDir | TemplateFile]:
        """Yield every descendant depth-first, each directory before its contents."""
        for entry in self.entries:
            yield entry
            if isinstance(entry, TemplateDir):
                yield from entry.walk()


def is_ignored(entry: TemplateDir | TemplateFile) -> bool:
    """Return ``True`` for ignore markers, which are never materialized."""
    return entry.path.endswith(IGNORE_SUFFIX)


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


class TemplateStore:
    """Immutable lookup over the top-level layers of a template tree."""

    def __init__(self, root: TemplateDir) -> None:
        self._root = root

    @property
    def layers(self) -> tuple[TemplateDir, ...]:
        """Top-level layer directories."""
        return tuple(e for e in self._root.entries if isinstance(e, TemplateDir))

    def names(self) -> list[str]:
        """Return the names of all layers, in stored order."""
        return [layer.name for layer in self.layers]

    def get(self, name: str) -> TemplateDir | None:
        """Return the layer called *name*, or ``None`` if there is none."""
        for layer in self.layers:
            if layer.name == name:
                return layer
        return None

    @classmethod
    def from_files(cls, files: Mapping[str, bytes | None]) -> "TemplateStore":
        """Build a store from a flat ``{path: contents}`` mapping.

        Paths use ``/`` separators and start with the layer name.  A ``None``
        value declares a directory with no files of its own.  Intermediate
        directories are created implicitly.

        Example::

            TemplateStore.from_files({
                "base/Cargo.toml": b'name = "{{ name }}"\\n',
                "base/static": None,
            })
        """
        tree: dict[str, dict | bytes] = {}
        for raw_path, contents in files.items():
            parts = PurePosixPath(raw_path).parts
            node = tree
            for part in parts[:-1]:
                node = node.setdefault(part, {})  # type: ignore[assignment]
            node[parts[-1]] = {} if contents is None else contents
        return cls(_build_dir("", tree))


def _build_dir(path: str, node: dict) -> TemplateDir:
    entries: list[TemplateDir | TemplateFile] = []
    for name in sorted(node):
        child_path = f"{path}/{name}" if path else name
        child = node[name]
        if isinstance(child, dict):
            entries.append(_build_dir(child_path, child))
        else:
            entries.append(TemplateFile(child_path, child))
    return TemplateDir(path, tuple(entries))


# ---------------------------------------------------------------------------
# Bundled templates
# ---------------------------------------------------------------------------


def _read_traversable(node: Traversable, path: str) -> TemplateDir:
    entries: list[TemplateDir | TemplateFile] = []
    for child in sorted(node.iterdir(), key=lambda c: c.name):
        child_path = f"{path}/{child.name}" if path else child.name
        if child.is_dir():
            entries.append(_read_traversable(child, child_path))
        elif child.is_file():
            entries.append(TemplateFile(child_path, child.read_bytes()))
    return TemplateDir(path, tuple(entries))


@functools.lru_cache(maxsize=None)
def load_bundled_store() -> TemplateStore:
    """Load the templates shipped with the package (once per process)."""
    root = ilr.files("rocket_cli.scaffolder").joinpath("templates")
    return TemplateStore(_read_traversable(root, ""))
