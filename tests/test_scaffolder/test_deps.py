"""Tests for dependency source modes.

Covers:
- additional_layers for every mode
- dependency_declaration shape and values for every mode
- Git URL validation (kept verbatim, TOML-breaking characters rejected)
- Local path canonicalization and rejection of missing or non-UTF-8 paths
- Method/function parity and the discriminated union
"""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path

import pytest
from pydantic import TypeAdapter, ValidationError

from rocket_cli.scaffolder.deps import (
    DependencyMode,
    Git,
    Local,
    Upstream,
    additional_layers,
    dependency_declaration,
    describe,
)


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit

ROCKET_URL = "https://github.com/SergioBenitez/Rocket"
_LINE = re.compile(r"^(?P<key>[a-z_]+) = (?P<value>.+)$")


def _parse(declaration: str) -> dict[str, str]:
    lines = declaration.split("\n")
    assert len(lines) == 2
    parsed = {}
    for line in lines:
        match = _LINE.match(line)
        assert match, f"not a key = value line: {line!r}"
        parsed[match["key"]] = match["value"]
    return parsed


# ---------------------------------------------------------------------------
# additional_layers
# ---------------------------------------------------------------------------


class TestAdditionalLayers:
    def test_upstream_has_none(self):
        assert additional_layers(Upstream()) == ()
        assert Upstream().additional_layers() == ()

    def test_git_uses_master(self):
        assert list(Git(url=ROCKET_URL).additional_layers()) == ["master"]

    def test_local_uses_master(self, tmp_path: Path):
        assert list(Local(path=tmp_path).additional_layers()) == ["master"]

    def test_unknown_mode_rejected(self):
        with pytest.raises(TypeError):
            additional_layers("upstream")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# dependency_declaration
# ---------------------------------------------------------------------------


class TestDependencyDeclaration:
    def test_upstream_pins_version(self):
        deps = _parse(Upstream().dependency_declaration())
        assert deps == {"rocket": '"0.3"', "rocket_codegen": '"0.3"'}

    def test_upstream_custom_version(self):
        deps = _parse(dependency_declaration(Upstream(), "0.4"))
        assert deps["rocket"] == '"0.4"'
        assert deps["rocket_codegen"] == '"0.4"'

    def test_git_references_url_verbatim(self):
        deps = _parse(Git(url=ROCKET_URL).dependency_declaration())
        assert deps["rocket"] == f'{{ git = "{ROCKET_URL}" }}'
        assert deps["rocket_codegen"] == f'{{ git = "{ROCKET_URL}" }}'

    def test_git_has_no_revision_pin(self):
        declaration = Git(url=ROCKET_URL).dependency_declaration()
        for key in ("rev", "tag", "branch", "version"):
            assert key not in declaration
        assert "0.3" not in declaration

    def test_git_url_not_normalized(self):
        url = "https://example.com"
        assert f'git = "{url}" ' in Git(url=url).dependency_declaration()

    def test_local_paths(self, tmp_path: Path):
        mode = Local(path=tmp_path)
        root = tmp_path.resolve().as_posix()
        deps = _parse(mode.dependency_declaration())
        assert deps["rocket"] == f'{{ path = "{root}/lib" }}'
        assert deps["rocket_codegen"] == f'{{ path = "{root}/codegen" }}'

    def test_upstream_version_ignored_by_other_modes(self, tmp_path: Path):
        for mode in (Git(url=ROCKET_URL), Local(path=tmp_path)):
            assert dependency_declaration(mode, "9.9") == dependency_declaration(mode)

    def test_unknown_mode_rejected(self):
        with pytest.raises(TypeError):
            dependency_declaration(object())  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestGitConstruction:
    def test_invalid_url_rejected(self):
        with pytest.raises(ValidationError, match="invalid git URL"):
            Git(url="not a url")

    def test_url_stored_as_given(self):
        assert Git(url="https://example.com").url == "https://example.com"

    @pytest.mark.parametrize("url", ['https://example.com/a"b', "https://example.com/a\\b"])
    def test_toml_breaking_characters_rejected(self, url: str):
        with pytest.raises(ValidationError, match="invalid git URL"):
            Git(url=url)


class TestLocalConstruction:
    def test_path_canonicalized(self, tmp_path: Path, monkeypatch):
        (tmp_path / "Rocket").mkdir()
        monkeypatch.chdir(tmp_path)
        mode = Local(path="Rocket")
        assert mode.path.is_absolute()
        assert mode.path == (tmp_path / "Rocket").resolve()

    def test_dot_segments_removed(self, tmp_path: Path):
        (tmp_path / "a").mkdir()
        mode = Local(path=tmp_path / "a" / ".." / "a")
        assert ".." not in mode.path.parts

    def test_missing_path_rejected(self, tmp_path: Path):
        with pytest.raises(ValidationError, match="is invalid"):
            Local(path=tmp_path / "does-not-exist")

    @pytest.mark.skipif(sys.platform != "linux", reason="needs a filesystem that allows non-UTF-8 names")
    def test_non_utf8_path_rejected(self, tmp_path: Path):
        raw = os.fsencode(tmp_path) + b"/ro\xffcket"
        os.mkdir(raw)
        with pytest.raises(ValidationError, match="not valid UTF-8"):
            Local(path=os.fsdecode(raw))


class TestDependencyModeUnion:
    def test_discriminator(self, tmp_path: Path):
        adapter = TypeAdapter(DependencyMode)
        assert isinstance(adapter.validate_python({"kind": "upstream"}), Upstream)
        git = adapter.validate_python({"kind": "git", "url": ROCKET_URL})
        assert isinstance(git, Git)
        local = adapter.validate_python({"kind": "local", "path": str(tmp_path)})
        assert isinstance(local, Local)

    def test_modes_are_frozen(self):
        mode = Git(url=ROCKET_URL)
        with pytest.raises(ValidationError):
            mode.url = "https://example.com"

    def test_describe(self, tmp_path: Path):
        assert describe(Upstream()) == "upstream release"
        assert ROCKET_URL in describe(Git(url=ROCKET_URL))
        assert describe(Local(path=tmp_path)).startswith("local (")
