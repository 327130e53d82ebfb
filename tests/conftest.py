"""Shared pytest fixtures for the Rocket CLI test suite.

Provides reusable fixtures for:
- An isolated working directory (generation writes relative to the cwd)
- Small in-memory template stores
- A sample render context
- Toggling the debug environment variable
"""

from __future__ import annotations

from pathlib import Path

import pytest

from rocket_cli.config import DEBUG_ENV_VAR
from rocket_cli.scaffolder import RenderContext, TemplateStore


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty temporary working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def target_root(tmp_path: Path) -> Path:
    """An existing, empty project root for applying layers directly."""
    root = tmp_path / "proj"
    root.mkdir()
    return root


# ---------------------------------------------------------------------------
# Template stores & contexts
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_context() -> RenderContext:
    """A render context equivalent to an upstream-mode project named 'proj'."""
    return RenderContext(
        name="proj",
        version="0.0.1",
        authors='["Sergio Benitez <sb@sergio.bz>"]',
        dependencies='rocket = "0.3"\nrocket_codegen = "0.3"',
    )


@pytest.fixture
def layered_store() -> TemplateStore:
    """A two-layer store where ``master`` overrides one file of ``base``."""
    return TemplateStore.from_files({
        "base/Cargo.toml": b'name = "{{ name }}"\n[dependencies]\n{{ dependencies }}\n',
        "base/src/main.rs": b"// base for {{ name }}\n",
        "base/README.md": b"# {{ name }}\n",
        "base/static/.ignore": b"",
        "master/src/main.rs": b"// master for {{ name }}\n",
        "master/rust-toolchain": b"nightly\n",
    })


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture
def debug_on(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable debug tracing for the duration of the test."""
    monkeypatch.setenv(DEBUG_ENV_VAR, "1")


@pytest.fixture
def debug_off(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure debug tracing is disabled for the duration of the test."""
    monkeypatch.delenv(DEBUG_ENV_VAR, raising=False)
