"""Rocket CLI configuration.

Typed configuration for project generation.  Settings use a Pydantic v2
model so they are validated at construction time.  The values that feed the
render context (project version, authors, upstream version) are fixed so
that generated output is reproducible; only the default git repository may
be overridden from the environment.
"""

from __future__ import annotations

import json
import os

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_GIT_URL = "https://github.com/SergioBenitez/Rocket"
DEBUG_ENV_VAR = "ROCKET_CLI_DEBUG"
UPSTREAM_VERSION = "0.3"


class Config(BaseModel):
    """Global Rocket CLI configuration.

    Instances are created once by the CLI entry point (or by tests) and
    passed to :func:`rocket_cli.scaffolder.generate_project`.
    """

    model_config = ConfigDict(frozen=True)

    project_version: str = Field(default="0.0.1", description="Version of the generated crate")
    authors: list[str] = Field(
        default_factory=lambda: ["Sergio Benitez <sb@sergio.bz>"],
        description="Authors written into the generated manifest",
    )
    upstream_version: str = Field(
        default=UPSTREAM_VERSION, description="Version pinned for released Rocket dependencies"
    )
    git_url: str = Field(
        default=DEFAULT_GIT_URL, description="Repository used when --git is given without a URL"
    )

    def authors_literal(self) -> str:
        """Return the author list pre-rendered as an array literal.

        The renderer only substitutes strings, so structured values are
        formatted here: ``["Sergio Benitez <sb@sergio.bz>"]``.
        """
        return json.dumps(self.authors, ensure_ascii=False)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            ROCKET_CLI_GIT_URL
        """
        kwargs: dict[str, str] = {}
        if os.environ.get("ROCKET_CLI_GIT_URL"):
            kwargs["git_url"] = os.environ["ROCKET_CLI_GIT_URL"]
        return cls(**kwargs)
