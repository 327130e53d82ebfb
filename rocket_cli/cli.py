"""Command line interface for the Rocket CLI.

Usage::

    rocket new hello
    rocket new hello --git
    rocket new hello --git https://github.com/me/Rocket
    rocket new hello --local ../Rocket
"""

from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError

import rocket_cli
from rocket_cli.config import Config
from rocket_cli.scaffolder import Git, Local, ScaffoldError, Upstream, generate_project, layers_for
from rocket_cli.scaffolder.deps import describe
from rocket_cli.utils import console, print_error, print_success, print_summary_table

NEW_DESCRIPTION = """\
Generate a new Cargo project with Rocket dependencies.

Without any flags, the generated Cargo project will use the latest version of \
Rocket's libraries as its dependencies. You can use the --git flag to instead \
use a version from a git repository, and --local to instead use a version from \
a local path."""


def build_parser(config: Config) -> argparse.ArgumentParser:
    """Build the argument parser; *config* supplies the default git URL."""
    parser = argparse.ArgumentParser(
        prog="rocket",
        description="A command line interface for Rocket.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {rocket_cli.__version__}"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    new = subparsers.add_parser(
        "new",
        help=NEW_DESCRIPTION.splitlines()[0],
        description=NEW_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    new.add_argument("name", help="The name of the new Cargo project")
    dep = new.add_mutually_exclusive_group()
    dep.add_argument(
        "--git", "-g",
        dest="repo",
        nargs="?",
        const=config.git_url,
        default=None,
        metavar="URL",
        help=(
            f"Use Rocket dependencies from git (default: {config.git_url}). "
            "Must follow NAME, since it takes an optional value"
        ),
    )
    dep.add_argument(
        "--local", "-l",
        dest="path",
        default=None,
        metavar="PATH",
        help="Use Rocket dependencies from a local path",
    )
    return parser


def resolve_mode(args: argparse.Namespace) -> Upstream | Git | Local:
    """Turn parsed arguments into a dependency mode.

    Raises:
        ValidationError: The URL is malformed or the local path does not exist.
    """
    if args.repo is not None:
        return Git(url=args.repo)
    if args.path is not None:
        return Local(path=args.path)
    return Upstream()


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``rocket`` / ``python -m rocket_cli.cli``."""
    config = Config.from_env()
    args = build_parser(config).parse_args(argv)

    try:
        mode = resolve_mode(args)
    except ValidationError as exc:
        for error in exc.errors():
            print_error(f"error: {error['msg']}")
        sys.exit(1)

    try:
        project_path = generate_project(args.name, mode, config=config)
    except ScaffoldError as exc:
        print_error(f"error: {exc} {exc.description}")
        sys.exit(1)

    print_success(f"Rocket project '{args.name}' created.")
    console.print()
    print_summary_table(
        {
            "Path": str(project_path.resolve()),
            "Dependencies": describe(mode),
            "Layers": ", ".join(layers_for(mode)),
        },
        title="Project",
    )


if __name__ == "__main__":
    main()
