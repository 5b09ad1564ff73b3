from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from projkit.core.errors import UserFacingError
from projkit.lib.paths import get_log_level, get_projects_root, normalize_projects_root
from projkit.logging.config import configure_logging
from projkit.services.project import Project
from projkit.storage.filesystem_adapter import FilesystemStorage


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="projkit",
        description="Open a project and show or change its verbosity setting.",
    )
    parser.add_argument("name", help="project name, resolved under the projects root")
    parser.add_argument(
        "--projects-root",
        default=None,
        help="parent directory holding projects (default: $PROJKIT_PROJECTS_ROOT or /projects/)",
    )
    parser.add_argument("--set-verbosity", type=int, default=None, metavar="N")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level or get_log_level())

    if args.projects_root:
        projects_root = normalize_projects_root(args.projects_root)
    else:
        projects_root = get_projects_root()

    try:
        with Project(args.name, FilesystemStorage(), projects_root=projects_root) as project:
            if args.set_verbosity is not None:
                project.set_verbosity(args.set_verbosity)
            print(f"verbosity={project.get_verbosity()}")
    except UserFacingError as exc:
        logging.getLogger(__name__).error(
            "Command failed", extra={"title": exc.title, "project": args.name}
        )
        print(f"{exc.title}: {exc}", file=sys.stderr)
        if exc.remediation:
            print(exc.remediation, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
