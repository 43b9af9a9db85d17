"""Command-line interface for locating a resource and its base directory."""

import argparse
import json
import logging
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from src.classpath_loader import ClasspathResourceLoader
from src.errors import ResolverError
from src.find_base_dir import find
from src.load_config import load_config
from src.package_loader import PackageResourceLoader
from src.resolution_result import ResolutionResult
from src.resource_loader import ChainResourceLoader, ResourceLoader

logger = logging.getLogger(__name__)


def build_loader(config: dict[str, Any]) -> ChainResourceLoader:
    """Create the loader chain described by the settings.

    Packages are searched before the classpath, each in configured order.
    """
    loaders: list[ResourceLoader] = [
        PackageResourceLoader(package) for package in config.get("packages", [])
    ]
    loaders.append(ClasspathResourceLoader(config.get("classpath", [])))
    return ChainResourceLoader(loaders)


def format_result(result: ResolutionResult, *, as_json: bool) -> str:
    """Render a result for printing."""
    if as_json:
        return json.dumps(
            {
                "base_dir": str(result.base_dir),
                "resource": str(result.resource),
                "kind": result.resource.kind.value,
            },
            indent=2,
        )
    return f"{result.base_dir}\n{result.resource}"


def _split_classpath(values: Sequence[str]) -> list[str]:
    entries: list[str] = []
    for value in values:
        entries.extend(e for e in value.split(os.pathsep) if e)
    return entries


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    ap = argparse.ArgumentParser(
        description="Locate a configuration resource and print its base directory.",
    )
    ap.add_argument(
        "resource",
        help="Resource name, looked up on the search path and then as a file path",
    )
    ap.add_argument(
        "--working-dir",
        type=Path,
        default=None,
        help="Directory relative file paths are resolved against (default: cwd)",
    )
    ap.add_argument(
        "--classpath",
        action="append",
        default=[],
        help=(
            f"Directory or zip archive to search; repeatable, or joined with "
            f"{os.pathsep!r}"
        ),
    )
    ap.add_argument(
        "--package",
        action="append",
        default=[],
        help="Importable package whose data files are searched; repeatable",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML settings file",
    )
    ap.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log resolution steps",
    )
    return ap.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the lookup and print the result."""
    args = parse_args(argv)

    config = load_config(args.config)
    config["classpath"] = [*config["classpath"], *_split_classpath(args.classpath)]
    config["packages"] = [*config["packages"], *args.package]

    level = logging.DEBUG if args.verbose else str(config["log_level"]).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logger.debug("Packages: %s; classpath: %s", config["packages"], config["classpath"])

    working_dir = args.working_dir or Path.cwd()
    try:
        result = find(
            working_dir,
            build_loader(config),
            args.resource,
            archive_schemes=config["archive_schemes"],
        )
    except ResolverError as exc:
        raise SystemExit(f"Error: {exc}") from exc

    if result is None:
        print(f"Resource not found: {args.resource}")
        return 1

    print(format_result(result, as_json=args.json))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
