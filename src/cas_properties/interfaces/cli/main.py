import argparse
import logging
from pathlib import Path
from typing import List, Optional

import colorlog

from cas_properties import __version__ as _PACKAGE_VERSION
from cas_properties.config import DEFAULT_CONFIG_PATH, DEFAULT_NAME_PATTERN, load_catalog_config
from cas_properties.core.errors import CatalogAccessError, ConfigError, PatternSyntaxError
from cas_properties.core.query import MatchQuery, MetadataRepository, find, render_results


def setup_logging(
    verbose: bool = False, warnings_only: bool = False, errors_only: bool = False
) -> None:
    logger = logging.getLogger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    log_format = "%(asctime)s:%(levelname)s:%(name)s: %(message)s"
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }
    stream_handler = colorlog.StreamHandler()
    formatter = colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if errors_only:
        logger.setLevel(logging.ERROR)
    elif warnings_only:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _resolve_metadata_paths(args: argparse.Namespace) -> List[Path]:
    """Explicit --metadata paths win; otherwise read them from the catalog config."""
    explicit = getattr(args, "metadata", None)
    if explicit:
        return [Path(p).resolve() for p in explicit]
    config_path = Path(getattr(args, "config", None) or DEFAULT_CONFIG_PATH)
    return load_catalog_config(config_path).metadata_paths


def cmd_find(args: argparse.Namespace) -> int:
    """Look up properties whose relaxed names match a pattern.

    Returns:
        0 if at least one property matched
        1 if nothing matched
        2 if the pattern, configuration or catalog could not be used
    """
    name = getattr(args, "name", None)
    if name is None:
        name = DEFAULT_NAME_PATTERN

    try:
        query = MatchQuery.build(
            name,
            strict=bool(getattr(args, "strict_match", False)),
            ignore_case=bool(getattr(args, "ignore_case", False)),
        )
    except PatternSyntaxError as e:
        logging.error("%s", e)
        return 2

    try:
        metadata_paths = _resolve_metadata_paths(args)
    except ConfigError as e:
        logging.error("%s", e)
        return 2
    if not metadata_paths:
        logging.error("No metadata documents configured; pass --metadata or list them in the config")
        return 2

    try:
        repository = MetadataRepository.from_paths(metadata_paths)
    except CatalogAccessError as e:
        logging.error("Could not load property catalog: %s", e)
        return 2
    logging.debug("Catalog holds %d properties", len(repository))

    results = find(query, repository)
    rendered = render_results(results, summary=bool(getattr(args, "summary", False)), emit=print)
    if rendered == 0:
        return 1
    logging.debug("Found %d matching properties", rendered)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="cas-properties", description="CAS configuration property search"
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {_PACKAGE_VERSION}")
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    p.add_argument(
        "--warnings-only",
        action="store_true",
        help="Show only warnings and errors (overrides --verbose)",
    )
    p.add_argument(
        "--errors-only",
        action="store_true",
        help="Show only errors (overrides --warnings-only and --verbose)",
    )

    sub = p.add_subparsers(dest="command", required=True)

    p_find = sub.add_parser("find", help="Look up properties associated with a CAS group/module")
    p_find.add_argument(
        "--name",
        default=DEFAULT_NAME_PATTERN,
        help="Property name regex pattern (defaults to '.+', i.e. everything)",
    )
    p_find.add_argument(
        "--strict-match",
        action="store_true",
        help=(
            "Whether pattern should be done in strict-mode which means "
            "the matching engine tries to match the entire region for the query."
        ),
    )
    p_find.add_argument(
        "--summary",
        action="store_true",
        help="Whether results should be presented in summarized mode",
    )
    p_find.add_argument(
        "--ignore-case",
        action="store_true",
        help="Match the pattern case-insensitively",
    )
    p_find.add_argument(
        "--metadata",
        action="append",
        default=None,
        help="Metadata document (JSON or YAML). Repeat for several; overrides --config.",
    )
    p_find.add_argument(
        "--config",
        default=None,
        help=f"Catalog config YAML listing metadata documents (defaults to {DEFAULT_CONFIG_PATH})",
    )
    p_find.set_defaults(func=cmd_find)

    return p


def main(argv: Optional[list] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=bool(args.verbose),
        warnings_only=bool(getattr(args, "warnings_only", False)),
        errors_only=bool(getattr(args, "errors_only", False)),
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
