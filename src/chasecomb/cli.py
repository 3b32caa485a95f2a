"""Command line entry point: enumerate or count k-element combinations."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Iterator, Sequence
from itertools import islice
from typing import Any

from pydantic import ValidationError

from chasecomb.analysis import combinations_frame, format_csv, generate_enumeration_report
from chasecomb.combination import CombinationSet, create
from chasecomb.config import ConfigLoadError, EnumerationConfig, load_config

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chasecomb",
        description="Enumerate k-element combinations in Chase's minimal-change order.",
    )
    parser.add_argument("--config", help="YAML/JSON config file; command line flags override it.")
    parser.add_argument("--elements", nargs="+", help="Elements to combine.")
    parser.add_argument("-n", type=int, help="Combine the integers 0..n-1 instead of --elements.")
    parser.add_argument("-k", type=int, help="Subset size.")
    parser.add_argument("--limit", type=int, help="Stop after this many combinations.")
    parser.add_argument("--format", dest="output_format", choices=["text", "json", "csv"])
    parser.add_argument("--count-only", action="store_true", help="Print C(n, k) and exit.")
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print a Markdown report with the count and minimal-change checks.",
    )
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _resolve_config(args)
    except (ConfigLoadError, FileNotFoundError, ValidationError) as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    combination_set = create(config.resolve_elements(), config.k)
    logger.info("Enumerating %r", combination_set)

    if config.count_only:
        print(combination_set.size())
        return 0

    if args.report:
        report = generate_enumeration_report(
            combination_set,
            limit=config.limit,
            config_snapshot=config.model_dump(),
        )
        print(report.markdown_report)
        return 0

    if config.output_format == "csv":
        try:
            frame = combinations_frame(combination_set, limit=config.limit)
        except ValueError as exc:
            parser.error(str(exc))
        print(format_csv(frame), end="")
    elif config.output_format == "json":
        print(json.dumps([list(members) for members in _ordered(combination_set, config.limit)]))
    else:
        for members in _ordered(combination_set, config.limit):
            print(" ".join(str(value) for value in members))
    return 0


def _resolve_config(args: argparse.Namespace) -> EnumerationConfig:
    overrides: dict[str, Any] = {}
    for name in ("elements", "n", "k", "limit", "output_format", "log_level"):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value
    if args.count_only:
        overrides["count_only"] = True

    if args.config:
        return load_config(args.config, overrides=overrides)
    return EnumerationConfig.model_validate(overrides)


def _ordered(combination_set: CombinationSet, limit: int | None) -> Iterator[tuple]:
    """Yield each combination as a tuple in element order."""
    position = {element: index for index, element in enumerate(combination_set.elements)}
    for combination in islice(combination_set, limit):
        yield tuple(sorted(combination, key=position.__getitem__))


if __name__ == "__main__":
    sys.exit(main())
