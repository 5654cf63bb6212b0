"""Command line entry point: analyze a delimited text file and print the report."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from csvanalyzer.analyzer import CSVAnalyzer
from csvanalyzer.config import AnalyzerConfig, load_config_from_yaml
from csvanalyzer.export import export_summary_csv, format_file_size
from csvanalyzer.parsing.records import HeaderReadError
from csvanalyzer.serialization import SerializationError, dump_analysis

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "yaml", "csv")


def read_document(path: str, encoding: str = "utf-8") -> str:
    """Read a file, or stdin for ``-``, dropping a leading UTF-8 BOM."""
    if path == "-":
        text = sys.stdin.read()
    else:
        text = Path(path).read_text(encoding=encoding)
    if text.startswith("\ufeff"):
        text = text[1:]
    return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csvanalyzer",
        description="Infer column types and statistics of a delimited text file.",
    )
    parser.add_argument("input", nargs="?", default="-", help="Input file or '-' for stdin.")
    parser.add_argument(
        "--sample-size",
        type=int,
        default=None,
        help="Examine at most this many values per column for type, range and length.",
    )
    parser.add_argument("--config", help="YAML file with analyzer settings.")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default="json", help="Report format.")
    parser.add_argument("--output", help="Write the report to this file instead of stdout.")
    parser.add_argument("--encoding", default="utf-8", help="Input file encoding.")
    parser.add_argument("--verbose", action="store_true", help="Log debug diagnostics to stderr.")
    return parser


def _load_config(args: argparse.Namespace) -> AnalyzerConfig:
    config = load_config_from_yaml(args.config) if args.config else AnalyzerConfig()
    if args.sample_size is not None:
        config = AnalyzerConfig(sample_size=args.sample_size)
    return config


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = _load_config(args)
        content = read_document(args.input, args.encoding)
        logger.info(
            f"Read {format_file_size(len(content.encode(args.encoding)))} from {args.input}"
        )
        analysis = CSVAnalyzer(config).analyze(content)
        if args.format == "csv":
            report = export_summary_csv(analysis)
        else:
            report = dump_analysis(analysis, args.format)
    except (HeaderReadError, SerializationError, ValueError, OSError) as e:
        print(f"csvanalyzer: error: {e}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(report, encoding="utf-8")
        logger.info(f"Report written to {args.output}")
    else:
        sys.stdout.write(report)
        if not report.endswith("\n"):
            sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
