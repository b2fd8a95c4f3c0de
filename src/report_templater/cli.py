"""Command-line entry point for template reconstruction.

Usage:
    report-templater extract pages.json -o extracted.txt
    report-templater analyze pages.json -o template.md
    report-templater normalize template.md other.md --in-place
    report-templater locate template.md
    report-templater map template.md --sources "Item No" "Ingredient" "CAS Number"
    report-templater placeholders template.md
    report-templater fill template.md --values values.json -o report.md
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from report_templater.config import PipelineConfig, load_config
from report_templater.layout.extract import extract_text, load_fragments
from report_templater.normalization.pipeline import normalize_markdown
from report_templater.oracle.client import OracleSettings, analyze_text
from report_templater.placeholders.extract import extract_placeholders, group_placeholders, user_placeholders
from report_templater.placeholders.fill import fill_no_data, fill_template
from report_templater.tables.columns import map_columns, unmapped_targets
from report_templater.tables.detection import find_table, validate_table

logger = logging.getLogger(__name__)


def _read(path: str) -> str:
    with open(path, "r", encoding="utf-8") as fopen:
        return fopen.read()


def _write(text: str, output: str | None) -> None:
    if output is None:
        sys.stdout.write(text)
        return
    Path(output).parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w", encoding="utf-8") as fopen:
        fopen.write(text)
    logger.info("Wrote %s", output)


def _dump(obj) -> str:
    return json.dumps(obj, indent=2, ensure_ascii=False) + "\n"


# ─── Subcommands ─────────────────────────────────────────────────────────────


def cmd_extract(args: argparse.Namespace, config: PipelineConfig) -> int:
    _write(extract_text(load_fragments(args.fragments), config, max_workers=args.workers), args.output)
    return 0


def cmd_analyze(args: argparse.Namespace, config: PipelineConfig) -> int:
    raw_text = extract_text(load_fragments(args.fragments), config, max_workers=args.workers)
    result = analyze_text(raw_text, OracleSettings.from_env(), config=config)
    if result is None:
        logger.error("Structuring model unavailable; no template produced")
        return 1
    _write(result.content, args.output)
    return 0


def cmd_normalize(args: argparse.Namespace, config: PipelineConfig) -> int:
    for path in tqdm(args.files, desc="Normalizing", disable=len(args.files) < 2):
        normalized = normalize_markdown(_read(path), config)
        _write(normalized, path if args.in_place else None)
    return 0


def cmd_locate(args: argparse.Namespace, config: PipelineConfig) -> int:  # pylint: disable=unused-argument
    content = _read(args.file)
    block = find_table(content)
    mismatches = validate_table(content, block) if block else []
    _write(
        _dump(
            {
                "table": block.model_dump() if block else None,
                "mismatches": [m.model_dump() for m in mismatches],
            }
        ),
        None,
    )
    return 0


def cmd_map(args: argparse.Namespace, config: PipelineConfig) -> int:
    block = find_table(_read(args.file))
    if block is None:
        logger.warning("No table in %s; choose columns manually", args.file)
        _write(_dump({"mapping": {}, "unmapped": []}), None)
        return 0
    mapping = map_columns(block.headers, args.sources, config)
    _write(_dump({"mapping": mapping, "unmapped": unmapped_targets(mapping)}), None)
    return 0


def cmd_placeholders(args: argparse.Namespace, config: PipelineConfig) -> int:
    content = _read(args.file)
    names = user_placeholders(extract_placeholders(content), config)
    _write(_dump(group_placeholders(content, names, config)), None)
    return 0


def cmd_fill(args: argparse.Namespace, config: PipelineConfig) -> int:
    content = _read(args.file)
    values = json.loads(_read(args.values)) if args.values else {}
    names = user_placeholders(extract_placeholders(content), config)
    values = fill_no_data({name: values.get(name, "") for name in names}, config)
    _write(fill_template(content, values, config), args.output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rebuild and normalize report templates.")
    parser.add_argument("--config", default=None, help="JSON file with PipelineConfig overrides")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("extract", help="Lay out positioned fragments as page text")
    p.add_argument("fragments", help="JSON list of pages of [text, x, y] fragments")
    p.add_argument("--output", "-o", default=None)
    p.add_argument("--workers", type=int, default=None)
    p.set_defaults(func=cmd_extract)

    p = sub.add_parser("analyze", help="Extract, send to the structuring model, normalize")
    p.add_argument("fragments")
    p.add_argument("--output", "-o", default=None)
    p.add_argument("--workers", type=int, default=None)
    p.set_defaults(func=cmd_analyze)

    p = sub.add_parser("normalize", help="Run the normalization pipeline over markdown files")
    p.add_argument("files", nargs="+")
    p.add_argument("--in-place", action="store_true")
    p.set_defaults(func=cmd_normalize)

    p = sub.add_parser("locate", help="Report the first table and any row-width mismatches")
    p.add_argument("file")
    p.set_defaults(func=cmd_locate)

    p = sub.add_parser("map", help="Suggest a column mapping for the template's table")
    p.add_argument("file")
    p.add_argument("--sources", nargs="+", required=True, help="Source data column names")
    p.set_defaults(func=cmd_map)

    p = sub.add_parser("placeholders", help="List user placeholders grouped by section")
    p.add_argument("file")
    p.set_defaults(func=cmd_placeholders)

    p = sub.add_parser("fill", help="Substitute placeholder values into a template")
    p.add_argument("file")
    p.add_argument("--values", default=None, help="JSON object of placeholder -> value")
    p.add_argument("--output", "-o", default=None)
    p.set_defaults(func=cmd_fill)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(asctime)s - %(levelname)s - %(message)s")
    config = load_config(args.config)
    return args.func(args, config)


if __name__ == "__main__":
    sys.exit(main())
