from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from excel_json.config.loader import ConfigError, load_config, resolve_config_path
from excel_json.logging.init import log_summary, set_debug, setup_logging
from excel_json.models.config_models import ConvertOptions
from excel_json.output.writer import OutputError, save_json_file
from excel_json.services.orchestrator import ProcessingError, convert_excel_to_json, resolve_output_path
from excel_json.services.selector import SheetSelectionError
from excel_json.services.summary import render_sheet_lines, render_summary_line

"""CLI entrypoint.

Flow:
- Load .env, resolve and load the YAML defaults file
- Fold CLI flags over the defaults into one ConvertOptions
- --list-sheets: print sheet names and exit
- Otherwise convert, write the JSON file and print a SUMMARY line
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env using python-dotenv (missing file is fine)."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _non_negative_int(value: str) -> int:
    """argparse type for --header (same rule as the config schema: integer >= 0)."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {number}")
    return number


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="excel-json",
        description="Convert Excel file to JSON",
        epilog=(
            "examples:\n"
            "  excel-json data.xlsx\n"
            "  excel-json data.xlsx --pretty\n"
            '  excel-json data.xlsx --sheet "Sales" -o sales.json\n'
            "  excel-json data.xlsx --no-camel-case\n"
            "  excel-json data.xlsx --no-id\n"
            "  excel-json data.xlsx --all-sheets --pretty"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("excel_file", help="Path to Excel file")
    p.add_argument("--output", "-o", help="Output JSON file path")
    p.add_argument("--sheet", "-s", help="Specific sheet name to convert")
    # None = 未指定 (config の既定値を使う)
    p.add_argument("--all-sheets", "-a", action="store_true", default=None, help="Convert all sheets")
    p.add_argument("--pretty", "-p", action="store_true", default=None, help="Pretty print JSON with indentation")
    p.add_argument("--list-sheets", "-l", action="store_true", help="List all sheet names")
    p.add_argument("--header", type=_non_negative_int, default=None, help="Row to use as header (0-indexed)")
    p.add_argument("--no-id", dest="add_id", action="store_false", default=None,
                   help="Skip adding sequential ID field to each row")
    p.add_argument("--no-camel-case", dest="camel_case", action="store_false", default=None,
                   help="Skip converting column names to camelCase")
    p.add_argument("--config", help="YAML file with conversion defaults")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def build_options(args: argparse.Namespace, config_path: str | None = None) -> ConvertOptions:
    """Fold parsed CLI flags over the YAML defaults.

    Raises:
        ConfigError: config file named but missing, or invalid
    """
    defaults = load_config(resolve_config_path(config_path))
    return ConvertOptions.from_defaults(
        defaults,
        output=args.output,
        sheet=args.sheet,
        all_sheets=args.all_sheets,
        pretty=args.pretty,
        list_sheets=args.list_sheets,
        header=args.header,
        add_id=args.add_id,
        camel_case=args.camel_case,
    )


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # 空リスト [] はそのまま使う (None のときのみ sys.argv を読む)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    _load_env_file(Path(".env"))

    try:
        options = build_options(args, args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    excel_file = Path(args.excel_file)
    try:
        result = convert_excel_to_json(excel_file, options)
    except (ProcessingError, SheetSelectionError) as e:
        logger.error(f"conversion: {e}")
        return EXIT_FATAL

    if options.list_sheets:
        logger.info(f'Sheets in "{excel_file}":')
        for index, sheet_name in enumerate(result.sheets, start=1):
            logger.info(f"   {index}. {sheet_name}")
        return EXIT_SUCCESS

    output_file = resolve_output_path(excel_file, options)
    try:
        save_json_file(result.data, output_file, pretty=options.pretty)
    except OutputError as e:
        logger.error(f"output: {e}")
        return EXIT_FATAL

    logger.info(result.message)
    logger.info(f"Input: {excel_file}")
    logger.info(f"Output: {output_file}")
    logger.info(f"Sheets processed: {', '.join(result.processed_sheets)}")
    if options.all_sheets:
        for line in render_sheet_lines(result):
            logger.info(line)
    else:
        logger.info(f"Rows: {result.total_rows}")
    log_summary(render_summary_line(result))
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
