# table_excel/cli.py
# Command line entry point: export a JSON job to .xlsx, or import an .xlsx back to JSON.

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from .config.config_loader import ExportConfigLoader, load_columns
from .exceptions import ConfigLoadError
from .processors.export_worker import create_export_worker
from .processors.import_processor import read_excel

logger = logging.getLogger(__name__)


class ColoredFormatter(logging.Formatter):
    COLORS = {
        'DEBUG': '\033[36m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    # INFO lines are progress messages; everything else carries its source location
    INFO_FORMAT = '%(levelname)s %(message)s'
    LOCATED_FORMAT = '%(levelname)s [%(name)s:%(lineno)d] %(message)s'

    def format(self, record):
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        log_fmt = self.INFO_FORMAT if record.levelno == logging.INFO else self.LOCATED_FORMAT
        return logging.Formatter(log_fmt).format(record)


def configure_logging(log_level: int) -> None:
    """DEBUG/INFO go to stdout, WARNING and above to stderr."""
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    formatter = ColoredFormatter()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.setFormatter(formatter)
    stdout_handler.addFilter(lambda record: record.levelno <= logging.INFO)
    root_logger.addHandler(stdout_handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(formatter)
    root_logger.addHandler(stderr_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert grouped table columns to and from Excel workbooks.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging (shows all DEBUG messages).")
    parser.add_argument("--log-level", choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='INFO', help="Set logging level (default: INFO).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    export_parser = subparsers.add_parser("export", help="Write an .xlsx file from a JSON export job.")
    export_parser.add_argument("config", help="Path to the export job JSON file.")
    export_parser.add_argument("-o", "--output", help="Output path (overrides the job's fileName).")
    export_parser.add_argument("--worker", action="store_true", help="Run the export in a background worker.")

    import_parser = subparsers.add_parser("import", help="Read records from an .xlsx file.")
    import_parser.add_argument("file", help="Path to the .xlsx file.")
    import_parser.add_argument("-c", "--columns", required=True, help="Path to the header columns JSON file.")
    import_parser.add_argument("--sheet-index", type=int, default=1, help="1-based worksheet index (default: 1).")
    import_parser.add_argument("-o", "--output", help="Write the JSON result here instead of stdout.")
    return parser


def run_export(args) -> int:
    loader = ExportConfigLoader(args.config)
    params = loader.get_export_params(file_name=args.output)
    if args.worker:
        params.use_worker = True

    errors = []

    def notify_error(message: str) -> None:
        logger.error(message)
        errors.append(message)

    future = create_export_worker(params, notify_error=notify_error)
    if future is not None:
        future.result()
    return 1 if errors else 0


def run_import(args) -> int:
    columns = load_columns(args.columns)
    result = read_excel(args.file, columns, sheet_index=args.sheet_index)
    for message in result.validate:
        logger.warning(message)

    output = json.dumps(result.to_dict(), ensure_ascii=False, indent=2, default=str)
    if args.output:
        Path(args.output).write_text(output, encoding='utf-8')
        logger.info(f"Import result written to '{args.output}'")
    else:
        print(output)
    return 1 if result.validate else 0


def main(argv=None) -> int:
    start_time = time.time()
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.debug else getattr(logging, args.log_level, logging.INFO)
    configure_logging(log_level)
    logger.debug(f"Arguments: {vars(args)}")

    try:
        if args.command == "export":
            exit_code = run_export(args)
        else:
            exit_code = run_import(args)
    except ConfigLoadError as e:
        logger.error(str(e))
        exit_code = 1

    logger.info(f"Total Time: {time.time() - start_time:.2f} seconds")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
