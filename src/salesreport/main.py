"""Command line entry point."""
import sys
import argparse
from pathlib import Path
from typing import List, Optional

from salesreport.config.settings import get_settings, reset_settings
from salesreport.orchestrator.processor import SalesReportProcessor, RunResult
from salesreport.utils.logger import get_logger, configure_logging, set_run_context
from salesreport.utils.exceptions import SalesReportError

logger = get_logger()


def split_search_strings(raw: str) -> List[str]:
    """Split comma separated search strings; entries are kept untrimmed."""
    if not raw or not raw.strip():
        return []
    return raw.split(",")


def _prompt(message: str) -> str:
    """Ask the user for a value on the console."""
    return input(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="salesreport",
        description="Summarize a sales file and write a report for selected products"
    )
    parser.add_argument("-i", "--input", help="Sales data file (prompted if omitted)")
    parser.add_argument("-o", "--output", help="Report file to write (prompted if omitted)")
    parser.add_argument(
        "-s", "--search",
        help="Comma separated product names to report on (prompted if omitted)"
    )
    parser.add_argument("--config", type=Path, help="Path to a config.yaml file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level"
    )
    return parser


def _run(args: argparse.Namespace) -> RunResult:
    """Resolve inputs, prompting where needed, and run the pipeline."""
    input_path = args.input if args.input is not None else _prompt("Enter the input file path: ")
    output_path = args.output if args.output is not None else _prompt("Enter the output file path: ")

    processor = SalesReportProcessor(get_settings())
    result = RunResult(input_path=input_path, output_path=output_path)
    try:
        records, _ = processor.load(input_path)

        raw_search = args.search
        if raw_search is None:
            raw_search = _prompt("\nEnter search strings separated by commas: ")

        matches = split_search_strings(raw_search)
        if not matches:
            print("No search strings entered. Exiting.")
            result.records_read = len(records)
            return result

        processor.report(records, output_path, matches, result)
    finally:
        set_run_context(None)

    print(f"\nThe output is successfully saved to {output_path}.")
    return result


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for SalesReport."""
    args = _build_parser().parse_args(argv)

    try:
        if args.config is not None:
            reset_settings()
            get_settings(args.config)
            configure_logging(args.log_level)
        elif args.log_level:
            configure_logging(args.log_level)

        _run(args)
    except SalesReportError as e:
        logger.error(f"Run aborted: {e}")
        print(e)
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\nInput cancelled. Exiting.")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
