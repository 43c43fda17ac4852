"""Main execution script for the Assessment Reporting System."""

import argparse
import sys
import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv() # Load variables from .env into environment before config reads them

# Ensure the project root directory is in the Python path
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import config
from utils.logger import setup_logger
from utils.error_handler import BaseReportingException
from core.data_loader import DataLoader
from core.reports import ReportGenerator, ReportKind
from core.sample_data import generate_sample_data
from core.validator import InputValidator
import ui.cli as cli

# Initialize logger as early as possible after config is loaded
logger = setup_logger()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate diagnostic, progress or feedback reports from assessment data."
    )
    parser.add_argument("--data-dir", default=config.DATA_DIR,
                        help=f"Directory holding the JSON data files (default: {config.DATA_DIR})")
    parser.add_argument("--student-id", help="Student to report on; prompted for if omitted")
    parser.add_argument("--report", help="1 for Diagnostic, 2 for Progress, 3 for Feedback; prompted for if omitted")
    parser.add_argument("--generate-sample-data", action="store_true",
                        help="Write sample data files into the data directory and exit")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Runs the reporting workflow and returns the process exit code."""
    args = parse_args(argv)

    if args.generate_sample_data:
        try:
            generate_sample_data(args.data_dir)
        except OSError as e:
            logger.error(f"Could not write sample data: {e}", exc_info=config.DEBUG)
            cli.display_error(f"Could not write sample data: {e}")
            return 1
        cli.display_success(f"Sample data generated in {args.data_dir}")
        return 0

    logger.info("Starting assessment reporting workflow.")
    interactive = args.student_id is None or args.report is None
    if interactive:
        cli.display_welcome()

    try:
        if args.report is not None:
            # Reject a bad selector before touching the data files
            ReportKind.parse(args.report)
        dataset = DataLoader(args.data_dir).load_all()
        if interactive:
            cli.display_success("Data loaded successfully!")

        student_id = args.student_id if args.student_id is not None else cli.prompt_student_id()
        report_type = args.report if args.report is not None else cli.prompt_report_type()

        report_kind = InputValidator().validate(student_id, report_type, dataset)
        report = ReportGenerator().generate(student_id, report_kind, dataset)
    except BaseReportingException as e:
        logger.error(f"Report generation failed: {e}", exc_info=config.DEBUG)
        cli.display_error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.info("Operation interrupted by user (Ctrl+C).")
        cli.display_warning("Operation interrupted.")
        return 1

    cli.display_report(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
