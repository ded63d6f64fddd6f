import os
import logging
import sys
import unittest
from datetime import datetime

base_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, base_path)

from PySubsync.Helpers.Tests import create_logfile, end_logfile, separator
from tests.unit_tests import discover_tests

def format_summary_line(label: str, run: int, failures: int, errors: int, skipped: int, ok: bool) -> str:
    return f"  {label:<12}: run: {run:>3} failures: {failures:>3} errors: {errors:>3} skipped: {skipped:>3} status={'OK ' if ok else 'FAIL'}"

logging.getLogger().setLevel(logging.DEBUG)
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(logging.WARNING)  # Only show warnings and above on console
console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
if console_handler not in logging.getLogger().handlers:
    logging.getLogger().addHandler(console_handler)

def run_unit_tests(results_path: str) -> tuple[bool, str]:
    """
    Run the PySubsync unit tests, logging to results_path. Returns success and a summary line.
    """
    log_file = create_logfile(results_path, "unit_tests.log")

    start_stamp = datetime.now().strftime("%Y-%m-%d at %H:%M")
    logging.info(separator)
    logging.info("Running unit tests at " + start_stamp)
    logging.info(separator)

    runner = unittest.runner.TextTestRunner(verbosity=1)
    result = runner.run(discover_tests(base_path))

    success = result.wasSuccessful()
    summary = format_summary_line('PySubsync', result.testsRun, len(result.failures), len(result.errors), len(result.skipped), success)

    end_stamp = datetime.now().strftime("%Y-%m-%d at %H:%M")
    logging.info(separator)
    if success:
        logging.info("Completed unit tests successfully at " + end_stamp)
    else:
        logging.error("Completed unit tests with failures at " + end_stamp)
    logging.info(separator)

    end_logfile(log_file)
    return success, summary

if __name__ == "__main__":
    results_directory = os.path.join(base_path, 'test_results')

    if not os.path.exists(results_directory):
        os.makedirs(results_directory)

    overall_success, summary = run_unit_tests(results_directory)

    if overall_success:
        print(summary)
    else:
        logging.error(summary)
        print("*************************************************")
        print("*******     One or more tests failed!    ********")
        print("*************************************************")
        sys.exit(1)
