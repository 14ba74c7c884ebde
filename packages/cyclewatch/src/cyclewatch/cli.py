"""
Command line interface for cyclewatch
=====================================
Reads period start dates from a CSV file, prints cycle length statistics and
predicts when the next period is likely to start.
"""

import argparse
from typing import Optional, Sequence

from cyclewatch.config import (
    DATE_FORMAT,
    DEFAULT_DELAY_DAYS,
    DEFAULT_RECORD_PATH,
    DEFAULT_TOLERANCE,
    PredictorConfig,
)
from cyclewatch.errors import CycleWatchError
from cyclewatch.predictor import CycleReport, CyclePredictor


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='cyclewatch',
        description='Calculate menstrual cycle statistics and predict the next period',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example CSV format (menstruation_records.csv), one period start per row:
    2024,1,1
    2024,1,29
    2024,2,26
    ...

Example usage:
    cyclewatch -r ./menstruation_records.csv -d 5 -t 15
        """
    )

    parser.add_argument(
        '--records', '-r',
        default=str(DEFAULT_RECORD_PATH),
        help='Path to the CSV record file (default: %(default)s)'
    )
    parser.add_argument(
        '--delay-days', '-d',
        type=int,
        default=DEFAULT_DELAY_DAYS,
        help='Days of delay tolerated around the average cycle (default: %(default)s)'
    )
    parser.add_argument(
        '--tolerance', '-t',
        type=int,
        default=DEFAULT_TOLERANCE,
        help='Shortest gap in days still counted as a cycle (default: %(default)s)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Print loading details'
    )
    return parser


def print_report(report: CycleReport) -> None:
    stats = report.statistics
    print(f"Cycle lengths (days): {stats.cycle_lengths}")
    print(f"Average cycle length: {stats.average:.2f} days")
    print(f"Shortest cycle length: {stats.minimum} days")
    print(f"Longest cycle length: {stats.maximum} days")
    print(f"Last recorded period start: {report.last_date.strftime(DATE_FORMAT)}")
    print(f"Predicted next period start: {report.window.format()}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line entry point. Errors are printed, the exit status is always 0."""
    args = build_parser().parse_args(argv)
    config = PredictorConfig.from_args(args)

    predictor = CyclePredictor(config=config)
    try:
        report = predictor.predict_from_csv()
    except CycleWatchError as exc:
        print(exc)
        return 0

    print_report(report)
    return 0


if __name__ == '__main__':
    main()
