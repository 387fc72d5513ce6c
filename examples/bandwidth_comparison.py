#!/usr/bin/env python3
"""Compare packed base64 text against comma-separated decimals.

Runs the standard scenarios (single values, ranges, random samples drawn
from [1, 300]) and prints a size report for each, then a summary table.
"""

import sys

from ninepack.compare import compare, format_report, standard_scenarios


def main() -> None:
    """Print a report for every standard scenario."""
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else 2024

    reports = []
    for description, numbers in standard_scenarios(seed):
        report = compare(numbers, description)
        reports.append(report)
        print(format_report(report))
        print()

    print("=" * 60)
    print(f"{'Scenario':<32}{'Naive':>8}{'Packed':>8}{'Ratio':>10}")
    print("=" * 60)
    for report in reports:
        ratio = f"{report.compression_ratio:.2f}x" if report.compression_ratio else "N/A"
        print(f"{report.description:<32}{report.naive_length:>8}{report.packed_length:>8}{ratio:>10}")


if __name__ == "__main__":
    main()
