#!/usr/bin/env python3
"""
Convert a rota workbook from XLSX to CSV.

Usage:
    python convert_rota.py [input_file.xlsx] [output_file.csv]

If no input file is specified, defaults to rota.xlsx in the same directory.
The output defaults to the input path with a .csv suffix. Every sheet is
written in workbook order with a blank line between sheets, which is the
shape the rota parser reads.
"""

import sys
from pathlib import Path

from rota_swap import (
    is_privileged_source,
    list_months,
    list_teams,
    load_settings,
    parse_rota,
    workbook_to_csv,
)


def convert_workbook(input_file: Path, output_file: Path) -> str:
    """Convert input_file to CSV text and write it to output_file."""
    csv_text = workbook_to_csv(input_file)
    output_file.write_text(csv_text, encoding='utf-8')
    return csv_text


def print_summary(csv_text: str, file_name: str, settings: dict):
    """Print what the parser will see in the converted rota."""
    roster = parse_rota(
        csv_text,
        privileged=is_privileged_source(file_name, settings['privileged_marker']),
        min_real_shifts=settings['min_real_shifts'],
        non_shift_tokens=settings['non_shift_tokens'],
    )
    months = list_months(roster)
    if not months:
        print("\nWarning: no month blocks with a header row were found")
        return

    print(f"\nMonths found ({len(months)}):")
    for month in months:
        # Skip the "All Employees" entry
        teams = list_teams(roster, month)[1:]
        print(f"  {month}: {len(roster.months[month].employees)} employees in {len(teams)} teams")


def main():
    script_dir = Path(__file__).parent

    # Determine input file
    if len(sys.argv) > 1:
        input_file = Path(sys.argv[1])
    else:
        input_file = script_dir / "rota.xlsx"

    # Check if input file exists
    if not input_file.exists():
        print(f"Error: Input file not found: {input_file}")
        sys.exit(1)

    output_file = Path(sys.argv[2]) if len(sys.argv) > 2 else input_file.with_suffix('.csv')

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Reading rota from: {input_file}")

    try:
        csv_text = convert_workbook(input_file, output_file)
    except Exception as e:
        print(f"Error converting workbook: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)

    print(f"Wrote {len(csv_text.splitlines())} lines to: {output_file}")
    print_summary(csv_text, input_file.name, settings)
    print(f"✓ Successfully generated {output_file.name}")


if __name__ == "__main__":
    main()
