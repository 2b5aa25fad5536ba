#!/usr/bin/env python3
"""
Rota Swap Finder

Parse a monthly team rota export and find shift swap partners.
"""

import argparse
import calendar
import io
import json
import logging
import re
import sys
from dataclasses import dataclass, field, replace
from datetime import datetime, time
from pathlib import Path
from typing import Optional, Union

import pandas as pd
from openpyxl import load_workbook

logger = logging.getLogger(__name__)

MONTH_NAMES = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
]

# Banner text that contains a month name but is not a month banner
SERVICE_DESK_MARKER = 'Service Desk'

DEFAULT_TEAM = 'Uncategorized'
ALL_EMPLOYEES = 'All Employees'
MANAGERS_TEAM = 'Managers'
OVERTIME_TEAM = 'Overtime'
HEADER_NAME_CELL = 'Name'

DAYS_PER_MONTH = 31

# Month selected first when a rota is loaded (falls back to the last month)
DEFAULT_MONTH = 'November'

# Filename marker for exports that were already filtered to real staff
PRIVILEGED_MARKER = '_Filtered_Secured'

# Rows with fewer real shifts than this are placeholders, unless the
# source is privileged
MIN_REAL_SHIFTS = 5

# Cell values that do not count as a worked shift for row admission
NON_SHIFT_TOKENS = frozenset({
    'off', 'x', 'r', 'h', 'holiday', 'sick', 'vacation',
    'annual leave', 'bh', 'xmas',
})

# Config file path
SETTINGS_FILE = Path(__file__).parent / 'rota_settings.json'

# Shift categories
EARLY = 'early'
STANDARD = 'standard'
AM = 'am'
PM = 'pm'
HOLIDAY = 'holiday'
OFF = 'off'
NO_DATA = 'no-data'

CATEGORIES = (EARLY, STANDARD, AM, PM, HOLIDAY, OFF, NO_DATA)

# Days that cannot be offered or taken in a swap
UNSWAPPABLE_CATEGORIES = frozenset({OFF, HOLIDAY, NO_DATA})

OFF_TOKENS = {'off', 'r'}
HOLIDAY_TOKENS = {'bh', 'xmas', 'h', 'holiday'}

# code -> (display text, description, sort hour, category)
SHIFT_CODES = {
    '6am': ('06:00 - 14:30', 'Early Shift', 6, EARLY),
    '8am': ('08:00 - 16:30', 'Standard Shift', 8, AM),
    '830am': ('08:30 - 17:00', 'Mid-Morning Shift', 8, AM),
    '9am': ('09:00 - 17:30', 'Standard Day', 9, STANDARD),
    '930am': ('09:30 - 18:00', 'Late Start Shift', 9, AM),
    '1230': ('12:30 - 21:00', 'Mid/Late Shift', 12, PM),
    '230pm': ('14:30 - 23:00', 'Late Afternoon Shift', 14, PM),
    '330pm': ('15:30 - 00:00', 'Closing Shift', 15, PM),
    '9-1': ('09:00 - 13:00', 'Half Day', 9, AM),
}

_BARE_COUNT_RE = re.compile(r'^\d{1,2}$')
_HOUR_RE = re.compile(r'(\d{1,2})(:?(\d{2}))?')
_REPLACEMENT_RE = re.compile(r'^replacement\s+\d+', re.IGNORECASE)
_LINE_SPLIT_RE = re.compile(r'\r\n|\n|\r')

SPREADSHEET_SUFFIXES = {'.xlsx', '.xlsm'}


@dataclass(frozen=True)
class ShiftDescriptor:
    """One day's rota cell, classified."""
    category: str
    display_text: str
    description: str
    sort_hour: int = 0


@dataclass
class Employee:
    name: str
    shifts: tuple
    team: str


@dataclass
class MonthRoster:
    employees: dict = field(default_factory=dict)
    day_headers: list = field(default_factory=list)


@dataclass
class Roster:
    """Parsed rota: month -> MonthRoster, plus month -> team -> member names."""
    months: dict = field(default_factory=dict)
    teams: dict = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.months


@dataclass
class SwapCandidate:
    name: str
    raw: str
    descriptor: ShiftDescriptor


@dataclass
class SwapCandidateGroup:
    descriptor: ShiftDescriptor
    employees: list = field(default_factory=list)


@dataclass
class SwapProposal:
    """A proposed trade of one day's shifts between two employees."""
    month: str
    day_index: int
    date_label: str
    requester: str
    requester_shift: ShiftDescriptor
    partner: str
    partner_shift: ShiftDescriptor


@dataclass(frozen=True)
class ScanState:
    """Where the line-by-line rota scan currently is."""
    month: Optional[str] = None
    capturing: bool = False
    team: str = DEFAULT_TEAM


NO_DATA_SHIFT = ShiftDescriptor(NO_DATA, 'NO DATA', 'No Shift Data')
OFF_SHIFT = ShiftDescriptor(OFF, 'OFF', 'Day Off')


def load_settings(path: Optional[Path] = None) -> dict:
    """Load parser settings, falling back to the module defaults.

    Returns dict with keys:
    - min_real_shifts: admission threshold for non-privileged sources
    - non_shift_tokens: set of cell values that are not worked shifts
    - privileged_marker: filename marker for pre-filtered exports
    """
    settings = {
        'min_real_shifts': MIN_REAL_SHIFTS,
        'non_shift_tokens': set(NON_SHIFT_TOKENS),
        'privileged_marker': PRIVILEGED_MARKER,
    }
    path = Path(path) if path is not None else SETTINGS_FILE
    if not path.exists():
        return settings

    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid settings file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Invalid settings file {path}: expected a JSON object")

    if 'min_real_shifts' in data:
        try:
            settings['min_real_shifts'] = int(data['min_real_shifts'])
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid settings file {path}: min_real_shifts must be a number") from e
    if 'non_shift_tokens' in data:
        tokens = data['non_shift_tokens']
        if not isinstance(tokens, list):
            raise ValueError(f"Invalid settings file {path}: non_shift_tokens must be a list")
        settings['non_shift_tokens'] = {str(t).strip().lower() for t in tokens}
    if 'privileged_marker' in data:
        settings['privileged_marker'] = str(data['privileged_marker'])
    return settings


def normalize_team_name(raw_name: str) -> Optional[str]:
    """
    Map a raw team label onto a canonical team name.

    Returns None for total/count lines and empty labels. Labels that match
    none of the known teams pass through trimmed, in their original case.
    """
    name = raw_name.lower().strip()
    if name == 'anon':
        return DEFAULT_TEAM
    if not name or 'total' in name or 'count' in name:
        return None
    if 'aah' in name:
        return '2nd Line AAH'
    if 'team leader' in name or 'teamleader' in name or 'manager' in name:
        return MANAGERS_TEAM
    if '1st line' in name or 'l1' in name:
        return '1st Line'
    if '2nd line' in name or 'l2' in name:
        return '2nd Line'
    if '3rd line' in name or 'l3' in name:
        return '3rd Line'
    return raw_name.strip()


def classify_shift(raw) -> ShiftDescriptor:
    """
    Classify a raw rota cell into a ShiftDescriptor.

    Known codes come from SHIFT_CODES; anything else is read as a free-form
    start time ("2pm", "10:30"). Never fails: every input gets a descriptor.
    """
    if not isinstance(raw, str) or not raw.strip():
        return NO_DATA_SHIFT

    s = re.sub(r'\s', '', raw.lower())
    # Stray 1-2 digit numbers are counts, not shifts
    if _BARE_COUNT_RE.match(s):
        return NO_DATA_SHIFT

    if s in OFF_TOKENS:
        return OFF_SHIFT
    if s in HOLIDAY_TOKENS:
        return ShiftDescriptor(HOLIDAY, raw.strip().upper(), 'Annual Leave')

    if s in SHIFT_CODES:
        display_text, description, hour, category = SHIFT_CODES[s]
        return ShiftDescriptor(category, display_text, description, hour)

    is_pm = 'pm' in s
    hour = 0
    match = _HOUR_RE.search(s)
    if match:
        hour = int(match.group(1))
        if is_pm and hour < 12:
            hour += 12
        elif not is_pm and hour == 12:
            hour = 0

    category = PM if hour >= 12 or hour < 6 else AM
    return ShiftDescriptor(category, f"Shift: {raw.strip()}", 'Custom Shift', hour)


def is_swappable(descriptor: ShiftDescriptor) -> bool:
    """True if the day is a worked shift that could be traded."""
    return descriptor.category not in UNSWAPPABLE_CATEGORIES


def count_real_shifts(shifts, non_shift_tokens=NON_SHIFT_TOKENS) -> int:
    """Count cells that look like worked shifts (not leave, blanks or counts)."""
    count = 0
    for cell in shifts:
        value = cell.strip().lower()
        if not value or value in non_shift_tokens:
            continue
        if _BARE_COUNT_RE.match(value):
            continue
        count += 1
    return count


def _find_month(cells: list) -> Optional[str]:
    """Return the month named on a banner line, if this line is one."""
    row_str = ' '.join(cells)
    if SERVICE_DESK_MARKER in row_str:
        return None
    for month in MONTH_NAMES:
        if month in row_str:
            return month
    return None


def _resolve_employee(name: str, team: str) -> tuple:
    """Re-file 'Replacement N' rows as overtime cover."""
    if _REPLACEMENT_RE.match(name):
        name = re.sub('replacement', 'Overtime', name, count=1, flags=re.IGNORECASE)
        return name, OVERTIME_TEAM
    return name, team


def _step(state: ScanState, cells: list) -> tuple:
    """
    Advance the scan over one line.

    Returns the new state and what the line is: 'month' (banner),
    'header', 'row' (employee data) or 'skip'.
    """
    month = _find_month(cells)
    if month:
        return ScanState(month=month), 'month'
    if state.month is None:
        return state, 'skip'
    if len(cells) > 1 and cells[1] == HEADER_NAME_CELL:
        return replace(state, capturing=True), 'header'
    if not state.capturing:
        return state, 'skip'

    team_raw = cells[0].strip()
    if len(team_raw) > 1:
        # Total/count lines keep the team of the block they sit in
        team = normalize_team_name(team_raw)
        if team is not None:
            return replace(state, team=team), 'row'
    return state, 'row'


def parse_rota(
    csv_text: str,
    privileged: bool = False,
    min_real_shifts: int = MIN_REAL_SHIFTS,
    non_shift_tokens=NON_SHIFT_TOKENS,
) -> Roster:
    """
    Parse a rota export (one or more month blocks of CSV) into a Roster.

    Each month block starts with a banner line naming the month, followed by
    a header row whose second cell is "Name" and then one row per employee:
    team (sticky, optional), name, and one shift code per day of the month.

    Args:
        csv_text: Raw CSV text, month blocks concatenated
        privileged: Source was already filtered to real staff, so rows
            are not required to have min_real_shifts shifts
        min_real_shifts: Admission threshold for non-privileged sources
        non_shift_tokens: Cell values that do not count as worked shifts

    Returns:
        Roster with only the months that had a header row (possibly empty)
    """
    months = {}
    teams = {}
    headed_months = []
    dropped = 0

    state = ScanState()
    for line in _LINE_SPLIT_RE.split(csv_text or ''):
        cells = line.split(',')
        state, kind = _step(state, cells)

        if kind == 'month':
            logger.debug("Month banner: %s", state.month)
            months.setdefault(state.month, MonthRoster())
            teams.setdefault(state.month, {})
            continue

        if kind == 'header':
            month_roster = months[state.month]
            headers = [d.strip() for d in cells[2:2 + DAYS_PER_MONTH]]
            if not month_roster.day_headers and headers and headers[0]:
                month_roster.day_headers = headers
            if state.month not in headed_months:
                headed_months.append(state.month)
            logger.debug("Header row for %s", state.month)
            continue

        if kind != 'row':
            continue

        name = cells[1].strip() if len(cells) > 1 else ''
        shifts = cells[2:2 + DAYS_PER_MONTH]
        shifts += [''] * (DAYS_PER_MONTH - len(shifts))

        employee_name, employee_team = _resolve_employee(name, state.team)
        if not employee_name:
            continue

        real_shift_count = count_real_shifts(shifts, non_shift_tokens)
        if real_shift_count == 0 or (not privileged and real_shift_count < min_real_shifts):
            logger.debug("Dropped %r in %s: %d real shifts", employee_name, state.month, real_shift_count)
            dropped += 1
            continue

        months[state.month].employees[employee_name] = Employee(employee_name, tuple(shifts), employee_team)
        members = teams[state.month].setdefault(employee_team, [])
        if employee_name not in members:
            members.append(employee_name)

    roster = Roster(
        months={m: months[m] for m in headed_months},
        teams={m: teams[m] for m in headed_months},
    )
    logger.info(
        "Parsed %d month(s), %d employee record(s), dropped %d row(s)",
        len(roster.months),
        sum(len(m.employees) for m in roster.months.values()),
        dropped,
    )
    return roster


def list_months(roster: Roster) -> list:
    """Months in the order they appear in the export."""
    return list(roster.months)


def list_teams(roster: Roster, month: str) -> list:
    """
    Teams for a month, in display order.

    "All Employees" first, then Managers, then the other teams sorted,
    then Uncategorized last. Empty teams are left out.
    """
    month_teams = roster.teams.get(month)
    if month_teams is None:
        return []

    teams = [ALL_EMPLOYEES]
    if month_teams.get(MANAGERS_TEAM):
        teams.append(MANAGERS_TEAM)
    teams.extend(sorted(
        t for t, members in month_teams.items()
        if t not in (MANAGERS_TEAM, DEFAULT_TEAM) and members
    ))
    if month_teams.get(DEFAULT_TEAM):
        teams.append(DEFAULT_TEAM)
    return teams


def list_employees(roster: Roster, month: str, team: str = ALL_EMPLOYEES) -> list:
    """Employee names for a month and team, sorted."""
    if month not in roster.months:
        return []
    if team == ALL_EMPLOYEES:
        return sorted(roster.months[month].employees)
    return sorted(roster.teams[month].get(team, []))


def get_employee(roster: Roster, month: str, name: str) -> Optional[Employee]:
    month_roster = roster.months.get(month)
    if month_roster is None:
        return None
    return month_roster.employees.get(name)


def get_shifts(roster: Roster, month: str, name: str) -> list:
    """Classified shifts for each day of the month ([] if not found)."""
    employee = get_employee(roster, month, name)
    if employee is None:
        return []
    return [classify_shift(raw) for raw in employee.shifts]


def compute_stats(roster: Roster, month: str, name: str) -> dict:
    """
    Count work days and days off for an employee in a month.

    Days with no data count as neither.
    """
    work_days = 0
    off_days = 0
    for shift in get_shifts(roster, month, name):
        if shift.category in (OFF, HOLIDAY):
            off_days += 1
        elif shift.category != NO_DATA:
            work_days += 1
    return {'work_days': work_days, 'off_days': off_days}


def default_month(roster: Roster) -> Optional[str]:
    """Month to show first: DEFAULT_MONTH if loaded, else the last one."""
    months = list_months(roster)
    if not months:
        return None
    return DEFAULT_MONTH if DEFAULT_MONTH in months else months[-1]


def first_weekday_offset(month: str, year: int) -> int:
    """Blank cells before day 1 in a Monday-first calendar grid."""
    return calendar.monthrange(year, MONTH_NAMES.index(month) + 1)[0]


def format_date_label(month: str, day_index: int) -> str:
    return f"{day_index + 1} {month}"


def find_swap_candidates(
    roster: Roster,
    month: str,
    my_name: str,
    day_index: int,
    scope: str = ALL_EMPLOYEES,
) -> dict:
    """
    Find employees working a different shift on the same day.

    Args:
        roster: Parsed rota
        month: Month to look in
        my_name: Employee who wants to swap
        day_index: Day of month, 0-based
        scope: ALL_EMPLOYEES to search everyone in the month, anything
            else to search only my_name's own team

    Returns:
        Dict of shift description -> SwapCandidateGroup, in scan order.
        Empty if nobody qualifies or my shift that day can't be swapped.
    """
    me = get_employee(roster, month, my_name)
    if me is None or not 0 <= day_index < DAYS_PER_MONTH:
        return {}

    my_shift = classify_shift(me.shifts[day_index])
    if not is_swappable(my_shift):
        logger.debug("%s has no swappable shift on day %d", my_name, day_index + 1)
        return {}

    employees = roster.months[month].employees
    if scope == ALL_EMPLOYEES:
        pool = list(employees)
    else:
        pool = roster.teams[month].get(me.team, [])

    candidates = {}
    for name in pool:
        if name == my_name:
            continue
        member = employees.get(name)
        if member is None:
            continue

        raw = member.shifts[day_index]
        their_shift = classify_shift(raw)
        # Only someone working a different shift is a useful swap
        if not is_swappable(their_shift) or their_shift.description == my_shift.description:
            continue

        group = candidates.setdefault(their_shift.description, SwapCandidateGroup(their_shift))
        group.employees.append(SwapCandidate(name, raw, their_shift))

    return candidates


def build_swap_proposal(
    roster: Roster,
    month: str,
    my_name: str,
    day_index: int,
    partner: str,
    scope: str = ALL_EMPLOYEES,
) -> Optional[SwapProposal]:
    """Build the swap request for my_name and partner, or None if partner isn't eligible."""
    for group in find_swap_candidates(roster, month, my_name, day_index, scope).values():
        for candidate in group.employees:
            if candidate.name == partner:
                me = get_employee(roster, month, my_name)
                return SwapProposal(
                    month=month,
                    day_index=day_index,
                    date_label=format_date_label(month, day_index),
                    requester=my_name,
                    requester_shift=classify_shift(me.shifts[day_index]),
                    partner=partner,
                    partner_shift=candidate.descriptor,
                )
    return None


def generate_swap_message(proposal: SwapProposal) -> str:
    """
    Generate a swap request message addressed to the partner's first name.

    Rota names come from comma-split cells, so they never hold a
    "Last, First" form; the first word is taken as the first name.
    """
    first_name = proposal.partner.split(' ')[0]

    return (
        f"Hi {first_name}! Would you be up for swapping shifts on {proposal.date_label}? "
        f"I'd take your {proposal.partner_shift.description} "
        f"({proposal.partner_shift.display_text}) and you'd have my "
        f"{proposal.requester_shift.description} ({proposal.requester_shift.display_text}). "
        f"Let me know! - {proposal.requester}"
    )


def roster_to_dataframe(roster: Roster, month: str) -> pd.DataFrame:
    """One row per employee per day, with the classified shift."""
    columns = ['name', 'team', 'day', 'header', 'raw', 'category', 'display_text', 'description']
    month_roster = roster.months.get(month)
    if month_roster is None:
        return pd.DataFrame(columns=columns)

    headers = month_roster.day_headers
    records = []
    for employee in month_roster.employees.values():
        for day_index, raw in enumerate(employee.shifts):
            shift = classify_shift(raw)
            records.append({
                'name': employee.name,
                'team': employee.team,
                'day': day_index + 1,
                'header': headers[day_index] if day_index < len(headers) else '',
                'raw': raw.strip(),
                'category': shift.category,
                'display_text': shift.display_text,
                'description': shift.description,
            })
    return pd.DataFrame(records, columns=columns)


def is_privileged_source(filename: str, marker: str = PRIVILEGED_MARKER) -> bool:
    """Pre-filtered exports are flagged in their filename."""
    return marker in filename


def _cell_to_text(value) -> str:
    if value is None:
        return ''
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        return value.strftime('%d/%m/%Y')
    if isinstance(value, time):
        return value.strftime('%H:%M')
    return str(value)


def workbook_to_csv(source: Union[Path, str, bytes]) -> str:
    """
    Convert every sheet of an Excel workbook to CSV text.

    Sheets are concatenated in workbook order with a blank line between them,
    the same shape as a CSV export of a multi-month rota.
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    wb = load_workbook(source, read_only=True, data_only=True)

    chunks = []
    try:
        for ws in wb.worksheets:
            rows = [[_cell_to_text(v) for v in row] for row in ws.iter_rows(values_only=True)]
            if rows:
                df = pd.DataFrame(rows).fillna('')
                chunks.append(df.to_csv(index=False, header=False, lineterminator='\n'))
            else:
                chunks.append('')
    finally:
        wb.close()

    return '\n\n'.join(chunks) + '\n\n'


def read_rota_text(file_path: Path) -> str:
    """Read a rota export as CSV text, converting workbooks."""
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Rota file not found: {file_path}")

    suffix = file_path.suffix.lower()
    if suffix == '.csv':
        return file_path.read_text(encoding='utf-8-sig', errors='replace')
    if suffix in SPREADSHEET_SUFFIXES:
        return workbook_to_csv(file_path)
    raise ValueError(f"Unsupported rota file type: {file_path.suffix}")


def load_rota(file_path: Path, settings: Optional[dict] = None) -> Roster:
    """Read and parse a rota file, flagging privileged sources by filename."""
    settings = settings or load_settings()
    file_path = Path(file_path)
    return parse_rota(
        read_rota_text(file_path),
        privileged=is_privileged_source(file_path.name, settings['privileged_marker']),
        min_real_shifts=settings['min_real_shifts'],
        non_shift_tokens=settings['non_shift_tokens'],
    )


def _print_candidates(candidates: dict):
    for description, group in candidates.items():
        print(f"\n{description} ({group.descriptor.display_text}):")
        for candidate in group.employees:
            print(f"  - {candidate.name}: {candidate.raw.strip()}")


def main():
    parser = argparse.ArgumentParser(description='Find shift swap partners in a team rota')
    parser.add_argument('--file', '-f', default='rota.csv',
                        help='Rota export (CSV or Excel workbook)')
    parser.add_argument('--name', '-n', help='Your name as it appears in the rota')
    parser.add_argument('--month', '-m', help='Month to use (defaults to November or the last month)')
    parser.add_argument('--settings', help='Parser settings JSON file')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log parsing details')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    subparsers.add_parser('months', help='List months in the rota')
    subparsers.add_parser('teams', help='List teams for the month')

    employees = subparsers.add_parser('employees', help='List employees')
    employees.add_argument('--team', '-t', default=ALL_EMPLOYEES, help='Team to list')

    subparsers.add_parser('schedule', help='Show your schedule for the month')

    swap = subparsers.add_parser('swap', help='Find swap partners for one day')
    swap.add_argument('day', type=int, help='Day of the month (1-31)')
    swap.add_argument('--team-only', action='store_true', help='Only look in your own team')
    swap.add_argument('--with', dest='partner', help='Build a swap request with this person')

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    file_path = Path(args.file)
    print(f"Loading rota from {file_path}...")
    try:
        settings = load_settings(args.settings)
        roster = load_rota(file_path, settings)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if roster.is_empty():
        print("Error: no rota data found in file", file=sys.stderr)
        sys.exit(1)

    month = args.month or default_month(roster)
    if month not in roster.months:
        print(f"Month {month} not found. Available: {', '.join(list_months(roster))}")
        sys.exit(1)

    if args.command == 'months':
        for m in list_months(roster):
            print(f"{m}: {len(roster.months[m].employees)} employees")
        return

    if args.command == 'teams':
        print(f"Teams for {month}:")
        for team in list_teams(roster, month):
            print(f"  {team}")
        return

    if args.command == 'employees':
        names = list_employees(roster, month, args.team)
        print(f"{args.team} ({month}):")
        for name in names:
            print(f"  {name}")
        if not names:
            print("  (none)")
        return

    if not args.name:
        print("Error: --name is required for this command", file=sys.stderr)
        sys.exit(1)

    me = get_employee(roster, month, args.name)
    if me is None:
        print(f"No rota entry for {args.name} in {month}")
        sys.exit(1)

    if args.command == 'schedule':
        df = roster_to_dataframe(roster, month)
        df = df[df['name'] == args.name]
        stats = compute_stats(roster, month, args.name)
        print(f"Schedule for {args.name} ({me.team}), {month}:")
        print("-" * 50)
        print(df[['day', 'description', 'display_text']].to_string(index=False))
        print(f"\nWork days: {stats['work_days']}  Days off: {stats['off_days']}")

    elif args.command == 'swap':
        day_index = args.day - 1
        if not 0 <= day_index < DAYS_PER_MONTH:
            print(f"Invalid day {args.day}. Use 1-{DAYS_PER_MONTH}.")
            sys.exit(1)

        my_shift = classify_shift(me.shifts[day_index])
        if not is_swappable(my_shift):
            print(f"{args.name} has no shift to swap on {format_date_label(month, day_index)} ({my_shift.description})")
            sys.exit(1)

        scope = me.team if args.team_only else ALL_EMPLOYEES
        if args.partner:
            proposal = build_swap_proposal(roster, month, args.name, day_index, args.partner, scope)
            if proposal is None:
                print(f"{args.partner} is not an eligible swap partner on {format_date_label(month, day_index)}")
                sys.exit(1)
            print("Shift Swap Request")
            print("=" * 50)
            print(f"Date: {proposal.date_label}")
            print(f"{proposal.requester}: {proposal.requester_shift.description} ({proposal.requester_shift.display_text})")
            print(f"{proposal.partner}: {proposal.partner_shift.description} ({proposal.partner_shift.display_text})")
            print()
            print(generate_swap_message(proposal))
            return

        print(f"Finding swap partners for your {my_shift.description} on {format_date_label(month, day_index)}...")
        candidates = find_swap_candidates(roster, month, args.name, day_index, scope)
        if not candidates:
            print("No swap candidates found.")
        else:
            total = sum(len(g.employees) for g in candidates.values())
            print(f"\nFound {total} potential swaps:")
            _print_candidates(candidates)


if __name__ == '__main__':
    main()
