"""Shared rota fixtures."""

import pytest
from openpyxl import Workbook

DAYS = 31

HEADER = ',Name,' + ','.join(str(d) for d in range(1, DAYS + 1))


def make_row(team: str, name: str, shifts: list) -> str:
    """One rota data line, padded to a full month of day cells."""
    cells = list(shifts) + [''] * (DAYS - len(shifts))
    return ','.join([team, name] + cells)


NOVEMBER_ROWS = [
    make_row('1st Line', 'Jane Doe', ['9am', '8am', 'off', '6am', '330pm', '9am', 'bh']),
    make_row('', 'Alex Kim', ['8am', '8am', '8am', '8am', '8am', 'off', 'off']),
    make_row('Total', '', ['3', '4', '2', '1', '5']),
    make_row('', 'Pat Lee', ['830am'] * 5),
    make_row('2nd Line', 'Sam Patel', ['330pm', '9am', '9am', '9am', '9am']),
    make_row('', 'Priya Shah', ['9am'] * 5),
    make_row('Team Leader', 'Chris Wong', ['off', '9am', '9am', '9am', '9am', '9am']),
    make_row('anon', 'Robin Hood', ['', '2pm', '2pm', '2pm', '2pm', '2pm']),
    make_row('', 'Replacement 3', ['6am'] * 5),
    make_row('', 'Ghost Rider', ['9am', '9am', 'off', 'sick']),
]


def build_rota(*blocks) -> str:
    """Join (banner, rows) blocks into one CSV export."""
    lines = ['Service Desk Rota November']
    for banner, rows in blocks:
        lines.append(banner)
        lines.append(HEADER)
        lines.extend(rows)
        lines.append('')
    return '\r\n'.join(lines)


@pytest.fixture
def rota_csv() -> str:
    return build_rota(
        ('November 2025,,,', NOVEMBER_ROWS),
        ('December 2025', [make_row('3rd Line', 'Jane Doe', ['930am'] * 5)]),
    )


@pytest.fixture
def workbook_path(tmp_path):
    wb = Workbook()
    november = wb.active
    november.title = 'Nov'
    november.append(['November 2025'])
    november.append([None, 'Name'] + list(range(1, 31)))
    november.append(['1st Line', 'Jane Doe', '9am', '9am', 'off', '6am', '8am', '330pm'])
    november.append([None, 'Alex Kim', '8am', '8am', '8am', '8am', '8am'])

    december = wb.create_sheet('Dec')
    december.append(['December 2025'])
    december.append([None, 'Name'] + list(range(1, 32)))
    december.append(['2nd Line', 'Sam Patel', '230pm', '230pm', '230pm', '230pm', '230pm'])

    path = tmp_path / 'rota.xlsx'
    wb.save(path)
    return path
