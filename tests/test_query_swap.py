"""Tests for roster queries and swap resolution."""

import pytest

from rota_swap import (
    ALL_EMPLOYEES,
    UNSWAPPABLE_CATEGORIES,
    build_swap_proposal,
    classify_shift,
    compute_stats,
    default_month,
    find_swap_candidates,
    first_weekday_offset,
    generate_swap_message,
    get_shifts,
    list_employees,
    list_months,
    list_teams,
    parse_rota,
    roster_to_dataframe,
    Roster,
)


@pytest.fixture
def roster(rota_csv):
    return parse_rota(rota_csv)


def test_list_months(roster):
    assert list_months(roster) == ['November', 'December']
    assert list_months(Roster()) == []


def test_list_teams_order(roster):
    assert list_teams(roster, 'November') == [
        'All Employees', 'Managers', '1st Line', '2nd Line', 'Overtime', 'Uncategorized',
    ]
    assert list_teams(roster, 'December') == ['All Employees', '3rd Line']
    assert list_teams(roster, 'March') == []


def test_list_employees(roster):
    assert list_employees(roster, 'November', '1st Line') == ['Alex Kim', 'Jane Doe', 'Pat Lee']
    everyone = list_employees(roster, 'November', ALL_EMPLOYEES)
    assert everyone == sorted(roster.months['November'].employees)
    assert list_employees(roster, 'November', 'Night Shift') == []
    assert list_employees(roster, 'March', ALL_EMPLOYEES) == []


def test_get_shifts(roster):
    shifts = get_shifts(roster, 'November', 'Jane Doe')
    assert len(shifts) == 31
    assert shifts[0].description == 'Standard Day'
    assert shifts[2].category == 'off'
    assert shifts[6].category == 'holiday'
    assert shifts[30].category == 'no-data'
    assert get_shifts(roster, 'November', 'Nobody') == []


def test_compute_stats(roster):
    assert compute_stats(roster, 'November', 'Jane Doe') == {'work_days': 5, 'off_days': 2}
    assert compute_stats(roster, 'November', 'Nobody') == {'work_days': 0, 'off_days': 0}


def test_compute_stats_bounds(roster):
    for month in list_months(roster):
        for name in list_employees(roster, month):
            stats = compute_stats(roster, month, name)
            assert stats['work_days'] >= 0
            assert stats['off_days'] >= 0
            assert stats['work_days'] + stats['off_days'] <= 31


def test_default_month(roster):
    assert default_month(roster) == 'November'
    december_only = parse_rota('December\n,Name,1\n1st Line,Jane Doe,9am,9am,9am,9am,9am')
    assert default_month(december_only) == 'December'
    assert default_month(Roster()) is None


def test_first_weekday_offset():
    # 1 November 2025 is a Saturday, 1 June 2025 a Sunday
    assert first_weekday_offset('November', 2025) == 5
    assert first_weekday_offset('June', 2025) == 6
    assert first_weekday_offset('September', 2025) == 0


def test_find_swap_candidates_all_employees(roster):
    candidates = find_swap_candidates(roster, 'November', 'Jane Doe', 0)
    assert list(candidates) == ['Standard Shift', 'Mid-Morning Shift', 'Closing Shift', 'Early Shift']
    assert [c.name for c in candidates['Standard Shift'].employees] == ['Alex Kim']
    assert [c.name for c in candidates['Early Shift'].employees] == ['Overtime 3']

    closing = candidates['Closing Shift']
    assert closing.descriptor == classify_shift('330pm')
    assert closing.employees[0].raw == '330pm'
    assert closing.employees[0].descriptor.category == 'pm'


def test_find_swap_candidates_own_team_only(roster):
    candidates = find_swap_candidates(roster, 'November', 'Jane Doe', 0, scope='1st Line')
    assert list(candidates) == ['Standard Shift', 'Mid-Morning Shift']


def test_find_swap_candidates_uses_source_team_not_scope_name(roster):
    # Any scope other than All Employees means the source employee's own team
    candidates = find_swap_candidates(roster, 'November', 'Sam Patel', 0, scope='Managers')
    assert list(candidates) == ['Standard Day']
    assert [c.name for c in candidates['Standard Day'].employees] == ['Priya Shah']


def test_find_swap_candidates_invariants(roster):
    for name in list_employees(roster, 'November'):
        for day_index in range(31):
            source = get_shifts(roster, 'November', name)[day_index]
            candidates = find_swap_candidates(roster, 'November', name, day_index)
            for description, group in candidates.items():
                assert description != source.description
                assert group.descriptor.description == description
                for candidate in group.employees:
                    assert candidate.name != name
                    assert candidate.descriptor.category not in UNSWAPPABLE_CATEGORIES


def test_find_swap_candidates_empty_cases(roster):
    # Jane is off on day 3
    assert find_swap_candidates(roster, 'November', 'Jane Doe', 2) == {}
    assert find_swap_candidates(roster, 'November', 'Nobody', 0) == {}
    assert find_swap_candidates(roster, 'November', 'Jane Doe', 31) == {}
    assert find_swap_candidates(roster, 'December', 'Jane Doe', 0) == {}


def test_build_swap_proposal(roster):
    proposal = build_swap_proposal(roster, 'November', 'Jane Doe', 0, 'Sam Patel')
    assert proposal.date_label == '1 November'
    assert proposal.requester == 'Jane Doe'
    assert proposal.requester_shift.description == 'Standard Day'
    assert proposal.partner == 'Sam Patel'
    assert proposal.partner_shift.display_text == '15:30 - 00:00'


def test_build_swap_proposal_rejects_ineligible_partner(roster):
    # Priya works the same shift, Chris is off
    assert build_swap_proposal(roster, 'November', 'Jane Doe', 0, 'Priya Shah') is None
    assert build_swap_proposal(roster, 'November', 'Jane Doe', 0, 'Chris Wong') is None
    assert build_swap_proposal(roster, 'November', 'Jane Doe', 0, 'Sam Patel', scope='1st Line') is None


def test_generate_swap_message(roster):
    proposal = build_swap_proposal(roster, 'November', 'Jane Doe', 0, 'Alex Kim')
    message = generate_swap_message(proposal)
    assert message.startswith('Hi Alex!')
    assert '1 November' in message
    assert 'Standard Shift' in message
    assert 'Standard Day' in message


def test_roster_to_dataframe(roster):
    df = roster_to_dataframe(roster, 'November')
    assert len(df) == 31 * len(roster.months['November'].employees)

    jane = df[df['name'] == 'Jane Doe'].set_index('day')
    assert jane.loc[1, 'category'] == 'standard'
    assert jane.loc[1, 'header'] == '1'
    assert jane.loc[3, 'description'] == 'Day Off'
    assert jane.loc[1, 'team'] == '1st Line'


def test_roster_to_dataframe_unknown_month(roster):
    df = roster_to_dataframe(roster, 'March')
    assert df.empty
    assert 'category' in df.columns
