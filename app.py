#!/usr/bin/env python3
"""
Rota Swap Finder - Web Interface

A Streamlit app for browsing a team rota and drafting shift swaps.

Run with: streamlit run app.py
"""

from datetime import datetime

import pandas as pd
import streamlit as st

from rota_swap import (
    parse_rota,
    workbook_to_csv,
    load_settings,
    is_privileged_source,
    list_months,
    list_teams,
    list_employees,
    get_employee,
    get_shifts,
    compute_stats,
    default_month,
    first_weekday_offset,
    format_date_label,
    find_swap_candidates,
    build_swap_proposal,
    generate_swap_message,
    is_swappable,
    NO_DATA,
)

# Colour themes keyed by shift category
COLORS = {
    'light': {
        'early': {'bg': '#ccfbf1', 'border': '#5eead4', 'text': '#0f766e'},
        'standard': {'bg': '#d1fae5', 'border': '#6ee7b7', 'text': '#065f46'},
        'am': {'bg': '#dbeafe', 'border': '#93c5fd', 'text': '#1e40af'},
        'pm': {'bg': '#f3e8ff', 'border': '#d8b4fe', 'text': '#6b21a8'},
        'holiday': {'bg': '#fef3c7', 'border': '#fcd34d', 'text': '#92400e'},
        'off': {'bg': '#ffffff', 'border': '#e5e7eb', 'text': '#9ca3af'},
        'no-data': {'bg': '#f3f4f6', 'border': '#d1d5db', 'text': '#6b7280'},
    },
    'dark': {
        'early': {'bg': '#042f2e', 'border': '#115e59', 'text': '#5eead4'},
        'standard': {'bg': '#022c22', 'border': '#065f46', 'text': '#6ee7b7'},
        'am': {'bg': '#172554', 'border': '#1e40af', 'text': '#93c5fd'},
        'pm': {'bg': '#2e1065', 'border': '#5b21b6', 'text': '#d8b4fe'},
        'holiday': {'bg': '#451a03', 'border': '#9a3412', 'text': '#fcd34d'},
        'off': {'bg': '#1e293b', 'border': '#334155', 'text': '#94a3b8'},
        'no-data': {'bg': '#0f172a', 'border': '#1e293b', 'text': '#475569'},
    },
}

WEEKDAYS = ['Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun']


@st.cache_data
def load_roster(file_name: str, content: bytes):
    """Parse and cache the uploaded rota."""
    settings = load_settings()
    if file_name.lower().endswith('.csv'):
        csv_text = content.decode('utf-8-sig', errors='replace')
    else:
        csv_text = workbook_to_csv(content)
    privileged = is_privileged_source(file_name, settings['privileged_marker'])
    roster = parse_rota(
        csv_text,
        privileged=privileged,
        min_real_shifts=settings['min_real_shifts'],
        non_shift_tokens=settings['non_shift_tokens'],
    )
    return roster, privileged


def get_style(category: str, dark: bool) -> dict:
    palette = COLORS['dark' if dark else 'light']
    return palette.get(category, palette[NO_DATA])


def render_day(day: int, shift, dark: bool) -> str:
    """HTML for one calendar cell."""
    style = get_style(shift.category, dark)
    return (
        f"<div style='background-color:{style['bg']};border:1px solid {style['border']};"
        f"color:{style['text']};border-radius:12px;padding:8px;min-height:90px;margin-bottom:8px'>"
        f"<div style='font-weight:700;opacity:0.7'>{day}</div>"
        f"<div style='text-align:center;font-weight:700;font-size:0.85rem'>{shift.description}</div>"
        f"<div style='text-align:center;font-size:0.75rem;opacity:0.8'>{shift.display_text}</div>"
        f"</div>"
    )


def render_calendar(shifts: list, month: str, year: int, dark: bool):
    """Monday-first month grid of classified shifts."""
    cells = [None] * first_weekday_offset(month, year) + list(enumerate(shifts))

    header_cols = st.columns(7)
    for col, weekday in zip(header_cols, WEEKDAYS):
        col.markdown(f"**{weekday}**")

    for week_start in range(0, len(cells), 7):
        cols = st.columns(7)
        for col, cell in zip(cols, cells[week_start:week_start + 7]):
            if cell is None:
                continue
            day_index, shift = cell
            col.markdown(render_day(day_index + 1, shift, dark), unsafe_allow_html=True)


def main():
    st.set_page_config(
        page_title="Rota Swap Finder",
        page_icon="🔄",
        layout="wide",
    )

    st.title("Service Desk Rota")

    # Sidebar - Rota upload
    st.sidebar.header("Rota")
    dark = st.sidebar.toggle("Dark mode", value=False)

    uploaded_file = st.sidebar.file_uploader(
        "Load File",
        type=['csv', 'xlsx', 'xlsm'],
        help="Upload the rota export (CSV or Excel)",
    )

    if uploaded_file is None:
        st.info("Please load a rota file and select an employee.")
        return

    roster, privileged = load_roster(uploaded_file.name, uploaded_file.getvalue())

    if roster.is_empty():
        st.sidebar.error("No rota data found in this file")
        st.info("Please load a rota file and select an employee.")
        return

    st.sidebar.success(f"Loaded: {uploaded_file.name}")
    if privileged:
        st.sidebar.caption("Pre-filtered export: team filter disabled")

    months = list_months(roster)
    initial = default_month(roster)

    col1, col2, col3 = st.columns(3)
    with col1:
        month = st.selectbox("Month", months, index=months.index(initial))
    with col2:
        team = st.selectbox(
            "Team",
            list_teams(roster, month),
            disabled=privileged,
            key=f"team_{month}",
        )
    with col3:
        employees = list_employees(roster, month, team)
        employee = st.selectbox("Employee", employees, key=f"employee_{month}_{team}")

    if not employee:
        st.info("No employees in this team.")
        return

    record = get_employee(roster, month, employee)
    shifts = get_shifts(roster, month, employee)
    stats = compute_stats(roster, month, employee)

    mcol1, mcol2, mcol3 = st.columns(3)
    mcol1.metric("Work Days", stats['work_days'])
    mcol2.metric("Days Off", stats['off_days'])
    mcol3.metric("Team", record.team)

    st.divider()
    render_calendar(shifts, month, datetime.now().year, dark)

    # Swap request
    st.divider()
    st.header("Shift Swap Request")

    swappable_days = [i for i, s in enumerate(shifts) if is_swappable(s)]
    if not swappable_days:
        st.warning("No swappable shifts this month.")
        return

    day_index = st.selectbox(
        "Day to swap",
        swappable_days,
        format_func=lambda i: f"{format_date_label(month, i)} - {shifts[i].description} ({shifts[i].display_text})",
        key="swap_day",
    )

    candidates = find_swap_candidates(roster, month, employee, day_index, scope=team)
    if not candidates:
        st.warning("No one is working a different shift that day.")
        return

    # Step 1: pick a shift type
    shift_type = st.radio(
        "Available shifts",
        list(candidates),
        format_func=lambda d: f"{d} ({candidates[d].descriptor.display_text}) - {len(candidates[d].employees)} available",
        key="swap_shift_type",
    )

    # Step 2: pick a colleague
    group = candidates[shift_type]
    display_df = pd.DataFrame(
        [{'Name': c.name, 'Rota Code': c.raw.strip(), 'Shift': c.descriptor.display_text} for c in group.employees]
    )
    st.dataframe(display_df, use_container_width=True, hide_index=True)

    partner = st.selectbox(
        "Swap with",
        [""] + [c.name for c in group.employees],
        key="swap_partner",
    )

    # Step 3: confirmation card
    if partner:
        proposal = build_swap_proposal(roster, month, employee, day_index, partner, scope=team)
        if proposal is None:
            st.error(f"{partner} is no longer an eligible swap partner")
            return

        st.subheader(f"Swap for {proposal.date_label}")
        left, right = st.columns(2)
        with left:
            st.markdown(f"**{proposal.requester}**")
            st.write(proposal.requester_shift.description)
            st.caption(proposal.requester_shift.display_text)
        with right:
            st.markdown(f"**{proposal.partner}**")
            st.write(proposal.partner_shift.description)
            st.caption(proposal.partner_shift.display_text)

        message = generate_swap_message(proposal)
        st.text_area(
            "Draft message (edit as needed):",
            value=message,
            height=120,
            key="swap_message",
        )
        st.download_button(
            "Download swap request",
            data=message,
            file_name=f"swap-{month}-{day_index + 1}.txt",
            mime="text/plain",
        )


if __name__ == "__main__":
    main()
