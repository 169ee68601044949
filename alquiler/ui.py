"""
Streamlit views for the rental site.

Run with `streamlit run app.py`. The availability sheet is polled by one
process-wide SheetPoller; each session keeps its own AppState.
"""

import logging
from pathlib import Path

import streamlit as st

from . import config
from .availability import all_days_available, build_availability, calc_total, format_price
from .booking_calendar import MAX_YEAR, MIN_YEAR, DayState, month_cells, price_label
from .catalog import ACTIVITIES, APARTMENTS, apartment_by_key
from .i18n import WEEKDAY_NAMES, month_name, texts
from .inquiry import (booking_link, contact_mail_link, contact_mail_subject_link,
                      contact_whatsapp_link)
from .poller import SheetPoller
from .state import AppState

logger = logging.getLogger(__name__)

DAY_MARKERS = {
    DayState.SELECTED: "🟦",
    DayState.IN_RANGE: "🔹",
    DayState.AVAILABLE: "🟢",
    DayState.UNAVAILABLE: "🔴",
}

REFRESH_INTERVAL = max(config.MIN_REFRESH_SECONDS, config.REFRESH_SECONDS)


def configure_logging(level: str = config.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


# =============================================================================
# SHARED RESOURCES
# =============================================================================

@st.cache_resource(show_spinner=False)
def get_poller() -> SheetPoller:
    """One poller per server process; all sessions read its snapshots."""
    poller = SheetPoller(config.SHEET_CSV_URL, config.REFRESH_SECONDS)
    poller.start()
    return poller


def get_state() -> AppState:
    if "app" not in st.session_state:
        st.session_state.app = AppState()
    return st.session_state.app


def show_image(path: str, caption: str = "") -> None:
    if Path(path).exists():
        st.image(path, caption=caption or None)
    else:
        st.caption(f"🖼️ {caption or Path(path).name}")


# =============================================================================
# HEADER & NAVIGATION
# =============================================================================

def render_header(state: AppState) -> None:
    t = texts(state.lang)
    title_col, nav_col = st.columns([2, 3])
    with title_col:
        st.title(t["appTitle"])
    with nav_col:
        cols = st.columns(5)
        for col, tab in zip(cols, ("home", "activities", "contact", "howto")):
            col.button(
                t[tab],
                key=f"nav-{tab}",
                on_click=state.go,
                args=(tab,),
                type="primary" if state.tab == tab else "secondary",
                use_container_width=True,
            )
        cols[4].button(t["selectLang"], key="lang-toggle", on_click=state.toggle_lang,
                       use_container_width=True)


# =============================================================================
# HOME
# =============================================================================

def render_feed_status(state: AppState, poller: SheetPoller) -> None:
    t = texts(state.lang)
    snapshot = poller.snapshot()
    if snapshot.loading or (snapshot.fetched_at is None and snapshot.error is None):
        st.caption(t["loading"])
    if snapshot.error:
        st.warning(f"{t['staleData']}: {snapshot.error}")
        st.button(f"🔄 {t['refresh']}", key="refresh-feed", on_click=poller.refresh_now)


feed_status_fragment = st.fragment(render_feed_status, run_every=REFRESH_INTERVAL)


def render_home(state: AppState, poller: SheetPoller) -> None:
    t = texts(state.lang)
    zoomed = False
    cols = st.columns(len(APARTMENTS))
    for col, unit in zip(cols, APARTMENTS):
        with col:
            images = unit.image_paths()
            idx = state.current_photo(unit.key)
            if images:
                show_image(images[idx % len(images)], unit.title(state.lang))

            prev_col, zoom_col, next_col = st.columns(3)
            prev_col.button("‹", key=f"prev-{unit.id}", on_click=state.prev_photo, args=(unit.key,))
            if zoom_col.button("🔍", key=f"zoom-{unit.id}", disabled=not images):
                state.open_lightbox(images, idx)
                zoomed = True
            next_col.button("›", key=f"next-{unit.id}", on_click=state.next_photo, args=(unit.key,))

            st.subheader(unit.title(state.lang))
            st.write(unit.summary(state.lang))
            st.caption(f"{unit.photo_count} {t['photos']}")
            st.button(
                t["checkAvailability"],
                key=f"open-{unit.id}",
                on_click=state.open_unit,
                args=(unit.key,),
                type="primary",
                use_container_width=True,
            )

    if zoomed:
        show_lightbox(state)
    feed_status_fragment(state, poller)


@st.dialog("📷", width="large")
def show_lightbox(state: AppState) -> None:
    box = state.lightbox
    if box is None or box.current is None:
        return
    show_image(box.current)
    prev_col, count_col, next_col = st.columns(3)
    prev_col.button("‹", key="lightbox-prev", on_click=state.step_lightbox, args=(-1,))
    count_col.caption(f"{box.index + 1} / {len(box.images)}")
    next_col.button("›", key="lightbox-next", on_click=state.step_lightbox, args=(1,))


# =============================================================================
# INFORMATIONAL TABS
# =============================================================================

def render_activities(state: AppState) -> None:
    t = texts(state.lang)
    st.header(t["activities"])
    cols = st.columns(len(ACTIVITIES))
    for col, activity in zip(cols, ACTIVITIES):
        with col:
            st.subheader(activity.title(state.lang))
            st.write(activity.description(state.lang))


def render_contact(state: AppState) -> None:
    t = texts(state.lang)
    st.header(t["contact"])
    st.write(t["contactIntro"])

    email = st.text_input(t["email"], key="contact_email")
    phone = st.text_input(t["phone"], key="contact_phone")
    message = st.text_area(t["message"], key="contact_message", height=120)

    send_col, whatsapp_col, email_col = st.columns(3)
    send_col.link_button(t["send"], contact_mail_link(email, phone, message, state.lang),
                         use_container_width=True)
    whatsapp_col.link_button(t["sendWhatsApp"],
                             contact_whatsapp_link(email, phone, message, state.lang),
                             use_container_width=True)
    email_col.link_button(t["email"], contact_mail_subject_link(state.lang),
                          use_container_width=True)


def render_howto(state: AppState) -> None:
    t = texts(state.lang)
    st.header(t["howto"])
    info_col, map_col = st.columns(2)
    with info_col:
        st.subheader(t["byCar"])
        st.write(t["byCarText"])
        st.subheader(t["publicTransport"])
        st.write(t["publicTransportText"])
        st.subheader(t["tips"])
        st.markdown(f"- {t['tipShoes']}\n- {t['tipGps']}")
    with map_col:
        st.subheader(t["map"])
        st.link_button(t["openMaps"], config.MAPS_URL)


# =============================================================================
# UNIT DETAIL
# =============================================================================

def render_month(state: AppState, year: int, month: int, unit_days: dict) -> None:
    """Render one month as a grid of clickable day buttons."""
    st.markdown(f"**{month_name(state.lang, month).capitalize()} {year}**")

    header_cols = st.columns(7)
    for i, day_name in enumerate(WEEKDAY_NAMES[state.lang]):
        header_cols[i].caption(day_name)

    for week in month_cells(year, month, unit_days, state.selection):
        cols = st.columns(7)
        for i, cell in enumerate(week):
            if cell is None:
                cols[i].write("")
                continue
            cols[i].button(
                f"{DAY_MARKERS[cell.state]} {cell.day.day}  \n{price_label(cell.entry)}",
                key=f"day-{state.selected_unit}-{cell.iso}",
                on_click=state.click_day,
                args=(cell.iso,),
                type="primary" if cell.state is DayState.SELECTED else "secondary",
                use_container_width=True,
            )


def _sync_calendar_month(state: AppState) -> None:
    state.set_calendar_month(st.session_state.calendar_month)


def _sync_calendar_year(state: AppState) -> None:
    state.set_calendar_year(int(st.session_state.calendar_year))


def _reset_booking(state: AppState) -> None:
    state.reset_booking()
    st.session_state.guest_name = state.guest_name
    st.session_state.guests = state.guests


def render_calendar_controls(state: AppState) -> None:
    t = texts(state.lang)
    prev_col, next_col, month_col, year_col = st.columns([1, 1, 3, 2])
    prev_col.button("‹", key="cal-prev", on_click=state.shift_calendar, args=(-1,))
    next_col.button("›", key="cal-next", on_click=state.shift_calendar, args=(1,))

    # Mirror the calendar view into the widgets before they are drawn
    st.session_state.calendar_month = state.calendar.month
    st.session_state.calendar_year = state.calendar.year
    month_col.selectbox(
        t["month"],
        options=list(range(1, 13)),
        format_func=lambda m: month_name(state.lang, m),
        key="calendar_month",
        on_change=_sync_calendar_month,
        args=(state,),
        label_visibility="collapsed",
    )
    year_col.number_input(
        t["year"],
        min_value=MIN_YEAR,
        max_value=MAX_YEAR,
        step=1,
        key="calendar_year",
        on_change=_sync_calendar_year,
        args=(state,),
        label_visibility="collapsed",
    )


def render_booking_panel(state: AppState, poller: SheetPoller) -> None:
    """Calendar plus booking form; re-rendered whenever the feed refreshes."""
    t = texts(state.lang)
    unit_key = state.selected_unit
    index = build_availability(APARTMENTS, poller.snapshot().records)
    unit_days = index.get(unit_key, {})

    st.subheader(t["calendar"])
    render_feed_status(state, poller)
    render_calendar_controls(state)
    for year, month in state.calendar.months(2):
        render_month(state, year, month, unit_days)

    st.divider()
    start, end = state.selection.start, state.selection.end
    st.markdown(f"**{t['startDate']} / {t['endDate']}:** {start or '—'} {f'→ {end}' if end else ''}")
    st.caption(t["selectDates"])

    if "guest_name" not in st.session_state:
        st.session_state.guest_name = state.guest_name
    if "guests" not in st.session_state:
        st.session_state.guests = state.guests
    st.text_input(t["name"], key="guest_name", placeholder=t["namePlaceholder"])
    st.number_input(t["guests"], min_value=1, step=1, key="guests")
    state.guest_name = st.session_state.guest_name
    state.guests = int(st.session_state.guests)

    total = calc_total(index, unit_key, start, end)
    st.markdown(f"**{t['priceTotal']}:** {format_price(total) if total is not None else '—'}")

    bookable = bool(start and end) and all_days_available(index, unit_key, start, end)
    url = (booking_link(unit_key, start, end, state.guest_name, state.guests, total, state.lang)
           if start and end else config.WHATSAPP_BASE)
    send_col, reset_col = st.columns(2)
    send_col.link_button(t["sendWhatsApp"], url, type="primary", disabled=not bookable,
                         use_container_width=True)
    reset_col.button(t["reset"], key="reset-booking", on_click=_reset_booking, args=(state,),
                     use_container_width=True)


booking_panel_fragment = st.fragment(render_booking_panel, run_every=REFRESH_INTERVAL)


def render_apartment(state: AppState, poller: SheetPoller) -> None:
    t = texts(state.lang)
    unit = apartment_by_key(state.selected_unit)
    if unit is None:
        state.close_unit()
        st.rerun()

    st.button(f"‹ {t['back']}", key="back", on_click=state.close_unit)
    st.header(unit.title(state.lang))
    st.caption(unit.summary(state.lang))
    st.subheader(t["description"])
    st.write(unit.description(state.lang))

    booking_panel_fragment(state, poller)


# =============================================================================
# MAIN
# =============================================================================

VIEWS = {
    "activities": render_activities,
    "contact": render_contact,
    "howto": render_howto,
}


def main():
    configure_logging()
    st.set_page_config(
        page_title="Alquiler de Apartamentos",
        page_icon="🏠",
        layout="wide",
    )

    state = get_state()
    poller = get_poller()

    render_header(state)
    st.divider()

    if state.tab == "apartment" and state.selected_unit:
        render_apartment(state, poller)
    elif state.tab in VIEWS:
        VIEWS[state.tab](state)
    else:
        render_home(state, poller)
