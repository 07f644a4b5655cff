"""Streamlit page showing the distance to the reference point."""

from __future__ import annotations

import asyncio

import streamlit as st

from crowflies.config import load_settings
from crowflies.formatting import Unit, format_coordinate, format_summary
from crowflies.locators import GeoIPLocationSource
from crowflies.references import get_reference
from crowflies.session import LocationSession, LocationStatus

settings = load_settings()
reference = get_reference()

# --- Page config ---
st.set_page_config(
    page_title=f"Distance to {reference.name}",
    page_icon="🏈",
    layout="centered",
)

# --- Session state ---
if "session" not in st.session_state:
    st.session_state.session = LocationSession(
        reference=reference,
        unit=settings.unit,
        timeout=settings.locator.overall_timeout(),
    )
session: LocationSession = st.session_state.session

# --- Header ---
st.title(f"Distance to {reference.name}")
st.caption(f"As-the-crow-flies distance to {reference.name} ({reference.place}).")

# --- Controls ---
col_locate, col_clear, col_unit = st.columns([2, 1, 2])

with col_unit:
    selected_unit = st.selectbox(
        "Unit",
        options=[Unit.IMPERIAL, Unit.METRIC],
        format_func=lambda u: "Miles" if u is Unit.IMPERIAL else "Kilometers",
        index=0 if session.unit is Unit.IMPERIAL else 1,
    )
    session.unit = selected_unit

with col_locate:
    if st.button("Use my device location"):
        with st.spinner("Locating…"):
            asyncio.run(session.locate(GeoIPLocationSource(settings.locator)))

with col_clear:
    if st.button("Clear"):
        session.clear()
        st.session_state.manual_lat = ""
        st.session_state.manual_lon = ""

with st.form("manual"):
    st.markdown("Manual coordinates (lat, lon)")
    col_lat, col_lon = st.columns(2)
    lat_text = col_lat.text_input("Latitude", placeholder="e.g. 37.7749", key="manual_lat")
    lon_text = col_lon.text_input("Longitude", placeholder="e.g. -122.4194", key="manual_lon")
    if st.form_submit_button("Use"):
        session.use_manual(lat_text, lon_text)
    st.caption('Not sure of your coordinates? Search online for "my lat lon" and paste them here.')

st.markdown("---")

# --- Result card ---
col_ref, col_you = st.columns(2)
with col_ref:
    st.caption(reference.name)
    st.markdown(f"**{format_coordinate(reference.coordinate)}**")

with col_you:
    if session.status is LocationStatus.IDLE:
        st.caption("No location selected")
    elif session.status is LocationStatus.LOCATING:
        st.warning("Locating…")
    elif session.status is LocationStatus.ERROR and session.error:
        st.error(f"Error: {session.error}")
    if session.position is not None:
        st.caption("You")
        st.markdown(format_coordinate(session.position))

km = session.distance_km()
if km is not None:
    st.metric("Distance (great-circle)", session.display_distance())
    st.caption(format_summary(km, session.bearing_deg()))
else:
    st.info("Distance will appear here after you supply a location.")

st.caption(
    "Straight-line distance “as the crow flies”. For driving distances or routes, "
    "use a routing service instead."
)
