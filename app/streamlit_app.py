"""
Credit Revenue Calculator — Dashboard
=====================================

Upload weekly credit prices, set each entity's share, pick a horizon:
  1. Historical price chart      (from the uploaded CSV)
  2. Projected revenue by entity (latest price × credits/month × 12 × years × share)
  3. Results table               (2 decimals, currency prefix)

Every widget edit reruns the script, so the projection is always current.

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import altair as alt
import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import CalculatorConfig
from core.schema import PRICE_COLUMN, WEEK_OF_COLUMN

from data_prep.loader import load_price_csv
from data_prep.observations import build_observations
from data_prep.validators import validate_price_history

from engine.state import (
    CalculatorState,
    default_state,
    with_credits_per_month,
    with_entity_name,
    with_entity_percentage,
    with_observations,
    with_years,
)
from engine.schedule import monthly_schedule

from reporting.series import price_series, revenue_bars
from reporting.tables import results_dataframe, projection_summary
from reporting.checks import percentage_warning

from app.boundary import FALLBACK_MESSAGE, render_with_boundary

logger = logging.getLogger(__name__)

CONFIG = CalculatorConfig()

STATE_KEY = "calculator_state"
VALIDATION_KEY = "price_validation"


# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------
def _state() -> CalculatorState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = default_state(CONFIG)
    return st.session_state[STATE_KEY]


def _set_state(state: CalculatorState) -> None:
    st.session_state[STATE_KEY] = state


def _on_name_change(index: int) -> None:
    _set_state(with_entity_name(_state(), index, st.session_state[f"entity_name_{index}"]))


def _on_percentage_change(index: int) -> None:
    _set_state(with_entity_percentage(_state(), index, st.session_state[f"entity_pct_{index}"]))


def _on_credits_change() -> None:
    _set_state(with_credits_per_month(_state(), st.session_state["credits_per_month"]))


def _on_years_change() -> None:
    _set_state(with_years(_state(), st.session_state["years"], choices=CONFIG.horizon_choices))


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _plot_price_history(state: CalculatorState, height=300):
    series = price_series(state.observations)
    if not series:
        st.info("No data yet. Upload a price history CSV to see the chart.")
        return
    d = pd.DataFrame(series, columns=["Week", "Price"])
    chart = (
        alt.Chart(d).mark_line(point=True)
        .encode(
            x=alt.X("Week:O", sort=None, title="Week Of", axis=alt.Axis(labelOverlap=True)),
            y=alt.Y("Price:Q", title="Price ($)", axis=alt.Axis(format=",.2f")),
            tooltip=["Week", alt.Tooltip("Price:Q", format=",.2f")],
        )
        .properties(title="Historical Credit Price", height=height)
    )
    st.altair_chart(chart, use_container_width=True)


def _plot_revenue_bars(results, height=300):
    bars = revenue_bars(results)
    if not bars:
        st.info("Projected revenue appears once price data is loaded.")
        return
    d = pd.DataFrame(bars, columns=["Entity", "Revenue"])
    chart = (
        alt.Chart(d).mark_bar()
        .encode(
            x=alt.X("Entity:N", sort=None, title="Entity"),
            y=alt.Y("Revenue:Q", title="Projected Revenue ($)", axis=alt.Axis(format=",.0f")),
            tooltip=["Entity", alt.Tooltip("Revenue:Q", format=",.2f")],
        )
        .properties(title="Projected Revenue by Entity", height=height)
    )
    st.altair_chart(chart, use_container_width=True)


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------
def _render_upload(state: CalculatorState) -> CalculatorState:
    st.header("Price History")
    st.caption(f"CSV with columns `{WEEK_OF_COLUMN}` and `{PRICE_COLUMN}`.")
    with st.form("upload_form"):
        uploaded = st.file_uploader("Upload CSV", type=["csv"])
        submitted = st.form_submit_button("Load data")

    if submitted:
        if uploaded is None:
            st.info("Select a file first.")
        else:
            raw = load_price_csv(uploaded.getvalue())
            observations = build_observations(raw)
            state = with_observations(state, observations)
            _set_state(state)
            st.session_state[VALIDATION_KEY] = validate_price_history(observations, raw)
            logger.info("Loaded %s: %d observations", uploaded.name, len(observations))

    vr = st.session_state.get(VALIDATION_KEY)
    if vr is not None:
        if not vr.is_valid:
            st.error(vr.summary())
        elif vr.warnings:
            st.warning(vr.summary())
    return state


def _render_entities(state: CalculatorState) -> None:
    st.header("Participating Entities")
    for i, entity in enumerate(state.entities):
        c1, c2 = st.columns([3, 1])
        c1.text_input(
            f"Name #{i + 1}",
            value=entity.name,
            key=f"entity_name_{i}",
            on_change=_on_name_change,
            args=(i,),
        )
        c2.number_input(
            "Percentage (%)",
            value=float(entity.percentage),
            step=1.0,
            key=f"entity_pct_{i}",
            on_change=_on_percentage_change,
            args=(i,),
        )

    warning = percentage_warning(state.entities)
    if warning:
        st.warning(warning)


def _render_projection_inputs(state: CalculatorState) -> None:
    st.header("Projection")
    c1, c2 = st.columns(2)
    c1.number_input(
        "Credits generated per month",
        value=float(state.credits_per_month),
        step=100.0,
        key="credits_per_month",
        on_change=_on_credits_change,
    )
    choices = list(CONFIG.horizon_choices)
    c2.selectbox(
        "Projection horizon (years)",
        options=choices,
        index=choices.index(state.years),
        key="years",
        on_change=_on_years_change,
    )


def _render_results(state: CalculatorState) -> None:
    st.header("Results")
    projection = state.projection()
    results = [] if projection is None else list(projection.results)

    left, right = st.columns(2)
    with left:
        _plot_price_history(state)
    with right:
        _plot_revenue_bars(results)

    if projection is None:
        return

    st.dataframe(
        results_dataframe(results, currency=CONFIG.currency, decimals=CONFIG.decimals),
        use_container_width=True,
        hide_index=True,
    )

    as_of = state.observations[-1].date
    with st.expander("Projection breakdown", expanded=False):
        st.dataframe(
            projection_summary(projection, as_of_date=as_of, currency=CONFIG.currency),
            use_container_width=True,
            hide_index=True,
        )

    with st.expander("Monthly schedule", expanded=False):
        schedule = monthly_schedule(
            state.observations, state.entities, state.credits_per_month, state.years
        )
        schedule = schedule.round({"revenue": CONFIG.decimals, "cumulative_revenue": CONFIG.decimals})
        st.dataframe(schedule, use_container_width=True, hide_index=True)


def render() -> None:
    st.title("Credit Revenue Calculator")
    st.caption("Project revenue from the latest credit price and split it across entities.")

    state = _render_upload(_state())
    _render_entities(state)
    _render_projection_inputs(state)
    _render_results(_state())


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    st.set_page_config(page_title="Credit Revenue Calculator", layout="wide")

    # Single slot for the whole page so the fallback can replace it.
    page = st.empty()

    def _render_page() -> None:
        with page.container():
            render()

    def _render_fallback(exc: Exception) -> None:
        page.empty()
        st.error(FALLBACK_MESSAGE)

    render_with_boundary(_render_page, _render_fallback)


if __name__ == "__main__":
    main()
