"""Aspect table component — analytic values of a DiceSpec at one level."""

from __future__ import annotations

import streamlit as st

from lodestone.engine.base import Aspect
from lodestone.engine.bonus import DEFAULT_CURVE, BonusCurve
from lodestone.engine.dice import DiceSpec

_DISPLAY_ASPECTS = (
    Aspect.MINIMISE,
    Aspect.AVERAGE,
    Aspect.MAXIMISE,
    Aspect.EXTREMIFY,
)


def aspect_rows(
    spec: DiceSpec, level: int, curve: BonusCurve = DEFAULT_CURVE
) -> list[tuple[str, int]]:
    """(label, value) for every deterministic aspect. Consumes no randomness."""
    return [
        (aspect.name.title(), spec.evaluate(level, aspect, curve=curve))
        for aspect in _DISPLAY_ASPECTS
    ]


def render_aspect_table(
    spec: DiceSpec, level: int, curve: BonusCurve = DEFAULT_CURVE
) -> None:
    """Render the aspect table, or a single number when the spec cannot vary.

    Args:
        spec: Specification to analyse.
        level: Level the bonus is evaluated at.
        curve: Bonus curve shape.
    """
    if not spec.has_variance():
        st.metric(label=str(spec), value=spec.evaluate(level, Aspect.MINIMISE, curve=curve))
        return

    html = ['<table class="aspect-table">']
    for label, value in aspect_rows(spec, level, curve):
        html.append(f"<tr><th>{label}</th><td>{value}</td></tr>")
    html.append("</table>")
    st.markdown("".join(html), unsafe_allow_html=True)
