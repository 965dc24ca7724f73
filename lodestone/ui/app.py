"""Lodestone — Streamlit Inspector Entrypoint."""

from __future__ import annotations

import streamlit as st

from lodestone.config import configure_logging, get_settings
from lodestone.engine.bonus import BonusCurve
from lodestone.engine.dice import DiceSpec

_NOTATION_HELP = """\
**Notation:** `[base+][N]dS[Mbonus]`

| Example | Meaning |
|---|---|
| `2d6` | two six-sided dice |
| `5+1d4` | 5 plus one four-sided die |
| `d8M3` | one eight-sided die plus a level-scaled bonus up to 3 |
| `10` | always 10 |
"""


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Lodestone",
        page_icon="🎲",
        layout="centered",
    )

    settings = get_settings()
    configure_logging(settings)
    curve = BonusCurve.from_settings(settings)

    from lodestone.ui.components import render_aspect_table, render_sample_chart

    st.title("Lodestone")
    st.caption("What-if analysis for dice specifications")

    text = st.text_input("Dice", value="2d6")
    level = st.slider("Level", min_value=0, max_value=curve.max_depth, value=0)

    try:
        spec = DiceSpec.parse(text)
    except ValueError as exc:
        st.error(str(exc))
        return

    render_aspect_table(spec, level, curve)

    if spec.has_variance():
        st.divider()
        seed = st.number_input(
            "Seed",
            min_value=0,
            max_value=0xFFFFFFFF,
            value=settings.seed if settings.seed is not None else 12345,
        )
        count = st.slider("Rolls", min_value=100, max_value=10000, value=1000, step=100)
        render_sample_chart(spec, level, int(seed), count, curve)

    with st.sidebar:
        st.markdown(_NOTATION_HELP)


if __name__ == "__main__":
    main()
