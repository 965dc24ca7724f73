"""UI components for the Lodestone inspector."""

from lodestone.ui.components.aspect_table import aspect_rows, render_aspect_table
from lodestone.ui.components.sample_chart import render_sample_chart, sample_outcomes

__all__ = [
    "aspect_rows",
    "render_aspect_table",
    "render_sample_chart",
    "sample_outcomes",
]
