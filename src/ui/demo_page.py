"""Demonstration page rendering the domain model report."""
from typing import List

import streamlit as st

from src.services.demo_service import DemoLine, DemoSection, build_demo_report
from src.ui.html_utils import html_block, html_text

LINE_STYLES = {
    True: {"icon": "✅", "color": "#22d3ee"},
    False: {"icon": "❌", "color": "#f87171"},
}


def _render_demo_line(line: DemoLine) -> str:
    """Build the HTML for one report line."""
    style = LINE_STYLES[line.ok]
    return html_block(
        f"""
        <div class="demo-line" style="color: {style['color']};">
            <span class="demo-line__icon">{style['icon']}</span>
            <span class="demo-line__text">{html_text(line.text)}</span>
        </div>
        """
    )


def _section_card_html(section: DemoSection) -> str:
    """Build the HTML card for a report section."""
    lines_html = "\n".join(_render_demo_line(line) for line in section.lines)
    return html_block(
        f"""
        <div class="demo-card">
            <h3 class="demo-card__title">{html_text(section.title)}</h3>
            {lines_html}
        </div>
        """
    )


def _inject_demo_styles():
    """Inject demo page CSS."""
    st.markdown(
        html_block(
            """
            <style>
            .demo-card {
                background: rgba(15, 23, 42, 0.65);
                border-radius: 16px;
                padding: 18px 22px;
                margin-bottom: 18px;
            }
            .demo-card__title {
                font-size: 20px;
                margin-bottom: 10px;
            }
            .demo-line {
                font-family: monospace;
                margin: 4px 0;
            }
            .demo-line__icon {
                margin-right: 8px;
            }
            </style>
            """
        ),
        unsafe_allow_html=True,
    )


def render_demo_page():
    """Render every demonstration section."""
    _inject_demo_styles()

    st.title("Event Management Demo")

    sections: List[DemoSection] = build_demo_report()
    for section in sections:
        st.markdown(_section_card_html(section), unsafe_allow_html=True)
