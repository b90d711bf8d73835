"""
Event Management Demo
Streamlit front end for the Speaker, Venue and Event models.
"""
import logging

import streamlit as st

from src.ui.demo_page import render_demo_page
from src.utils.logging_config import configure_logging

logger = logging.getLogger(__name__)


st.set_page_config(
    page_title="Event Management",
    page_icon="📅",
    layout="wide",
    initial_sidebar_state="collapsed"
)


def apply_custom_css():
    """Apply global CSS."""
    st.markdown("""
        <style>
        .stApp {
            background: linear-gradient(135deg, #0f0c29 0%, #1a1a2e 50%, #16213e 100%);
        }

        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}
        </style>
    """, unsafe_allow_html=True)


def main():
    """Application entry point."""
    configure_logging()
    try:
        apply_custom_css()
        render_demo_page()
    except Exception as e:
        logger.exception("Unhandled exception while rendering demo page")
        st.error("Something went wrong while building the demo")

        with st.expander("🔍 Error details"):
            st.code(str(e))


if __name__ == "__main__":
    main()
