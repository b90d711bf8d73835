"""Helpers for building HTML snippets rendered through st.markdown."""
from html import escape
from textwrap import dedent


def html_block(template: str) -> str:
    """
    Flatten multi-line HTML so Streamlit renders it as markup.

    Lines indented by four or more spaces would otherwise become Markdown
    code blocks, so every line is left-stripped after dedenting.
    """
    lines = dedent(template).splitlines()
    return "\n".join(line.lstrip() for line in lines).strip()


def html_text(value: object) -> str:
    """Escape a value for use as HTML text content."""
    return escape(str(value))
