"""Tests for demo page UI components."""
from src.services.demo_service import DemoLine, DemoSection
from src.ui.demo_page import _render_demo_line, _section_card_html


class TestDemoLineRendering:
    """Tests for single line rendering."""

    def test_success_line_uses_check_icon(self):
        html = _render_demo_line(DemoLine(ok=True, text="Venue [Id: 1, Name: Hall, Capacity: 10]"))

        assert '✅' in html
        assert 'color: #22d3ee' in html
        assert 'Venue [Id: 1, Name: Hall, Capacity: 10]' in html

    def test_failure_line_uses_cross_icon(self):
        html = _render_demo_line(DemoLine(ok=False, text="Blank name"))

        assert '❌' in html
        assert 'color: #f87171' in html

    def test_text_is_escaped(self):
        html = _render_demo_line(DemoLine(ok=True, text="<b>'quoted'</b>"))

        assert '<b>' not in html
        assert '&lt;b&gt;' in html

    def test_no_indented_lines(self):
        """Indented lines would be rendered as Markdown code blocks."""
        html = _render_demo_line(DemoLine(ok=True, text="text"))

        assert all(not line.startswith(" ") for line in html.splitlines())


class TestSectionCardRendering:
    """Tests for section card rendering."""

    def test_card_contains_title_and_lines(self):
        section = DemoSection("Venues")
        section.success("first")
        section.failure("second")

        html = _section_card_html(section)

        assert 'class="demo-card"' in html
        assert 'Venues' in html
        assert html.count('class="demo-line"') == 2
