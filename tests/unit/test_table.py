"""Tests for styled table alignment."""

from rich.text import Text

from core.table import as_text, render_table, visible_width


class TestVisibleWidth:
    """Width measurement must ignore styling."""

    def test_styled_and_plain_text_measure_equal(self):
        """Identical characters should have identical width whatever the style."""
        assert visible_width(Text("major", style="red")) == visible_width(Text("major")) == 5
        assert visible_width(Text.assemble(("ma", "bold"), ("jor", "underline cyan"))) == 5

    def test_ansi_escapes_are_not_counted(self):
        """Escape sequences embedded in plain strings should not count."""
        assert visible_width("\x1b[31mmajor\x1b[39m") == 5
        assert visible_width("\x1b[4m\x1b[36mDependencies\x1b[39m\x1b[24m") == len("Dependencies")

    def test_wide_characters(self):
        """Double-width characters take two terminal cells."""
        assert visible_width("日本") == 4

    def test_as_text_keeps_text_instances(self):
        text = Text("lodash")
        assert as_text(text) is text
        assert as_text("lodash").plain == "lodash"


class TestRenderTable:
    """Test column alignment."""

    def test_columns_are_padded_to_widest_cell(self):
        """Cells should be left-aligned and joined by two spaces."""
        lines = render_table([
            [Text("express"), Text("4.18.0"), Text("5.0.1")],
            [Text("left-pad"), Text("1.0.0"), Text("1.0.1")],
        ])

        assert [line.plain for line in lines] == [
            "express   4.18.0  5.0.1",
            "left-pad  1.0.0   1.0.1",
        ]

    def test_styling_does_not_shift_columns(self):
        """A styled cell should align exactly like its plain twin."""
        styled = render_table([
            [Text("a", style="red underline"), Text("x")],
            [Text("bbb"), Text("y")],
        ])
        plain = render_table([[Text("a"), Text("x")], [Text("bbb"), Text("y")]])

        assert [line.plain for line in styled] == [line.plain for line in plain]
        assert styled[0].spans[0].style == "red underline"

    def test_trailing_padding_is_stripped(self):
        """Short rows and blank trailing cells leave no trailing whitespace."""
        lines = render_table([
            [Text("Dependencies ✔")],
            [Text("Dependencies"), Text("current"), Text("latest"), Text("")],
            [Text("left-pad"), Text("1.0.0"), Text("1.0.1"), Text("patch")],
        ])

        assert lines[0].plain == "Dependencies ✔"
        assert lines[1].plain == "Dependencies    current  latest"
        assert lines[2].plain == "left-pad        1.0.0    1.0.1   patch"

    def test_empty_table(self):
        assert render_table([]) == []
