"""Tests for the public htmlreflow API surface."""

import htmlreflow
from htmlreflow import FormatConfig, Printer, format


class TestPublicAPI:
    """Everything in __all__ is importable from the package root."""

    def test_all_exports_resolve(self) -> None:
        for name in htmlreflow.__all__:
            assert hasattr(htmlreflow, name), name

    def test_version(self) -> None:
        assert isinstance(htmlreflow.__version__, str)
        assert htmlreflow.__version__.count(".") == 2


class TestFormatFunction:
    """format() defaults and positional arguments."""

    def test_defaults(self) -> None:
        assert format("<body>\n<main   class='x'></main></body>") == (
            "<body>\n  <main class='x'></main></body>"
        )

    def test_positional_arguments(self) -> None:
        assert format("<p>\nx</p>", "    ", 80, None) == "<p>\n    x</p>"

    def test_equivalent_to_printer(self) -> None:
        source = '<ul>\n<li  id="a">one   two</li>\n</ul>\n'
        assert format(source, width=20) == Printer(FormatConfig(width=20)).render(source)

    def test_printer_reusable(self) -> None:
        printer = Printer(FormatConfig())
        assert printer.render("<b>  x</b>") == "<b> x</b>"
        assert printer.render("<b>  x</b>") == "<b> x</b>"

    def test_does_not_mutate_input(self) -> None:
        source = "<p>  a  </p>"
        format(source)
        assert source == "<p>  a  </p>"
