"""Tests for the attribute sub-lexer."""

from __future__ import annotations

import pytest

from htmlreflow.errors import AttributeLexIncompleteError, StrictModeError
from htmlreflow.lexer import tokenize_attrs
from htmlreflow.tokens import AttributeToken, AttrQuote


class TestNameValueUnits:
    """name, name=value in each quoting style."""

    def test_quoting_styles(self) -> None:
        attrs = tokenize_attrs(""" a="1" b='2' c=3 d""")
        assert attrs == [
            AttributeToken(" ", "a", "1", AttrQuote.DOUBLE),
            AttributeToken(" ", "b", "2", AttrQuote.SINGLE),
            AttributeToken(" ", "c", "3", AttrQuote.UNQUOTED),
            AttributeToken(" ", "d"),
        ]

    def test_space_around_equals_dropped(self) -> None:
        (attr,) = tokenize_attrs(' class = "grid"')
        assert attr.render() == 'class="grid"'

    def test_butted_attributes(self) -> None:
        attrs = tokenize_attrs(' id="a"class=b')
        assert [a.render() for a in attrs] == ['id="a"', "class=b"]
        assert attrs[1].space == ""

    def test_empty_value_kept(self) -> None:
        (attr,) = tokenize_attrs(' value=""')
        assert attr.value == ""
        assert attr.render() == 'value=""'

    def test_value_with_newline(self) -> None:
        (attr,) = tokenize_attrs(' class="a\nb"')
        assert attr.value == "a\nb"
        assert not attr.has_newline

    def test_leading_newline(self) -> None:
        (attr,) = tokenize_attrs('\n  src="x.js"')
        assert attr.has_newline
        assert attr.space == "\n  "

    def test_equality_operators_in_value(self) -> None:
        (attr,) = tokenize_attrs(""" *ngIf="formType !== 'signup'\"""")
        assert attr.name == "*ngIf"
        assert attr.value == "formType !== 'signup'"

    def test_empty_span(self) -> None:
        assert tokenize_attrs("") == []


class TestOpaqueText:
    """Content that does not look like name[=value]."""

    def test_templating_directive(self) -> None:
        attrs = tokenize_attrs(" {% if a==2 %}")
        assert [a.render() for a in attrs] == ["{%", "if", "a", "==2", "%}"]
        assert attrs[3].is_text
        assert attrs[3].space == ""

    def test_quoted_text(self) -> None:
        attrs = tokenize_attrs(' (equals pageLink "/users")')
        assert attrs[2].text == '"/users"'
        assert attrs[2].space == " "

    def test_consecutive_quoted_text(self) -> None:
        attrs = tokenize_attrs(' " a "" b "')
        assert [a.text for a in attrs] == ['" a "', '" b "']
        assert attrs[1].space == ""

    def test_stray_slash(self) -> None:
        attrs = tokenize_attrs(" x/y /")
        assert [a.render() for a in attrs] == ["x/y", "/"]
        assert all(a.is_text for a in attrs)

    def test_leading_equals(self) -> None:
        (attr,) = tokenize_attrs(" =x")
        assert attr.is_text
        assert attr.render() == "=x"


class TestStrictAttributes:
    """Strict mode rejects opaque text."""

    @pytest.mark.parametrize("span", [" =x", " a==2", ' "/users"', " x/y"])
    def test_opaque_text_raises(self, span: str) -> None:
        with pytest.raises(StrictModeError):
            tokenize_attrs(span, strict=True)

    def test_plain_attributes_pass(self) -> None:
        attrs = tokenize_attrs(' id="a" hidden data-x=1', strict=True)
        assert len(attrs) == 3


class TestIncompleteSpans:
    """Spans the sub-lexer cannot consume."""

    def test_trailing_whitespace(self) -> None:
        with pytest.raises(AttributeLexIncompleteError) as exc_info:
            tokenize_attrs(" a ")
        assert exc_info.value.offset == 2
        assert exc_info.value.span == " a "

    def test_bare_gt(self) -> None:
        with pytest.raises(AttributeLexIncompleteError, match="Failed to parse attributes"):
            tokenize_attrs(">")
