"""Strict mode: lenient recovery paths become errors.

Inputs that only format because of the single-character fallback or opaque
attribute text must raise; everything else must format exactly as in
lenient mode.
"""

from __future__ import annotations

import pytest

from htmlreflow import StrictModeError, format

LENIENT_ONLY = [
    "<div {% if a==2 %}hidden{% endif %}>",
    '<a {{#if (equals pageLink "/users") }} class="is-active" {{/if}}>Users</a>',
    '<a {{#if (equals value " do not show ") }} hidden {{/if}}>Users</a>',
    '<a {{#if (equals value " do not "" show user ") }} hidden {{/if}}>Users</a>',
    "< this is a very long sentence to test the regex",
    "<circle x/y / >",
    "<circle / / >",
    '<div =x {{#if 1}}class="active"{{/if}} =>\nstuff\n</div>',
]

WELL_FORMED = [
    "<body>   pasted  from   the internet   </body>",
    "<html>\n  <head>\n\n    <script></script></head></html>",
    '<div  id = "container"  class = "grid" ></div>',
    '<input type="text" id="name" name="name" class="form-input" placeholder="Name" required>',
    "<pre>this is an incredibly long sentence that never seems to end</pre> wrap",
    '<script>html = "</div>  </div>"</script><div>  </div>',
    "<!--< div>\n</div>  -->\n<div  ></div>",
    ":\"  leave  m\\\"e  alone\"  '  and  m\\'e  too':",
    "Collector's  \n<div>\nstuff\n</div>'",
    "<pre>do not remove me",
    "<circle / >\n<circle/ >",
    "<ng-container *ngIf=\"formType === 'signup'\">",
]


class TestStrictMode:
    """Strict mode flags lenient recovery."""

    @pytest.mark.parametrize("source", LENIENT_ONLY)
    def test_lenient_only_inputs_raise(self, source: str) -> None:
        format(source)
        with pytest.raises(StrictModeError):
            format(source, strict=True)

    @pytest.mark.parametrize("source", WELL_FORMED)
    def test_well_formed_inputs_match_lenient(self, source: str) -> None:
        assert format(source, strict=True) == format(source)

    def test_error_reports_location(self) -> None:
        with pytest.raises(StrictModeError) as exc_info:
            format("<p>\n  a < b</p>", strict=True)
        assert str(exc_info.value.location) == "2:5"

    def test_attribute_error_reports_text(self) -> None:
        with pytest.raises(StrictModeError, match="'=x'"):
            format("<div =x>", strict=True)
