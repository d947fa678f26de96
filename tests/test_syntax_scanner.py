"""Tests for syntax/scanner.py: placeholder and tag scanning."""

from __future__ import annotations

import pytest

from i18nlexengine.syntax.ast import Key
from i18nlexengine.syntax.scanner import (
    ComponentMatch,
    VariableMatch,
    find_component,
    find_variable,
)


class TestFindVariable:
    """First {{ ident }} placeholder."""

    def test_splits_around_placeholder(self) -> None:
        assert find_variable("before {{ var }} after") == VariableMatch(
            before="before ", key=Key("var_var"), after=" after"
        )

    def test_only_first_placeholder(self) -> None:
        match = find_variable("{{a}} {{b}}")
        assert match is not None
        assert match.key == Key("var_a")
        assert match.after == " {{b}}"

    @pytest.mark.parametrize(
        "text",
        ["no braces", "{{ open only", "close only }}", "}} {{", "{{ two words }}", "{{ a-b }}"],
    )
    def test_no_match(self, text: str) -> None:
        assert find_variable(text) is None

    def test_empty_name_is_a_placeholder(self) -> None:
        assert find_variable("a {{ }} b") == VariableMatch(before="a ", key=Key("var_"), after=" b")

    def test_unicode_name(self) -> None:
        match = find_variable("{{ café }}")
        assert match is not None
        assert match.key == Key("var_café")

    def test_closing_searched_after_opening(self) -> None:
        """A '}}' before the first '{{' is ordinary text."""
        match = find_variable("}} {{x}}")
        assert match == VariableMatch(before="}} ", key=Key("var_x"), after="")


class TestFindComponent:
    """First opening tag with a matching closer."""

    def test_simple_component(self) -> None:
        assert find_component("a <b>bold</b> c") == ComponentMatch(
            before="a ", key=Key("comp_b"), inner="bold", after=" c"
        )

    def test_skips_unclosed_candidate(self) -> None:
        match = find_component("<p>test<h3>title</h3>rest")
        assert match == ComponentMatch(
            before="<p>test", key=Key("comp_h3"), inner="title", after="rest"
        )

    def test_skips_invalid_name(self) -> None:
        match = find_component("<not valid><ok>x</ok>")
        assert match is not None
        assert match.before == "<not valid>"
        assert match.key == Key("comp_ok")

    def test_same_name_depth_tracking(self) -> None:
        match = find_component("<b>1<b>2</b>3</b>4")
        assert match == ComponentMatch(before="", key=Key("comp_b"), inner="1<b>2</b>3", after="4")

    def test_first_depth_zero_closer(self) -> None:
        match = find_component("<b>1</b>2</b>")
        assert match is not None
        assert match.inner == "1"
        assert match.after == "2</b>"

    def test_closer_with_inner_whitespace(self) -> None:
        match = find_component("<b>x</  b  >y")
        assert match == ComponentMatch(before="", key=Key("comp_b"), inner="x", after="y")

    def test_other_names_are_inert(self) -> None:
        match = find_component("<a>x</b></a>")
        assert match is not None
        assert match.inner == "x</b>"

    @pytest.mark.parametrize(
        "text",
        ["plain", "<b>unclosed", "</b>", "<a b>x</a b>", "a < b", "<b>x</b", "<b/>"],
    )
    def test_no_match(self, text: str) -> None:
        assert find_component(text) is None

    def test_empty_tag_name(self) -> None:
        assert find_component("<>x</>") == ComponentMatch(
            before="", key=Key("comp_"), inner="x", after=""
        )

    def test_unclosed_same_name_outer(self) -> None:
        """An outer <b> without its own closer is skipped; the inner pair matches."""
        match = find_component("<b>x<b>y</b>")
        assert match == ComponentMatch(before="<b>x", key=Key("comp_b"), inner="y", after="")

    def test_rejected_candidate_is_not_rescanned(self) -> None:
        match = find_component("<<b>x</b>")
        assert match is None
