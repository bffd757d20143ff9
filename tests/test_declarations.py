"""Tests for declaration matching and categorization."""

import pytest

from luadoc.parsers.declarations import categorize, extract_declared_name


class TestExtractDeclaredName:
    """Tests for the four declaration syntaxes."""

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("function greet(name, greeting)", "greet"),
            ("function Math.subtract(x, y)", "Math.subtract"),
            ("function a.b.c()", "a.b.c"),
            ("  function indented ()", "indented"),
            ("local function helper(x)", "helper"),
            ("function Player:jump(height)", "Player.jump"),
            ("obj:update(dt)", "obj.update"),
            ("function ui.Button:draw()", "ui.Button.draw"),
            ("M.foo = function(x)", "M.foo"),
            ("local trim = function (s)", "trim"),
            ("M.util.trim=function(s)", "M.util.trim"),
        ],
    )
    def test_declarations(self, line: str, expected: str) -> None:
        assert extract_declared_name(line) == expected

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "local x = 1",
            "return x + y",
            "end",
            "local handlers = {}",
            "print('function')",
        ],
    )
    def test_non_declarations(self, line: str) -> None:
        assert extract_declared_name(line) is None

    def test_named_pattern_has_priority_over_assignment(self) -> None:
        # Both the named and the assignment pattern match this line
        line = "M.wrap = function(f) return function inner(x) end end"
        assert extract_declared_name(line) == "inner"


class TestCategorize:
    """Tests for mapping declared names to categories."""

    def test_dotted_name(self) -> None:
        assert categorize("M.foo") == ("M", "foo")

    def test_splits_on_first_dot_only(self) -> None:
        assert categorize("M.util.trim") == ("M", "util.trim")

    def test_dotted_name_ignores_class_context(self) -> None:
        assert categorize("Math.subtract", "Vector") == ("Math", "subtract")

    def test_class_context(self) -> None:
        assert categorize("Add", "Math") == ("Math", "Add")

    def test_default_category(self) -> None:
        assert categorize("greet") == ("Global", "greet")

    def test_custom_default_category(self) -> None:
        assert categorize("greet", None, "Misc") == ("Misc", "greet")

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("function M.foo()", ("M", "foo")),
            ("local function helper()", ("Global", "helper")),
            ("obj:update(dt)", ("obj", "update")),
            ("M.bar = function()", ("M", "bar")),
        ],
    )
    def test_declaration_to_category(self, line: str, expected: tuple) -> None:
        assert categorize(extract_declared_name(line)) == expected
