"""Tests for documentation data models and serialization."""

import dataclasses
import json

import pytest

from luadoc.parsers.structure import (
    DocBlockDraft,
    Documentation,
    DocumentedFunction,
    Parameter,
    ReturnValue,
)


def _sample_function() -> DocumentedFunction:
    return DocumentedFunction(
        name="subtract",
        description="Subtracts the second number from the first",
        params=(
            Parameter(name="x", type="number", description="The first number"),
            Parameter(name="y", type="number"),
        ),
        returns=(ReturnValue(type="number", description="x - y"),),
    )


class TestParameter:
    """Tests for the Parameter dataclass."""

    def test_defaults(self) -> None:
        param = Parameter(name="x", type="int")
        assert param.description == ""

    def test_immutable(self) -> None:
        param = Parameter(name="x", type="int")
        with pytest.raises(dataclasses.FrozenInstanceError):
            param.name = "y"  # type: ignore[misc]

    def test_to_dict_uses_type_key(self) -> None:
        assert Parameter("x", "int", "value").to_dict() == {
            "name": "x",
            "type": "int",
            "description": "value",
        }


class TestReturnValue:
    """Tests for the ReturnValue dataclass."""

    def test_to_dict(self) -> None:
        assert ReturnValue("boolean").to_dict() == {
            "type": "boolean",
            "description": "",
        }

    def test_from_dict_missing_description(self) -> None:
        assert ReturnValue.from_dict({"type": "nil"}) == ReturnValue("nil", "")


class TestDocumentedFunction:
    """Tests for the DocumentedFunction dataclass."""

    def test_to_dict_field_names(self) -> None:
        data = _sample_function().to_dict()
        assert set(data) == {"name", "description", "params", "returns"}
        assert data["params"][1] == {"name": "y", "type": "number", "description": ""}

    def test_roundtrip(self) -> None:
        original = _sample_function()
        assert DocumentedFunction.from_dict(original.to_dict()) == original


class TestDocBlockDraft:
    """Tests for converting a draft into a function."""

    def test_build(self) -> None:
        draft = DocBlockDraft(
            start_line=4,
            class_name="Math",
            description="Adds",
            params=(Parameter("x", "number"),),
        )
        func = draft.build("Add")
        assert func == DocumentedFunction(
            name="Add", description="Adds", params=(Parameter("x", "number"),)
        )


class TestDocumentation:
    """Tests for the category mapping."""

    def test_add_keeps_insertion_order(self) -> None:
        docs = Documentation()
        docs.add("Math", DocumentedFunction("b"))
        docs.add("Array", DocumentedFunction("max"))
        docs.add("Math", DocumentedFunction("a"))
        assert list(docs) == ["Math", "Array"]
        assert [f.name for f in docs["Math"]] == ["b", "a"]

    def test_function_count(self) -> None:
        docs = Documentation()
        docs.add("Math", DocumentedFunction("a"))
        docs.add("Global", DocumentedFunction("b"))
        assert docs.function_count == 2
        assert len(docs) == 2
        assert "Math" in docs

    def test_merge_appends(self) -> None:
        first = Documentation()
        first.add("Global", DocumentedFunction("greet"))
        second = Documentation()
        second.add("Math", DocumentedFunction("add"))
        second.add("Global", DocumentedFunction("wave"))
        first.merge(second)
        assert list(first) == ["Global", "Math"]
        assert [f.name for f in first["Global"]] == ["greet", "wave"]

    def test_json_roundtrip(self) -> None:
        docs = Documentation()
        docs.add("Math", _sample_function())
        docs.add("Global", DocumentedFunction("greet", "Says hi"))
        restored = Documentation.from_dict(json.loads(json.dumps(docs.to_dict())))
        assert restored == docs
        assert list(restored) == ["Math", "Global"]
