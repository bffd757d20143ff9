"""Data models for extracted API documentation.

Defines dataclasses for parameters, return values, documented functions
and the category-keyed documentation mapping. These models form the
shared vocabulary between the scanner and the output writers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


@dataclass(frozen=True)
class Parameter:
    """Represents a documented function parameter.

    Attributes:
        name: Parameter name.
        type: Free-form type string, not validated.
        description: Parameter description, possibly empty.
    """

    name: str
    type: str
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary.

        Returns:
            Dictionary representation of this parameter.
        """
        return {
            "name": self.name,
            "type": self.type,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Parameter:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with parameter fields.

        Returns:
            A new Parameter instance.
        """
        return cls(
            name=data["name"],
            type=data["type"],
            description=data.get("description", ""),
        )


@dataclass(frozen=True)
class ReturnValue:
    """Represents a documented return value.

    Attributes:
        type: Free-form type string.
        description: Return value description, possibly empty.
    """

    type: str
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary."""
        return {"type": self.type, "description": self.description}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReturnValue:
        """Deserialize from a dictionary."""
        return cls(type=data["type"], description=data.get("description", ""))


@dataclass(frozen=True)
class DocumentedFunction:
    """Represents one documented declaration.

    Attributes:
        name: Short function name within its category.
        description: Merged description text.
        params: Parameters in authored order.
        returns: Return values in authored order.
    """

    name: str
    description: str = ""
    params: tuple[Parameter, ...] = ()
    returns: tuple[ReturnValue, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary.

        Returns:
            Dictionary using the interchange field names.
        """
        return {
            "name": self.name,
            "description": self.description,
            "params": [p.to_dict() for p in self.params],
            "returns": [r.to_dict() for r in self.returns],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DocumentedFunction:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with function fields.

        Returns:
            A new DocumentedFunction instance.
        """
        return cls(
            name=data["name"],
            description=data.get("description", ""),
            params=tuple(Parameter.from_dict(p) for p in data.get("params", [])),
            returns=tuple(ReturnValue.from_dict(r) for r in data.get("returns", [])),
        )


@dataclass(frozen=True)
class DocBlockDraft:
    """Accumulated state of one annotation block while it is being read.

    Every update returns a new draft; see ``AnnotationTagParser.apply``.

    Attributes:
        start_line: Zero-based index of the first line of the block.
        class_name: Class context from the last ``class`` tag, if any.
        description: Description built so far.
        params: Parameters collected so far.
        returns: Return values collected so far.
    """

    start_line: int = 0
    class_name: Optional[str] = None
    description: str = ""
    params: tuple[Parameter, ...] = ()
    returns: tuple[ReturnValue, ...] = ()

    def build(self, name: str) -> DocumentedFunction:
        """Convert the draft into a finished function entry.

        Args:
            name: Short name of the located declaration.

        Returns:
            The DocumentedFunction carrying this draft's content.
        """
        return DocumentedFunction(
            name=name,
            description=self.description,
            params=self.params,
            returns=self.returns,
        )


@dataclass
class Documentation:
    """Mapping of category name to documented functions.

    Category order and entry order both follow discovery order.

    Attributes:
        categories: Category name to ordered list of functions.
    """

    categories: dict[str, list[DocumentedFunction]] = field(default_factory=dict)

    def add(self, category: str, function: DocumentedFunction) -> None:
        """Append a function to a category, creating the category if needed."""
        self.categories.setdefault(category, []).append(function)

    def merge(self, other: Documentation) -> None:
        """Append every entry of another mapping, keeping its order.

        Args:
            other: Documentation discovered from another source.
        """
        for category, functions in other.categories.items():
            for function in functions:
                self.add(category, function)

    @property
    def function_count(self) -> int:
        """Total number of documented functions across categories."""
        return sum(len(functions) for functions in self.categories.values())

    def __iter__(self) -> Iterator[str]:
        return iter(self.categories)

    def __len__(self) -> int:
        return len(self.categories)

    def __getitem__(self, category: str) -> list[DocumentedFunction]:
        return self.categories[category]

    def __contains__(self, category: object) -> bool:
        return category in self.categories

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the interchange dictionary.

        Returns:
            Category name mapped to lists of function dictionaries.
        """
        return {
            category: [f.to_dict() for f in functions]
            for category, functions in self.categories.items()
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Documentation:
        """Deserialize from the interchange dictionary.

        Args:
            data: Category name mapped to lists of function dictionaries.

        Returns:
            A new Documentation instance.
        """
        return cls(
            categories={
                category: [DocumentedFunction.from_dict(f) for f in functions]
                for category, functions in data.items()
            }
        )
