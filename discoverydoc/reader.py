"""Shared machinery for reading Discovery documents from parsed YAML/JSON values.

Documents are handled as the plain Python values produced by a YAML or JSON
loader: dicts for mappings, lists for sequences and scalars for the rest.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any as _AnyType, Callable, Iterable, Mapping, TypeVar

from yaml import YAMLError, safe_dump, safe_load

T = TypeVar("T")

_KIND_NAMES = (
    (bool, "boolean"),
    (int, "integer"),
    (float, "number"),
    (str, "string"),
    (list, "sequence"),
    (dict, "mapping"),
)


@dataclass(frozen=True)
class Context:
    """The location of a value inside a document, used in error messages."""

    name: str
    parent: Context | None = None

    def child(self, name: str) -> Context:
        """Return the context of a value nested under this one."""
        return Context(name, self)

    def path(self) -> str:
        """Return the dotted path from the document root to this value."""
        if self.parent is None:
            return self.name
        return f"{self.parent.path()}.{self.name}"


class CompilerError(Exception):
    """A problem found at one place in a document."""

    def __init__(self, context: Context | None, message: str) -> None:
        self.context = context
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.context is None:
            return self.message
        return f"{self.context.path()} {self.message}"


class ErrorGroup(Exception):
    """Several problems found while reading a document."""

    def __init__(self, errors: Iterable[Exception]) -> None:
        self.errors = tuple(errors)
        super().__init__(str(self))

    def __str__(self) -> str:
        return "\n".join(str(error) for error in self.errors)

    @staticmethod
    def raise_if_any(errors: Iterable[Exception]) -> None:
        """Raise nothing for no errors, the error itself for one, a group for more."""
        flat: list[Exception] = []
        for error in errors:
            if isinstance(error, ErrorGroup):
                flat.extend(error.errors)
            else:
                flat.append(error)
        if not flat:
            return
        if len(flat) == 1:
            raise flat[0]
        raise ErrorGroup(flat)


def plural_properties(count: int) -> str:
    """Return the word used for a number of properties in messages."""
    return "property" if count == 1 else "properties"


def display(value: object) -> str:
    """Describe a value for an error message."""
    if value is None:
        return "null (null)"
    for kind, name in _KIND_NAMES:
        if isinstance(value, kind):
            if isinstance(value, bool):
                text = "true" if value else "false"
            else:
                text = str(value)
            return f"{text} ({name})"
    return f"{value!r} ({type(value).__name__})"


def is_mapping(node: object) -> bool:
    """Tell whether a parsed value is a mapping."""
    return isinstance(node, dict)


def _unexpected(node: object) -> str:
    return f"has unexpected value: {node!r} ({type(node).__name__})"


def _scalar_text(value: object) -> str | None:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    if value is None:
        return ""
    return None


class MappingReader:
    """Reads typed fields from one mapping, collecting every problem found."""

    def __init__(self, node: object, context: Context | None) -> None:
        self.node = node
        self.context = context
        self.errors: list[Exception] = []
        self._mapping: dict | None = node if isinstance(node, dict) else None
        if self._mapping is None:
            self._error(_unexpected(node))

    def _error(self, message: str) -> None:
        self.errors.append(CompilerError(self.context, message))

    def _value(self, key: str) -> object:
        if self._mapping is None:
            return None
        return self._mapping.get(key)

    def check_keys(self, allowed: Iterable[str], required: Iterable[str] = ()) -> None:
        """Record missing required keys and keys that are not allowed."""
        if self._mapping is None:
            return
        missing = [key for key in required if key not in self._mapping]
        if missing:
            self._error(
                f"is missing required {plural_properties(len(missing))}: "
                + ", ".join(missing)
            )
        permitted = set(allowed)
        invalid = [str(key) for key in self._mapping if key not in permitted]
        if invalid:
            self._error(
                f"has invalid {plural_properties(len(invalid))}: " + ", ".join(invalid)
            )

    def string(self, key: str) -> str:
        """Read a string field; absent or wrongly typed fields give ''."""
        value = self._value(key)
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        self._error(f"has unexpected value for {key}: {display(value)}")
        return ""

    def boolean(self, key: str) -> bool:
        """Read a boolean field; absent or wrongly typed fields give False."""
        value = self._value(key)
        if value is None:
            return False
        if isinstance(value, bool):
            return value
        self._error(f"has unexpected value for {key}: {display(value)}")
        return False

    def strings(self, key: str) -> list[str]:
        """Read a sequence of scalars as strings."""
        value = self._value(key)
        if value is None:
            return []
        if not isinstance(value, list):
            self._error(f"has unexpected value for {key}: {display(value)}")
            return []
        texts = (_scalar_text(item) for item in value)
        return [text for text in texts if text is not None]

    def child(self, key: str, factory: Callable[[object, Context], T]) -> T | None:
        """Build a nested object with ``factory``, recording its errors."""
        value = self._value(key)
        if value is None:
            return None
        context = self.context.child(key) if self.context else Context(key)
        try:
            return factory(value, context)
        except (CompilerError, ErrorGroup) as error:
            self.errors.append(error)
            return None

    def finish(self) -> None:
        """Raise the problems collected so far, if there are any."""
        ErrorGroup.raise_if_any(self.errors)


def parse_named(
    node: object, context: Context | None, factory: Callable[[object, Context], T]
) -> dict[str, T]:
    """Read a mapping of names to objects built by ``factory``, keeping order."""
    if not isinstance(node, dict):
        raise CompilerError(context, _unexpected(node))
    result: dict[str, T] = {}
    errors: list[Exception] = []
    for name, value in node.items():
        if not isinstance(name, str):
            continue
        child_context = context.child(name) if context else Context(name)
        try:
            result[name] = factory(value, child_context)
        except (CompilerError, ErrorGroup) as error:
            errors.append(error)
    ErrorGroup.raise_if_any(errors)
    return result


def raw_map(items: Mapping[str, _AnyType]) -> dict[str, _AnyType]:
    """Export a mapping of names to objects as raw values, keeping order."""
    return {name: value.to_raw_info() for name, value in items.items()}


def parse_string_array(node: object) -> list[str]:
    """Read a sequence as strings; items that are not strings become ''."""
    if not isinstance(node, list):
        return []
    return [item if isinstance(item, str) else "" for item in node]


@dataclass
class Annotations:
    """Annotations attached to a schema or parameter."""

    required: list[str] = field(default_factory=list)

    @classmethod
    def from_node(cls, node: object, context: Context | None) -> Annotations:
        reader = MappingReader(node, context)
        reader.check_keys(("required",))
        annotations = cls(required=reader.strings("required"))
        reader.finish()
        return annotations

    def to_raw_info(self) -> dict:
        return {"required": list(self.required)} if self.required else {}


@dataclass
class Any:
    """An arbitrary value, kept as its YAML text."""

    yaml: str = ""

    @classmethod
    def from_node(cls, node: object, context: Context | None) -> Any:
        return cls(yaml=safe_dump(node, sort_keys=False, allow_unicode=True))

    def to_raw_info(self) -> object:
        try:
            return safe_load(self.yaml)
        except YAMLError:
            return None