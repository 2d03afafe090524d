"""Parameters of Discovery methods and documents."""

from __future__ import annotations

from dataclasses import dataclass, field

from .reader import Annotations, Context, MappingReader, parse_named, raw_map
from .schema import Schema, parse_schemas

_ALLOWED_KEYS = (
    "$ref",
    "additionalProperties",
    "annotations",
    "default",
    "description",
    "enum",
    "enumDescriptions",
    "format",
    "id",
    "items",
    "location",
    "maximum",
    "minimum",
    "pattern",
    "properties",
    "repeated",
    "required",
    "type",
)


@dataclass
class Parameter:
    """A parameter accepted by a method or shared by a whole API."""

    id: str = ""
    type: str = ""
    ref: str = ""
    description: str = ""
    default: str = ""
    required: bool = False
    format: str = ""
    pattern: str = ""
    minimum: str = ""
    maximum: str = ""
    enum: list[str] = field(default_factory=list)
    enum_descriptions: list[str] = field(default_factory=list)
    repeated: bool = False
    location: str = ""
    properties: dict[str, Schema] | None = None
    additional_properties: Schema | None = None
    items: Schema | None = None
    annotations: Annotations | None = None

    @classmethod
    def from_node(cls, node: object, context: Context | None) -> Parameter:
        """Build a parameter from a parsed mapping, raising on any problem."""
        reader = MappingReader(node, context)
        reader.check_keys(_ALLOWED_KEYS)
        parameter = cls(
            id=reader.string("id"),
            type=reader.string("type"),
            ref=reader.string("$ref"),
            description=reader.string("description"),
            default=reader.string("default"),
            required=reader.boolean("required"),
            format=reader.string("format"),
            pattern=reader.string("pattern"),
            minimum=reader.string("minimum"),
            maximum=reader.string("maximum"),
            enum=reader.strings("enum"),
            enum_descriptions=reader.strings("enumDescriptions"),
            repeated=reader.boolean("repeated"),
            location=reader.string("location"),
            properties=reader.child("properties", parse_schemas),
            additional_properties=reader.child(
                "additionalProperties", Schema.from_node
            ),
            items=reader.child("items", Schema.from_node),
            annotations=reader.child("annotations", Annotations.from_node),
        )
        reader.finish()
        return parameter

    def to_raw_info(self) -> dict:
        """Export the parameter as plain values, leaving out empty fields."""
        info: dict = {}
        for key, value in (
            ("id", self.id),
            ("type", self.type),
            ("$ref", self.ref),
            ("description", self.description),
            ("default", self.default),
            ("required", self.required),
            ("format", self.format),
            ("pattern", self.pattern),
            ("minimum", self.minimum),
            ("maximum", self.maximum),
        ):
            if value:
                info[key] = value
        if self.enum:
            info["enum"] = list(self.enum)
        if self.enum_descriptions:
            info["enumDescriptions"] = list(self.enum_descriptions)
        if self.repeated:
            info["repeated"] = True
        if self.location:
            info["location"] = self.location
        if self.properties is not None:
            info["properties"] = raw_map(self.properties)
        if self.additional_properties is not None:
            info["additionalProperties"] = self.additional_properties.to_raw_info()
        if self.items is not None:
            info["items"] = self.items.to_raw_info()
        if self.annotations is not None:
            info["annotations"] = self.annotations.to_raw_info()
        return info


def parse_parameters(node: object, context: Context | None) -> dict[str, Parameter]:
    """Read a mapping of parameter names to parameters, keeping their order."""
    return parse_named(node, context, Parameter.from_node)