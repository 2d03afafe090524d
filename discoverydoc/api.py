"""The top-level description of an API in a Discovery document."""

from __future__ import annotations

from dataclasses import dataclass, field

from .auth import Auth, Icons
from .method import Method, Resource, parse_methods, parse_resources
from .parameter import Parameter, parse_parameters
from .reader import Context, MappingReader, raw_map
from .schema import Schema, parse_schemas

_REQUIRED_KEYS = ("discoveryVersion", "kind")

_ALLOWED_KEYS = (
    "auth",
    "basePath",
    "baseUrl",
    "batchPath",
    "canonicalName",
    "description",
    "discoveryVersion",
    "documentationLink",
    "etag",
    "features",
    "fullyEncodeReservedExpansion",
    "icons",
    "id",
    "kind",
    "labels",
    "methods",
    "mtlsRootUrl",
    "name",
    "ownerDomain",
    "ownerName",
    "packagePath",
    "parameters",
    "protocol",
    "resources",
    "revision",
    "rootUrl",
    "schemas",
    "servicePath",
    "title",
    "version",
    "version_module",
)


@dataclass
class Document:
    """A whole Discovery document describing one API."""

    kind: str = ""
    discovery_version: str = ""
    id: str = ""
    name: str = ""
    version: str = ""
    revision: str = ""
    title: str = ""
    description: str = ""
    icons: Icons | None = None
    documentation_link: str = ""
    labels: list[str] = field(default_factory=list)
    protocol: str = ""
    base_url: str = ""
    base_path: str = ""
    root_url: str = ""
    service_path: str = ""
    batch_path: str = ""
    parameters: dict[str, Parameter] | None = None
    auth: Auth | None = None
    features: list[str] = field(default_factory=list)
    schemas: dict[str, Schema] | None = None
    methods: dict[str, Method] | None = None
    resources: dict[str, Resource] | None = None
    etag: str = ""
    owner_domain: str = ""
    owner_name: str = ""
    version_module: bool = False
    canonical_name: str = ""
    fully_encode_reserved_expansion: bool = False
    package_path: str = ""
    mtls_root_url: str = ""

    @classmethod
    def from_node(cls, node: object, context: Context | None) -> Document:
        """Build a document from a parsed mapping, raising on any problem."""
        reader = MappingReader(node, context)
        reader.check_keys(_ALLOWED_KEYS, required=_REQUIRED_KEYS)
        document = cls(
            kind=reader.string("kind"),
            discovery_version=reader.string("discoveryVersion"),
            id=reader.string("id"),
            name=reader.string("name"),
            version=reader.string("version"),
            revision=reader.string("revision"),
            title=reader.string("title"),
            description=reader.string("description"),
            icons=reader.child("icons", Icons.from_node),
            documentation_link=reader.string("documentationLink"),
            labels=reader.strings("labels"),
            protocol=reader.string("protocol"),
            base_url=reader.string("baseUrl"),
            base_path=reader.string("basePath"),
            root_url=reader.string("rootUrl"),
            service_path=reader.string("servicePath"),
            batch_path=reader.string("batchPath"),
            parameters=reader.child("parameters", parse_parameters),
            auth=reader.child("auth", Auth.from_node),
            features=reader.strings("features"),
            schemas=reader.child("schemas", parse_schemas),
            methods=reader.child("methods", parse_methods),
            resources=reader.child("resources", parse_resources),
            etag=reader.string("etag"),
            owner_domain=reader.string("ownerDomain"),
            owner_name=reader.string("ownerName"),
            version_module=reader.boolean("version_module"),
            canonical_name=reader.string("canonicalName"),
            fully_encode_reserved_expansion=reader.boolean(
                "fullyEncodeReservedExpansion"
            ),
            package_path=reader.string("packagePath"),
            mtls_root_url=reader.string("mtlsRootUrl"),
        )
        reader.finish()
        return document

    def to_raw_info(self) -> dict:
        """Export the document as plain values, leaving out empty fields.

        The required ``kind`` and ``discoveryVersion`` fields are always present.
        """
        info: dict = {"kind": self.kind, "discoveryVersion": self.discovery_version}
        for key, value in (
            ("id", self.id),
            ("name", self.name),
            ("version", self.version),
            ("revision", self.revision),
            ("title", self.title),
            ("description", self.description),
        ):
            if value:
                info[key] = value
        if self.icons is not None:
            info["icons"] = self.icons.to_raw_info()
        if self.documentation_link:
            info["documentationLink"] = self.documentation_link
        if self.labels:
            info["labels"] = list(self.labels)
        for key, value in (
            ("protocol", self.protocol),
            ("baseUrl", self.base_url),
            ("basePath", self.base_path),
            ("rootUrl", self.root_url),
            ("servicePath", self.service_path),
            ("batchPath", self.batch_path),
        ):
            if value:
                info[key] = value
        if self.parameters is not None:
            info["parameters"] = raw_map(self.parameters)
        if self.auth is not None:
            info["auth"] = self.auth.to_raw_info()
        if self.features:
            info["features"] = list(self.features)
        if self.schemas is not None:
            info["schemas"] = raw_map(self.schemas)
        if self.methods is not None:
            info["methods"] = raw_map(self.methods)
        if self.resources is not None:
            info["resources"] = raw_map(self.resources)
        for key, value in (
            ("etag", self.etag),
            ("ownerDomain", self.owner_domain),
            ("ownerName", self.owner_name),
        ):
            if value:
                info[key] = value
        if self.version_module:
            info["version_module"] = True
        if self.canonical_name:
            info["canonicalName"] = self.canonical_name
        if self.fully_encode_reserved_expansion:
            info["fullyEncodeReservedExpansion"] = True
        if self.package_path:
            info["packagePath"] = self.package_path
        if self.mtls_root_url:
            info["mtlsRootUrl"] = self.mtls_root_url
        return info