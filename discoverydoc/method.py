"""Methods and resources of a Discovery document."""

from __future__ import annotations

from dataclasses import dataclass, field

from .auth import MediaUpload
from .parameter import Parameter, parse_parameters
from .reader import Context, MappingReader, parse_named, raw_map

_METHOD_KEYS = (
    "description",
    "etagRequired",
    "flatPath",
    "httpMethod",
    "id",
    "mediaUpload",
    "parameterOrder",
    "parameters",
    "path",
    "request",
    "response",
    "scopes",
    "streamingType",
    "supportsMediaDownload",
    "supportsMediaUpload",
    "supportsSubscription",
    "useMediaDownloadService",
)


@dataclass
class Request:
    """The schema of a method's request body."""

    ref: str = ""
    parameter_name: str = ""

    @classmethod
    def from_node(cls, node: object, context: Context | None) -> Request:
        """Build a request description from a parsed mapping."""
        reader = MappingReader(node, context)
        reader.check_keys(("$ref", "parameterName"))
        request = cls(
            ref=reader.string("$ref"),
            parameter_name=reader.string("parameterName"),
        )
        reader.finish()
        return request

    def to_raw_info(self) -> dict:
        """Export the request description, leaving out empty fields."""
        info: dict = {}
        if self.ref:
            info["$ref"] = self.ref
        if self.parameter_name:
            info["parameterName"] = self.parameter_name
        return info


@dataclass
class Response:
    """The schema of a method's response body."""

    ref: str = ""

    @classmethod
    def from_node(cls, node: object, context: Context | None) -> Response:
        """Build a response description from a parsed mapping."""
        reader = MappingReader(node, context)
        reader.check_keys(("$ref",))
        response = cls(ref=reader.string("$ref"))
        reader.finish()
        return response

    def to_raw_info(self) -> dict:
        """Export the response description, leaving out an empty reference."""
        return {"$ref": self.ref} if self.ref else {}


@dataclass
class Method:
    """One operation of an API."""

    id: str = ""
    path: str = ""
    http_method: str = ""
    description: str = ""
    parameters: dict[str, Parameter] | None = None
    parameter_order: list[str] = field(default_factory=list)
    request: Request | None = None
    response: Response | None = None
    scopes: list[str] = field(default_factory=list)
    supports_media_download: bool = False
    supports_media_upload: bool = False
    use_media_download_service: bool = False
    media_upload: MediaUpload | None = None
    supports_subscription: bool = False
    flat_path: str = ""
    etag_required: bool = False
    streaming_type: str = ""

    @classmethod
    def from_node(cls, node: object, context: Context | None) -> Method:
        """Build a method from a parsed mapping, raising on any problem."""
        reader = MappingReader(node, context)
        reader.check_keys(_METHOD_KEYS)
        method = cls(
            id=reader.string("id"),
            path=reader.string("path"),
            http_method=reader.string("httpMethod"),
            description=reader.string("description"),
            parameters=reader.child("parameters", parse_parameters),
            parameter_order=reader.strings("parameterOrder"),
            request=reader.child("request", Request.from_node),
            response=reader.child("response", Response.from_node),
            scopes=reader.strings("scopes"),
            supports_media_download=reader.boolean("supportsMediaDownload"),
            supports_media_upload=reader.boolean("supportsMediaUpload"),
            use_media_download_service=reader.boolean("useMediaDownloadService"),
            media_upload=reader.child("mediaUpload", MediaUpload.from_node),
            supports_subscription=reader.boolean("supportsSubscription"),
            flat_path=reader.string("flatPath"),
            etag_required=reader.boolean("etagRequired"),
            streaming_type=reader.string("streamingType"),
        )
        reader.finish()
        return method

    def to_raw_info(self) -> dict:
        """Export the method as plain values, leaving out empty fields."""
        info: dict = {}
        for key, value in (
            ("id", self.id),
            ("path", self.path),
            ("httpMethod", self.http_method),
            ("description", self.description),
        ):
            if value:
                info[key] = value
        if self.parameters is not None:
            info["parameters"] = raw_map(self.parameters)
        if self.parameter_order:
            info["parameterOrder"] = list(self.parameter_order)
        if self.request is not None:
            info["request"] = self.request.to_raw_info()
        if self.response is not None:
            info["response"] = self.response.to_raw_info()
        if self.scopes:
            info["scopes"] = list(self.scopes)
        if self.supports_media_download:
            info["supportsMediaDownload"] = True
        if self.supports_media_upload:
            info["supportsMediaUpload"] = True
        if self.use_media_download_service:
            info["useMediaDownloadService"] = True
        if self.media_upload is not None:
            info["mediaUpload"] = self.media_upload.to_raw_info()
        if self.supports_subscription:
            info["supportsSubscription"] = True
        if self.flat_path:
            info["flatPath"] = self.flat_path
        if self.etag_required:
            info["etagRequired"] = True
        if self.streaming_type:
            info["streamingType"] = self.streaming_type
        return info


@dataclass
class Resource:
    """A group of methods and nested resources."""

    methods: dict[str, Method] | None = None
    resources: dict[str, Resource] | None = None

    @classmethod
    def from_node(cls, node: object, context: Context | None) -> Resource:
        """Build a resource from a parsed mapping, raising on any problem."""
        reader = MappingReader(node, context)
        reader.check_keys(("methods", "resources"))
        resource = cls(
            methods=reader.child("methods", parse_methods),
            resources=reader.child("resources", parse_resources),
        )
        reader.finish()
        return resource

    def to_raw_info(self) -> dict:
        """Export the resource as plain values, leaving out absent parts."""
        info: dict = {}
        if self.methods is not None:
            info["methods"] = raw_map(self.methods)
        if self.resources is not None:
            info["resources"] = raw_map(self.resources)
        return info


def parse_methods(node: object, context: Context | None) -> dict[str, Method]:
    """Read a mapping of method names to methods, keeping their order."""
    return parse_named(node, context, Method.from_node)


def parse_resources(node: object, context: Context | None) -> dict[str, Resource]:
    """Read a mapping of resource names to resources, keeping their order."""
    return parse_named(node, context, Resource.from_node)