"""Icons, authentication and media upload descriptions of a Discovery document."""

from __future__ import annotations

from dataclasses import dataclass, field

from .reader import Context, MappingReader, parse_named, raw_map


@dataclass
class Icons:
    """Links to the small and large icons of an API."""

    x16: str = ""
    x32: str = ""

    @classmethod
    def from_node(cls, node: object, context: Context | None) -> Icons:
        """Build icons from a parsed mapping, raising on any problem."""
        reader = MappingReader(node, context)
        reader.check_keys(("x16", "x32"), required=("x16", "x32"))
        icons = cls(x16=reader.string("x16"), x32=reader.string("x32"))
        reader.finish()
        return icons

    def to_raw_info(self) -> dict:
        """Export the icons; both links are required and always present."""
        return {"x16": self.x16, "x32": self.x32}


@dataclass
class Scope:
    """One OAuth 2.0 scope."""

    description: str = ""

    @classmethod
    def from_node(cls, node: object, context: Context | None) -> Scope:
        """Build a scope from a parsed mapping, raising on any problem."""
        reader = MappingReader(node, context)
        reader.check_keys(("description",))
        scope = cls(description=reader.string("description"))
        reader.finish()
        return scope

    def to_raw_info(self) -> dict:
        """Export the scope, leaving out an empty description."""
        return {"description": self.description} if self.description else {}


def parse_scopes(node: object, context: Context | None) -> dict[str, Scope]:
    """Read a mapping of scope names to scopes, keeping their order."""
    return parse_named(node, context, Scope.from_node)


@dataclass
class Oauth2:
    """OAuth 2.0 authentication information."""

    scopes: dict[str, Scope] | None = None

    @classmethod
    def from_node(cls, node: object, context: Context | None) -> Oauth2:
        """Build OAuth 2.0 information from a parsed mapping."""
        reader = MappingReader(node, context)
        reader.check_keys(("scopes",))
        oauth2 = cls(scopes=reader.child("scopes", parse_scopes))
        reader.finish()
        return oauth2

    def to_raw_info(self) -> dict:
        """Export the OAuth 2.0 information as plain values."""
        if self.scopes is None:
            return {}
        return {"scopes": raw_map(self.scopes)}


@dataclass
class Auth:
    """Authentication information of an API."""

    oauth2: Oauth2 | None = None

    @classmethod
    def from_node(cls, node: object, context: Context | None) -> Auth:
        """Build authentication information from a parsed mapping."""
        reader = MappingReader(node, context)
        reader.check_keys(("oauth2",))
        auth = cls(oauth2=reader.child("oauth2", Oauth2.from_node))
        reader.finish()
        return auth

    def to_raw_info(self) -> dict:
        """Export the authentication information as plain values."""
        if self.oauth2 is None:
            return {}
        return {"oauth2": self.oauth2.to_raw_info()}


@dataclass
class UploadProtocol:
    """A media upload protocol, either simple or resumable."""

    multipart: bool = False
    path: str = ""

    @classmethod
    def from_node(cls, node: object, context: Context | None) -> UploadProtocol:
        """Build an upload protocol from a parsed mapping."""
        reader = MappingReader(node, context)
        reader.check_keys(("multipart", "path"))
        protocol = cls(multipart=reader.boolean("multipart"), path=reader.string("path"))
        reader.finish()
        return protocol

    def to_raw_info(self) -> dict:
        """Export the protocol, leaving out empty fields."""
        info: dict = {}
        if self.multipart:
            info["multipart"] = True
        if self.path:
            info["path"] = self.path
        return info


@dataclass
class Protocols:
    """The upload protocols a method supports."""

    simple: UploadProtocol | None = None
    resumable: UploadProtocol | None = None

    @classmethod
    def from_node(cls, node: object, context: Context | None) -> Protocols:
        """Build the supported upload protocols from a parsed mapping."""
        reader = MappingReader(node, context)
        reader.check_keys(("resumable", "simple"))
        protocols = cls(
            simple=reader.child("simple", UploadProtocol.from_node),
            resumable=reader.child("resumable", UploadProtocol.from_node),
        )
        reader.finish()
        return protocols

    def to_raw_info(self) -> dict:
        """Export the protocols, leaving out absent ones."""
        info: dict = {}
        if self.simple is not None:
            info["simple"] = self.simple.to_raw_info()
        if self.resumable is not None:
            info["resumable"] = self.resumable.to_raw_info()
        return info


@dataclass
class MediaUpload:
    """Media upload parameters of a method."""

    accept: list[str] = field(default_factory=list)
    max_size: str = ""
    protocols: Protocols | None = None
    supports_subscription: bool = False

    @classmethod
    def from_node(cls, node: object, context: Context | None) -> MediaUpload:
        """Build media upload parameters from a parsed mapping."""
        reader = MappingReader(node, context)
        reader.check_keys(("accept", "maxSize", "protocols", "supportsSubscription"))
        upload = cls(
            accept=reader.strings("accept"),
            max_size=reader.string("maxSize"),
            protocols=reader.child("protocols", Protocols.from_node),
            supports_subscription=reader.boolean("supportsSubscription"),
        )
        reader.finish()
        return upload

    def to_raw_info(self) -> dict:
        """Export the media upload parameters, leaving out empty fields."""
        info: dict = {}
        if self.accept:
            info["accept"] = list(self.accept)
        if self.max_size:
            info["maxSize"] = self.max_size
        if self.protocols is not None:
            info["protocols"] = self.protocols.to_raw_info()
        if self.supports_subscription:
            info["supportsSubscription"] = True
        return info