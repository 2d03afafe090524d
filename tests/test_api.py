import pytest

from discoverydoc.api import Document
from discoverydoc.reader import CompilerError, Context, ErrorGroup


def _full_document() -> dict:
    return {
        "kind": "discovery#restDescription",
        "discoveryVersion": "v1",
        "id": "sample:v1",
        "name": "sample",
        "version": "v1",
        "revision": "1",
        "title": "Sample API",
        "description": "A sample API.",
        "icons": {"x16": "https://example.com/16.png", "x32": "https://example.com/32.png"},
        "documentationLink": "https://example.com/docs",
        "labels": ["labs"],
        "protocol": "rest",
        "baseUrl": "https://example.com/sample/v1/",
        "basePath": "/sample/v1/",
        "rootUrl": "https://example.com/",
        "servicePath": "sample/v1/",
        "batchPath": "batch",
        "parameters": {"fields": {"type": "string", "location": "query"}},
        "auth": {"oauth2": {"scopes": {"https://example.com/auth/sample": {"description": "All access"}}}},
        "features": ["dataWrapper"],
        "schemas": {"Book": {"id": "Book", "type": "object"}},
        "methods": {"get": {"id": "sample.get", "path": "get", "httpMethod": "GET"}},
        "resources": {"books": {"methods": {"list": {"id": "sample.books.list"}}}},
        "etag": "etag-value",
        "ownerDomain": "example.com",
        "ownerName": "Example",
        "version_module": True,
        "canonicalName": "Sample",
        "fullyEncodeReservedExpansion": True,
        "packagePath": "sample",
        "mtlsRootUrl": "https://mtls.example.com/",
    }


def test_full_document_round_trips_in_order():
    node = _full_document()
    document = Document.from_node(node, Context("$root"))
    raw = document.to_raw_info()
    assert raw == node
    assert list(raw) == list(node)


def test_fields_are_read():
    document = Document.from_node(_full_document(), Context("$root"))
    assert document.name == "sample"
    assert document.features == ["dataWrapper"]
    assert document.version_module is True
    assert document.schemas["Book"].type == "object"
    assert document.resources["books"].methods["list"].id == "sample.books.list"
    assert document.auth.oauth2.scopes["https://example.com/auth/sample"].description == "All access"


def test_required_fields_always_exported():
    raw = Document().to_raw_info()
    assert raw == {"kind": "", "discoveryVersion": ""}


def test_missing_required_keys():
    with pytest.raises(CompilerError) as info:
        Document.from_node({"name": "sample"}, Context("$root"))
    assert str(info.value) == "$root is missing required properties: discoveryVersion, kind"


def test_invalid_key():
    node = {"kind": "k", "discoveryVersion": "v1", "bogus": "x"}
    with pytest.raises(CompilerError) as info:
        Document.from_node(node, Context("$root"))
    assert str(info.value) == "$root has invalid property: bogus"


def test_nested_errors_carry_path():
    node = {"kind": "k", "discoveryVersion": "v1", "schemas": {"Book": {"bogus": 1}}}
    with pytest.raises(CompilerError) as info:
        Document.from_node(node, Context("$root"))
    assert str(info.value) == "$root.schemas.Book has invalid property: bogus"


def test_several_errors_are_grouped():
    node = {"kind": 3, "discoveryVersion": "v1", "extra": "x"}
    with pytest.raises(ErrorGroup) as info:
        Document.from_node(node, Context("$root"))
    assert len(info.value.errors) == 2


def test_non_mapping_is_rejected():
    with pytest.raises(CompilerError) as info:
        Document.from_node(["a"], Context("$root"))
    assert "has unexpected value" in str(info.value)