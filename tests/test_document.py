import json

import pytest

from discoverydoc.document import parse_document, version
from discoverydoc.reader import CompilerError

_SAMPLE = {
    "kind": "discovery#restDescription",
    "discoveryVersion": "v1",
    "id": "discovery:v1",
    "name": "discovery",
    "version": "v1",
    "title": "API Discovery Service",
    "description": "Provides information about other APIs.",
    "rootUrl": "https://example.com/",
    "basePath": "/discovery/v1/",
    "resources": {
        "apis": {
            "methods": {
                "list": {
                    "id": "discovery.apis.list",
                    "path": "apis",
                    "httpMethod": "GET",
                    "parameters": {"name": {"type": "string", "location": "query"}},
                    "response": {"$ref": "DirectoryList"},
                }
            }
        }
    },
    "schemas": {"DirectoryList": {"id": "DirectoryList", "type": "object"}},
}


def test_version():
    assert version() == "discovery_v1"


def test_parse_document():
    document = parse_document(json.dumps(_SAMPLE).encode("utf-8"))
    assert document.name == "discovery"
    assert document.version == "v1"
    assert document.title == "API Discovery Service"


def test_parse_document_from_text_round_trips():
    document = parse_document(json.dumps(_SAMPLE))
    assert document.to_raw_info() == _SAMPLE


def test_parse_yaml_document():
    text = "kind: k\ndiscoveryVersion: v1\nname: discovery\n"
    document = parse_document(text)
    assert document.name == "discovery"
    assert document.kind == "k"


@pytest.mark.parametrize("data", [None, b"", b"   "], ids=["nil", "zero_bytes", "whitespace"])
def test_parse_document_empty(data):
    with pytest.raises(CompilerError) as info:
        parse_document(data)
    assert str(info.value) == "document has no content"


def test_parse_document_invalid_yaml():
    with pytest.raises(CompilerError):
        parse_document(b"{kind: [")


def test_parse_document_missing_required():
    with pytest.raises(CompilerError) as info:
        parse_document(b'{"name": "discovery"}')
    assert str(info.value) == "$root is missing required properties: discoveryVersion, kind"