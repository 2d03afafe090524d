import pytest

from discoverydoc.auth import (
    Auth,
    Icons,
    MediaUpload,
    Oauth2,
    Protocols,
    Scope,
    UploadProtocol,
    parse_scopes,
)
from discoverydoc.reader import CompilerError, Context, ErrorGroup

ROOT = Context("$root")


def test_icons_round_trip():
    node = {"x16": "small.png", "x32": "large.png"}
    icons = Icons.from_node(node, ROOT)
    assert icons.x16 == "small.png"
    assert icons.x32 == "large.png"
    assert icons.to_raw_info() == node


def test_icons_missing_both_required():
    with pytest.raises(CompilerError) as info:
        Icons.from_node({}, ROOT)
    assert "is missing required properties: x16, x32" in str(info.value)


def test_icons_missing_one_required():
    with pytest.raises(CompilerError) as info:
        Icons.from_node({"x16": "small.png"}, ROOT)
    assert "is missing required property: x32" in str(info.value)


def test_icons_missing_and_invalid_gives_group():
    with pytest.raises(ErrorGroup) as info:
        Icons.from_node({"bogus": "x"}, ROOT)
    assert len(info.value.errors) == 2
    assert "has invalid property: bogus" in str(info.value)


def test_icons_not_a_mapping():
    with pytest.raises(CompilerError) as info:
        Icons.from_node(["x16"], ROOT)
    assert "has unexpected value" in str(info.value)


def test_scope_round_trip_and_empty():
    scope = Scope.from_node({"description": "Read access"}, ROOT)
    assert scope.description == "Read access"
    assert scope.to_raw_info() == {"description": "Read access"}
    assert Scope().to_raw_info() == {}


def test_parse_scopes_keeps_order():
    node = {"b": {"description": "B"}, "a": {"description": "A"}}
    scopes = parse_scopes(node, ROOT)
    assert list(scopes) == ["b", "a"]
    assert scopes["a"] == Scope(description="A")


def test_parse_scopes_not_a_mapping():
    with pytest.raises(CompilerError):
        parse_scopes("scopes", ROOT)


def test_auth_round_trip():
    node = {"oauth2": {"scopes": {"read": {"description": "Read"}, "write": {}}}}
    auth = Auth.from_node(node, ROOT)
    assert auth.oauth2 is not None
    assert auth.oauth2.scopes["read"].description == "Read"
    assert auth.to_raw_info() == node


def test_auth_error_path_reaches_scope():
    node = {"oauth2": {"scopes": {"s": {"description": 5}}}}
    with pytest.raises(CompilerError) as info:
        Auth.from_node(node, ROOT)
    assert str(info.value).startswith(
        "$root.oauth2.scopes.s has unexpected value for description"
    )


def test_auth_invalid_key():
    with pytest.raises(CompilerError) as info:
        Auth.from_node({"apikey": {}}, ROOT)
    assert "has invalid property: apikey" in str(info.value)


def test_empty_oauth2_and_auth_export_empty():
    assert Oauth2().to_raw_info() == {}
    assert Auth().to_raw_info() == {}


def test_upload_protocol_round_trip():
    node = {"multipart": True, "path": "/upload/things"}
    protocol = UploadProtocol.from_node(node, ROOT)
    assert protocol == UploadProtocol(multipart=True, path="/upload/things")
    assert protocol.to_raw_info() == node


def test_upload_protocol_omits_defaults():
    protocol = UploadProtocol.from_node({"multipart": False}, ROOT)
    assert protocol.to_raw_info() == {}


def test_upload_protocol_wrong_type():
    with pytest.raises(CompilerError) as info:
        UploadProtocol.from_node({"multipart": "yes"}, ROOT)
    assert "has unexpected value for multipart" in str(info.value)


def test_protocols_round_trip():
    node = {
        "simple": {"multipart": True, "path": "/a"},
        "resumable": {"path": "/b"},
    }
    protocols = Protocols.from_node(node, ROOT)
    assert protocols.resumable == UploadProtocol(path="/b")
    assert protocols.to_raw_info() == node


def test_media_upload_round_trip():
    node = {
        "accept": ["image/*", "video/*"],
        "maxSize": "10MB",
        "protocols": {"simple": {"path": "/up"}},
        "supportsSubscription": True,
    }
    upload = MediaUpload.from_node(node, ROOT)
    assert upload.accept == ["image/*", "video/*"]
    assert upload.max_size == "10MB"
    assert upload.supports_subscription is True
    assert upload.to_raw_info() == node


def test_media_upload_empty():
    upload = MediaUpload.from_node({}, ROOT)
    assert upload == MediaUpload()
    assert upload.to_raw_info() == {}


def test_media_upload_nested_error_collected():
    node = {"accept": "image/*", "protocols": {"simple": {"path": 3}}}
    with pytest.raises(ErrorGroup) as info:
        MediaUpload.from_node(node, ROOT)
    messages = [str(error) for error in info.value.errors]
    assert len(messages) == 2
    assert any("has unexpected value for accept" in m for m in messages)
    assert any(m.startswith("$root.protocols.simple") for m in messages)