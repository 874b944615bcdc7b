# tests/test_media_types.py
"""
Tests for media type parsing and the octet-stream fallback.
"""
from content_rest.services.media_types import (
    DEFAULT_MEDIA_TYPE,
    is_concrete,
    parse_media_type,
    resolve_media_type,
)


class TestParseMediaType:
    """Test parsing of media type expressions."""

    def test_simple_type(self):
        assert parse_media_type("image/png") == "image/png"

    def test_type_and_subtype_are_lowercased(self):
        assert parse_media_type("Application/PDF") == "application/pdf"

    def test_surrounding_whitespace_ignored(self):
        assert parse_media_type("  text/html  ") == "text/html"

    def test_parameters_kept(self):
        assert parse_media_type("text/plain;charset=UTF-8") == "text/plain; charset=UTF-8"

    def test_quoted_parameter_with_semicolon(self):
        """A ';' inside a quoted value does not start a new parameter."""
        assert parse_media_type('multipart/mixed; boundary="a;b"') == 'multipart/mixed; boundary="a;b"'

    def test_lone_wildcard_means_all(self):
        assert parse_media_type("*") == "*/*"

    def test_invalid_values(self):
        """Values that are not media types parse to None."""
        for value in [None, "", "   ", "not-a-type", "image/", "/png", "image/png/x",
                      "*/png", "image png/x", "text/plain; charset", "text/plain; =utf-8",
                      'text/plain; name="unterminated',
                      'text/plain; a="x\r\nSet-Cookie: y=1"', 'text/plain; name="\u20ac"']:
            assert parse_media_type(value) is None, value


class TestIsConcrete:
    """Test wildcard detection."""

    def test_concrete(self):
        assert is_concrete("application/pdf")
        assert is_concrete("text/plain; charset=utf-8")

    def test_wildcards(self):
        assert not is_concrete("*/*")
        assert not is_concrete("image/*")
        assert not is_concrete("image/*; q=0.5")


class TestResolveMediaType:
    """Test the media type chosen for serving content item data."""

    def test_valid_mime_type_used(self):
        assert resolve_media_type("image/png") == "image/png"
        assert resolve_media_type("application/pdf") == "application/pdf"

    def test_missing_mime_type_defaults(self):
        assert resolve_media_type(None) == DEFAULT_MEDIA_TYPE
        assert resolve_media_type("") == DEFAULT_MEDIA_TYPE

    def test_malformed_mime_type_defaults(self):
        """Malformed hints are downgraded silently, never raised."""
        assert resolve_media_type("not-a-type") == DEFAULT_MEDIA_TYPE
        assert resolve_media_type("text/plain; charset") == DEFAULT_MEDIA_TYPE

    def test_wildcard_mime_type_defaults(self):
        assert resolve_media_type("*/*") == DEFAULT_MEDIA_TYPE
        assert resolve_media_type("image/*") == DEFAULT_MEDIA_TYPE

    def test_default_is_octet_stream(self):
        assert DEFAULT_MEDIA_TYPE == "application/octet-stream"

    def test_header_unsafe_mime_type_defaults(self):
        """Hints that could not be written as a Content-Type header fall back."""
        assert resolve_media_type('text/plain; a="x\r\nSet-Cookie: y=1"') == DEFAULT_MEDIA_TYPE
        assert resolve_media_type('text/plain; name="€"') == DEFAULT_MEDIA_TYPE
        assert resolve_media_type('text/plain; name="a\x00b"') == DEFAULT_MEDIA_TYPE

    def test_latin1_quoted_parameter_kept(self):
        assert resolve_media_type('text/plain; name="caf\xe9"') == 'text/plain; name="caf\xe9"'
