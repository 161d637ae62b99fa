"""Testes do resolver de recursos locais."""

from __future__ import annotations

import base64

import pytest

from app.infra.resolvers import IndexedResource, LocalResourceResolver
from utils.errors import ResourceResolutionError


@pytest.fixture
def image_file(tmp_path):
    path = tmp_path / "img.png"
    path.write_bytes(b"\x89PNG\r\n")
    return path


class TestResolvePath:
    """Testes para resolve_path."""

    def test_file_uri(self, image_file) -> None:
        resolver = LocalResourceResolver()
        assert resolver.resolve_path(image_file.as_uri()) == str(image_file)

    def test_unindexed_content_uri_is_empty(self) -> None:
        assert LocalResourceResolver().resolve_path("content://media/1") == ""

    def test_remote_file_host_is_empty(self) -> None:
        assert LocalResourceResolver().resolve_path("file://server/share/a.txt") == ""

    def test_indexed_content_uri(self) -> None:
        resolver = LocalResourceResolver()
        resolver.register("content://media/42", "/storage/emulated/0/img.png")
        assert resolver.resolve_path("content://media/42") == "/storage/emulated/0/img.png"

    def test_malformed_uri_raises_resolution_error(self) -> None:
        with pytest.raises(ResourceResolutionError):
            LocalResourceResolver().resolve_path("http://[::1")


class TestResolveType:
    """Testes para resolve_type."""

    def test_guessed_from_extension(self, image_file) -> None:
        assert LocalResourceResolver().resolve_type(image_file.as_uri()) == "image/png"

    def test_indexed_type_wins(self) -> None:
        resolver = LocalResourceResolver(
            {"content://media/1": IndexedResource(path="/sdcard/blob", mime_type="video/mp4")}
        )
        assert resolver.resolve_type("content://media/1") == "video/mp4"

    def test_indexed_without_type_guesses_from_path(self) -> None:
        resolver = LocalResourceResolver()
        resolver.register("content://media/1", "/sdcard/doc.pdf")
        assert resolver.resolve_type("content://media/1") == "application/pdf"

    def test_unknown_resource(self) -> None:
        assert LocalResourceResolver().resolve_type("content://media/1") is None


class TestReadBytesBase64:
    """Testes para read_bytes_base64."""

    def test_reads_content(self, image_file) -> None:
        encoded = LocalResourceResolver().read_bytes_base64(image_file.as_uri())
        assert base64.b64decode(encoded) == b"\x89PNG\r\n"
        assert "\n" not in encoded

    def test_missing_file_is_empty(self, tmp_path) -> None:
        uri = (tmp_path / "missing.bin").as_uri()
        assert LocalResourceResolver().read_bytes_base64(uri) == ""

    def test_unresolvable_is_empty(self) -> None:
        assert LocalResourceResolver().read_bytes_base64("content://media/1") == ""
        assert LocalResourceResolver().read_bytes_base64("http://[::1") == ""

    def test_oversized_content_is_empty(self, image_file, caplog) -> None:
        resolver = LocalResourceResolver(max_content_bytes=2)
        with caplog.at_level("WARNING"):
            assert resolver.read_bytes_base64(image_file.as_uri()) == ""
        assert any(r.getMessage() == "local_resource_too_large" for r in caplog.records)

    def test_content_at_limit_is_read(self, image_file) -> None:
        resolver = LocalResourceResolver(max_content_bytes=6)
        assert resolver.read_bytes_base64(image_file.as_uri()) != ""
