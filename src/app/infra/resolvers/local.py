"""Resolver de recursos sobre o sistema de arquivos local.

Implementação de referência de ResourceResolverProtocol:
- `file://` aponta diretamente para o caminho local
- demais esquemas (content://, etc.) dependem do índice registrado,
  análogo à coluna DATA do índice de mídia da plataforma
- tipo: o registrado no índice ou o inferido pela extensão do caminho
"""

from __future__ import annotations

import base64
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import urlparse
from urllib.request import url2pathname

from config.settings import DEFAULT_MAX_CONTENT_BYTES
from utils.errors import ResourceResolutionError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class IndexedResource:
    """Registro de um recurso conhecido pelo índice local."""

    path: str
    mime_type: str | None = None


class LocalResourceResolver:
    """Resolve tipo, caminho e conteúdo de recursos locais."""

    def __init__(
        self,
        index: Mapping[str, IndexedResource] | None = None,
        *,
        max_content_bytes: int = DEFAULT_MAX_CONTENT_BYTES,
    ) -> None:
        self._index: dict[str, IndexedResource] = dict(index or {})
        self._max_content_bytes = max_content_bytes

    def register(self, uri: str, path: str, mime_type: str | None = None) -> None:
        """Indexa um recurso não endereçável por `file://`."""
        self._index[uri] = IndexedResource(path=path, mime_type=mime_type)

    def _locate(self, uri: str) -> str:
        indexed = self._index.get(uri)
        if indexed is not None:
            return indexed.path
        try:
            parsed = urlparse(uri)
        except ValueError as exc:
            raise ResourceResolutionError("malformed_resource_uri") from exc
        if parsed.scheme != "file" or parsed.netloc not in ("", "localhost"):
            return ""
        return url2pathname(parsed.path)

    def resolve_type(self, uri: str) -> str | None:
        indexed = self._index.get(uri)
        if indexed is not None and indexed.mime_type:
            return indexed.mime_type
        path = self._locate(uri)
        if not path:
            return None
        mime_type, _encoding = mimetypes.guess_type(path)
        return mime_type

    def resolve_path(self, uri: str) -> str:
        return self._locate(uri)

    def read_bytes_base64(self, uri: str) -> str:
        """Lê o conteúdo em Base64 (sem quebras de linha); vazio em falha."""
        try:
            path = self._locate(uri)
        except ResourceResolutionError:
            return ""
        if not path:
            return ""
        try:
            with Path(path).open("rb") as handle:
                content = handle.read(self._max_content_bytes + 1)
        except OSError as exc:
            logger.warning(
                "local_resource_read_failed",
                extra={"error_type": type(exc).__name__},
            )
            return ""
        if len(content) > self._max_content_bytes:
            logger.warning(
                "local_resource_too_large",
                extra={"max_content_bytes": self._max_content_bytes},
            )
            return ""
        return base64.b64encode(content).decode("ascii")
