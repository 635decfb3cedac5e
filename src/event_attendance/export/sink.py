from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Sink(Protocol):
    """Where a finished export goes (file on disk, HTTP download, share sheet...)."""

    def deliver(self, name: str, content: str) -> Any:
        raise NotImplementedError


class FileSink(Sink):
    def __init__(self, directory: str | Path):
        self._directory = Path(directory)

    def deliver(self, name: str, content: str) -> Path:
        if not name or Path(name).name != name:
            raise ValueError(f"Invalid export file name: {name!r}")

        self._directory.mkdir(parents=True, exist_ok=True)
        path = self._directory / name
        path.write_text(content, encoding="utf-8", newline="")
        logger.info("Export written to %s (%d chars)", path, len(content))
        return path


class DownloadSink(Sink):
    """Delivers an export as an HTTP attachment (browser download)."""

    def __init__(self, response_class):
        self._response_class = response_class

    def deliver(self, name: str, content: str):
        quoted = name.replace("\\", "\\\\").replace('"', '\\"')
        return self._response_class(
            content.encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{quoted}"'},
        )
