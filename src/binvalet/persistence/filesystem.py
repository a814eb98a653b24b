"""File-based export of optimized routes.

Each export is a run directory under ``<data_root>/outputs`` named
``<prefix>_<UTC timestamp>``. Files are written by suffix: ``.json`` and
``.geojson`` payloads are serialized, anything else is written as text.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping

from ..config import settings

logger = logging.getLogger(__name__)

JSON_SUFFIXES = {".json", ".geojson"}


class FileStorage:
    def __init__(self, root: Path | None = None) -> None:
        self.root = (root or settings.data_root).resolve()
        self.output_root = self.root / "outputs"
        self.output_root.mkdir(parents=True, exist_ok=True)

    def make_run_directory(self, prefix: str = "route") -> Path:
        # microseconds keep back-to-back exports of the same route apart
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
        run_dir = self.output_root / f"{prefix}_{stamp}"
        run_dir.mkdir(parents=True, exist_ok=False)
        return run_dir

    def write_json(self, path: Path, data: Any, *, indent: int = 2) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        # dates and datetimes in route payloads are written as ISO strings
        path.write_text(json.dumps(data, ensure_ascii=False, indent=indent, default=str), encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)

    def export_run(self, prefix: str, files: Mapping[str, Any]) -> Path:
        """Create a run directory and write every named file into it."""
        run_dir = self.make_run_directory(prefix=prefix)
        for name, payload in files.items():
            target = run_dir / name
            if target.suffix in JSON_SUFFIXES:
                self.write_json(target, payload)
            else:
                self.write_text(target, payload)
        logger.debug("Wrote %d files to %s", len(files), run_dir)
        return run_dir

    def list_runs(self, prefix: str | None = None) -> list[Path]:
        """Run directories, oldest first, optionally limited to one prefix."""
        runs = [path for path in self.output_root.iterdir() if path.is_dir()]
        if prefix is not None:
            runs = [path for path in runs if path.name.startswith(f"{prefix}_")]
        return sorted(runs, key=lambda path: path.name)
