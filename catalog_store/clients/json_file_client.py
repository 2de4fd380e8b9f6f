import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional, Union

from catalog_store.exceptions import ParseError

logger = logging.getLogger(__name__)


class JsonFileClient:
    """Whole-file JSON client bound to a single path."""

    def __init__(
        self,
        path: Union[str, Path],
        indent: int = 2,
        atomic_writes: bool = True,
    ):
        self.path = Path(path)
        self.indent = indent
        self.atomic_writes = atomic_writes

    def exists(self) -> bool:
        """Check whether the backing file is present."""
        return self.path.exists()

    def read(self) -> Optional[Any]:
        """Read and decode the whole file.

        Returns:
            The decoded JSON value, or None if the file is missing or blank.

        Raises:
            ParseError: If the content is not valid JSON.
        """
        if not self.path.exists():
            logger.debug(f"{self.path} does not exist, treating as empty")
            return None

        text = self.path.read_text(encoding="utf-8")
        if not text.strip():
            logger.debug(f"{self.path} is empty")
            return None

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(self.path, f"invalid JSON at line {e.lineno} column {e.colno}") from e

    def write(self, data: Any) -> None:
        """Serialize ``data`` and overwrite the whole file."""
        payload = json.dumps(data, indent=self.indent, ensure_ascii=False)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        if self.atomic_writes:
            self._write_atomic(payload)
        else:
            self.path.write_text(payload, encoding="utf-8")

        logger.debug(f"Wrote {len(payload)} characters to {self.path}")

    def _write_atomic(self, payload: str) -> None:
        """Write to a temp file next to the target, then rename it over the target."""
        fd, tmp_path = tempfile.mkstemp(
            dir=self.path.parent,
            prefix=f".{self.path.name}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
