import contextlib
import logging
import os
import tempfile
from pathlib import Path

from domain.exceptions.currency import PersistenceError

logger = logging.getLogger(__name__)


class SnapshotStore:
    """Single-slot file holding the last good raw rates payload."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def write(self, data: bytes) -> None:
        # Temp file lives next to the target so os.replace stays on one filesystem
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path is not None:
                with contextlib.suppress(OSError):
                    os.remove(tmp_path)
            raise PersistenceError(f"Failed to write snapshot {self.path}: {e}") from e

        logger.debug(f"Wrote {len(data)} bytes to {self.path}")

    def read(self) -> bytes:
        try:
            return self.path.read_bytes()
        except OSError as e:
            raise PersistenceError(f"Failed to read snapshot {self.path}: {e}") from e

    def exists(self) -> bool:
        return self.path.is_file()
