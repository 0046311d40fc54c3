"""Gateway: file-backed blob store — implements BlobStore port."""

from __future__ import annotations

import contextlib
import logging
import os
import stat
import tempfile
from pathlib import Path

log = logging.getLogger('scrap.storage')


class FileBlobStore:
    """Keeps the snapshot blob in a single file, replaced atomically on write."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> bytes:
        data = self._path.read_bytes()
        log.debug('Read %d bytes from %s', len(data), self._path)
        return data

    def write(self, data: bytes) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f'.{self._path.name}.', dir=self._path.parent)
        try:
            with os.fdopen(fd, 'wb') as f:
                os.chmod(tmp_name, self._target_mode())
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
        except OSError:
            with contextlib.suppress(OSError):
                os.unlink(tmp_name)
            raise
        log.debug('Wrote %d bytes to %s', len(data), self._path)

    def _target_mode(self) -> int:
        """Permission bits for the replacement: the current file's, else 0o666 minus the umask."""
        try:
            return stat.S_IMODE(self._path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask
