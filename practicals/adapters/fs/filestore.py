import os
from datetime import UTC, datetime
from pathlib import Path

from practicals.core.ports.storage import StoredFile


class FileSystemStore:
    """Flat directory of files addressed by name, confined to base_path."""

    def __init__(self, base_path: str):
        self.base_path = Path(base_path).resolve()
        if not self.base_path.exists():
            os.makedirs(self.base_path, exist_ok=True)

    def _safe_path(self, path: str) -> Path:
        # Prevent traversal
        target = (self.base_path / path).resolve()
        if target != self.base_path and not target.is_relative_to(self.base_path):
            raise ValueError(f"Path traversal attempt detected: {path}")
        return target

    def path_for(self, name: str) -> Path:
        """Absolute path of a stored file. Raises ValueError on traversal."""
        return self._safe_path(name)

    def save(self, name: str, data: bytes) -> str:
        """Save bytes and return the name relative to the store."""
        target = self._safe_path(name)
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "wb") as f:
            f.write(data)
        return str(target.relative_to(self.base_path))

    def get(self, path: str) -> bytes:
        """Retrieve bytes by path. Raises FileNotFoundError."""
        target = self._safe_path(path)
        if not target.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        with open(target, "rb") as f:
            return f.read()

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        return self.get(path).decode(encoding, errors="replace")

    def exists(self, path: str) -> bool:
        return self._safe_path(path).is_file()

    def stat(self, path: str) -> StoredFile:
        target = self._safe_path(path)
        if not target.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        st = target.stat()
        return StoredFile(
            name=target.name,
            size=st.st_size,
            modified=datetime.fromtimestamp(st.st_mtime, UTC),
            created=datetime.fromtimestamp(getattr(st, "st_birthtime", st.st_ctime), UTC),
        )

    def list_files(self) -> list[StoredFile]:
        """Regular files directly under the store, in directory order."""
        return [self.stat(entry.name) for entry in os.scandir(self.base_path) if entry.is_file()]

    def delete(self, path: str) -> bool:
        target = self._safe_path(path)
        if target.is_file():
            os.remove(target)
            return True
        return False
