# backend/ledger/services/cleanup.py
from pathlib import Path
from typing import Iterable, List

from ..exceptions import StorageIOError
from ..utils.files import delete_file
from ..utils.logging import service_logger


class CleanupService:
    """Best-effort removal of stored binaries"""

    def __init__(self, uploads_dir: Path):
        self.uploads_dir = Path(uploads_dir)

    def _resolve(self, filename: str) -> Path:
        # Storage names are generated by us, but never follow one outside the uploads dir
        return self.uploads_dir / Path(filename).name

    def delete_stored_file(self, filename: str) -> bool:
        """Delete one binary. Failures are logged and reported as False."""
        try:
            deleted = delete_file(self._resolve(filename))
        except StorageIOError as e:
            service_logger.error("Disk error: could not delete stored file", extra={
                "storage_name": filename,
                "error": str(e.cause)
            })
            return False

        if deleted:
            service_logger.info(f"Disk: deleted {filename}")
        else:
            service_logger.debug(f"Disk: {filename} already absent")
        return True

    def delete_stored_files(self, filenames: Iterable[str]) -> List[str]:
        """Delete every binary independently and return the names that failed"""
        failed = [name for name in filenames if not self.delete_stored_file(name)]
        if failed:
            service_logger.warning("Some stored files could not be deleted", extra={
                "failed_count": len(failed)
            })
        return failed
