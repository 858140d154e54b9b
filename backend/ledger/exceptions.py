# backend/ledger/exceptions.py
"""Error taxonomy shared by the store, the exporter and the API layer."""

from typing import Any, Dict, Optional


class LedgerError(Exception):
    """Base class for ledger errors."""

    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"error": self.message}
        if self.details:
            result["details"] = self.details
        return result


class ValidationError(LedgerError):
    """Missing required field or empty update patch."""

    status_code = 400


class NotFoundError(LedgerError):
    """Target entity does not exist."""

    status_code = 404

    def __init__(self, resource_type: str, resource_id: Any):
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(f"{resource_type.title()} {resource_id} not found")


class StorageIOError(LedgerError):
    """A stored binary could not be removed from disk."""

    def __init__(self, filename: str, cause: Optional[BaseException] = None):
        self.filename = filename
        self.cause = cause
        super().__init__(f"Could not delete stored file {filename}: {cause}")


class PersistenceError(LedgerError):
    """Unexpected failure of the backing store."""

    status_code = 500
