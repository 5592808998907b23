# utils/errors.py
from typing import Any, Dict


class LedgerError(Exception):
    """Base class for failures reported back to API callers."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def details(self) -> Dict[str, Any]:
        return {}

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "error": self.message, **self.details()}


class NotFound(LedgerError):
    status_code = 404

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id

    def details(self):
        return {"entity": self.entity, "id": self.entity_id}


class ValidationFailed(LedgerError):
    def __init__(self, field: str, reason: str):
        super().__init__(reason)
        self.field = field
        self.reason = reason

    def details(self):
        return {"field": self.field, "reason": self.reason}


class InsufficientStock(LedgerError):
    def __init__(self, available: int, requested: int, unit: str = ""):
        message = f"Insufficient stock. Available: {available}"
        if unit:
            message += f" {unit}"
        super().__init__(message)
        self.available = available
        self.requested = requested

    def details(self):
        return {"available": self.available, "requested": self.requested}


def validation_failed_from(exc) -> ValidationFailed:
    """Turn the first pydantic error into a ValidationFailed."""
    error = exc.errors()[0]
    # Drop the "body"/"query" prefix FastAPI puts in front of the location
    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(loc) or "body"
    if error.get("type") == "missing":
        return ValidationFailed(field, f"Missing required field: {field}")
    return ValidationFailed(field, f"Invalid {field}: {error.get('msg')}")
