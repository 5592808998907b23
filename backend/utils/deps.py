from datetime import datetime, time
from typing import Optional

from fastapi import Request

from utils.errors import ValidationFailed
from utils.ledger import LedgerStore


# The ledger is created once per application in main.create_app
def get_ledger(request: Request) -> LedgerStore:
    return request.app.state.ledger


def parse_iso(value: Optional[str], field: str, end_of_day: bool = False) -> Optional[datetime]:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        raise ValidationFailed(field, f"Bad datetime format: {value}")
    # A bare YYYY-MM-DD upper bound covers the whole day
    if end_of_day and len(value) == 10:
        parsed = datetime.combine(parsed.date(), time.max)
    return parsed
