"""
Token data models for the token service.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional


MINUTE = timedelta(minutes=1)
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class Token:
    """Bearer credential for subject `id`.

    A read snapshot of the Redis record at the time it was built. Validity is
    always re-derived from the store, never from this object.
    """
    id: str
    value: str
    expire_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "value": self.value,
            "expire_at": self.expire_at.isoformat() if self.expire_at else None,
        }


def round_to_minute(moment: datetime) -> datetime:
    """Round an aware datetime to the nearest minute, halves rounding up."""
    remainder = (moment - _EPOCH) % MINUTE
    if remainder >= MINUTE / 2:
        return moment + (MINUTE - remainder)
    return moment - remainder
