"""
Base Domain Event.

All domain events inherit from this base class.
"""
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional, Dict, Any
import uuid


@dataclass
class DomainEvent:
    """
    Base class for all domain events.

    An event is handed to the event bus only after the change it describes
    has been committed. Subclasses add their payload as extra dataclass
    fields; everything declared here is envelope metadata.
    """

    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    aggregate_id: str = ""

    # Tracing: which placement run, on whose behalf
    execution_id: Optional[str] = None
    user_id: Optional[str] = None

    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def event_type(self) -> str:
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        """
        Envelope plus payload, ready for JSON.

        Decimals are written as strings so amounts survive serialization
        exactly.
        """
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "aggregate_id": self.aggregate_id,
            "execution_id": self.execution_id,
            "user_id": self.user_id,
            "occurred_at": self.occurred_at.isoformat(),
            "data": self.payload(),
        }

    def payload(self) -> Dict[str, Any]:
        """Fields declared by the subclass."""
        envelope = {f.name for f in fields(DomainEvent)}
        data = {}
        for f in fields(self):
            if f.name in envelope:
                continue
            value = getattr(self, f.name)
            data[f.name] = str(value) if isinstance(value, Decimal) else value
        return data
