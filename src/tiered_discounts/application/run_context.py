from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from tiered_discounts.domain.common.ids import CorrelationId


@dataclass(frozen=True)
class RunContext:
    target: str
    started_at: datetime
    correlation_id: CorrelationId

    @classmethod
    def from_args(
        cls,
        target: str,
        correlation_id: Optional[str] = None,
        started_at: Optional[datetime] = None,
    ) -> "RunContext":
        return cls(
            target=target,
            started_at=started_at or datetime.now(timezone.utc),
            correlation_id=CorrelationId(correlation_id or f"auto-{uuid.uuid4().hex[:8]}"),
        )
