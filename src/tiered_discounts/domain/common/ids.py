from __future__ import annotations

from dataclasses import dataclass
from typing import NewType

CartLineId = NewType("CartLineId", str)
DeliveryGroupId = NewType("DeliveryGroupId", str)


@dataclass(frozen=True)
class CorrelationId:
    value: str
