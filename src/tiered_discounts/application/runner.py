from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from tiered_discounts.adapters.wire.codec import encode_result
from tiered_discounts.application.errors import NoDeliveryGroupsError
from tiered_discounts.application.registry import Registry
from tiered_discounts.application.run_context import RunContext

logger = logging.getLogger(__name__)


class Runner:
    def __init__(self, registry: Registry) -> None:
        self.registry = registry

    def run(self, ctx: RunContext, payload: Any) -> dict[str, Any]:
        """
        Decode an input document, evaluate the target and encode the output document.

        Raises UnknownTargetError, InvalidInputError and NoDeliveryGroupsError
        to the caller.
        """
        decoder, evaluator = self.registry.get(ctx.target)
        input_row = decoder(payload)

        try:
            result = evaluator(input_row)
        except NoDeliveryGroupsError:
            logger.error(
                f"Free shipping qualified but cart has no delivery groups "
                f"(target={ctx.target}, correlation_id={ctx.correlation_id.value})"
            )
            raise

        output = encode_result(result)
        duration_ms = int((datetime.now(timezone.utc) - ctx.started_at).total_seconds() * 1000)
        logger.info(
            f"Evaluated {ctx.target}: operation_count={len(result.operations)} "
            f"duration_ms={duration_ms} correlation_id={ctx.correlation_id.value}"
        )
        return output
