from __future__ import annotations

from typing import Any, Callable, Dict, Tuple

from tiered_discounts.adapters.wire.codec import decode_cart_lines_input, decode_delivery_options_input
from tiered_discounts.application.errors import UnknownTargetError
from tiered_discounts.domain.tiered_discount.evaluator import (
    generate_cart_lines_discounts,
    generate_delivery_options_discounts,
)
from tiered_discounts.settings import CART_LINES_TARGET, DELIVERY_OPTIONS_TARGET

DecoderFn = Callable[[Any], Any]
EvaluatorFn = Callable[..., Any]


class Registry:
    def __init__(self) -> None:
        self._targets: Dict[str, Tuple[DecoderFn, EvaluatorFn]] = {}
        self.register(CART_LINES_TARGET, decode_cart_lines_input, generate_cart_lines_discounts)
        self.register(DELIVERY_OPTIONS_TARGET, decode_delivery_options_input, generate_delivery_options_discounts)

    def register(self, target: str, decoder: DecoderFn, fn: EvaluatorFn) -> None:
        self._targets[target] = (decoder, fn)

    def get(self, target: str) -> Tuple[DecoderFn, EvaluatorFn]:
        if target not in self._targets:
            raise UnknownTargetError(f"Function target {target} not registered")
        return self._targets[target]

    def targets(self) -> list[str]:
        return sorted(self._targets)
