from tiered_discounts.domain.common.errors import NoDeliveryGroupsError, TieredDiscountsError

__all__ = [
    "TieredDiscountsError",
    "NoDeliveryGroupsError",
    "UnknownTargetError",
    "InvalidInputError",
]


class UnknownTargetError(TieredDiscountsError):
    pass


class InvalidInputError(TieredDiscountsError):
    """Raised when an input document does not match the function input schema."""

    def __init__(self, message: str, errors: list[dict] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []
