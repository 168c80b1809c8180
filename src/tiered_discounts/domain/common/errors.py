class TieredDiscountsError(Exception):
    pass


class NoDeliveryGroupsError(TieredDiscountsError):
    """Raised when a free-shipping discount qualifies but the cart has no delivery group to target."""

    def __init__(self, message: str = "No delivery groups found") -> None:
        super().__init__(message)
