"""
Items module exceptions.
"""

from shared.exceptions import NotFoundError, RuleViolationError


class ItemNotFoundError(NotFoundError):
    """Raised when an item is not found."""

    def __init__(self, item_id: int):
        super().__init__(
            f"Item not found: {item_id}",
            code="ITEM_NOT_FOUND",
            details={"item_id": item_id},
        )


class ItemAlreadyClaimedError(RuleViolationError):
    """Raised when claiming an item that is no longer available."""

    def __init__(self, item_id: int):
        super().__init__(
            f"Item is no longer available: {item_id}",
            code="ITEM_ALREADY_CLAIMED",
            details={"item_id": item_id},
        )
