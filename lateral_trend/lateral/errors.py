from __future__ import annotations


class LateralTrendError(ValueError):
    """Base class for bad input handed to the lateral trend search."""


class EmptyInputError(LateralTrendError):
    def __init__(self) -> None:
        super().__init__("price sequence is empty, no window can be produced")


class InvalidThresholdError(LateralTrendError):
    def __init__(self, max_pct_change: float) -> None:
        self.max_pct_change = max_pct_change
        super().__init__(f"max_pct_change must be a non-negative number, got {max_pct_change!r}")


class NonPositivePriceError(LateralTrendError):
    def __init__(self, index: int, price: int) -> None:
        self.index = index
        self.price = price
        super().__init__(f"price at index {index} must be positive, got {price!r}")


class NonAdjacentMergeError(RuntimeError):
    """
    Raised when two windows that do not touch are merged.

    This is a bug in the search code, not a data problem, so it is not a
    LateralTrendError and nothing should catch it.
    """
