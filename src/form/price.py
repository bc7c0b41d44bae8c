"""Price range state for the recommendation form."""

from collections.abc import Collection

from pydantic import BaseModel, ConfigDict, Field

from src.form.options import DEFAULT_MAX_PRICE, DEFAULT_MIN_PRICE


class RangeState(BaseModel):
    """Minimum and maximum price selection.

    The two bounds move independently: ``min_price > max_price`` is a legal
    state here and is only rejected when the form is validated for submission.
    Domain membership is checked where values enter the form (see
    :func:`parse_price`).
    """

    model_config = ConfigDict(frozen=True)

    min_price: int = Field(default=DEFAULT_MIN_PRICE, ge=0, description="最低金額（円）")
    max_price: int = Field(default=DEFAULT_MAX_PRICE, ge=0, description="最高金額（円）")

    def with_min(self, value: int) -> "RangeState":
        """Return a new range with a different minimum."""
        return RangeState(min_price=value, max_price=self.max_price)

    def with_max(self, value: int) -> "RangeState":
        """Return a new range with a different maximum."""
        return RangeState(min_price=self.min_price, max_price=value)

    @property
    def is_ordered(self) -> bool:
        return self.min_price <= self.max_price


def parse_price(raw: str | int, options: Collection[int] | None = None) -> int:
    """Coerce a select-control value to an integer price.

    Args:
        raw: Value as delivered by the control, e.g. "1100" or 1100.
        options: Allowed prices. When given, values outside it are rejected.

    Returns:
        The price in yen.

    Raises:
        ValueError: If the value is not an integer or not one of ``options``.
    """
    if isinstance(raw, bool):
        raise ValueError(f"Invalid price: {raw!r}")
    price = raw if isinstance(raw, int) else int(str(raw).strip())
    if options is not None and price not in options:
        raise ValueError(f"Price {price} is not one of {tuple(options)}")
    return price
