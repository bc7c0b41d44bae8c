"""Aggregate form state snapshot."""

from dataclasses import dataclass, field, replace

from src.api.models import RecommendRequest
from src.form.options import District, RamenType
from src.form.price import RangeState
from src.form.selection import SelectionSet


@dataclass(frozen=True)
class FormState:
    """Everything the user has selected on the form.

    Each transition returns a new snapshot so a host UI can detect changes by
    identity.
    """

    districts: SelectionSet[District] = field(default_factory=SelectionSet)
    ramen_types: SelectionSet[RamenType] = field(default_factory=SelectionSet)
    price_range: RangeState = field(default_factory=RangeState)

    def toggle_district(self, district: District) -> "FormState":
        return replace(self, districts=self.districts.toggle(district))

    def toggle_ramen_type(self, ramen_type: RamenType) -> "FormState":
        return replace(self, ramen_types=self.ramen_types.toggle(ramen_type))

    def with_min_price(self, value: int) -> "FormState":
        return replace(self, price_range=self.price_range.with_min(value))

    def with_max_price(self, value: int) -> "FormState":
        return replace(self, price_range=self.price_range.with_max(value))

    def to_payload(self) -> RecommendRequest:
        """Project the current selections into a request payload."""
        return RecommendRequest(
            districts=tuple(self.districts),
            ramen_types=tuple(self.ramen_types),
            min_price=self.price_range.min_price,
            max_price=self.price_range.max_price,
        )
