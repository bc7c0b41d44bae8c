"""Submission gate for the recommendation form.

Rules are evaluated in a fixed order and the first failing rule decides the
reason:

1. At least one district is selected.
2. The minimum price does not exceed the maximum price.
3. At least one ramen type is selected.
"""

from dataclasses import dataclass
from enum import Enum

from src.form.state import FormState


class ValidationFailure(str, Enum):
    """Kinds of validation failure."""

    NO_DISTRICT = "no_district"
    PRICE_ORDER = "price_order"
    NO_RAMEN_TYPE = "no_ramen_type"


VALIDATION_MESSAGES: dict[ValidationFailure, str] = {
    ValidationFailure.NO_DISTRICT: "場所を少なくとも1つ選択してください。",
    ValidationFailure.PRICE_ORDER: "最低金額は最高金額以下に設定してください。",
    ValidationFailure.NO_RAMEN_TYPE: "ラーメンの種類を少なくとも1つ選択してください。",
}


@dataclass(frozen=True)
class ValidationResult:
    """Pass/fail verdict with a user-facing reason."""

    ok: bool
    failure: ValidationFailure | None = None
    reason: str = ""


def validate(form: FormState) -> ValidationResult:
    """Check whether the form may be submitted.

    Args:
        form: Current form snapshot.

    Returns:
        ValidationResult with ``ok=True``, or the first failing rule and its message.
    """
    if not form.districts:
        failure = ValidationFailure.NO_DISTRICT
    elif not form.price_range.is_ordered:
        failure = ValidationFailure.PRICE_ORDER
    elif not form.ramen_types:
        failure = ValidationFailure.NO_RAMEN_TYPE
    else:
        return ValidationResult(ok=True)

    return ValidationResult(ok=False, failure=failure, reason=VALIDATION_MESSAGES[failure])
