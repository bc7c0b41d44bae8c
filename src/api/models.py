"""Request and response models for the recommendation service."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from src.form.options import District, RamenType


class RecommendRequest(BaseModel):
    """Payload sent to ``POST /recommend``.

    Built fresh for every submission and never mutated afterwards. Serialize with
    ``model_dump(by_alias=True)`` to get the camelCase wire keys.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    districts: tuple[District, ...] = Field(description="選択された区")
    ramen_types: tuple[RamenType, ...] = Field(
        alias="ramenTypes", description="選択されたラーメンの種類"
    )
    min_price: int = Field(alias="minPrice", description="最低金額")
    max_price: int = Field(alias="maxPrice", description="最高金額")

    def to_wire(self) -> dict:
        """JSON-ready body with enumeration labels and camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class RecommendResponse(BaseModel):
    """Successful response body. Only ``message`` is required."""

    model_config = ConfigDict(extra="ignore")

    message: StrictStr = Field(description="レコメンド結果（マークダウン）")
