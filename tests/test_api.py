"""Tests for the recommendation service wire models."""

import pytest
from pydantic import ValidationError

from src.api.models import RecommendRequest, RecommendResponse
from src.form.options import District, RamenType


class TestRecommendRequest:
    """Test RecommendRequest model."""

    def test_wire_keys_are_camel_case(self):
        """Test that the payload uses the service's key names and labels."""
        request = RecommendRequest(
            districts=(District.SHIBUYA,),
            ramen_types=(RamenType.MISO, RamenType.IEKEI),
            min_price=500,
            max_price=2000,
        )

        assert request.to_wire() == {
            "districts": ["渋谷区"],
            "ramenTypes": ["味噌", "家系"],
            "minPrice": 500,
            "maxPrice": 2000,
        }

    def test_accepts_wire_keys(self):
        """Test construction from camelCase keys and labels."""
        request = RecommendRequest.model_validate(
            {"districts": ["港区"], "ramenTypes": ["塩"], "minPrice": 700, "maxPrice": 800}
        )

        assert request.districts == (District.MINATO,)
        assert request.ramen_types == (RamenType.SHIO,)

    def test_rejects_unknown_labels(self):
        """Test that free-text options are rejected."""
        with pytest.raises(ValidationError):
            RecommendRequest(
                districts=("横浜市",),
                ramen_types=(RamenType.SHIO,),
                min_price=500,
                max_price=800,
            )

    def test_is_immutable(self):
        """Test that the payload cannot be changed after construction."""
        request = RecommendRequest(
            districts=(District.KITA,),
            ramen_types=(RamenType.SHIO,),
            min_price=500,
            max_price=800,
        )

        with pytest.raises(ValidationError):
            request.min_price = 900


class TestRecommendResponse:
    """Test RecommendResponse model."""

    def test_message(self):
        """Test a well-formed response."""
        response = RecommendResponse.model_validate({"message": "# おすすめ", "extra": 1})

        assert response.message == "# おすすめ"

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"msg": "hello"},
            {"message": 42},
            {"message": None},
            ["message"],
            "message",
        ],
    )
    def test_malformed_bodies(self, body):
        """Test that missing or non-string messages are rejected."""
        with pytest.raises(ValidationError):
            RecommendResponse.model_validate(body)
