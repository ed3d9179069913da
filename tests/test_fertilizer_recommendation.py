import pytest
from pydantic import ValidationError

from app.models.fertilizer_recommendation import (
    FertilizerRecommendationInput,
    FertilizerRecommendationOutput,
)
from app.services.fertilizer_recommendation_service import fertilizer_recommendation


@pytest.fixture
def request_model() -> FertilizerRecommendationInput:
    return FertilizerRecommendationInput(
        soil_type="loamy", ph=6.5, temperature=24, crop="Wheat"
    )


class TestFertilizerRecommendationInput:
    @pytest.mark.parametrize("ph", [-0.1, 14.1])
    def test_ph_outside_scale_is_rejected(self, ph: float) -> None:
        with pytest.raises(ValidationError):
            FertilizerRecommendationInput(
                soil_type="loamy", ph=ph, temperature=24, crop="Wheat"
            )

    def test_empty_crop_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FertilizerRecommendationInput(
                soil_type="loamy", ph=7, temperature=24, crop=""
            )


class TestFertilizerRecommendationService:
    @pytest.mark.asyncio
    async def test_prompt_carries_soil_and_crop(self, fake_chat_model, request_model) -> None:
        fake_chat_model.response = FertilizerRecommendationOutput(
            fertilizer_type="Urea",
            quantity_kg_per_hectare=120,
            justification="Wheat needs nitrogen at tillering.",
        )

        result = await fertilizer_recommendation(request_model)

        assert result.quantity_kg_per_hectare == 120
        prompt = fake_chat_model.last_prompt
        assert "- Soil Type: loamy" in prompt
        assert "- Soil pH: 6.5" in prompt
        assert "- Crop: Wheat" in prompt

    @pytest.mark.asyncio
    async def test_negative_quantity_is_clamped_to_zero(self, fake_chat_model, request_model) -> None:
        fake_chat_model.response = FertilizerRecommendationOutput(
            fertilizer_type="None needed",
            quantity_kg_per_hectare=-15,
            justification="Soil is already rich.",
        )

        result = await fertilizer_recommendation(request_model)

        assert result.quantity_kg_per_hectare == 0
        assert result.fertilizer_type == "None needed"
