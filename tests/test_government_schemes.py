import pytest

from app.models.government_schemes import (
    GovernmentScheme,
    GovernmentSchemesInput,
    GovernmentSchemesOutput,
)
from app.services.government_schemes_service import government_schemes


@pytest.fixture
def pm_kisan() -> GovernmentSchemesOutput:
    return GovernmentSchemesOutput(
        schemes=[
            GovernmentScheme(
                scheme_name="PM-KISAN",
                description="Income support of ₹6,000 per year.",
                eligibility="All landholding farmer families.",
                how_to_apply="Register on pmkisan.gov.in or at a CSC.",
            )
        ]
    )


class TestGovernmentSchemesService:
    @pytest.mark.asyncio
    async def test_optional_lines_only_when_given(self, fake_chat_model, pm_kisan) -> None:
        fake_chat_model.response = pm_kisan

        result = await government_schemes(
            GovernmentSchemesInput(location="Maharashtra", crop_type="Cotton")
        )

        assert result.schemes[0].scheme_name == "PM-KISAN"
        prompt = fake_chat_model.last_prompt
        assert "- Location: Maharashtra\n- Relevant Crop: Cotton" in prompt
        assert "Farmer Category" not in prompt

    @pytest.mark.asyncio
    async def test_blank_optional_values_are_left_out(self, fake_chat_model, pm_kisan) -> None:
        fake_chat_model.response = pm_kisan

        await government_schemes(
            GovernmentSchemesInput(location="Punjab", crop_type="  ", farmer_category="")
        )

        prompt = fake_chat_model.last_prompt
        assert "Relevant Crop" not in prompt
        assert "Farmer Category" not in prompt

    @pytest.mark.asyncio
    async def test_blank_location_returns_no_schemes(self, fake_chat_model) -> None:
        result = await government_schemes(GovernmentSchemesInput(location="   "))

        assert result.schemes == []
        assert fake_chat_model.calls == []

    @pytest.mark.asyncio
    async def test_empty_model_output_returns_no_schemes(self, fake_chat_model) -> None:
        fake_chat_model.response = None

        result = await government_schemes(GovernmentSchemesInput(location="Bihar"))

        assert result == GovernmentSchemesOutput(schemes=[])
