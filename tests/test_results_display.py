import pytest
from markupsafe import escape

from app.api.web.results_display import (
    RESULT_LAYOUTS,
    ResultType,
    format_value,
    render_results,
    trend_icon,
)
from app.models.fertilizer_recommendation import FertilizerRecommendationOutput
from app.services.weather_service import build_weather_data

MINIMAL_RESULTS = {
    "recommendation": {"crops": []},
    "suggestion": {
        "fertilizer_type": "Urea",
        "quantity_kg_per_hectare": 0,
        "justification": "",
    },
    "detection": {"disease_identification": {"is_healthy": True, "confidence": 1}},
    "market": {"market_data": None},
    "weather": {"location": "Pune", "current_weather": None, "forecast": [], "alerts": []},
    "schemes": {"schemes": []},
    "calendar": {
        "crop_type": "Tomato",
        "planting_date": "2024-06-01",
        "location": "Punjab",
        "schedule": [],
    },
}


class TestFormatValue:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (True, "Yes"),
            (False, "No"),
            (7, "7"),
            (85.0, "85"),
            (12.3456, "12.35"),
            (-0.001, "0"),
            ("loamy", "loamy"),
        ],
    )
    def test_format_value(self, value, expected) -> None:
        assert format_value(value) == expected

    def test_trend_icon_falls_back_for_unknown_trend(self) -> None:
        assert "trend-rising" in trend_icon("Rising")
        assert "trend-unknown" in trend_icon(None)


class TestRenderResults:
    @pytest.mark.parametrize("result_type", [t.value for t in ResultType])
    def test_minimal_result_of_every_type_renders(self, result_type: str) -> None:
        html = render_results(result_type, MINIMAL_RESULTS[result_type])

        assert f"result-{result_type}" in html
        assert escape(RESULT_LAYOUTS[ResultType(result_type)].title) in html

    def test_unknown_type_is_an_error(self) -> None:
        with pytest.raises(ValueError):
            render_results("horoscope", {})

    def test_missing_result_renders_nothing(self) -> None:
        assert render_results(ResultType.MARKET, None) == ""

    def test_title_can_be_overridden(self) -> None:
        html = render_results("schemes", {"schemes": []}, title="Schemes for Punjab")

        assert "Schemes for Punjab" in html

    def test_empty_crop_list(self) -> None:
        html = render_results("recommendation", {"crops": []})

        assert "No suitable crops found based on the provided data." in html

    def test_fertilizer_quantity_is_rounded(self) -> None:
        result = FertilizerRecommendationOutput(
            fertilizer_type="DAP", quantity_kg_per_hectare=120.456, justification="Low P."
        )

        assert "120.46 kg/hectare" in render_results("suggestion", result)

    def test_diseased_plant_without_name(self) -> None:
        html = render_results(
            "detection",
            {"disease_identification": {"is_healthy": False, "confidence": 0.7}},
        )

        assert "Unknown Disease" in html
        assert "No specific suggestions." in html
        assert "Confidence" not in html

    def test_named_disease_shows_confidence(self) -> None:
        html = render_results(
            "detection",
            {
                "disease_identification": {
                    "is_healthy": False,
                    "disease_name": "Leaf Rust",
                    "confidence": 0.876,
                    "suggestions": "Spray propiconazole.",
                }
            },
            preview_url="data:image/png;base64,aGk=",
        )

        assert "Disease Detected: Leaf Rust" in html
        assert "87.6%" in html
        assert 'src="data:image/png;base64,aGk="' in html

    def test_market_without_trend(self) -> None:
        html = render_results(
            "market",
            {
                "market_data": {
                    "crop_name": "Onion",
                    "location": "Nashik",
                    "price": "₹1,850",
                    "unit": "quintal",
                    "analysis": "Steady arrivals.",
                }
            },
        )

        assert "N/A" in html
        assert "₹1,850 per quintal" in html

    def test_missing_market_data(self) -> None:
        assert "Could not retrieve market price data." in render_results("market", {})

    def test_weather_alerts_hide_none_type(self) -> None:
        assert "No severe weather alerts currently." in render_results(
            "weather", build_weather_data("Pune")
        )
        assert "Heavy Rain (Moderate)" in render_results(
            "weather", build_weather_data("Mumbai")
        )

    def test_empty_schedule(self) -> None:
        html = render_results("calendar", MINIMAL_RESULTS["calendar"])

        assert "No tasks were scheduled for this crop." in html
        assert "Tomato" in html
