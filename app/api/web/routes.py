import logging
from typing import Any, Awaitable, Callable, NamedTuple, Optional, Type

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from markupsafe import Markup
from pydantic import BaseModel, ValidationError

from app.models.crop_calendar import CropCalendarInput
from app.models.crop_disease_detection import DetectCropDiseaseInput
from app.models.crop_recommendation import CropRecommendationInput
from app.models.fertilizer_recommendation import FertilizerRecommendationInput
from app.models.government_schemes import GovernmentSchemesInput
from app.models.market_price import MarketPriceInput
from app.models.weather_forecast import WeatherForecastInput
from app.services.crop_calendar_service import crop_calendar
from app.services.crop_disease_detection_service import detect_crop_disease
from app.services.crop_recommendation_service import crop_recommendation
from app.services.fertilizer_recommendation_service import fertilizer_recommendation
from app.services.government_schemes_service import government_schemes
from app.services.market_price_service import market_price
from app.services.weather_service import weather_forecast

from .forms import (
    SOIL_TYPES,
    CropCalendarForm,
    CropDiseaseDetectionForm,
    CropRecommendationForm,
    FertilizerSuggestionForm,
    FormValidationError,
    GovernmentSchemesForm,
    MarketPriceForm,
    WeatherForecastForm,
    field_errors,
    read_crop_image_form,
    validate_form,
)
from .results_display import ResultType, render_results
from .templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Web"], include_in_schema=False)


class Toast(BaseModel):
    title: str
    description: str
    variant: str = "default"


class DashboardFeature(NamedTuple):
    tab: str
    icon: str
    label: str
    heading: str
    summary: str
    submit_label: str
    form: Type[BaseModel]
    build: Callable[[Any], BaseModel]
    run: Callable[[Any], Awaitable[BaseModel]]
    error_message: str
    failure_toast: Toast
    success_toast: Optional[Callable[[Any], Toast]] = None

    @property
    def result_type(self) -> ResultType:
        return ResultType(self.tab)


# Request schema fields whose form input has a different name.
REQUEST_FIELD_INPUTS = {"photo_data_uri": "crop_image"}


def _crop_calendar_request(form: CropCalendarForm) -> CropCalendarInput:
    return CropCalendarInput(
        crop_type=form.crop_type,
        planting_date=form.planting_date.isoformat(),
        location=form.location,
        growing_season_length_days=form.growing_season_length_days,
    )


FEATURES: dict[str, DashboardFeature] = {
    feature.tab: feature
    for feature in [
        DashboardFeature(
            tab="recommendation",
            icon="🌱",
            label="Crops",
            heading="Get Crop Recommendations",
            summary="Enter your soil test values and local climate to find the crops that suit your field.",
            submit_label="Get Recommendations",
            form=CropRecommendationForm,
            build=lambda form: CropRecommendationInput(**form.model_dump()),
            run=crop_recommendation,
            error_message="Failed to get recommendation. Please try again.",
            failure_toast=Toast(
                variant="destructive",
                title="Recommendation Failed",
                description="Could not generate crop recommendations.",
            ),
        ),
        DashboardFeature(
            tab="suggestion",
            icon="🌾",
            label="Fertilizer",
            heading="Get Fertilizer Suggestion",
            summary="Tell us about your soil and crop to get a fertilizer type and dose per hectare.",
            submit_label="Get Suggestion",
            form=FertilizerSuggestionForm,
            build=lambda form: FertilizerRecommendationInput(**form.model_dump()),
            run=fertilizer_recommendation,
            error_message="Failed to get suggestion. Please check your inputs or try again later.",
            failure_toast=Toast(
                variant="destructive",
                title="Suggestion Failed",
                description="Could not generate fertilizer recommendation.",
            ),
            success_toast=lambda form: Toast(
                title="Suggestion Ready",
                description="Fertilizer recommendation generated successfully.",
            ),
        ),
        DashboardFeature(
            tab="detection",
            icon="🔍",
            label="Disease",
            heading="Detect Crop Disease",
            summary="Upload a clear photo of the affected plant.",
            submit_label="Detect Disease",
            form=CropDiseaseDetectionForm,
            build=lambda form: DetectCropDiseaseInput(photo_data_uri=form.photo_data_uri),
            run=detect_crop_disease,
            error_message="Failed to detect disease. Please ensure the image is clear and try again.",
            failure_toast=Toast(
                variant="destructive",
                title="Detection Failed",
                description="Could not analyze the image. Please try again later.",
            ),
        ),
        DashboardFeature(
            tab="market",
            icon="📈",
            label="Market Prices",
            heading="Check Market Prices",
            summary="Get the latest price, trend and a short analysis for your crop.",
            submit_label="Get Market Price",
            form=MarketPriceForm,
            build=lambda form: MarketPriceInput(**form.model_dump()),
            run=market_price,
            error_message="Failed to get market prices. Please check your inputs or try again later.",
            failure_toast=Toast(
                variant="destructive",
                title="Fetching Failed",
                description="Could not retrieve market price information.",
            ),
            success_toast=lambda form: Toast(
                title="Market Prices Fetched",
                description=f"Price insights for {form.crop_name} in {form.location} generated.",
            ),
        ),
        DashboardFeature(
            tab="weather",
            icon="⛅",
            label="Weather",
            heading="Get Weather Forecast & Alerts",
            summary="Enter your farm's location to get current weather, a 3-day forecast, and severe weather alerts.",
            submit_label="Get Forecast",
            form=WeatherForecastForm,
            build=lambda form: WeatherForecastInput(location=form.location),
            run=weather_forecast,
            error_message="Failed to get weather forecast. Please check the location or try again later.",
            failure_toast=Toast(
                variant="destructive",
                title="Forecast Failed",
                description="Could not retrieve weather information.",
            ),
            success_toast=lambda form: Toast(
                title="Weather Forecast Ready",
                description=f"Forecast for {form.location} generated.",
            ),
        ),
        DashboardFeature(
            tab="schemes",
            icon="🏛",
            label="Govt Schemes",
            heading="Find Government Schemes & Subsidies",
            summary="Find support programs, subsidies, insurance and MSP details for your state.",
            submit_label="Find Schemes",
            form=GovernmentSchemesForm,
            build=lambda form: GovernmentSchemesInput(**form.model_dump()),
            run=government_schemes,
            error_message="Failed to get schemes information. Please check the location or try again later.",
            failure_toast=Toast(
                variant="destructive",
                title="Fetching Failed",
                description="Could not retrieve government schemes information.",
            ),
            success_toast=lambda form: Toast(
                title="Government Schemes Info Ready",
                description=f"Found schemes relevant to {form.location}.",
            ),
        ),
        DashboardFeature(
            tab="calendar",
            icon="📅",
            label="Crop Calendar",
            heading="Generate Crop Calendar",
            summary="Get a task schedule from planting to harvest tailored to your location.",
            submit_label="Generate Calendar",
            form=CropCalendarForm,
            build=_crop_calendar_request,
            run=crop_calendar,
            error_message="Failed to generate calendar. Please check inputs or try again.",
            failure_toast=Toast(
                variant="destructive",
                title="Generation Failed",
                description="Could not create the crop calendar.",
            ),
            success_toast=lambda form: Toast(
                title="Crop Calendar Generated",
                description=f"Personalized schedule created for {form.crop_type}.",
            ),
        ),
    ]
}

DEFAULT_TAB = "recommendation"


def _render_dashboard(
    request: Request,
    feature: DashboardFeature,
    *,
    values: Optional[dict[str, Any]] = None,
    errors: Optional[dict[str, str]] = None,
    error: Optional[str] = None,
    toast: Optional[Toast] = None,
    results_html: Optional[Markup] = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "features": list(FEATURES.values()),
            "active": feature,
            "soil_types": SOIL_TYPES,
            "values": values or {},
            "errors": errors or {},
            "error": error,
            "toast": toast,
            "results_html": results_html,
        },
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse)
async def home(request: Request):
    return templates.TemplateResponse(
        request, "home.html", {"features": list(FEATURES.values())}
    )


@router.get("/dashboard", response_class=HTMLResponse)
async def dashboard(request: Request, tab: str = DEFAULT_TAB):
    feature = FEATURES.get(tab, FEATURES[DEFAULT_TAB])
    return _render_dashboard(request, feature)


@router.post("/dashboard/{tab}", response_class=HTMLResponse)
async def submit_feature(request: Request, tab: str):
    feature = FEATURES.get(tab)
    if feature is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown feature '{tab}'.",
        )

    form_data = await request.form()
    values = {key: value for key, value in form_data.items() if isinstance(value, str)}

    try:
        if feature.form is CropDiseaseDetectionForm:
            form = await read_crop_image_form(form_data)
        else:
            form = validate_form(feature.form, values)
        flow_request = feature.build(form)
    except FormValidationError as exc:
        return _render_dashboard(
            request,
            feature,
            values=values,
            errors=exc.errors,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )
    except ValidationError as exc:
        logger.warning("Dashboard %s request rejected: %s", tab, exc)
        return _render_dashboard(
            request,
            feature,
            values=values,
            errors=field_errors(exc, REQUEST_FIELD_INPUTS),
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    try:
        result = await feature.run(flow_request)
    except HTTPException as exc:
        logger.warning(
            "Dashboard %s generation failed (status=%s, detail=%s)",
            tab,
            exc.status_code,
            exc.detail,
        )
        return _render_dashboard(
            request,
            feature,
            values=values,
            error=feature.error_message,
            toast=feature.failure_toast,
            status_code=exc.status_code,
        )

    results_html = render_results(
        feature.result_type,
        result,
        preview_url=getattr(form, "photo_data_uri", None),
    )
    return _render_dashboard(
        request,
        feature,
        values=values,
        toast=feature.success_toast(form) if feature.success_toast else None,
        results_html=results_html,
    )
