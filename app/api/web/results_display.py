"""
Result renderer: picks a layout from a result's type tag and renders the JSON
shape the flow returned into an HTML card.
"""

from enum import Enum
from typing import Any, Mapping, Optional, Union

from markupsafe import Markup
from pydantic import BaseModel

from .templating import templates


class ResultType(str, Enum):
    RECOMMENDATION = "recommendation"
    SUGGESTION = "suggestion"
    DETECTION = "detection"
    MARKET = "market"
    WEATHER = "weather"
    SCHEMES = "schemes"
    CALENDAR = "calendar"


class ResultLayout(BaseModel):
    title: str
    icon: str


RESULT_LAYOUTS: dict[ResultType, ResultLayout] = {
    ResultType.RECOMMENDATION: ResultLayout(title="Crop Recommendations", icon="🌱"),
    ResultType.SUGGESTION: ResultLayout(title="Fertilizer Suggestion", icon="🌾"),
    ResultType.DETECTION: ResultLayout(title="Disease Detection Result", icon="🔍"),
    ResultType.MARKET: ResultLayout(title="Market Price Insights", icon="📈"),
    ResultType.WEATHER: ResultLayout(title="Weather Forecast & Alerts", icon="⛅"),
    ResultType.SCHEMES: ResultLayout(title="Government Schemes & Subsidies", icon="🏛"),
    ResultType.CALENDAR: ResultLayout(title="Crop Calendar & Tasks", icon="📅"),
}

TREND_ICONS = {
    "rising": ("▲", "trend-rising"),
    "falling": ("▼", "trend-falling"),
    "stable": ("▬", "trend-stable"),
}


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        text = f"{value:.2f}".rstrip("0").rstrip(".")
        return "0" if text == "-0" else text
    return str(value)


def trend_icon(trend: Optional[str]) -> Markup:
    symbol, css_class = TREND_ICONS.get((trend or "").lower(), ("?", "trend-unknown"))
    return Markup('<span class="trend {}" aria-hidden="true">{}</span>').format(
        css_class, symbol
    )


templates.env.filters["format_value"] = format_value
templates.env.globals["trend_icon"] = trend_icon


def render_results(
    result_type: Union[ResultType, str],
    results: Union[BaseModel, Mapping[str, Any], None],
    title: Optional[str] = None,
    **context: Any,
) -> Markup:
    """
    Renders ``results`` with the layout registered for ``result_type``.

    Unknown tags raise ``ValueError``; a missing result renders nothing.
    """
    result_type = ResultType(result_type)
    if results is None:
        return Markup("")

    if isinstance(results, BaseModel):
        data = results.model_dump(mode="json")
    else:
        data = dict(results)

    layout = RESULT_LAYOUTS[result_type]
    template = templates.get_template("results_display.html")
    return Markup(
        template.render(
            result_type=result_type.value,
            title=title or layout.title,
            icon=layout.icon,
            results=data,
            **context,
        )
    )
