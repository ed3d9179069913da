from typing import Optional, Type

from langchain_core.runnables import Runnable
from langchain_google_genai import (
    ChatGoogleGenerativeAI,
    HarmBlockThreshold,
    HarmCategory,
)
from pydantic import BaseModel

from .config import settings

SAFETY_CATEGORIES = (
    HarmCategory.HARM_CATEGORY_HATE_SPEECH,
    HarmCategory.HARM_CATEGORY_HARASSMENT,
)


def safety_settings(threshold: Optional[str] = None) -> dict:
    """Same block threshold, by name, for every category in SAFETY_CATEGORIES."""
    level = HarmBlockThreshold[threshold or settings.SAFETY_BLOCK_THRESHOLD]
    return {category: level for category in SAFETY_CATEGORIES}


def get_chat_model(model: Optional[str] = None, **overrides) -> ChatGoogleGenerativeAI:
    """
    Gemini chat model with the AgriMitra defaults (key, temperature, retries
    and safety settings). Keyword arguments replace any default.
    """
    options = {
        "google_api_key": settings.GEMINI_API_KEY,
        "temperature": settings.MODEL_TEMPERATURE,
        "max_retries": settings.MODEL_MAX_RETRIES,
        "safety_settings": safety_settings(),
    }
    if "api_key" in overrides:
        options.pop("google_api_key")
    options.update(overrides)
    return ChatGoogleGenerativeAI(model=model or settings.GEMINI_MODEL, **options)


def get_structured_chat_model(
    output_schema: Type[BaseModel], model: Optional[str] = None
) -> Runnable:
    """Chat model whose replies are parsed into ``output_schema``."""
    return get_chat_model(model).with_structured_output(
        output_schema, method="json_schema"
    )
