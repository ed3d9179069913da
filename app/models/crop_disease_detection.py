import re

from pydantic import BaseModel, Field, field_validator

DATA_URI_PATTERN = re.compile(r"^data:(?P<mime_type>[\w.+-]+/[\w.+-]+);base64,(?P<data>.+)$", re.DOTALL)


class DetectCropDiseaseInput(BaseModel):
    photo_data_uri: str = Field(
        description=(
            "A photo of the crop, as a data URI that must include a MIME type and use Base64 encoding. "
            "Expected format: 'data:<mimetype>;base64,<encoded_data>'."
        )
    )

    @field_validator("photo_data_uri")
    @classmethod
    def _validate_data_uri(cls, value: str) -> str:
        match = DATA_URI_PATTERN.match(value.strip())
        if match is None:
            raise ValueError("photo_data_uri must look like 'data:<mimetype>;base64,<data>'")
        if not match.group("mime_type").startswith("image/"):
            raise ValueError("photo_data_uri must contain an image")
        return value.strip()


class DiseaseIdentification(BaseModel):
    is_healthy: bool = Field(description="Whether or not the plant is healthy.")
    disease_name: str = Field(
        default="", description="The name of the identified disease, if any."
    )
    confidence: float = Field(
        description="The confidence level of the disease identification (0-1)."
    )
    suggestions: str = Field(
        default="", description="Suggestions for treatment or prevention."
    )


class DetectCropDiseaseOutput(BaseModel):
    disease_identification: DiseaseIdentification
