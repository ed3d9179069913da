from io import BytesIO

import pytest
from fastapi import HTTPException
from pydantic import ValidationError
from starlette.datastructures import FormData, Headers, UploadFile

from app.api.web.forms import FormValidationError, read_crop_image_form
from app.models.crop_disease_detection import (
    DetectCropDiseaseInput,
    DetectCropDiseaseOutput,
    DiseaseIdentification,
)
from app.services.crop_disease_detection_service import detect_crop_disease
from app.services.files import bytes_to_data_uri, upload_mime_type, upload_to_data_uri

PNG_URI = "data:image/png;base64,iVBORw0KGgo="


def _upload(content: bytes, filename: str, content_type: str) -> UploadFile:
    return UploadFile(
        file=BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


class TestPhotoDataUri:
    def test_image_data_uri_is_accepted(self) -> None:
        assert DetectCropDiseaseInput(photo_data_uri=PNG_URI).photo_data_uri == PNG_URI

    @pytest.mark.parametrize(
        "uri",
        ["leaf.png", "data:image/png,iVBORw0KGgo=", "data:text/plain;base64,aGk="],
    )
    def test_non_image_uri_is_rejected(self, uri: str) -> None:
        with pytest.raises(ValidationError):
            DetectCropDiseaseInput(photo_data_uri=uri)


class TestImageUploads:
    def test_bytes_to_data_uri(self) -> None:
        assert bytes_to_data_uri(b"hi", "image/jpeg") == "data:image/jpeg;base64,aGk="

    @pytest.mark.asyncio
    async def test_upload_is_converted(self) -> None:
        uri = await upload_to_data_uri(_upload(b"hi", "leaf.png", "image/png"))

        assert uri == "data:image/png;base64,aGk="

    @pytest.mark.asyncio
    async def test_content_type_parameters_are_dropped(self) -> None:
        upload = _upload(b"hi", "leaf.png", "Image/PNG; name=leaf.png")

        assert upload_mime_type(upload) == "image/png"
        uri = await upload_to_data_uri(upload)

        assert uri == "data:image/png;base64,aGk="
        assert DetectCropDiseaseInput(photo_data_uri=uri).photo_data_uri == uri

    @pytest.mark.asyncio
    async def test_non_image_upload_is_rejected(self) -> None:
        with pytest.raises(HTTPException) as exc_info:
            await upload_to_data_uri(_upload(b"hi", "notes.txt", "text/plain"))

        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "Please select an image file."

    @pytest.mark.asyncio
    async def test_oversized_upload_is_rejected(self) -> None:
        with pytest.raises(HTTPException) as exc_info:
            await upload_to_data_uri(
                _upload(b"0123456789", "leaf.png", "image/png"), max_bytes=4
            )

        assert exc_info.value.status_code == 413

    @pytest.mark.asyncio
    async def test_form_without_file_reports_field_error(self) -> None:
        with pytest.raises(FormValidationError) as exc_info:
            await read_crop_image_form(FormData([("crop_image", "")]))

        assert exc_info.value.errors == {"crop_image": "Please select an image file."}

    @pytest.mark.asyncio
    async def test_form_with_image_yields_data_uri(self) -> None:
        form = await read_crop_image_form(
            FormData([("crop_image", _upload(b"hi", "leaf.png", "image/png"))])
        )

        assert form.photo_data_uri == "data:image/png;base64,aGk="


class TestCropDiseaseDetectionService:
    @pytest.mark.asyncio
    async def test_image_is_attached_to_prompt(self, fake_chat_model) -> None:
        fake_chat_model.response = DetectCropDiseaseOutput(
            disease_identification=DiseaseIdentification(
                is_healthy=False,
                disease_name="Early Blight",
                confidence=0.82,
                suggestions="Remove affected leaves and apply a copper fungicide.",
            )
        )

        result = await detect_crop_disease(DetectCropDiseaseInput(photo_data_uri=PNG_URI))

        assert result.disease_identification.disease_name == "Early Blight"
        image_message = fake_chat_model.calls[-1][-1]
        assert image_message.content == [
            {"type": "image_url", "image_url": {"url": PNG_URI}}
        ]

    @pytest.mark.asyncio
    async def test_healthy_plant_defaults(self, fake_chat_model) -> None:
        fake_chat_model.response = {
            "disease_identification": {"is_healthy": True, "confidence": 0.95}
        }

        result = await detect_crop_disease(DetectCropDiseaseInput(photo_data_uri=PNG_URI))

        assert result.disease_identification.is_healthy is True
        assert result.disease_identification.disease_name == ""
        assert result.disease_identification.suggestions == ""
