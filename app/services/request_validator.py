import base64
import binascii
from typing import List
from fastapi import HTTPException
from app.models import RecipeSearchRequest, RecognitionRequest

ALLOWED_IMAGE_TYPES = ["image/jpeg", "image/jpg", "image/png", "image/webp", "image/heif", "image/heic"]
MAX_IMAGE_BYTES = 5 * 1024 * 1024
MIN_IMAGE_BYTES = 1024


class RequestValidator:
    def validate_search(self, request: RecipeSearchRequest) -> List[str]:
        """
        Checks the ingredient list of a recipe search.
        Raises HTTPException(400) when it is empty or contains non-string/blank entries.
        Returns the cleaned ingredient names.
        """
        if not request.ingredients:
            raise HTTPException(
                status_code=400,
                detail={
                    "error_code": "NO_INGREDIENTS",
                    "message": "No ingredients provided."
                }
            )

        if any(not isinstance(ing, str) or not ing.strip() for ing in request.ingredients):
            raise HTTPException(
                status_code=400,
                detail={
                    "error_code": "INVALID_INGREDIENTS",
                    "message": "Invalid ingredients format. Every ingredient must be a non-empty string."
                }
            )

        return [ing.strip() for ing in request.ingredients]

    def validate_image(self, request: RecognitionRequest) -> bytes:
        """
        Checks content type and decoded size of an uploaded photo.
        Raises HTTPException(400) on any problem; returns the decoded bytes.
        """
        content_type = request.content_type.strip().lower()
        if content_type not in ALLOWED_IMAGE_TYPES:
            raise HTTPException(
                status_code=400,
                detail={
                    "error_code": "UNSUPPORTED_FORMAT",
                    "message": f"Unsupported image format: {request.content_type}. Supported formats: JPEG, PNG, WebP, HEIF.",
                    "supported_formats": ALLOWED_IMAGE_TYPES
                }
            )

        try:
            image = base64.b64decode(request.image_base64, validate=True)
        except (binascii.Error, ValueError):
            image = b""
        if not image:
            raise HTTPException(
                status_code=400,
                detail={
                    "error_code": "INVALID_IMAGE_DATA",
                    "message": "Invalid image data. The file may be corrupted."
                }
            )

        size_mb = len(image) / (1024 * 1024)
        if len(image) > MAX_IMAGE_BYTES:
            raise HTTPException(
                status_code=400,
                detail={
                    "error_code": "FILE_TOO_LARGE",
                    "message": f"File too large: {size_mb:.2f}MB. Maximum size is 5MB."
                }
            )
        if len(image) < MIN_IMAGE_BYTES:
            raise HTTPException(
                status_code=400,
                detail={
                    "error_code": "FILE_TOO_SMALL",
                    "message": "File too small. Minimum size is 1KB."
                }
            )

        return image


request_validator = RequestValidator()
