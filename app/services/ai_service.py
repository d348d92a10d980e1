import base64
import json
import os
from typing import Any, Dict, List
from openai import OpenAI
from dotenv import load_dotenv
from app.core.errors import RecognitionError, RecognitionUnavailableError
from app.core.logging_config import get_logger
from app.models import RecognizedIngredient

load_dotenv()

logger = get_logger(__name__)

DEFAULT_VISION_MODEL = "gpt-4o-mini"
DEFAULT_MIN_CONFIDENCE = 60.0
MAX_RECOGNIZED_INGREDIENTS = 10

RECOGNITION_PROMPT = """Identify every distinct food ingredient visible in this photo.

Return a JSON object with this structure:

{
  "ingredients": [
    {"name": "<lowercase ingredient name, e.g. 'red bell pepper'>", "confidence": <0-100>}
  ]
}

Guidelines:
- Use common grocery names, singular or plural as they would appear on a shopping list
- Skip packaging, utensils and non-food objects
- Return an empty list if no food is visible
"""


class AIService:
    def __init__(self):
        api_key = os.getenv("OPENAI_API_KEY")
        self.model = os.getenv("OPENAI_VISION_MODEL", DEFAULT_VISION_MODEL)
        self.min_confidence = _min_confidence_from_env()
        if not api_key:
            logger.warning("OPENAI_API_KEY not set. Ingredient recognition will be disabled.")
            self.client = None
        else:
            self.client = OpenAI(api_key=api_key)

    def recognize_ingredients(self, image: bytes, content_type: str) -> List[RecognizedIngredient]:
        """
        Recognize ingredients in a food photo with a vision-capable chat model.

        Args:
            image: Raw image bytes
            content_type: MIME type of the image (e.g. image/jpeg)

        Returns:
            Distinct recognized ingredients (by lowercased name, first kept) with a
            confidence of at least `min_confidence`, capped at 10

        Raises:
            RecognitionUnavailableError: no OpenAI client is configured
            RecognitionError: the model call failed or returned unusable JSON
        """
        if not self.client:
            raise RecognitionUnavailableError()

        data_url = f"data:{content_type};base64,{base64.b64encode(image).decode('ascii')}"

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": "You are a precise food recognition assistant. Always return valid JSON."},
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": RECOGNITION_PROMPT},
                            {"type": "image_url", "image_url": {"url": data_url}}
                        ]
                    }
                ],
                temperature=0.1,
                response_format={"type": "json_object"}
            )
            result = json.loads(response.choices[0].message.content)
        except json.JSONDecodeError as e:
            logger.error(f"Recognition returned invalid JSON: {e}")
            raise RecognitionError("Recognition service returned invalid results.") from e
        except Exception as e:
            logger.error(f"Ingredient recognition failed: {e}")
            raise RecognitionError() from e

        return _valid_ingredients(result, self.min_confidence)


def _valid_ingredients(result: Any, min_confidence: float = DEFAULT_MIN_CONFIDENCE) -> List[RecognizedIngredient]:
    if not isinstance(result, dict) or not isinstance(result.get("ingredients"), list):
        raise RecognitionError("Recognition service returned invalid results.")

    valid: Dict[str, RecognizedIngredient] = {}
    for entry in result["ingredients"]:
        if not isinstance(entry, dict):
            continue
        name = entry.get("name")
        confidence = entry.get("confidence")
        if not isinstance(name, str) or not name.strip():
            continue
        if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
            continue
        if not min_confidence <= confidence <= 100:
            continue
        key = name.strip().lower()
        if key not in valid:
            valid[key] = RecognizedIngredient(name=key, confidence=float(confidence))
    return list(valid.values())[:MAX_RECOGNIZED_INGREDIENTS]


def _min_confidence_from_env() -> float:
    raw = os.getenv("RECOGNITION_MIN_CONFIDENCE")
    if not raw:
        return DEFAULT_MIN_CONFIDENCE
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Invalid RECOGNITION_MIN_CONFIDENCE={raw!r}; using {DEFAULT_MIN_CONFIDENCE}")
        return DEFAULT_MIN_CONFIDENCE
    return min(max(value, 0.0), 100.0)


ai_service = AIService()
