import logging
import re
from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

# Greedy: first "{" through last "}" so nested objects stay intact.
_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


class JsonParsingError(Exception):
    """Raised when no JSON object can be extracted or parsed from text."""


class SchemaValidationError(Exception):
    """Raised when extracted JSON does not match the Pydantic schema."""


class JsonSanitizerService:
    @staticmethod
    def extract_json_object(text: str) -> str:
        """Return the ``{...}`` span of *text*, ignoring any surrounding prose."""
        match = _JSON_OBJECT.search(text or "")
        if match is None:
            raise JsonParsingError("Could not find any content resembling a JSON object.")
        return match.group(0)

    @staticmethod
    def extract_and_validate_json(text: str, model: Type[T]) -> T:
        """
        Extracts a JSON object from model output and validates it against *model*.

        Raises:
            JsonParsingError: If no JSON object can be found or parsed.
            SchemaValidationError: If the JSON is valid but does not match the schema.
        """
        content = JsonSanitizerService.extract_json_object(text)
        try:
            return model.model_validate_json(content)
        except ValidationError as e:
            # Pydantic reports syntax errors as 'json_invalid'
            if any(err.get("type") == "json_invalid" for err in e.errors()):
                logger.error("JSON syntax error: %s", e)
                raise JsonParsingError(f"Invalid JSON Syntax: {e}") from e
            logger.error("Validation failed for content: %s... Error: %s", content[:100], e)
            raise SchemaValidationError(f"JSON Structure Invalid: {e}") from e
