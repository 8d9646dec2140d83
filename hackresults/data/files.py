"""
JSON snapshot loading.
"""
import logging
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class DataFileError(ValueError):
    """A data file is missing or does not match its schema."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


def load_json_model(path: str | Path, model: type[ModelT]) -> ModelT:
    """
    Load and validate a JSON file.

    Args:
        path: JSON file path
        model: Pydantic model for the file's root object

    Raises:
        DataFileError: File missing, unreadable or invalid
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DataFileError(path, f"cannot read file ({e})") from e

    try:
        data = model.model_validate_json(raw)
    except ValidationError as e:
        raise DataFileError(path, f"invalid {model.__name__}: {e.error_count()} error(s)\n{e}") from e

    logger.debug(f"Loaded {model.__name__} from {path}")
    return data
