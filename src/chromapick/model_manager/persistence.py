"""JSON files for pydantic models (the picker config).

Writes keep a ``.bak`` copy of the previous file and replace the target
through a ``.tmp`` sibling, so an interrupted save never leaves a
truncated config behind. Reads turn every failure into a
ConfigurationError that names the file.
"""

import logging
import shutil
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from chromapick.exceptions import (
    ConfigFileInvalidError,
    ConfigurationError,
    wrap_pydantic_error,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class PydanticPersistence:
    """
    Stateless load/save helpers used by ``PickerConfig``.

    Example Usage:
        ```python
        config = PydanticPersistence.load_json_or_default(path, PickerConfig)
        PydanticPersistence.save_json(config, path)
        ```
    """

    @staticmethod
    def load_json(path: Path, model_type: type[M]) -> M:
        """
        Read ``path`` and validate it as ``model_type``.

        Raises:
            FileNotFoundError: If there is no file at ``path``
            ConfigFileInvalidError: If the file is empty, unreadable or not JSON
            ConfigValidationError: If the JSON does not fit ``model_type``
        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigFileInvalidError(str(path), f"Cannot read file: {e}") from e

        if not text.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            model = model_type.model_validate_json(text)
        except ValidationError as e:
            logger.error(f"Rejected {path}: {e.error_count()} validation error(s)")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {model_type.__name__} from {path}")
        return model

    @staticmethod
    def load_json_or_default(path: Path, model_type: type[M]) -> M:
        """
        Like load_json, but a missing file gives ``model_type()``.

        The default is not written to disk. A file that exists but is
        broken still raises, so it is never silently replaced.
        """
        if not path.exists():
            logger.info(f"No file at {path}, using default {model_type.__name__}")
            return model_type()
        return PydanticPersistence.load_json(path, model_type)

    @staticmethod
    def save_json(data: BaseModel, path: Path, backup: bool = True) -> None:
        """
        Write ``data`` to ``path`` as indented JSON.

        Args:
            data: Model to save
            path: Target file; parent directories are created
            backup: Copy an existing file to ``<name>.bak`` first

        Raises:
            ConfigurationError: If the file cannot be written
        """
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            if backup and path.exists():
                shutil.copy2(path, path.with_suffix(path.suffix + ".bak"))
            temp_path.write_text(data.model_dump_json(indent=2), encoding="utf-8")
            temp_path.replace(path)
        except OSError as e:
            if temp_path.exists():
                temp_path.unlink()
            logger.error(f"Could not save {type(data).__name__} to {path}: {e}")
            raise ConfigurationError(
                f"Failed to save configuration to {path}",
                technical_message=f"{type(e).__name__} while writing {path}: {e}",
                recovery_hint="Check file permissions and disk space. The previous file is kept as .bak",
            ) from e

        logger.debug(f"Saved {type(data).__name__} to {path}")

    @staticmethod
    def validate_json(path: Path, model_type: type[M]) -> str | None:
        """Return None if ``path`` loads cleanly, otherwise what is wrong with it."""
        try:
            PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            return f"File not found: {path}"
        except ConfigurationError as e:
            return e.user_message
        return None
