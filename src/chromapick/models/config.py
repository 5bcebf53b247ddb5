"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from chromapick.model_manager.persistence import PydanticPersistence

from .enums import PickerTab

DEFAULT_CONFIG_PATH = Path.home() / ".chromapick" / "config.json"


class PickerConfig(BaseModel):
    """Application configuration and settings.

    The picker core never persists colors itself; this config belongs to
    the host application, which decides whether to remember the last
    notified color between runs.
    """

    initial_color: str = Field(
        default="#007AFF",
        description="Color used to seed the picker when no last color is remembered",
    )
    default_tab: PickerTab = Field(
        default=PickerTab.GRID, description="Tab shown when the picker modal opens"
    )
    remember_last_color: bool = Field(
        default=True, description="Persist the last picked color and start from it"
    )
    last_color: str | None = Field(default=None, description="Last picked color")

    @field_validator("initial_color")
    @classmethod
    def validate_initial_color(cls, v: str) -> str:
        """Require a '#RRGGBB' value and store it uppercase."""
        from chromapick.colors.codec import normalize_hex

        normalized = normalize_hex(v)
        if normalized is None:
            raise ValueError("must be a hex color in the form #RRGGBB")
        return normalized

    @field_validator("last_color")
    @classmethod
    def validate_last_color(cls, v: str | None) -> str | None:
        """Same rules as initial_color, but None is allowed."""
        if v is None:
            return None
        from chromapick.colors.codec import normalize_hex

        normalized = normalize_hex(v)
        if normalized is None:
            raise ValueError("must be a hex color in the form #RRGGBB")
        return normalized

    @property
    def start_color(self) -> str:
        """Color the host should seed the picker with."""
        if self.remember_last_color and self.last_color:
            return self.last_color
        return self.initial_color

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "PickerConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.chromapick/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH
        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH
        PydanticPersistence.save_json(self, path)
