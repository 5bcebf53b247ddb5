"""Tests for persistence safety features (backups, atomic writes, corruption handling)."""

import json
from pathlib import Path

import pytest

from chromapick.exceptions import (
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
)
from chromapick.model_manager.persistence import PydanticPersistence
from chromapick.models import PickerConfig


class TestPersistenceSafety:
    """Test safety features of PydanticPersistence."""

    def test_save_creates_backup(self, tmp_path: Path):
        """Test that save_json creates a .bak file before overwriting."""
        config_path = tmp_path / "config.json"

        initial = PickerConfig(initial_color="#FF0000")
        PydanticPersistence.save_json(initial, config_path, backup=False)

        modified = PickerConfig(initial_color="#00FF00")
        PydanticPersistence.save_json(modified, config_path, backup=True)

        backup_path = config_path.with_suffix(".json.bak")
        assert backup_path.exists()

        backup_data = PydanticPersistence.load_json(backup_path, PickerConfig)
        assert backup_data.initial_color == "#FF0000"

        current_data = PydanticPersistence.load_json(config_path, PickerConfig)
        assert current_data.initial_color == "#00FF00"

    def test_save_without_backup(self, tmp_path: Path):
        """Test that backup can be disabled."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(PickerConfig(), config_path, backup=False)
        PydanticPersistence.save_json(PickerConfig(), config_path, backup=False)

        assert not config_path.with_suffix(".json.bak").exists()

    def test_atomic_write_cleans_up_temp_file(self, tmp_path: Path):
        """Test that temporary file is cleaned up after successful write."""
        config_path = tmp_path / "nested" / "config.json"

        PydanticPersistence.save_json(PickerConfig(last_color="#123456"), config_path)

        assert not config_path.with_suffix(".json.tmp").exists()
        loaded = PydanticPersistence.load_json(config_path, PickerConfig)
        assert loaded.last_color == "#123456"

    def test_unwritable_target_raises_configuration_error(self, tmp_path: Path):
        """Test that write failures surface as ConfigurationError with a hint."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            PydanticPersistence.save_json(PickerConfig(), blocker / "config.json")

        assert ".bak" in exc_info.value.recovery_hint
        assert blocker.read_text(encoding="utf-8") == "not a directory"

    def test_load_missing_file_raises(self, tmp_path: Path):
        """Test that load_json does not invent defaults."""
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(tmp_path / "missing.json", PickerConfig)

    def test_load_json_or_default_missing_file(self, tmp_path: Path):
        """Test load_json_or_default with missing file."""
        config_path = tmp_path / "missing.json"

        result = PydanticPersistence.load_json_or_default(config_path, PickerConfig)

        assert result == PickerConfig()
        assert not config_path.exists()

    def test_corrupted_file_raises(self, tmp_path: Path):
        """Test that corrupted files raise instead of silently defaulting."""
        config_path = tmp_path / "corrupted.json"
        config_path.write_text("{ invalid }", encoding="utf-8")

        with pytest.raises(ConfigFileInvalidError):
            PydanticPersistence.load_json_or_default(config_path, PickerConfig)

    def test_empty_file_raises(self, tmp_path: Path):
        """Test that an empty file is reported as such."""
        config_path = tmp_path / "empty.json"
        config_path.write_text("   ", encoding="utf-8")

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            PydanticPersistence.load_json(config_path, PickerConfig)
        assert "empty" in exc_info.value.user_message

    def test_invalid_value_raises_validation_error(self, tmp_path: Path):
        """Test that a bad color value names the field."""
        config_path = tmp_path / "bad.json"
        config_path.write_text(json.dumps({"initial_color": "blue"}), encoding="utf-8")

        with pytest.raises(ConfigValidationError) as exc_info:
            PydanticPersistence.load_json(config_path, PickerConfig)
        assert exc_info.value.field == "initial_color"
        assert "#RRGGBB" in exc_info.value.recovery_hint

    def test_validate_json(self, tmp_path: Path):
        """Test the validation helper."""
        good = tmp_path / "good.json"
        PydanticPersistence.save_json(PickerConfig(), good)
        assert PydanticPersistence.validate_json(good, PickerConfig) is None

        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"default_tab": "wheel"}), encoding="utf-8")
        error = PydanticPersistence.validate_json(bad, PickerConfig)
        assert "default_tab" in error

        error = PydanticPersistence.validate_json(tmp_path / "none.json", PickerConfig)
        assert "not found" in error

    def test_errors_share_base_class(self):
        """Test the exception hierarchy used by callers."""
        assert issubclass(ConfigFileInvalidError, ConfigurationError)
        assert issubclass(ConfigValidationError, ConfigurationError)
