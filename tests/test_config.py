"""Tests for ChangesetDebugConfig validation and immutability."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from changeset_debug.config import ChangesetDebugConfig


class TestDefaults:
    """Tests for the default configuration."""

    def test_default_values(self) -> None:
        """Defaults match the documented field values."""
        config = ChangesetDebugConfig()
        assert config.not_available_name == "N/A"
        assert config.owner_debug_key == "section_global_key"
        assert config.root_parent_key == ""
        assert config.strict is False

    def test_frozen(self) -> None:
        """ChangesetDebugConfig is immutable."""
        config = ChangesetDebugConfig()
        with pytest.raises(FrozenInstanceError):
            config.strict = True  # type: ignore[misc]

    def test_equality(self) -> None:
        """Configs with equal fields compare equal."""
        assert ChangesetDebugConfig(strict=True) == ChangesetDebugConfig(strict=True)


class TestValidation:
    """Tests for __post_init__ validation."""

    def test_empty_not_available_name_rejected(self) -> None:
        """An empty placeholder name raises ValueError."""
        with pytest.raises(ValueError, match="not_available_name"):
            ChangesetDebugConfig(not_available_name="")

    def test_empty_owner_debug_key_rejected(self) -> None:
        """An empty owner debug key raises ValueError."""
        with pytest.raises(ValueError, match="owner_debug_key"):
            ChangesetDebugConfig(owner_debug_key="")

    def test_empty_root_parent_key_allowed(self) -> None:
        """The root sentinel may be the empty string."""
        assert ChangesetDebugConfig(root_parent_key="").root_parent_key == ""
