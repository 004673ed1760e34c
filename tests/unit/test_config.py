"""Tests for configuration."""

import contextvars

import pytest
from pydantic import ValidationError

from bip21 import Bip21Config, configure, get_config, override_config


class TestConfig:
    """Tests for configure, get_config and override_config."""

    def test_defaults(self) -> None:
        """Test the default options."""
        config = get_config()
        assert config.allow_non_text_values is False
        assert config.integrate_platform_errors is True

    def test_configure_keeps_other_options(self) -> None:
        """Test configure only changes the given options."""
        configure(integrate_platform_errors=False)
        config = configure(allow_non_text_values=True)
        assert config.allow_non_text_values is True
        assert config.integrate_platform_errors is False
        assert get_config() is config

    def test_unknown_option(self) -> None:
        """Test unknown options are rejected."""
        with pytest.raises(ValidationError):
            configure(allow_everything=True)

    def test_invalid_value(self) -> None:
        """Test option values are validated."""
        with pytest.raises(ValidationError):
            configure(allow_non_text_values="maybe")

    def test_frozen(self) -> None:
        """Test the config can not be mutated in place."""
        with pytest.raises(ValidationError):
            get_config().allow_non_text_values = True  # type: ignore[misc]

    def test_override_restores(self) -> None:
        """Test override_config restores the previous options."""
        before = get_config()
        with override_config(allow_non_text_values=True) as config:
            assert config.allow_non_text_values is True
            assert get_config() is config
        assert get_config() is before

    def test_override_restores_on_error(self) -> None:
        """Test the previous options are restored when the block raises."""
        before = get_config()
        with pytest.raises(RuntimeError):
            with override_config(allow_non_text_values=True):
                raise RuntimeError("boom")
        assert get_config() is before

    def test_model(self) -> None:
        """Test the config model can be built directly."""
        assert Bip21Config(allow_non_text_values=True).allow_non_text_values is True

    def test_configure_inside_override_is_undone(self) -> None:
        """Test configure within an override block only lasts for the block."""
        before = get_config()
        with override_config():
            configure(allow_non_text_values=True)
            assert get_config().allow_non_text_values is True
        assert get_config() is before

    def test_override_is_context_local(self) -> None:
        """Test an override is not visible from another context."""
        other = contextvars.copy_context()
        before = get_config()
        with override_config(allow_non_text_values=True):
            assert other.run(get_config) is before
            assert get_config().allow_non_text_values is True
