import pytest
from pydantic import ValidationError

from edge_scheduler.exceptions import ConfigurationError
from edge_scheduler.scheduler.config import (
    DEFAULT_WAIT_MS,
    SchedulerConfig,
    SchedulerMode,
    SchedulerOptions,
)


class TestSchedulerMode:
    def test_enum_values(self):
        """Test SchedulerMode enum values."""
        assert SchedulerMode.DEBOUNCE.value == "debounce"
        assert SchedulerMode.THROTTLE.value == "throttle"


class TestSchedulerOptions:
    def test_default_values(self):
        """Test default option values."""
        options = SchedulerOptions()

        assert options.wait == DEFAULT_WAIT_MS == 500
        assert options.leading is None
        assert options.trailing is True
        assert options.max_wait is None
        assert options.name == "default"
        assert options.metrics_enabled is False

    def test_negative_wait_clamped(self):
        """Test a negative wait becomes 0."""
        assert SchedulerOptions(wait=-10).wait == 0

    def test_missing_wait_clamped(self):
        """Test an explicit None wait becomes 0."""
        assert SchedulerOptions(wait=None).wait == 0

    def test_negative_max_wait_clamped(self):
        """Test a negative max_wait becomes 0."""
        assert SchedulerOptions(max_wait=-1).max_wait == 0

    def test_wrong_type_raises_configuration_error(self):
        """Test a non-numeric wait is rejected."""
        with pytest.raises(ConfigurationError, match="Invalid scheduler options"):
            SchedulerOptions(wait="soon")

    def test_unknown_option_raises_configuration_error(self):
        """Test unknown option names are rejected."""
        with pytest.raises(ConfigurationError):
            SchedulerOptions(delay=100)

    def test_configuration_error_chains_validation_error(self):
        """Test the pydantic error is kept as the cause."""
        with pytest.raises(ConfigurationError) as exc_info:
            SchedulerOptions(trailing="sometimes")
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_frozen(self):
        """Test options cannot be mutated in place."""
        options = SchedulerOptions()
        with pytest.raises(ValidationError):
            options.wait = 10

    def test_merged(self):
        """Test merged returns a validated copy."""
        options = SchedulerOptions(wait=100, name="search")
        updated = options.merged(wait=-5, leading=True)

        assert updated.wait == 0
        assert updated.leading is True
        assert updated.name == "search"
        assert options.wait == 100

    def test_merged_validates(self):
        """Test merged rejects bad updates."""
        with pytest.raises(ConfigurationError):
            SchedulerOptions().merged(bogus=True)


class TestSchedulerConfigResolve:
    def test_debounce_defaults(self):
        """Test the debounce preset with default options."""
        config = SchedulerConfig.resolve()

        assert config == SchedulerConfig(
            wait=500, leading=False, trailing=True, maxing=False, max_wait=None
        )

    def test_debounce_max_wait(self):
        """Test max_wait enables maxing."""
        config = SchedulerConfig.resolve(SchedulerOptions(wait=100, max_wait=400))

        assert config.maxing is True
        assert config.max_wait == 400

    def test_debounce_max_wait_raised_to_wait(self):
        """Test max_wait below wait is raised to wait."""
        config = SchedulerConfig.resolve(SchedulerOptions(wait=300, max_wait=100))
        assert config.max_wait == 300

    def test_negative_max_wait_raised_to_wait(self):
        """Test a clamped max_wait still ends up at wait."""
        config = SchedulerConfig.resolve(SchedulerOptions(wait=300, max_wait=-1))
        assert config.maxing is True
        assert config.max_wait == 300

    def test_throttle_defaults(self):
        """Test the throttle preset forces maxing with max_wait=wait."""
        config = SchedulerConfig.resolve(
            SchedulerOptions(wait=200), SchedulerMode.THROTTLE
        )

        assert config.leading is True
        assert config.trailing is True
        assert config.maxing is True
        assert config.max_wait == 200

    def test_throttle_ignores_max_wait(self):
        """Test throttle overrides a supplied max_wait."""
        config = SchedulerConfig.resolve(
            SchedulerOptions(wait=200, max_wait=1000), SchedulerMode.THROTTLE
        )
        assert config.max_wait == 200

    def test_throttle_leading_override(self):
        """Test an explicit leading=False survives the throttle preset."""
        config = SchedulerConfig.resolve(
            SchedulerOptions(wait=200, leading=False), SchedulerMode.THROTTLE
        )
        assert config.leading is False


class TestSchedulerConfigValidation:
    def test_negative_wait_rejected(self):
        """Test direct construction validates wait."""
        with pytest.raises(ValueError, match="wait must be non-negative"):
            SchedulerConfig(wait=-1)

    def test_maxing_requires_max_wait(self):
        """Test maxing without a bound is rejected."""
        with pytest.raises(ValueError, match="max_wait must be set"):
            SchedulerConfig(wait=100, maxing=True)

    def test_max_wait_below_wait_rejected(self):
        """Test max_wait < wait is rejected."""
        with pytest.raises(ValueError):
            SchedulerConfig(wait=100, maxing=True, max_wait=50)

    def test_max_wait_without_maxing_rejected(self):
        """Test a stray max_wait is rejected."""
        with pytest.raises(ValueError, match="must be None"):
            SchedulerConfig(wait=100, max_wait=200)

    def test_frozen(self):
        """Test the resolved config is immutable."""
        config = SchedulerConfig()
        with pytest.raises(AttributeError):
            config.wait = 1  # type: ignore[misc]
