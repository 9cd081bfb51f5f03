"""
Unit tests for create_adapter.
"""

from unittest.mock import MagicMock

import pytest

from edge_scheduler.adapters import (
    ADAPTER_KINDS,
    DebouncedCallback,
    DebouncedValue,
    ThrottledCallback,
    ThrottledValue,
    create_adapter,
)
from edge_scheduler.clocks import ManualClock
from edge_scheduler.exceptions import ConfigurationError


class TestCreateAdapter:
    """Test the adapter factory."""

    @pytest.mark.parametrize(
        "kind, expected",
        [
            ("debounce_callback", DebouncedCallback),
            ("throttle_callback", ThrottledCallback),
            ("debounce_value", DebouncedValue),
            ("throttle_value", ThrottledValue),
        ],
    )
    def test_kinds(self, kind, expected, clock: ManualClock):
        """Test each kind builds the matching adapter."""
        adapter = create_adapter(kind, MagicMock(), 100, clock=clock)
        assert type(adapter) is expected
        assert adapter.config.wait == 100

    def test_case_insensitive(self, clock: ManualClock):
        """Test kind names are case-insensitive."""
        adapter = create_adapter("Debounce_Callback", MagicMock(), clock=clock)
        assert isinstance(adapter, DebouncedCallback)
        assert adapter.config.wait == 500

    def test_value_target_is_initial_value(self, clock: ManualClock):
        """Test value kinds use target as the initial value."""
        adapter = create_adapter("debounce_value", 42, 100, clock=clock)
        assert adapter.value == 42

    def test_options_forwarded(self, clock: ManualClock):
        """Test options reach the adapter."""
        adapter = create_adapter(
            "debounce_callback", MagicMock(), 100, max_wait=400, name="f", clock=clock
        )
        assert adapter.config.max_wait == 400
        assert adapter.name == "f"

    def test_unknown_kind(self):
        """Test an unknown kind raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Unknown adapter kind"):
            create_adapter("debounce_stream", MagicMock())

    def test_registry_complete(self):
        """Test the registry lists exactly the four kinds."""
        assert set(ADAPTER_KINDS) == {
            "debounce_callback",
            "throttle_callback",
            "debounce_value",
            "throttle_value",
        }
