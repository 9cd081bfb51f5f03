# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Tests for the names re-exported from the top-level package."""

import pytest

import edge_scheduler


class TestPublicApi:
    """Test the top-level edge_scheduler namespace."""

    @pytest.mark.parametrize("name", edge_scheduler.__all__)
    def test_all_names_resolve(self, name):
        """Every name in __all__ is an attribute of the package."""
        assert hasattr(edge_scheduler, name)

    def test_version(self):
        """Test the version string is exposed."""
        assert edge_scheduler.__version__ == "1.0.0"

    def test_unknown_attribute_raises_attribute_error(self):
        """Test missing names raise the standard AttributeError."""
        with pytest.raises(AttributeError, match=r"has no attribute"):
            _ = edge_scheduler.NonExistentAttribute

    def test_quick_start(self):
        """Test the documented quick start with a manual clock."""
        clock = edge_scheduler.ManualClock()
        seen = []
        search = edge_scheduler.DebouncedCallback(seen.append, 300, clock=clock)

        search("p")
        search("py")
        clock.advance(300)

        assert seen == ["py"]
