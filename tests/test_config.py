"""Test the configuration module functionality."""

from disjointpaths.config import ENUMERATION_CONFIG, EnumerationConfig


def test_enumeration_config_defaults():
    config = EnumerationConfig()
    assert config.progress_interval == 1000
    assert config.stop_at_upper_bound is True


def test_should_report():
    """Progress is due on multiples of the interval."""
    config = EnumerationConfig(progress_interval=3)
    assert [n for n in range(1, 10) if config.should_report(n)] == [3, 6, 9]


def test_should_report_disabled():
    """A non-positive interval disables progress."""
    config = EnumerationConfig(progress_interval=0)
    assert not any(config.should_report(n) for n in range(1, 100))


def test_global_instance():
    assert isinstance(ENUMERATION_CONFIG, EnumerationConfig)
