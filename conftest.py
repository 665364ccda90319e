"""
测试共享fixtures
"""

import pytest

from mutrack.config import GenomeManager, PreferencesManager


@pytest.fixture(autouse=True)
def reset_singletons():
    """每个测试前后重置基因组和偏好设置单例"""
    GenomeManager.reset_instance()
    PreferencesManager.reset()
    yield
    GenomeManager.reset_instance()
    PreferencesManager.reset()
