"""Pytest fixtures for skydrop framework tests."""
import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from skydrop import logging as sd_logging


@pytest.fixture
def logging_config():
    """Snapshot logging configuration and sinks, restore after the test."""
    saved = {
        'default_level': sd_logging._config['default_level'],
        'module_levels': dict(sd_logging._config['module_levels']),
        'log_dir': sd_logging._config['log_dir'],
        'modules': dict(sd_logging._config['modules']),
    }
    yield sd_logging._config
    sd_logging.close_all_sinks()
    sd_logging._config.update(saved)
