"""
Pytest configuration and fixtures

The calculator has no database or network: fixtures only wire the
screen model to an in-memory exporter.
"""
import logging
import pytest
import sys
import os

# Add the parent directory to the path so we can import from services
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.bmi_export import RecordingExporter
from services.bmi_screen import BMIScreen


@pytest.fixture
def recording_exporter():
    """Exporter that keeps every shared report in memory"""
    return RecordingExporter()


@pytest.fixture
def feedback_taps():
    """Counts feedback hook invocations"""
    return []


@pytest.fixture
def screen(recording_exporter, feedback_taps):
    """Fresh screen wired to the recording exporter and tap counter"""
    return BMIScreen(exporter=recording_exporter, feedback=lambda: feedback_taps.append(1))


@pytest.fixture
def restore_root_logger():
    """setup_logging() replaces root handlers; put them back afterwards"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
