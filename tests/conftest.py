from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is importable when running `pytest` via its entrypoint,
# where `sys.path[0]` may not be the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

import pytest

from textfield_trans.async_runner import AsyncRunner


class FakeElement:
    def __init__(self, value="", read_only=False):
        self.value = value
        self.read_only = read_only


class FakeAX:
    """Stands in for PyObjC's ApplicationServices module."""

    kAXErrorSuccess = 0
    kAXErrorCannotComplete = -25204
    kAXErrorAttributeUnsupported = -25205
    kAXErrorNoValue = -25212
    kAXFocusedUIElementAttribute = "AXFocusedUIElement"
    kAXValueAttribute = "AXValue"

    def __init__(self, focused=None, trusted=True):
        self.focused = focused
        self.trusted = trusted
        self.system = object()
        self.set_calls = []

    def AXIsProcessTrusted(self):
        return self.trusted

    def AXUIElementCreateSystemWide(self):
        return self.system

    def AXUIElementCopyAttributeValue(self, element, attribute, _out):
        if element is self.system and attribute == self.kAXFocusedUIElementAttribute:
            if self.focused is None:
                return self.kAXErrorNoValue, None
            return self.kAXErrorSuccess, self.focused
        if attribute == self.kAXValueAttribute:
            if element.value is None:
                return self.kAXErrorAttributeUnsupported, None
            return self.kAXErrorSuccess, element.value
        return self.kAXErrorAttributeUnsupported, None

    def AXUIElementSetAttributeValue(self, element, attribute, value):
        self.set_calls.append((element, attribute, value))
        if element.read_only:
            return self.kAXErrorCannotComplete
        element.value = value
        return self.kAXErrorSuccess


@pytest.fixture
def runner():
    runner = AsyncRunner()
    runner.start()
    yield runner
    runner.stop()
