from __future__ import annotations

import pytest

from conftest import FakeAX, FakeElement
from textfield_trans.accessibility import AccessibilityBridge, FocusedElement
from textfield_trans.errors import AccessError, EmptyText, NoFocusedElement, NoTextValue, WriteDenied


def test_get_focused_text_returns_element_and_text():
    element = FakeElement("hello")
    bridge = AccessibilityBridge(ax=FakeAX(focused=element))

    captured = bridge.get_focused_text()

    assert captured.text == "hello"
    assert isinstance(captured.element, FocusedElement)
    assert captured.element.ref is element


def test_get_focused_text_without_focus():
    bridge = AccessibilityBridge(ax=FakeAX(focused=None))

    with pytest.raises(NoFocusedElement):
        bridge.get_focused_text()


def test_get_focused_text_without_value_attribute():
    bridge = AccessibilityBridge(ax=FakeAX(focused=FakeElement(value=None)))

    with pytest.raises(NoTextValue):
        bridge.get_focused_text()


def test_get_focused_text_rejects_non_string_value():
    bridge = AccessibilityBridge(ax=FakeAX(focused=FakeElement(value=42)))

    with pytest.raises(NoTextValue):
        bridge.get_focused_text()


def test_get_focused_text_empty():
    bridge = AccessibilityBridge(ax=FakeAX(focused=FakeElement("")))

    with pytest.raises(EmptyText) as excinfo:
        bridge.get_focused_text()
    assert "empty" in str(excinfo.value)


@pytest.mark.parametrize("error", [NoFocusedElement, NoTextValue, EmptyText, WriteDenied])
def test_access_errors_share_a_base(error):
    assert issubclass(error, AccessError)


def test_set_text_writes_to_captured_handle():
    element = FakeElement("hello")
    ax = FakeAX(focused=element)
    bridge = AccessibilityBridge(ax=ax)
    captured = bridge.get_focused_text()

    # Focus moves elsewhere before the write
    ax.focused = FakeElement("other field")
    bridge.set_text(captured.element, "HELLO")

    assert element.value == "HELLO"
    assert ax.focused.value == "other field"


def test_set_text_denied_keeps_value():
    element = FakeElement("hello", read_only=True)
    ax = FakeAX(focused=element)
    bridge = AccessibilityBridge(ax=ax)
    captured = bridge.get_focused_text()

    with pytest.raises(WriteDenied) as excinfo:
        bridge.set_text(captured.element, "HELLO")

    assert excinfo.value.code == FakeAX.kAXErrorCannotComplete
    assert element.value == "hello"


def test_is_trusted():
    assert AccessibilityBridge(ax=FakeAX(trusted=True)).is_trusted() is True
    assert AccessibilityBridge(ax=FakeAX(trusted=False)).is_trusted() is False
