
import logging
import time
from dataclasses import dataclass, field

from textfield_trans.errors import EmptyText, NoFocusedElement, NoTextValue, WriteDenied

logger = logging.getLogger(__name__)


def _load_application_services():
    # PyObjC bridge to the macOS accessibility API
    import ApplicationServices
    return ApplicationServices


@dataclass(frozen=True)
class FocusedElement:
    """
    Handle to the control that had keyboard focus at capture time.

    The write-back goes to this handle even if focus has moved since.
    """
    ref: object = field(compare=False)
    captured_at: float = field(default_factory=time.monotonic)


@dataclass(frozen=True)
class FocusedText:
    element: FocusedElement
    text: str


class AccessibilityBridge:
    def __init__(self, ax=None):
        self.ax = ax if ax is not None else _load_application_services()

    def is_trusted(self):
        """Whether this process may read and write other applications' controls."""
        return bool(self.ax.AXIsProcessTrusted())

    def get_focused_text(self):
        """Resolve the system-wide focused element and read its value."""
        ax = self.ax
        system_element = ax.AXUIElementCreateSystemWide()

        err, focused = ax.AXUIElementCopyAttributeValue(
            system_element, ax.kAXFocusedUIElementAttribute, None
        )
        if err != ax.kAXErrorSuccess or focused is None:
            raise NoFocusedElement(f"could not get focused element (error {err})")

        err, value = ax.AXUIElementCopyAttributeValue(focused, ax.kAXValueAttribute, None)
        if err != ax.kAXErrorSuccess or not isinstance(value, str):
            raise NoTextValue(f"focused element has no readable text value (error {err})")

        if not value:
            raise EmptyText("focused element text is empty")

        # Copy out of the Objective-C string so later mutations can't reach it
        return FocusedText(element=FocusedElement(ref=focused), text=str(value))

    def set_text(self, element, new_text):
        """Replace the whole value of a previously captured element. UI thread only."""
        ax = self.ax
        err = ax.AXUIElementSetAttributeValue(element.ref, ax.kAXValueAttribute, new_text)
        if err != ax.kAXErrorSuccess:
            raise WriteDenied(err)
