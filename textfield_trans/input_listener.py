
import logging
import sys

logger = logging.getLogger(__name__)

# Primary modifier + Shift + E
if sys.platform == "darwin":
    GLOBAL_HOTKEY = "<cmd>+<shift>+e"
    LOCAL_SEQUENCES = ("<Command-Shift-E>", "<Command-Shift-e>")
else:
    GLOBAL_HOTKEY = "<ctrl>+<shift>+e"
    LOCAL_SEQUENCES = ("<Control-Shift-E>", "<Control-Shift-e>")


def _pynput_hotkeys(mapping):
    from pynput import keyboard
    return keyboard.GlobalHotKeys(mapping)


class InputListener:
    """
    One system-wide observer (pynput) and one in-process observer (Tk binding)
    for the same key combination. Both end up calling ``callback`` on the Tk
    main loop.
    """

    def __init__(self, root, callback, hotkeys_factory=_pynput_hotkeys):
        self.root = root
        self.callback = callback
        self.hotkeys_factory = hotkeys_factory
        self.listener = None
        self.local_sequences = []

    def start(self):
        self._register_local()
        self._register_global()

    def _register_local(self):
        for sequence in LOCAL_SEQUENCES:
            try:
                self.root.bind_all(sequence, self._on_local_hotkey)
            except Exception as e:
                logger.error("Could not register local hotkey %s: %s", sequence, e)
                continue
            self.local_sequences.append(sequence)

    def _register_global(self):
        try:
            self.listener = self.hotkeys_factory({GLOBAL_HOTKEY: self._on_global_hotkey})
            self.listener.daemon = True
            self.listener.start()
        except Exception as e:
            logger.error("Could not register global hotkey %s: %s", GLOBAL_HOTKEY, e)
            self.listener = None
            return

        logger.info("Listening for %s", GLOBAL_HOTKEY)

    def _on_global_hotkey(self):
        # Called on the pynput thread; hop to the Tk main loop
        try:
            self.root.after(0, self._handle_global_hotkey)
        except RuntimeError as e:
            logger.info("Hotkey ignored, UI is not running: %s", e)

    def _handle_global_hotkey(self):
        if self._app_has_focus():
            # The local binding already handled this keydown
            return
        logger.info("Hotkey pressed")
        self.callback()

    def _on_local_hotkey(self, event):
        logger.info("Local hotkey pressed")
        self.callback()
        # Stop Tk from propagating the event further
        return "break"

    def _app_has_focus(self):
        try:
            return self.root.focus_get() is not None
        except KeyError:
            return False

    def stop(self):
        if self.listener is not None:
            self.listener.stop()
            self.listener = None
        for sequence in self.local_sequences:
            self.root.unbind_all(sequence)
        self.local_sequences = []
