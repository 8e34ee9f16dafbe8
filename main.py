import sys
import tkinter as tk

from textfield_trans.accessibility import AccessibilityBridge
from textfield_trans.async_runner import AsyncRunner
from textfield_trans.config_loader import EndpointConfig, default_config_path, load_config
from textfield_trans.diagnostics import log, setup_logging
from textfield_trans.input_listener import InputListener
from textfield_trans.settings_window import SettingsWindow
from textfield_trans.translation_client import TranslationClient
from textfield_trans.translator_core import TranslatorCore
from textfield_trans.tray import TrayIcon


def load_settings(config_path=None):
    """
    Attach the log handlers before reading the config so its warnings reach
    the log file, then switch files if the config names another one.
    """
    log_path = setup_logging()
    config_path = config_path or default_config_path()
    config = load_config(config_path)
    if config.get("log_file"):
        log_path = setup_logging(config["log_file"])
    return config, config_path, log_path


def main():
    print("Starting TextFieldTrans...")

    # 1. Load Config
    config, config_path, log_path = load_settings()
    if log_path:
        print(f"Logging to {log_path}")
    log("Application did finish launching")

    endpoint = EndpointConfig(config, config_path)
    if endpoint.url:
        log(f"Loaded saved API URL: {endpoint.url}")

    # 2. Initialize Components
    try:
        bridge = AccessibilityBridge()
    except ImportError as e:
        log(f"Accessibility API unavailable on this platform: {e}")
        return 1
    if not bridge.is_trusted():
        log("Accessibility access not granted. Enable it in System Settings > Privacy & Security > Accessibility.")

    client = TranslationClient(timeout=config.get("request_timeout"))
    runner = AsyncRunner()
    runner.start()

    root = tk.Tk()
    settings = SettingsWindow(root, endpoint)

    # 3. Initialize Core Logic
    core = TranslatorCore(
        bridge,
        client,
        endpoint,
        runner,
        dispatch_ui=lambda fn: root.after(0, fn),
        single_flight=bool(config.get("single_flight")),
    )

    # 4. Initialize Input Listener
    listener = InputListener(root, core.process_focused_text)
    listener.start()

    def quit_app():
        root.after(0, root.quit)

    tray = TrayIcon(on_settings=lambda: root.after(0, settings.show), on_quit=quit_app)
    tray.start()

    if endpoint.url:
        settings.hide()
    else:
        settings.show()

    print("\nRunning. Press Ctrl+C to exit.")

    try:
        root.mainloop()
    except KeyboardInterrupt:
        print("\nStopping...")
    finally:
        listener.stop()
        tray.stop()
        runner.run(client.aclose(), timeout=5)
        runner.stop()
        log("Application will terminate")
        root.destroy()

    return 0


if __name__ == "__main__":
    sys.exit(main())
