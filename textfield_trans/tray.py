
import logging

import pystray
from PIL import Image, ImageDraw

logger = logging.getLogger(__name__)

TITLE = "TextFieldTrans"


def _icon_image():
    image = Image.new("RGBA", (64, 64), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)
    draw.rounded_rectangle((4, 4, 60, 60), radius=12, fill=(0, 0, 0, 255))
    draw.text((22, 22), "T", fill=(255, 255, 255, 255))
    return image


class TrayIcon:
    def __init__(self, on_settings, on_quit):
        self.on_settings = on_settings
        self.on_quit = on_quit
        self.icon = None

    def build(self):
        menu = pystray.Menu(
            pystray.MenuItem("Settings", lambda icon, item: self.on_settings(), default=True),
            pystray.MenuItem("Quit", lambda icon, item: self.on_quit()),
        )
        return pystray.Icon(TITLE, _icon_image(), TITLE, menu)

    def start(self):
        """Run the icon alongside the Tk main loop. Failure only costs the tray."""
        try:
            self.icon = self.build()
            self.icon.run_detached()
        except Exception as e:
            logger.error("Tray icon unavailable: %s", e)
            self.icon = None

    def stop(self):
        if self.icon is not None:
            self.icon.stop()
            self.icon = None
