
import enum
import functools
import itertools
import logging
import threading
from dataclasses import dataclass

from textfield_trans.errors import AccessError, TranslateError

logger = logging.getLogger(__name__)


class PipelineState(enum.Enum):
    IDLE = "idle"
    CAPTURING = "capturing"
    TRANSLATING = "translating"
    REPLACING = "replacing"


@dataclass
class PipelineRun:
    run_id: int
    state: PipelineState = PipelineState.IDLE
    element: object = None
    source_text: str = None

    def move_to(self, state):
        logger.debug("[run %d] %s -> %s", self.run_id, self.state.value, state.value)
        self.state = state


class TranslatorCore:
    """
    Capture -> translate -> replace.

    Capturing and replacing run on the UI thread; ``dispatch_ui`` must hand a
    callable over to it (``root.after(0, fn)`` in the app). Translating runs on
    the async runner's loop.
    """

    def __init__(self, bridge, client, endpoint, runner, dispatch_ui, single_flight=False):
        self.bridge = bridge
        self.client = client
        self.endpoint = endpoint
        self.runner = runner
        self.dispatch_ui = dispatch_ui
        self.single_flight = single_flight

        self._run_ids = itertools.count(1)
        self._busy = False
        self._busy_lock = threading.Lock()

    def _claim(self):
        with self._busy_lock:
            if self._busy:
                return False
            self._busy = True
            return True

    def _finish(self, run):
        run.move_to(PipelineState.IDLE)
        if self.single_flight:
            with self._busy_lock:
                self._busy = False

    def process_focused_text(self):
        """
        Main workflow entry point, called on the UI thread for every hotkey press.
        Returns the Future of the translate stage, or None if the run ended early.
        """
        run = PipelineRun(next(self._run_ids))

        if self.single_flight and not self._claim():
            logger.info("[run %d] Previous translation still running, ignoring hotkey", run.run_id)
            return None

        # 1. Read the focused field
        run.move_to(PipelineState.CAPTURING)
        try:
            captured = self.bridge.get_focused_text()
        except AccessError as e:
            logger.info("[run %d] Could not read text from the focused field: %s", run.run_id, e)
            self._finish(run)
            return None
        except Exception:
            logger.exception("[run %d] Unexpected error while reading the focused field", run.run_id)
            self._finish(run)
            return None

        run.element = captured.element
        run.source_text = captured.text
        logger.info("[run %d] Captured %d characters", run.run_id, len(run.source_text))

        # 2. Translate off the UI thread
        run.move_to(PipelineState.TRANSLATING)
        return self.runner.submit(self._translate_and_replace(run))

    async def _translate_and_replace(self, run):
        try:
            translated = await self.client.translate(run.source_text, self.endpoint.url)
        except TranslateError as e:
            logger.info("[run %d] Translation request failed: %s", run.run_id, e)
            logger.info("[run %d] Translation failed or returned nothing, kept original text", run.run_id)
            self._finish(run)
            return None
        except Exception:
            logger.exception("[run %d] Unexpected error while translating, kept original text", run.run_id)
            self._finish(run)
            return None

        # 3. Write back on the UI thread
        run.move_to(PipelineState.REPLACING)
        try:
            self.dispatch_ui(functools.partial(self._replace, run, translated))
        except RuntimeError as e:
            # Tk refuses callbacks once the main loop has exited
            logger.info("[run %d] UI is gone, dropping translation: %s", run.run_id, e)
            self._finish(run)
            return None
        return translated

    def _replace(self, run, translated):
        try:
            self.bridge.set_text(run.element, translated)
        except AccessError as e:
            logger.info("[run %d] Failed to replace text: %s", run.run_id, e)
        else:
            logger.info("[run %d] Replaced text", run.run_id)
        finally:
            self._finish(run)
