"""CifraApp — wires config, event bus, session and the Qt window."""

from __future__ import annotations

import logging
import signal
import sys

from cifra.config import ConfigManager
from cifra.core.event_bus import EventBus
from cifra.core.events import EventType
from cifra.core.session import TranslationSession
from cifra.i18n import I18n

logger = logging.getLogger(__name__)


class CifraApp:
    """Single-window application.

    Everything except the Qt objects is built in ``__init__`` so tests can
    drive the session without a display; ``run()`` creates the
    ``QApplication`` and blocks in its event loop.
    """

    def __init__(self, debug: bool = False, config_path: str | None = None):
        self.debug = debug
        self._running = False
        self.interrupted = False

        self.config = ConfigManager(config_path=config_path, debug=debug)

        self.event_bus = EventBus()
        self.session = TranslationSession(
            direction=self.config.default_direction,
            event_bus=self.event_bus,
            debug=debug or self.config.get('debug', False),
        )

        language = self.config.get('ui_language', 'auto')
        self.i18n = I18n(None if language == 'auto' else language)

        self.event_bus.subscribe(EventType.CONFIG_CHANGED, self._on_config_changed)

    def _on_config_changed(self, event) -> None:
        if self.debug:
            logger.debug("Config changed: %s", event.data)

    def _on_interrupt(self, qt_app) -> None:
        logger.info("Cifra window interrupted (Ctrl+C)")
        self.interrupted = True
        qt_app.quit()

    def run(self) -> int:
        """Show the main window and run the Qt event loop.

        Returns the loop's exit code, or 130 when Ctrl+C closed the window.
        """
        from PyQt5.QtCore import QTimer
        from PyQt5.QtWidgets import QApplication
        from cifra.ui.main_window import MainWindow

        qt_app = QApplication.instance() or QApplication(sys.argv)
        qt_app.setApplicationName("cifra")

        window = MainWindow(
            session=self.session,
            config=self.config,
            event_bus=self.event_bus,
            i18n=self.i18n,
        )

        def _on_quit(event):
            qt_app.quit()
        self.event_bus.subscribe(EventType.APP_QUIT, _on_quit)

        # The timer wakes the interpreter so the SIGINT handler runs during exec_()
        previous_handler = signal.signal(
            signal.SIGINT, lambda signum, frame: self._on_interrupt(qt_app))
        wakeup = QTimer()
        wakeup.timeout.connect(lambda: None)
        wakeup.start(200)

        window.show()
        self._running = True
        logger.info("Cifra window started (direction=%s, lang=%s)",
                    self.session.direction.value, self.i18n.get_lang())
        try:
            code = qt_app.exec_()
        finally:
            wakeup.stop()
            signal.signal(signal.SIGINT, previous_handler)
            self.stop()
        return 130 if self.interrupted else code

    def stop(self) -> None:
        """Safe to call multiple times."""
        if self._running:
            logger.info("Cifra window closed")
        self._running = False
