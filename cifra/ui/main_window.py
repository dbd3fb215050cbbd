"""MainWindow — symbol keyboard, input/output panes and reference table."""

from __future__ import annotations

import logging

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont, QTextCursor
from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QGroupBox,
    QLabel, QPlainTextEdit, QPushButton,
)

from cifra.core.event_bus import EventBus
from cifra.core.events import Event, EventType, TranslationEventData
from cifra.core.maps import ROW_GROUPS, SPACE, SYMBOL_ROWS, describe_symbol
from cifra.core.session import TranslationSession
from cifra.core.translator import Direction
from cifra.i18n import I18n

logger = logging.getLogger(__name__)

EXAMPLE_SYMBOLS = "]÷#=["
EXAMPLE_LETTERS = "pedro"
SPACE_LABEL = "␣"
REFERENCE_COLUMNS = 10

STYLESHEET = """
QWidget#MainWindow { background: #16213e; color: white; }
QLabel { color: #e0e0e0; }
QLabel#title { color: #f39c12; font-weight: bold; }
QLabel#example { color: #f39c12; background: rgba(233, 69, 96, 40); border-radius: 6px; padding: 4px; }
QPushButton { background: #2d2d44; color: white; border: 1px solid #3a3a55; border-radius: 8px; padding: 6px; }
QPushButton:hover { background: #e94560; }
QPushButton:checked { background: #e94560; border-color: #f39c12; }
QPlainTextEdit { background: rgba(0, 0, 0, 80); color: white; border: 1px solid #3a3a55; border-radius: 8px; }
QPlainTextEdit#output { color: #4ade80; }
QGroupBox { color: #f39c12; border: 1px solid #3a3a55; border-radius: 8px; margin-top: 12px; }
"""


class MainWindow(QWidget):
    """Window view over a :class:`TranslationSession`.

    The window never translates on its own: user actions go to the
    session, and the panes are redrawn from ``OUTPUT_CHANGED`` events.
    """

    def __init__(
        self,
        session: TranslationSession,
        config=None,
        event_bus=None,
        i18n: I18n | None = None,
        parent=None,
    ):
        super().__init__(parent)
        self.session = session
        self.config = config
        self.event_bus = event_bus or session.event_bus or EventBus()
        session.event_bus = self.event_bus
        self.i18n = i18n or I18n()

        self.mode_buttons: dict[Direction, QPushButton] = {}
        self.symbol_buttons: dict[str, QPushButton] = {}
        self.reference_buttons: list[QPushButton] = []

        self.setObjectName("MainWindow")
        self.setWindowTitle(self.i18n.t("window_title"))
        self.setMinimumWidth(640)
        self.setStyleSheet(STYLESHEET)

        self._build_ui()
        self._apply_config()

        self.event_bus.subscribe(EventType.OUTPUT_CHANGED, self._on_output_changed)
        self.event_bus.subscribe(EventType.CONFIG_CHANGED, self._on_config_changed)

        self._render(self.session.input_text, self.session.output_text, self.session.direction)

    # -- UI construction ---------------------------------------------------

    def _build_ui(self) -> None:
        t = self.i18n.t
        layout = QVBoxLayout(self)

        # Header
        title = QLabel(t("app_title"))
        title.setObjectName("title")
        title.setAlignment(Qt.AlignCenter)
        title_font = QFont()
        title_font.setPointSize(20)
        title.setFont(title_font)
        layout.addWidget(title)

        subtitle = QLabel(t("subtitle"))
        subtitle.setAlignment(Qt.AlignCenter)
        layout.addWidget(subtitle)

        example = QLabel(t("example", symbols=EXAMPLE_SYMBOLS, letters=EXAMPLE_LETTERS))
        example.setObjectName("example")
        example.setAlignment(Qt.AlignCenter)
        layout.addWidget(example)

        # Mode toggle
        mode_row = QHBoxLayout()
        for direction, key in (
            (Direction.SYMBOL_TO_LETTER, "mode_decipher"),
            (Direction.LETTER_TO_SYMBOL, "mode_cipher"),
        ):
            btn = QPushButton(t(key))
            btn.setCheckable(True)
            btn.clicked.connect(lambda _checked=False, d=direction: self.session.switch_direction(d))
            self.mode_buttons[direction] = btn
            mode_row.addWidget(btn)
        layout.addLayout(mode_row)

        # Translation area
        panes = QHBoxLayout()

        input_box = QVBoxLayout()
        self.input_label = QLabel()
        self.input_edit = QPlainTextEdit()
        self.input_edit.textChanged.connect(self._on_input_edited)
        input_box.addWidget(self.input_label)
        input_box.addWidget(self.input_edit)
        panes.addLayout(input_box)

        output_box = QVBoxLayout()
        self.output_label = QLabel()
        self.output_view = QPlainTextEdit()
        self.output_view.setObjectName("output")
        self.output_view.setReadOnly(True)
        output_box.addWidget(self.output_label)
        output_box.addWidget(self.output_view)
        panes.addLayout(output_box)

        layout.addLayout(panes)

        # Symbol keyboard
        keyboard = QGroupBox()
        keyboard_layout = QVBoxLayout(keyboard)
        hint = QLabel(t("keyboard_hint"))
        hint.setAlignment(Qt.AlignCenter)
        keyboard_layout.addWidget(hint)
        for row in SYMBOL_ROWS:
            row_layout = QHBoxLayout()
            row_layout.addStretch()
            for symbol in row:
                btn = QPushButton(SPACE_LABEL if symbol == SPACE else symbol)
                btn.setToolTip(describe_symbol(symbol))
                btn.setFixedSize(44, 44)
                btn.setFocusPolicy(Qt.NoFocus)
                btn.clicked.connect(lambda _checked=False, s=symbol: self.session.tap_symbol(s))
                self.symbol_buttons[symbol] = btn
                row_layout.addWidget(btn)
            row_layout.addStretch()
            keyboard_layout.addLayout(row_layout)
        layout.addWidget(keyboard)

        # Reference table
        self.reference_group = QGroupBox(t("reference_title"))
        ref_layout = QVBoxLayout(self.reference_group)
        for index, group in enumerate(ROW_GROUPS):
            ref_layout.addWidget(QLabel(self.i18n.row_name(index)))
            grid = QGridLayout()
            for pos, item in enumerate(group.items):
                btn = QPushButton(f"{item.symbol} → {item.letter}")
                btn.setFocusPolicy(Qt.NoFocus)
                btn.clicked.connect(lambda _checked=False, s=item.symbol: self.session.tap_symbol(s))
                self.reference_buttons.append(btn)
                grid.addWidget(btn, pos // REFERENCE_COLUMNS, pos % REFERENCE_COLUMNS)
            ref_layout.addLayout(grid)
        layout.addWidget(self.reference_group)

        # Footer
        footer = QHBoxLayout()
        tip = QLabel(t("footer_tip"))
        footer.addWidget(tip)
        footer.addStretch()
        clear_btn = QPushButton(t("clear"))
        clear_btn.clicked.connect(lambda _checked=False: self.session.clear())
        footer.addWidget(clear_btn)
        self.settings_button = QPushButton(t("settings"))
        self.settings_button.clicked.connect(lambda _checked=False: self.open_settings())
        footer.addWidget(self.settings_button)
        layout.addLayout(footer)

    # -- rendering ---------------------------------------------------------

    def _render(self, input_text: str, output_text: str, direction: Direction) -> None:
        t = self.i18n.t
        deciphering = direction is Direction.SYMBOL_TO_LETTER

        for d, btn in self.mode_buttons.items():
            btn.setChecked(d is direction)

        self.input_label.setText(t("input_label_symbols" if deciphering else "input_label_letters"))
        self.input_edit.setPlaceholderText(
            t("input_placeholder_symbols", example=EXAMPLE_SYMBOLS) if deciphering
            else t("input_placeholder_letters", example=EXAMPLE_LETTERS)
        )
        self.output_label.setText(t("output_label_letters" if deciphering else "output_label_symbols"))
        self.output_view.setPlaceholderText(t("output_empty"))

        if self.input_edit.toPlainText() != input_text:
            self.input_edit.blockSignals(True)
            self.input_edit.setPlainText(input_text)
            self.input_edit.moveCursor(QTextCursor.End)
            self.input_edit.blockSignals(False)
        self.output_view.setPlainText(output_text)

    def _apply_config(self) -> None:
        if self.config is None:
            return
        font = QFont("monospace")
        font.setPointSize(int(self.config.get("font_size", 18)))
        self.input_edit.setFont(font)
        self.output_view.setFont(font)
        self.reference_group.setVisible(bool(self.config.get("show_reference_table", True)))

    # -- slots -------------------------------------------------------------

    def _on_input_edited(self) -> None:
        self.session.set_input(self.input_edit.toPlainText())

    def _on_output_changed(self, event: Event) -> None:
        data: TranslationEventData = event.data
        self._render(data.input_text, data.output_text, data.direction)

    def _on_config_changed(self, event: Event) -> None:
        logger.debug("Applying changed config to window")
        self._apply_config()

    def open_settings(self) -> None:
        from cifra.ui.config_dialog import ConfigDialog

        dialog = ConfigDialog(config=self.config, event_bus=self.event_bus, i18n=self.i18n, parent=self)
        dialog.exec_()

    def closeEvent(self, event) -> None:
        self.event_bus.unsubscribe(EventType.OUTPUT_CHANGED, self._on_output_changed)
        self.event_bus.unsubscribe(EventType.CONFIG_CHANGED, self._on_config_changed)
        self.event_bus.emit(EventType.APP_QUIT)
        super().closeEvent(event)
