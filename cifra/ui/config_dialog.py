"""ConfigDialog — settings window."""

from __future__ import annotations

from PyQt5.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout,
    QCheckBox, QComboBox, QSpinBox,
    QPushButton, QDialogButtonBox, QLabel, QMessageBox,
)

from cifra.config import DEFAULT_CONFIG, FONT_SIZE_RANGE, UI_LANGUAGES
from cifra.core.events import EventType
from cifra.core.translator import Direction
from cifra.i18n import I18n


class ConfigDialog(QDialog):
    """Settings dialog opened from the main window.

    Displays all user-configurable options and saves via ConfigManager.
    """

    def __init__(self, config=None, event_bus=None, i18n: I18n | None = None, parent=None):
        super().__init__(parent)
        self.config = config
        self.event_bus = event_bus
        self.i18n = i18n or I18n()

        self.setWindowTitle(self.i18n.t("settings_title"))
        self.setMinimumWidth(360)

        self._build_ui()
        self._load_values()

    # -- UI construction ---------------------------------------------------

    def _build_ui(self) -> None:
        t = self.i18n.t
        layout = QVBoxLayout(self)

        form = QFormLayout()

        self._direction_combo = QComboBox()
        self._direction_combo.addItem(t("mode_decipher"), Direction.SYMBOL_TO_LETTER.value)
        self._direction_combo.addItem(t("mode_cipher"), Direction.LETTER_TO_SYMBOL.value)
        form.addRow(t("default_direction"), self._direction_combo)

        self._language_combo = QComboBox()
        for code in UI_LANGUAGES:
            label = t("language_auto") if code == "auto" else code.upper()
            self._language_combo.addItem(label, code)
        form.addRow(t("ui_language"), self._language_combo)

        self._font_spin = QSpinBox()
        self._font_spin.setRange(*FONT_SIZE_RANGE)
        self._font_spin.setSingleStep(1)
        form.addRow(t("font_size"), self._font_spin)

        self._reference_cb = QCheckBox()
        form.addRow(t("show_reference_table"), self._reference_cb)

        layout.addLayout(form)
        layout.addWidget(QLabel(t("restart_hint")))

        btn_layout = QHBoxLayout()

        reset_btn = QPushButton(t("reset_defaults"))
        reset_btn.clicked.connect(self._reset_defaults)
        btn_layout.addWidget(reset_btn)

        btn_layout.addStretch()

        button_box = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        button_box.accepted.connect(self.accept)
        button_box.rejected.connect(self.reject)
        btn_layout.addWidget(button_box)

        layout.addLayout(btn_layout)

    # -- value management --------------------------------------------------

    @staticmethod
    def _select_data(combo: QComboBox, value) -> None:
        index = combo.findData(value)
        if index >= 0:
            combo.setCurrentIndex(index)

    def _show_values(self, values: dict) -> None:
        self._select_data(self._direction_combo, values.get("default_direction"))
        self._select_data(self._language_combo, values.get("ui_language"))
        self._font_spin.setValue(int(values.get("font_size", DEFAULT_CONFIG["font_size"])))
        self._reference_cb.setChecked(bool(values.get("show_reference_table", True)))

    def _load_values(self) -> None:
        """Load current config values into widgets."""
        if self.config is None:
            self._show_values(DEFAULT_CONFIG)
            return
        self._show_values(self.config.get_all())

    def _apply_values(self) -> bool:
        """Write widget values back to ConfigManager and save."""
        if self.config is None:
            return True
        self.config.update({
            "default_direction": self._direction_combo.currentData(),
            "ui_language": self._language_combo.currentData(),
            "font_size": self._font_spin.value(),
            "show_reference_table": self._reference_cb.isChecked(),
        })
        return self.config.save()

    def _reset_defaults(self) -> None:
        """Reset widgets to DEFAULT_CONFIG values."""
        self._show_values(DEFAULT_CONFIG)

    # -- QDialog overrides -------------------------------------------------

    def accept(self) -> None:
        """Save config and publish CONFIG_CHANGED event."""
        if not self._apply_values():
            QMessageBox.warning(self, self.i18n.t("settings_title"), self.i18n.t("config_save_error"))
        if self.event_bus is not None:
            self.event_bus.emit(EventType.CONFIG_CHANGED, self.config.get_all() if self.config else None)
        super().accept()
