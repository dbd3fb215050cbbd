"""Localisation of the Cifra window (Portuguese / English).

Detects the system language from ``LANG`` unless one is given
explicitly (``ui_language`` in the config).
"""

from __future__ import annotations

import locale
import os

SUPPORTED = ('pt', 'en')

_TRANSLATIONS: dict[str, dict[str, str]] = {
    'en': {
        # Header
        'window_title': 'Cipher Translator',
        'app_title': '🔐 Cipher Translator',
        'subtitle': 'Convert between symbols and letters secretly!',
        'example': 'Example: {symbols} → {letters}',

        # Mode toggle
        'mode_decipher': '🔓 Decipher (Symbols → Letters)',
        'mode_cipher': '🔒 Cipher (Letters → Symbols)',

        # Translation area
        'input_label_symbols': '⌨️ Type the symbols:',
        'input_label_letters': '✏️ Type the letters:',
        'input_placeholder_symbols': 'Ex: {example}',
        'input_placeholder_letters': 'Ex: {example}',
        'output_label_letters': '📝 Result (letters):',
        'output_label_symbols': '🔐 Result (symbols):',
        'output_empty': '...',

        # Keyboard / reference table
        'keyboard_hint': '💡 Click the symbols to add them:',
        'reference_title': '📋 Complete Reference Table',
        'row_0': 'QWERTY row',
        'row_1': 'ASDF row',
        'row_2': 'ZXCV row',
        'footer_tip': '💡 Tip: click any symbol in the table to add it to the text!',

        # Buttons
        'clear': 'Clear',
        'settings': 'Settings',

        # Config dialog
        'settings_title': 'Cifra Settings',
        'default_direction': 'Start in mode:',
        'ui_language': 'Language:',
        'language_auto': 'System',
        'font_size': 'Font size:',
        'show_reference_table': 'Show reference table:',
        'reset_defaults': 'Reset defaults',
        'config_save_error': 'Failed to save settings',
        'restart_hint': 'Language changes apply after restart.',
    },
    'pt': {
        # Cabeçalho
        'window_title': 'Tradutor de Cifras',
        'app_title': '🔐 Tradutor de Cifras',
        'subtitle': 'Converta entre símbolos e letras secretamente!',
        'example': 'Exemplo: {symbols} → {letters}',

        # Modos
        'mode_decipher': '🔓 Decifrar (Símbolos → Letras)',
        'mode_cipher': '🔒 Cifrar (Letras → Símbolos)',

        # Área de tradução
        'input_label_symbols': '⌨️ Digite os símbolos:',
        'input_label_letters': '✏️ Digite as letras:',
        'input_placeholder_symbols': 'Ex: {example}',
        'input_placeholder_letters': 'Ex: {example}',
        'output_label_letters': '📝 Resultado (letras):',
        'output_label_symbols': '🔐 Resultado (símbolos):',
        'output_empty': '...',

        # Teclado / tabela
        'keyboard_hint': '💡 Clique nos símbolos para adicionar:',
        'reference_title': '📋 Tabela de Referência Completa',
        'row_0': 'Linha QWERTY',
        'row_1': 'Linha ASDF',
        'row_2': 'Linha ZXCV',
        'footer_tip': '💡 Dica: Clique em qualquer símbolo na tabela para adicioná-lo ao texto!',

        # Botões
        'clear': 'Limpar',
        'settings': 'Configurações',

        # Diálogo de configurações
        'settings_title': 'Configurações do Cifra',
        'default_direction': 'Iniciar no modo:',
        'ui_language': 'Idioma:',
        'language_auto': 'Sistema',
        'font_size': 'Tamanho da fonte:',
        'show_reference_table': 'Mostrar tabela de referência:',
        'reset_defaults': 'Restaurar padrões',
        'config_save_error': 'Não foi possível salvar as configurações',
        'restart_hint': 'A mudança de idioma vale após reiniciar.',
    },
}


def detect_language() -> str:
    """Return 'pt' for a Portuguese system locale, else 'en'."""
    lang = os.environ.get('LANG', '')
    if lang:
        return 'pt' if lang.lower().startswith('pt') else 'en'
    try:
        system_locale = locale.getlocale()[0]
    except ValueError:
        system_locale = None
    if system_locale and system_locale.lower().startswith('pt'):
        return 'pt'
    return 'en'


class I18n:
    """UI string lookup for one language."""

    def __init__(self, lang: str | None = None):
        if lang and lang.lower() in SUPPORTED:
            self.lang = lang.lower()
        else:
            self.lang = detect_language()

    def t(self, key: str, **kwargs) -> str:
        """Return the string for *key*, formatted with *kwargs*.

        Unknown keys come back unchanged; a template that cannot be
        formatted is returned as-is.
        """
        lang_map = _TRANSLATIONS.get(self.lang, _TRANSLATIONS['en'])
        text = lang_map.get(key, key)
        if kwargs:
            try:
                return text.format(**kwargs)
            except (KeyError, IndexError):
                return text
        return text

    def get_lang(self) -> str:
        return self.lang

    def row_name(self, index: int) -> str:
        key = f'row_{index}'
        text = self.t(key)
        return text if text != key else f'{index + 1}'
