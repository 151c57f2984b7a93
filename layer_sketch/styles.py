from .config_manager import CONFIG

THEME = CONFIG['theme']

def get_stylesheet():
    return f"""
    /* === GLOBAL RESET === */
    QWidget {{
        font-family: '{THEME['font_family_ui']}', sans-serif;
        font-size: {THEME['font_size']};
        color: {THEME['text_header']};
    }}

    /* === MAIN WINDOW === */
    QMainWindow {{
        background-color: {THEME['window_bg']};
    }}

    /* === DOCK WIDGETS === */
    QDockWidget::title {{
        background: {THEME['panel_bg']};
        padding: 6px;
    }}

    /* === PANEL CONTENT === */
    QFrame#PanelContent {{
        background-color: {THEME['panel_bg']};
        border-bottom: 1px solid {THEME['border_color']};
    }}

    /* === BUTTONS === */
    QPushButton {{
        background-color: {THEME['btn_default']};
        color: {THEME['btn_text']};
        border-radius: 6px;
        padding: 6px;
        font-weight: 600;
        border: none;
    }}

    QPushButton:hover, QPushButton:checked {{
        background-color: {THEME['btn_accent']};
        color: white;
    }}
    """
