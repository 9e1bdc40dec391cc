"""
Theme definitions for the Passport Photo Sheet GUI.
"""


class Colors:
    # Primary Colors
    PRIMARY_BLUE = "#0364B8"
    PRIMARY_BLUE_HOVER = "#0A2767"
    PRIMARY_BLUE_PRESSED = "#0A2767"
    SECONDARY_GREEN = "#388e3c"
    SECONDARY_GREEN_HOVER = "#2e7031"
    
    # Backgrounds
    BACKGROUND = "#f5f5f5"
    SURFACE = "#ffffff"
    HOVER = "#f0f0f0"
    DISABLED_BG = "#e0e0e0"
    
    # Text
    TEXT_PRIMARY = "#1f1f1f"
    TEXT_SECONDARY = "#666666"
    TEXT_DISABLED = "#757575"
    TEXT_ON_PRIMARY = "#ffffff"
    
    # Borders & Dividers
    BORDER = "#e0e0e0"
    BORDER_FOCUS = "#28A8EA"
    DROP_BORDER = "#000000"
    
    # Status
    ERROR = "#d32f2f"
    ERROR_BG = "#f8d7da"
    SUCCESS = "#388e3c"
    WARNING = "#f57c00"
    INFO = "#1976d2"


class ColorsDark:
    """Dark theme color palette."""
    
    PRIMARY_BLUE = "#3794FF"
    PRIMARY_BLUE_HOVER = "#4FA3FF"
    PRIMARY_BLUE_PRESSED = "#2A7FE8"
    SECONDARY_GREEN = "#3FB950"
    SECONDARY_GREEN_HOVER = "#56c865"
    
    BACKGROUND = "#1e1e1e"
    SURFACE = "#252526"
    HOVER = "#21262D"
    DISABLED_BG = "#3D444D"
    
    TEXT_PRIMARY = "#E6EDF3"
    TEXT_SECONDARY = "#8B949E"
    TEXT_DISABLED = "#9CA3AF"
    TEXT_ON_PRIMARY = "#FFFFFF"
    
    BORDER = "#30363D"
    BORDER_FOCUS = "#3794FF"
    DROP_BORDER = "#8B949E"
    
    ERROR = "#F85149"
    ERROR_BG = "#3d1f1f"
    SUCCESS = "#3FB950"
    WARNING = "#D29922"
    INFO = "#58A6FF"


class Fonts:
    # Font Families
    UI_FONT = "-apple-system, 'SF Pro Text', 'Segoe UI', Roboto, Helvetica, Arial, sans-serif"
    MONO_FONT = "Consolas, Monaco, Menlo, 'Courier New', monospace"
    
    # Sizes
    H1 = "22pt"
    BODY = "14pt"
    SMALL = "12pt"
    CONSOLE = "12pt"
    
    # Weights
    WEIGHT_REGULAR = "400"
    WEIGHT_MEDIUM = "500"
    WEIGHT_BOLD = "600"


def _button(bg: str, hover: str, C) -> str:
    return f"""
        QPushButton {{
            background-color: {bg};
            color: {C.TEXT_ON_PRIMARY};
            border-radius: 6px;
            padding: 8px 16px;
            font-weight: {Fonts.WEIGHT_MEDIUM};
            border: none;
        }}
        QPushButton:hover {{
            background-color: {hover};
        }}
        QPushButton:disabled {{
            background-color: {C.DISABLED_BG};
            color: {C.TEXT_DISABLED};
        }}
    """


def _build_styles(C):
    class _Styles:
        BUTTON_PRIMARY = _button(C.PRIMARY_BLUE, C.PRIMARY_BLUE_HOVER, C)
        BUTTON_SUCCESS = _button(C.SECONDARY_GREEN, C.SECONDARY_GREEN_HOVER, C)
        
        BUTTON_CLEAR = f"""
            QPushButton {{
                background-color: {C.SURFACE};
                color: {C.TEXT_SECONDARY};
                border: 1px solid {C.BORDER};
                border-radius: 15px;
                font-weight: {Fonts.WEIGHT_BOLD};
            }}
            QPushButton:hover {{
                border-color: {C.BORDER_FOCUS};
            }}
        """
        
        DROP_ZONE = f"""
            QFrame#DropZone {{
                border: 2px dashed {C.DROP_BORDER};
                border-radius: 4px;
                background-color: {C.SURFACE};
            }}
            QFrame#DropZone[dragActive="true"] {{
                border-color: {C.BORDER_FOCUS};
                background-color: {C.HOVER};
            }}
        """
        
        ERROR_BANNER = f"""
            QLabel {{
                background-color: {C.ERROR_BG};
                color: {C.ERROR};
                border: 1px solid {C.ERROR};
                border-radius: 4px;
                padding: 10px;
            }}
        """
    return _Styles


Styles = _build_styles(Colors)
StylesDark = _build_styles(ColorsDark)


def _global_stylesheet(C) -> str:
    return f"""
    * {{
        font-family: {Fonts.UI_FONT};
        font-size: {Fonts.BODY};
        color: {C.TEXT_PRIMARY};
    }}

    QMainWindow, QWidget {{
        background-color: {C.BACKGROUND};
    }}

    QLabel {{
        background-color: transparent;
        color: {C.TEXT_PRIMARY};
    }}

    QMenuBar, QMenu {{
        background-color: {C.BACKGROUND};
        color: {C.TEXT_PRIMARY};
        border: none;
    }}

    QStatusBar {{
        background-color: {C.SURFACE};
        color: {C.TEXT_SECONDARY};
    }}
    """


# Global application stylesheet to enforce the palette
# across all widgets (helps avoid inheriting OS dark mode on Windows).
GLOBAL_STYLESHEET = _global_stylesheet(Colors)
GLOBAL_STYLESHEET_DARK = _global_stylesheet(ColorsDark)


def apply_theme(app, is_dark: bool = False) -> None:
    """
    Apply the appropriate stylesheet (light or dark) to the QApplication.
    """
    set_dark_mode(is_dark)
    app.setStyleSheet(GLOBAL_STYLESHEET_DARK if is_dark else GLOBAL_STYLESHEET)

# Module-level dark mode state (set explicitly when theme changes)
_is_dark_mode = False

def set_dark_mode(is_dark: bool):
    """Explicitly set the dark mode state."""
    global _is_dark_mode
    _is_dark_mode = is_dark

def get_colors():
    """Get the appropriate color palette based on current theme."""
    return ColorsDark if _is_dark_mode else Colors


def get_styles():
    """Get the appropriate styles based on current theme."""
    return StylesDark if _is_dark_mode else Styles
