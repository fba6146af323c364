"""Theme definitions for Soundboard TUI.

Each preference theme name maps to a Textual Theme that controls the base UI
colors ($background, $surface, $panel, $primary, ...) used by the app CSS.
"""

from textual.theme import Theme

# Keys match preferences.THEME_NAMES.
TEXTUAL_THEMES: dict[str, Theme] = {
    "allied": Theme(
        name="soundboard-allied",
        primary="#4a9eff",
        secondary="#7fb3d5",
        accent="#1f3a5f",
        background="#0a0f16",
        surface="#111a24",
        panel="#2a3a4d",
        success="#5cb85c",
        warning="#f0ad4e",
        error="#d9534f",
        dark=True,
    ),
    "soviet": Theme(
        name="soundboard-soviet",
        primary="#e03c31",
        secondary="#f2c14e",
        accent="#5a1a16",
        background="#120808",
        surface="#1d0f0e",
        panel="#4d2a26",
        success="#9ccc65",
        warning="#f2c14e",
        error="#ff5252",
        dark=True,
    ),
}


def textual_theme_for(name: str) -> Theme:
    """Return the Textual theme for a preference name (allied if unknown)."""
    return TEXTUAL_THEMES.get(name, TEXTUAL_THEMES["allied"])
