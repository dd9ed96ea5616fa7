"""Color palette for the Confidential Faucet console."""

from __future__ import annotations

PALETTE = {
    "ink": "#1f2933",
    "white": "#FFFFFF",
    "panel": "#f8f9fa",
    "accent": "#4f46e5",
    "success": "#28a745",
    "muted": "#666666",
    "border": "#e1e4e8",
}

BACKGROUND = "#eef1f6"
SURFACE = PALETTE["white"]
SURFACE_ALT = PALETTE["panel"]
TEXT_PRIMARY = PALETTE["ink"]
TEXT_MUTED = PALETTE["muted"]

FONT_FAMILY = "Segoe UI"
FONT_SIZE = 11

# Icon gradient endpoints keyed by the token color key.
TOKEN_COLORS: dict[str, tuple[str, str]] = {
    "blue": ("#627eea", "#3c5bd8"),
    "orange": ("#f7931a", "#e07b00"),
    "green": ("#2775ca", "#26a17b"),
    "yellow": ("#f5ac37", "#e49b1f"),
    "purple": ("#8b5cf6", "#6d28d9"),
}
DEFAULT_TOKEN_COLOR = ("#9aa5b1", "#7b8794")


def token_color(key: str) -> tuple[str, str]:
    """Return the icon gradient for a color key, neutral grey when unknown."""

    return TOKEN_COLORS.get(key, DEFAULT_TOKEN_COLOR)


def muted(text: str) -> str:
    """Return inline HTML to render muted helper text."""

    return f"<span style='color: {TEXT_MUTED};'>{text}</span>"


__all__ = [
    "PALETTE",
    "BACKGROUND",
    "SURFACE",
    "SURFACE_ALT",
    "TEXT_PRIMARY",
    "TEXT_MUTED",
    "FONT_FAMILY",
    "FONT_SIZE",
    "TOKEN_COLORS",
    "DEFAULT_TOKEN_COLOR",
    "token_color",
    "muted",
]
