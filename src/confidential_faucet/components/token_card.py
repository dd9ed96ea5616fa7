"""Card showing a single faucet token with its two mint actions."""
from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout, QWidget

from ..theme import SURFACE_ALT, TEXT_MUTED, PALETTE, token_color
from ..tokens import TokenDisplay


def _icon_style(color_key: str) -> str:
    start, end = token_color(color_key)
    return (
        "border-radius: 24px; color: white; font-size: 20pt; font-weight: 700; "
        "background-color: qlineargradient(x1:0, y1:0, x2:1, y2:1, "
        f"stop:0 {start}, stop:1 {end});"
    )


class TokenCard(QFrame):
    """Render a :class:`TokenDisplay` and forward mint clicks to the parent.

    The card holds no state of its own; the parent rebuilds it with a fresh
    ``TokenDisplay`` whenever the amount changes.
    """

    def __init__(
        self,
        token: TokenDisplay,
        on_mint_clear: Callable[[], None],
        on_mint_encrypted: Callable[[], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.token = token
        self.setObjectName("card")
        self._build(on_mint_clear, on_mint_encrypted)

    def _build(
        self,
        on_mint_clear: Callable[[], None],
        on_mint_encrypted: Callable[[], None],
    ) -> None:
        token = self.token
        layout = QVBoxLayout()
        layout.setSpacing(6)

        icon = QLabel(token.icon)
        icon.setObjectName("tokenIcon")
        icon.setProperty("colorKey", token.color)
        icon.setAlignment(Qt.AlignCenter)
        icon.setFixedSize(48, 48)
        icon.setStyleSheet(_icon_style(token.color))

        name = QLabel(token.name)
        name.setStyleSheet("font-size: 14pt; font-weight: 700;")
        symbol = QLabel(token.symbol)
        symbol.setStyleSheet(f"color: {TEXT_MUTED}; font-size: 10pt;")

        amount_box = QFrame()
        amount_box.setStyleSheet(
            f"background-color: {SURFACE_ALT}; border-radius: 8px; padding: 8px;"
        )
        amount_layout = QVBoxLayout()
        amount = QLabel(token.display_amount)
        amount.setStyleSheet(
            f"font-size: 14pt; font-weight: 700; color: {PALETTE['success']};"
        )
        amount_caption = QLabel("Claim amount")
        amount_caption.setStyleSheet(f"color: {TEXT_MUTED}; font-size: 9pt;")
        amount_layout.addWidget(amount)
        amount_layout.addWidget(amount_caption)
        amount_box.setLayout(amount_layout)

        mint_clear = QPushButton(f"Mint {token.symbol} (clear)")
        mint_clear.clicked.connect(lambda: on_mint_clear())
        mint_encrypted = QPushButton(f"Mint {token.symbol} (encrypted)")
        mint_encrypted.clicked.connect(lambda: on_mint_encrypted())

        layout.addWidget(icon)
        layout.addWidget(name)
        layout.addWidget(symbol)
        layout.addWidget(amount_box)
        layout.addWidget(mint_clear)
        layout.addWidget(mint_encrypted)
        layout.addStretch()
        self.setLayout(layout)

        self.icon_label = icon
        self.name_label = name
        self.symbol_label = symbol
        self.amount_label = amount
        self.amount_caption = amount_caption
        self.mint_clear_button = mint_clear
        self.mint_encrypted_button = mint_encrypted

    def visible_text(self) -> list[str]:
        """Texts shown by the card, top to bottom."""

        return [
            self.icon_label.text(),
            self.name_label.text(),
            self.symbol_label.text(),
            self.amount_label.text(),
            self.amount_caption.text(),
            self.mint_clear_button.text(),
            self.mint_encrypted_button.text(),
        ]
