"""Entry point for the Confidential Faucet console."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import (
    QApplication,
    QGridLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QVBoxLayout,
    QWidget,
)

from .components import TokenCard
from .theme import BACKGROUND, FONT_FAMILY, FONT_SIZE, PALETTE, SURFACE, SURFACE_ALT, TEXT_MUTED, TEXT_PRIMARY, muted
from .tokens import TOKEN_CATALOG, TokenInfo


def configure_palette(app: QApplication) -> None:
    palette = QPalette()
    palette.setColor(QPalette.ColorRole.Window, QColor(BACKGROUND))
    palette.setColor(QPalette.ColorRole.Base, QColor(SURFACE))
    palette.setColor(QPalette.ColorRole.AlternateBase, QColor(SURFACE_ALT))
    palette.setColor(QPalette.ColorRole.Text, QColor(TEXT_PRIMARY))
    palette.setColor(QPalette.ColorRole.ButtonText, QColor(PALETTE["white"]))
    palette.setColor(QPalette.ColorRole.WindowText, QColor(TEXT_PRIMARY))
    palette.setColor(QPalette.ColorRole.Highlight, QColor(PALETTE["accent"]))
    app.setPalette(palette)

    app.setStyleSheet(
        f"""
        QWidget {{
            color: {TEXT_PRIMARY};
            font-family: '{FONT_FAMILY}';
            font-size: {FONT_SIZE}pt;
        }}
        QPushButton {{
            background-color: {PALETTE['accent']};
            color: {PALETTE['white']};
            border-radius: 8px;
            padding: 8px;
            font-weight: 600;
        }}
        QListWidget {{
            background-color: {SURFACE};
            border: 1px solid {PALETTE['border']};
            border-radius: 8px;
        }}
        QLabel#muted {{
            color: {TEXT_MUTED};
        }}
        QFrame#card {{
            background-color: {SURFACE};
            border: 1px solid {PALETTE['border']};
            border-radius: 12px;
            padding: 12px;
        }}
        """
    )


@dataclass(frozen=True)
class MintRequest:
    """A mint the user asked for from one of the cards."""

    token_type: int
    symbol: str
    encrypted: bool

    def describe(self) -> str:
        mode = "encrypted" if self.encrypted else "clear"
        return f"Mint {self.symbol} ({mode}) requested"


class FaucetConsole(QWidget):
    """Grid of token cards plus an activity log of mint requests."""

    def __init__(
        self,
        tokens: Optional[list[TokenInfo]] = None,
        amounts: Optional[Mapping[int, int]] = None,
        on_mint: Optional[Callable[[MintRequest], None]] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.tokens = list(tokens if tokens is not None else TOKEN_CATALOG)
        self.amounts = dict(amounts or {})
        self.on_mint = on_mint
        self.requests: list[MintRequest] = []
        self.cards: list[TokenCard] = []
        self.setWindowTitle("Confidential Faucet")
        self.setMinimumSize(760, 560)
        self._build()

    def _build(self) -> None:
        layout = QVBoxLayout()
        header = QLabel("Confidential Token Faucet")
        header.setStyleSheet("font-size: 20pt; font-weight: 700;")
        subtitle = QLabel(muted("Claim test tokens as a clear or encrypted mint."))

        grid = QGridLayout()
        for index, info in enumerate(self.tokens):
            card = self._card_for(info)
            grid.addWidget(card, index // 2, index % 2)
            self.cards.append(card)

        activity_label = QLabel("Activity")
        activity_label.setStyleSheet("font-size: 12pt; font-weight: 600;")
        self.activity_list = QListWidget()

        layout.addWidget(header)
        layout.addWidget(subtitle)
        layout.addLayout(grid)
        layout.addWidget(activity_label)
        layout.addWidget(self.activity_list)
        self.setLayout(layout)

    def _card_for(self, info: TokenInfo) -> TokenCard:
        display = info.to_display(self.amounts.get(int(info.token_type)))
        return TokenCard(
            display,
            on_mint_clear=lambda: self._request_mint(info, encrypted=False),
            on_mint_encrypted=lambda: self._request_mint(info, encrypted=True),
        )

    def _request_mint(self, info: TokenInfo, encrypted: bool) -> None:
        request = MintRequest(int(info.token_type), info.symbol, encrypted)
        self.requests.append(request)
        self.activity_list.addItem(QListWidgetItem(request.describe()))
        if self.on_mint:
            self.on_mint(request)


def build_window() -> QWidget:
    return FaucetConsole()


def main() -> None:
    app = QApplication(sys.argv)
    configure_palette(app)
    window = build_window()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
