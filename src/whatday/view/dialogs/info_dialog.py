"""
Modal Dialog explaining the app and listing other apps
"""
from __future__ import annotations

import html
from typing import Callable

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QLabel, QPushButton, QScrollArea, QWidget, QFrame
)

from whatday.model.catalog import InfoContent
from whatday.view.links import open_url
from whatday.view.widgets.app_card import AppCard


class InfoDialog(QDialog):
    def __init__(
        self,
        content: InfoContent,
        open_link: Callable[[str], bool] = open_url,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("What Day?")
        self.resize(360, 600)
        self.content = content
        self.cards: list[AppCard] = []

        outer_layout = QVBoxLayout(self)

        scroller = QScrollArea()
        scroller.setWidgetResizable(True)
        inner = QWidget()
        layout = QVBoxLayout(inner)

        # --- Promoted apps ---
        layout.addWidget(self._section_header(content.ads_title))
        for app in content.apps:
            card = AppCard(app, open_link)
            self.cards.append(card)
            layout.addWidget(card)
            layout.addWidget(self._divider())

        # --- Explanation ---
        layout.addWidget(self._section_header(content.functionality_title))
        self.lbl_explain = QLabel("\n".join(f"• {line}" for line in content.functionality_lines))
        self.lbl_explain.setWordWrap(True)
        layout.addWidget(self.lbl_explain)
        layout.addStretch()

        scroller.setWidget(inner)
        outer_layout.addWidget(scroller)

        self.btn_close = QPushButton("Close")
        self.btn_close.setMinimumHeight(40)
        self.btn_close.clicked.connect(self.accept)
        outer_layout.addWidget(self.btn_close)

    @staticmethod
    def _section_header(title: str) -> QLabel:
        lbl = QLabel(f"<b>{html.escape(title)}</b>")
        lbl.setStyleSheet("font-size: 14pt;")
        return lbl

    @staticmethod
    def _divider() -> QFrame:
        line = QFrame()
        line.setFrameShape(QFrame.HLine)
        line.setFrameShadow(QFrame.Sunken)
        return line
