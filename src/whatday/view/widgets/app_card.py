"""Card widget advertising one promoted app."""
from __future__ import annotations

import logging
import os
from typing import Callable

from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QPushButton
from PySide6.QtGui import QPixmap
from PySide6.QtCore import Qt

from whatday.config import IMAGES_PATH
from whatday.model.catalog import PromotedApp

logger = logging.getLogger(__name__)

IMAGE_SIZE = 90


class AppCard(QWidget):
    def __init__(self, app: PromotedApp, open_link: Callable[[str], bool], parent=None) -> None:
        """Initialize the card.

        Args:
            app: The promoted app shown on the card.
            open_link: Called with the app URL when "Try" is pressed.
        """
        super().__init__(parent)
        self.app = app
        self._open_link = open_link

        layout = QVBoxLayout(self)

        # Image (optional, cards without a bundled image just skip it)
        self.lbl_image = QLabel()
        self.lbl_image.setAlignment(Qt.AlignCenter)
        pixmap = self._load_image(app.image_ref)
        if pixmap is not None:
            self.lbl_image.setPixmap(pixmap)
            layout.addWidget(self.lbl_image)

        self.lbl_name = QLabel(app.name)
        self.lbl_name.setStyleSheet("font-size: 16pt;")
        layout.addWidget(self.lbl_name)

        self.lbl_description = QLabel(app.description)
        self.lbl_description.setWordWrap(True)
        self.lbl_description.setStyleSheet("font-size: 9pt;")
        layout.addWidget(self.lbl_description)

        self.btn_try = QPushButton("Try")
        self.btn_try.setMinimumHeight(36)
        self.btn_try.clicked.connect(self.on_try_clicked)
        layout.addWidget(self.btn_try)

    def on_try_clicked(self) -> None:
        self._open_link(self.app.url)

    @staticmethod
    def _load_image(image_ref: str) -> QPixmap | None:
        path = os.path.join(IMAGES_PATH, f"{image_ref}.png")
        if not image_ref or not os.path.exists(path):
            logger.debug(f"No image for '{image_ref}' at {path}")
            return None
        pixmap = QPixmap(path)
        if pixmap.isNull():
            logger.warning(f"Could not load image: {path}")
            return None
        return pixmap.scaled(IMAGE_SIZE, IMAGE_SIZE, Qt.KeepAspectRatioByExpanding, Qt.SmoothTransformation)
