"""
External link dispatcher.
Hands a URL to the operating system; nothing is awaited.
"""
import logging
from typing import Callable

from PySide6.QtCore import QUrl
from PySide6.QtGui import QDesktopServices

logger = logging.getLogger(__name__)


def open_url(url_string: str, opener: Callable[[QUrl], bool] = QDesktopServices.openUrl) -> bool:
    """
    Ask the OS to open ``url_string`` in the default browser.

    Returns False without doing anything if the string is not an absolute URL.
    """
    url = QUrl(url_string, QUrl.StrictMode)
    if not url_string or not url.isValid() or url.isRelative():
        logger.warning(f"Ignoring malformed link: {url_string!r}")
        return False

    logger.info(f"Opening link: {url.toString()}")
    return bool(opener(url))
