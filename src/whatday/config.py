"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps resource locations out of the views.
2. Deployment: Resources ship inside the package (``whatday/resources``) and
   are located through importlib.resources; a PyInstaller bundle
   (sys._MEIPASS) keeps the same relative layout.

Exports:
    IMAGES_PATH (str): Absolute path to the promoted-app images.
    PROMOTED_APPS_PATH (str): Absolute path to the info panel catalog.
    MIN_YEAR, MAX_YEAR (int): Range offered by the year picker.
"""
import logging
import sys
import os
from importlib.resources import files

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to a packaged resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, "whatday", "resources", relative_path)

    return str(files("whatday.resources").joinpath(relative_path))


# Global Constants
IMAGES_PATH: str = get_resource_path("images")
PROMOTED_APPS_PATH: str = get_resource_path("promoted_apps.json")

MIN_YEAR: int = 1800
MAX_YEAR: int = 2300

LOG_LEVEL_ENV: str = "WHATDAY_LOG_LEVEL"

if not os.path.exists(PROMOTED_APPS_PATH):
    logger.warning(f"Info panel catalog not found at {PROMOTED_APPS_PATH}")
