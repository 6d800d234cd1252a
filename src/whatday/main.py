"""
Application Initialization
==========================
This module wires the model, the store and the main window together and
starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Reads today's date once and hands it to the SelectionState.
2. Loads the info panel catalog (an empty one if it cannot be read).
3. Instantiates the SelectionStore and the Main Window.
"""
import logging
import os
import sys
from typing import Optional

from whatday.app.application import create_app
from whatday.app.store import SelectionStore
from whatday.config import PROMOTED_APPS_PATH, LOG_LEVEL_ENV
from whatday.logging_config import setup_logging, level_from_name
from whatday.model.catalog import CatalogError, EMPTY_INFO_CONTENT, InfoContent, load_info_content
from whatday.model.state import CalendarDate, SelectionState
from whatday.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def load_catalog(path: str = PROMOTED_APPS_PATH) -> InfoContent:
    try:
        return load_info_content(path)
    except CatalogError as e:
        logger.warning(f"{e}. Info panel will list no apps.")
        return EMPTY_INFO_CONTENT


def main(today: Optional[CalendarDate] = None) -> int:
    # 1. Setup Logging (Console)
    setup_logging(level=level_from_name(os.environ.get(LOG_LEVEL_ENV)))

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Data Model
    state = SelectionState.from_date(today or CalendarDate.today())
    store = SelectionStore(state)

    # 4. Initialize the Main Window, passing the store
    window = MainWindow(store, load_catalog())
    window.show()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
