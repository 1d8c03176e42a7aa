"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Store holding the calculator state.
2. Instantiates the Main Window (View).
3. Passes the Store into the View so they can communicate.
"""
import logging
import sys

import pyqtgraph as pg

from texelarchitect.app.application import create_app
from texelarchitect.app.state import Store
from texelarchitect.app.ui.main_window import MainWindow
from texelarchitect.logging_config import setup_logging

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")
pg.setConfigOptions(antialias=True)


def main() -> int:
    # 1. Setup Logging (Console)
    # Use logging.DEBUG to see every input change
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Store
    store = Store()

    # 4. Initialize the Main Window, passing the store
    window = MainWindow(store)
    window.show()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
