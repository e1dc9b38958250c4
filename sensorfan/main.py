import logging
import os
import sys

from PySide6 import QtWidgets, QtGui

from sensorfan.ui.main_window import MainWindow


def configure_logging() -> None:
    level_name = os.environ.get("SENSORFAN_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )


def main():
    configure_logging()

    # Set application metadata before creating QApplication
    # This ensures proper WM_CLASS on Linux for dock icon matching
    QtWidgets.QApplication.setDesktopFileName("sensorfan")

    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName("SensorFan")
    app.setOrganizationName("SensorFan")

    QtGui.QIcon.setThemeName('')
    win = MainWindow()
    win.show()
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
