# main.py
from __future__ import annotations
import sys
import logging
from pathlib import Path

from PySide6.QtWidgets import QApplication, QMessageBox

from app.config import load_settings
from app.errors import ConfigError
from ui.main_window import MainWindow


def setup_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler("keyrace.log", encoding="utf-8"),
        ],
    )

    # Log any uncaught exceptions rather than silently dying
    def excepthook(exctype, value, tb):
        logging.critical("Unhandled exception", exc_info=(exctype, value, tb))
        try:
            QMessageBox.critical(
                None, "Keyrace Error", f"{exctype.__name__}: {value}"
            )
        except Exception:
            logging.exception("Could not show error dialog")
        sys.exit(1)

    sys.excepthook = excepthook


def load_stylesheet(app: QApplication) -> None:
    qss = Path("resources/style.qss")
    if qss.exists():
        try:
            app.setStyleSheet(qss.read_text(encoding="utf-8"))
        except OSError as e:
            logging.warning("Failed to load stylesheet: %s", e)


def main() -> int:
    setup_logging()
    try:
        settings = load_settings()
    except ConfigError as e:
        logging.error("Invalid settings: %s", e)
        return 1
    logging.getLogger().setLevel(settings.log_level)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Keyrace")
    app.setOrganizationName("Keyrace")

    load_stylesheet(app)

    win = MainWindow(settings)
    win.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
