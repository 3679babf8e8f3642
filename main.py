import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

ROOT = Path(__file__).resolve().parent
SRC_DIR = ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from core.config import AppConfig
from core.state import AppState
from ui.main_window import MainWindow

def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

def init_app_state() -> AppState:
    config = AppConfig.from_env()
    configure_logging(config)
    logger = logging.getLogger(__name__)
    logger.info("Starting with %s", config)
    for warning in config.warnings:
        logger.warning("%s", warning)
    # AppState queues config.warnings as startup toasts
    return AppState(config)

def main() -> int:
    qt_app = QApplication(sys.argv)
    qt_app.setApplicationName("Music Playlist Manager")

    app_state = init_app_state()
    main_window = MainWindow(app_state)
    main_window.show()

    return qt_app.exec()

if __name__ == "__main__":
    raise SystemExit(main())
