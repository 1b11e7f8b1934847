import logging
import os
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

ROOT = Path(__file__).resolve().parent
SRC_DIR = ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from core.config import load_config
from core.imagen_client import ImagenClient
from core.orchestrator import GenerationOrchestrator
from core.state import AppState, Notify
from player.player import Player
from ui.main_window import MainWindow

logger = logging.getLogger("songcanvas")

def configure_logging() -> None:
    level_name = (os.getenv("SONGCANVAS_LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

def init_app_state() -> AppState:
    config = load_config()
    app_state = AppState(config)

    if not config.has_api_key:
        logger.warning("API_KEY environment variable is not set; image generation will fail.")
        app_state.queued_notifications.append(
            Notify(message="Image API key is not configured. Set API_KEY to generate images.", notify_type="warn")
        )

    try:
        app_state.player = Player()
    except Exception as e:
        logger.exception("Failed to initialize audio player")
        app_state.player = None
        app_state.queued_notifications.append(
            Notify(message=f"Failed to initialize audio player: {e}", notify_type="error")
        )

    return app_state

def main() -> int:
    configure_logging()
    qt_app = QApplication(sys.argv)

    app_state = init_app_state()
    orchestrator = GenerationOrchestrator(ImagenClient.from_config(app_state.config))

    main_window = MainWindow(app_state, orchestrator)
    main_window.show()

    return qt_app.exec()

if __name__ == "__main__":
    raise SystemExit(main())
