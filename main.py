"""
Just Move It - Main Entry Point
Presses a harmless key at a fixed interval so the host never goes idle.
"""
import argparse
import sys

from PyQt5.QtWidgets import QApplication

from core.exceptions import KeyPressError
from core.key_presser import KeyPresser
from core.session_controller import SessionController
from ui.main_window import MainWindow
from utils.config_manager import ConfigManager
from utils.logger import setup_logger, teardown_logger


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Keep the host awake by pressing a key periodically.")
    parser.add_argument("--config", default="config.yaml", help="Path to the YAML configuration file")
    return parser.parse_args(argv)


def main(argv=None):
    """Application entry point."""
    args = parse_args(argv)

    # Load configuration FIRST
    config = ConfigManager()
    config_missing = False
    try:
        config.load_config(args.config)
    except FileNotFoundError:
        config_missing = True

    logger = setup_logger(
        log_file=config.get('logging.file'),
        level=config.get('logging.level', "INFO"),
        max_bytes=int(config.get('logging.max_bytes', 10485760)),
        backup_count=int(config.get('logging.backup_count', 5)),
    )
    controller = None
    try:
        if config_missing:
            logger.warning(f"Config file {args.config} not found, using defaults")

        try:
            settings = config.session_settings()
        except (ValueError, TypeError) as e:
            logger.error(f"Invalid session configuration in {args.config}: {e}")
            logger.info("Exiting application")
            return 1

        app = QApplication.instance() or QApplication(sys.argv[:1])
        app.setApplicationName(config.get('app.title', "Just Move It"))

        key_presser = KeyPresser(settings.key, logger=logger)
        try:
            key_presser.initialize()
        except KeyPressError as e:
            logger.error(f"Failed to initialize keyboard binding: {e}")
            logger.info("Exiting application")
            return 1

        controller = SessionController(key_presser, logger=logger)
        window = MainWindow(config, controller, logger, defaults=settings)
        window.center()
        window.show()
        logger.info("Application started")

        return app.exec_()
    finally:
        if controller is not None:
            controller.shutdown()
        teardown_logger(logger)


if __name__ == "__main__":
    sys.exit(main())
