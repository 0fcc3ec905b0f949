#!/usr/bin/env python3
"""
SlidePrompter Application Entry Point

Launches the always-on-top prompter window.

Usage:
    slide-prompter [--config PATH] [--data-dir DIR] [--debug]

    or

    python -m slide_prompter.ui.main
"""

import argparse
import logging
import os
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont

from slide_prompter import __version__
from slide_prompter.utils import config
from slide_prompter.utils.logging import setup_logging
from slide_prompter.ui.main_window import MainWindow
from slide_prompter.ui.theme import TYPOGRAPHY


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="slide-prompter", description="Per-slide teleprompter window")
    parser.add_argument("--config", help="YAML file overriding configuration values")
    parser.add_argument("--data-dir", help="Directory for scripts and settings")
    parser.add_argument("--log-file", help="Also write the log to this file")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv=None):
    """Application entry point."""
    args = parse_args(argv)

    logger = setup_logging(
        level=logging.DEBUG if args.debug else logging.INFO,
        log_file=args.log_file,
    )
    logger.info("Starting SlidePrompter %s", __version__)

    if args.config:
        try:
            config.load_config_file(args.config)
        except ValueError as e:
            logger.error("%s", e)
            return 2
    if args.data_dir:
        os.environ[config.DATA_DIR_ENV] = args.data_dir

    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv[:1])
    app.setApplicationName(config.APP_NAME)
    app.setApplicationVersion(__version__)
    app.setOrganizationName(config.APP_NAME)
    app.setFont(QFont(TYPOGRAPHY.FONT_FAMILY, TYPOGRAPHY.SIZE_NORMAL))

    window = MainWindow()
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
