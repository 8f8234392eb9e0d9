"""
PDF Slide Rasterizer

Application entry point.
Converts PDF pages to image slides in a PowerPoint presentation.
"""
from __future__ import annotations

import logging

import flet as ft

from config.defaults import (
    APP_NAME,
    APP_VERSION,
    THEME_BACKGROUND,
    THEME_PRIMARY,
)
from config.settings_manager import SettingsManager
from ui.app_layout import create_app_layout
from utils.system import resource_path

# Configure root logger
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger(__name__)


def main(page: ft.Page) -> None:
    """
    Flet application main function.

    Args:
        page: Flet page instance.
    """
    page.title = f"{APP_NAME} v{APP_VERSION}"
    page.window.width = 1000
    page.window.height = 700
    page.window.min_width = 800
    page.window.min_height = 600
    page.bgcolor = THEME_BACKGROUND

    page.theme = ft.Theme(
        color_scheme_seed=THEME_PRIMARY,
    )
    page.theme_mode = ft.ThemeMode.LIGHT

    icon_path = resource_path("assets/icon.png")
    if icon_path.exists():
        page.window.icon = str(icon_path)

    logger.info("Initializing settings...")
    settings_manager = SettingsManager()

    if settings_manager.settings.is_valid():
        logger.info("Settings loaded successfully")
    else:
        logger.warning("Poppler not found - please configure in Settings page")

    logger.info("Building UI...")
    page.add(create_app_layout(page, settings_manager))

    logger.info(f"{APP_NAME} started")


def run() -> None:
    """Launch the desktop app."""
    ft.run(main)


if __name__ == "__main__":
    run()
