"""
Main application layout with sidebar navigation.

Switches between the conversion (Home) and Settings views.
"""
from __future__ import annotations

import logging

import flet as ft

try:
    from config.defaults import THEME_PRIMARY
    from config.settings_manager import SettingsManager
    from ui.views.home_view import create_home_view
    from ui.views.settings_view import create_settings_view
except ImportError:
    from ..config.defaults import THEME_PRIMARY
    from ..config.settings_manager import SettingsManager
    from .views.home_view import create_home_view
    from .views.settings_view import create_settings_view

logger = logging.getLogger(__name__)


def create_app_layout(
    page: ft.Page,
    settings_manager: SettingsManager,
) -> ft.Row:
    """
    Create the main application layout.

    Args:
        page: Flet page instance.
        settings_manager: Settings manager instance.

    Returns:
        Row containing sidebar and content area.
    """
    content_area = ft.Container(expand=True)

    home_view = create_home_view(page, settings_manager)

    def on_settings_changed() -> None:
        """Callback when settings are updated."""
        logger.info(
            f"Settings updated: {settings_manager.settings.slide_width} x "
            f"{settings_manager.settings.slide_height} in @ "
            f"{settings_manager.settings.dpi} DPI"
        )
        page.update()

    settings_view = create_settings_view(
        page,
        settings_manager,
        on_settings_changed
    )

    views = [home_view, settings_view]
    content_area.content = home_view

    def on_nav_change(e: ft.ControlEvent) -> None:
        """Handle navigation selection change."""
        index = e.control.selected_index
        if 0 <= index < len(views):
            content_area.content = views[index]
        page.update()

    sidebar = ft.NavigationRail(
        selected_index=0,
        label_type=ft.NavigationRailLabelType.ALL,
        min_width=100,
        min_extended_width=200,
        bgcolor=ft.Colors.SURFACE,
        leading=ft.Container(
            content=ft.Column(
                controls=[
                    ft.Icon(
                        ft.Icons.SLIDESHOW,
                        size=32,
                        color=THEME_PRIMARY,
                    ),
                    ft.Text(
                        "PDF\nto Slides",
                        size=12,
                        text_align=ft.TextAlign.CENTER,
                        weight=ft.FontWeight.BOLD,
                    ),
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                spacing=5,
            ),
            padding=ft.Padding(top=20, bottom=20, left=0, right=0),
        ),
        destinations=[
            ft.NavigationRailDestination(
                icon=ft.Icons.HOME_OUTLINED,
                selected_icon=ft.Icons.HOME,
                label="Convert",
            ),
            ft.NavigationRailDestination(
                icon=ft.Icons.SETTINGS_OUTLINED,
                selected_icon=ft.Icons.SETTINGS,
                label="Settings",
            ),
        ],
        on_change=on_nav_change,
    )

    return ft.Row(
        controls=[
            sidebar,
            ft.VerticalDivider(width=1),
            content_area,
        ],
        expand=True,
    )
