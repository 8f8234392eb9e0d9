"""
Settings view for configuring conversion.

Provides UI for setting the Poppler path and the slide canvas
(width, height, DPI), with validation status.
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import flet as ft

try:
    from config.settings_manager import SettingsManager
except ImportError:
    from ...config.settings_manager import SettingsManager


def parse_positive(value: str, cast: Callable[[str], float]) -> Optional[float]:
    """Parse a positive number from a text field, or None if invalid."""
    try:
        number = cast(value.strip())
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


def create_settings_view(
    page: ft.Page,
    settings_manager: SettingsManager,
    on_settings_changed: Optional[Callable[[], None]] = None
) -> ft.Container:
    """
    Create the settings view container.

    Args:
        page: Flet page instance.
        settings_manager: Settings manager for reading/writing settings.
        on_settings_changed: Optional callback when settings change.

    Returns:
        Container with settings UI.
    """
    settings = settings_manager.settings

    poppler_field = ft.TextField(
        label="Poppler bin Path",
        value=settings.poppler_path,
        hint_text=r"C:\Program Files\poppler-xx.xx.x\Library\bin",
        expand=True,
        read_only=True,
        border_color=ft.Colors.PURPLE_200,
    )

    width_field = ft.TextField(
        label="Slide width (in)",
        value=str(settings.slide_width),
        width=160,
        border_color=ft.Colors.PURPLE_200,
    )

    height_field = ft.TextField(
        label="Slide height (in)",
        value=str(settings.slide_height),
        width=160,
        border_color=ft.Colors.PURPLE_200,
    )

    dpi_field = ft.TextField(
        label="DPI",
        value=str(settings.dpi),
        width=120,
        border_color=ft.Colors.PURPLE_200,
    )

    # Status indicator
    status_icon = ft.Icon(
        ft.Icons.CHECK_CIRCLE if settings.is_valid() else ft.Icons.ERROR,
        color=ft.Colors.GREEN if settings.is_valid() else ft.Colors.RED,
    )

    status_text = ft.Text(
        value="Settings are valid" if settings.is_valid() else "Configuration incomplete",
        color=ft.Colors.GREEN if settings.is_valid() else ft.Colors.RED,
    )

    def notify_changed() -> None:
        update_status()
        if on_settings_changed:
            on_settings_changed()

    def update_status() -> None:
        """Update status display based on current settings."""
        s = settings_manager.settings

        if s.is_valid():
            status_icon.icon = ft.Icons.CHECK_CIRCLE
            status_icon.color = ft.Colors.GREEN
            status_text.value = "Settings are valid"
            status_text.color = ft.Colors.GREEN
        else:
            status_icon.icon = ft.Icons.ERROR
            status_icon.color = ft.Colors.RED

            # Build detailed error message
            missing = []
            if not s.poppler_path:
                missing.append("Poppler not found on PATH")
            elif not Path(s.poppler_path).exists():
                missing.append("Poppler directory not found")
            if not s.canvas_ok():
                missing.append("Slide size and DPI must be positive")

            status_text.value = "; ".join(missing) if missing else "Configuration incomplete"
            status_text.color = ft.Colors.RED

        page.update()

    async def browse_poppler(e: ft.ControlEvent) -> None:
        """Open directory picker for Poppler."""
        dir_path = await ft.FilePicker().get_directory_path(
            dialog_title="Select Poppler bin directory"
        )
        if dir_path:
            poppler_field.value = dir_path
            settings_manager.update(poppler_path=dir_path)
            notify_changed()

    def save_canvas(e: ft.ControlEvent) -> None:
        """Validate and store slide size and DPI."""
        width = parse_positive(width_field.value, float)
        height = parse_positive(height_field.value, float)
        dpi = parse_positive(dpi_field.value, int)

        width_field.error_text = None if width else "Positive number required"
        height_field.error_text = None if height else "Positive number required"
        dpi_field.error_text = None if dpi else "Positive integer required"

        if width and height and dpi:
            settings_manager.update(slide_width=width, slide_height=height, dpi=int(dpi))
        notify_changed()

    # Initialize status
    update_status()

    # Build UI layout
    return ft.Container(
        content=ft.Column(
            controls=[
                # Header
                ft.Text(
                    "Settings",
                    size=24,
                    weight=ft.FontWeight.BOLD,
                ),
                ft.Divider(),

                # Poppler
                ft.Text(
                    "External Dependencies",
                    size=16,
                    weight=ft.FontWeight.W_500,
                ),
                ft.Text(
                    "Poppler renders PDF pages to images. Leave empty to use "
                    "the pdftoppm found on PATH.",
                    color=ft.Colors.GREY_600,
                ),

                ft.Container(height=10),

                ft.Row(
                    controls=[
                        poppler_field,
                        ft.ElevatedButton(
                            "Browse",
                            icon=ft.Icons.FOLDER_OPEN,
                            on_click=browse_poppler,
                        ),
                    ],
                    alignment=ft.MainAxisAlignment.START,
                ),

                ft.Container(height=20),

                # Canvas
                ft.Text(
                    "Slide Canvas",
                    size=16,
                    weight=ft.FontWeight.W_500,
                ),
                ft.Text(
                    "Every page is rendered to fill the slide width at this DPI "
                    "and centered on the slide.",
                    color=ft.Colors.GREY_600,
                ),

                ft.Container(height=10),

                ft.Row(
                    controls=[
                        width_field,
                        height_field,
                        dpi_field,
                        ft.ElevatedButton(
                            "Apply",
                            icon=ft.Icons.SAVE,
                            on_click=save_canvas,
                        ),
                    ],
                    spacing=10,
                ),

                ft.Container(height=20),

                # Status display
                ft.Row(
                    controls=[status_icon, status_text],
                    spacing=10,
                ),

                ft.Container(height=30),

                # Help section
                ft.Text(
                    "Installation Help",
                    size=16,
                    weight=ft.FontWeight.W_500,
                ),
                ft.Container(height=10),

                ft.Row(
                    controls=[
                        ft.TextButton(
                            "Download Poppler",
                            icon=ft.Icons.DOWNLOAD,
                            url="https://github.com/oschwartz10612/poppler-windows/releases",
                        ),
                    ],
                    spacing=20,
                ),
            ],
            spacing=5,
            scroll=ft.ScrollMode.AUTO,
        ),
        padding=30,
        expand=True,
    )
