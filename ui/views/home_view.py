"""
Home view for PDF to PPTX conversion.

Provides the main conversion interface including:
- File selection
- Progress display
- Log viewer
- Conversion controls
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import flet as ft

try:
    from config.settings_manager import SettingsManager
    from core.converter import ConversionOrchestrator
    from core.models import JobOutcome
    from core.naming import output_name_for
    from core.pdf_renderer import PopplerDocumentSource
    from core.slide_builder import SlideBuilder
    from ui.log_handler import setup_logger
except ImportError:
    from ...config.settings_manager import SettingsManager
    from ...core.converter import ConversionOrchestrator
    from ...core.models import JobOutcome
    from ...core.naming import output_name_for
    from ...core.pdf_renderer import PopplerDocumentSource
    from ...core.slide_builder import SlideBuilder
    from ..log_handler import setup_logger


@dataclass
class HomeViewState:
    """Mutable state for the home view."""
    selected_file: Optional[Path] = None
    is_converting: bool = False
    worker: Optional["ConversionWorker"] = None


class ConversionWorker:
    """
    Handles PDF to PPTX conversion in a background thread.

    Communicates progress and status through Flet's PubSub system.
    A started conversion runs until it succeeds or fails.
    """

    def __init__(
        self,
        page: ft.Page,
        settings_manager: SettingsManager,
    ):
        """
        Initialize the conversion worker.

        Args:
            page: Flet page for PubSub communication.
            settings_manager: Settings manager instance.
        """
        self.page = page
        self.settings_manager = settings_manager
        self.thread: Optional[threading.Thread] = None
        self.last_outcome: Optional[JobOutcome] = None

        # Pipeline modules log through the same PubSub callback
        self.logger = setup_logger(
            "core",
            lambda msg: self.page.pubsub.send_all_on_topic("log", msg)
        )

    @property
    def is_running(self) -> bool:
        return self.thread is not None and self.thread.is_alive()

    def start(self, input_path: Path, output_dir: Path) -> None:
        """
        Start the conversion process.

        Args:
            input_path: Path to input PDF file.
            output_dir: Directory receiving the PPTX file.
        """
        if self.is_running:
            self.logger.warning("A conversion is already running")
            return

        self.thread = threading.Thread(
            target=self._process,
            args=(input_path, output_dir),
            daemon=True
        )
        self.thread.start()

    def _on_progress(self, percent: int) -> None:
        self.page.pubsub.send_all_on_topic("progress", percent / 100)

    def _process(self, input_path: Path, output_dir: Path) -> Optional[JobOutcome]:
        """
        Main conversion process (runs in background thread).

        Args:
            input_path: Path to input PDF.
            output_dir: Output directory for the PPTX.

        Returns:
            The job outcome, or None if the job could not be set up.
        """
        try:
            self.page.pubsub.send_all_on_topic("status", "busy")

            settings = self.settings_manager.settings

            # Validate settings
            if not settings.is_valid():
                self.logger.error("Invalid settings - check Poppler path and slide size")
                self.page.pubsub.send_all_on_topic("status", "error")
                self.page.pubsub.send_all_on_topic(
                    "error_message",
                    "Configuration error: Check Settings page"
                )
                return None

            canvas = settings.canvas()
            orchestrator = ConversionOrchestrator(
                source=PopplerDocumentSource(input_path, poppler_path=settings.poppler_path),
                sink=SlideBuilder(canvas),
                canvas=canvas,
                on_progress=self._on_progress,
            )
            outcome = orchestrator.run(input_path.name, output_dir)
            self.last_outcome = outcome

            if outcome.succeeded:
                # Update last output directory
                self.settings_manager.update(last_output_dir=str(output_dir))
                self.logger.info(f"Download ready: {outcome.artifact_path}")
                self.page.pubsub.send_all_on_topic("status", "done")
            else:
                self.page.pubsub.send_all_on_topic("status", "error")
                self.page.pubsub.send_all_on_topic("error_message", outcome.error)
            return outcome

        except Exception as e:
            self.logger.error(f"Unexpected error: {str(e)}")
            self.page.pubsub.send_all_on_topic("status", "error")
            self.page.pubsub.send_all_on_topic("error_message", str(e))
            return None


def create_home_view(
    page: ft.Page,
    settings_manager: SettingsManager,
) -> ft.Container:
    """
    Create the home view container.

    Args:
        page: Flet page instance.
        settings_manager: Settings manager instance.

    Returns:
        Container with home view UI.
    """
    # View state
    state = HomeViewState()
    state.worker = ConversionWorker(page, settings_manager)

    # UI elements
    file_label = ft.Text(
        "Click to select PDF file",
        size=16,
        text_align=ft.TextAlign.CENTER,
    )

    drop_icon = ft.Icon(
        ft.Icons.UPLOAD_FILE,
        size=64,
        color=ft.Colors.PURPLE_400,
    )

    progress_bar = ft.ProgressBar(
        value=0,
        visible=False,
        width=400,
    )

    progress_text = ft.Text(
        "",
        visible=False,
    )

    log_view = ft.ListView(
        expand=True,
        spacing=2,
        auto_scroll=True,
    )

    convert_button = ft.ElevatedButton(
        "Convert to PPTX",
        icon=ft.Icons.PLAY_ARROW,
        disabled=True,
        width=200,
    )

    # Drop container
    drop_container = ft.Container(
        content=ft.Column(
            controls=[drop_icon, file_label],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            alignment=ft.MainAxisAlignment.CENTER,
        ),
        width=500,
        height=200,
        border=ft.Border.all(2, ft.Colors.PURPLE_200),
        border_radius=10,
        bgcolor=ft.Colors.PURPLE_50,
        alignment=ft.Alignment(0, 0),
        ink=True,
    )

    def update_drop_container_hover(is_hover: bool) -> None:
        """Update drop container appearance on hover."""
        if is_hover:
            drop_container.border = ft.Border.all(3, ft.Colors.PURPLE_400)
            drop_container.bgcolor = ft.Colors.PURPLE_100
        else:
            drop_container.border = ft.Border.all(2, ft.Colors.PURPLE_200)
            drop_container.bgcolor = ft.Colors.PURPLE_50
        page.update()

    def on_drop_hover(e: ft.ControlEvent) -> None:
        """Handle hover events on drop container."""
        update_drop_container_hover(e.data == "true")

    # Async event handlers for file picking (Flet 0.80+ uses async FilePicker API)
    async def on_drop_click(e: ft.ControlEvent) -> None:
        """Handle click on drop container - opens file picker dialog."""
        files = await ft.FilePicker().pick_files(
            dialog_title="Select PDF file",
            allowed_extensions=["pdf"],
            allow_multiple=False,
        )
        if files and len(files) > 0:
            state.selected_file = Path(files[0].path)
            file_label.value = (
                f"Selected: {state.selected_file.name} -> "
                f"{output_name_for(state.selected_file.name)}"
            )
            convert_button.disabled = not settings_manager.settings.is_valid()
            page.update()

    drop_container.on_click = on_drop_click
    drop_container.on_hover = on_drop_hover

    async def on_convert_click(e: ft.ControlEvent) -> None:
        """Handle convert button click - asks for the output folder."""
        if state.selected_file is None or state.is_converting:
            return

        # Get last output directory
        last_dir = settings_manager.settings.last_output_dir
        initial_dir = last_dir if last_dir and Path(last_dir).exists() else None

        dir_path = await ft.FilePicker().get_directory_path(
            dialog_title="Select output folder",
            initial_directory=initial_dir,
        )

        if dir_path and state.selected_file:
            state.worker.start(state.selected_file, Path(dir_path))

    convert_button.on_click = on_convert_click

    # PubSub subscriptions
    def on_progress(topic: str, value: float) -> None:
        """Handle progress updates."""
        progress_bar.value = value
        progress_text.value = f"Converting... {int(round(value * 100))}%"
        page.update()

    def on_log(topic: str, message: str) -> None:
        """Handle log messages."""
        log_view.controls.append(
            ft.Text(
                message,
                size=12,
                font_family="monospace",
                selectable=True,
            )
        )
        # Limit log entries
        if len(log_view.controls) > 100:
            log_view.controls.pop(0)
        page.update()

    def on_status(topic: str, status: str) -> None:
        """Handle status changes."""
        state.is_converting = status == "busy"

        if status == "busy":
            convert_button.disabled = True
            progress_bar.visible = True
            progress_text.visible = True
            progress_bar.value = 0
            progress_text.value = "Converting... 0%"
        elif status in ("done", "error"):
            convert_button.disabled = not settings_manager.settings.is_valid()
            progress_bar.visible = False
            progress_text.visible = False

            if status == "done":
                page.snack_bar = ft.SnackBar(
                    content=ft.Text("Conversion completed successfully!"),
                    bgcolor=ft.Colors.GREEN,
                )
                page.snack_bar.open = True

        page.update()

    def on_error_message(topic: str, message: str) -> None:
        """Handle error messages."""
        page.snack_bar = ft.SnackBar(
            content=ft.Text(f"Error: {message}"),
            bgcolor=ft.Colors.RED,
            duration=5000,
        )
        page.snack_bar.open = True
        page.update()

    # Subscribe to PubSub topics
    page.pubsub.subscribe_topic("progress", on_progress)
    page.pubsub.subscribe_topic("log", on_log)
    page.pubsub.subscribe_topic("status", on_status)
    page.pubsub.subscribe_topic("error_message", on_error_message)

    # Build layout
    return ft.Container(
        content=ft.Column(
            controls=[
                # Header
                ft.Text(
                    "PDF to PPTX Converter",
                    size=24,
                    weight=ft.FontWeight.BOLD,
                ),
                ft.Text(
                    "Each page is captured as an image and placed on its own slide. "
                    "All processing happens locally.",
                    color=ft.Colors.GREY_600,
                ),
                ft.Divider(),

                ft.Container(height=20),

                # Drop area
                ft.Row(
                    controls=[drop_container],
                    alignment=ft.MainAxisAlignment.CENTER,
                ),

                ft.Container(height=20),

                # Progress section
                ft.Row(
                    controls=[progress_bar, progress_text],
                    alignment=ft.MainAxisAlignment.CENTER,
                    spacing=10,
                ),

                # Buttons
                ft.Row(
                    controls=[convert_button],
                    alignment=ft.MainAxisAlignment.CENTER,
                    spacing=10,
                ),

                ft.Container(height=20),

                # Log section
                ft.Text(
                    "Log",
                    size=14,
                    weight=ft.FontWeight.W_500,
                ),
                ft.Container(
                    content=log_view,
                    border=ft.Border.all(1, ft.Colors.GREY_300),
                    border_radius=5,
                    padding=10,
                    height=200,
                    expand=True,
                ),
            ],
            spacing=10,
            expand=True,
        ),
        padding=30,
        expand=True,
    )
