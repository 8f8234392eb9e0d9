"""
Settings management class
- Save/load settings in JSON format
- Auto-detect Poppler path
- Provide the slide canvas used for conversion jobs
"""
from __future__ import annotations
import json
import shutil
import logging
from pathlib import Path
from dataclasses import dataclass, asdict
from typing import TYPE_CHECKING, Optional

try:
    from utils.system import get_app_data_dir
except ImportError:
    from ..utils.system import get_app_data_dir
from .defaults import (
    SETTINGS_FILENAME,
    DEFAULT_POPPLER_PATHS,
    DEFAULT_SLIDE_WIDTH_IN,
    DEFAULT_SLIDE_HEIGHT_IN,
    DEFAULT_DPI,
)

if TYPE_CHECKING:
    from core.models import SlideCanvas

logger = logging.getLogger(__name__)

@dataclass
class Settings:
    """Application settings"""
    poppler_path: str = ""
    slide_width: float = DEFAULT_SLIDE_WIDTH_IN
    slide_height: float = DEFAULT_SLIDE_HEIGHT_IN
    dpi: int = DEFAULT_DPI
    last_output_dir: str = ""

    def poppler_ok(self) -> bool:
        """Check that Poppler is reachable (configured dir or PATH)"""
        if self.poppler_path:
            return Path(self.poppler_path).exists()
        return shutil.which("pdftoppm") is not None

    def canvas_ok(self) -> bool:
        return self.slide_width > 0 and self.slide_height > 0 and self.dpi > 0

    def is_valid(self) -> bool:
        """Check if settings are valid"""
        return self.poppler_ok() and self.canvas_ok()

    def canvas(self) -> SlideCanvas:
        """Slide canvas built from the configured size and DPI"""
        from core.models import SlideCanvas

        return SlideCanvas(
            width=float(self.slide_width),
            height=float(self.slide_height),
            dpi=int(self.dpi),
        )


class SettingsManager:
    """Manages settings reading, writing, and auto-detection"""

    def __init__(self, settings_path: Optional[Path] = None):
        if settings_path is None:
            settings_path = get_app_data_dir() / SETTINGS_FILENAME
        self._settings_path = Path(settings_path)
        self._settings: Settings = Settings()
        self._load()

        # Auto-detect Poppler if not set or invalid
        if self._settings.poppler_path and not Path(self._settings.poppler_path).exists():
            self._settings.poppler_path = ""
        if not self._settings.poppler_path:
            detected = self._detect_poppler()
            if detected:
                self._settings.poppler_path = str(detected)

        self._save()

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def settings_path(self) -> Path:
        return self._settings_path

    def update(self, **kwargs) -> None:
        """Update settings and save"""
        for key, value in kwargs.items():
            if hasattr(self._settings, key):
                setattr(self._settings, key, value)
            else:
                logger.warning(f"Ignoring unknown setting: {key}")
        self._save()

    def _load(self) -> None:
        """Load settings from file"""
        if self._settings_path.exists():
            try:
                with open(self._settings_path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                    self._settings = Settings(**data)
            except (json.JSONDecodeError, TypeError):
                logger.warning(f"Unreadable settings file, using defaults: {self._settings_path}")
                self._settings = Settings()

    def _save(self) -> None:
        """Save settings to file"""
        try:
            with open(self._settings_path, 'w', encoding='utf-8') as f:
                json.dump(asdict(self._settings), f, indent=2, ensure_ascii=False)
        except (IOError, OSError) as e:
            logger.error(f"Failed to save settings: {e}")

    def _detect_poppler(self) -> Optional[Path]:
        """Auto-detect Poppler"""
        # Search for pdftoppm using shutil.which
        which_result = shutil.which("pdftoppm")
        if which_result:
            return Path(which_result).parent

        # Check default paths
        for path in DEFAULT_POPPLER_PATHS:
            if path.exists():
                return path

        # Search for different versions using wildcards (Windows)
        program_files = Path(r"C:\Program Files")
        if program_files.exists():
            for poppler_dir in program_files.glob("poppler-*"):
                for bin_path in ["Library/bin", "bin"]:
                    candidate = poppler_dir / bin_path
                    if candidate.exists():
                        return candidate

        return None
