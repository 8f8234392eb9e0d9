"""
Application default settings and constants
"""
from pathlib import Path
import sys

# =============================================================================
# Application Information
# =============================================================================
APP_NAME = "PDF Slide Rasterizer"
APP_VERSION = "1.0.0"

# =============================================================================
# Slide Canvas Settings
# =============================================================================
DEFAULT_SLIDE_WIDTH_IN = 10.0     # 16:9 slide width (inches)
DEFAULT_SLIDE_HEIGHT_IN = 5.625   # 16:9 slide height (inches)
DEFAULT_DPI = 96                  # Raster pixels per slide inch

# =============================================================================
# Layout Settings
# =============================================================================
PLACEMENT_DECIMALS = 2            # Fixed-point places for placement values (inches)
SLIDE_IMAGE_FORMAT = "PNG"        # Lossless encoding for slide images

# =============================================================================
# File Naming
# =============================================================================
SOURCE_EXTENSION = ".pdf"
DECK_EXTENSION = ".pptx"

# =============================================================================
# Windows Default Paths
# =============================================================================
if sys.platform == 'win32':
    # Note: Poppler for Windows may have bin or Library\bin depending on distribution
    DEFAULT_POPPLER_PATHS = [
        Path(r"C:\Program Files\poppler-24.02.0\Library\bin"),
        Path(r"C:\Program Files\poppler-24.02.0\bin"),
        Path(r"C:\Program Files\poppler\Library\bin"),
        Path(r"C:\Program Files\poppler\bin"),
        Path(r"C:\poppler\Library\bin"),
        Path(r"C:\poppler\bin"),
    ]
else:
    # macOS/Linux: assume poppler-utils is on PATH
    DEFAULT_POPPLER_PATHS = []

# =============================================================================
# UI Theme Colors
# =============================================================================
THEME_PRIMARY = "#7B1FA2"      # Purple
THEME_SECONDARY = "#00897B"    # Teal
THEME_BACKGROUND = "#FAFAFA"   # Light Grey
THEME_SURFACE = "#FFFFFF"      # White
THEME_ERROR = "#D32F2F"        # Red
THEME_TEXT_PRIMARY = "#212121"
THEME_TEXT_SECONDARY = "#757575"

# =============================================================================
# Settings File
# =============================================================================
SETTINGS_FILENAME = "settings.json"
