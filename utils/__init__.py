"""System helpers for resource and data directory resolution."""
from .system import get_app_data_dir, resource_path

__all__ = ["get_app_data_dir", "resource_path"]
