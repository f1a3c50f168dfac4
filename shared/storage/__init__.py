"""
Export storage
"""

from .export_manager import ExportFailure, ExportManager, sanitize_channel_id

__all__ = ["ExportFailure", "ExportManager", "sanitize_channel_id"]
