"""
PySubsync.Formats - Format-specific file handlers
"""
from PySubsync.Formats.SrtFileHandler import SrtFileHandler

__all__ = ["SrtFileHandler"]
