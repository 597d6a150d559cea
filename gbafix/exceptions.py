#!/usr/bin/env python3
# -*-coding: utf-8-*-
"""
GBA Fix - Consolidated Exception Classes

All project errors are defined here so that the command line, the file
controller and the tests share one taxonomy. Argument and configuration
errors abort an invocation; file errors only skip the file at hand.
"""

from datetime import datetime
from typing import Dict, Any, Optional


class GbaFixError(Exception):
    """Base class for all project-specific errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code or "ERROR"
        self.details = details or {}
        self.timestamp = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """Converts the exception to a dictionary for structured logging."""
        return {
            'error_code': self.error_code,
            'message': str(self),
            'details': self.details,
            'timestamp': self.timestamp.isoformat()
        }


# =====================================================================================================
# Argument errors (invocation-fatal)
# =====================================================================================================

class PatchParseError(GbaFixError):
    """Raised when a patch token cannot be turned into a patch operation."""

    def __init__(self, reason: str, token: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        parse_details = details or {}
        if token is not None:
            parse_details['token'] = token
        parse_details['reason'] = reason
        message = f"couldn't parse '{token}': {reason}" if token is not None else reason
        super().__init__(message, "PATCH_PARSE_ERROR", parse_details)
        self.reason = reason
        self.token = token


class UsageError(GbaFixError):
    """Raised for command line mistakes that are not patch tokens."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "USAGE_ERROR", details)


# =====================================================================================================
# Configuration errors (invocation-fatal)
# =====================================================================================================

class ConfigurationError(GbaFixError):
    """Base class for configuration errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 file_path: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        config_details = details or {}
        if file_path:
            config_details['file_path'] = str(file_path)
        super().__init__(message, error_code or "CONFIG_ERROR", config_details)


class ValidationError(ConfigurationError):
    """Raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 file_path: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        validation_details = details or {}
        if field_name:
            validation_details['field_name'] = field_name
        super().__init__(message, "VALIDATION_ERROR", file_path, validation_details)


# =====================================================================================================
# Per-file errors (the file is skipped, the invocation continues)
# =====================================================================================================

class RomFileError(GbaFixError):
    """Base class for errors tied to one ROM file."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 rom_path: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        rom_details = details or {}
        if rom_path:
            rom_details['rom_path'] = str(rom_path)
        super().__init__(message, error_code or "ROM_FILE_ERROR", rom_details)
        self.rom_path = rom_path


class UnsupportedFileError(RomFileError):
    """Raised when a file does not carry an accepted ROM extension."""

    def __init__(self, message: str, rom_path: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "UNSUPPORTED_FILE", rom_path, details)


class HeaderTooSmallError(RomFileError):
    """Raised when a buffer is shorter than the cartridge header."""

    def __init__(self, message: str, rom_path: Optional[str] = None,
                 size: Optional[int] = None,
                 details: Optional[Dict[str, Any]] = None):
        size_details = details or {}
        if size is not None:
            size_details['size'] = size
        super().__init__(message, "HEADER_TOO_SMALL", rom_path, size_details)


class FileOperationError(RomFileError):
    """Raised when opening, reading or writing a ROM fails."""

    def __init__(self, message: str, rom_path: Optional[str] = None,
                 operation: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        file_details = details or {}
        if operation:
            file_details['operation'] = operation
        super().__init__(message, "FILE_OP_ERROR", rom_path, file_details)
