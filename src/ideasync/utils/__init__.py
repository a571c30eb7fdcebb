"""Shared utilities."""

from ._logging import LogFormatType, create_logger
from ._paths import get_cli_log_file, get_log_dir

__all__ = ["LogFormatType", "create_logger", "get_cli_log_file", "get_log_dir"]
