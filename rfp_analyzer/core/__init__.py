"""RFP Analyzer Core - Configuration and logging setup"""

from .config import (
    AnalyzerConfig,
    ReaderConfig,
    LoggingConfig,
    configure_logging,
    get_config,
    set_config,
)

__all__ = [
    "AnalyzerConfig",
    "ReaderConfig",
    "LoggingConfig",
    "configure_logging",
    "get_config",
    "set_config",
]
