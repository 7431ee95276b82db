"""
RFP Analyzer Configuration
Environment-based configuration for readers and logging
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from typing import List, Optional


DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass
class ReaderConfig:
    """Configuration for the PDF/DOCX document reader"""
    # Use PyMuPDF when it is importable, otherwise pypdf
    prefer_pymupdf: bool = True

    # DOCX has no real pagination; page count is estimated from length
    docx_chars_per_page: int = 3000

    def __post_init__(self):
        """Load from environment variables"""
        self.prefer_pymupdf = _env_bool("RFP_ANALYZER_PREFER_PYMUPDF", self.prefer_pymupdf)
        self.docx_chars_per_page = _env_int("RFP_ANALYZER_DOCX_CHARS_PER_PAGE", self.docx_chars_per_page)


@dataclass
class LoggingConfig:
    """Configuration for log output"""
    level: str = "WARNING"
    format: str = DEFAULT_LOG_FORMAT

    def __post_init__(self):
        """Load from environment variables"""
        self.level = os.getenv("RFP_ANALYZER_LOG_LEVEL", self.level).upper()
        self.format = os.getenv("RFP_ANALYZER_LOG_FORMAT", self.format)


@dataclass
class AnalyzerConfig:
    """Master configuration for the RFP Analyzer"""
    reader: ReaderConfig = field(default_factory=ReaderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "AnalyzerConfig":
        """Create configuration from environment variables"""
        return cls(
            reader=ReaderConfig(),
            logging=LoggingConfig(),
        )

    def validate(self) -> List[str]:
        """Validate configuration and return list of issues"""
        issues = []

        if self.reader.docx_chars_per_page <= 0:
            issues.append("RFP_ANALYZER_DOCX_CHARS_PER_PAGE must be positive")

        if not is_valid_log_level(self.logging.level):
            issues.append(f"Unknown log level: {self.logging.level}")

        return issues


def is_valid_log_level(level: str) -> bool:
    return isinstance(logging.getLevelName(level.upper()), int)


def configure_logging(level: str = "WARNING", fmt: str = DEFAULT_LOG_FORMAT, stream=None) -> None:
    """
    Install a single stream handler on the root logger.

    Called once by the CLI. Calling it again only changes the level.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level.upper())


# Global configuration instance
_config: Optional[AnalyzerConfig] = None


def get_config() -> AnalyzerConfig:
    """Get the global configuration instance"""
    global _config
    if _config is None:
        _config = AnalyzerConfig.from_env()
    return _config


def set_config(config: Optional[AnalyzerConfig]) -> None:
    """Set the global configuration instance (None resets to environment)"""
    global _config
    _config = config
