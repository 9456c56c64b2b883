# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Logging configuration for pygeod

Library modules obtain their loggers with get_logger(__name__) and never
install handlers themselves; applications call setup_logger or
setup_logger_from_config to see the output.  The extra TRACE level sits
below DEBUG and is used for per-solve iteration counts.
"""

import logging
import sys
from enum import Enum
from typing import Optional

ROOT_LOGGER_NAME = "pygeod"


class LogLevel(Enum):
    """Log levels used by pygeod"""
    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @classmethod
    def from_name(cls, level: str) -> 'LogLevel':
        """Look up a level by name, case insensitive"""
        try:
            return cls[level.upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {level}. "
                             f"Available: {', '.join(cls.__members__)}") from None


# Add TRACE level to logging
logging.addLevelName(LogLevel.TRACE.value, "TRACE")


def _trace(self, message, *args, **kwargs):
    if self.isEnabledFor(LogLevel.TRACE.value):
        self._log(LogLevel.TRACE.value, message, args, **kwargs)


logging.Logger.trace = _trace

# no output unless the application configures a handler
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class ColoredFormatter(logging.Formatter):
    """Colored log formatter"""

    COLORS = {
        'TRACE': '\033[36m',     # Cyan
        'DEBUG': '\033[34m',     # Blue
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        levelname = record.levelname
        color = self.COLORS.get(levelname, self.RESET)
        record.levelname = f"{color}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            # other handlers see the plain name
            record.levelname = levelname


def setup_logger(name: str = ROOT_LOGGER_NAME,
                 level: str = "INFO",
                 log_file: Optional[str] = None,
                 console: bool = True) -> logging.Logger:
    """
    Setup logger with specified configuration

    Parameters:
    -----------
    name : str
        Logger name; "pygeod" configures the whole package
    level : str
        Log level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_file : Optional[str]
        Log file path (if None, no file logging)
    console : bool
        Enable colored output on stdout

    Returns:
    --------
    logging.Logger
        Configured logger
    """
    levelno = LogLevel.from_name(level).value
    logger = logging.getLogger(name)
    logger.setLevel(levelno)

    # Replace existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if not isinstance(handler, logging.NullHandler):
            handler.close()

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(ColoredFormatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        ))
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get logger by name"""
    return logging.getLogger(name)


class LogContext:
    """Context manager for temporary log level change

    Example:
        >>> with LogContext(get_logger("pygeod"), "TRACE"):
        ...     inverse(WGS84, -30, 0, 29.9, 179.8)
    """

    def __init__(self, logger: logging.Logger, level: str):
        self.logger = logger
        self.new_level = LogLevel.from_name(level).value
        self.old_level = None

    def __enter__(self):
        self.old_level = self.logger.level
        self.logger.setLevel(self.new_level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.logger.setLevel(self.old_level)


def setup_logger_from_config(config: dict) -> logging.Logger:
    """Setup loggers from configuration dictionary

    Example config:
    {
        'level': 'INFO',
        'log_file': 'geod.log',
        'console': True,
        'module_levels': {
            'pygeod.geodesic.inverse': 'TRACE',
        }
    }

    Returns:
    --------
    logging.Logger
        The package logger
    """
    logger = setup_logger(ROOT_LOGGER_NAME,
                          config.get('level', 'INFO'),
                          config.get('log_file'),
                          config.get('console', True))
    # module loggers propagate to the package handlers
    for module, level in config.get('module_levels', {}).items():
        get_logger(module).setLevel(LogLevel.from_name(level).value)
    return logger
