#!/usr/bin/env python
# -*- coding: utf-8 -*-

import sys
import warnings
from loguru import logger as loguru_logger


class _Config(object):
    """Logging settings shared by all classes of covpercapita.

    Note:
        Verbosity is an integer: 0 (errors only), 1 (+ warnings), 2 (+ progress of downloading and engineering)
        and 3 (+ details of removed/unmatched records).
    """
    _LEVELS = ("ERROR", "WARNING", "INFO", "DEBUG")
    _FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

    def __init__(self):
        self._logger = loguru_logger
        self._handler_id = None
        self._level = 2

    @property
    def logger_level(self):
        """int: current verbosity, 0-3
        """
        return self._level

    def logger(self, level, sink=None):
        """Replace the log handler of covpercapita.

        Args:
            level (int): verbosity, 0 (ERROR), 1 (WARNING), 2 (INFO) or 3 (DEBUG)
            sink (object or None): loguru sink, like a filename, or None (standard output)

        Raises:
            ValueError: @level is not in 0-3
        """
        if level not in range(len(self._LEVELS)):
            raise ValueError(f"@level must be an integer in 0-{len(self._LEVELS) - 1}, but {level} was applied.")
        if self._handler_id is None:
            self._logger.remove()
        else:
            self._logger.remove(self._handler_id)
        self._handler_id = self._logger.add(
            sys.__stdout__ if sink is None else sink, level=self._LEVELS[level], format=self._FORMAT)
        self._level = level

    def error(self, message):
        """Log the reason of an exception.

        Args:
            message (str): message to show
        """
        self._logger.error(message)

    def warning(self, message, category=None):
        """Log a message and raise a Python warning with the same message.

        Args:
            message (str): message to show
            category (Warning or None): category of the warning or None (UserWarning)
        """
        self._logger.warning(message)
        warnings.warn(message, category or UserWarning, stacklevel=2)

    def info(self, message):
        """Log progress of downloading, engineering and reporting.
        """
        self._logger.info(message)

    def debug(self, message):
        self._logger.debug(message)


config = _Config()
config.logger(level=2)
