"""
Global Constants
================
This module is the central place for the constants shared across the package.

Why is this file needed?
------------------------
1. The factory and the CLI both format the area report; keeping the template
   here stops the wording drifting between them.
2. Logging setup and the modules agree on the package logger name.

Exports:
    PACKAGE_LOGGER_NAME (str): Name of the package root logger.
    DEFAULT_LOG_LEVEL (int): Level used when the CLI runs without --verbose.
    REPORT_TEMPLATE (str): Format string of the area report line.
"""
import logging

PACKAGE_LOGGER_NAME: str = "shapearea"
DEFAULT_LOG_LEVEL: int = logging.WARNING

# Filled with the shape LABEL and the computed area
REPORT_TEMPLATE: str = "{label} area: {area}"
