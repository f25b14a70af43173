"""
Logging Configuration
Sets up the 'polaris' logger and routes Qt's own diagnostics into it.
"""
import logging
import sys
from typing import Optional

from PySide6.QtCore import QtMsgType, qInstallMessageHandler

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}

qt_logger = logging.getLogger("polaris.qt")


def qt_message_handler(msg_type: QtMsgType, _context, message: str) -> None:
    """Forward a Qt message (painter, plugin, threading warnings) to `polaris.qt`."""
    qt_logger.log(QT_LEVELS.get(msg_type, logging.WARNING), message)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    capture_qt: bool = True,
) -> logging.Logger:
    """
    Configure the 'polaris' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path; the log is written there as well, truncated per run.
        capture_qt: Install a Qt message handler so Qt warnings share the log.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("polaris")
    logger.setLevel(level)

    # Calling twice must not double every line
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if capture_qt:
        qInstallMessageHandler(qt_message_handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
