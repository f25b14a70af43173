"""
Background Workers (Threading)
==============================
This module contains QThread subclasses for the calls to the data sources.

Why is this file needed?
------------------------
1. Responsiveness: Reading roles or pages may be slow; running it on the main
   thread would freeze the GUI.
2. Signals: The result (or the error) is handed back to the GUI thread through
   Qt Signals. Layout and page setup then run on the GUI thread.

Classes:
    FetchWorker: Runs one data source call.
"""
import logging
from typing import Any, Callable

from PySide6.QtCore import QThread, Signal

logger = logging.getLogger(__name__)


class FetchWorker(QThread):
    # Both signals carry the request id so stale answers can be dropped
    result_ready = Signal(int, object)
    error_occurred = Signal(int, str)

    def __init__(self, request_id: int, fetch: Callable[[], Any], label: str = "data") -> None:
        super().__init__()
        self.request_id = request_id
        self.fetch = fetch
        self.label = label

    def run(self) -> None:
        try:
            logger.info(f"Fetching {self.label} in background thread...")
            result = self.fetch()
        except Exception as e:
            logger.error(f"Error while fetching {self.label}: {e}")
            self.error_occurred.emit(self.request_id, str(e))
            return

        self.result_ready.emit(self.request_id, result)
