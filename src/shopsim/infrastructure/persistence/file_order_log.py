"""Append-only text file implementation of OrderLog."""

from __future__ import annotations

import logging
from pathlib import Path

from shopsim.domain.model.order import Order
from shopsim.domain.repository.order_log import OrderLog, format_log_line

logger = logging.getLogger(__name__)


class FileOrderLog(OrderLog):
    """Opens, appends and closes the file once per order."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    @property
    def file_path(self) -> Path:
        return self._file_path

    def append(self, order: Order) -> bool:
        try:
            with self._file_path.open("a", encoding="utf-8") as fh:
                fh.write(format_log_line(order) + "\n")
        except OSError as exc:
            logger.warning(
                "Could not record order %d in %s: %s", order.id, self._file_path, exc
            )
            return False
        return True
