"""Application state shared between the process loader, table and search."""

import logging

import pandas as pd

from .loaders.processes import empty_processes

logger = logging.getLogger(__name__)


class ProcessStore:
    """Holds the current process list.

    Starts empty and is only ever replaced as a whole. Readers get the
    stored frame and must not modify it. The dashboard is the single
    writer and writes from one thread.
    """

    def __init__(self) -> None:
        self._processes = empty_processes()

    def replace(self, processes: pd.DataFrame) -> None:
        self._processes = processes.reset_index(drop=True)
        logger.debug("Process store replaced (%d rows)", len(processes))

    def snapshot(self) -> pd.DataFrame:
        return self._processes

    def __len__(self) -> int:
        return len(self._processes)
