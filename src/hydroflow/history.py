import json
import os
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone

import pandas as pd
import structlog

from . import settings
from .analysis import AnalysisResult, ChannelInputs
from .utility import create_directory_if_not_exists

logger = structlog.get_logger()


@dataclass(frozen=True)
class HistoryEntry:
    timestamp: datetime
    result: AnalysisResult

    def to_dict(self) -> dict:
        return {'timestamp': self.timestamp.isoformat(), **self.result.to_dict()}


class AnalysisHistory:
    """
    Bounded record of recent analyses, newest first.

    Once `maxlen` entries are held, adding another evicts the oldest. The
    buffer is not thread-safe; callers sharing one must serialize access.
    """
    def __init__(self, maxlen: int = settings.HISTORY_SIZE):
        if maxlen < 1:
            raise ValueError("maxlen must be at least 1.")
        self._entries = deque(maxlen=maxlen)

    @property
    def maxlen(self) -> int:
        return self._entries.maxlen

    def add(self, result: AnalysisResult, timestamp: datetime = None) -> HistoryEntry:
        if timestamp is None:
            timestamp = datetime.now(timezone.utc)
        entry = HistoryEntry(timestamp=timestamp, result=result)
        self._entries.appendleft(entry)
        return entry

    def latest(self) -> HistoryEntry:
        if not self._entries:
            raise IndexError("History is empty.")
        return self._entries[0]

    def clear(self):
        self._entries.clear()

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __getitem__(self, index) -> HistoryEntry:
        return self._entries[index]

    def to_list(self) -> list:
        return [entry.to_dict() for entry in self._entries]

    def to_dataframe(self) -> pd.DataFrame:
        """One row per entry, newest first, indexed by timestamp."""
        df = pd.DataFrame(self.to_list())
        if not df.empty:
            df = df.set_index('timestamp')
        return df


def export_document(inputs: ChannelInputs, history: AnalysisHistory, now: datetime = None) -> dict:
    """Builds the JSON-ready export document.

    Args:
        inputs (ChannelInputs): The inputs currently in use.
        history (AnalysisHistory): Previous analyses.
        now (datetime, optional): Export time. Defaults to the current UTC time.

    Returns:
        dict: {title, timestamp, version, inputs, history}
    """
    if now is None:
        now = datetime.now(timezone.utc)

    return {
        'title': settings.EXPORT_TITLE,
        'timestamp': now.isoformat(),
        'version': settings.EXPORT_VERSION,
        'inputs': inputs.to_dict(),
        'history': history.to_list(),
    }

def save_document(document: dict, folder_path) -> str:
    """Writes an export document as hydroflow-analysis-<ms>.json and returns its path."""
    create_directory_if_not_exists(folder_path)
    stamp = int(datetime.fromisoformat(document['timestamp']).timestamp() * 1000)
    filename = os.path.join(folder_path, f"hydroflow-analysis-{stamp}.json")

    with open(filename, 'w', encoding='utf-8') as file:
        json.dump(document, file, indent=2, ensure_ascii=False)

    logger.info("Analysis document saved", path=filename, entries=len(document['history']))
    return filename
