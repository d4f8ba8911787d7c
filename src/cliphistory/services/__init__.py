"""Service layer for cliphistory."""

from .history import HistoryCache
from .poller import HistoryPoller

__all__ = ["HistoryCache", "HistoryPoller"]
