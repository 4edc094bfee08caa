from .fetch import FetchRelay
from .probe import ProbeTracker
from .handle import FetchHandle
from .fetcher import HttpxFetcher
from .protocols import Fetcher
from .scanner import scan

__all__ = ["FetchHandle", "FetchRelay", "Fetcher", "HttpxFetcher", "ProbeTracker", "scan"]
