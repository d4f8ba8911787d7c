from .rwlock import ReadWriteLock
from .sniff import detect_content_type

__all__ = ["ReadWriteLock", "detect_content_type"]
