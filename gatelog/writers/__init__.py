"""
Reference writers. Any callable accepting one LogEntry is a writer; these
are conveniences for embedding applications and tests.
"""

from .memory import CollectingWriter
from .stdlib import LoggingBridgeWriter

__all__ = [
    "CollectingWriter",
    "LoggingBridgeWriter",
]
