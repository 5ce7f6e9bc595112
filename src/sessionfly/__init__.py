"""SessionFly — HTTP session state with flash data and pluggable persistence."""

from sessionfly.kernel.exceptions import (
    DecryptionException,
    InvalidConfigurationException,
    SessionFinishedException,
    SessionFlyException,
    SessionNotStartedException,
    SessionPayloadException,
)
from sessionfly.session import SessionRecord, SessionStore

__version__ = "0.1.0"

__all__ = [
    "DecryptionException",
    "InvalidConfigurationException",
    "SessionFlyException",
    "SessionFinishedException",
    "SessionNotStartedException",
    "SessionPayloadException",
    "SessionRecord",
    "SessionStore",
    "__version__",
]
