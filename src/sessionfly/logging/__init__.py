"""SessionFly Logging — logging port, structlog adapter and session id masking."""

from sessionfly.logging.masking import mask_session_id
from sessionfly.logging.port import LoggingPort
from sessionfly.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter", "mask_session_id"]
