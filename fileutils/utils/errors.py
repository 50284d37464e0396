"""Fatal error path shared by the file helpers."""

import logging
import os
import sys
import threading
from typing import NoReturn

from .logging import get_logger

FATAL_EXIT_CODE = 1

logger = get_logger(__name__)


def die(operation: str, path, cause: OSError) -> NoReturn:
    """Report an I/O failure on ``path`` and terminate the process.

    The diagnostic names the operation, the offending path and the underlying
    OS error. On the main thread ``SystemExit`` unwinds the stack so open
    handles are closed on the way out. Any other thread would only end
    itself that way, so there the handlers are flushed and the process exits
    immediately.
    """
    logger.log_fatal(operation, path, cause)
    if threading.current_thread() is not threading.main_thread():
        logging.shutdown()
        sys.stderr.flush()
        os._exit(FATAL_EXIT_CODE)
    sys.exit(FATAL_EXIT_CODE)
