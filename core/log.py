################################################################################################

'''

Copyright 2025 Aaron Vose (avose@aaronvose.net)

Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

This file holds the code for the info / debug logger shared by the core and the UI.

'''

################################################################################################

import inspect
import threading
from datetime import datetime
from typing import List, Tuple

################################################################################################

def _timestamp() -> str:
    return datetime.now().strftime("%m/%d/%Y %H:%M:%S")

class LogManager():
    """
    In-memory application log.

    Entries are (timestamp, text) tuples kept for the life of the process;
    the status bar shows them and can save them to a file. debug() messages
    are only kept when their level is at or below the current verbosity.
    """
    __log: List[Tuple[str, str]] = None
    __lock = threading.Lock()

    def __init__(self, verbosity: int = 0):
        if LogManager.__log is None:
            LogManager.__log = [(_timestamp(), "Begin SortableTree Log")]
        self.verbosity = verbosity

    def add(self, text: str):
        with LogManager.__lock:
            LogManager.__log.append((_timestamp(), text))

    def debug(self, text: str, level: int = 0):
        if self.verbosity < level:
            return
        # Tag with the caller's file name (not full path).
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        filename = caller.f_code.co_filename.replace('\\', '/').split('/')[-1] if caller else "unknown"
        self.add(f"[{filename}] {text}")

    def get(self, index: int = None):
        with LogManager.__lock:
            if index is not None:
                return LogManager.__log[index]
            return LogManager.__log.copy()

    def last(self) -> Tuple[str, str]:
        return self.get(-1)

    def count(self):
        return len(LogManager.__log)

    def set_verbosity(self, verbosity: int = 0):
        self.verbosity = verbosity

    def clear(self):
        """Clear all log entries."""
        with LogManager.__lock:
            LogManager.__log.clear()
            LogManager.__log.append((_timestamp(), "Log cleared"))

    def write_to_file(self, filepath: str) -> bool:
        """Write all log entries to a file. Returns False if the write failed."""
        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                for timestamp, message in self.get():
                    f.write(f"[{timestamp}] {message}\n")
        except OSError as e:
            self.add(f"Failed to write log to file '{filepath}': {e}")
            return False
        self.add(f"Log written to file: {filepath}")
        return True

################################################################################################

Log = LogManager()

################################################################################################
