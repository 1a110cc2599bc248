"""Signal handling for the repo2tree CLI.

Writing the report can be cut short by a closed pipe (``repo2tree . | head``) or
by Ctrl+C. Both signals are recorded instead of raising from arbitrary points, the
writer checks the flags before every write, and the CLI turns them into the
conventional exit codes at the end of the run.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Optional

EXIT_SIGINT = 130
EXIT_SIGPIPE = 141


class SignalHandler:
    """Records SIGPIPE and SIGINT so the run can stop cleanly.

    Each handler restores the original disposition after the first signal, so a
    second Ctrl+C behaves as usual.

    Attributes:
        sigpipe_received: Set once a SIGPIPE has been received.
        sigint_received: Set once a SIGINT has been received.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler = signal.getsignal(signal.SIGPIPE)
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    @property
    def interrupted(self) -> bool:
        """True if either signal has been received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Exit code for the received signal, or None if the run was not interrupted."""
        if self.sigpipe_received.is_set():
            return EXIT_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_SIGINT
        return None

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        signal.signal(signal.SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)


signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the SIGPIPE and SIGINT handlers of the shared signal handler."""
    signal.signal(signal.SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Silence stdout at exit after an interruption, avoiding errors on a closed pipe."""
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
