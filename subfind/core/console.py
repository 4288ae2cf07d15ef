"""
Console output helpers.
stdout carries result names only; everything else goes to stderr.
"""

import sys
import threading

from termcolor import colored

_verbose = False
_lock = threading.Lock()

TAG_COLORS = {
    'CONFIG': 'cyan',
    'PASSIVE': 'blue',
    'DEDUP': 'magenta',
}


def set_verbose(flag: bool):
    global _verbose
    _verbose = bool(flag)


def _paint(text: str, color: str) -> str:
    # Decided by stderr, not stdout
    tty = sys.stderr.isatty()
    return colored(text, color, no_color=not tty, force_color=tty)


def _write(line: str):
    # Worker threads report concurrently
    with _lock:
        print(line, file=sys.stderr, flush=True)


def info(tag: str, message: str):
    """Print a tagged progress line (verbose mode only)"""
    if not _verbose:
        return
    _write(_paint(f"[{tag}] {message}", TAG_COLORS.get(tag, 'white')))


def error(message: str):
    """Print an error line, always"""
    _write(_paint(f"err: {message}", 'red'))
