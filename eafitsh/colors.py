import sys
from eafitsh.config import USE_COLOR

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"
WHITE = "\033[37m"
RESET = "\033[0m"

CLEAR_SCREEN = "\033[2J\033[H"


def color_enabled(stream=None):
    """Colors only go to a real terminal, and never when NO_COLOR is set"""
    stream = stream or sys.stdout
    if not USE_COLOR:
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def paint(text, color, stream=None, readline_safe=False):
    """
    Wrap text in a color. With readline_safe the escape codes are marked
    as zero-width (\\001 ... \\002) so readline measures the prompt right.
    """
    if not color_enabled(stream):
        return text
    if readline_safe:
        return f"\001{color}\002{text}\001{RESET}\002"
    return f"{color}{text}{RESET}"
