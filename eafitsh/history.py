import sys
from eafitsh.config import HISTORY_SIZE
from eafitsh.colors import CYAN, paint

try:
    import readline
except ImportError:
    readline = None


def init_readline():
    """Enable history navigation and word movement when running in a real terminal"""
    if readline is None:
        return
    try:
        if not sys.stdin.isatty():
            return

        # Up/Down arrows walk the session history
        readline.parse_and_bind("\\e[A: previous-history")
        readline.parse_and_bind("\\e[B: next-history")

        # Ctrl+Left/Right jump between words
        readline.parse_and_bind("\\e[1;5D: backward-word")
        readline.parse_and_bind("\\e[1;5C: forward-word")

        readline.parse_and_bind("set editing-mode emacs")

    except Exception as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)


class HistoryBuffer:
    """
    Circular log of the last `size` command lines.
    Entries keep the number they had among *all* commands ever entered,
    so after 12 commands the buffer shows 3..12.
    """

    def __init__(self, size=HISTORY_SIZE):
        self.size = size
        self._slots = [None] * size
        self.total_count = 0

    def record(self, line):
        """Store a command line; empty lines are ignored"""
        if not line:
            return
        self._slots[self.total_count % self.size] = line
        self.total_count += 1

    def entries(self):
        """
        Retained entries, oldest first.
        Returns: list of (number, line)
        """
        start = max(self.total_count - self.size, 0)
        return [(i + 1, self._slots[i % self.size])
                for i in range(start, self.total_count)]

    def render(self, out=None):
        """Print the retained commands with their original numbers"""
        out = out or sys.stdout
        print("\n" + paint("Ultimos comandos:", CYAN, out), file=out)
        for number, line in self.entries():
            print(f"{number}  {line}", file=out)
        print(file=out)

    def __len__(self):
        return min(self.total_count, self.size)
