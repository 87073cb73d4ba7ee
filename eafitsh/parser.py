from eafitsh.config import MAXARGS

SEPARATOR = " "
PIPE = "|"


def tokenize(line, max_args=MAXARGS):
    """
    Split a command line on runs of spaces.
    Returns: list of tokens, at most max_args - 1 of them (the last slot
    of an argv is reserved for its terminator)
    """
    tokens = [tok for tok in line.split(SEPARATOR) if tok]
    return tokens[:max_args - 1]


def split_pipe(line):
    """
    Split a line at its first pipe character.
    Returns: (left, right) or None when there is no pipe
    """
    left, sep, right = line.partition(PIPE)
    if not sep:
        return None
    return left, right.lstrip(SEPARATOR)
