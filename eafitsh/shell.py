import logging
import sys

from eafitsh.config import LOG_LEVEL, MAXLINE, PROMPT
from eafitsh.builtin import execute_builtin, expand_alias
from eafitsh.colors import CYAN, GREEN, RED, paint
from eafitsh.executor import ProcessLauncher, run_cmd, run_pipe
from eafitsh.history import HistoryBuffer, init_readline
from eafitsh.parser import PIPE, split_pipe, tokenize

log = logging.getLogger(__name__)


def prompt():
    """Generate shell prompt"""
    return paint(PROMPT, GREEN, readline_safe=True)


def print_banner():
    print(paint("BIENVENIDO EAFITOS", CYAN))
    print("Escribe 'ayuda' para ver comandos\n")


def read_command(read_line=input):
    """
    Read one line, truncated to the shell's line limit.
    Returns: the line, or None at end of input
    """
    try:
        line = read_line(prompt())
    except EOFError:
        print()
        return None
    return line[:MAXLINE - 1]


def evaluate(line, history, launcher=None):
    """
    Run one command line: builtin, single program or `a | b`.
    Returns: exit code of the builtin, 0 otherwise
    """
    executed, exit_code = execute_builtin(line, history)
    if executed:
        return exit_code

    line = expand_alias(line)

    halves = split_pipe(line)
    if halves is None:
        args = tokenize(line)
        if args:
            run_cmd(args, launcher)
        return 0

    left_text, right_text = halves
    left, right = tokenize(left_text), tokenize(right_text)
    if not left or not right:
        print(paint("Uso: comando1 | comando2", RED))
        return 1
    if PIPE in right_text:
        print(paint("Solo se admite un pipe por linea", RED))
        return 1
    run_pipe(left, right, launcher)
    return 0


def main_loop(history=None, launcher=None, read_line=input):
    """Main shell loop"""
    if history is None:
        history = HistoryBuffer()
    launcher = launcher or ProcessLauncher()

    init_readline()
    print_banner()

    while True:
        try:
            line = read_command(read_line)
            if line is None:
                break
            if not line:
                continue

            history.record(line)
            log.debug("command #%d: %r", history.total_count, line)
            evaluate(line, history, launcher)
        except KeyboardInterrupt:
            # Ctrl+C at the prompt or while a child runs
            print()
            continue

    return 0


def main():
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, LOG_LEVEL, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(main_loop())
