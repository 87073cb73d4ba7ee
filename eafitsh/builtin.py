import sys
from eafitsh.config import (
    CALC_PREFIX, CLEAR_CMD, CLOCK_CMD, EXIT_CMD, HELP_CMD, HISTORY_CMD,
    LIST_ALIAS, READ_ALIAS_PREFIX,
)
from eafitsh.clock import current_time
from eafitsh.colors import CLEAR_SCREEN, CYAN, RED, WHITE, YELLOW, paint
from eafitsh.parser import tokenize


def builtin_help():
    """Print help message"""
    print("\n" + paint("Comandos disponibles", CYAN))
    print("""listar
leer <archivo>
calc n1 op n2
tiempo
historial
limpiar
salir
""")


def builtin_exit():
    print("\n" + paint("Cerrando eafitos...", WHITE))
    sys.exit(0)


def builtin_clear():
    sys.stdout.write(CLEAR_SCREEN)
    sys.stdout.flush()


def atoi(text):
    """C-style atoi: optional sign and leading digits, 0 when there are none"""
    text = text.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = ""
    for ch in text:
        if not "0" <= ch <= "9":
            break
        digits += ch
    return sign * int(digits) if digits else 0


def calculate(a, op, b):
    """
    Apply a calculator operator.
    Returns: int result; raises ZeroDivisionError or ValueError
    """
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        if b == 0:
            raise ZeroDivisionError("division por cero")
        # truncate toward zero
        q = abs(a) // abs(b)
        return q if (a < 0) == (b < 0) else -q
    raise ValueError(op)


def builtin_calc(rest):
    args = tokenize(rest, max_args=4)
    if len(args) < 3:
        print(paint("Uso: calc n1 op n2", RED))
        return 1

    a, b = atoi(args[0]), atoi(args[2])
    try:
        result = calculate(a, args[1][0], b)
    except ZeroDivisionError as e:
        print(paint(f"Error: {e}", RED))
        return 1
    except ValueError:
        print(paint("Operacion invalida", RED))
        return 1

    print(paint("Resultado: ", YELLOW) + str(result))
    return 0


def builtin_clock():
    print(paint("Hora actual: ", YELLOW) + current_time())
    return 0


def builtin_history(history):
    history.render()
    return 0


def expand_alias(line):
    """
    Rewrite the shell's command aliases into the external command they stand for.
    Returns: expanded line
    """
    if line == LIST_ALIAS:
        return "ls"
    if line.startswith(READ_ALIAS_PREFIX):
        return "cat " + line[len(READ_ALIAS_PREFIX):]
    return line


def execute_builtin(line, history):
    """
    Execute built-in command if it matches the raw line.
    Returns (executed: bool, exit_code: int)
    """
    if line == EXIT_CMD:
        builtin_exit()
    if line == CLEAR_CMD:
        builtin_clear()
        return True, 0
    if line == HISTORY_CMD:
        return True, builtin_history(history)
    if line == HELP_CMD:
        builtin_help()
        return True, 0
    if line.startswith(CALC_PREFIX):
        return True, builtin_calc(line[len(CALC_PREFIX):])
    if line == CLOCK_CMD:
        return True, builtin_clock()

    return False, 0
