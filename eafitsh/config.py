import os


def env_int(name, default):
    """Integer from the environment; unset or malformed values give default"""
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


# Line / argv limits
MAXLINE = 100
MAXARGS = 10
HISTORY_SIZE = 10

# Simulated clock
TICKS_PER_SECOND = 100
TIMEZONE_OFFSET = -5 * 3600
START_TIME = env_int("EAFITSH_START_TIME", 0)

PROMPT = "Proyecto1 ❯ "
LOG_LEVEL = os.getenv("EAFITSH_LOG_LEVEL", "WARNING").upper()
USE_COLOR = os.getenv("NO_COLOR") is None

# Builtin keywords
EXIT_CMD = "salir"
CLEAR_CMD = "limpiar"
HISTORY_CMD = "historial"
HELP_CMD = "ayuda"
CALC_PREFIX = "calc "
CLOCK_CMD = "tiempo"
LIST_ALIAS = "listar"
READ_ALIAS_PREFIX = "leer "
