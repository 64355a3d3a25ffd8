"""
Defaults shared by the CLI parser, the input resolver and the exit-code coordinator.
"""

# region ---[ Inputs ]---

SOURCE_SUFFIX = ".hs"

STDIN_TOKEN = "-"

# endregion ---[ Inputs ]---

# region ---[ Modes ]---

MODE_STDOUT = "stdout"
MODE_INPLACE = "inplace"
MODE_CHECK = "check"

DEFAULT_MODE = MODE_STDOUT

# endregion ---[ Modes ]---

# region ---[ Exit codes ]---

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
# 100 and 101 are outside the range the formatter itself exits with.
EXIT_NOT_FORMATTED = 100
EXIT_UNSUPPORTED_STDIN = 101

RESERVED_EXIT_CODES = frozenset({EXIT_SUCCESS, EXIT_NOT_FORMATTED, EXIT_UNSUPPORTED_STDIN})

UNSUPPORTED_STDIN_MESSAGE = "This feature is not supported when input comes from stdin."

# endregion ---[ Exit codes ]---

# region ---[ Engine ]---

ENGINE_EXECUTABLE_ENV = "HSFMT_ORMOLU"
DEFAULT_ENGINE_EXECUTABLE = "ormolu"

DEFAULT_GHC_OPTS: tuple[str, ...] = ()
DEFAULT_UNSAFE = False
DEFAULT_DEBUG = False
DEFAULT_TOLERATE_CPP = False
DEFAULT_CHECK_IDEMPOTENCY = False

# endregion ---[ Engine ]---

DEFAULT_VERBOSE = False
