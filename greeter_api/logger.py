import os
import copy
import logging
import sys
from colorama import init, Fore, Back, Style

init(autoreset=True)

LOG_COLORS = {
    "DEBUG": Fore.GREEN,
    "INFO": Fore.CYAN,
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.RED,
    "CRITICAL": Back.RED + Fore.WHITE,
}


class ColorFormatter(logging.Formatter):
    def format(self, record):
        log_color = LOG_COLORS.get(record.levelname, "")
        if not log_color:
            return super().format(record)
        # Other handlers share this record, color a copy only
        record = copy.copy(record)
        reset = Style.RESET_ALL
        record.levelname = f"{log_color}{record.levelname}{reset}"
        lines = record.getMessage().splitlines()
        record.msg = "\n".join(
            f"{log_color}{line}{reset}" if line.strip() else line for line in lines
        )
        record.args = None
        return super().format(record)


def resolve_level(name: str) -> int:
    """Map a LOG_LEVEL name to a logging level, INFO when unknown."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


greeter_logger = logging.getLogger("greeter")
greeter_logger.setLevel(resolve_level(os.getenv("LOG_LEVEL", "INFO")))
greeter_logger.handlers.clear()

_stdout_handler = logging.StreamHandler(sys.stdout)
_stdout_handler.setFormatter(ColorFormatter("%(asctime)s - %(levelname)s - %(message)s"))
greeter_logger.addHandler(_stdout_handler)
greeter_logger.propagate = False
