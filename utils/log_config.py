import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
HANDLER_NAME = "vacation_pay.stdout"


# Attaches one stdout handler to the root logger; calling it again only changes the level
def setup_logging(level: str = "INFO") -> None:
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    root = logging.getLogger()
    root.setLevel(log_level)

    if any(h.get_name() == HANDLER_NAME for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
