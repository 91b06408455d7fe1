import logging
import sys
import os

FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s: %(message)s"

# Push/pop lines come from here; tracing them is often wanted on its own
TRANSITIONS_LOGGER = "statestack.state_manager"


def _level(name: str | None, default: int) -> int:
    if not name:
        return default
    return getattr(logging, name.upper(), default)


def setup_logging(level: str = None, transitions: str = None) -> logging.Logger:
    """Configure the statestack namespace logger.

    ``level`` falls back to LOG_LEVEL (default INFO). ``transitions`` sets
    the state manager's logger on its own and falls back to
    STATESTACK_TRANSITIONS_LEVEL; when neither is given it follows ``level``.
    """
    numeric_level = _level(level or os.environ.get("LOG_LEVEL"), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger("statestack")
    root.setLevel(numeric_level)
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.propagate = False  # prevent duplicate output via root logger

    transitions = transitions or os.environ.get("STATESTACK_TRANSITIONS_LEVEL")
    logging.getLogger(TRANSITIONS_LOGGER).setLevel(_level(transitions, logging.NOTSET))

    # Pillow is chatty at DEBUG when loading fonts
    logging.getLogger("PIL").setLevel(logging.WARNING)

    return root
