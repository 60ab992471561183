import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Install a single stderr handler on the root logger.

    Call this once, before the server starts; uvicorn keeps its own loggers.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)

    # passlib probes bcrypt's version and complains loudly when it can't
    logging.getLogger("passlib").setLevel(logging.ERROR)
