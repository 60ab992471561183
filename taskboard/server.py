import logging

import uvicorn

import taskboard.config as _cfg
from taskboard.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def run() -> None:
    setup_logging(_cfg.LOG_LEVEL)
    logger.info("Taskboard backend listening on %s:%s", _cfg.HOST, _cfg.PORT)
    uvicorn.run("taskboard.main:app", host=_cfg.HOST, port=_cfg.PORT, log_level=_cfg.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
