# kcheck/runlog.py
from __future__ import annotations
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

LOGGER_NAME = "kcheck"


@contextmanager
def open_run_log(path: str | Path) -> Iterator[logging.Logger]:
    """
    実行ログ（追記専用）を開く。
    開始時に Start、正常終了時に Finish ! を書き、抜けるときにハンドラを閉じる。
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    fh = logging.FileHandler(path, mode="a", encoding="utf-8")
    fh.setFormatter(logging.Formatter("%(asctime)s %(message)s", datefmt="%Y/%m/%d %H:%M:%S"))
    logger.addHandler(fh)
    try:
        logger.info("Start")
        yield logger
        logger.info("Finish !")
    finally:
        logger.removeHandler(fh)
        fh.close()
