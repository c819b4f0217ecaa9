"""
Logging setup: stdout always, plus the optional diagnostic log file.

The file keeps the collector's historical line format (``INFO: ...`` /
``ERROR: ...``) and is opened in append mode.
"""
import logging
import sys
from pathlib import Path


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
FILE_FORMAT = "%(levelname)s: %(message)s"


def setup_logging(log_file: str = "", log_info: bool = False, level: int = logging.INFO) -> None:
    root = logging.getLogger()
    root.setLevel(level)

    # Remove existing handlers so we don't duplicate when the app is rebuilt
    for h in root.handlers[:]:
        root.removeHandler(h)
        h.close()

    out = logging.StreamHandler(sys.stdout)
    out.setLevel(level)
    out.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(out)

    if log_file and log_file.strip():
        path = Path(log_file.strip())
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(path, mode="a", encoding="utf-8")
        fh.setLevel(logging.INFO if log_info else logging.ERROR)
        fh.setFormatter(logging.Formatter(FILE_FORMAT))
        root.addHandler(fh)
