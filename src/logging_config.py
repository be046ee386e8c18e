"""Logging setup for search scripts: brief console output plus a detailed per-session log file"""
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s'


def _prune_session_logs(log_dir: Path, stem: str, keep: int) -> None:
    """Delete the oldest session logs so that `keep - 1` remain before a new one is created"""
    # Timestamped names sort chronologically, newest first after reverse
    sessions = sorted(log_dir.glob(f"{stem}_*.log"), reverse=True)
    for old_log in sessions[max(keep - 1, 0):]:
        try:
            old_log.unlink()
        except OSError:
            pass  # Another process may hold or have removed it


def setup_logging(
    log_file: str = "logs/meeting-search.log",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    keep_sessions: int = 5,
    stream=None,
) -> Path:
    """
    Configure root logging with two destinations:
    - Console: Brief logs (INFO by default)
    - File: Detailed logs (DEBUG by default), one file per session

    Rotation policy:
    - New timestamped log file per run
    - Keep the last `keep_sessions` files (older ones deleted on startup)
    - Rotate within a session at 10MB, 10 backups

    Args:
        log_file: Base path of the log file; the session timestamp is appended to the stem
        console_level: Console logging level
        file_level: File logging level
        keep_sessions: Session log files to retain, including the new one
        stream: Console stream (default: stdout)

    Returns:
        Path of the session log file
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    _prune_session_logs(log_path.parent, log_path.stem, keep_sessions)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    session_log = log_path.parent / f"{log_path.stem}_{timestamp}.log"

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Handlers do the filtering
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    file_handler = RotatingFileHandler(
        session_log,
        mode='a',
        maxBytes=10*1024*1024,  # 10MB
        backupCount=10,
        encoding='utf-8'
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    logging.info(
        f"Logging configured: console={logging.getLevelName(console_level)}, "
        f"file={session_log} ({logging.getLevelName(file_level)})"
    )
    return session_log
