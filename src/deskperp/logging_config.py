from __future__ import annotations
import logging
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path


DEFAULT_FMT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
CONSOLE_FMT = "%(asctime)s | %(levelname)s | %(message)s"

PACKAGE_LOGGERS = ("desk", "auth", "actions", "cli")

_BEARER = re.compile(r"(Bearer\s+)[A-Za-z0-9._~+/=-]+")
_PRIVATE_KEY = re.compile(r"\b0x[0-9a-fA-F]{64}\b")
MASK = "***"


def mask_secrets(text: str) -> str:
    """Blank out bearer tokens and 32-byte hex keys."""
    text = _BEARER.sub(r"\1" + MASK, text)
    return _PRIVATE_KEY.sub("0x" + MASK, text)


class SecretMasker(logging.Filter):
    """
    Rewrites the rendered message so JWTs and private keys never reach a
    handler. Addresses (20 bytes) and order digests pass through unless they
    are 32 bytes long; a digest-sized value is masked as well.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        masked = mask_secrets(msg)
        if masked != msg:
            record.msg, record.args = masked, None
        return True


def _handler(h: logging.Handler, level: int, fmt: str) -> logging.Handler:
    h.setLevel(level)
    h.setFormatter(logging.Formatter(fmt))
    h.addFilter(SecretMasker())
    return h


def setup(
    log_dir: str = "logs",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    filename: str = "deskperp.log",
    max_bytes: int = 5_000_000,
    backup_count: int = 3,
) -> None:
    root = logging.getLogger()
    if getattr(root, "_deskperp_logging_installed", False):
        return

    path = Path(log_dir)
    path.mkdir(parents=True, exist_ok=True)
    root.setLevel(logging.DEBUG)

    root.addHandler(_handler(logging.StreamHandler(), console_level, CONSOLE_FMT))
    rotating = RotatingFileHandler(
        path / filename,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    root.addHandler(_handler(rotating, file_level, DEFAULT_FMT))

    # third-party noise
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    for name in PACKAGE_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO)

    root._deskperp_logging_installed = True  # type: ignore[attr-defined]
