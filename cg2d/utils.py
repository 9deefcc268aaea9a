"""
Допоміжне: логер пакета.
"""
from __future__ import annotations
import logging

_BASE = "cg2d"


def create_logger(name: str) -> logging.Logger:
    """
    Логер у просторі імен `cg2d`.

    При першому виклику ставить на кореневий логер пакета один
    StreamHandler (stderr) із форматером.
    """
    base = logging.getLogger(_BASE)
    if len(base.handlers) == 0:
        ch = logging.StreamHandler()
        formatter = logging.Formatter('[%(levelname)s %(asctime)s %(name)s] '
                                      '%(message)s')
        ch.setFormatter(formatter)
        base.addHandler(ch)
    if name == _BASE or name.startswith(_BASE + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_BASE}.{name}")


def set_log_level(level, name: str = _BASE) -> None:
    """Рівень логування для `name` (за замовчуванням увесь пакет)."""
    logging.getLogger(name).setLevel(level)


def get_log_level(name: str = _BASE) -> int:
    return logging.getLogger(name).getEffectiveLevel()
