# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Utility functions and helpers.

This module contains logging setup and input coercion used across the
geometry and graph modules.
"""

import logging
from typing import Optional, Sequence, Union

import numpy as np
import structlog

from ..config import settings
from ..model import Point


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure structlog on top of the standard library logger.

    :param level: Logging level name; defaults to ``settings.log_level``.
    :type level: Optional[str]
    :param fmt: ``'json'`` or ``'console'``; defaults to ``settings.log_format``.
    :type fmt: Optional[str]
    """
    level = (level or settings.log_level).upper()
    fmt = (fmt or settings.log_format).lower()

    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger().setLevel(level)

    renderer = (structlog.processors.JSONRenderer() if fmt == "json"
                else structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str):
    """
    structlog logger writing through the stdlib logger ``name``.

    Events pass through whatever processors the host configured (structlog
    defaults otherwise) and end up in stdlib logging, so levels and handlers
    stay under the host's control.

    :param name: Logger name, usually ``__name__``.
    :type name: str
    :return: Lazily bound structlog logger.
    """
    return structlog.wrap_logger(logging.getLogger(name),
                                 wrapper_class=structlog.stdlib.BoundLogger)


def as_coordinates(points: Union[Sequence[Point], np.ndarray]) -> np.ndarray:
    """
    Convert points to an (N, 2) float array.

    :param points: Sequence of objects with ``x``/``y`` attributes, or an
                   array-like of shape (N, 2).
    :type points: Union[Sequence[Point], np.ndarray]
    :return: (N, 2) array of coordinates, index-aligned with ``points``.
    :rtype: np.ndarray
    :raises ValueError: If the input cannot be read as (N, 2) coordinates.
    """
    if isinstance(points, np.ndarray):
        coords = points.astype(float, copy=False)
    else:
        points = list(points)
        if not points:
            return np.empty((0, 2), dtype=float)
        if hasattr(points[0], 'x'):
            coords = np.array([(p.x, p.y) for p in points], dtype=float)
        else:
            coords = np.asarray(points, dtype=float)

    if coords.size == 0:
        return np.empty((0, 2), dtype=float)
    if coords.ndim != 2 or coords.shape[1] != 2:
        raise ValueError(f"Expected coordinates of shape (N, 2), got {coords.shape}")
    return coords
