# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Utils module for helper functions and utilities."""

from .helpers import (
    configure_logging,
    get_logger,
    as_coordinates
)

__all__ = [
    'configure_logging',
    'get_logger',
    'as_coordinates',
]
