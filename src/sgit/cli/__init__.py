# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/sgit/cli/__init__.py

"""Command Line Interface package for sgit."""

from .main import app

__all__ = ['app']
