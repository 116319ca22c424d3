# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/sgit/core/__init__.py

"""
Translation core: command model, flag resolution, plans and explanations.

Nothing in this package spawns processes; see sgit.system.execution.
"""
