# -*- coding: utf-8 -*-
"""
Evaluation utilities: per-graph planner comparison and run aggregation.
"""

from __future__ import annotations

from .metrics import evaluate_planners, is_valid_path, summarize_runs

__all__ = [
    "evaluate_planners",
    "is_valid_path",
    "summarize_runs",
]
