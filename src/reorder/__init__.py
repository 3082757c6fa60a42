"""
Variant reordering.

Modules:
    variant_order - Sample/bolt detection and the two-step position swap
    runner        - Walks every catalog page through the reorder
"""

from .runner import RunSummary, run
from .variant_order import SwapPlan, find_first, plan_swap, reorder_if_needed

__all__ = [
    'RunSummary',
    'run',
    'SwapPlan',
    'find_first',
    'plan_swap',
    'reorder_if_needed',
]
