"""Core business logic layer.

Subpackages:
- combos: metrics, reasoning text, uniqueness bookkeeping and the daily sampler
- planning: multi-day plan orchestration
- reporting: plan summaries
"""
__all__ = ["combos", "planning", "reporting"]
