"""Orchestrator module for estimate execution."""

from .pricing_engine import PricingEngine, estimate

__all__ = [
    "PricingEngine",
    "estimate",
]
