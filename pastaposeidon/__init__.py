"""Pallas base field arithmetic, Cauchy MDS generation and Poseidon-128 (x^5, width 3) parameters."""

__version__ = "0.1.0"
__all__ = ["field", "mds", "pallas_constants", "pallas_early_rounds", "spec"]