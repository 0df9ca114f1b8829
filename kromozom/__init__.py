"""Chromosome simulation: crossover, mutation and summaries of gene sequences."""

__version__ = "0.1.0"
__all__ = ["cell", "chromosome", "menu"]