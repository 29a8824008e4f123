"""
BudgetBuddy - Source Package

A small personal budget tracker built around a unidirectional
state-update loop: messages go in, a new model comes out.

DESIGN PRINCIPLES:
1. The reducer is the only mutation path
2. Persisted state never drifts from the in-memory model
3. Invalid input is rejected, never silently corrected
4. Storage medium is swappable
"""

__version__ = "1.0.0"
__author__ = "BudgetBuddy Team"
