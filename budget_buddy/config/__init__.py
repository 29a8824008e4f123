"""Configuration package."""

from budget_buddy.config.settings import (
    BudgetSettings,
    get_settings,
)

__all__ = [
    "BudgetSettings",
    "get_settings",
]
