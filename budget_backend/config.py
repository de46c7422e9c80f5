"""Application settings.

Engine constants are fixed; deployment settings can be overridden through
environment variables.
"""
from __future__ import annotations

import os

# PEA (plan d'épargne en actions)
PEA_CEILING = 150_000.0
SOCIAL_LEVY_PERCENT = 17.2
PEA_NET_COEFFICIENT = 0.828  # 1 - SOCIAL_LEVY_PERCENT / 100
PEA_MAX_MONTHS = 600
PEA_EXTRA_MONTHS_AFTER_GOAL = 24

# Savings accounts
SAVINGS_MAX_MONTHS = 1200  # 100 years
INTEREST_FREQUENCIES = ("daily", "weekly", "monthly", "annual")
DEFAULT_INTEREST_FREQUENCY = "daily"
EMERGENCY_FUND_ACCOUNT_NAME = os.getenv("BUDGET_EMERGENCY_ACCOUNT", "Sécurité")
EMERGENCY_FUND_MONTHS = 6

# Placement destinations matched by name (case-insensitive)
SAVINGS_PLACEMENT_NAME = "Épargne"
PEA_PLACEMENT_NAME = "PEA"

# Chart horizons
CHART_DEFAULT_MONTHS = 24
CHART_MAX_MONTHS = 120
CHART_MONTHS_AFTER_GOAL = 6
CHART_STEP = 0.1
DISPLAY_DIGITS = 2

# Deployment
PROFILE_STORAGE_PATH = os.getenv("BUDGET_PROFILE_PATH", "user_data/profiles.json")
LOG_LEVEL = os.getenv("BUDGET_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("BUDGET_LOG_FILE") or None
API_PORT = int(os.getenv("BUDGET_API_PORT", "8000"))
