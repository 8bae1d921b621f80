"""
Shared fixtures for unit tests.

This module provides common fixtures used across multiple test modules:
- RewardCalculator instance
- Reward request factory
"""

from decimal import Decimal

import pytest

from calculator.core.calculator import RewardCalculator
from calculator.core.models import RewardComputationInput


@pytest.fixture
def calculator():
    """
    Create RewardCalculator with the default tier tables.

    Returns:
        RewardCalculator: Calculator instance for testing
    """
    return RewardCalculator()


@pytest.fixture
def make_reward_input(sample_wallet_address):
    """
    Factory for reward requests.

    Defaults: VIP, corporate, 3 loyalty years, 1000 staked.
    """
    def _make(**overrides) -> RewardComputationInput:
        values = {
            "validator_address": sample_wallet_address,
            "sql_level": "vip",
            "franchise_role": "corporate",
            "loyalty_years": 3,
            "staked_amount": Decimal("1000"),
        }
        values.update(overrides)
        return RewardComputationInput(**values)

    return _make
