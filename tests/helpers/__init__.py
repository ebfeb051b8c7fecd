"""Test helpers module for shared test utilities.

- values: random operand generation for sampled property checks
"""

from tests.helpers.values import RANDOM_SEED, random_value

__all__ = ["RANDOM_SEED", "random_value"]
