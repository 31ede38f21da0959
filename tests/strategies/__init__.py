"""Hypothesis strategies for howlongago property-based testing.

Strategies are organized by domain:

- timing: Differences, unit bands, and instants in every accepted form
- packs: Templates and partial language packs

Usage:
    from tests.strategies import REFERENCE, unit_band_differences
    from tests.strategies.packs import partial_packs
"""

from .packs import partial_packs, partial_template_mappings, template_keys, templates
from .timing import (
    MAX_TEST_DIFFERENCE_MS,
    REFERENCE,
    REFERENCE_MS,
    instant_forms,
    just_now_differences,
    signs,
    unit_band_differences,
    unit_differences,
)

__all__ = [
    "MAX_TEST_DIFFERENCE_MS",
    "REFERENCE",
    "REFERENCE_MS",
    "instant_forms",
    "just_now_differences",
    "partial_packs",
    "partial_template_mappings",
    "signs",
    "template_keys",
    "templates",
    "unit_band_differences",
    "unit_differences",
]
