"""Search configuration: defaults, presets and validation.

Configurations are plain dicts read with ``.get(key, default)``. Presets
are partial overrides of ``DEFAULT_CONFIG``.
"""

from __future__ import annotations

import copy
from typing import Any

from fres.utils.validation import ValidationError

DEFAULT_CONFIG: dict[str, Any] = {
    # Truth algebra used by the interpretation
    'logic': 'lukasiewicz',
    # Fuzzy sets per input variable
    'nsets': 5,
    # Population and selection
    'pop_size': 200,
    'elites': 20,
    't_max': 100,
    # Mutation count per individual and generation ~ Binomial(mutation_trials, mutation_p)
    'mutation_trials': 4,
    'mutation_p': 0.25,
    'mutation_probs': {
        'add_rule': 0.2,
        'remove_rule': 0.15,
        'add_condition': 0.2,
        'remove_condition': 0.15,
        'shift_set': 0.2,
        'change_category': 0.1,
    },
    'max_conditions': 3,
    # Fitness: TSS(tss_category) - alpha * complexity
    'tss_category': 1,
    'alpha': 0.0005,
    'stop_threshold': None,
    # Trials driver
    'test_proportion': 0.1,
    'trials': 20,
    'max_workers': None,
    'log_every': 10,
}

MUTATION_TYPES = tuple(DEFAULT_CONFIG['mutation_probs'])

PRESET_MINIMAL: dict[str, Any] = {
    'pop_size': 16,
    'elites': 4,
    't_max': 10,
    'trials': 2,
    'log_every': 1,
}

PRESET_STANDARD: dict[str, Any] = {}

PRESET_RESEARCH: dict[str, Any] = {
    'pop_size': 400,
    'elites': 40,
    't_max': 500,
    'trials': 50,
    'log_every': 50,
}


def merge_config(overrides: dict[str, Any] | None = None, base: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return ``base`` (default: ``DEFAULT_CONFIG``) updated with ``overrides``.

    Raises:
        ValidationError: on unknown keys or unknown mutation types
    """
    merged = copy.deepcopy(DEFAULT_CONFIG if base is None else base)
    for key, value in (overrides or {}).items():
        if key not in DEFAULT_CONFIG:
            raise ValidationError('unknown_config_key', f"Unknown configuration key: {key}", key=key)
        merged[key] = copy.deepcopy(value)
    unknown = set(merged.get('mutation_probs', {})) - set(MUTATION_TYPES)
    if unknown:
        raise ValidationError('unknown_mutation', "Unknown mutation types in mutation_probs", types=sorted(unknown))
    return merged


__all__ = [
    'DEFAULT_CONFIG',
    'MUTATION_TYPES',
    'PRESET_MINIMAL',
    'PRESET_STANDARD',
    'PRESET_RESEARCH',
    'merge_config',
]
