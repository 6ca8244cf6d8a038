from .default import value_or_default, alpha_from_mapping
from .num_utils import all_finite, round_half_up

__all__ = ['value_or_default', 'alpha_from_mapping', 'all_finite', 'round_half_up']
