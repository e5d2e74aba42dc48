"""
Engine configuration.

Holds the numerical thresholds every operation reads. A config is fixed
when an engine is constructed and never changes afterwards; functions
receive it explicitly instead of consulting module-level state.

- tolerance: singularity / convergence threshold
- max_iterations: cap for iterative algorithms (QR eigenvalue iteration)
- strassen_threshold: dimension above which multiply() switches to Strassen
- strassen_leaf_size: block size below which Strassen uses the standard product
- progress_interval: eigen iterations between progress steps
- gaussian_max_size: largest system solved by plain Gaussian elimination
- ill_conditioned_threshold: condition estimate above which systems go to QR
"""

import math
from dataclasses import dataclass

from pymatrix.core.exceptions import ValidationError


@dataclass(frozen=True)
class EngineConfig:
    """Immutable numerical configuration for the matrix engine."""
    tolerance: float = 1e-10
    max_iterations: int = 1000
    strassen_threshold: int = 100
    strassen_leaf_size: int = 64
    progress_interval: int = 10
    gaussian_max_size: int = 10
    ill_conditioned_threshold: float = 1e12

    def __post_init__(self) -> None:
        for name in ('tolerance', 'ill_conditioned_threshold'):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValidationError(f"{name}: must be a positive finite number, got {value}")
        for name in ('max_iterations', 'strassen_threshold', 'strassen_leaf_size',
                     'progress_interval', 'gaussian_max_size'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValidationError(f"{name}: must be a positive integer, got {value!r}")


DEFAULT_CONFIG = EngineConfig()
