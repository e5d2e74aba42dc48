"""
Generic result container for all pymatrix computations.

The Result class provides a standardized envelope that every operation
family wraps in its own user-facing record (MatrixResult, EigenResult,
SystemResult, DecompositionResult). Shared fields cover the step trace,
timing and non-fatal warnings.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (operation, complexity, condition)
    - steps is an ordered tuple of human-readable strings
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so records are value snapshots
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Type Parameters:
        P: The operation-specific payload type

    Attributes:
        params: Operation-specific payload (result matrix, factors, solution)
        info: Structured metadata (operation, complexity, condition, ...)
        steps: Human-readable trace of the stages performed
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the algorithm that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=MatrixParams(result=C),
        ...     info={'operation': 'matrix_addition', 'complexity': 'O(mn)'},
        ...     steps=('Adding matrices of size 2×2',),
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='elementwise'
        ... )
    """
    params: P
    info: dict[str, Any]
    steps: tuple[str, ...] = field(default_factory=tuple)
    timing: dict[str, float] | None = None
    backend_name: str = ''
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)


@dataclass(frozen=True)
class StepRecord:
    """
    Base for user-facing records that wrap a Result envelope.

    Subclasses add properties for their payload; the step trace,
    metadata, timing and warnings accessors are shared.
    """
    _result: Result[Any]

    @property
    def steps(self) -> tuple[str, ...]:
        return self._result.steps

    @property
    def metadata(self) -> dict[str, Any]:
        """Copy of the metadata; mutating it does not affect the record."""
        return dict(self._result.info)

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    def summary(self) -> str:
        """Render the step trace and metadata as numbered text lines."""
        lines = [f"{i}. {step}" for i, step in enumerate(self.steps, start=1)]
        for key, value in self._result.info.items():
            if isinstance(value, float):
                lines.append(f"{key}: {value:.6g}")
            else:
                lines.append(f"{key}: {value}")
        return "\n".join(lines)
