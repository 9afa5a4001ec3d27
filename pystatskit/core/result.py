"""
Generic result container for pystatskit computations.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (population flag, which statistics
      were computed and which were undefined)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (means, variances, ...)
        info: Structured metadata (population flag, computed statistics)
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=DescriptiveParams(
        ...         n=5, population_data=True, total=15.0, mean=3.0,
        ...         variance=2.0, sd=2.0 ** 0.5,
        ...         coefficient_of_variation=2.0 ** 0.5 / 3,
        ...         median=3.0, mode=1, amplitude=4,
        ...     ),
        ...     info={'population_data': True, 'n': 5},
        ... )
    """
    params: P
    info: dict[str, Any]
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
