"""
Core protocols for pymatrix.

We use Protocol (structural typing) rather than ABC (nominal typing) so
that any object with the right shape can serve as a backend.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pymatrix.core.result import Result

# Type variables for generic payloads
P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for interchangeable solution algorithms.

    Each backend takes an operation-specific design (already validated)
    and produces a Result envelope. Backends are stateless: all
    configuration is passed at construction time.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier, reported as the result's method.

        Examples: 'gaussian_elimination', 'lu_decomposition', 'cholesky'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Raises:
            NumericalError: If numerical issues prevent a solution
        """
        ...
