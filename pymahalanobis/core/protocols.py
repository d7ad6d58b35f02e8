"""
Core protocols for pymahalanobis.

These define structural interfaces that solve strategies must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that a new strategy only has to look like a backend, not inherit from one.
"""

from typing import Protocol, TypeVar, runtime_checkable

# Type variables for generic payloads
P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for solve strategies.

    Each backend takes a validated design and produces a parameter
    payload wrapped in a Result. Backends are stateless: everything they
    need arrives through the design, so they are trivially safe to share.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_cholesky', 'cpu_gauss_jordan'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Validated design

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If design is invalid for this backend
        """
        ...
