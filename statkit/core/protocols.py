"""
Core protocols for statkit.

Backends are described structurally (Protocol) rather than nominally so a
domain can add a backend without inheriting from anything.
"""

from typing import Protocol, TypeVar, runtime_checkable

from statkit.core.result import Result

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)  # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a domain-specific design and produces a Result
    envelope around a domain-specific parameter payload. Backends are
    stateless; all configuration travels on the design.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{domain}', e.g. 'cpu_hypothesis'.
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the statistical computation.

        Raises:
            ConvergenceError: If an iterative method fails to converge
            NumericalError: If the computation hits an invariant it cannot meet
        """
        ...
