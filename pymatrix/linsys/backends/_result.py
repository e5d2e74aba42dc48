"""Shared Result construction for linear-system backends."""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.design import Vector
from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.linsys.design import LinearSystemDesign
from pymatrix.linsys.solution import SystemParams


def system_result(
    design: LinearSystemDesign,
    x: NDArray[np.floating[Any]],
    steps: list[str],
    timer: Timer,
    method: str,
    warnings: tuple[str, ...] = (),
) -> Result[SystemParams]:
    """Attach residual and condition to a solution and stop the timer."""
    with timer.section('residual'):
        residual = design.residual(x)
    with timer.section('condition'):
        condition = design.condition
    timer.stop()

    return Result(
        params=SystemParams(
            solution=Vector._from_trusted(x),
            residual=residual,
            condition=condition,
        ),
        info={'method': method, 'complexity': 'O(n³)'},
        steps=tuple(steps),
        timing=timer.result(),
        backend_name=method,
        warnings=warnings,
    )
