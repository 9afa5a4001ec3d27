"""
Batch entry point for descriptive statistics.

describe() computes every statistic the Statistics engine offers in one
call and packages them in an immutable Result envelope.
"""

from __future__ import annotations

import warnings

from numpy.typing import ArrayLike

from pystatskit.core.result import Result
from pystatskit.descriptive.design import SampleDesign
from pystatskit.descriptive.engine import Statistics
from pystatskit.descriptive.solution import DescriptiveParams, DescriptiveSolution


# Statistics that raise EmptyDataError on the engine
_EMPTY_UNDEFINED = ('median', 'mode', 'amplitude')


def _ensure_design(data: ArrayLike | SampleDesign) -> SampleDesign:
    """Convert raw array to SampleDesign if needed."""
    if isinstance(data, SampleDesign):
        return data
    return SampleDesign.from_array(data)


def describe(
    data: ArrayLike | SampleDesign,
    *,
    population_data: bool = True,
) -> DescriptiveSolution:
    """
    Compute comprehensive descriptive statistics.

    Computes: sum, mean, median, mode, amplitude (range), variance,
    standard deviation and coefficient of variation.

    Parameters
    ----------
    data : array-like or SampleDesign
        Flat sequence of ints or floats. May be empty.
    population_data : bool
        True (default) for population variance (divide by N), False for
        sample variance (divide by N - 1).

    Returns
    -------
    DescriptiveSolution with all statistics populated. On an empty sample
    median, mode and amplitude are None and a note is added to warnings.
    """
    design = _ensure_design(data)
    engine = Statistics(design, population_data=population_data)

    warnings_list: list[str] = []
    computed = ['sum', 'mean']
    undefined: list[str] = []

    total = engine.sum()
    mean = engine.mean()

    median = mode = amplitude = None
    if design.is_empty:
        undefined.extend(_EMPTY_UNDEFINED)
        warnings_list.append(
            "median, mode and amplitude are undefined for an empty sample"
        )
    else:
        median = engine.median()
        mode = engine.mode()
        amplitude = engine.amplitude()
        computed.extend(_EMPTY_UNDEFINED)

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter('always')
        variance = engine.variance()
    warnings_list.extend(str(w.message) for w in caught)

    # Derived from the variance above so its warning is not raised twice
    sd = variance ** 0.5
    cv = 0.0 if mean == 0 else sd / mean
    computed.extend(['variance', 'sd', 'coefficient_of_variation'])

    params = DescriptiveParams(
        n=design.n,
        population_data=engine.population_data,
        total=total,
        mean=mean,
        variance=variance,
        sd=sd,
        coefficient_of_variation=cv,
        median=median,
        mode=mode,
        amplitude=amplitude,
    )

    result = Result(
        params=params,
        info={
            'population_data': engine.population_data,
            'n': design.n,
            'dtype': str(design.dtype),
            'computed': tuple(computed),
            'undefined': tuple(undefined),
        },
        warnings=tuple(warnings_list),
    )

    return DescriptiveSolution(_result=result, _design=design)
