"""
Descriptive statistics module.

Public API:
    Statistics(values)  - On-demand statistics engine over one sample
    describe(data)      - All statistics at once, in a Result envelope
"""

from pystatskit.descriptive.design import SampleDesign
from pystatskit.descriptive.engine import Statistics
from pystatskit.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pystatskit.descriptive.solvers import describe

__all__ = [
    "Statistics",
    "describe",
    "SampleDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
]
