"""
Tests for the `python -m pystatskit` demonstration and package surface.
"""

import pystatskit
from pystatskit.__main__ import main


def test_demo_output(capsys):
    assert main() == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Mean: 3.0"
    assert out[1].startswith("Standard deviation: 1.414")
    assert out[2] == "Probability: 0.24609375"


def test_top_level_exports():
    assert pystatskit.__version__ == "0.1.0"
    assert pystatskit.Statistics([1, 2, 3]).mean() == 2.0
    assert pystatskit.Binomial(10, 0.5).mean() == 5.0
    for name in pystatskit.__all__:
        assert hasattr(pystatskit, name)
