"""
Demonstration: python -m pystatskit
"""

from pystatskit.descriptive import Statistics
from pystatskit.distributions import Binomial


def main() -> int:
    stats = Statistics([1, 2, 3, 4, 5])
    print(f"Mean: {stats.mean()}")
    print(f"Standard deviation: {stats.standard_deviation()}")

    binom = Binomial(10, 0.5)
    print(f"Probability: {binom.probability_at(5)}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
