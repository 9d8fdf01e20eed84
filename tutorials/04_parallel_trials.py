"""
Parallel Trials Tutorial

Goals:
- Run several independent searches concurrently from one master seed
- Summarize how much they agree
"""

import random

from fres.classifier import FuzzyClassifier, Interpretation
from fres.data import DataMatrix
from fres.evolution import run_trials, summarize_trials


def main():
    rng = random.Random(1)
    data = DataMatrix(['a', 'b', 'class'])
    for _ in range(150):
        a, b = rng.random(), rng.random()
        data.add_row([a, b], int(b > 0.5))
    test = data.split_frame(0.1, rng)

    interp = Interpretation(['low_b', 'high_b'])
    interp.add_triangular_partition('a', 2)
    interp.add_triangular_partition('b', 3)
    initial = FuzzyClassifier(interp, [({0: 0}, 0), ({0: 1}, 1)])

    config = {'pop_size': 16, 'elites': 4, 't_max': 10, 'trials': 4, 'log_every': 5}
    results = run_trials(initial, data, test, config, seed=2024, max_workers=4)
    for r in results:
        print(f"trial {r.trial}: seed={r.seed} tss {r.initial_test_tss:.3f} -> {r.test_tss:.3f} "
              f"rules={r.classifier.size()}")
    print(summarize_trials(results))


if __name__ == '__main__':
    main()
