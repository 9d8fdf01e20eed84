"""
Observability & Determinism Tutorial

Goals:
- Attach logging and tracing observers to a search
- Compute a determinism signature and show it is stable for a seed
"""

import logging
import random

from fres.classifier import FuzzyClassifier, Interpretation
from fres.data import DataMatrix
from fres.evolution import evolve, make_mutator, make_tss_fitness, never_stop
from fres.utils.observability import CompositeObserver, EvolutionTrace, LoggingObserver, determinism_signature


def run(interp, data, seed):
    trace = EvolutionTrace()
    observer = CompositeObserver(trace, LoggingObserver(every=2))
    initial = FuzzyClassifier(interp, [({0: 0}, 0), ({0: 1}, 1)])
    evolve(initial, make_mutator(interp), make_tss_fitness(), never_stop, data,
           pop_size=12, elites=3, t_max=6, seed=seed, n=4, pr=0.25, observer=observer)
    return determinism_signature(trace)


def main():
    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')
    rng = random.Random(5)
    data = DataMatrix(['u', 'v', 'out'])
    for _ in range(80):
        u, v = rng.random(), rng.random()
        data.add_row([u, v], int(u > v))

    interp = Interpretation(['no', 'yes'])
    interp.add_triangular_partition('u', 2)
    interp.add_triangular_partition('v', 3)

    first = run(interp, data, seed=99)
    second = run(interp, data, seed=99)
    other = run(interp, data, seed=100)
    print('determinism_sig:', first)
    print('same seed, same signature:', first == second)
    print('other seed, same signature:', first == other)


if __name__ == '__main__':
    main()
