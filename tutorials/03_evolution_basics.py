"""
Evolution Basics Tutorial

Goals:
- Evolve a rule base on a synthetic two-input problem
- Use a fitness that trades TSS against complexity
- Inspect the per-generation trace
"""

import random

from fres.classifier import FuzzyClassifier, Interpretation
from fres.config import PRESET_MINIMAL, merge_config
from fres.data import DataMatrix
from fres.evolution import evolve_from_config, make_tss_fitness
from fres.utils.observability import EvolutionTrace


def main():
    rng = random.Random(0)
    data = DataMatrix(['x', 'y', 'label'])
    for _ in range(200):
        x, y = rng.random(), rng.random()
        data.add_row([x, y], int(x + y > 1.2))
    test = data.split_frame(0.2, rng)

    interp = Interpretation(['below', 'above'])
    interp.add_triangular_partition('x', 3, 0.0, 1.0)
    interp.add_triangular_partition('y', 3, 0.0, 1.0)
    initial = FuzzyClassifier(interp, [({0: 0}, 0), ({0: 2}, 1)])

    config = merge_config(PRESET_MINIMAL)
    config['t_max'] = 20
    trace = EvolutionTrace()
    best = evolve_from_config(initial, make_tss_fitness(1, 0.001), data, config, seed=7, observer=trace)

    print('best per generation:', [round(s, 3) for s in trace.best_scores()])
    print('stopped:', trace.stop_reason, 'at', trace.stop_generation)
    print('test tss before:', round(initial.evaluate_all(test).tss(1), 3))
    print('test tss after :', round(best.evaluate_all(test).tss(1), 3))
    print(best)


if __name__ == '__main__':
    main()
