"""
Fuzzy Rule Search Demo (FRES)

Summary:
- Evolves fuzzy rule bases separating two categories of a dataset
- Runs several independent trials in parallel, each from its own derived seed
- Reports the best rule base per trial, its change in test TSS, and a summary

Data comes from a CSV file (last column = integer category) given with --csv,
or from the scikit-learn iris dataset (virginica vs. the rest) by default.
Use --quick for a short sanity run.
"""

from __future__ import annotations

import argparse
import logging
import time

from fres.classifier import FuzzyClassifier, Interpretation, format_classifier
from fres.config import PRESET_MINIMAL, merge_config
from fres.data import DataMatrix
from fres.evolution import run_trials, summarize_trials
from fres.utils.rng_manager import RNGManager


def load_data(csv_path: str | None) -> tuple[DataMatrix, list[str]]:
    if csv_path:
        return DataMatrix.from_csv(csv_path), ['Non-interaction', 'Interaction']
    from sklearn.datasets import load_iris

    iris = load_iris()
    names = [n.replace(' (cm)', '').replace(' ', '_') for n in iris.feature_names]
    y = (iris.target == 2).astype(int)
    return DataMatrix.from_arrays(iris.data, y, names, 'virginica'), ['other', 'virginica']


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument('--csv', type=str, default=None, help='CSV file; last column is the integer category')
    ap.add_argument('--logic', type=str, default=None, help='overrides the configured logic (Łukasiewicz)')
    ap.add_argument('--seed', type=int, default=None)
    ap.add_argument('--trials', type=int, default=20)
    ap.add_argument('--nsets', type=int, default=5, help='fuzzy sets per input variable')
    ap.add_argument('--pop', type=int, default=200)
    ap.add_argument('--elites', type=int, default=None, help='defaults to pop / 10')
    ap.add_argument('--gens', type=int, default=100)
    ap.add_argument('--alpha', type=float, default=0.0005, help='complexity penalty')
    ap.add_argument('--ptest', type=float, default=0.1, help='proportion held for testing')
    ap.add_argument('--workers', type=int, default=None)
    ap.add_argument('--quick', action='store_true', help='use a tiny config for sanity-run')
    ap.add_argument('-v', '--verbose', action='store_true')
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING, format='%(levelname)s %(message)s')

    overrides = {
        'trials': args.trials,
        'nsets': args.nsets,
        'pop_size': args.pop,
        't_max': args.gens,
        'alpha': args.alpha,
        'test_proportion': args.ptest,
        'max_workers': args.workers,
    }
    if args.logic is not None:
        overrides['logic'] = args.logic
    if args.quick:
        overrides.update(PRESET_MINIMAL)

    pop_size = max(int(overrides['pop_size']), 8)
    if pop_size != overrides['pop_size']:
        logging.warning("population raised to the minimum of 8")
    if args.elites is not None:
        overrides['elites'] = args.elites
    elites = int(overrides.get('elites', pop_size // 10))
    if elites > pop_size // 2:
        logging.warning("elites lowered to half the population")
    overrides.update(pop_size=pop_size, elites=max(1, min(elites, pop_size // 2)))
    config = merge_config(overrides)

    seed = args.seed if args.seed is not None else int(time.time())
    rng = RNGManager(seed)

    data, categories = load_data(args.csv)
    test = data.split_frame(float(config['test_proportion']), rng.rng)
    interp = Interpretation.from_data(data, categories, config, first_nsets=2)

    print('Parameters:')
    print(f"  Seed: {seed}")
    print(f"  Trials: {config['trials']}")
    print(f"  Logic: {interp.logic.name}")
    print(f"  Fuzzy sets per input variables: {config['nsets']}")
    print(f"  Population size: {config['pop_size']}")
    print(f"  Elites: {config['elites']}")
    print(f"  Non-elites: {config['pop_size'] - config['elites']}")
    print(f"  Complexity penalty (alpha): {config['alpha']}")
    print(f"  Proportion held for testing: {config['test_proportion']}")
    print('\nInput variables:')
    for h, name in enumerate(data.input_names()):
        print(f"  {h}: {name}")
    print(f"\nOutput variable: {data.output_name()}")
    print(f"Training data size: {data.nrows()}")
    print(f"Testing data size: {test.nrows()}")

    fixed = [({0: 0}, 0), ({0: 1}, 1)]
    initial = FuzzyClassifier(interp, fixed)

    results = run_trials(
        initial, data, test, config, seed=rng.derive_seed(), fixed_rules=[a for a, _ in fixed]
    )
    for r in results:
        print(f"\n# Trial {r.trial} (seed {r.seed})")
        print('\n## Best rule base\n')
        print(format_classifier(r.classifier), end='')
        print(f"\nTSS change: {r.initial_test_tss:.4f} -> {r.test_tss:.4f} (improvement: {r.improvement:.4f})")

    summary = summarize_trials(results)
    print(f"\nMean improvement: {summary['mean_improvement']:.4f}")
    print(f"Frequency of the most common solution: {summary['most_common_frequency']:.3f}")
    print(f"Mean pairwise Tanimoto similarity: {summary['mean_pairwise_tanimoto']:.3f}")


if __name__ == '__main__':
    main()
