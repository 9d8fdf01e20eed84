"""
Partitions & Interpretation Tutorial

Goals:
- Build triangular partitions and inspect their membership degrees
- Register a custom partition in an interpretation
- Print the interpretation summary
"""

from fres.classifier import Interpretation, format_interpretation
from fres.fuzzy import make_labels, make_slope, make_triangles
from fres.logic import Product


def main():
    sets = make_triangles(3, 0.0, 10.0)
    labels = make_labels(3)
    for x in (0.0, 2.5, 5.0, 7.5, 10.0):
        degrees = ', '.join(f"{labels[i]}={s(x):.2f}" for i, s in enumerate(sets))
        print(f"x={x:4.1f}: {degrees}")

    interp = Interpretation(['no', 'yes'], logic=Product)
    interp.add_triangular_partition('temperature', 4, -10.0, 30.0)

    # A hand-made two-set partition: a falling and a rising slope.
    cold = make_slope(0.0, 1.0, Product(1.0), Product(0.0))
    warm = make_slope(0.0, 1.0, Product(0.0), Product(1.0))
    interp.add_partition('humidity', [cold, warm], ['dry', 'humid'], 'slopes(0, 1)')

    print(format_interpretation(interp), end='')
    print('truth(humidity is humid | 0.25):', interp.truth(1, 1, 0.25))

    # Once frozen, no inputs can be added.
    interp.freeze()
    print('frozen:', interp.frozen)


if __name__ == '__main__':
    main()
