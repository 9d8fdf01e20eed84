"""
Truth Algebras Tutorial

Goals:
- Compare the connectives of the Boolean, Łukasiewicz, Gödel and Product logics
- Show that values of different logics never mix
"""

from fres.logic import LOGICS, Boolean, Godel, Lukasiewicz, get_logic


def main():
    a, b = 0.7, 0.4
    for name, logic in LOGICS.items():
        if logic is Boolean:
            continue
        x, y = logic(a), logic(b)
        print(f"{name:12s} not a={float(~x):.2f} a&&b={float(x.strong_and(y)):.2f} "
              f"a||b={float(x.strong_or(y)):.2f} a->b={float(x.implies(y)):.2f} "
              f"a<->b={float(x.equiv(y)):.2f}")

    # Weak connectives are min/max in every logic.
    print('weak and/or:', Lukasiewicz(a) & Lukasiewicz(b), Lukasiewicz(a) | Lukasiewicz(b))

    # Boolean values behave like plain bools.
    print('boolean:', Boolean(True).implies(Boolean(False)), bool(Boolean(True).neg()))

    # Names are case-insensitive and accept the usual spellings.
    print('lookup:', get_logic('Gödel') is Godel)

    try:
        Godel(0.3).strong_and(Lukasiewicz(0.3))
    except TypeError as exc:
        print('mixing logics:', exc)


if __name__ == '__main__':
    main()
