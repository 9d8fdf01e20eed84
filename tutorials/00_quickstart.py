from fres.classifier import FuzzyClassifier, Interpretation
from fres.data import DataMatrix


def main():
    # Quickstart goal:
    # 1) Describe two inputs with triangular fuzzy partitions
    # 2) Write a two-rule classifier by hand
    # 3) Classify a few rows and score them with a confusion matrix

    # Categories are indexed in the order given here.
    interp = Interpretation(['small', 'large'])

    # Each input gets a partition over its value range; labels are generated (low, medium, high, ...).
    interp.add_triangular_partition('height', 3, 0.0, 2.0)
    interp.add_triangular_partition('width', 2, 0.0, 1.0)

    # Antecedents map input index -> fuzzy set index.
    clf = FuzzyClassifier(interp)
    clf.add_rule({0: 0}, 0)          # if height is low then small
    clf.add_rule({0: 2, 1: 1}, 1)    # if height is high and width is high then large
    print(clf)

    # A row holds one value per input; the category with the strongest support wins.
    for row in ([0.1, 0.2], [1.9, 0.9], [1.0, 0.5]):
        print(row, '->', interp.category_name(clf.evaluate(row)))

    # Score on a small labelled table (last column = observed category).
    data = DataMatrix(['height', 'width', 'size'])
    data.add_row([0.2, 0.3], 0)
    data.add_row([1.8, 0.8], 1)
    data.add_row([1.6, 0.1], 1)
    cm = clf.evaluate_all(data)
    print('accuracy:', round(cm.accuracy(), 3))
    print('tss(large):', round(cm.tss(1), 3))


if __name__ == '__main__':
    main()
