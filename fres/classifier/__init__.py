"""Fuzzy rule-based classification."""

from .classifier import FuzzyClassifier, idx_of_maximum
from .display import format_classifier, format_interpretation, format_rule
from .interpretation import Interpretation
from .rules import EMPTY_RULE, Antecedent, Rule, RuleBase, antecedent_with, antecedent_without, make_antecedent

__all__ = [
    "Antecedent",
    "make_antecedent",
    "antecedent_with",
    "antecedent_without",
    "Rule",
    "EMPTY_RULE",
    "RuleBase",
    "Interpretation",
    "FuzzyClassifier",
    "idx_of_maximum",
    "format_rule",
    "format_classifier",
    "format_interpretation",
]
