"""Human-readable rendering of rules, classifiers and interpretations."""

from __future__ import annotations

from fres.classifier.interpretation import Interpretation
from fres.classifier.rules import Rule


def format_rule(rule: Rule, interpretation: Interpretation) -> str:
    """``If petal_width is low and sepal_length is high then setosa``."""
    antecedent, category = rule
    if not antecedent:
        return "(no rule)"
    conditions = " and ".join(
        f"{interpretation.input_name(var)} {interpretation.label(var, s)}" for var, s in antecedent
    )
    return f"If {conditions} then {interpretation.category_name(category)}"


def format_classifier(classifier) -> str:
    if classifier.empty():
        return "(no rules)\n"
    return "".join(format_rule(rule, classifier.interpretation) + "\n" for rule in classifier)


def format_interpretation(interpretation: Interpretation) -> str:
    lines = [f"Logic: {interpretation.logic.name}", "Inputs:"]
    for var in range(interpretation.num_inputs()):
        lines.append(f"  {var}: {interpretation.input_name(var)} {interpretation.partition_name(var)}")
        for s, label in enumerate(interpretation.labels(var)):
            lines.append(f"    {s}: {label}")
    lines.append("Categories:")
    for c in range(interpretation.num_categories()):
        lines.append(f"  {c}: {interpretation.category_name(c)}")
    return "\n".join(lines) + "\n"


__all__ = ["format_rule", "format_classifier", "format_interpretation"]
