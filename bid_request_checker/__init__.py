from bid_request_checker.annotator import annotate_and_grade, calculate_grade
from bid_request_checker.evaluator import evaluate
from bid_request_checker.models import Grade, Severity
from bid_request_checker.rules import DEFAULT_CATALOG, RuleCatalog

__all__ = [
    "annotate_and_grade",
    "calculate_grade",
    "evaluate",
    "Grade",
    "Severity",
    "DEFAULT_CATALOG",
    "RuleCatalog",
]
