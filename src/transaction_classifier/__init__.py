"""Transaction Classifier -- Naive Bayes categorization of spending descriptions."""

__version__ = "1.0.0"

from .classifier import NaiveBayesClassifier
from .corpus import TRAINING_DATA, examples_for
from .evaluation import (
    ClassificationMetrics,
    compute_metrics,
    cross_validate,
    evaluate_training_fit,
    stratified_k_fold,
)
from .models import Category, ClassifierStats, TrainingExample
from .service import (
    categorize_transaction,
    classify_transaction,
    get_classifier,
    init_classifier,
    reset_classifier,
)
from .tokenizer import tokenize

__all__ = [
    # Core
    "Category",
    "TrainingExample",
    "ClassifierStats",
    "NaiveBayesClassifier",
    "tokenize",
    # Corpus
    "TRAINING_DATA",
    "examples_for",
    # Process-wide handle
    "init_classifier",
    "get_classifier",
    "reset_classifier",
    "classify_transaction",
    "categorize_transaction",
    # Evaluation
    "ClassificationMetrics",
    "compute_metrics",
    "cross_validate",
    "evaluate_training_fit",
    "stratified_k_fold",
]
