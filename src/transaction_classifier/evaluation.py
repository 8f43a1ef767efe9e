"""Accuracy measurement for the transaction classifier.

Precision, recall and F1 per ``Category``, plus stratified k-fold
cross-validation that trains a fresh classifier per fold. Used by the
``evaluate`` CLI command to check how well the built-in corpus generalizes
to phrasings it was not trained on.
"""

from __future__ import annotations

import random
from collections import Counter, defaultdict
from collections.abc import Sequence
from dataclasses import dataclass, field

from .classifier import NaiveBayesClassifier
from .models import Category, TrainingExample


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else 0.0


@dataclass
class ClassificationMetrics:
    """Scores for one set of predictions.

    ``per_class`` has an entry for every Category; categories that never
    occur in either the true or the predicted labels score 0.0 there but
    are left out of the macro and weighted averages.

    Attributes:
        accuracy: Fraction of predictions that match the true category.
        per_class: Precision, recall and F1 for each Category.
        macro_precision: Mean precision over the observed categories.
        macro_recall: Mean recall over the observed categories.
        macro_f1: Mean F1 over the observed categories.
        weighted_f1: F1 averaged by true-label support.
        pair_counts: Occurrences of each (true, predicted) pair.
        support: Number of true labels per category.
    """

    accuracy: float = 0.0
    per_class: dict[Category, dict[str, float]] = field(default_factory=dict)
    macro_precision: float = 0.0
    macro_recall: float = 0.0
    macro_f1: float = 0.0
    weighted_f1: float = 0.0
    pair_counts: Counter[tuple[Category, Category]] = field(default_factory=Counter)
    support: Counter[Category] = field(default_factory=Counter)

    @property
    def observed(self) -> list[Category]:
        """Categories present in the true or predicted labels, in enum order."""
        seen = {cat for pair in self.pair_counts for cat in pair}
        return [cat for cat in Category if cat in seen]

    def confusion(self, true: Category, predicted: Category) -> int:
        """How often ``true`` was classified as ``predicted``."""
        return self.pair_counts[(true, predicted)]

    def to_dict(self) -> dict:
        observed = self.observed
        return {
            "accuracy": round(self.accuracy, 4),
            "macro_precision": round(self.macro_precision, 4),
            "macro_recall": round(self.macro_recall, 4),
            "macro_f1": round(self.macro_f1, 4),
            "weighted_f1": round(self.weighted_f1, 4),
            "per_class": {
                cat.value: {name: round(score, 4) for name, score in scores.items()}
                for cat, scores in self.per_class.items()
            },
            "confusion_matrix": {
                true.value: {pred.value: self.confusion(true, pred) for pred in observed}
                for true in observed
            },
            "support": {cat.value: self.support[cat] for cat in observed},
        }

    def summary(self) -> str:
        """Human-readable summary of metrics."""
        lines = [
            f"Accuracy: {self.accuracy:.2%}",
            f"Macro F1: {self.macro_f1:.4f}",
            f"Weighted F1: {self.weighted_f1:.4f}",
            "",
            f"{'Category':<16} {'Precision':>10} {'Recall':>10} {'F1':>10} {'Support':>10}",
            "-" * 58,
        ]
        for cat in self.observed:
            scores = self.per_class[cat]
            lines.append(
                f"{cat.value:<16} {scores['precision']:>10.4f} {scores['recall']:>10.4f} "
                f"{scores['f1']:>10.4f} {self.support[cat]:>10}"
            )
        return "\n".join(lines)


def compute_metrics(
    y_true: Sequence[Category],
    y_pred: Sequence[Category],
) -> ClassificationMetrics:
    """Score predicted categories against the true ones.

    Args:
        y_true: Ground truth categories.
        y_pred: Predicted categories, aligned with ``y_true``.

    Returns:
        ClassificationMetrics covering every Category.

    Raises:
        ValueError: If the sequences differ in length or are empty.
    """
    if len(y_true) != len(y_pred):
        raise ValueError("y_true and y_pred must have the same length")
    if not y_true:
        raise ValueError("Cannot compute metrics without any predictions")

    pairs = Counter(zip(y_true, y_pred))
    support = Counter(y_true)
    predicted = Counter(y_pred)
    hits = Counter({true: n for (true, pred), n in pairs.items() if true == pred})

    per_class: dict[Category, dict[str, float]] = {}
    for cat in Category:
        precision = _ratio(hits[cat], predicted[cat])
        recall = _ratio(hits[cat], support[cat])
        per_class[cat] = {
            "precision": precision,
            "recall": recall,
            "f1": _ratio(2 * precision * recall, precision + recall),
        }

    observed = [cat for cat in Category if support[cat] or predicted[cat]]

    def macro(name: str) -> float:
        return sum(per_class[cat][name] for cat in observed) / len(observed)

    return ClassificationMetrics(
        accuracy=sum(hits.values()) / len(y_true),
        per_class=per_class,
        macro_precision=macro("precision"),
        macro_recall=macro("recall"),
        macro_f1=macro("f1"),
        weighted_f1=sum(per_class[cat]["f1"] * n for cat, n in support.items()) / len(y_true),
        pair_counts=pairs,
        support=support,
    )


def stratified_k_fold(
    labels: Sequence[Category],
    k: int = 5,
    seed: int = 42,
) -> list[tuple[list[int], list[int]]]:
    """Split example indices into k stratified train/test folds.

    Every category contributes at least one test example to every fold,
    so ``k`` cannot exceed the size of the smallest category.

    Args:
        labels: Category of each example.
        k: Number of folds.
        seed: Random seed for reproducibility.

    Returns:
        List of (train_indices, test_indices) tuples, each sorted.

    Raises:
        ValueError: If ``k`` is below 2, ``labels`` is empty, or some
            category has fewer than ``k`` examples.
    """
    if k < 2:
        raise ValueError(f"k must be at least 2, got {k}")

    by_category: dict[Category, list[int]] = defaultdict(list)
    for idx, label in enumerate(labels):
        by_category[label].append(idx)
    if not by_category:
        raise ValueError("Cannot split an empty set of labels")

    smallest = min(by_category, key=lambda cat: len(by_category[cat]))
    if len(by_category[smallest]) < k:
        raise ValueError(
            f"k={k} is larger than the {len(by_category[smallest])} examples of "
            f"{smallest.value}; every fold needs a test example from each category"
        )

    rng = random.Random(seed)
    test_folds: list[list[int]] = [[] for _ in range(k)]
    for indices in by_category.values():
        rng.shuffle(indices)
        for position, idx in enumerate(indices):
            test_folds[position % k].append(idx)

    everything = range(len(labels))
    folds: list[tuple[list[int], list[int]]] = []
    for test in test_folds:
        held_out = set(test)
        folds.append(([i for i in everything if i not in held_out], sorted(test)))
    return folds


def cross_validate(
    examples: Sequence[TrainingExample],
    k: int = 5,
    seed: int = 42,
) -> list[ClassificationMetrics]:
    """Run stratified k-fold cross-validation.

    Args:
        examples: Labeled examples to split.
        k: Number of folds.
        seed: Random seed for fold generation.

    Returns:
        List of ClassificationMetrics (one per fold).

    Raises:
        ValueError: If the examples cannot be split into ``k`` folds.
    """
    labels = [example.category for example in examples]
    results: list[ClassificationMetrics] = []

    for train_idx, test_idx in stratified_k_fold(labels, k=k, seed=seed):
        classifier = NaiveBayesClassifier().train(examples[i] for i in train_idx)
        predictions = [classifier.classify(examples[i].description) for i in test_idx]
        results.append(compute_metrics([labels[i] for i in test_idx], predictions))

    return results


def evaluate_training_fit(
    classifier: NaiveBayesClassifier,
    examples: Sequence[TrainingExample],
) -> ClassificationMetrics:
    """Score a trained classifier against labeled examples.

    On the examples it was trained on this is a resubstitution sanity
    check, not an estimate of accuracy on new descriptions.
    """
    y_true = [example.category for example in examples]
    y_pred = [classifier.classify(example.description) for example in examples]
    return compute_metrics(y_true, y_pred)
