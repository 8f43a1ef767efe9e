"""Multinomial Naive Bayes classifier for transaction descriptions.

Assigns a single spending category to free text such as "coffee shop" or
"monthly salary". Training counts how often each token appears under each
category; classification picks the category maximizing

    log P(category) + sum(log P(token | category) for token in text)

Likelihoods use Laplace smoothing, ``(count + 1) / (category_tokens + |V|)``,
so a token never seen under a category still has a small non-zero
probability. Scores stay in log space because the product of many small
probabilities underflows to zero.

A trained model is read-only: ``classify`` never mutates state and can be
called from many threads at once. ``train`` may run only once per instance;
build a new instance to retrain.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from .models import Category, ClassifierStats, TrainingExample
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = Category.OTHER


class NaiveBayesClassifier:
    """Naive Bayes text classifier over the fixed ``Category`` set.

    Example::

        classifier = NaiveBayesClassifier().train(TRAINING_DATA)
        classifier.classify("coffee shop")  # Category.FOOD
    """

    def __init__(self) -> None:
        self._categories: list[Category] = []
        self._word_frequencies: dict[Category, Counter[str]] = {}
        self._category_counts: Counter[Category] = Counter()
        self._token_totals: dict[Category, int] = {}
        self._total_documents = 0
        self._vocabulary: set[str] = set()

    # ------------------------------------------------------------------
    # Model state (read-only views)
    # ------------------------------------------------------------------

    @property
    def is_trained(self) -> bool:
        """Whether ``train`` has completed on this instance."""
        return self._total_documents > 0

    @property
    def categories(self) -> tuple[Category, ...]:
        """Categories in the order they were first seen during training."""
        return tuple(self._categories)

    @property
    def word_frequencies(self) -> Mapping[Category, Mapping[str, int]]:
        return MappingProxyType(
            {cat: MappingProxyType(freqs) for cat, freqs in self._word_frequencies.items()}
        )

    @property
    def category_counts(self) -> Mapping[Category, int]:
        return MappingProxyType(self._category_counts)

    @property
    def total_documents(self) -> int:
        return self._total_documents

    @property
    def vocabulary(self) -> frozenset[str]:
        return frozenset(self._vocabulary)

    @property
    def stats(self) -> ClassifierStats:
        """Snapshot of the training statistics."""
        return ClassifierStats(
            total_documents=self._total_documents,
            vocabulary_size=len(self._vocabulary),
            category_counts={cat.value: self._category_counts[cat] for cat in self._categories},
            token_totals={cat.value: self._token_totals.get(cat, 0) for cat in self._categories},
        )

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------

    def train(self, examples: Iterable[TrainingExample]) -> "NaiveBayesClassifier":
        """Learn category statistics from labeled examples.

        Args:
            examples: Labeled descriptions. Must not be empty.

        Returns:
            Self (for method chaining).

        Raises:
            ValueError: If ``examples`` is empty.
            RuntimeError: If this instance has already been trained.
        """
        if self.is_trained:
            raise RuntimeError(
                "Classifier is already trained. Create a new instance to retrain."
            )

        examples = list(examples)
        if not examples:
            raise ValueError("Cannot train on an empty set of examples.")

        for example in examples:
            category = example.category
            if category not in self._word_frequencies:
                self._categories.append(category)
                self._word_frequencies[category] = Counter()
            self._category_counts[category] += 1

            tokens = tokenize(example.description)
            self._word_frequencies[category].update(tokens)
            self._vocabulary.update(tokens)

        self._token_totals = {
            cat: sum(freqs.values()) for cat, freqs in self._word_frequencies.items()
        }
        self._total_documents = len(examples)

        logger.info(
            "Trained classifier on %d examples: %d categories, %d distinct tokens",
            self._total_documents,
            len(self._categories),
            len(self._vocabulary),
        )
        return self

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def classify(self, text: str) -> Category:
        """Return the most probable category for a description.

        Text without any known words falls back to the prior, i.e. the
        category with the most training examples. Exact score ties go to
        the category registered first during training.

        Args:
            text: Free-text transaction description.

        Returns:
            The best-scoring Category, or ``Category.OTHER`` if no category
            has a finite score.

        Raises:
            RuntimeError: If the classifier has not been trained.
        """
        self._check_trained()

        tokens = tokenize(text)
        best_category = DEFAULT_CATEGORY
        best_score = -math.inf

        for category in self._categories:
            score = self._log_prior(category)
            for token in tokens:
                score += self._smoothed_log_likelihood(token, category)

            # Strict comparison keeps the earlier category on ties.
            if score > best_score:
                best_score = score
                best_category = category

        logger.debug("Classified %r as %s (log score %.4f)", text, best_category, best_score)
        return best_category

    def log_likelihood(self, token: str, category: Category) -> float:
        """Smoothed ``log P(token | category)``.

        Finite for every token and category, including tokens outside the
        vocabulary and categories with no training data.

        Raises:
            RuntimeError: If the classifier has not been trained.
        """
        self._check_trained()
        return self._smoothed_log_likelihood(token, category)

    def most_informative_features(
        self,
        category: Category,
        top_n: int = 10,
    ) -> list[tuple[str, float]]:
        """Return the tokens most indicative of ``category``.

        Ranks each vocabulary token by how much its log-likelihood under
        ``category`` exceeds its average log-likelihood under the other
        categories.

        Args:
            category: Target category.
            top_n: Number of tokens to return.

        Returns:
            List of (token, log_likelihood_ratio) tuples, sorted by ratio
            (descending), then alphabetically.

        Raises:
            RuntimeError: If the classifier has not been trained.
            ValueError: If ``category`` was not seen during training.
        """
        self._check_trained()
        if category not in self._word_frequencies:
            known = ", ".join(c.value for c in self._categories)
            raise ValueError(f"Unknown class: {category.value}. Known: {known}")

        others = [c for c in self._categories if c is not category]
        ratios: list[tuple[str, float]] = []
        for token in self._vocabulary:
            target = self._smoothed_log_likelihood(token, category)
            if others:
                baseline = sum(self._smoothed_log_likelihood(token, c) for c in others) / len(others)
            else:
                baseline = 0.0
            ratios.append((token, round(target - baseline, 4)))

        ratios.sort(key=lambda item: (-item[1], item[0]))
        return ratios[:top_n]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _check_trained(self) -> None:
        if not self.is_trained:
            raise RuntimeError("Classifier has not been trained. Call train() first.")

    def _log_prior(self, category: Category) -> float:
        count = self._category_counts.get(category, 0)
        if count == 0:
            return -math.inf
        return math.log(count / self._total_documents)

    def _smoothed_log_likelihood(self, token: str, category: Category) -> float:
        frequencies = self._word_frequencies.get(category)
        count = frequencies.get(token, 0) if frequencies else 0
        # Zero only for a corpus made entirely of empty descriptions.
        denominator = (self._token_totals.get(category, 0) + len(self._vocabulary)) or 1
        return math.log((count + 1) / denominator)
