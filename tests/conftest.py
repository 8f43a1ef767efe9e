"""Shared test fixtures for transaction-classifier tests."""

from __future__ import annotations

import pytest

from transaction_classifier.classifier import NaiveBayesClassifier
from transaction_classifier.corpus import TRAINING_DATA
from transaction_classifier.models import Category, TrainingExample
from transaction_classifier.service import reset_classifier


@pytest.fixture(scope="session")
def trained_classifier() -> NaiveBayesClassifier:
    """Classifier trained on the built-in corpus (read-only, shared)."""
    return NaiveBayesClassifier().train(TRAINING_DATA)


@pytest.fixture
def small_examples() -> list[TrainingExample]:
    """Tiny three-category corpus with easy-to-count statistics."""
    return [
        TrainingExample("coffee shop", Category.FOOD),
        TrainingExample("coffee beans", Category.FOOD),
        TrainingExample("bus ticket", Category.TRANSPORTATION),
        TrainingExample("Movie night!", Category.ENTERTAINMENT),
    ]


@pytest.fixture(autouse=True)
def _clean_process_handle():
    """Keep the process-wide classifier from leaking between tests."""
    reset_classifier()
    yield
    reset_classifier()
