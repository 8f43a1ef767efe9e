"""Process-wide classifier used when transactions are created.

The application calls :func:`init_classifier` once during startup. After
that, request handlers call :func:`categorize_transaction` (or
:func:`classify_transaction`) to tag each new transaction. There is no
implicit initialization: using the handle before ``init_classifier`` is a
startup-ordering bug and raises ``RuntimeError``.

Re-running ``init_classifier`` trains a brand-new model and swaps it in;
threads already holding the previous model keep using it unchanged.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from typing import Optional

from .classifier import NaiveBayesClassifier
from .corpus import TRAINING_DATA
from .models import Category, TrainingExample

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_active: Optional[NaiveBayesClassifier] = None


def init_classifier(
    examples: Iterable[TrainingExample] = TRAINING_DATA,
) -> NaiveBayesClassifier:
    """Train a classifier and publish it as the process-wide model.

    Args:
        examples: Training corpus. Defaults to the built-in corpus.

    Returns:
        The newly trained, now active classifier.

    Raises:
        ValueError: If ``examples`` is empty. The active model is left as is.
    """
    global _active

    classifier = NaiveBayesClassifier().train(examples)
    with _lock:
        replaced = _active is not None
        _active = classifier

    logger.info(
        "%s transaction classifier (%d training examples)",
        "Replaced" if replaced else "Initialized",
        classifier.total_documents,
    )
    return classifier


def get_classifier() -> NaiveBayesClassifier:
    """Return the active classifier.

    Raises:
        RuntimeError: If :func:`init_classifier` has not been called.
    """
    classifier = _active
    if classifier is None:
        raise RuntimeError(
            "Transaction classifier is not initialized. Call init_classifier() at startup."
        )
    return classifier


def reset_classifier() -> None:
    """Drop the active classifier (used by tests and at shutdown)."""
    global _active
    with _lock:
        _active = None


def classify_transaction(description: str) -> Category:
    """Classify a transaction description with the active classifier."""
    return get_classifier().classify(description)


def categorize_transaction(title: str, description: Optional[str] = None) -> Category:
    """Pick the category for a newly created transaction.

    Uses the description when it holds any non-whitespace text, otherwise
    the title. A whitespace-only description therefore also falls back to
    the title; a plain truthiness check would classify the blank string and
    land on the empty-input default.

    Args:
        title: Transaction title (required on every transaction).
        description: Optional free-text description.

    Returns:
        Category to store on the transaction.
    """
    text = description if description and description.strip() else title
    return classify_transaction(text)
