"""Tests for the built-in training corpus."""

from __future__ import annotations

from collections import Counter

from transaction_classifier.corpus import TRAINING_DATA, examples_for
from transaction_classifier.models import Category, TrainingExample
from transaction_classifier.tokenizer import tokenize


class TestTrainingData:
    """Shape of TRAINING_DATA."""

    def test_size(self) -> None:
        assert len(TRAINING_DATA) == 100

    def test_balanced_categories(self) -> None:
        counts = Counter(example.category for example in TRAINING_DATA)
        assert set(counts) == set(Category)
        assert all(n == 10 for n in counts.values())

    def test_grouped_in_enum_order(self) -> None:
        first_seen: list[Category] = []
        for example in TRAINING_DATA:
            if example.category not in first_seen:
                first_seen.append(example.category)
        assert first_seen == list(Category)

    def test_entries_are_training_examples(self) -> None:
        assert all(isinstance(example, TrainingExample) for example in TRAINING_DATA)

    def test_every_description_has_tokens(self) -> None:
        assert all(tokenize(example.description) for example in TRAINING_DATA)

    def test_known_phrases(self) -> None:
        assert TrainingExample("grocery store purchase", Category.FOOD) in TRAINING_DATA
        assert TrainingExample("monthly salary", Category.SALARY) in TRAINING_DATA
        assert TrainingExample("uncategorized", Category.OTHER) in TRAINING_DATA

    def test_is_immutable_sequence(self) -> None:
        assert isinstance(TRAINING_DATA, tuple)


class TestExamplesFor:
    """Tests for examples_for()."""

    def test_filters_by_category(self) -> None:
        travel = examples_for(Category.TRAVEL)
        assert len(travel) == 10
        assert all(example.category is Category.TRAVEL for example in travel)
        assert travel[0].description == "hotel booking"
