"""Built-in labeled corpus for the transaction classifier.

Short, generic phrases of the kind people type when recording a
transaction by hand. Ten examples per category; the category order here
is the order the classifier registers categories, which decides ties.
"""

from __future__ import annotations

from .models import Category, TrainingExample


def _examples(category: Category, *descriptions: str) -> list[TrainingExample]:
    return [TrainingExample(description, category) for description in descriptions]


TRAINING_DATA: tuple[TrainingExample, ...] = tuple(
    _examples(
        Category.FOOD,
        "grocery store purchase",
        "restaurant dinner",
        "coffee shop",
        "supermarket shopping",
        "food delivery",
        "lunch at work",
        "breakfast cafe",
        "grocery delivery",
        "food truck",
        "bakery purchase",
    )
    + _examples(
        Category.TRANSPORTATION,
        "gas station",
        "uber ride",
        "public transport",
        "taxi fare",
        "car maintenance",
        "parking fee",
        "auto repair",
        "bus ticket",
        "train fare",
        "car insurance",
    )
    + _examples(
        Category.ENTERTAINMENT,
        "movie tickets",
        "concert tickets",
        "amusement park",
        "streaming service",
        "video games",
        "sports event",
        "theater show",
        "museum visit",
        "gaming subscription",
        "music festival",
    )
    + _examples(
        Category.UTILITIES,
        "electricity bill",
        "water bill",
        "internet service",
        "phone bill",
        "gas bill",
        "cable tv",
        "home internet",
        "mobile plan",
        "utility payment",
        "internet provider",
    )
    + _examples(
        Category.SHOPPING,
        "clothing store",
        "electronics purchase",
        "online shopping",
        "department store",
        "furniture store",
        "shoe store",
        "bookstore",
        "gift shop",
        "jewelry store",
        "sporting goods",
    )
    + _examples(
        Category.HEALTHCARE,
        "doctor visit",
        "pharmacy purchase",
        "hospital bill",
        "dental care",
        "medical supplies",
        "health insurance",
        "prescription drugs",
        "medical test",
        "eye care",
        "health clinic",
    )
    + _examples(
        Category.EDUCATION,
        "tuition payment",
        "school supplies",
        "online course",
        "textbook purchase",
        "university fees",
        "educational software",
        "workshop fee",
        "training course",
        "student loan",
        "educational materials",
    )
    + _examples(
        Category.TRAVEL,
        "hotel booking",
        "flight tickets",
        "vacation rental",
        "travel insurance",
        "car rental",
        "tour package",
        "cruise booking",
        "travel agency",
        "airport parking",
        "travel expenses",
    )
    + _examples(
        Category.SALARY,
        "monthly salary",
        "paycheck deposit",
        "salary payment",
        "wage deposit",
        "income deposit",
        "payroll deposit",
        "salary credit",
        "monthly income",
        "wage payment",
        "salary transfer",
    )
    + _examples(
        Category.OTHER,
        "miscellaneous expense",
        "unknown transaction",
        "general purchase",
        "various items",
        "mixed purchase",
        "general expense",
        "uncategorized",
        "misc purchase",
        "general transaction",
        "various expenses",
    )
)


def examples_for(category: Category) -> list[TrainingExample]:
    """Return the built-in examples labeled with ``category``."""
    return [example for example in TRAINING_DATA if example.category is category]
