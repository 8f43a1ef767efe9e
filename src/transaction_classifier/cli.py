"""Command-line interface for the transaction classifier.

Developer tooling for inspecting the built-in model: classify sample
descriptions, look at training statistics and informative tokens, and
cross-validate the corpus. Output uses the ``click`` and ``rich``
libraries.

Usage::

    transaction-classifier classify "coffee shop" "uber ride"
    transaction-classifier stats --output json
    transaction-classifier features SALARY --top 5
    transaction-classifier evaluate --folds 5
"""

from __future__ import annotations

import json
import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from .config import Settings, configure_logging
from .corpus import TRAINING_DATA
from .evaluation import ClassificationMetrics, cross_validate
from .models import Category
from .service import get_classifier, init_classifier

console = Console()

_CATEGORY_STYLES = {
    Category.FOOD: "green",
    Category.TRANSPORTATION: "blue",
    Category.ENTERTAINMENT: "magenta",
    Category.UTILITIES: "yellow",
    Category.SHOPPING: "cyan",
    Category.HEALTHCARE: "red",
    Category.EDUCATION: "bright_blue",
    Category.TRAVEL: "bright_magenta",
    Category.SALARY: "bold green",
    Category.OTHER: "dim",
}


def _fail(error: Exception) -> None:
    console.print(f"[bold red]Error:[/] {error}")
    sys.exit(1)


@click.group()
@click.version_option(package_name="transaction-classifier")
@click.option("--log-level", default=None,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Override TRANSACTION_CLASSIFIER_LOG_LEVEL.")
@click.pass_context
def main(ctx: click.Context, log_level: Optional[str]) -> None:
    """Naive Bayes transaction categorizer.

    Trains on the built-in corpus at startup and assigns one spending
    category to each transaction description.
    """
    try:
        settings = Settings.from_env()
    except ValueError as e:
        _fail(e)
    configure_logging(log_level or settings.log_level)
    ctx.obj = settings


@main.command()
@click.argument("descriptions", nargs=-1, required=True)
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
def classify(descriptions: tuple[str, ...], output: str) -> None:
    """Classify one or more transaction descriptions.

    Example: transaction-classifier classify "grocery store purchase"
    """
    classifier = init_classifier()
    results = [(text, classifier.classify(text)) for text in descriptions]

    if output == "json":
        click.echo(json.dumps(
            [{"description": text, "category": cat.value} for text, cat in results],
            indent=2,
        ))
        return

    table = Table(title="Classified Transactions")
    table.add_column("Description", style="white")
    table.add_column("Category", width=16)
    for text, cat in results:
        table.add_row(text, f"[{_CATEGORY_STYLES[cat]}]{cat.value}[/]")
    console.print(table)


@main.command()
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
def stats(output: str) -> None:
    """Show training statistics for the built-in model."""
    init_classifier()
    model_stats = get_classifier().stats

    if output == "json":
        click.echo(json.dumps(model_stats.to_dict(), indent=2))
        return

    table = Table(
        title=f"Training corpus: {model_stats.total_documents} examples, "
              f"{model_stats.vocabulary_size} distinct tokens",
    )
    table.add_column("Category", style="cyan", width=16)
    table.add_column("Examples", justify="right")
    table.add_column("Tokens", justify="right")
    for label, count in model_stats.category_counts.items():
        table.add_row(label, str(count), str(model_stats.token_totals[label]))
    console.print(table)


@main.command()
@click.argument("category", type=click.Choice([c.value for c in Category], case_sensitive=False))
@click.option("--top", "-n", "top_n", type=click.IntRange(min=1), default=10,
              help="Number of tokens to show.")
def features(category: str, top_n: int) -> None:
    """List the tokens most indicative of CATEGORY.

    Example: transaction-classifier features SALARY --top 5
    """
    classifier = init_classifier()
    target = Category.from_label(category)
    try:
        ranked = classifier.most_informative_features(target, top_n=top_n)
    except ValueError as e:
        _fail(e)

    table = Table(title=f"Most informative tokens: {target.value}")
    table.add_column("#", justify="right", width=4)
    table.add_column("Token", style="cyan")
    table.add_column("Log ratio", justify="right")
    for i, (token, ratio) in enumerate(ranked, 1):
        table.add_row(str(i), token, f"{ratio:.4f}")
    console.print(table)


@main.command()
@click.option("--folds", "-k", type=int, default=None,
              help="Number of folds (defaults to TRANSACTION_CLASSIFIER_CV_FOLDS).")
@click.option("--seed", type=int, default=None,
              help="Fold shuffling seed (defaults to TRANSACTION_CLASSIFIER_CV_SEED).")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.pass_obj
def evaluate(settings: Settings, folds: Optional[int], seed: Optional[int], output: str) -> None:
    """Cross-validate the classifier on the built-in corpus."""
    k = folds if folds is not None else settings.cv_folds
    fold_seed = seed if seed is not None else settings.cv_seed

    with console.status("[bold blue]Cross-validating...", spinner="dots"):
        try:
            results = cross_validate(TRAINING_DATA, k=k, seed=fold_seed)
        except ValueError as e:
            _fail(e)

    mean_accuracy = sum(r.accuracy for r in results) / len(results)

    if output == "json":
        click.echo(json.dumps({
            "folds": k,
            "seed": fold_seed,
            "mean_accuracy": round(mean_accuracy, 4),
            "fold_metrics": [r.to_dict() for r in results],
        }, indent=2))
        return

    _render_folds(results)
    console.print(f"Mean accuracy over {k} folds: [bold]{mean_accuracy:.2%}[/]")


# ------------------------------------------------------------------
# Rich rendering helpers
# ------------------------------------------------------------------

def _render_folds(results: list[ClassificationMetrics]) -> None:
    """Render per-fold metrics as a rich table."""
    table = Table(title="Cross-validation")
    table.add_column("Fold", justify="right", width=6)
    table.add_column("Accuracy", justify="right")
    table.add_column("Macro F1", justify="right")
    table.add_column("Weighted F1", justify="right")

    for i, metrics in enumerate(results, 1):
        if metrics.accuracy >= 0.8:
            style = "green"
        elif metrics.accuracy >= 0.5:
            style = "yellow"
        else:
            style = "red"
        table.add_row(
            str(i),
            f"[{style}]{metrics.accuracy:.2%}[/]",
            f"{metrics.macro_f1:.4f}",
            f"{metrics.weighted_f1:.4f}",
        )

    console.print(table)


if __name__ == "__main__":
    main()
