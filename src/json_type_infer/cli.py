"""Command line entry point: JSON object file in, source file out.

Usage::

    json-type-infer person.json src/main/java -c Person -p org.acme
    json-type-infer person.json -c Person -l python      # print to stdout
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import typer

from json_type_infer.errors import InferenceError
from json_type_infer.inference import InferenceConfig, TypeInferencer
from json_type_infer.parsing import load_document
from json_type_infer.render import available_languages, get_renderer
from json_type_infer.typetree import is_blank
from json_type_infer.values import DEFAULT_MAX_DEPTH

__all__ = ["app", "main"]

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _fail(message: str) -> typer.Exit:
    typer.echo(message, err=True)
    return typer.Exit(code=1)


@app.command()
def generate(
    json_file: Path = typer.Argument(..., help="JSON object file pathname."),
    output_dir: Optional[Path] = typer.Argument(
        None, help="Directory to write the generated file under; stdout when omitted."
    ),
    class_name: str = typer.Option("Example", "-c", "--class-name", help="Class name."),
    package: Optional[str] = typer.Option(
        None, "-p", "--package", help="Package name (Java default: com.example)."
    ),
    language: str = typer.Option(
        "java",
        "-l",
        "--language",
        help=f"Target language: {', '.join(available_languages())}.",
    ),
    max_depth: int = typer.Option(
        DEFAULT_MAX_DEPTH, "--max-depth", min=1, help="Maximum JSON nesting depth."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log debug output."),
) -> None:
    """Generate class definitions from an example JSON object file."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if is_blank(class_name):
        raise _fail("Class name cannot be blank")

    options: dict[str, Any] = {}
    if package is not None:
        options["package_name"] = package
    try:
        renderer = get_renderer(language, **options)
    except ValueError as exc:
        raise _fail(str(exc)) from exc

    try:
        document = load_document(json_file, max_depth=max_depth)
        inferencer = TypeInferencer(InferenceConfig(max_depth=max_depth))
        tree = inferencer.infer_tree(document, class_name)
    except FileNotFoundError as exc:
        raise _fail(f"File not found: {json_file}") from exc
    except InferenceError as exc:
        raise _fail(f"Failed to infer types from {json_file}: {exc}") from exc

    for qualname in tree.name_collisions():
        logger.warning("Type name %s is declared more than once", qualname)

    source = renderer.render(tree)
    if output_dir is None:
        typer.echo(source, nl=False)
        return

    target = output_dir / renderer.relative_path(tree)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(source, encoding="utf-8")
    except OSError as exc:
        raise _fail(f"Failed to write {target}: {exc}") from exc
    logger.info("Wrote %d bytes to %s", len(source), target)
    typer.echo(f"Successfully generated {target}")


def main() -> None:
    app()
