#!/usr/bin/env python3
"""Ad hoc recipe runner for the Leftover Cookbook.

Run one generation cycle directly without starting the web server.

Usage:
    python query.py "chicken, rice, half an onion"
    python query.py --debug "chicken, rice"      # Print every state snapshot as JSON
    python query.py --no-image "chicken, rice"   # Skip the dish image call

Features:
- Same workflow as the web page (blank check, recipe, then image)
- Recipe rendered as Markdown with rich formatting
- Debug mode to display each state transition
- Exit status 1 when the cycle ends in an error
"""

import asyncio
import sys

from rich.console import Console
from rich.markdown import Markdown

from leftover_cookbook.models.models import CookbookState, Phase, Recipe
from leftover_cookbook.services.cookbook import Cookbook
from leftover_cookbook.utils.logger import logger

console = Console()


def recipe_to_markdown(recipe: Recipe) -> str:
    """Format a recipe as Markdown: bulleted ingredients, numbered instructions."""
    lines = [f"# {recipe.title}", "", f"*{recipe.description}*", "", "## Ingredients", ""]
    lines.extend(f"- {item}" for item in recipe.ingredients)
    lines.extend(["", "## Instructions", ""])
    lines.extend(f"{number}. {step}" for number, step in enumerate(recipe.instructions, start=1))
    return "\n".join(lines)


def run_query(ingredients: str, debug: bool = False, with_image: bool = True) -> CookbookState:
    """Run one cycle and print the outcome.

    Args:
        ingredients: Free-text ingredient list.
        debug: If True, print every state snapshot as JSON.
        with_image: If False, stop after the recipe.

    Returns:
        CookbookState: Final snapshot of the cycle.
    """

    def print_snapshot(state: CookbookState) -> None:
        if debug:
            snapshot = state.model_dump(mode="json")
            if snapshot.get("image_url"):
                snapshot["image_url"] = snapshot["image_url"][:60] + "..."
            console.print_json(data=snapshot)

    cookbook = Cookbook(on_change=print_snapshot, with_image=with_image)

    logger.info(f"Generating recipe for: {ingredients}")
    state = asyncio.run(cookbook.generate(ingredients))
    console.print()

    if state.phase == Phase.ERROR:
        console.print(f"[red]✗ {state.error}[/red]")
        return state

    console.print(Markdown(recipe_to_markdown(state.recipe)))
    console.print()

    if state.warning:
        console.print(f"[yellow]{state.warning}[/yellow]")
    elif state.image_url:
        mime_type = state.image_url.split(";", 1)[0].removeprefix("data:")
        console.print(f"[green]✓ Image generated ({mime_type}, {len(state.image_url) / 1024:.1f} KB data URI)[/green]")

    return state


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python query.py [--debug] [--no-image] \"<ingredients>\"")
        print("")
        print("Examples:")
        print("  python query.py \"chicken, rice\"")
        print("  python query.py --debug \"chicken, rice\"")
        print("  python query.py --no-image \"leftover pasta, spinach, feta\"")
        sys.exit(1)

    debug_mode = False
    with_image = True
    argv_start = 1

    while argv_start < len(sys.argv) and sys.argv[argv_start].startswith("--"):
        if sys.argv[argv_start] == "--debug":
            debug_mode = True
        elif sys.argv[argv_start] == "--no-image":
            with_image = False
        else:
            print(f"Unknown flag: {sys.argv[argv_start]}")
            sys.exit(1)
        argv_start += 1

    # Join all arguments after flags (handles unquoted ingredient lists)
    ingredients = " ".join(sys.argv[argv_start:])

    try:
        final_state = run_query(ingredients, debug=debug_mode, with_image=with_image)
    except KeyboardInterrupt:
        logger.info("\nQuery interrupted by user.")
        sys.exit(0)

    sys.exit(1 if final_state.phase == Phase.ERROR else 0)
