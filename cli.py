#!/usr/bin/env python3
"""
Terminal reviewer for recipe spreadsheets.

Same flow as the web frontend: import the file, review the parsed recipes,
approve, then step through the recipes to see their allergen warnings.

    python cli.py recipes.xlsx          # interactive
    python cli.py recipes.xlsx --yes    # approve and print every recipe
"""

import asyncio
import sys
from typing import List

from exceptions import AllergenAppError
from models.allergen import RecipeReport
from models.recipe import Recipe
from services.allergen_client import AllergenClient, create_http_client
from services.review_workflow import ReviewWorkflow
from services.spreadsheet_importer import read_recipes


def format_batch(recipes: List[Recipe]) -> List[str]:
    """Review table: one line per recipe"""
    lines = []
    for i, recipe in enumerate(recipes, 1):
        ingredients = ", ".join(recipe.ingredients) or "(no ingredients)"
        lines.append(f"{i:2}. {recipe.name} - {ingredients}")
    return lines


def format_report(report: RecipeReport) -> List[str]:
    lines = [f"🍽️  {report.name}"]
    for item in report.ingredients:
        if item.unrecognized:
            lines.append(f"   ❓ {item.name}: unrecognized")
        elif item.warning:
            lines.append(f"   ⚠️  {item.warning}")
        else:
            lines.append(f"   ✅ {item.name}")
    if not report.ingredients:
        lines.append("   (no ingredients)")
    return lines


def print_lines(lines: List[str]) -> None:
    for line in lines:
        print(line)


async def step_through(workflow: ReviewWorkflow) -> None:
    """Show one recipe at a time until the user quits"""
    count = len(workflow.store)
    report = await workflow.approve()

    while True:
        print("-" * 60)
        print(f"Recipe {workflow.active_index + 1} of {count}")
        print_lines(format_report(report))
        print("-" * 60)

        choice = input("\n[n]ext, [p]revious, number, or [q]uit: ").strip().lower()
        if choice in ['q', 'quit', 'exit']:
            print("\n👋 Goodbye!")
            return

        index = workflow.active_index
        if choice in ['n', '']:
            index = (index + 1) % count
        elif choice == 'p':
            index = (index - 1) % count
        elif choice.isdigit() and 1 <= int(choice) <= count:
            index = int(choice) - 1
        else:
            print(f"❗ Enter n, p, q or a number from 1 to {count}")
            continue

        report = await workflow.select_recipe(index)


async def review_file(path: str, auto_approve: bool = False) -> int:
    print(f"\n📄 Importing {path}")
    print("=" * 60)

    try:
        recipes = read_recipes(path)
    except AllergenAppError as e:
        print(f"❌ {e}")
        return 1

    if not recipes:
        print("❗ No recipes found in the file")
        return 1

    print_lines(format_batch(recipes))

    http_client = create_http_client()
    try:
        workflow = ReviewWorkflow(AllergenClient(http_client))
        workflow.load_batch(recipes, source_filename=path)

        if auto_approve:
            await workflow.approve()
            for index in range(len(recipes)):
                report = await workflow.select_recipe(index)
                print()
                print_lines(format_report(report))
            return 0

        answer = input("\n✔️  Approve these recipes? (y/n): ").strip().lower()
        if answer not in ['y', 'yes']:
            print("\n👋 Not approved, nothing checked")
            return 0

        await step_through(workflow)
        return 0
    except KeyboardInterrupt:
        print("\n\n👋 Goodbye!")
        return 0
    finally:
        await http_client.aclose()


def main() -> int:
    args = [arg for arg in sys.argv[1:] if arg != "--yes"]
    if len(args) != 1:
        print(__doc__)
        return 2
    return asyncio.run(review_file(args[0], auto_approve="--yes" in sys.argv[1:]))


if __name__ == "__main__":
    sys.exit(main())
