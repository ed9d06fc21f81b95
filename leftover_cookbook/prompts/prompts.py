"""Prompts for the recipe and dish image generation calls.

Both prompts are deterministic: the same input always yields the same prompt
text. User text is embedded literally, without escaping or rewriting.
"""


def get_recipe_prompt(ingredients_text: str) -> str:
    """Build the recipe generation prompt.

    Args:
        ingredients_text: Raw ingredient text as typed by the user.

    Returns:
        str: Prompt asking for a creative leftover recipe in the JSON response schema.
    """
    return f"""You are a creative chef specializing in using leftover ingredients. Based on the following ingredients, create a delicious recipe.

Ingredients:
{ingredients_text}

Provide the response in the specified JSON format. Ensure the recipe is creative, easy to follow, and primarily uses the ingredients provided. You can assume basic pantry staples like salt, pepper, oil, and water are available."""


def get_image_prompt(title: str, description: str) -> str:
    """Build the dish photograph prompt from a generated recipe."""
    return (
        f'A delicious, professionally photographed image of "{title}". {description}. '
        "Realistic, vibrant colors, mouth-watering, food photography style."
    )
