SYSTEM_PROMPT = "You are a creative recipe generator."


GENERATE_RECIPES_PROMPT = """
You are a creative chef. Generate 3 unique and creative recipes based on these ingredients:
{ingredients}

Focus on unusual combinations and creative cooking methods.
The recipes should be feasible with only these ingredients plus basic pantry staples (salt, pepper, oil).

For each recipe, provide:
1. Title
2. Short description
3. List of ingredients
4. Approximate cooking time
5. Difficulty level (Easy, Medium, Hard)

Format each recipe as a JSON object with these fields:
{{
  "title": "",
  "description": "",
  "ingredients": [],
  "time": "",
  "difficulty": ""
}}

Return an array of 3 such objects, with no additional text.
""".strip()


class GenerateRecipesPrompt:
    def __init__(
        self,
        ingredients: list[str],
        template: str | None = None,
    ) -> None:
        self.ingredients = ingredients
        self.template = GENERATE_RECIPES_PROMPT if template is None else template

    def __str__(self) -> str:
        return self.template.format(ingredients=", ".join(self.ingredients))
