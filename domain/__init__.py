"""Describes the ScanChef domain. Centres around the `RecipeBook`.

Ingredients go in, recipes come out.

- Recipes are generated by a language model served behind an http function.
  The function can be missing (no configuration), down, or produce garbage.
- None of that should ever reach the user. Generation always has the example
  recipes to fall back on.
- Saved recipes and ingredients are the user's data, so failures there are
  reported rather than papered over.
"""
