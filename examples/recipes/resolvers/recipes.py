import enum

import graphdecl as g


class Difficulty(enum.Enum):
    easy = "easy"
    medium = "medium"
    hard = "hard"


@g.object_type(description="A recipe")
class Recipe(object):
    title = g.field(g.String)
    description = g.field(g.NullableType(g.String))
    difficulty = g.field(g.EnumType(Difficulty))

    def __init__(self, title, description, difficulty, ratings):
        self.title = title
        self.description = description
        self.difficulty = difficulty
        self.ratings = ratings


@g.input_type()
class RecipeInput(object):
    title = g.field(g.String)
    description = g.field(g.NullableType(g.String))
    difficulty = g.field(g.EnumType(Difficulty), default=Difficulty.medium)


@g.resolver(of=Recipe)
class RecipeResolver(object):
    def __init__(self):
        self._recipes = [
            Recipe("Apple pie", "Sweet and crumbly", Difficulty.medium, ratings=[4, 5, 5]),
            Recipe("Toast", None, Difficulty.easy, ratings=[2, 3]),
        ]

    @g.query(g.ListType(Recipe), params=[
        g.param("difficulty", g.NullableType(g.EnumType(Difficulty)), default=None),
    ])
    def recipes(self, difficulty):
        return [
            recipe
            for recipe in self._recipes
            if difficulty is None or recipe.difficulty == difficulty
        ]

    @g.mutation(Recipe, params=[g.param("recipe", RecipeInput)])
    def add_recipe(self, recipe):
        new_recipe = Recipe(recipe.title, recipe.description, recipe.difficulty, ratings=[])
        self._recipes.append(new_recipe)
        return new_recipe

    @g.field_resolver(g.NullableType(g.Float), description="Mean of all ratings")
    def average_rating(self, recipe):
        if recipe.ratings:
            return sum(recipe.ratings) / len(recipe.ratings)
        else:
            return None
