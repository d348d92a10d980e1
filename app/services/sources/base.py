from abc import ABC, abstractmethod
from typing import List
from app.models import Recipe

class RecipeSource(ABC):
    name: str = "Unknown"

    @abstractmethod
    def find_by_ingredients(self, ingredients: List[str], number: int, ranking: int) -> List[Recipe]:
        """
        Fetch recipes that use the given ingredients.
        `ranking` 1 favours fewest missing ingredients, 2 favours most used.
        Must return a list of canonical `Recipe` objects with full ingredient lists.
        """
        pass
