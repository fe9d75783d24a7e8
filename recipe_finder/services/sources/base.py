from abc import ABC, abstractmethod
from typing import List
from recipe_finder.models import Recipe

class RecipeSource(ABC):
    name: str = "Unknown"

    @abstractmethod
    def get_recipes(self) -> List[Recipe]:
        """
        Fetch every recipe this source provides.
        Must return a list of canonical `Recipe` objects with list fields already split.
        """
        pass
