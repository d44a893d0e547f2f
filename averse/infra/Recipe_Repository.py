import logging
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from averse.domain.Recipe import Recipe
from averse.domain.errors import DeserializeError
from averse.infra.paths import DEFAULT_RECIPE_DIR
from averse.infra.yaml_files import list_documents, read_document, with_extension, write_document
from averse.utilities.validators import RecipeDocument

logger = logging.getLogger(__name__)


def recipe_key(name: str) -> str:
    """Storage key for a recipe name: spaces become hyphens."""
    return name.replace(" ", "-")


def recipe_path(recipe_dir: Union[str, Path], name: str) -> Path:
    if not str(recipe_dir).strip():
        raise ValueError("Recipe directory cannot be empty")
    return with_extension(Path(recipe_dir), recipe_key(name))


class RecipeRepository:
    """One YAML file per recipe inside recipe_dir."""

    def __init__(self, recipe_dir: Union[str, Path] = DEFAULT_RECIPE_DIR):
        self.recipe_dir = Path(recipe_dir)

    def path_for(self, name: str) -> Path:
        return recipe_path(self.recipe_dir, name)

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def save(self, recipe: Recipe) -> Path:
        path = write_document(self.path_for(recipe.name), recipe.to_dict())
        logger.info(f"Recipe '{recipe.name}' saved to {path}")
        return path

    def load(self, name_or_path: Union[str, Path]) -> Recipe:
        """Load a recipe by name, or from a stored file when given a Path. Every str is a name."""
        if isinstance(name_or_path, Path):
            path = Path(name_or_path)
        else:
            path = self.path_for(name_or_path)
        logger.debug(f"Loading recipe from {path}")
        return self._decode(path, read_document(path))

    def list_all(self) -> List[Recipe]:
        """Every stored recipe in file-name order; one malformed file aborts the listing."""
        return [self.load(path) for path in list_documents(self.recipe_dir)]

    def summaries(self) -> List[str]:
        return [recipe.summary() for recipe in self.list_all()]

    @staticmethod
    def _decode(path: Path, raw) -> Recipe:
        if not isinstance(raw, dict):
            raise DeserializeError(path, "expected a mapping at the top level")
        try:
            document = RecipeDocument.model_validate(raw)
        except ValidationError as e:
            raise DeserializeError(path, f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}") from e
        try:
            return Recipe.from_dict(document.model_dump())
        except ValueError as e:
            raise DeserializeError(path, str(e)) from e
