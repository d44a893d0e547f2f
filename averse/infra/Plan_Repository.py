import logging
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from averse.domain.Plan import Plan
from averse.domain.errors import DeserializeError
from averse.infra.paths import DEFAULT_PLAN_DIR
from averse.infra.yaml_files import list_documents, read_document, with_extension, write_document
from averse.utilities.validators import PlanDocument

logger = logging.getLogger(__name__)


class PlanRepository:
    """One YAML file per plan inside plan_dir, named after the plan's date."""

    def __init__(self, plan_dir: Union[str, Path] = DEFAULT_PLAN_DIR):
        self.plan_dir = Path(plan_dir)

    def path_for(self, name: str) -> Path:
        return with_extension(self.plan_dir, name)

    def save(self, plan: Plan) -> Path:
        # Only the assignments are written; groceries are recomputed on demand
        path = write_document(self.path_for(plan.name), plan.to_dict())
        logger.info(f"Plan '{plan.name}' saved to {path}")
        return path

    def load(self, name_or_path: Union[str, Path]) -> Plan:
        if isinstance(name_or_path, Path):
            path = Path(name_or_path)
        else:
            path = self.path_for(name_or_path)
        logger.debug(f"Loading plan from {path}")
        raw = read_document(path)
        if not isinstance(raw, dict):
            raise DeserializeError(path, "expected a mapping at the top level")
        try:
            document = PlanDocument.model_validate(raw)
            return Plan.from_dict(document.model_dump())
        except ValidationError as e:
            raise DeserializeError(path, f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}") from e
        except ValueError as e:
            raise DeserializeError(path, str(e)) from e

    def list_recent(self, n: int) -> List[Plan]:
        """The n most recent plans, newest date-name first."""
        if n <= 0:
            return []
        paths = sorted(list_documents(self.plan_dir), key=lambda p: p.stem, reverse=True)
        return [self.load(path) for path in paths[:n]]
