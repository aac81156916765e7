"""
JSON file task store
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Any, Optional
from pydantic import ValidationError as ModelValidationError
from tasktracker.config.settings import settings
from tasktracker.models.task import Task
from tasktracker.store.base_store import TaskStore
from tasktracker.utils.error_handler import StoreError


class JsonFileTaskStore(TaskStore):
    """Task store persisting documents to a JSON file"""

    def __init__(self, store_file: Optional[str] = None):
        """
        Initialize JSON file store

        Args:
            store_file: Path to store file (optional, uses settings by default)
        """
        super().__init__()
        if store_file is None:
            store_file = settings.STORE_FILE_PATH
        self.store_file = Path(store_file)

    def _load_documents(self) -> Dict[str, Dict[str, Any]]:
        """Load documents from file (reloaded on every operation)"""
        if not self.store_file.exists():
            return {}

        try:
            with open(self.store_file, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            raise StoreError(f"Failed to load task store {self.store_file}: {e}") from e

        if not isinstance(raw, dict):
            raise StoreError(f"Task store {self.store_file} is not a JSON object")

        try:
            # Revive ISO 8601 strings into datetimes so filters compare natively
            documents = {
                task_id: Task.model_validate(data).to_document()
                for task_id, data in raw.items()
            }
        except ModelValidationError as e:
            raise StoreError(f"Task store {self.store_file} holds invalid tasks: {e}") from e

        self.logger.debug(f"Loaded {len(documents)} tasks from {self.store_file}")
        return documents

    def _save_documents(self, documents: Dict[str, Dict[str, Any]]) -> None:
        """Save documents to file, replacing it only once fully written"""
        serialized = {
            task_id: Task.model_validate(document).to_json()
            for task_id, document in documents.items()
        }
        tmp_path = None
        try:
            # Ensure directory exists
            self.store_file.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.store_file.parent,
                prefix=f".{self.store_file.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_path = f.name
                json.dump(serialized, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.store_file)
        except OSError as e:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StoreError(f"Failed to save task store {self.store_file}: {e}") from e
