# utils/storage.py
import copy
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import flag_modified

from models.collection import EntityCollection

ENTITIES = ("products", "transactions", "suppliers", "categories", "users")


class CollectionStorage:
    """Key-value persistence of whole entity collections.

    ``load`` falls back to the default (sample) records for an entity that was
    never saved. ``save`` only stages the new list on the session; committing
    is left to the caller so several collections can be written atomically.
    """

    def __init__(
        self,
        db: Session,
        defaults: Optional[Mapping[str, List[Dict[str, Any]]]] = None,
        prefix: str = "stock_manager_",
    ):
        self.db = db
        self.defaults = defaults or {}
        self.prefix = prefix

    def key(self, entity: str) -> str:
        return f"{self.prefix}{entity}"

    def _row(self, entity: str) -> Optional[EntityCollection]:
        return self.db.get(EntityCollection, self.key(entity))

    def exists(self, entity: str) -> bool:
        return self._row(entity) is not None

    def load(self, entity: str) -> List[Dict[str, Any]]:
        row = self._row(entity)
        if row is None:
            return copy.deepcopy(list(self.defaults.get(entity, [])))
        return copy.deepcopy(list(row.records or []))

    def save(self, entity: str, records: List[Dict[str, Any]]) -> None:
        row = self._row(entity)
        if row is None:
            self.db.add(EntityCollection(entity=self.key(entity), records=list(records)))
        else:
            row.records = list(records)
            # JSON columns are not mutation-tracked
            flag_modified(row, "records")
        self.db.flush()
