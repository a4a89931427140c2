from __future__ import annotations

import logging
from pathlib import Path
from typing import Generic, List, Sequence, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class JsonRecordFile(Generic[T]):
    """Reads and rewrites a JSON array of records kept in a single file.

    Loading is best effort: a missing file is the normal first-run state and
    an unreadable or malformed file degrades to an empty collection with a
    warning. Saving rewrites the whole file and reports failure through its
    return value and the log only.
    """

    def __init__(self, path: Union[str, Path], model: Type[T]) -> None:
        self.path = Path(path)
        self.model = model
        self._adapter: TypeAdapter[List[T]] = TypeAdapter(List[model])  # type: ignore[valid-type]

    def load(self) -> List[T]:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as exc:
            logger.warning("Unable to read '%s': %s. Starting with no records.", self.path, exc)
            return []

        try:
            records = self._adapter.validate_json(raw)
        except ValidationError as exc:
            logger.warning(
                "Unable to parse '%s' as a list of %s records: %s. Starting with no records.",
                self.path,
                self.model.__name__,
                exc,
            )
            return []

        logger.info("Loaded %d %s records from '%s'", len(records), self.model.__name__, self.path)
        return records

    def save(self, records: Sequence[T]) -> bool:
        try:
            payload = self._adapter.dump_json(list(records), indent=2)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(payload)
        except (OSError, PydanticSerializationError) as exc:
            logger.warning("Unable to save %d records to '%s': %s", len(records), self.path, exc)
            return False
        return True


__all__ = ["JsonRecordFile"]
