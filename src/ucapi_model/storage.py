"""
Record mapping for storing schema models in a relational table.

Pattern: adapter between the wire models and flat database rows.
The schema modules never import this module; it is only needed by services
which persist drivers or integrations.

Enum columns hold the wire string (``DriverState.IDLE`` -> ``"IDLE"``),
dates hold ISO text and the configured JSON columns hold JSON text, so a row
can be written with a plain parameterised ``INSERT`` and read back through
``sqlite3.Row``.
"""

import json
from typing import Any, Dict, Generic, Iterable, Mapping, Tuple, Type, TypeVar

from pydantic import BaseModel

from ucapi_model.schemas.intg import Integration, IntegrationDriver
from ucapi_model.utils.logger_util import get_logger

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


class RecordAdapter(Generic[M]):
    """
    Convert between a model and a flat column dict.

    Attributes:
        model_cls: the schema model stored in one row
        json_columns: fields stored as JSON text
    """

    def __init__(self, model_cls: Type[M], json_columns: Iterable[str] = ()):
        self.model_cls = model_cls
        self.json_columns: Tuple[str, ...] = tuple(json_columns)
        unknown = [c for c in self.json_columns if c not in model_cls.model_fields]
        if unknown:
            raise ValueError(f"{model_cls.__name__} has no field(s): {', '.join(unknown)}")

    @property
    def columns(self) -> Tuple[str, ...]:
        return tuple(self.model_cls.model_fields)

    def to_record(self, model: M) -> Dict[str, Any]:
        """Flat column dict of ``model``; every column is present, unset ones are ``None``."""
        data = model.model_dump(mode="json")
        record = {}
        for column in self.columns:
            value = data.get(column)
            if column in self.json_columns and value is not None:
                value = json.dumps(value)
            record[column] = value
        return record

    def from_record(self, row: Mapping[str, Any]) -> M:
        """Validate a model from a row mapping or ``sqlite3.Row``.

        Raises:
            pydantic.ValidationError: if the stored data doesn't match the model.
        """
        data = {}
        for column in row.keys():
            if column not in self.model_cls.model_fields:
                continue
            value = row[column]
            if value is None:
                continue
            if column in self.json_columns and isinstance(value, (str, bytes)):
                value = json.loads(value)
            data[column] = value
        logger.debug("loading %s from record with columns %s", self.model_cls.__name__, list(data))
        return self.model_cls.model_validate(data)


DRIVER_RECORDS = RecordAdapter(
    IntegrationDriver,
    json_columns=("name", "description", "developer", "setup_data_schema"),
)
INTEGRATION_RECORDS = RecordAdapter(Integration, json_columns=("name", "setup_data"))


__all__ = ["RecordAdapter", "DRIVER_RECORDS", "INTEGRATION_RECORDS"]
