import dataclasses
from dataclasses import dataclass
from enum import Enum

from ..availability import AvailabilityStatusInterface


def _convert(value):
    if isinstance(value, LogicDataClass):
        return dict(value)
    if isinstance(value, AvailabilityStatusInterface):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return [_convert(item) for item in value]
    if isinstance(value, dict):
        return {key: _convert(item) for key, item in value.items()}
    return value


@dataclass
class LogicDataClass:
    def __iter__(self):
        """Yield (name, value) pairs for all fields except _raw.

        Nested LogicDataClass instances, availability statuses and enums are
        recursively converted, so ``dict(model)`` gives a serializable view.
        """
        for f in dataclasses.fields(self):
            if f.name == "_raw":
                continue
            yield f.name, _convert(getattr(self, f.name))
