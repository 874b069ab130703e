from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class FloorDescriptor:
    id: Union[int, str]
    floor_name: str
