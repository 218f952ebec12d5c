# tally_helper/data_model/interfaces/i_to_dict.py
from __future__ import annotations

from typing import Any, Dict

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class IToDict(Protocol):
    def to_dict(self) -> Dict[str, Any]: ...
