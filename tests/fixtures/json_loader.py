import copy
import json
from pathlib import Path
from typing import Any, Dict


class TestDataLoader:
    __test__ = False

    _data: Dict[str, Any] = None

    @classmethod
    def load(cls) -> Dict[str, Any]:
        if cls._data is None:
            with open(Path(__file__).parent / "test_data.json", encoding="utf-8") as f:
                cls._data = json.load(f)
        return cls._data

    @classmethod
    def get(cls, key: str) -> Any:
        return cls.load().get(key)

    @classmethod
    def get_copy(cls, key: str) -> Any:
        return copy.deepcopy(cls.get(key))

    @classmethod
    def document(cls, collection: str, name: str) -> Dict[str, Any]:
        """Stored form of one named document"""
        return copy.deepcopy(cls.get(collection)[name])
