"""JSON_Adapter for reading head input JSON files.

This adapter handles JSON file reading for head input sources.
"""

from __future__ import annotations

import json
from typing import Any

from head_tag_normalizer.core.exceptions import HeadInputError

from .base_adapter import BaseAdapter


class JSON_Adapter(BaseAdapter):
    """Adapter for JSON head input files.

    Args:
        file_path: Path to JSON file
    """

    def read(self) -> dict[str, Any]:
        """Read a JSON file into a head input dict.

        Returns:
            Parsed head input

        Raises:
            ValueError: Failed to read JSON
            HeadInputError: Root is not an object
        """
        try:
            with open(self.file_path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Failed to read JSON: {self.file_path}") from e

        if not isinstance(data, dict):
            raise HeadInputError(self.file_path, type(data).__name__)
        return data
