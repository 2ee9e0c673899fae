"""YAML_Adapter for reading head input YAML files."""

from __future__ import annotations

from typing import Any

import yaml

from head_tag_normalizer.core.exceptions import HeadInputError

from .base_adapter import BaseAdapter


class YAML_Adapter(BaseAdapter):
    """Adapter for YAML head input files (.yml / .yaml)."""

    def read(self) -> dict[str, Any]:
        try:
            with open(self.file_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to read YAML: {self.file_path}") from e

        # 空ファイルは空のヘッドとして扱う
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise HeadInputError(self.file_path, type(data).__name__)
        return data
