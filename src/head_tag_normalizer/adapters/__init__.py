"""ヘッド入力ファイル用のアダプタ群."""

from pathlib import Path

from .base_adapter import KNOWN_SECTIONS, BaseAdapter
from .json_adapter import JSON_Adapter
from .yaml_adapter import YAML_Adapter


def adapter_for(file_path: Path | str) -> BaseAdapter:
    """拡張子からアダプタを選ぶ.

    Raises:
        ValueError: 対応していない拡張子の場合
        FileNotFoundError: ファイルが存在しない場合
    """
    suffix = Path(file_path).suffix.lower()
    if suffix == ".json":
        return JSON_Adapter(file_path)
    if suffix in (".yml", ".yaml"):
        return YAML_Adapter(file_path)
    raise ValueError(f"Unsupported head input format: {file_path}")


__all__ = [
    "BaseAdapter",
    "JSON_Adapter",
    "YAML_Adapter",
    "KNOWN_SECTIONS",
    "adapter_for",
]
