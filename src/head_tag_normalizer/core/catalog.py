"""スキーマカタログの設定ファイル読み込み.

プロジェクト固有の昇格キー（例: script だけ ``defer`` 相当の独自設定キーを持つ等）を
JSON/YAML ファイルから読み込み、``SchemaCatalog`` を組み立てます。

使用例:
    >>> catalog = load_catalog(Path("head_catalog.yml"))
    >>> "tagPriority" in catalog.promoted_keys("script")
    True

ファイル形式:
    promoted:
      "*": [tagPriority]
      script: [tagDedupeKey]
    children_keys: [textContent]
    extend: true   # false の場合デフォルトを置き換える
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from .schema import CHILDREN_KEYS, DEFAULT_CATALOG, SchemaCatalog

_YAML_SUFFIXES = {".yml", ".yaml"}


def _parse_file(catalog_path: Path) -> Any:
    try:
        with open(catalog_path, encoding="utf-8") as f:
            if catalog_path.suffix.lower() in _YAML_SUFFIXES:
                return yaml.safe_load(f)
            return json.load(f)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        msg = f"Invalid catalog file: {catalog_path}"
        raise ValueError(msg) from e


def _validate_key_list(where: str, keys: Any) -> list[str]:
    if not isinstance(keys, list):
        msg = f"Invalid key list for '{where}': expected list, got {type(keys)}"
        raise ValueError(msg)
    for k in keys:
        if not isinstance(k, str):
            msg = f"Invalid key name {k!r} in '{where}': expected str"
            raise ValueError(msg)
    return keys


def build_catalog(data: Mapping[str, Any], base: SchemaCatalog = DEFAULT_CATALOG) -> SchemaCatalog:
    """設定 dict から ``SchemaCatalog`` を作る.

    Args:
        data: ``promoted`` / ``children_keys`` / ``extend`` を持つ dict
        base: ``extend`` が真の場合に拡張する元カタログ

    Returns:
        新しいカタログ

    Raises:
        ValueError: キー集合がリストでない、またはキー名が文字列でない場合
    """
    extend = bool(data.get("extend", True))

    promoted_raw = data.get("promoted", {}) or {}
    if not isinstance(promoted_raw, Mapping):
        msg = f"'promoted' must be an object, got {type(promoted_raw)}"
        raise ValueError(msg)

    promoted: dict[str, frozenset[str]] = dict(base.promoted) if extend else {}
    for family, keys in promoted_raw.items():
        extra = _validate_key_list(f"promoted.{family}", keys)
        promoted[family] = promoted.get(family, frozenset()) | frozenset(extra)

    children_raw = data.get("children_keys")
    if children_raw is None:
        children_keys = base.children_keys if extend else CHILDREN_KEYS
    else:
        extra_children = _validate_key_list("children_keys", children_raw)
        head = base.children_keys if extend else ()
        children_keys = tuple(head) + tuple(k for k in extra_children if k not in head)

    title_tag = data.get("title_tag", base.title_tag)
    if not isinstance(title_tag, str):
        msg = f"'title_tag' must be a string, got {type(title_tag)}"
        raise ValueError(msg)

    return SchemaCatalog(promoted=promoted, children_keys=children_keys, title_tag=title_tag)


def load_catalog(catalog_path: Path | str) -> SchemaCatalog:
    """JSON/YAML ファイルからカタログを読み込む.

    Args:
        catalog_path: カタログ設定ファイルのパス（.json / .yml / .yaml）

    Returns:
        カタログ

    Raises:
        FileNotFoundError: ファイルが存在しない場合
        ValueError: 形式が不正な場合
    """
    catalog_path = Path(catalog_path)

    if not catalog_path.exists():
        raise FileNotFoundError(f"Catalog file not found: {catalog_path}")

    data = _parse_file(catalog_path)
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        msg = f"Catalog file must contain an object, got {type(data)}"
        raise ValueError(msg)

    catalog = build_catalog(data)
    logger.info(f"Loaded catalog with {len(catalog.families)} tag families from {catalog_path}")
    return catalog
