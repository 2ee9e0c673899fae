"""ヘッドタグ正規化のコア処理群.

- 正規化（tag名 + 入力 → HeadTag）
- スキーマカタログ（昇格キー・children キー）
- フラットメタ展開、ヘッド入力全体の変換
"""

from .catalog import build_catalog, load_catalog
from .head import head_input_to_tags, resolve_title_template
from .meta_flat import meta_key_to_attribute, unpack_meta
from .models import HeadTag
from .normalize import normalise_props, normalise_tag, normalise_tag_list
from .schema import DEFAULT_CATALOG, SchemaCatalog

__all__ = [
    "HeadTag",
    "SchemaCatalog",
    "DEFAULT_CATALOG",
    "normalise_tag",
    "normalise_tag_list",
    "normalise_props",
    "build_catalog",
    "load_catalog",
    "unpack_meta",
    "meta_key_to_attribute",
    "head_input_to_tags",
    "resolve_title_template",
]
