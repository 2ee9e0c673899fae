"""head_tag_normalizer: ヘッド設定（title/meta/link/...）を正規化済みタグに変換する."""

from head_tag_normalizer.core import (
    DEFAULT_CATALOG,
    HeadTag,
    SchemaCatalog,
    head_input_to_tags,
    load_catalog,
    normalise_tag,
    normalise_tag_list,
    unpack_meta,
)

__version__ = "0.1.0"

__all__ = [
    "HeadTag",
    "SchemaCatalog",
    "DEFAULT_CATALOG",
    "normalise_tag",
    "normalise_tag_list",
    "load_catalog",
    "unpack_meta",
    "head_input_to_tags",
]
