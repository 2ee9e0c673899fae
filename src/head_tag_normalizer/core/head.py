"""ヘッド入力全体（title/meta/link/... をまとめた dict）→ タグ列.

各セクションを ``normalise_tag`` に通して平坦なリストにします。
重複排除や優先度ソートは行いません（入力順のまま返す）。
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from loguru import logger

from .meta_flat import unpack_meta
from .models import HeadTag
from .normalize import normalise_tag_list, to_display_string
from .schema import ARRAY_HEAD_KEYS, DEFAULT_CATALOG, HEAD_KEYS, SchemaCatalog

META_FLAT_KEY = "metaFlat"

TitleTemplate = str | Callable[[str | None], str | None] | None


def resolve_title_template(template: TitleTemplate, title: str | None) -> str | None:
    """タイトルテンプレートを適用する.

    - テンプレートが None ならタイトルをそのまま返す
    - 文字列なら ``%s`` をタイトルで置換（``%s`` がなければテンプレートで置き換え）
    - 関数ならタイトルを渡して呼び出す

    Examples:
        >>> resolve_title_template("%s - My Site", "Home")
        'Home - My Site'
        >>> resolve_title_template(None, "Home")
        'Home'
    """
    if template is None:
        return title
    if callable(template):
        return template(title)
    if "%s" in template:
        return template.replace("%s", title or "")
    return template


def _as_entries(key: str, value: Any) -> list[Any]:
    if key in ARRAY_HEAD_KEYS and isinstance(value, (list, tuple)):
        return [v for v in value if v is not None]
    return [value]


def head_input_to_tags(
    head: Mapping[str, Any],
    catalog: SchemaCatalog = DEFAULT_CATALOG,
) -> list[HeadTag]:
    """ヘッド入力を正規化済みタグのリストに変換する.

    Args:
        head: ``{"title": ..., "meta": [...], "htmlAttrs": {...}}`` 形式の dict
        catalog: 正規化に使うカタログ

    Returns:
        入力順の正規化済みタグ（content 展開分も平坦化済み）
    """
    tags: list[HeadTag] = []
    template = head.get("titleTemplate")

    for key, value in head.items():
        if value is None or key == "titleTemplate":
            continue

        if key == META_FLAT_KEY:
            for entry in unpack_meta(value):
                tags.extend(normalise_tag_list("meta", entry, catalog))
            continue

        if key not in HEAD_KEYS:
            logger.debug(f"Skipping unknown head key: {key}")
            continue

        if key == "title":
            title = resolve_title_template(template, to_display_string(value))
            if title is not None:
                tags.extend(normalise_tag_list(catalog.title_tag, title, catalog))
            continue

        for entry in _as_entries(key, value):
            tags.extend(normalise_tag_list(key, entry, catalog))

    return tags
