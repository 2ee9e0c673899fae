"""タグ正規化（tag名 + 入力オブジェクト → HeadTag）.

ヘッド設定の1要素（meta/link/script など）を、レンダラが扱える正規形に変換します。

設計方針:
    - 入力は浅くコピーして読むだけ（呼び出し元の dict は変更しない）
    - 属性の削除は「走査しながら削除」ではなく、新しい dict を組み立てて返す
    - 不正な入力（title 以外で dict でない等）は例外にせず空の属性として扱う
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from loguru import logger

from .models import HeadTag
from .schema import DEFAULT_CATALOG, SchemaCatalog


def to_display_string(value: Any) -> str:
    """値をHTMLテキストとしての文字列表現に変換する.

    Python の ``str()`` と異なり、真偽値は小文字、整数値の float は小数点なし、
    シーケンスはカンマ区切りになる。None は "None"/"null" ではなく空文字
    （値なしとして扱う）。

    Examples:
        >>> to_display_string(True)
        'true'
        >>> to_display_string(3.0)
        '3'
        >>> to_display_string(["a", 1])
        'a,1'
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(to_display_string(v) for v in value)
    return str(value)


def _string_form(value: Any) -> str | None:
    # 数値や dict の文字列表現は "true"/"false" にならない
    if isinstance(value, (bool, str, list, tuple)):
        return to_display_string(value)
    return None


def _is_true_literal(value: Any) -> bool:
    return _string_form(value) == "true"


def _is_false_literal(value: Any) -> bool:
    return _string_form(value) == "false"


def normalise_props(props: Mapping[str, Any]) -> dict[str, Any]:
    """真偽値属性を正規化した新しい dict を返す.

    - 文字列表現が ``"true"`` の値（``True``, ``"true"``, ``["true"]``）は ``""`` にする
    - 文字列表現が ``"false"`` の値は属性ごと削除する
    - それ以外（文字列・数値など）はそのまま

    see https://html.spec.whatwg.org/#boolean-attributes
    """
    out: dict[str, Any] = {}
    for k, v in props.items():
        if _is_true_literal(v):
            out[k] = ""
        elif _is_false_literal(v):
            continue
        else:
            out[k] = v
    return out


def _normalise_class(value: Any) -> Any:
    # {"a": True, "b": False} -> ["a"]（挿入順を維持）
    if isinstance(value, Mapping):
        value = [k for k, enabled in value.items() if enabled]
    if isinstance(value, (list, tuple)):
        return " ".join(to_display_string(v) for v in value)
    return value


def _initial_props(tag_name: str, raw_input: Any) -> dict[str, Any]:
    if isinstance(raw_input, Mapping):
        return dict(raw_input)
    if raw_input is not None:
        logger.debug(f"Non-mapping input for <{tag_name}> treated as empty: {type(raw_input).__name__}")
    return {}


def normalise_tag(
    tag_name: str,
    raw_input: Any,
    catalog: SchemaCatalog = DEFAULT_CATALOG,
) -> HeadTag | list[HeadTag]:
    """入力オブジェクトを正規化済みタグに変換する.

    Args:
        tag_name: 要素名（未知の名前もそのまま通す）
        raw_input: 属性の dict（title の場合は任意の値）
        catalog: 昇格キーや children キーを提供するカタログ

    Returns:
        正規化済みタグ。``content`` が配列の場合は要素ごとに展開したタグのリスト

    Examples:
        >>> normalise_tag("meta", {"name": "robots", "content": "noindex"}).props
        {'name': 'robots', 'content': 'noindex'}
        >>> [t.key for t in normalise_tag("meta", {"name": "foo", "content": [1, 2]})]
        ['foo:0', 'foo:1']
    """
    tag = HeadTag(tag=tag_name)
    if tag_name == catalog.title_tag:
        tag.children = to_display_string(raw_input)
        return tag

    props = normalise_props(_initial_props(tag_name, raw_input))

    # children 系キー: 最初に見つかったものを採用し、残りは捨てる
    for key in catalog.children_keys:
        if key in props:
            value = props.pop(key)
            if tag.children is None:
                tag.children = value

    promoted = catalog.promoted_keys(tag_name)
    tag.config = {k: v for k, v in props.items() if k in promoted}
    props = {k: v for k, v in props.items() if k not in promoted}

    if "class" in props:
        props["class"] = _normalise_class(props["class"])

    tag.props = props

    content = props.get("content")
    if isinstance(content, (list, tuple)):
        key_prefix = props.get("name") or props.get("property") or ""
        logger.debug(f"Expanding <{tag_name}> {key_prefix!r} into {len(content)} tags")
        expanded: list[HeadTag] = []
        for i, value in enumerate(content):
            new_tag = tag.clone()
            new_tag.props["content"] = value
            new_tag.key = f"{key_prefix}:{i}"
            expanded.append(new_tag)
        return expanded

    return tag


def normalise_tag_list(
    tag_name: str,
    raw_input: Any,
    catalog: SchemaCatalog = DEFAULT_CATALOG,
) -> list[HeadTag]:
    """``normalise_tag`` の結果を常にリストで返す版."""
    result = normalise_tag(tag_name, raw_input, catalog)
    if isinstance(result, list):
        return result
    return [result]
