"""フラットなメタ入力（ogTitle, twitterCard など）→ meta エントリの展開.

``{"description": "...", "ogTitle": "..."}`` のような camelCase のフラット入力を
``normalise_tag("meta", ...)`` に渡せる dict のリストに変換します。
値がリストの場合はそのまま ``content`` に残し、正規化側の content 展開に任せます。
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from .normalize import to_display_string

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

# property 属性を使う（Open Graph 系）
_PROPERTY_PREFIXES = ("og", "fb", "article", "book", "profile")

_HTTP_EQUIV_KEYS = frozenset(
    {"contentSecurityPolicy", "contentType", "defaultStyle", "xUaCompatible", "refresh"}
)

# 機械的な変換で表せないキー
_KEY_OVERRIDES: dict[str, str] = {
    "ogSiteName": "og:site_name",
    "ogImageSecureUrl": "og:image:secure_url",
    "ogVideoSecureUrl": "og:video:secure_url",
    "fbAppId": "fb:app_id",
    "msapplicationTileImage": "msapplication-TileImage",
    "msapplicationTileColor": "msapplication-TileColor",
    "msapplicationConfig": "msapplication-Config",
}


def _split_camel(key: str) -> list[str]:
    return [part.lower() for part in _CAMEL_BOUNDARY.split(key) if part]


def _kebab(key: str) -> str:
    return "-".join(_split_camel(key))


def _snake(key: str) -> str:
    return "_".join(_split_camel(key))


def meta_key_to_attribute(key: str) -> tuple[str, str]:
    """フラットキーを (属性名, 属性値) に変換する.

    Examples:
        >>> meta_key_to_attribute("ogTitle")
        ('property', 'og:title')
        >>> meta_key_to_attribute("twitterCard")
        ('name', 'twitter:card')
        >>> meta_key_to_attribute("themeColor")
        ('name', 'theme-color')
        >>> meta_key_to_attribute("contentType")
        ('http-equiv', 'content-type')
    """
    if key == "charset":
        return "charset", ""
    if key in _HTTP_EQUIV_KEYS:
        return "http-equiv", _kebab(key)

    parts = _split_camel(key)
    if key in _KEY_OVERRIDES:
        value = _KEY_OVERRIDES[key]
    elif parts and parts[0] in _PROPERTY_PREFIXES + ("twitter",):
        value = ":".join(parts)
    else:
        value = _kebab(key)

    if parts and parts[0] in _PROPERTY_PREFIXES:
        return "property", value
    return "name", value


def _robots_content(value: Mapping[str, Any]) -> str:
    out: list[str] = []
    for k, v in value.items():
        if v is True:
            out.append(_kebab(k))
        elif v is False or v is None:
            continue
        else:
            out.append(f"{_kebab(k)}:{to_display_string(v)}")
    return ", ".join(out)


def _csp_content(value: Mapping[str, Any]) -> str:
    out: list[str] = []
    for k, v in value.items():
        if v is False or v is None:
            continue
        directive = _kebab(k)
        out.append(directive if v is True else f"{directive} {to_display_string(v)}")
    return "; ".join(out)


def _generic_content(value: Mapping[str, Any]) -> str:
    out: list[str] = []
    for k, v in value.items():
        if v is None:
            continue
        if isinstance(v, bool):
            v = "yes" if v else "no"
        out.append(f"{_kebab(k)}={to_display_string(v)}")
    return ", ".join(out)


def _object_content(key: str, value: Mapping[str, Any]) -> str:
    if key == "refresh":
        seconds = to_display_string(value.get("seconds", 0))
        url = value.get("url")
        return f"{seconds};url={url}" if url else seconds
    if key == "contentSecurityPolicy":
        return _csp_content(value)
    if key in ("robots", "googlebot"):
        return _robots_content(value)
    return _generic_content(value)


def _structured_entries(attr: str, name: str, value: Mapping[str, Any]) -> list[dict[str, Any]]:
    # ogImage: {url, width} -> og:image, og:image:width
    entries: list[dict[str, Any]] = []
    for k, v in value.items():
        if v is None:
            continue
        sub_name = name if k == "url" else f"{name}:{_snake(k)}"
        entries.append({attr: sub_name, "content": v})
    return entries


def unpack_meta(flat: Mapping[str, Any]) -> list[dict[str, Any]]:
    """フラットなメタ入力を meta エントリのリストに展開する.

    Args:
        flat: camelCase キーのフラット入力（例: ``{"ogTitle": "Hello"}``）

    Returns:
        meta タグ用の属性 dict のリスト（入力の順序を維持）
    """
    entries: list[dict[str, Any]] = []
    for key, value in flat.items():
        if value is None:
            continue

        attr, name = meta_key_to_attribute(key)
        if attr == "charset":
            entries.append({"charset": value})
            continue

        if isinstance(value, Mapping):
            if attr == "property" or name.startswith("twitter:"):
                entries.extend(_structured_entries(attr, name, value))
                continue
            value = _object_content(key, value)
        elif isinstance(value, (list, tuple)) and any(isinstance(v, Mapping) for v in value):
            for item in value:
                if isinstance(item, Mapping):
                    entries.extend(_structured_entries(attr, name, item))
                elif item is not None:
                    entries.append({attr: name, "content": item})
            continue

        entries.append({attr: name, "content": value})
    return entries
