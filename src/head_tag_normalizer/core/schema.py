"""ヘッドタグのスキーマカタログ（静的な設定データ）.

正規化処理が参照する「既知のキー」の一覧をまとめたモジュール。
ここには変換ロジックを置かず、集合・タプル・読み取り専用マッピングのみを置く。

- TITLE_TAG: 中身がプレーンテキストになるタグ
- CHILDREN_KEYS: innerHTML 相当のキー（走査順が優先順位）
- TAG_CONFIG_KEYS: DOM属性ではなくタグレコード側へ昇格させる設定キー
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

TITLE_TAG = "title"

# 先に見つかったものが children になる
CHILDREN_KEYS: tuple[str, ...] = ("children", "innerHtml", "innerHTML")

TAG_CONFIG_KEYS: tuple[str, ...] = ("tagPosition", "tagPriority", "tagDuplicateStrategy")

# 全タグ共通の昇格キー集合のキー
WILDCARD_FAMILY = "*"

ARRAY_HEAD_KEYS: frozenset[str] = frozenset({"link", "meta", "style", "script", "noscript"})
HEAD_KEYS: tuple[str, ...] = (
    "title",
    "titleTemplate",
    "base",
    "link",
    "meta",
    "style",
    "script",
    "noscript",
    "htmlAttrs",
    "bodyAttrs",
)


def _freeze_promoted(promoted: Mapping[str, Iterable[str]]) -> Mapping[str, frozenset[str]]:
    return MappingProxyType({family: frozenset(keys) for family, keys in promoted.items()})


@dataclass(frozen=True)
class SchemaCatalog:
    """正規化時に参照する読み取り専用カタログ.

    Attributes:
        promoted: タグ種別 -> 昇格キー集合。``"*"`` は全タグに適用される
        children_keys: children として扱うキー（走査順）
        title_tag: 入力全体を文字列化して children にするタグ名
    """

    promoted: Mapping[str, frozenset[str]] = field(
        default_factory=lambda: _freeze_promoted({WILDCARD_FAMILY: TAG_CONFIG_KEYS})
    )
    children_keys: tuple[str, ...] = CHILDREN_KEYS
    title_tag: str = TITLE_TAG

    def __post_init__(self) -> None:
        # dict を渡されても読み取り専用に揃える
        object.__setattr__(self, "promoted", _freeze_promoted(self.promoted))
        object.__setattr__(self, "children_keys", tuple(self.children_keys))

    def promoted_keys(self, tag_name: str) -> frozenset[str]:
        """指定タグで昇格対象になるキー集合を返す."""
        common = self.promoted.get(WILDCARD_FAMILY, frozenset())
        return common | self.promoted.get(tag_name, frozenset())

    @property
    def families(self) -> tuple[str, ...]:
        return tuple(self.promoted)


DEFAULT_CATALOG = SchemaCatalog()
