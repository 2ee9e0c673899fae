"""正規化済みタグのデータモデル."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

PropValue = str | int | float


@dataclass
class HeadTag:
    """レンダラに渡せる形へ正規化された1要素.

    Attributes:
        tag: 要素名（例: "meta", "title"）
        props: DOM属性（昇格キー・children系キー・false値は含まない）
        children: 中身（title の文字列、または children 系キーの値）
        key: content 配列で展開した場合のみ設定される識別子
        config: tagPriority などの昇格キー
    """

    tag: str
    props: dict[str, PropValue] = field(default_factory=dict)
    children: Any | None = None
    key: str | None = None
    config: dict[str, Any] = field(default_factory=dict)

    def clone(self) -> HeadTag:
        """props/config を独立させた浅いコピーを返す."""
        return HeadTag(
            tag=self.tag,
            props=dict(self.props),
            children=self.children,
            key=self.key,
            config=dict(self.config),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"tag": self.tag, "props": dict(self.props)}
        if self.children is not None:
            out["children"] = self.children
        if self.key is not None:
            out["key"] = self.key
        out.update(self.config)
        return out
