"""ヘッド入力ソース用アダプタ（基底クラス）.

JSON/YAML などのファイルからヘッド入力 dict を読み込むための
抽象基底クラスを定義します。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from loguru import logger

from head_tag_normalizer.core.head import META_FLAT_KEY
from head_tag_normalizer.core.schema import HEAD_KEYS

KNOWN_SECTIONS = frozenset(HEAD_KEYS) | {META_FLAT_KEY}


class BaseAdapter(ABC):
    """ヘッド入力アダプタの基底クラス.

    全てのアダプタはこのクラスを継承し、read() を実装します。
    validate()/repair() は共通実装を使います。
    """

    def __init__(self, file_path: Path | str) -> None:
        """Initialize adapter.

        Args:
            file_path: Path to head input file

        Raises:
            FileNotFoundError: file does not exist
        """
        self.file_path = Path(file_path)
        if not self.file_path.exists():
            raise FileNotFoundError(f"Head input file not found: {self.file_path}")

    @abstractmethod
    def read(self) -> dict[str, Any]:
        """ファイルを読み込み、ヘッド入力 dict に変換する.

        Raises:
            ValueError: ファイル形式が不正な場合
            HeadInputError: ルートがオブジェクトでない場合
        """
        ...

    def validate(self, head: dict[str, Any]) -> bool:
        """既知のセクションが1つ以上あるか."""
        return any(k in KNOWN_SECTIONS for k in head)

    def repair(self, head: dict[str, Any]) -> dict[str, Any]:
        """None のセクションと未知のキーを落とす."""
        repaired: dict[str, Any] = {}
        for k, v in head.items():
            if v is None:
                continue
            if k not in KNOWN_SECTIONS:
                logger.warning(f"Dropping unknown head section '{k}' from {self.file_path}")
                continue
            repaired[k] = v
        return repaired
