"""Head tag normalizer exceptions.

カスタム例外クラスを定義します。
正規化処理そのものは例外を出さず、入力ファイルの読み込み側だけが使います。
"""

from __future__ import annotations

from pathlib import Path


class HeadInputError(ValueError):
    """ヘッド入力ファイルのルートがオブジェクトでない場合の例外.

    Attributes:
        file_path: 読み込み対象のファイルパス
        actual_type: 実際に読み込まれたルートの型名
    """

    def __init__(self, file_path: str | Path, actual_type: str) -> None:
        """例外初期化.

        Args:
            file_path: 読み込み対象のファイルパス
            actual_type: 実際に読み込まれたルートの型名
        """
        self.file_path = str(file_path)
        self.actual_type = actual_type
        message = (
            f"Head input must be an object: {self.file_path} (got {actual_type}). "
            "Wrap the sections (title, meta, link, ...) in a single mapping."
        )
        super().__init__(message)
