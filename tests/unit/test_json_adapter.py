"""Unit tests for head input adapters."""

import json
from pathlib import Path

import pytest

from head_tag_normalizer.adapters import JSON_Adapter, YAML_Adapter, adapter_for
from head_tag_normalizer.core.exceptions import HeadInputError


class TestJSON_Adapter:
    """JSON_Adapterのテスト."""

    def test_init_with_nonexistent_file(self, tmp_path: Path) -> None:
        """存在しないファイルでの初期化."""
        with pytest.raises(FileNotFoundError, match="Head input file not found"):
            JSON_Adapter(tmp_path / "nonexistent.json")

    def test_read_head_json(self, tmp_path: Path) -> None:
        """シンプルなJSON読み込み."""
        json_path = tmp_path / "head.json"
        head = {"title": "Home", "meta": [{"name": "description", "content": "hello"}]}
        json_path.write_text(json.dumps(head), encoding="utf-8")

        adapter = JSON_Adapter(json_path)

        assert adapter.read() == head

    def test_read_invalid_json(self, tmp_path: Path) -> None:
        json_path = tmp_path / "head.json"
        json_path.write_text("{broken", encoding="utf-8")

        with pytest.raises(ValueError, match="Failed to read JSON"):
            JSON_Adapter(json_path).read()

    def test_read_list_root(self, tmp_path: Path) -> None:
        """ルートが配列の場合は HeadInputError."""
        json_path = tmp_path / "head.json"
        json_path.write_text("[]", encoding="utf-8")

        with pytest.raises(HeadInputError) as exc_info:
            JSON_Adapter(json_path).read()

        assert exc_info.value.actual_type == "list"
        assert isinstance(exc_info.value, ValueError)

    def test_validate_and_repair(self, tmp_path: Path) -> None:
        json_path = tmp_path / "head.json"
        json_path.write_text("{}", encoding="utf-8")
        adapter = JSON_Adapter(json_path)

        head = {"title": "Home", "link": None, "unknown": 1}

        assert adapter.validate(head) is True
        assert adapter.validate({"unknown": 1}) is False
        assert adapter.repair(head) == {"title": "Home"}


class TestYAML_Adapter:
    def test_read_head_yaml(self, tmp_path: Path) -> None:
        yaml_path = tmp_path / "head.yml"
        yaml_path.write_text(
            "title: Home\nhtmlAttrs:\n  lang: en\nmeta:\n  - name: robots\n    content: noindex\n",
            encoding="utf-8",
        )

        head = YAML_Adapter(yaml_path).read()

        assert head == {
            "title": "Home",
            "htmlAttrs": {"lang": "en"},
            "meta": [{"name": "robots", "content": "noindex"}],
        }

    def test_empty_yaml(self, tmp_path: Path) -> None:
        yaml_path = tmp_path / "head.yaml"
        yaml_path.write_text("", encoding="utf-8")

        assert YAML_Adapter(yaml_path).read() == {}

    def test_scalar_root(self, tmp_path: Path) -> None:
        yaml_path = tmp_path / "head.yaml"
        yaml_path.write_text("just a string\n", encoding="utf-8")

        with pytest.raises(HeadInputError, match="Head input must be an object"):
            YAML_Adapter(yaml_path).read()

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        yaml_path = tmp_path / "head.yaml"
        yaml_path.write_text("meta: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Failed to read YAML"):
            YAML_Adapter(yaml_path).read()


class TestAdapterFor:
    def test_by_suffix(self, tmp_path: Path) -> None:
        json_path = tmp_path / "head.json"
        yaml_path = tmp_path / "head.YAML"
        json_path.write_text("{}", encoding="utf-8")
        yaml_path.write_text("", encoding="utf-8")

        assert isinstance(adapter_for(json_path), JSON_Adapter)
        assert isinstance(adapter_for(yaml_path), YAML_Adapter)

    def test_unsupported_suffix(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Unsupported head input format"):
            adapter_for(tmp_path / "head.txt")
