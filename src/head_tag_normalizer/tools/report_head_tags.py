"""ヘッド入力ファイルを正規化し、タグ一覧を CSV/Parquet レポートとして出力する。"""

from __future__ import annotations

import argparse
import json
from collections.abc import Iterable
from pathlib import Path

import polars as pl
from loguru import logger

from head_tag_normalizer.adapters import adapter_for
from head_tag_normalizer.core.catalog import load_catalog
from head_tag_normalizer.core.head import head_input_to_tags
from head_tag_normalizer.core.models import HeadTag
from head_tag_normalizer.core.normalize import to_display_string
from head_tag_normalizer.core.schema import DEFAULT_CATALOG

REPORT_SCHEMA = {
    "tag": pl.Utf8,
    "key": pl.Utf8,
    "children": pl.Utf8,
    "props": pl.Utf8,
    "config": pl.Utf8,
}


def _to_json(value: dict) -> str:
    return json.dumps(value, ensure_ascii=False, sort_keys=True, default=str)


def tags_to_frame(tags: Iterable[HeadTag]) -> pl.DataFrame:
    """タグ列を1行1タグの DataFrame にする（props/config は JSON 文字列）."""
    rows = [
        {
            "tag": t.tag,
            "key": t.key,
            "children": None if t.children is None else to_display_string(t.children),
            "props": _to_json(t.props),
            "config": _to_json(t.config),
        }
        for t in tags
    ]
    return pl.DataFrame(rows, schema=REPORT_SCHEMA)


def write_report(frame: pl.DataFrame, out_path: Path) -> Path:
    """拡張子に応じて CSV または Parquet で保存する."""
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    suffix = out_path.suffix.lower()
    if suffix == ".parquet":
        frame.write_parquet(out_path)
    elif suffix == ".csv":
        frame.write_csv(out_path)
    else:
        raise ValueError(f"Unsupported report format: {out_path}")

    logger.info(f"Wrote {frame.height} tags to {out_path}")
    return out_path


def build_report(input_path: Path, out_path: Path, catalog_path: Path | None = None) -> Path:
    catalog = load_catalog(catalog_path) if catalog_path else DEFAULT_CATALOG

    adapter = adapter_for(input_path)
    head = adapter.read()
    if not adapter.validate(head):
        logger.warning(f"No known head sections in {input_path}")
    head = adapter.repair(head)

    tags = head_input_to_tags(head, catalog)
    return write_report(tags_to_frame(tags), out_path)


def main() -> None:
    p = argparse.ArgumentParser(description="Normalize a head input file and write a tag report.")
    p.add_argument("--input", type=Path, required=True, help="Head input file (.json/.yml/.yaml)")
    p.add_argument("--out", type=Path, required=True, help="Report path (.csv/.parquet)")
    p.add_argument("--catalog", type=Path, default=None, help="Optional catalog overrides file")
    args = p.parse_args()

    report = build_report(args.input, args.out, args.catalog)
    print(f"Wrote head tag report: {report}")


if __name__ == "__main__":
    main()
