# kcheck/config.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

from .file_keys import (
    DEFAULT_FONT_NAME, DEFAULT_FONT_SIZE, DEFAULT_LOG_PATH, OUTPUT_ENCODING,
)


@dataclass
class KCheckConfig:
    """実行設定。
    - encoding: 入力ファイルの想定文字コード（推定より優先して試す）
    - out_dir: 資格確認用CSVの出力先（既定はカレントディレクトリ）
    - overflow: 0埋め桁数を超える値の扱い（"truncate" = 右側を残す / "error" = 中止）
    - today: 出力ファイル名に使う日付（既定は実行日）
    """
    encoding: str = OUTPUT_ENCODING
    out_dir: Path = Path(".")
    log_path: Path = Path(DEFAULT_LOG_PATH)
    overflow: str = "truncate"
    today: Optional[date] = None
    font_name: str = DEFAULT_FONT_NAME
    font_size: int = DEFAULT_FONT_SIZE

    def run_date(self) -> date:
        return self.today or date.today()
