# kcheck/runner.py
from __future__ import annotations
from pathlib import Path

from .config import KCheckConfig
from .eligibility import build_eligibility_df, iter_eligibility_records
from .errors import MissingColumnsError
from .export import result_filename, save_workbook, submission_filename, write_submission
from .compose import compose_result_rows
from .file_keys import ELIGIBILITY_REQUIRED, LEDGER_REQUIRED, SEP_INSURER, SEP_LEDGER
from .io_utils import CsvLoader
from .matching import LedgerIndex
from .naming import ColumnIndex, require_columns
from .roles import classify_paths


class _Runner:
    def __init__(self, config: KCheckConfig | None = None, logger=None):
        self.cfg = config or KCheckConfig()
        self._logger = logger
        self.loader = CsvLoader(self.cfg.encoding)

    def log(self, msg: str):
        if self._logger:
            self._logger(msg)

    def _require(self, header, required) -> ColumnIndex:
        try:
            return require_columns(header, required)
        except MissingColumnsError as e:
            # 足りない項目を1件ずつログに出してから中止する
            for name in e.missing:
                self.log(f"{name}の項目がありませんでした")
            self.log("必要な項目が足りない為、処理を中止します。")
            raise


class EligibilityExporter(_Runner):
    """予約台帳1ファイル → 協会けんぽ資格確認用CSV。"""

    def run(self, path: str | Path) -> Path:
        src = self.loader.read_table(path, SEP_LEDGER)
        columns = self._require(src.columns, ELIGIBILITY_REQUIRED)

        out_df = build_eligibility_df(src, columns, overflow=self.cfg.overflow)
        records = iter_eligibility_records(out_df)

        out_path = Path(self.cfg.out_dir) / submission_filename(self.cfg.run_date())
        written = write_submission(records, out_path, encoding=self.cfg.encoding)
        self.log(f"資格確認用CSVを出力しました: {out_path} （{written}件 / 読込{len(src)}件）")
        return out_path


class ResultJoiner(_Runner):
    """協会けんぽ結果ファイル + 予約台帳 → 受診資格結果Excel。"""

    def run(self, path1: str | Path, path2: str | Path) -> Path:
        insurer_path, ledger_path = classify_paths(path1, path2, self.loader)
        self.log(f"協会けんぽ結果ファイル: {insurer_path} / 予約台帳: {ledger_path}")

        insurer = self.loader.read_table(insurer_path, SEP_INSURER)
        ledger = self.loader.read_table(ledger_path, SEP_LEDGER)
        columns = self._require(ledger.columns, LEDGER_REQUIRED)

        index = LedgerIndex(ledger, columns, overflow=self.cfg.overflow)
        ledger_fields = index.join(insurer)
        unmatched = int((ledger_fields.eq("").all(axis=1)).sum())
        if unmatched:
            self.log(f"予約台帳に一致しなかった行: {unmatched}件")

        rows = compose_result_rows(insurer, ledger_fields)

        # 出力先は1番目に指定されたファイルと同じフォルダ
        out_path = Path(path1).resolve().parent / result_filename(self.cfg.run_date())
        save_workbook(rows, out_path, font_name=self.cfg.font_name, font_size=self.cfg.font_size)
        self.log(f"受診資格結果を出力しました: {out_path} （{len(rows) - 1}件）")
        return out_path
