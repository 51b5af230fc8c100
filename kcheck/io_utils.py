# kcheck/io_utils.py
from __future__ import annotations
import csv
import io
from pathlib import Path
from typing import Optional

import pandas as pd
from charset_normalizer import from_bytes as cn_from_bytes

from .errors import InputFileError
from .file_keys import (
    ENCODING_CANDIDATES, ELIGIBILITY_REQUIRED, LEDGER_REQUIRED, INSURER_SIGNATURE,
)

# 文字コード判定で「読めている」とみなす見出し
_KNOWN_HEADERS = set(ELIGIBILITY_REQUIRED) | set(LEDGER_REQUIRED) | {INSURER_SIGNATURE}


class CsvLoader:
    def __init__(self, encoding: Optional[str] = None):
        # 設定で指定された文字コード（推定より先に試す）
        self.encoding = encoding

    @staticmethod
    def _score_header(data: bytes, encoding: str, sep: str) -> int:
        """
        指定encodingで先頭行をデコードし、既知の見出しが含まれていればスコア加点。
        デコードできなければ -1。
        """
        try:
            text = data.decode(encoding, errors="strict")
        except (UnicodeDecodeError, LookupError):
            return -1
        head = text.splitlines()[:1]
        if not head:
            return 0
        row = next(csv.reader(io.StringIO(head[0].removeprefix("\ufeff")), delimiter=sep), [])
        if any(c in _KNOWN_HEADERS for c in row):
            return 2
        return 0

    @staticmethod
    def detect_encoding(data: bytes) -> str | None:
        try:
            result = cn_from_bytes(data)
            best = result.best() if result else None
            if best and best.encoding:
                return best.encoding
        except Exception:
            return None
        return None

    def _candidates(self, data: bytes) -> list[str]:
        enc_list: list[str] = []
        for e in [self.encoding, self.detect_encoding(data), *ENCODING_CANDIDATES]:
            if e and e.lower() not in [x.lower() for x in enc_list]:
                enc_list.append(e)
        return enc_list

    def decode(self, path: str | Path, sep: str) -> str:
        """
        文字コード候補を見出しスコア順に試してテキスト化する。
        同点は候補順（設定値 → charset-normalizer の推定 → 既知候補）。
        """
        p = Path(path)
        try:
            data = p.read_bytes()
        except OSError as e:
            raise InputFileError(f"ファイルを開けませんでした: {p} ({e})") from e

        scored = sorted(
            [(e, self._score_header(data, e, sep)) for e in self._candidates(data)],
            key=lambda x: x[1],
            reverse=True,
        )
        for enc, score in scored:
            if score < 0:
                continue
            # utf-8 と判定された BOM 付きファイルでも先頭見出しに BOM を残さない
            return data.decode(enc).removeprefix("\ufeff")

        tried = ", ".join(e for e, _ in scored)
        raise InputFileError(f"文字コードを判別できませんでした: {p}\n試したエンコーディング: {tried}")

    @staticmethod
    def _header_fields(text: str, sep: str) -> list[str]:
        # 見出し行（最初の空でない行）だけを csv で切り出す
        try:
            for row in csv.reader(io.StringIO(text, newline=""), delimiter=sep):
                if any(c != "" for c in row):
                    return row
        except csv.Error as e:
            raise InputFileError(f"CSVの解析に失敗しました: {e}") from e
        return []

    def read_header(self, path: str | Path, sep: str) -> list[str]:
        return self._header_fields(self.decode(path, sep), sep)

    def read_table(self, path: str | Path, sep: str) -> pd.DataFrame:
        """
        区切りファイルを全行読み込み、見出し行を列名にした文字列DataFrameを返す。
        - 見出し末尾の空欄（行末の区切り）は落とす
        - 見出しより長い行は切り詰め、短い行は空欄で埋める
        """
        text = self.decode(path, sep)
        n_fields = len(self._header_fields(text, sep))
        if n_fields == 0:
            return pd.DataFrame(dtype=str)

        try:
            df = pd.read_csv(
                io.StringIO(text),
                sep=sep,
                header=None,
                names=list(range(n_fields)),
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                engine="python",
                on_bad_lines=lambda r: r[:n_fields],
            )
        except (pd.errors.ParserError, csv.Error) as e:
            raise InputFileError(f"CSVの解析に失敗しました: {path} ({e})") from e

        df = df.fillna("")
        # 区切り文字だけの行は空行扱い
        df = df.loc[~(df == "").all(axis=1)]

        header = [str(c) for c in df.iloc[0]]
        while header and header[-1] == "":
            header.pop()

        body = df.iloc[1:, :len(header)].reset_index(drop=True)
        body.columns = header
        return body.astype(str)
