# kcheck/roles.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Tuple

from .file_keys import INSURER_SIGNATURE, SEP_INSURER
from .io_utils import CsvLoader


@dataclass(frozen=True)
class FileRoles:
    """2ファイルのどちらが協会けんぽ結果ファイルか（0 = 1番目, 1 = 2番目）。"""
    insurer: int

    @property
    def ledger(self) -> int:
        return 1 - self.insurer

    def order(self, first, second):
        # (協会けんぽ結果, 予約台帳) の順に並べ替える
        return (first, second) if self.insurer == 0 else (second, first)


def is_insurer_header(header: Iterable[str]) -> bool:
    return INSURER_SIGNATURE in [str(c).strip() for c in header]


def classify_roles(first_header: Iterable[str]) -> FileRoles:
    """
    1番目のファイルの見出しに協会けんぽ結果ファイル固有の見出しがあれば
    1番目を結果ファイル、なければ2番目を結果ファイルとみなす。
    両方/どちらにも無い場合の検証はしない（常にどちらかに決める）。
    """
    return FileRoles(insurer=0 if is_insurer_header(first_header) else 1)


def classify_paths(path1: str | Path, path2: str | Path, loader: CsvLoader) -> Tuple[Path, Path]:
    """
    1番目のファイルの見出し行だけをカンマ区切りで読み、
    (協会けんぽ結果ファイル, 予約台帳) のパスを返す。
    """
    header = loader.read_header(path1, SEP_INSURER)
    roles = classify_roles(header)
    return roles.order(Path(path1), Path(path2))
