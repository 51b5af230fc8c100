# kcheck/naming.py
from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .errors import MissingColumnsError


@dataclass(frozen=True)
class ColumnIndex:
    """
    見出し名 → 列位置（0始まり）の対応表。
    missing には見出し行に見つからなかった必要項目が入る。
    """
    positions: Mapping[str, int]
    missing: tuple[str, ...] = ()

    @property
    def is_complete(self) -> bool:
        return not self.missing

    def get(self, name: str) -> Optional[int]:
        return self.positions.get(name)

    def __getitem__(self, name: str) -> int:
        return self.positions[name]


def resolve_columns(header: Iterable[str], required: Iterable[str]) -> ColumnIndex:
    """
    見出し行を1回だけ走査し、必要項目の列位置を完全一致で求める。
    同じ見出しが複数あれば先に出た列を使う。列の並び順は問わない。
    """
    wanted = list(required)
    found: dict[str, int] = {}
    for pos, name in enumerate(header):
        if name in wanted and name not in found:
            found[name] = pos

    # 必要項目の定義順に並べる（ログ出力順を安定させる）
    positions = {name: found[name] for name in wanted if name in found}
    missing = tuple(name for name in wanted if name not in found)
    return ColumnIndex(positions=MappingProxyType(positions), missing=missing)


def require_columns(header: Iterable[str], required: Iterable[str]) -> ColumnIndex:
    idx = resolve_columns(header, required)
    if not idx.is_complete:
        raise MissingColumnsError(idx.missing)
    return idx
