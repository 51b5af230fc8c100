# kcheck/errors.py
from __future__ import annotations


class KCheckError(RuntimeError):
    """処理を中止すべきエラーの基底クラス。"""


class InputFileError(KCheckError):
    pass


class MissingColumnsError(KCheckError):
    """必要な見出しが見つからなかった。missing は見出し名のタプル。"""

    def __init__(self, missing):
        self.missing = tuple(missing)
        super().__init__("必要な項目が足りない為、処理を中止します。: " + ", ".join(self.missing))


class FieldOverflowError(KCheckError):
    def __init__(self, value: str, width: int):
        self.value = value
        self.width = width
        super().__init__(f"桁数超過: '{value}' は {width} 桁に収まりません")
