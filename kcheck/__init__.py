"""協会けんぽ 受診資格確認用ファイルの作成と、結果ファイルの突合。"""

__version__ = "0.1.0"
