# kcheck/cli.py
from __future__ import annotations
import argparse
import sys
from pathlib import Path

from .config import KCheckConfig
from .errors import KCheckError, MissingColumnsError
from .file_keys import DEFAULT_LOG_PATH, OUTPUT_ENCODING
from .normalize import OVERFLOW_POLICIES
from .runlog import open_run_log
from .runner import EligibilityExporter, ResultJoiner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kcheck",
        description="協会けんぽ 受診資格確認: 1ファイル→資格確認用CSV / 2ファイル→受診資格結果Excel",
    )
    parser.add_argument("files", nargs="*", help="予約台帳（1ファイル）または 協会けんぽ結果ファイル＋予約台帳（2ファイル）")
    parser.add_argument("--encoding", default=OUTPUT_ENCODING, help="入出力の文字コード (default: cp932)")
    parser.add_argument("--out-dir", default=".", help="資格確認用CSVの出力先 (default: カレントディレクトリ)")
    parser.add_argument("--log-file", default=DEFAULT_LOG_PATH, help="追記するログファイル (default: ./log.txt)")
    parser.add_argument("--overflow", choices=OVERFLOW_POLICIES, default="truncate",
                        help="0埋め桁数を超える値の扱い (default: truncate)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = KCheckConfig(
        encoding=args.encoding,
        out_dir=Path(args.out_dir),
        log_path=Path(args.log_file),
        overflow=args.overflow,
    )

    with open_run_log(cfg.log_path) as logger:
        # ドロップされたファイルの数で処理を分ける
        if len(args.files) not in (1, 2):
            logger.info("ドロップファイルエラー。処理を終了します。")
            return 1

        try:
            if len(args.files) == 1:
                EligibilityExporter(cfg, logger=logger.info).run(args.files[0])
            else:
                ResultJoiner(cfg, logger=logger.info).run(args.files[0], args.files[1])
        except MissingColumnsError:
            # 項目ごとのメッセージは runner 側で出力済み
            return 1
        except (KCheckError, OSError) as e:
            logger.info(f"Error: {e}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
