# kcheck/file_keys.py

# 文字コード候補（先頭ほど優先。設定値・推定値の後に試す）
ENCODING_CANDIDATES = [
    "cp932", "shift_jis", "utf-8-sig", "utf-8", "euc_jp",
]

# 区切り文字
SEP_LEDGER = "\t"    # 健診システムの予約台帳 / 単一ファイルモードの入力
SEP_INSURER = ","    # 協会けんぽ結果ファイル

# 単一ファイルモードで必要な列（論理名 → 見出し）
COL_INSURER_NO = "保険者番号"
COL_SYMBOL = "健康保険記号"
COL_CARD_NO = "健康保険番号"
COL_BIRTH = "生年月日"
COL_VISIT = "受診日"
COL_COURSE = "ｺｰｽ区分ｺｰﾄﾞ"

ELIGIBILITY_REQUIRED = [
    COL_INSURER_NO, COL_SYMBOL, COL_CARD_NO, COL_BIRTH, COL_VISIT, COL_COURSE,
]

# 予約台帳（2ファイルモード）で必要な列
COL_DEPT = "所属名１"
COL_NAME = "受診者名"
COL_SEX = "性別"

LEDGER_REQUIRED = [COL_DEPT, COL_NAME, COL_SEX, COL_SYMBOL, COL_CARD_NO]
LEDGER_OUTPUT = [COL_DEPT, COL_NAME, COL_SEX]

# 協会けんぽ結果ファイルの判別用見出し
INSURER_SIGNATURE = "保険者番号（支部コード）"

# 協会けんぽ結果ファイルの固定位置
INSURER_POS_SYMBOL = 1
INSURER_POS_CARD = 2
INSURER_POS_DATES = (4, 5)
INSURER_POS_COURSE = 6

# 0埋め桁数
WIDTH_INSURER_NO = 8
WIDTH_SYMBOL = 8
WIDTH_CARD_NO = 7

# 資格確認用CSVの固定値（枝番）
BRANCH_CONSTANT = "00"

# 資格確認用CSVの列順
ELIGIBILITY_COLUMNS = [
    "保険者番号", "記号", "番号", "枝番", "生年月日", "受診日", "コース",
]

# 健診システムのコース区分 → 協会けんぽのコース
COURSE_CODE_MAP = {"19": "1", "20": "2", "21": "3"}
COURSE_LABELS = {
    "1": "一般健診",
    "2": "一般健診＋付加",
    "3": "子宮がん単独",
}

# 出力ファイル
SUBMISSION_PREFIX = "SIKAKU_1311131242_"
RESULT_PREFIX = "協会けんぽ受診資格結果"
RESULT_SHEET = "データ"
DEFAULT_FONT_NAME = "游ゴシック"
DEFAULT_FONT_SIZE = 11
OUTPUT_ENCODING = "cp932"

# ログ
DEFAULT_LOG_PATH = "./log.txt"
