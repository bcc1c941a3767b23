"""
共通定数
- コメントは現状の目的・契約・使い方のみを記載する。
"""

# ペア一覧を保存するキー（ローカルストレージ相当）
STORAGE_KEY: str = "matchingGamePairs"

# エクスポート文書のバージョンタグ
EXPORT_VERSION: str = "1.0"

# 保存時に生成する JSON 文書の静的メタデータ
PROJECT_NAME: str = "Matching Pairs Game"

# ダウンロード時のファイル名
EXPORT_FILE_NAME: str = "matching-pairs-backup.json"
UPDATED_FILE_NAME: str = "pairs.json"

# 表示まわりの遅延（ミリ秒）
VICTORY_DELAY_MS: int = 500
VICTORY_DURATION_MS: int = 3000
MISMATCH_CLEAR_MS: int = 2000
SAVE_NOTICE_MS: int = 5000

# 同梱データも読めなかった場合の既定ペア（item1, item2）
DEFAULT_PAIRS: list[tuple[str, str]] = [
    ("Cat", "Meow"),
    ("Dog", "Bark"),
    ("Sun", "Hot"),
    ("Rain", "Wet"),
    ("Fire", "Burn"),
]
