"""pytest共通設定。"""

import os

# テスト実行時の環境変数を設定
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
