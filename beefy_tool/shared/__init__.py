"""共通モジュール（例外・設定・ログ）"""
