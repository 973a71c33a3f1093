"""
jplawid ユーティリティモジュール
"""

from .numerals import (
    kanji_to_int,
    zenkaku_to_hankaku,
)

__all__ = [
    'kanji_to_int',
    'zenkaku_to_hankaku',
]
