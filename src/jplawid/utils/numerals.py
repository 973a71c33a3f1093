"""
数字表記の正規化

和暦の年を表す漢数字・全角数字を整数に変換する。
"""
from typing import Dict

KANJI_TO_DIGIT: Dict[str, int] = {
    '〇': 0, '零': 0,
    '一': 1, '壱': 1,
    '二': 2, '弐': 2,
    '三': 3, '参': 3,
    '四': 4,
    '五': 5,
    '六': 6,
    '七': 7,
    '八': 8,
    '九': 9,
}

UNIT_MAP: Dict[str, int] = {
    '十': 10,
    '百': 100,
    '千': 1000,
}

FULLWIDTH_DIGITS = str.maketrans('０１２３４５６７８９', '0123456789')


def zenkaku_to_hankaku(text: str) -> str:
    """
    全角数字を半角数字に置換

    Examples:
        >>> zenkaku_to_hankaku('平成５年')
        '平成5年'
    """
    return text.translate(FULLWIDTH_DIGITS)


def kanji_to_int(text: str) -> int:
    """
    漢数字を整数に変換

    対応形式:
    - 位取り形式: 二十三 → 23, 百二 → 102
    - 連結形式: 一一 → 11
    - 算用数字（半角・全角）: 15, １５ → 15

    Args:
        text: 漢数字文字列

    Returns:
        整数値

    Raises:
        ValueError: 数字として解釈できない文字を含む場合

    Examples:
        >>> kanji_to_int('十五')
        15
        >>> kanji_to_int('１５')
        15
    """
    if not text:
        raise ValueError("empty numeral")
    normalized = zenkaku_to_hankaku(text)
    if normalized.isascii() and normalized.isdigit():
        return int(normalized)

    unknown = [c for c in text if c not in KANJI_TO_DIGIT and c not in UNIT_MAP]
    if unknown:
        raise ValueError(f"not a kanji numeral: {text!r}")

    if any(c in UNIT_MAP for c in text):
        return _parse_positional_kanji(text)
    return _parse_concatenative_kanji(text)


def _parse_positional_kanji(text: str) -> int:
    """位取り形式の漢数字をパース（二十三 → 23）"""
    total = 0
    current = 0

    for char in text:
        if char in KANJI_TO_DIGIT:
            current = KANJI_TO_DIGIT[char]
        else:
            unit = UNIT_MAP[char]
            if current == 0:
                current = 1
            total += current * unit
            current = 0

    total += current
    return total


def _parse_concatenative_kanji(text: str) -> int:
    """連結形式の漢数字をパース（一一 → 11）"""
    return int(''.join(str(KANJI_TO_DIGIT[c]) for c in text))
