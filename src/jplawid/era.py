"""
元号と和暦

法令IDの先頭3文字（元号番号1桁 + 年2桁）に対応する。
明治以降の元号のみを扱う（現在の法体系が始まった時点）。
"""
import re
import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict, Optional

from .config import ERA_POS, YEAR_POS, YEAR_WIDTH
from .errors import InvalidEraDigit, InvalidYear
from .utils.numerals import kanji_to_int

logger = logging.getLogger(__name__)


class Era(Enum):
    """元号（値は法令IDでの元号番号）"""
    MEIJI = 1
    TAISHO = 2
    SHOWA = 3
    HEISEI = 4
    REIWA = 5

    @property
    def name_ja(self) -> str:
        return _ERA_NAMES[self]

    @property
    def start(self) -> date:
        """改元日"""
        return _ERA_STARTS[self]

    @property
    def end(self) -> Optional[date]:
        """最終日（令和は None）"""
        following = _NEXT_ERA.get(self)
        if following is None:
            return None
        return date.fromordinal(following.start.toordinal() - 1)

    @property
    def base_year(self) -> int:
        """元年の前年の西暦（和暦年を足すと西暦になる）"""
        return self.start.year - 1

    @classmethod
    def from_digit(cls, digit: str) -> "Era":
        """法令IDの元号番号（'1'〜'5'）から生成"""
        if len(digit) == 1 and digit in _DIGIT_TO_ERA:
            return _DIGIT_TO_ERA[digit]
        raise InvalidEraDigit(f"unknown era digit: {digit!r}", value=digit, position=ERA_POS)

    def to_digit(self) -> str:
        return str(self.value)

    @classmethod
    def from_text(cls, text: str) -> Optional["Era"]:
        """「令和」などの元号名から生成"""
        return _NAME_TO_ERA.get(text)

    @classmethod
    def from_date(cls, d: date) -> "Era":
        """日付が属する元号"""
        for era in reversed(list(cls)):
            if d >= era.start:
                return era
        raise ValueError(f"date before Meiji: {d.isoformat()}")


_ERA_NAMES: Dict[Era, str] = {
    Era.MEIJI: '明治',
    Era.TAISHO: '大正',
    Era.SHOWA: '昭和',
    Era.HEISEI: '平成',
    Era.REIWA: '令和',
}

_ERA_STARTS: Dict[Era, date] = {
    Era.MEIJI: date(1868, 10, 23),
    Era.TAISHO: date(1912, 7, 30),
    Era.SHOWA: date(1926, 12, 25),
    Era.HEISEI: date(1989, 1, 8),
    Era.REIWA: date(2019, 5, 1),
}

_NEXT_ERA: Dict[Era, Era] = {
    Era.MEIJI: Era.TAISHO,
    Era.TAISHO: Era.SHOWA,
    Era.SHOWA: Era.HEISEI,
    Era.HEISEI: Era.REIWA,
}

_DIGIT_TO_ERA: Dict[str, Era] = {era.to_digit(): era for era in Era}
_NAME_TO_ERA: Dict[str, Era] = {v: k for k, v in _ERA_NAMES.items()}

# 「大正元年」「平成五年」「平成5年」「平成５年」
WAREKI_TEXT_PATTERN = re.compile(
    r'(?P<era>明治|大正|昭和|平成|令和)'
    r'(?P<year>元|[〇一二三四五六七八九十百]+|[0-9]+|[０-９]+)年'
)

_YEAR_FIELD_PATTERN = re.compile(r'[0-9]{2}')


@dataclass(frozen=True)
class Wareki:
    """和暦（元号 + 年）"""
    era: Era
    year: int

    def __post_init__(self):
        if not isinstance(self.era, Era):
            raise TypeError(f"era must be Era, got {type(self.era).__name__}")
        if isinstance(self.year, bool) or not isinstance(self.year, int):
            raise TypeError(f"year must be int, got {type(self.year).__name__}")
        if not 0 <= self.year <= 99:
            raise ValueError(f"year out of range for a law ID: {self.year}")

    @classmethod
    def from_ad(cls, year: int, month: int, day: int) -> "Wareki":
        """西暦の年月日から生成"""
        return cls.from_date(date(year, month, day))

    @classmethod
    def from_date(cls, d: date) -> "Wareki":
        era = Era.from_date(d)
        return cls(era, d.year - era.base_year)

    def to_ad(self) -> int:
        """西暦年"""
        return self.era.base_year + self.year

    @classmethod
    def from_text(cls, text: str) -> Optional["Wareki"]:
        """
        和暦表記を含むテキストから生成

        Examples:
            >>> Wareki.from_text('昭和十五年法律第一号')
            Wareki(era=<Era.SHOWA: 3>, year=15)
            >>> Wareki.from_text('大正元年')
            Wareki(era=<Era.TAISHO: 2>, year=1)
        """
        m = WAREKI_TEXT_PATTERN.search(text)
        if not m:
            logger.debug(f"No wareki expression in: {text}")
            return None
        era = _NAME_TO_ERA[m.group('era')]
        year_s = m.group('year')
        year = 1 if year_s == '元' else kanji_to_int(year_s)
        if not 0 <= year <= 99:
            logger.debug(f"Year out of range in: {text}")
            return None
        return cls(era, year)

    def to_text(self) -> str:
        """「令和5年」形式（元年は「元年」）"""
        year_s = '元' if self.year == 1 else str(self.year)
        return f"{self.era.name_ja}{year_s}年"


def decode_wareki(s: str) -> Wareki:
    """
    法令IDの先頭3文字をパース

    Raises:
        InvalidEraDigit: 1文字目が元号番号でない
        InvalidYear: 2〜3文字目が2桁の数字でない
    """
    era = Era.from_digit(s[ERA_POS:ERA_POS + 1])
    year_s = s[YEAR_POS:YEAR_POS + YEAR_WIDTH]
    if not _YEAR_FIELD_PATTERN.fullmatch(year_s):
        raise InvalidYear(f"year must be two digits: {year_s!r}", value=year_s, position=YEAR_POS)
    return Wareki(era, int(year_s))


def encode_wareki(wareki: Wareki) -> str:
    return f"{wareki.era.to_digit()}{wareki.year:02d}"
