"""
法令IDのエンコード/デコード

形式: [元号番号:1][年:2][種別コード + 種別ごとのフィールド + 番号:12]
詳細は e-Gov 法令ID命名規約を参照。

    >>> law_id = decode('505M60001024060')
    >>> law_id.wareki
    Wareki(era=<Era.REIWA: 5>, year=5)
    >>> encode(law_id)
    '505M60001024060'
"""
import logging
from dataclasses import dataclass
from typing import Optional

from .config import LAW_ID_LENGTH, LAW_TYPE_POS
from .era import Wareki, decode_wareki, encode_wareki
from .errors import InvalidLength, LawIdParseError
from .law_type import LawType, decode_law_type, encode_law_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LawId:
    """法令ID（値オブジェクト）"""
    wareki: Wareki
    law_type: LawType

    def __post_init__(self):
        if not isinstance(self.wareki, Wareki):
            raise TypeError(f"wareki must be Wareki, got {type(self.wareki).__name__}")
        if not isinstance(self.law_type, LawType) or type(self.law_type) is LawType:
            raise TypeError(f"law_type must be a LawType variant, got {type(self.law_type).__name__}")

    @classmethod
    def from_id_str(cls, s: str) -> "LawId":
        return decode(s)

    def to_id_str(self) -> str:
        return encode(self)

    def __str__(self) -> str:
        return encode(self)


def decode(s: str) -> LawId:
    """
    法令ID文字列をパース

    先頭から順にフィールドを検査し、最初に見つかった不正を例外として送出する。

    Raises:
        InvalidLength: 15文字でない
        InvalidEraDigit, InvalidYear: 和暦部分が不正
        UnknownLawTypeCode, UnknownMinistryGroup, InvalidMinistryBitPattern,
        InvalidTypeField, UnknownInstitution: 種別部分が不正
        InvalidSerialNumber: 番号部分が不正
    """
    if not isinstance(s, str):
        raise InvalidLength(f"law ID must be str, got {type(s).__name__}")
    if len(s) != LAW_ID_LENGTH:
        raise InvalidLength(f"law ID must be {LAW_ID_LENGTH} characters, got {len(s)}", value=s)
    wareki = decode_wareki(s)
    law_type = decode_law_type(s[LAW_TYPE_POS:], LAW_TYPE_POS)
    return LawId(wareki, law_type)


def encode(law_id: LawId) -> str:
    """LawId を15文字の法令ID文字列に変換（decode の逆変換）"""
    return f"{encode_wareki(law_id.wareki)}{encode_law_type(law_id.law_type)}"


def parse_law_id(s: str) -> Optional[LawId]:
    """
    法令ID文字列をパース（失敗時は None）

    Examples:
        >>> parse_law_id('345AC0000000089') is not None
        True
        >>> parse_law_id('bad') is None
        True
    """
    try:
        return decode(s)
    except LawIdParseError as e:
        logger.debug(f"Invalid law ID {s!r}: {e.field}: {e}")
        return None
