"""
法令種別と種別コードのレジストリ

法令IDの4文字目以降（12文字）を扱う。

| コード         | 種別                 | 後続フィールド                         |
|----------------|----------------------|----------------------------------------|
| CONSTITUTION   | 憲法                 | なし                                   |
| AC             | 法律                 | 立法区分7桁 + 番号3桁                  |
| CO / IO        | 政令 / 勅令          | 効力区分7桁 + 番号3桁                  |
| DF / DT / DH   | 太政官布告/達/布達   | 効力区分7桁 + 番号3桁                  |
| M{区分}        | 府省令               | 府省ビット欄(16進7桁) + 番号3桁        |
| RJNJ           | 人事院規則           | 分類2桁 + 分類内連番3桁 + 改正連番3桁   |
| RPMD           | 内閣総理大臣決定     | 月2桁 + 日2桁 + 連番4桁                |
| R              | 機関の規則           | 機関コード8桁 + 番号3桁                |
"""
import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import ClassVar, Mapping, Tuple, Type

from .config import FLAG_WIDTH, INSTITUTION_WIDTH, LAW_TYPE_POS, LAW_TYPE_WIDTH, SERIAL_WIDTH
from .errors import InvalidSerialNumber, InvalidTypeField, UnknownLawTypeCode
from .institution import Institution
from .ministry import MinistryGroup, canonical_ministries, decode_ministries, encode_ministries

_DIGITS_PATTERN = re.compile(r'[0-9]+')


# ==============================================================================
# 番号欄
# ==============================================================================

def decode_serial(field: str, position: int = 0) -> int:
    """
    ゼロ埋めされた番号欄を整数に変換

    Raises:
        InvalidSerialNumber: 半角数字以外を含む
    """
    if not _DIGITS_PATTERN.fullmatch(field):
        raise InvalidSerialNumber(f"serial number must be digits: {field!r}", value=field, position=position)
    return int(field)


def encode_serial(num: int, width: int = SERIAL_WIDTH) -> str:
    """
    番号を指定桁数でゼロ埋め

    Raises:
        ValueError: 桁数に収まらない
    """
    _check_width('num', num, width)
    return f"{num:0{width}d}"


def _check_width(name: str, value: int, width: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    if not 0 <= value < 10 ** width:
        raise ValueError(f"{name} must fit in {width} digits: {value}")


# ==============================================================================
# 区分フラグ
# ==============================================================================

class Legislator(Enum):
    """法律の立法の種類（値は法令IDのフラグ欄）"""
    CABINET = '0000000'                     # 閣法
    HOUSE_OF_REPRESENTATIVES = '1000000'    # 衆議院議員立法
    HOUSE_OF_COUNCILLORS = '0100000'        # 参議院議員立法


class Efficacy(Enum):
    """政令・勅令などの効力（値は法令IDのフラグ欄）"""
    CABINET_ORDER = '0000000'
    LAW = '1000000'


def _decode_flag(enum_type: Type[Enum], field: str, position: int) -> Enum:
    try:
        return enum_type(field)
    except ValueError:
        raise InvalidTypeField(
            f"unknown {enum_type.__name__} flag: {field!r}", value=field, position=position
        ) from None


# ==============================================================================
# 種別
# ==============================================================================

@dataclass(frozen=True)
class LawType:
    """法令種別の基底クラス（直接デコード・エンコードはされない）"""

    code: ClassVar[str] = ''

    def to_id_str(self) -> str:
        """法令IDの種別部分（12文字）"""
        raise NotImplementedError

    @classmethod
    def from_id_str(cls, s: str, position: int = LAW_TYPE_POS) -> "LawType":
        raise NotImplementedError


@dataclass(frozen=True)
class Constitution(LawType):
    """憲法"""

    code: ClassVar[str] = 'CONSTITUTION'

    def to_id_str(self) -> str:
        return self.code

    @classmethod
    def from_id_str(cls, s: str, position: int = LAW_TYPE_POS) -> "Constitution":
        return cls()


@dataclass(frozen=True)
class Act(LawType):
    """法律"""
    legislator: Legislator
    num: int

    code: ClassVar[str] = 'AC'

    def __post_init__(self):
        if not isinstance(self.legislator, Legislator):
            raise TypeError(f"legislator must be Legislator, got {type(self.legislator).__name__}")
        _check_width('num', self.num, SERIAL_WIDTH)

    def to_id_str(self) -> str:
        return f"{self.code}{self.legislator.value}{encode_serial(self.num)}"

    @classmethod
    def from_id_str(cls, s: str, position: int = LAW_TYPE_POS) -> "Act":
        flag_end = 2 + FLAG_WIDTH
        legislator = _decode_flag(Legislator, s[2:flag_end], position + 2)
        num = decode_serial(s[flag_end:], position + flag_end)
        return cls(legislator, num)


@dataclass(frozen=True)
class _EfficacyOrder(LawType):
    """効力区分 + 番号を持つ種別の共通部分"""
    efficacy: Efficacy
    num: int

    def __post_init__(self):
        if not isinstance(self.efficacy, Efficacy):
            raise TypeError(f"efficacy must be Efficacy, got {type(self.efficacy).__name__}")
        _check_width('num', self.num, SERIAL_WIDTH)

    def to_id_str(self) -> str:
        return f"{self.code}{self.efficacy.value}{encode_serial(self.num)}"

    @classmethod
    def from_id_str(cls, s: str, position: int = LAW_TYPE_POS) -> "_EfficacyOrder":
        flag_end = 2 + FLAG_WIDTH
        efficacy = _decode_flag(Efficacy, s[2:flag_end], position + 2)
        num = decode_serial(s[flag_end:], position + flag_end)
        return cls(efficacy, num)


@dataclass(frozen=True)
class CabinetOrder(_EfficacyOrder):
    """政令"""
    code: ClassVar[str] = 'CO'


@dataclass(frozen=True)
class ImperialOrder(_EfficacyOrder):
    """勅令"""
    code: ClassVar[str] = 'IO'


@dataclass(frozen=True)
class DajokanFukoku(_EfficacyOrder):
    """太政官布告"""
    code: ClassVar[str] = 'DF'


@dataclass(frozen=True)
class DajokanTasshi(_EfficacyOrder):
    """太政官達"""
    code: ClassVar[str] = 'DT'


@dataclass(frozen=True)
class DajokanFutatsu(_EfficacyOrder):
    """太政官布達"""
    code: ClassVar[str] = 'DH'


@dataclass(frozen=True)
class MinistryOrder(LawType):
    """
    府省令

    ministries は同一区分の府省の集合。構築時に区分のテーブル順へ
    正規化されるため、与えた順序に関係なく等価比較・エンコードできる。
    """
    ministries: Tuple[Enum, ...]
    num: int

    code: ClassVar[str] = 'M'

    def __post_init__(self):
        object.__setattr__(self, 'ministries', canonical_ministries(self.ministries))
        _check_width('num', self.num, SERIAL_WIDTH)

    @property
    def group(self) -> MinistryGroup:
        return self.ministries[0].group

    def to_id_str(self) -> str:
        return f"{encode_ministries(self.ministries)}{encode_serial(self.num)}"

    @classmethod
    def from_id_str(cls, s: str, position: int = LAW_TYPE_POS) -> "MinistryOrder":
        serial_pos = LAW_TYPE_WIDTH - SERIAL_WIDTH
        ministries = decode_ministries(s[:serial_pos], position)
        num = decode_serial(s[serial_pos:], position + serial_pos)
        return cls(ministries, num)


@dataclass(frozen=True)
class NpaRule(LawType):
    """人事院規則"""
    kind: int                       # 規則の分類
    kind_serial_number: int         # 分類中の連番
    amendment_serial_number: int    # 改正規則の連番

    code: ClassVar[str] = 'RJNJ'

    def __post_init__(self):
        _check_width('kind', self.kind, 2)
        _check_width('kind_serial_number', self.kind_serial_number, 3)
        _check_width('amendment_serial_number', self.amendment_serial_number, 3)

    def to_id_str(self) -> str:
        return (
            f"{self.code}{encode_serial(self.kind, 2)}"
            f"{encode_serial(self.kind_serial_number, 3)}"
            f"{encode_serial(self.amendment_serial_number, 3)}"
        )

    @classmethod
    def from_id_str(cls, s: str, position: int = LAW_TYPE_POS) -> "NpaRule":
        return cls(
            decode_serial(s[4:6], position + 4),
            decode_serial(s[6:9], position + 6),
            decode_serial(s[9:12], position + 9),
        )


@dataclass(frozen=True)
class PrimeMinisterDecision(LawType):
    """内閣総理大臣決定の行政機関の規則"""
    month: int
    day: int
    num: int    # 同一決定日内の連番

    code: ClassVar[str] = 'RPMD'

    def __post_init__(self):
        _check_width('month', self.month, 2)
        _check_width('day', self.day, 2)
        _check_width('num', self.num, 4)

    def to_id_str(self) -> str:
        return f"{self.code}{self.month:02d}{self.day:02d}{self.num:04d}"

    @classmethod
    def from_id_str(cls, s: str, position: int = LAW_TYPE_POS) -> "PrimeMinisterDecision":
        return cls(
            decode_serial(s[4:6], position + 4),
            decode_serial(s[6:8], position + 6),
            decode_serial(s[8:12], position + 8),
        )


@dataclass(frozen=True)
class Regulation(LawType):
    """機関の規則"""
    institution: Institution
    num: int

    code: ClassVar[str] = 'R'

    def __post_init__(self):
        if not isinstance(self.institution, Institution):
            raise TypeError(f"institution must be Institution, got {type(self.institution).__name__}")
        _check_width('num', self.num, SERIAL_WIDTH)

    def to_id_str(self) -> str:
        return f"{self.code}{self.institution.value:0{INSTITUTION_WIDTH}d}{encode_serial(self.num)}"

    @classmethod
    def from_id_str(cls, s: str, position: int = LAW_TYPE_POS) -> "Regulation":
        code_end = 1 + INSTITUTION_WIDTH
        code_s = s[1:code_end]
        if not _DIGITS_PATTERN.fullmatch(code_s):
            raise InvalidTypeField(
                f"institution code must be digits: {code_s!r}", value=code_s, position=position + 1
            )
        institution = Institution.from_code(int(code_s), position=position + 1)
        num = decode_serial(s[code_end:], position + code_end)
        return cls(institution, num)


# ==============================================================================
# レジストリ
# ==============================================================================

LAW_TYPE_DECODERS: Mapping[str, Type[LawType]] = MappingProxyType({
    t.code: t for t in (
        Constitution,
        Act,
        CabinetOrder,
        ImperialOrder,
        DajokanFukoku,
        DajokanTasshi,
        DajokanFutatsu,
        MinistryOrder,
        NpaRule,
        PrimeMinisterDecision,
        Regulation,
    )
})

# 長いコードから照合する（CONSTITUTION と CO、RJNJ と R など）
_CODE_WIDTHS: Tuple[int, ...] = tuple(sorted({len(c) for c in LAW_TYPE_DECODERS}, reverse=True))


def law_type_code(s: str, position: int = LAW_TYPE_POS) -> str:
    """
    種別部分の先頭から種別コードを判定

    Raises:
        UnknownLawTypeCode: 登録されたコードに一致しない
    """
    for width in _CODE_WIDTHS:
        code = s[:width]
        if code in LAW_TYPE_DECODERS:
            return code
    raise UnknownLawTypeCode(f"unknown law type code: {s!r}", value=s, position=position)


def decode_law_type(s: str, position: int = LAW_TYPE_POS) -> LawType:
    """種別部分（12文字）をパース"""
    code = law_type_code(s, position)
    return LAW_TYPE_DECODERS[code].from_id_str(s, position)


def encode_law_type(law_type: LawType) -> str:
    return law_type.to_id_str()
