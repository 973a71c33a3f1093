"""
府省令の発令府省テーブルとビット欄のエンコード/デコード

法令ID命名規約（9ページ）の区分 M1〜M6 ごとに、共同発令しうる府省・
委員会とビット位置を定義する。

ビット欄の形式:
    M{区分1桁}{16進7桁}
    16進7桁 = 28ビットのマスク。ビット位置 n（1始まり）は 2**(n-1) に対応。

    例: M60001024 → 区分6, 0x0001024 = ビット3,6,13
        = 復興庁・外務省・環境省
"""
import re
import logging
from datetime import date
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple, Type

from .config import MINISTRY_FIELD_WIDTH, MINISTRY_SLOT_COUNT
from .era import Wareki
from .errors import InvalidMinistryBitPattern, UnknownMinistryGroup
from .utils.numerals import kanji_to_int

logger = logging.getLogger(__name__)

_HEX_FIELD_PATTERN = re.compile(r'[0-9A-F]{%d}' % MINISTRY_FIELD_WIDTH)


class _MinistryMixin:
    """各区分の府省 Enum に共通のアクセサ"""

    @property
    def slot(self) -> int:
        """ビット位置（1始まり）"""
        return self.value

    @property
    def group(self) -> "MinistryGroup":
        return _TYPE_TO_GROUP[type(self)]

    @property
    def name_ja(self) -> str:
        return _NAMES[self][0]

    def matches_name(self, name: str) -> bool:
        """「厚生労働省・農林水産省令」のような名称に含まれるか"""
        return all(key in name for key in _NAMES[self][1])


# ==============================================================================
# M1: 1869年7月8日〜1943年10月31日
# ==============================================================================

class M1Ministry(_MinistryMixin, Enum):
    CABINET = 1
    IMPERIAL_HOUSEHOLD = 2
    GREATER_EAST_ASIA = 3
    INTERIOR = 4
    JUSTICE = 5
    FOREIGN_AFFAIRS = 6
    FINANCE = 7
    EDUCATION = 8
    HEALTH_AND_WELFARE = 9
    AGRICULTURE_AND_COMMERCE = 10
    COMMERCE_AND_INDUSTRY = 11
    RAILWAYS = 12
    COMMUNICATIONS = 13
    ARMY_A = 14
    NAVY = 15
    ARMY_B = 16
    AGRICULTURE_AND_FORESTRY = 17
    COLONIZATION = 18
    COLONIAL_AFFAIRS = 19
    AGRICULTURE_AND_COMMERCE_TEMPORARY = 20
    # 例: 明治19年4月7日司法省令丙第1号
    JUSTICE_HEI = 21


# ==============================================================================
# M2: 1943年11月1日〜1945年11月30日
# ==============================================================================

class M2Ministry(_MinistryMixin, Enum):
    CABINET = 1
    IMPERIAL_HOUSEHOLD = 2
    GREATER_EAST_ASIA = 3
    INTERIOR = 4
    JUSTICE = 5
    FOREIGN_AFFAIRS = 6
    FINANCE = 7
    EDUCATION = 8
    HEALTH_AND_WELFARE = 9
    AGRICULTURE_AND_COMMERCE = 10
    COMMERCE_AND_INDUSTRY = 11
    TRANSPORT = 12
    TRANSPORT_AND_COMMUNICATIONS = 13
    ARMY_A = 14
    NAVY = 15
    MUNITIONS = 16
    AGRICULTURE_AND_FORESTRY = 17


# ==============================================================================
# M3: 1945年12月1日〜1947年5月2日
# ==============================================================================

class M3Ministry(_MinistryMixin, Enum):
    CABINET = 1
    IMPERIAL_HOUSEHOLD = 2
    ECONOMIC_STABILIZATION_BOARD = 3
    INTERIOR = 4
    JUSTICE = 5
    FOREIGN_AFFAIRS = 6
    FINANCE = 7
    EDUCATION = 8
    HEALTH_AND_WELFARE = 9
    AGRICULTURE_AND_FORESTRY = 10
    COMMERCE_AND_INDUSTRY = 11
    TRANSPORT = 12
    COMMUNICATIONS = 13
    FIRST_DEMOBILIZATION = 14
    SECOND_DEMOBILIZATION = 15
    PRICE_AGENCY = 16
    CENTRAL_LABOR_RELATIONS_COMMISSION = 21


# ==============================================================================
# M4: 1947年5月3日〜1949年5月31日
# ==============================================================================

class M4Ministry(_MinistryMixin, Enum):
    LEGAL_AFFAIRS_AGENCY = 1
    PRIME_MINISTERS_AGENCY = 2
    ECONOMIC_STABILIZATION_BOARD = 3
    INTERIOR = 4
    JUSTICE = 5
    FOREIGN_AFFAIRS = 6
    FINANCE = 7
    EDUCATION = 8
    HEALTH_AND_WELFARE = 9
    AGRICULTURE_AND_FORESTRY = 10
    INTERNATIONAL_TRADE_AND_INDUSTRY = 11
    TRANSPORT = 12
    COMMUNICATIONS = 13
    LABOR = 14
    CONSTRUCTION = 15
    PRICE_AGENCY = 16
    COMMERCE_AND_INDUSTRY = 17
    CENTRAL_LABOR_RELATIONS_COMMISSION = 21
    FAIR_TRADE_COMMISSION = 22
    NATIONAL_PUBLIC_SAFETY_COMMISSION = 23


# ==============================================================================
# M5: 1949年6月1日〜2001年1月5日
# ==============================================================================

class M5Ministry(_MinistryMixin, Enum):
    LEGAL_AFFAIRS_AGENCY = 1
    PRIME_MINISTERS_OFFICE = 2
    ECONOMIC_STABILIZATION_BOARD = 3
    HOME_AFFAIRS = 4
    JUSTICE = 5
    FOREIGN_AFFAIRS = 6
    FINANCE = 7
    EDUCATION = 8
    HEALTH_AND_WELFARE = 9
    AGRICULTURE_FORESTRY_AND_FISHERIES = 10
    INTERNATIONAL_TRADE_AND_INDUSTRY = 11
    TRANSPORT = 12
    POSTS_AND_TELECOMMUNICATIONS = 13
    LABOR = 14
    CONSTRUCTION = 15
    PRICE_AGENCY = 16
    AGRICULTURE_AND_FORESTRY = 17
    TELECOMMUNICATIONS = 18
    CENTRAL_GOVERNMENT_REFORM_HEADQUARTERS = 19
    RADIO_REGULATORY_COMMISSION = 20
    CENTRAL_LABOR_RELATIONS_COMMISSION = 21
    FAIR_TRADE_COMMISSION = 22
    NATIONAL_PUBLIC_SAFETY_COMMISSION = 23
    ENVIRONMENTAL_DISPUTE_COORDINATION_COMMISSION = 24
    PUBLIC_SECURITY_EXAMINATION_COMMISSION = 25


# ==============================================================================
# M6: 2001年1月6日〜
# ==============================================================================

class M6Ministry(_MinistryMixin, Enum):
    CABINET_SECRETARIAT = 1
    CABINET_OFFICE = 2
    RECONSTRUCTION_AGENCY = 3
    INTERNAL_AFFAIRS = 4
    JUSTICE = 5
    FOREIGN_AFFAIRS = 6
    FINANCE = 7
    EDUCATION = 8
    HEALTH_LABOUR_AND_WELFARE = 9
    AGRICULTURE_FORESTRY_AND_FISHERIES = 10
    ECONOMY_TRADE_AND_INDUSTRY = 11
    LAND_INFRASTRUCTURE_TRANSPORT_AND_TOURISM = 12
    ENVIRONMENT = 13
    DEFENSE = 14
    DIGITAL_AGENCY = 15
    PERSONAL_INFORMATION_PROTECTION_COMMISSION = 18
    TRANSPORT_SAFETY_BOARD = 19
    NUCLEAR_REGULATION_AUTHORITY = 20
    CENTRAL_LABOR_RELATIONS_COMMISSION = 21
    FAIR_TRADE_COMMISSION = 22
    NATIONAL_PUBLIC_SAFETY_COMMISSION = 23
    ENVIRONMENTAL_DISPUTE_COORDINATION_COMMISSION = 24
    PUBLIC_SECURITY_EXAMINATION_COMMISSION = 25
    CASINO_REGULATORY_COMMISSION = 26


# 名称と、名称照合に使う部分文字列（すべて含まれれば一致）
_NAMES: Dict[Enum, Tuple[str, Tuple[str, ...]]] = {}


def _register_names(names: Dict[Enum, object]) -> None:
    for member, entry in names.items():
        if isinstance(entry, tuple):
            _NAMES[member] = entry
        else:
            _NAMES[member] = (entry, (entry,))


_register_names({
    M1Ministry.CABINET: ('内閣', ('閣',)),
    M1Ministry.IMPERIAL_HOUSEHOLD: '宮内省',
    M1Ministry.GREATER_EAST_ASIA: '大東亜省',
    M1Ministry.INTERIOR: '内務省',
    M1Ministry.JUSTICE: '司法省',
    M1Ministry.FOREIGN_AFFAIRS: '外務省',
    M1Ministry.FINANCE: '大蔵省',
    M1Ministry.EDUCATION: '文部省',
    M1Ministry.HEALTH_AND_WELFARE: '厚生省',
    M1Ministry.AGRICULTURE_AND_COMMERCE: '農商務省',
    M1Ministry.COMMERCE_AND_INDUSTRY: '商工省',
    M1Ministry.RAILWAYS: '鉄道省',
    M1Ministry.COMMUNICATIONS: '逓信省',
    M1Ministry.ARMY_A: ('陸軍省（甲）', ('陸軍省', '甲')),
    M1Ministry.NAVY: '海軍省',
    M1Ministry.ARMY_B: ('陸軍省（乙）', ('陸軍省', '乙')),
    M1Ministry.AGRICULTURE_AND_FORESTRY: '農林省',
    M1Ministry.COLONIZATION: '拓殖務省',
    M1Ministry.COLONIAL_AFFAIRS: '拓務省',
    M1Ministry.AGRICULTURE_AND_COMMERCE_TEMPORARY: ('農商務省（臨）', ('農商務省', '臨')),
    M1Ministry.JUSTICE_HEI: ('司法省（丙）', ('司法省', '丙')),
})

_register_names({
    M2Ministry.CABINET: ('内閣', ('閣',)),
    M2Ministry.IMPERIAL_HOUSEHOLD: '宮内省',
    M2Ministry.GREATER_EAST_ASIA: '大東亜省',
    M2Ministry.INTERIOR: '内務省',
    M2Ministry.JUSTICE: '司法省',
    M2Ministry.FOREIGN_AFFAIRS: '外務省',
    M2Ministry.FINANCE: '大蔵省',
    M2Ministry.EDUCATION: '文部省',
    M2Ministry.HEALTH_AND_WELFARE: '厚生省',
    M2Ministry.AGRICULTURE_AND_COMMERCE: '農商務省',
    M2Ministry.COMMERCE_AND_INDUSTRY: '商工省',
    M2Ministry.TRANSPORT: '運輸省',
    M2Ministry.TRANSPORT_AND_COMMUNICATIONS: '運輸通信省',
    M2Ministry.ARMY_A: ('陸軍省（甲）', ('陸軍省', '甲')),
    M2Ministry.NAVY: '海軍省',
    M2Ministry.MUNITIONS: '軍需省',
    M2Ministry.AGRICULTURE_AND_FORESTRY: '農林省',
})

_register_names({
    M3Ministry.CABINET: ('内閣', ('閣',)),
    M3Ministry.IMPERIAL_HOUSEHOLD: '宮内省',
    M3Ministry.ECONOMIC_STABILIZATION_BOARD: '経済安定本部',
    M3Ministry.INTERIOR: '内務省',
    M3Ministry.JUSTICE: '司法省',
    M3Ministry.FOREIGN_AFFAIRS: '外務省',
    M3Ministry.FINANCE: '大蔵省',
    M3Ministry.EDUCATION: '文部省',
    M3Ministry.HEALTH_AND_WELFARE: '厚生省',
    M3Ministry.AGRICULTURE_AND_FORESTRY: '農林省',
    M3Ministry.COMMERCE_AND_INDUSTRY: '商工省',
    M3Ministry.TRANSPORT: '運輸省',
    M3Ministry.COMMUNICATIONS: '逓信省',
    M3Ministry.FIRST_DEMOBILIZATION: '第一復員省',
    M3Ministry.SECOND_DEMOBILIZATION: '第二復員省',
    M3Ministry.PRICE_AGENCY: '物価庁',
    M3Ministry.CENTRAL_LABOR_RELATIONS_COMMISSION: '中央労働委員会',
})

_register_names({
    M4Ministry.LEGAL_AFFAIRS_AGENCY: '法務庁',
    M4Ministry.PRIME_MINISTERS_AGENCY: '総理庁',
    M4Ministry.ECONOMIC_STABILIZATION_BOARD: '経済安定本部',
    M4Ministry.INTERIOR: '内務省',
    M4Ministry.JUSTICE: '司法省',
    M4Ministry.FOREIGN_AFFAIRS: '外務省',
    M4Ministry.FINANCE: '大蔵省',
    M4Ministry.EDUCATION: '文部省',
    M4Ministry.HEALTH_AND_WELFARE: '厚生省',
    M4Ministry.AGRICULTURE_AND_FORESTRY: '農林省',
    M4Ministry.INTERNATIONAL_TRADE_AND_INDUSTRY: '通商産業省',
    M4Ministry.TRANSPORT: '運輸省',
    M4Ministry.COMMUNICATIONS: '逓信省',
    M4Ministry.LABOR: '労働省',
    M4Ministry.CONSTRUCTION: '建設省',
    M4Ministry.PRICE_AGENCY: '物価庁',
    M4Ministry.COMMERCE_AND_INDUSTRY: '商工省',
    M4Ministry.CENTRAL_LABOR_RELATIONS_COMMISSION: '中央労働委員会',
    M4Ministry.FAIR_TRADE_COMMISSION: '公正取引委員会',
    M4Ministry.NATIONAL_PUBLIC_SAFETY_COMMISSION: '国家公安委員会',
})

_register_names({
    M5Ministry.LEGAL_AFFAIRS_AGENCY: '法務庁',
    M5Ministry.PRIME_MINISTERS_OFFICE: '総理府',
    M5Ministry.ECONOMIC_STABILIZATION_BOARD: '経済安定本部',
    M5Ministry.HOME_AFFAIRS: '自治省',
    M5Ministry.JUSTICE: '法務省',
    M5Ministry.FOREIGN_AFFAIRS: '外務省',
    M5Ministry.FINANCE: '大蔵省',
    M5Ministry.EDUCATION: '文部省',
    M5Ministry.HEALTH_AND_WELFARE: '厚生省',
    M5Ministry.AGRICULTURE_FORESTRY_AND_FISHERIES: '農林水産省',
    M5Ministry.INTERNATIONAL_TRADE_AND_INDUSTRY: '通商産業省',
    M5Ministry.TRANSPORT: '運輸省',
    M5Ministry.POSTS_AND_TELECOMMUNICATIONS: '郵政省',
    M5Ministry.LABOR: '労働省',
    M5Ministry.CONSTRUCTION: '建設省',
    M5Ministry.PRICE_AGENCY: '物価庁',
    M5Ministry.AGRICULTURE_AND_FORESTRY: '農林省',
    M5Ministry.TELECOMMUNICATIONS: '電気通信省',
    M5Ministry.CENTRAL_GOVERNMENT_REFORM_HEADQUARTERS: '中央省庁等改革推進本部',
    M5Ministry.RADIO_REGULATORY_COMMISSION: '電波監理委員会',
    M5Ministry.CENTRAL_LABOR_RELATIONS_COMMISSION: '中央労働委員会',
    M5Ministry.FAIR_TRADE_COMMISSION: '公正取引委員会',
    M5Ministry.NATIONAL_PUBLIC_SAFETY_COMMISSION: '国家公安委員会',
    M5Ministry.ENVIRONMENTAL_DISPUTE_COORDINATION_COMMISSION: '公害等調整委員会',
    M5Ministry.PUBLIC_SECURITY_EXAMINATION_COMMISSION: '公安審査委員会',
})

_register_names({
    M6Ministry.CABINET_SECRETARIAT: '内閣官房',
    M6Ministry.CABINET_OFFICE: '内閣府',
    M6Ministry.RECONSTRUCTION_AGENCY: '復興庁',
    M6Ministry.INTERNAL_AFFAIRS: '総務省',
    M6Ministry.JUSTICE: '法務省',
    M6Ministry.FOREIGN_AFFAIRS: '外務省',
    M6Ministry.FINANCE: '財務省',
    M6Ministry.EDUCATION: '文部科学省',
    M6Ministry.HEALTH_LABOUR_AND_WELFARE: '厚生労働省',
    M6Ministry.AGRICULTURE_FORESTRY_AND_FISHERIES: '農林水産省',
    M6Ministry.ECONOMY_TRADE_AND_INDUSTRY: '経済産業省',
    M6Ministry.LAND_INFRASTRUCTURE_TRANSPORT_AND_TOURISM: '国土交通省',
    M6Ministry.ENVIRONMENT: '環境省',
    M6Ministry.DEFENSE: '防衛省',
    M6Ministry.DIGITAL_AGENCY: 'デジタル庁',
    M6Ministry.PERSONAL_INFORMATION_PROTECTION_COMMISSION: '特定個人情報保護委員会',
    M6Ministry.TRANSPORT_SAFETY_BOARD: '運輸安全委員会',
    M6Ministry.NUCLEAR_REGULATION_AUTHORITY: '原子力規制委員会',
    M6Ministry.CENTRAL_LABOR_RELATIONS_COMMISSION: '中央労働委員会',
    M6Ministry.FAIR_TRADE_COMMISSION: '公正取引委員会',
    M6Ministry.NATIONAL_PUBLIC_SAFETY_COMMISSION: '国家公安委員会',
    M6Ministry.ENVIRONMENTAL_DISPUTE_COORDINATION_COMMISSION: '公害等調整委員会',
    M6Ministry.PUBLIC_SECURITY_EXAMINATION_COMMISSION: '公安審査委員会',
    M6Ministry.CASINO_REGULATORY_COMMISSION: 'カジノ管理委員会',
})


# ==============================================================================
# 区分
# ==============================================================================

class MinistryGroup(IntEnum):
    """府省令の区分（法令IDの「M」の次の1桁）"""
    M1 = 1
    M2 = 2
    M3 = 3
    M4 = 4
    M5 = 5
    M6 = 6

    @property
    def ministry_type(self) -> Type[Enum]:
        return _GROUP_TO_TYPE[self]

    @property
    def start(self) -> date:
        return _GROUP_PERIODS[self][0]

    @property
    def end(self) -> Optional[date]:
        """区分の最終日（M6 は施行中なので None）"""
        return _GROUP_PERIODS[self][1]

    def applicable(self, d: date) -> bool:
        return self.start <= d and (self.end is None or d <= self.end)

    def applicable_wareki(self, wareki: Wareki) -> bool:
        """年単位での判定（改元・改組の年は両方の区分に該当する）"""
        year = wareki.to_ad()
        return self.start.year <= year and (self.end is None or year <= self.end.year)

    @classmethod
    def from_char(cls, c: str, position: Optional[int] = None) -> "MinistryGroup":
        if len(c) == 1 and c in '123456':
            return cls(int(c))
        raise UnknownMinistryGroup(f"unknown ministry group: {c!r}", value=c, position=position)


_GROUP_TO_TYPE: Mapping[MinistryGroup, Type[Enum]] = MappingProxyType({
    MinistryGroup.M1: M1Ministry,
    MinistryGroup.M2: M2Ministry,
    MinistryGroup.M3: M3Ministry,
    MinistryGroup.M4: M4Ministry,
    MinistryGroup.M5: M5Ministry,
    MinistryGroup.M6: M6Ministry,
})

_TYPE_TO_GROUP: Mapping[Type[Enum], MinistryGroup] = MappingProxyType(
    {v: k for k, v in _GROUP_TO_TYPE.items()}
)

_GROUP_PERIODS: Mapping[MinistryGroup, Tuple[date, Optional[date]]] = MappingProxyType({
    MinistryGroup.M1: (date(1869, 7, 8), date(1943, 10, 31)),
    MinistryGroup.M2: (date(1943, 11, 1), date(1945, 11, 30)),
    MinistryGroup.M3: (date(1945, 12, 1), date(1947, 5, 2)),
    MinistryGroup.M4: (date(1947, 5, 3), date(1949, 5, 31)),
    MinistryGroup.M5: (date(1949, 6, 1), date(2001, 1, 5)),
    MinistryGroup.M6: (date(2001, 1, 6), None),
})


def group_for_date(d: date) -> Optional[MinistryGroup]:
    for group in MinistryGroup:
        if group.applicable(d):
            return group
    return None


def group_for_wareki(wareki: Wareki) -> Optional[MinistryGroup]:
    """年が重なる場合は古い区分を返す"""
    for group in MinistryGroup:
        if group.applicable_wareki(wareki):
            return group
    return None


# ==============================================================================
# ビット欄
# ==============================================================================

def canonical_ministries(ministries: Iterable[Enum]) -> Tuple[Enum, ...]:
    """
    府省の集合を区分のテーブル順（ビット位置順）に正規化

    Raises:
        ValueError: 空、または複数区分が混在する場合
        TypeError: 府省 Enum 以外が含まれる場合
    """
    unique = set(ministries)
    if not unique:
        raise ValueError("ministry order needs at least one ministry")
    types = {type(m) for m in unique}
    for t in types:
        if t not in _TYPE_TO_GROUP:
            raise TypeError(f"not a ministry: {t.__name__}")
    if len(types) > 1:
        names = sorted(t.__name__ for t in types)
        raise ValueError(f"ministries from different groups: {names}")
    return tuple(sorted(unique, key=lambda m: m.value))


def decode_ministries(code: str, position: int = 0) -> Tuple[Enum, ...]:
    """
    「M60001024」形式の府省欄をパース

    Args:
        code: 「M」+ 区分1桁 + 16進7桁
        position: 法令ID中での code の開始位置（エラー報告用）

    Returns:
        ビット位置順の府省タプル

    Raises:
        UnknownMinistryGroup: 区分が M1〜M6 以外
        InvalidMinistryBitPattern: 16進以外の文字・全ゼロ・未定義ビット
    """
    group = MinistryGroup.from_char(code[1:2], position=position + 1)
    field = code[2:2 + MINISTRY_FIELD_WIDTH]
    field_pos = position + 2
    if not _HEX_FIELD_PATTERN.fullmatch(field):
        raise InvalidMinistryBitPattern(
            f"ministry field must be {MINISTRY_FIELD_WIDTH} upper-case hex digits: {field!r}",
            value=field, position=field_pos,
        )
    mask = int(field, 16)
    if mask == 0:
        raise InvalidMinistryBitPattern("no ministry flagged", value=field, position=field_pos)

    ministry_type = group.ministry_type
    ministries = []
    for slot in range(1, MINISTRY_SLOT_COUNT + 1):
        if not mask & (1 << (slot - 1)):
            continue
        try:
            ministries.append(ministry_type(slot))
        except ValueError:
            raise InvalidMinistryBitPattern(
                f"bit {slot} is not assigned in group {group.name}",
                value=field, position=field_pos,
            ) from None
    return tuple(ministries)


def encode_ministries(ministries: Iterable[Enum]) -> str:
    """
    府省の集合を「M{区分}{16進7桁}」に変換

    入力順に依存せず、同じ集合なら同じ文字列になる。
    """
    canonical = canonical_ministries(ministries)
    group = canonical[0].group
    mask = 0
    for m in canonical:
        mask |= 1 << (m.slot - 1)
    return f"M{group.value}{mask:0{MINISTRY_FIELD_WIDTH}X}"


# ==============================================================================
# 名称からの推定
# ==============================================================================

# 「令和五年三月一日環境省・外務省・復興庁令」など
_NUMERAL_CLASS = r'[元〇一二三四五六七八九十百0-9０-９]'
MINISTRY_TITLE_PATTERN = re.compile(
    r'(?P<wareki>(?:明治|大正|昭和|平成|令和)' + _NUMERAL_CLASS + r'+年)'
    r'(?:(?P<month>' + _NUMERAL_CLASS + r'+)月)?'
    r'(?:(?P<day>' + _NUMERAL_CLASS + r'+)日)?'
    r'(?P<ministry>.+)(?:令|規則)'
)


def ministries_from_name(group: MinistryGroup, name: str) -> Tuple[Enum, ...]:
    """
    「厚生労働省・農林水産省」のような名称から区分内の府省を抽出

    Returns:
        ビット位置順の府省タプル（該当なしなら空）
    """
    found = tuple(m for m in group.ministry_type if m.matches_name(name))
    if not found:
        logger.debug(f"No ministry of {group.name} in: {name}")
    return found


def ministries_from_title(title: str) -> Optional[Tuple[Enum, ...]]:
    """
    公布日付きの府省令名から府省を推定

    公布年（月日があれば月日も）から施行中の区分を選び、
    その区分のテーブルで府省名を照合する。

    Examples:
        >>> ministries_from_title('令和五年環境省・外務省・復興庁令')
        (<M6Ministry.RECONSTRUCTION_AGENCY: 3>, <M6Ministry.FOREIGN_AFFAIRS: 6>, <M6Ministry.ENVIRONMENT: 13>)

    Returns:
        府省タプル。和暦表記や「令」「規則」が見つからない場合は None
    """
    m = MINISTRY_TITLE_PATTERN.search(title)
    if not m:
        logger.debug(f"Not a ministry order title: {title}")
        return None
    wareki = Wareki.from_text(m.group('wareki'))
    if wareki is None:
        return None

    group = None
    if m.group('month') and m.group('day'):
        try:
            promulgated = date(
                wareki.to_ad(), kanji_to_int(m.group('month')), kanji_to_int(m.group('day'))
            )
        except ValueError as e:
            logger.debug(f"Ignoring date in {title}: {e}")
        else:
            group = group_for_date(promulgated)
    if group is None:
        group = group_for_wareki(wareki)
    if group is None:
        logger.debug(f"No ministry group in force for {wareki.to_text()}")
        return None
    return ministries_from_name(group, m.group('ministry'))
