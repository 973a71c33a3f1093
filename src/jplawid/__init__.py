"""
jplawid: e-Gov 法令IDのエンコード/デコード

    >>> from jplawid import decode, encode
    >>> encode(decode('345AC0000000089'))
    '345AC0000000089'
"""

from .era import Era, Wareki
from .errors import (
    LawIdParseError,
    InvalidLength,
    InvalidEraDigit,
    InvalidYear,
    UnknownLawTypeCode,
    UnknownMinistryGroup,
    InvalidMinistryBitPattern,
    InvalidSerialNumber,
    InvalidTypeField,
    UnknownInstitution,
)
from .institution import Institution
from .law_id import LawId, decode, encode, parse_law_id
from .law_type import (
    LawType,
    Constitution,
    Act,
    Legislator,
    Efficacy,
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
from .ministry import (
    MinistryGroup,
    M1Ministry,
    M2Ministry,
    M3Ministry,
    M4Ministry,
    M5Ministry,
    M6Ministry,
    ministries_from_name,
    ministries_from_title,
)

__version__ = "0.1.0"

__all__ = [
    # codec
    'LawId',
    'decode',
    'encode',
    'parse_law_id',
    # era
    'Era',
    'Wareki',
    # law types
    'LawType',
    'Constitution',
    'Act',
    'Legislator',
    'Efficacy',
    'CabinetOrder',
    'ImperialOrder',
    'DajokanFukoku',
    'DajokanTasshi',
    'DajokanFutatsu',
    'MinistryOrder',
    'NpaRule',
    'PrimeMinisterDecision',
    'Regulation',
    'Institution',
    # ministries
    'MinistryGroup',
    'M1Ministry',
    'M2Ministry',
    'M3Ministry',
    'M4Ministry',
    'M5Ministry',
    'M6Ministry',
    'ministries_from_name',
    'ministries_from_title',
    # errors
    'LawIdParseError',
    'InvalidLength',
    'InvalidEraDigit',
    'InvalidYear',
    'UnknownLawTypeCode',
    'UnknownMinistryGroup',
    'InvalidMinistryBitPattern',
    'InvalidSerialNumber',
    'InvalidTypeField',
    'UnknownInstitution',
]
