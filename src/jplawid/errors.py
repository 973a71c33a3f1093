"""
法令IDのパースエラー

どのフィールドが不正だったかを例外クラスで区別する。
すべて LawIdParseError (ValueError) のサブクラス。
"""
from typing import Optional


class LawIdParseError(ValueError):
    """法令IDのパース失敗の基底クラス"""

    field = "law_id"

    def __init__(self, message: str, value: Optional[str] = None, position: Optional[int] = None):
        super().__init__(message)
        self.value = value
        self.position = position


class InvalidLength(LawIdParseError):
    """全長が15文字でない"""
    field = "length"


class InvalidEraDigit(LawIdParseError):
    """元号番号が1〜5以外"""
    field = "era"


class InvalidYear(LawIdParseError):
    """年が2桁の数字でない"""
    field = "year"


class UnknownLawTypeCode(LawIdParseError):
    """未知の種別コード"""
    field = "law_type"


class UnknownMinistryGroup(LawIdParseError):
    """府省令の区分番号（M1〜M6）が未知"""
    field = "ministry_group"


class InvalidMinistryBitPattern(LawIdParseError):
    """府省令のビット欄が不正（16進以外・全ゼロ・未定義ビット）"""
    field = "ministry_bits"


class InvalidSerialNumber(LawIdParseError):
    """番号欄に数字以外が含まれる"""
    field = "serial"


class InvalidTypeField(LawIdParseError):
    """種別ごとのフラグ・区分欄が不正"""
    field = "type_field"


class UnknownInstitution(LawIdParseError):
    """機関の規則の機関コードが未知"""
    field = "institution"
