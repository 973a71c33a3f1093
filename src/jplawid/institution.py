"""
機関の規則（R + 機関コード8桁）の機関テーブル
"""
import logging
from enum import Enum
from typing import Dict, Optional

from .errors import UnknownInstitution

logger = logging.getLogger(__name__)


class Institution(Enum):
    """規則制定機関（値は法令IDでの機関コード）"""
    BOARD_OF_AUDIT = 1
    COAST_GUARD = 2
    SCIENCE_COUNCIL_OF_JAPAN = 3
    LAND_ADJUSTMENT_COMMISSION = 4
    FINANCIAL_RECONSTRUCTION_COMMISSION = 5
    NATIONAL_CAPITAL_REGION_DEVELOPMENT_COMMISSION = 6
    LOCAL_FINANCE_COMMISSION = 7
    BAR_EXAMINATION_COMMISSION = 8
    CPA_ADMINISTRATION_COMMISSION = 9
    FOREIGN_INVESTMENT_COMMISSION = 10
    CULTURAL_PROPERTIES_PROTECTION_COMMISSION = 11
    JAPANESE_NATIONAL_COMMISSION_FOR_UNESCO = 12
    SUPREME_COURT = 13
    HOUSE_OF_REPRESENTATIVES = 14
    HOUSE_OF_COUNCILLORS = 15
    SEAFARERS_CENTRAL_LABOR_COMMISSION = 16
    # 8 と同名の機関に別コードが割り当てられている
    BAR_EXAMINATION_COMMISSION_B = 17
    RADIO_REGULATORY_COMMISSION = 18
    CASINO_REGULATORY_COMMISSION = 19

    @property
    def name_ja(self) -> str:
        return _NAMES[self]

    @classmethod
    def from_code(cls, code: int, position: Optional[int] = None) -> "Institution":
        try:
            return cls(code)
        except ValueError:
            raise UnknownInstitution(
                f"unknown institution code: {code}", value=str(code), position=position
            ) from None

    @classmethod
    def from_name(cls, name: str) -> Optional["Institution"]:
        """「会計検査院規則」などから導き出す"""
        for institution in cls:
            if _NAMES[institution] in name:
                return institution
        logger.debug(f"No institution in: {name}")
        return None


_NAMES: Dict[Institution, str] = {
    Institution.BOARD_OF_AUDIT: '会計検査院',
    Institution.COAST_GUARD: '海上保安庁',
    Institution.SCIENCE_COUNCIL_OF_JAPAN: '日本学術会議',
    Institution.LAND_ADJUSTMENT_COMMISSION: '土地調整委員会',
    Institution.FINANCIAL_RECONSTRUCTION_COMMISSION: '金融再生委員会',
    Institution.NATIONAL_CAPITAL_REGION_DEVELOPMENT_COMMISSION: '首都圏整備委員会',
    Institution.LOCAL_FINANCE_COMMISSION: '地方財政委員会',
    Institution.BAR_EXAMINATION_COMMISSION: '司法試験管理委員会',
    Institution.CPA_ADMINISTRATION_COMMISSION: '公認会計士管理委員会',
    Institution.FOREIGN_INVESTMENT_COMMISSION: '外資委員会',
    Institution.CULTURAL_PROPERTIES_PROTECTION_COMMISSION: '文化財保護委員会',
    Institution.JAPANESE_NATIONAL_COMMISSION_FOR_UNESCO: '日本ユネスコ国内委員会',
    Institution.SUPREME_COURT: '最高裁判所',
    Institution.HOUSE_OF_REPRESENTATIVES: '衆議院',
    Institution.HOUSE_OF_COUNCILLORS: '参議院',
    Institution.SEAFARERS_CENTRAL_LABOR_COMMISSION: '船員中央労働委員会',
    Institution.BAR_EXAMINATION_COMMISSION_B: '司法試験管理委員会',
    Institution.RADIO_REGULATORY_COMMISSION: '電波監理委員会',
    Institution.CASINO_REGULATORY_COMMISSION: 'カジノ管理委員会',
}
