"""
LawId の構造化シリアライズ（dict / YAML）

形式:
    id: 505M60001024060
    era: REIWA
    year: 5
    law_type:
      code: M
      group: 6
      ministries:
      - RECONSTRUCTION_AGENCY
      - FOREIGN_AFFAIRS
      - ENVIRONMENT
      num: 60

Enum は名前（大文字）で出力する。from_dict は構造化フィールドから
組み立て、id があれば一致を検証する。
"""
import yaml
from dataclasses import fields
from enum import Enum
from typing import Any, Dict, Type

from .era import Era, Wareki
from .errors import UnknownLawTypeCode
from .institution import Institution
from .law_id import LawId, decode, encode
from .law_type import LAW_TYPE_DECODERS, Efficacy, LawType, Legislator, MinistryOrder
from .ministry import MinistryGroup

_ENUM_FIELDS: Dict[str, Type[Enum]] = {
    'legislator': Legislator,
    'efficacy': Efficacy,
    'institution': Institution,
}


def to_dict(law_id: LawId) -> Dict[str, Any]:
    return {
        'id': encode(law_id),
        'era': law_id.wareki.era.name,
        'year': law_id.wareki.year,
        'law_type': _law_type_to_dict(law_id.law_type),
    }


def _law_type_to_dict(law_type: LawType) -> Dict[str, Any]:
    data: Dict[str, Any] = {'code': law_type.code}
    if isinstance(law_type, MinistryOrder):
        data['group'] = law_type.group.value
        data['ministries'] = [m.name for m in law_type.ministries]
        data['num'] = law_type.num
        return data
    for f in fields(law_type):
        value = getattr(law_type, f.name)
        data[f.name] = value.name if isinstance(value, Enum) else value
    return data


def from_dict(data: Dict[str, Any]) -> LawId:
    """
    to_dict の出力から LawId を復元

    Raises:
        ValueError: キー欠落・型違い・未知の Enum 名・id と構造化フィールドの不一致
        UnknownLawTypeCode: 未知の種別コード
    """
    try:
        wareki = Wareki(Era[data['era']], data['year'])
        law_type = _law_type_from_dict(data['law_type'])
    except KeyError as e:
        raise ValueError(f"missing or unknown key in law ID dict: {e}") from None
    except TypeError as e:
        raise ValueError(f"wrong type in law ID dict: {e}") from None

    law_id = LawId(wareki, law_type)
    expected = data.get('id')
    if expected is not None and expected != encode(law_id):
        raise ValueError(f"id {expected!r} does not match fields ({encode(law_id)!r})")
    return law_id


def _law_type_from_dict(data: Dict[str, Any]) -> LawType:
    code = data['code']
    if code not in LAW_TYPE_DECODERS:
        raise UnknownLawTypeCode(f"unknown law type code: {code!r}", value=code)
    cls = LAW_TYPE_DECODERS[code]

    if cls is MinistryOrder:
        group = MinistryGroup.from_char(str(data['group']))
        ministries = [group.ministry_type[name] for name in data['ministries']]
        return MinistryOrder(ministries, data['num'])

    kwargs = {}
    for f in fields(cls):
        value = data[f.name]
        if f.name in _ENUM_FIELDS:
            value = _ENUM_FIELDS[f.name][value]
        kwargs[f.name] = value
    return cls(**kwargs)


def dump_yaml(law_id: LawId) -> str:
    return yaml.dump(
        to_dict(law_id),
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=False,
    )


def load_yaml(text: str) -> LawId:
    """
    YAML から LawId を復元

    マッピングなら from_dict、スカラーなら法令ID文字列としてパースする。
    """
    data = yaml.safe_load(text)
    if isinstance(data, dict):
        return from_dict(data)
    if isinstance(data, str):
        return decode(data)
    raise ValueError(f"expected a mapping or a law ID string, got {type(data).__name__}")
