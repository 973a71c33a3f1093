"""
Tests for law_id.py - 法令ID全体のデコード/エンコード

テスト項目:
1. 共同府省令の具体例（505M60001024060）
2. 文字列 → 値 → 文字列 の往復
3. 値 → 文字列 → 値 の往復
4. 各エラー種別と、最初に見つかった不正が返ること
"""
import logging

import pytest

from jplawid import (
    Act,
    CabinetOrder,
    Constitution,
    DajokanFukoku,
    DajokanFutatsu,
    DajokanTasshi,
    Efficacy,
    Era,
    ImperialOrder,
    Institution,
    InvalidEraDigit,
    InvalidLength,
    InvalidMinistryBitPattern,
    InvalidSerialNumber,
    InvalidTypeField,
    InvalidYear,
    LawId,
    LawIdParseError,
    Legislator,
    M1Ministry,
    M5Ministry,
    M6Ministry,
    MinistryGroup,
    MinistryOrder,
    NpaRule,
    PrimeMinisterDecision,
    Regulation,
    UnknownInstitution,
    UnknownLawTypeCode,
    UnknownMinistryGroup,
    Wareki,
    decode,
    encode,
    parse_law_id,
)


class TestWorkedExample:
    """令和5年 環境省・外務省・復興庁令 第60号"""

    def test_decode(self):
        law_id = decode("505M60001024060")
        assert law_id.wareki == Wareki(Era.REIWA, 5)
        assert isinstance(law_id.law_type, MinistryOrder)
        assert law_id.law_type.group == MinistryGroup.M6
        assert set(law_id.law_type.ministries) == {
            M6Ministry.ENVIRONMENT,
            M6Ministry.FOREIGN_AFFAIRS,
            M6Ministry.RECONSTRUCTION_AGENCY,
        }
        assert law_id.law_type.num == 60

    def test_ministries_in_table_order(self):
        law_id = decode("505M60001024060")
        assert law_id.law_type.ministries == (
            M6Ministry.RECONSTRUCTION_AGENCY,
            M6Ministry.FOREIGN_AFFAIRS,
            M6Ministry.ENVIRONMENT,
        )

    def test_encode(self):
        law_id = LawId(
            Wareki(Era.REIWA, 5),
            MinistryOrder(
                [M6Ministry.ENVIRONMENT, M6Ministry.FOREIGN_AFFAIRS, M6Ministry.RECONSTRUCTION_AGENCY],
                60,
            ),
        )
        assert encode(law_id) == "505M60001024060"

    def test_str_and_aliases(self):
        law_id = LawId.from_id_str("505M60001024060")
        assert str(law_id) == "505M60001024060"
        assert law_id.to_id_str() == "505M60001024060"


class TestStringRoundTrip:
    """decode に成功した文字列は encode で完全に復元される"""

    @pytest.mark.parametrize("s", [
        "325M50001000004",
        "345AC0000000089",
        "505M60000400060",
        "505M60000040019",
        "505M60001024060",
        "326R00000011009",
        "326R00000017001",
        "321CONSTITUTION",
        "322CO0000000016",
        "322CO1000000003",
        "140AC0000000045",
        "129AC0000000089",
        "323AC1000000211",
        "323AC0100000010",
        "320IO0000000542",
        "106DF0000000001",
        "105DT0000000012",
        "107DH1000000003",
        "119M10000002001",
        "427RJNJ09017000",
        "502RPMD03310001",
        "413M60000101001",
    ])
    def test_round_trip(self, s):
        assert encode(decode(s)) == s


class TestValueRoundTrip:
    """構築した値は encode → decode で同じ値に戻る"""

    @pytest.mark.parametrize("law_id", [
        LawId(Wareki(Era.SHOWA, 21), Constitution()),
        LawId(Wareki(Era.MEIJI, 40), Act(Legislator.CABINET, 45)),
        LawId(Wareki(Era.HEISEI, 10), Act(Legislator.HOUSE_OF_COUNCILLORS, 0)),
        LawId(Wareki(Era.SHOWA, 37), CabinetOrder(Efficacy.CABINET_ORDER, 999)),
        LawId(Wareki(Era.TAISHO, 12), ImperialOrder(Efficacy.LAW, 1)),
        LawId(Wareki(Era.MEIJI, 6), DajokanFukoku(Efficacy.CABINET_ORDER, 1)),
        LawId(Wareki(Era.MEIJI, 5), DajokanTasshi(Efficacy.LAW, 12)),
        LawId(Wareki(Era.MEIJI, 7), DajokanFutatsu(Efficacy.CABINET_ORDER, 3)),
        LawId(Wareki(Era.MEIJI, 19), MinistryOrder([M1Ministry.JUSTICE_HEI], 1)),
        LawId(Wareki(Era.SHOWA, 25), MinistryOrder([M5Ministry.POSTS_AND_TELECOMMUNICATIONS], 4)),
        LawId(Wareki(Era.REIWA, 0), MinistryOrder(list(M6Ministry), 1)),
        LawId(Wareki(Era.HEISEI, 27), NpaRule(9, 17, 0)),
        LawId(Wareki(Era.REIWA, 2), PrimeMinisterDecision(3, 31, 1)),
        LawId(Wareki(Era.SHOWA, 26), Regulation(Institution.CULTURAL_PROPERTIES_PROTECTION_COMMISSION, 9)),
    ])
    def test_round_trip(self, law_id):
        s = encode(law_id)
        assert len(s) == 15
        assert decode(s) == law_id

    def test_ministry_order_is_order_independent(self):
        a = LawId(Wareki(Era.REIWA, 5), MinistryOrder(
            [M6Ministry.ENVIRONMENT, M6Ministry.FOREIGN_AFFAIRS, M6Ministry.RECONSTRUCTION_AGENCY], 60))
        b = LawId(Wareki(Era.REIWA, 5), MinistryOrder(
            [M6Ministry.RECONSTRUCTION_AGENCY, M6Ministry.ENVIRONMENT, M6Ministry.FOREIGN_AFFAIRS], 60))
        assert a == b
        assert hash(a) == hash(b)
        assert encode(a) == encode(b)

    def test_different_variants_with_same_fields_are_not_equal(self):
        assert CabinetOrder(Efficacy.LAW, 1) != ImperialOrder(Efficacy.LAW, 1)


class TestLength:
    """全長チェック"""

    @pytest.mark.parametrize("s", ["505M6000102406", "505M60001024060X", "", "5"])
    def test_invalid_length(self, s):
        with pytest.raises(InvalidLength):
            decode(s)

    def test_non_str(self):
        with pytest.raises(InvalidLength):
            decode(505)


class TestFieldErrors:
    """フィールドごとのエラー種別"""

    @pytest.mark.parametrize("s, error", [
        ("605M60001024060", InvalidEraDigit),
        ("005M60001024060", InvalidEraDigit),
        ("R05M60001024060", InvalidEraDigit),
        ("5A5M60001024060", InvalidYear),
        ("5 5M60001024060", InvalidYear),
        ("5５5M60001024060", InvalidYear),
        ("505XX0000000060", UnknownLawTypeCode),
        ("505ac0000000089", UnknownLawTypeCode),
        ("505M70001024060", UnknownMinistryGroup),
        ("505M00001024060", UnknownMinistryGroup),
        ("505MX0001024060", UnknownMinistryGroup),
        ("505M60000000060", InvalidMinistryBitPattern),
        ("505M6000G024060", InvalidMinistryBitPattern),
        ("505M6000a024060", InvalidMinistryBitPattern),
        ("505M60008000060", InvalidMinistryBitPattern),
        ("505M68000000060", InvalidMinistryBitPattern),
        ("505M6000102406A", InvalidSerialNumber),
        ("345AC00000000-9", InvalidSerialNumber),
        ("427RJNJ0901700X", InvalidSerialNumber),
        ("345AC2000000089", InvalidTypeField),
        ("322CO0100000016", InvalidTypeField),
        ("326R0000X011009", InvalidTypeField),
        ("326R00000099009", UnknownInstitution),
    ])
    def test_error_kind(self, s, error):
        with pytest.raises(error):
            decode(s)

    def test_all_errors_share_base(self):
        with pytest.raises(LawIdParseError):
            decode("505M60000000060")
        with pytest.raises(ValueError):
            decode("505M60000000060")

    def test_first_error_wins(self):
        """元号と区分の両方が不正なら元号のエラー"""
        with pytest.raises(InvalidEraDigit):
            decode("6X5M70000000XXX")

    def test_error_reports_field_and_position(self):
        with pytest.raises(InvalidYear) as exc:
            decode("5X5M60001024060")
        assert exc.value.field == "year"
        assert exc.value.position == 1
        assert exc.value.value == "X5"

    def test_ministry_error_position(self):
        with pytest.raises(InvalidMinistryBitPattern) as exc:
            decode("505M60000000060")
        assert exc.value.position == 5
        assert exc.value.value == "0000000"

    def test_serial_error_position(self):
        with pytest.raises(InvalidSerialNumber) as exc:
            decode("505M6000102406A")
        assert exc.value.position == 12


class TestParseLawId:
    """失敗時に None を返すラッパー"""

    def test_valid(self):
        assert parse_law_id("345AC0000000089") == LawId(Wareki(Era.SHOWA, 45), Act(Legislator.CABINET, 89))

    def test_invalid_returns_none(self):
        assert parse_law_id("bad") is None

    def test_invalid_is_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="jplawid.law_id"):
            parse_law_id("505XX0000000060")
        assert "law_type" in caplog.text


class TestLawIdConstruction:
    """LawId の型チェック"""

    def test_rejects_base_law_type(self):
        from jplawid import LawType
        with pytest.raises(TypeError):
            LawId(Wareki(Era.REIWA, 1), LawType())

    def test_rejects_non_wareki(self):
        with pytest.raises(TypeError):
            LawId((Era.REIWA, 1), Constitution())

    def test_is_immutable(self):
        law_id = decode("345AC0000000089")
        with pytest.raises(AttributeError):
            law_id.wareki = Wareki(Era.REIWA, 1)
