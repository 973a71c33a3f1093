"""
法令IDの固定長フォーマット定義

e-Gov 法令ID命名規約に基づくフィールド幅・位置の定数。
"""

# 法令ID命名規約（府省令のビット割当は9ページ）
NAMING_CONVENTION_URL = "https://laws.e-gov.go.jp/file/LawIdNamingConvention.pdf"

# 法令IDの全長
LAW_ID_LENGTH = 15

# [元号:1][年:2][種別以降:12]
ERA_POS = 0
YEAR_POS = 1
YEAR_WIDTH = 2
LAW_TYPE_POS = 3
LAW_TYPE_WIDTH = LAW_ID_LENGTH - LAW_TYPE_POS

# 種別部分の末尾にある番号（号数）
SERIAL_WIDTH = 3

# 種別コードの後ろに続くフラグ欄（法律・政令など）
FLAG_WIDTH = 7

# 府省令のビット欄（16進7桁 = 28ビット）
MINISTRY_FIELD_WIDTH = 7
MINISTRY_SLOT_COUNT = MINISTRY_FIELD_WIDTH * 4

# 機関の規則の機関コード
INSTITUTION_WIDTH = 8
