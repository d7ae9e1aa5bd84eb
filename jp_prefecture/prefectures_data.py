# ═════════════════════════════════════════════════════════════════════════════════
# PREFECTURE NAME TABLE
# ═════════════════════════════════════════════════════════════════════════════════
#
# One row per prefecture in JIS X 0401 order (north to south):
#   (code, kanji, hiragana, katakana, english)
#
# Only full names are stored. Short names are derived from the full name and the
# prefecture's administrative class (see SUFFIX_RULES), never stored separately.
# English names are stored lowercase; all comparisons fold case on both sides.
# ═════════════════════════════════════════════════════════════════════════════════

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple

import jaconv

PrefectureRow = Tuple[int, str, str, str, str]


class TableCorruptionError(RuntimeError):
    """The static prefecture table violates one of its invariants (a defect in this package, not caller input)."""


PREFECTURE_ROWS: Tuple[PrefectureRow, ...] = (
    # Hokkaido
    (1, "北海道", "ほっかいどう", "ホッカイドウ", "hokkaido"),
    # Tohoku
    (2, "青森県", "あおもりけん", "アオモリケン", "aomori"),
    (3, "岩手県", "いわてけん", "イワテケン", "iwate"),
    (4, "宮城県", "みやぎけん", "ミヤギケン", "miyagi"),
    (5, "秋田県", "あきたけん", "アキタケン", "akita"),
    (6, "山形県", "やまがたけん", "ヤマガタケン", "yamagata"),
    (7, "福島県", "ふくしまけん", "フクシマケン", "fukushima"),
    # Kanto
    (8, "茨城県", "いばらきけん", "イバラキケン", "ibaraki"),
    (9, "栃木県", "とちぎけん", "トチギケン", "tochigi"),
    (10, "群馬県", "ぐんまけん", "グンマケン", "gunma"),
    (11, "埼玉県", "さいたまけん", "サイタマケン", "saitama"),
    (12, "千葉県", "ちばけん", "チバケン", "chiba"),
    (13, "東京都", "とうきょうと", "トウキョウト", "tokyo"),
    (14, "神奈川県", "かながわけん", "カナガワケン", "kanagawa"),
    # Chubu
    (15, "新潟県", "にいがたけん", "ニイガタケン", "niigata"),
    (16, "富山県", "とやまけん", "トヤマケン", "toyama"),
    (17, "石川県", "いしかわけん", "イシカワケン", "ishikawa"),
    (18, "福井県", "ふくいけん", "フクイケン", "fukui"),
    (19, "山梨県", "やまなしけん", "ヤマナシケン", "yamanashi"),
    (20, "長野県", "ながのけん", "ナガノケン", "nagano"),
    (21, "岐阜県", "ぎふけん", "ギフケン", "gifu"),
    (22, "静岡県", "しずおかけん", "シズオカケン", "shizuoka"),
    (23, "愛知県", "あいちけん", "アイチケン", "aichi"),
    # Kinki
    (24, "三重県", "みえけん", "ミエケン", "mie"),
    (25, "滋賀県", "しがけん", "シガケン", "shiga"),
    (26, "京都府", "きょうとふ", "キョウトフ", "kyoto"),
    (27, "大阪府", "おおさかふ", "オオサカフ", "osaka"),
    (28, "兵庫県", "ひょうごけん", "ヒョウゴケン", "hyogo"),
    (29, "奈良県", "ならけん", "ナラケン", "nara"),
    (30, "和歌山県", "わかやまけん", "ワカヤマケン", "wakayama"),
    # Chugoku
    (31, "鳥取県", "とっとりけん", "トットリケン", "tottori"),
    (32, "島根県", "しまねけん", "シマネケン", "shimane"),
    (33, "岡山県", "おかやまけん", "オカヤマケン", "okayama"),
    (34, "広島県", "ひろしまけん", "ヒロシマケン", "hiroshima"),
    (35, "山口県", "やまぐちけん", "ヤマグチケン", "yamaguchi"),
    # Shikoku
    (36, "徳島県", "とくしまけん", "トクシマケン", "tokushima"),
    (37, "香川県", "かがわけん", "カガワケン", "kagawa"),
    (38, "愛媛県", "えひめけん", "エヒメケン", "ehime"),
    (39, "高知県", "こうちけん", "コウチケン", "kochi"),
    # Kyushu / Okinawa
    (40, "福岡県", "ふくおかけん", "フクオカケン", "fukuoka"),
    (41, "佐賀県", "さがけん", "サガケン", "saga"),
    (42, "長崎県", "ながさきけん", "ナガサキケン", "nagasaki"),
    (43, "熊本県", "くまもとけん", "クマモトケン", "kumamoto"),
    (44, "大分県", "おおいたけん", "オオイタケン", "oita"),
    (45, "宮崎県", "みやざきけん", "ミヤザキケン", "miyazaki"),
    (46, "鹿児島県", "かごしまけん", "カゴシマケン", "kagoshima"),
    (47, "沖縄県", "おきなわけん", "オキナワケン", "okinawa"),
)

PREFECTURE_COUNT = 47

# ═════════════════════════════════════════════════════════════════════════════════
# ADMINISTRATIVE CLASSES AND SUFFIX RULES
# ═════════════════════════════════════════════════════════════════════════════════
#
# Assigned by code, not by inspecting the trailing characters of a name.
#   do  - Hokkaido: "道" is part of the name itself, nothing is stripped
#   to  - the metropolis (Tokyo)
#   fu  - the two urban prefectures (Kyoto, Osaka)
#   ken - every other prefecture
# ═════════════════════════════════════════════════════════════════════════════════

DEFAULT_ADMINISTRATIVE_CLASS = "ken"

ADMINISTRATIVE_CLASS_BY_CODE = {
    1: "do",  # 北海道
    13: "to",  # 東京都
    26: "fu",  # 京都府
    27: "fu",  # 大阪府
}

# Format: administrative_class: (kanji_suffix, hiragana_suffix, katakana_suffix)
SUFFIX_RULES = {
    "do": ("", "", ""),
    "to": ("都", "と", "ト"),
    "fu": ("府", "ふ", "フ"),
    "ken": ("県", "けん", "ケン"),
}

# Expected number of prefectures per class: 1 + 1 + 2 + 43 == 47
EXPECTED_CLASS_SIZES = {"do": 1, "to": 1, "fu": 2, "ken": 43}


def administrative_class_of(code: int) -> str:
    return ADMINISTRATIVE_CLASS_BY_CODE.get(code, DEFAULT_ADMINISTRATIVE_CLASS)


def derive_short_name(full_name: str, suffix: str) -> str:
    """Strip the administrative-class suffix from a full name; an empty suffix leaves it untouched."""
    if not suffix:
        return full_name
    if not full_name.endswith(suffix) or len(full_name) <= len(suffix):
        raise TableCorruptionError(f"Name '{full_name}' does not end with its class suffix '{suffix}'")
    return full_name[: -len(suffix)]


def short_names_for(row: PrefectureRow) -> Tuple[str, str, str]:
    """Derive (kanji_short, hiragana_short, katakana_short) for a table row."""
    code, kanji, hiragana, katakana, _ = row
    kanji_suffix, hiragana_suffix, katakana_suffix = SUFFIX_RULES[administrative_class_of(code)]
    return (
        derive_short_name(kanji, kanji_suffix),
        derive_short_name(hiragana, hiragana_suffix),
        derive_short_name(katakana, katakana_suffix),
    )


def all_names_for(row: PrefectureRow) -> Tuple[str, ...]:
    """Every literal name of a row: three full names, three short names and the english name."""
    _, kanji, hiragana, katakana, english = row
    return (kanji, hiragana, katakana) + short_names_for(row) + (english,)


# ═════════════════════════════════════════════════════════════════════════════════
# VALIDATION AND IMMUTABLE CREATION
# ═════════════════════════════════════════════════════════════════════════════════


def _corrupt(message: str) -> TableCorruptionError:
    logging.error(f"Prefecture table is corrupt: {message}")
    return TableCorruptionError(message)


def _assert_contiguous_codes(rows: Iterable[PrefectureRow]) -> None:
    """Validate that codes are exactly 1..47, each appearing once, in table order."""
    codes = [row[0] for row in rows]
    expected = list(range(1, PREFECTURE_COUNT + 1))
    if codes != expected:
        missing = sorted(set(expected) - set(codes))
        extra = sorted(set(codes) - set(expected))
        raise _corrupt(f"Prefecture codes are not contiguous 1..{PREFECTURE_COUNT} (missing={missing}, extra={extra})")


def _assert_class_sizes(rows: Iterable[PrefectureRow]) -> None:
    """Validate the 1/1/2/43 split between administrative classes."""
    sizes: Dict[str, int] = {}
    for row in rows:
        admin_class = administrative_class_of(row[0])
        if admin_class not in SUFFIX_RULES:
            raise _corrupt(f"Unknown administrative class '{admin_class}' for code {row[0]}")
        sizes[admin_class] = sizes.get(admin_class, 0) + 1
    if sizes != EXPECTED_CLASS_SIZES:
        raise _corrupt(f"Unexpected administrative class sizes: {sizes}")


def _assert_kana_consistency(rows: Iterable[PrefectureRow]) -> None:
    """Validate that each katakana name is the katakana spelling of its hiragana name."""
    bad = []
    for code, kanji, hiragana, katakana, _ in rows:
        expected = jaconv.hira2kata(hiragana)
        if katakana != expected:
            bad.append(f"{code} {kanji}: katakana='{katakana}' vs hiragana->katakana='{expected}'")
    if bad:
        raise _corrupt(f"Inconsistent kana readings found: {bad}")


def _assert_english_names(rows: Iterable[PrefectureRow]) -> None:
    """English names are stored canonically as lowercase ASCII letters."""
    for code, _, _, _, english in rows:
        if not (english.isascii() and english.isalpha() and english == english.lower()):
            raise _corrupt(f"English name for code {code} is not lowercase ASCII: '{english}'")


def _assert_globally_unique_names(rows: Iterable[PrefectureRow]) -> None:
    """Validate that no literal name (any script, full or short) belongs to two prefectures."""
    owner: Dict[str, int] = {}
    for row in rows:
        code = row[0]
        for name in set(all_names_for(row)):
            key = name.lower()
            if key in owner and owner[key] != code:
                raise _corrupt(f"Name '{name}' is shared by codes {owner[key]} and {code}")
            owner[key] = code


def validate_table(rows: Tuple[PrefectureRow, ...]) -> None:
    """Run every table invariant check; raises TableCorruptionError on the first violation."""
    _assert_contiguous_codes(rows)
    _assert_class_sizes(rows)
    _assert_kana_consistency(rows)
    _assert_english_names(rows)
    # Also checks that every full name carries its class suffix, via derive_short_name
    _assert_globally_unique_names(rows)


validate_table(PREFECTURE_ROWS)

# Create immutable versions

ADMINISTRATIVE_CLASS_BY_CODE = MappingProxyType(ADMINISTRATIVE_CLASS_BY_CODE)
SUFFIX_RULES = MappingProxyType(SUFFIX_RULES)
EXPECTED_CLASS_SIZES = MappingProxyType(EXPECTED_CLASS_SIZES)

PREFECTURE_ROWS_BY_CODE: Mapping[int, PrefectureRow] = MappingProxyType({row[0]: row for row in PREFECTURE_ROWS})
