from jp_prefecture.prefectures import (
    AdministrativeClass,
    IndexInfo,
    InvalidPrefectureCode,
    InvalidPrefectureName,
    LookupResult,
    Prefecture,
    PrefectureConfig,
    PrefectureLookupError,
    PrefectureNames,
    PrefectureNotFoundError,
    PrefectureResolver,
    Script,
    ascii_lower,
    clear_index,
    find,
    find_by_code,
    find_by_english,
    find_by_hiragana,
    find_by_katakana,
    find_by_kanji,
    get_index_info,
)
from jp_prefecture.prefectures_data import TableCorruptionError, derive_short_name

__version__ = "1.0.0"

__all__ = [
    "AdministrativeClass",
    "IndexInfo",
    "InvalidPrefectureCode",
    "InvalidPrefectureName",
    "LookupResult",
    "Prefecture",
    "PrefectureConfig",
    "PrefectureLookupError",
    "PrefectureNames",
    "PrefectureNotFoundError",
    "PrefectureResolver",
    "Script",
    "TableCorruptionError",
    "ascii_lower",
    "clear_index",
    "derive_short_name",
    "find",
    "find_by_code",
    "find_by_english",
    "find_by_hiragana",
    "find_by_katakana",
    "find_by_kanji",
    "get_index_info",
]
