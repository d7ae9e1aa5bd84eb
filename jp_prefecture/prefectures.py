"""
Japanese Prefecture Lookup Module

This module models the 47 prefectures of Japan and converts losslessly between their
JIS X 0401 code and every spelling of their name.

## Overview

Each prefecture is a member of the closed `Prefecture` enum whose value is its code
(1 = Hokkaido ... 47 = Okinawa). Every member carries seven names:

| Field            | Tokyo          | Osaka        | Hokkaido       |
|------------------|----------------|--------------|----------------|
| `kanji`          | 東京都          | 大阪府        | 北海道          |
| `kanji_short`    | 東京            | 大阪          | 北海道          |
| `hiragana`       | とうきょうと     | おおさかふ     | ほっかいどう     |
| `hiragana_short` | とうきょう       | おおさか       | ほっかいどう     |
| `katakana`       | トウキョウト     | オオサカフ     | ホッカイドウ     |
| `katakana_short` | トウキョウ       | オオサカ       | ホッカイドウ     |
| `english`        | Tokyo          | Osaka        | Hokkaido       |

Short names are derived by stripping the suffix of the prefecture's administrative class
(都/府/県 and their kana readings). Hokkaido has no strippable suffix, so its short names
equal its full names.

## Architecture

- **Prefecture**: closed enum, the entity catalog
- **PrefectureNames**: immutable name record, built once per prefecture at import
- **ReverseIndexBuilder**: builds the immutable name -> prefecture indices
- **PrefectureResolver**: answers lookups against a `ReverseIndex`
- **PrefectureConfig**: immutable configuration (case folding, lookup logging)

## Usage Examples

```python
from jp_prefecture import Prefecture, find, find_by_code, find_by_kanji

find_by_kanji("東京都").prefecture          # Prefecture.TOKYO
find_by_code(13).unwrap().kanji_short     # "東京"
find("TOKYO").prefecture                  # Prefecture.TOKYO
find("とうきょう").prefecture               # Prefecture.TOKYO

result = find_by_kanji("東京県")
result.success                            # False
result.error                              # InvalidPrefectureName(name='東京県')
result.error_message                      # "Invalid prefecture name: 東京県"
```

## Error Handling

Lookups never raise for ordinary misses. They return a `LookupResult` whose `error` is
`InvalidPrefectureCode` or `InvalidPrefectureName`, carrying the offending input. Call
`unwrap()` to get a `PrefectureNotFoundError` instead. `TableCorruptionError` is raised
only when the static table shipped with this package is defective.

## Thread Safety

All data is immutable after import. The module-level resolver is created lazily under a
lock, so it is built exactly once even when first used from several threads.
"""

from __future__ import annotations
import logging
import string
import threading
import time
from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from jp_prefecture.prefectures_data import (
    PREFECTURE_ROWS,
    PREFECTURE_ROWS_BY_CODE,
    SUFFIX_RULES,
    TableCorruptionError,
    administrative_class_of,
    short_names_for,
)


# ════════════════════════════════════════════════════════════════════════════════
# ENTITY CATALOG
# ════════════════════════════════════════════════════════════════════════════════


class AdministrativeClass(Enum):
    """Suffix convention of a prefecture's formal name."""

    DO = "do"  # 北海道, no strippable suffix
    TO = "to"  # 東京都
    FU = "fu"  # 京都府, 大阪府
    KEN = "ken"  # every other prefecture

    @property
    def suffixes(self) -> Tuple[str, str, str]:
        """(kanji, hiragana, katakana) suffix stripped to form short names."""
        return SUFFIX_RULES[self.value]


class Prefecture(Enum):
    """The 47 prefectures of Japan, valued by JIS X 0401 code."""

    HOKKAIDO = 1
    AOMORI = 2
    IWATE = 3
    MIYAGI = 4
    AKITA = 5
    YAMAGATA = 6
    FUKUSHIMA = 7
    IBARAKI = 8
    TOCHIGI = 9
    GUNMA = 10
    SAITAMA = 11
    CHIBA = 12
    TOKYO = 13
    KANAGAWA = 14
    NIIGATA = 15
    TOYAMA = 16
    ISHIKAWA = 17
    FUKUI = 18
    YAMANASHI = 19
    NAGANO = 20
    GIFU = 21
    SHIZUOKA = 22
    AICHI = 23
    MIE = 24
    SHIGA = 25
    KYOTO = 26
    OSAKA = 27
    HYOGO = 28
    NARA = 29
    WAKAYAMA = 30
    TOTTORI = 31
    SHIMANE = 32
    OKAYAMA = 33
    HIROSHIMA = 34
    YAMAGUCHI = 35
    TOKUSHIMA = 36
    KAGAWA = 37
    EHIME = 38
    KOCHI = 39
    FUKUOKA = 40
    SAGA = 41
    NAGASAKI = 42
    KUMAMOTO = 43
    OITA = 44
    MIYAZAKI = 45
    KAGOSHIMA = 46
    OKINAWA = 47

    @property
    def code(self) -> int:
        return self.value

    @property
    def jis_x_0401_code(self) -> int:
        return self.value

    @property
    def administrative_class(self) -> AdministrativeClass:
        return AdministrativeClass(administrative_class_of(self.value))

    @property
    def names(self) -> PrefectureNames:
        record = _NAME_RECORDS.get(self)
        if record is None:
            logging.error(f"No name record for {self!r}")
            raise TableCorruptionError(f"No name record for prefecture code {self.value}")
        return record

    @property
    def kanji(self) -> str:
        return self.names.kanji

    @property
    def kanji_short(self) -> str:
        return self.names.kanji_short

    @property
    def hiragana(self) -> str:
        return self.names.hiragana

    @property
    def hiragana_short(self) -> str:
        return self.names.hiragana_short

    @property
    def katakana(self) -> str:
        return self.names.katakana

    @property
    def katakana_short(self) -> str:
        return self.names.katakana_short

    @property
    def english(self) -> str:
        """Display form of the english name, e.g. "Tokyo"."""
        return self.names.english.capitalize()


# ════════════════════════════════════════════════════════════════════════════════
# NAME TABLE
# ════════════════════════════════════════════════════════════════════════════════


class Script(Enum):
    """Writing systems a prefecture name can be looked up in."""

    KANJI = "kanji"
    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    ENGLISH = "english"


@dataclass(frozen=True)
class PrefectureNames:
    """Immutable name record of one prefecture; `english` is the lowercase canonical form."""

    kanji: str
    kanji_short: str
    hiragana: str
    hiragana_short: str
    katakana: str
    katakana_short: str
    english: str

    @classmethod
    def from_row(cls, row: Tuple[int, str, str, str, str]) -> "PrefectureNames":
        _, kanji, hiragana, katakana, english = row
        kanji_short, hiragana_short, katakana_short = short_names_for(row)
        return cls(
            kanji=kanji,
            kanji_short=kanji_short,
            hiragana=hiragana,
            hiragana_short=hiragana_short,
            katakana=katakana,
            katakana_short=katakana_short,
            english=english,
        )

    def for_script(self, script: Script) -> Tuple[str, ...]:
        """Names spelled in one script: (full, short) for kana/kanji, (english,) for english."""
        if script is Script.KANJI:
            return (self.kanji, self.kanji_short)
        if script is Script.HIRAGANA:
            return (self.hiragana, self.hiragana_short)
        if script is Script.KATAKANA:
            return (self.katakana, self.katakana_short)
        return (self.english,)

    def all_names(self) -> Tuple[str, ...]:
        return tuple(name for script in Script for name in self.for_script(script))


def _build_name_records() -> Mapping[Prefecture, PrefectureNames]:
    records = {}
    for prefecture in Prefecture:
        row = PREFECTURE_ROWS_BY_CODE.get(prefecture.value)
        if row is None:
            logging.error(f"Prefecture table has no row for {prefecture!r}")
            raise TableCorruptionError(f"Prefecture table has no row for code {prefecture.value}")
        records[prefecture] = PrefectureNames.from_row(row)
    if len(records) != len(PREFECTURE_ROWS):
        raise TableCorruptionError(f"Expected {len(PREFECTURE_ROWS)} name records, built {len(records)}")
    return MappingProxyType(records)


_NAME_RECORDS: Mapping[Prefecture, PrefectureNames] = _build_name_records()


# ════════════════════════════════════════════════════════════════════════════════
# RESULT TYPES
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class PrefectureLookupError:
    """Base of the lookup failure values. These are returned, not raised."""

    @property
    def message(self) -> str:
        return "Prefecture lookup failed"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class InvalidPrefectureCode(PrefectureLookupError):
    """The code is not one of 1..47 (non-int input is carried as given)."""

    code: Any

    @property
    def message(self) -> str:
        return f"Invalid prefecture code: {self.code}"


@dataclass(frozen=True)
class InvalidPrefectureName(PrefectureLookupError):
    """No prefecture has this name in the searched scripts."""

    name: str

    @property
    def message(self) -> str:
        return f"Invalid prefecture name: {self.name}"


class PrefectureNotFoundError(LookupError):
    """Raised by `LookupResult.unwrap()` on a failed lookup."""

    def __init__(self, error: PrefectureLookupError):
        super().__init__(error.message)
        self.error = error


@dataclass(frozen=True)
class LookupResult:
    """Result of a prefecture lookup - Either-like structure."""

    success: bool
    prefecture: Optional[Prefecture] = None
    error: Optional[PrefectureLookupError] = None

    @classmethod
    def found(cls, prefecture: Prefecture) -> "LookupResult":
        return cls(success=True, prefecture=prefecture, error=None)

    @classmethod
    def failure(cls, error: PrefectureLookupError) -> "LookupResult":
        return cls(success=False, prefecture=None, error=error)

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error is not None else None

    def map_or(self, f: Callable[[Prefecture], Any], default: Any = None) -> Any:
        """Apply `f` to the prefecture on success, return `default` on failure."""
        if self.success:
            return f(self.prefecture)
        return default

    def unwrap(self) -> Prefecture:
        if not self.success or self.prefecture is None:
            raise PrefectureNotFoundError(self.error or InvalidPrefectureName(""))
        return self.prefecture

    def unwrap_or(self, default: Optional[Prefecture] = None) -> Optional[Prefecture]:
        return self.prefecture if self.success else default

    def __bool__(self) -> bool:
        return self.success


@dataclass(frozen=True)
class IndexInfo:
    """Immutable reverse-index information structure."""

    code_keys: int
    kanji_keys: int
    hiragana_keys: int
    katakana_keys: int
    english_keys: int
    universal_keys: int
    build_time: float


# ════════════════════════════════════════════════════════════════════════════════
# IMMUTABLE CONFIGURATION
# ════════════════════════════════════════════════════════════════════════════════


_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(text: str) -> str:
    """Lowercase A-Z only; non-ASCII look-alikes such as the Kelvin sign are left untouched."""
    return text.translate(_ASCII_LOWER)


@dataclass(frozen=True)
class PrefectureConfig:
    """Immutable resolver configuration."""

    # Case folding applied to english names and to queries of find()/find_by_english()
    fold: Callable[[str], str]

    # Emit a debug log record for every failed lookup
    log_failed_lookups: bool

    @classmethod
    def create_default(cls) -> "PrefectureConfig":
        return cls(fold=ascii_lower, log_failed_lookups=True)

    def with_fold(self, fold: Callable[[str], str]) -> "PrefectureConfig":
        """Immutable update method for the case-folding function."""
        return replace(self, fold=fold)

    def with_failed_lookup_logging(self, enabled: bool) -> "PrefectureConfig":
        return replace(self, log_failed_lookups=enabled)


# ════════════════════════════════════════════════════════════════════════════════
# REVERSE INDEX
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class ReverseIndex:
    """Immutable name -> prefecture maps, one per script plus the universal map used by find()."""

    by_code: Mapping[int, Prefecture]
    by_script: Mapping[Script, Mapping[str, Prefecture]]
    universal: Mapping[str, Prefecture]
    build_time: float

    def info(self) -> IndexInfo:
        return IndexInfo(
            code_keys=len(self.by_code),
            kanji_keys=len(self.by_script[Script.KANJI]),
            hiragana_keys=len(self.by_script[Script.HIRAGANA]),
            katakana_keys=len(self.by_script[Script.KATAKANA]),
            english_keys=len(self.by_script[Script.ENGLISH]),
            universal_keys=len(self.universal),
            build_time=self.build_time,
        )


class ReverseIndexBuilder:
    """Builds a ReverseIndex from the name records."""

    def __init__(self, config: PrefectureConfig, records: Optional[Mapping[Prefecture, PrefectureNames]] = None):
        self._config = config
        self._records = records if records is not None else _NAME_RECORDS

    def build(self) -> ReverseIndex:
        start_time = time.perf_counter()

        by_code = {}
        by_script: Dict[Script, Dict[str, Prefecture]] = {script: {} for script in Script}
        universal: Dict[str, Prefecture] = {}

        for prefecture in Prefecture:
            record = self._records.get(prefecture)
            if record is None:
                logging.error(f"Cannot index {prefecture!r}: no name record")
                raise TableCorruptionError(f"No name record for prefecture code {prefecture.value}")

            by_code[prefecture.code] = prefecture
            for script in Script:
                for name in record.for_script(script):
                    key = self._config.fold(name) if script is Script.ENGLISH else name
                    self._insert(by_script[script], key, prefecture)
                    self._insert(universal, self._config.fold(name), prefecture)

        build_time = time.perf_counter() - start_time
        logging.debug(
            f"Built prefecture index: {len(by_code)} codes, {len(universal)} names in {build_time * 1000:.2f}ms"
        )

        return ReverseIndex(
            by_code=MappingProxyType(by_code),
            by_script=MappingProxyType({script: MappingProxyType(index) for script, index in by_script.items()}),
            universal=MappingProxyType(universal),
            build_time=build_time,
        )

    @staticmethod
    def _insert(index: Dict[str, Prefecture], key: str, prefecture: Prefecture) -> None:
        existing = index.get(key)
        if existing is not None and existing is not prefecture:
            logging.error(f"Name '{key}' resolves to both {existing!r} and {prefecture!r}")
            raise TableCorruptionError(f"Ambiguous prefecture name '{key}'")
        index[key] = prefecture


# ════════════════════════════════════════════════════════════════════════════════
# RESOLVER
# ════════════════════════════════════════════════════════════════════════════════


class PrefectureResolver:
    """Resolves a code or a name in any script back to its Prefecture."""

    def __init__(self, config: Optional[PrefectureConfig] = None):
        self._config = config or PrefectureConfig.create_default()
        self._index = ReverseIndexBuilder(self._config).build()

    @property
    def config(self) -> PrefectureConfig:
        return self._config

    def get_index_info(self) -> IndexInfo:
        return self._index.info()

    def find_by_code(self, code: int) -> LookupResult:
        # bool is an int subclass; True must not resolve to Hokkaido
        if isinstance(code, bool) or not isinstance(code, int):
            return self._failure(InvalidPrefectureCode(code))
        prefecture = self._index.by_code.get(code)
        if prefecture is None:
            return self._failure(InvalidPrefectureCode(code))
        return LookupResult.found(prefecture)

    def find_by_kanji(self, kanji: str) -> LookupResult:
        """Exact match against full and short kanji names."""
        return self._find_in_script(Script.KANJI, kanji)

    def find_by_hiragana(self, hiragana: str) -> LookupResult:
        """Exact match against full and short hiragana names."""
        return self._find_in_script(Script.HIRAGANA, hiragana)

    def find_by_katakana(self, katakana: str) -> LookupResult:
        """Exact match against full and short katakana names."""
        return self._find_in_script(Script.KATAKANA, katakana)

    def find_by_english(self, english: str) -> LookupResult:
        """Case-insensitive match against english names."""
        return self._find_in_script(Script.ENGLISH, english)

    def find(self, query: str) -> LookupResult:
        """
        Universal lookup: matches any of the seven names of a prefecture.

        The query is case folded, which only affects english names; every name in
        the table is unique after folding, so at most one prefecture can match.
        """
        if not isinstance(query, str):
            return self._failure(InvalidPrefectureName(str(query)))
        prefecture = self._index.universal.get(self._config.fold(query))
        if prefecture is None:
            return self._failure(InvalidPrefectureName(query))
        return LookupResult.found(prefecture)

    def _find_in_script(self, script: Script, name: str) -> LookupResult:
        if not isinstance(name, str):
            return self._failure(InvalidPrefectureName(str(name)))
        key = self._config.fold(name) if script is Script.ENGLISH else name
        prefecture = self._index.by_script[script].get(key)
        if prefecture is None:
            return self._failure(InvalidPrefectureName(name))
        return LookupResult.found(prefecture)

    def _failure(self, error: PrefectureLookupError) -> LookupResult:
        if self._config.log_failed_lookups:
            logging.debug(f"Prefecture lookup failed: {error.message}")
        return LookupResult.failure(error)


# ════════════════════════════════════════════════════════════════════════════════
# PERFORMANCE TEST
# ════════════════════════════════════════════════════════════════════════════════


def run_performance_test(iterations: int = 1000) -> Dict[str, float]:
    """Time every lookup function over every representation of every prefecture."""
    resolver = PrefectureResolver(PrefectureConfig.create_default().with_failed_lookup_logging(False))

    workloads: List[Tuple[str, Callable[[Any], LookupResult], List[Any]]] = [
        ("find_by_code", resolver.find_by_code, [p.code for p in Prefecture]),
        ("find_by_kanji", resolver.find_by_kanji, [n for p in Prefecture for n in p.names.for_script(Script.KANJI)]),
        (
            "find_by_hiragana",
            resolver.find_by_hiragana,
            [n for p in Prefecture for n in p.names.for_script(Script.HIRAGANA)],
        ),
        (
            "find_by_katakana",
            resolver.find_by_katakana,
            [n for p in Prefecture for n in p.names.for_script(Script.KATAKANA)],
        ),
        ("find_by_english", resolver.find_by_english, [p.english.upper() for p in Prefecture]),
        ("find", resolver.find, [n for p in Prefecture for n in p.names.all_names()] + ["none", "東京県"]),
    ]

    rates = {}
    for label, lookup, queries in workloads:
        start = time.perf_counter()
        for _ in range(iterations):
            for query in queries:
                lookup(query)
        elapsed = time.perf_counter() - start

        total = iterations * len(queries)
        rate = total / elapsed if elapsed > 0 else float("inf")
        rates[label] = rate
        print(f"{label}: {total} lookups in {elapsed:.3f}s ({rate:.0f} lookups/second)")

    return rates


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════

# Global resolver instance for module-level functions
_global_resolver: Optional[PrefectureResolver] = None
_global_resolver_lock = threading.Lock()


def _get_global_resolver() -> PrefectureResolver:
    """Get or create the global resolver instance."""
    global _global_resolver
    if _global_resolver is None:
        with _global_resolver_lock:
            if _global_resolver is None:
                _global_resolver = PrefectureResolver()
    return _global_resolver


def find_by_code(code: int) -> LookupResult:
    return _get_global_resolver().find_by_code(code)


def find_by_kanji(kanji: str) -> LookupResult:
    return _get_global_resolver().find_by_kanji(kanji)


def find_by_hiragana(hiragana: str) -> LookupResult:
    return _get_global_resolver().find_by_hiragana(hiragana)


def find_by_katakana(katakana: str) -> LookupResult:
    return _get_global_resolver().find_by_katakana(katakana)


def find_by_english(english: str) -> LookupResult:
    return _get_global_resolver().find_by_english(english)


def find(query: str) -> LookupResult:
    """
    Module-level convenience function resolving any name of a prefecture.

    Args:
        query: kanji, hiragana or katakana name (full or short) or english name in any case

    Returns:
        LookupResult holding the Prefecture, or an InvalidPrefectureName error
    """
    return _get_global_resolver().find(query)


def clear_index() -> None:
    """Drop the global resolver; the next lookup rebuilds it."""
    global _global_resolver
    with _global_resolver_lock:
        _global_resolver = None


def get_index_info() -> Dict[str, Union[int, float]]:
    """Get reverse-index information as a dictionary."""
    index_info = _get_global_resolver().get_index_info()
    return {
        "code_keys": index_info.code_keys,
        "kanji_keys": index_info.kanji_keys,
        "hiragana_keys": index_info.hiragana_keys,
        "katakana_keys": index_info.katakana_keys,
        "english_keys": index_info.english_keys,
        "universal_keys": index_info.universal_keys,
        "build_time": index_info.build_time,
    }


# CLI entry point
if __name__ == "__main__":
    run_performance_test()
