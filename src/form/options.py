"""Closed option enumerations for the recommendation form."""

from enum import Enum


class District(str, Enum):
    """Tokyo special wards usable as a location filter."""

    CHIYODA = "千代田区"
    CHUO = "中央区"
    MINATO = "港区"
    SHINJUKU = "新宿区"
    BUNKYO = "文京区"
    TAITO = "台東区"
    SUMIDA = "墨田区"
    KOTO = "江東区"
    SHINAGAWA = "品川区"
    MEGURO = "目黒区"
    OTA = "大田区"
    SETAGAYA = "世田谷区"
    SHIBUYA = "渋谷区"
    NAKANO = "中野区"
    SUGINAMI = "杉並区"
    TOSHIMA = "豊島区"
    KITA = "北区"
    ARAKAWA = "荒川区"
    ITABASHI = "板橋区"
    NERIMA = "練馬区"
    ADACHI = "足立区"
    KATSUSHIKA = "葛飾区"
    EDOGAWA = "江戸川区"


class RamenType(str, Enum):
    """Ramen styles usable as a style filter."""

    SHOYU = "醤油"
    SHIO = "塩"
    MISO = "味噌"
    TSUKEMEN = "つけ麺"
    JIRO = "二郎系"
    IEKEI = "家系"
    ABURA_SOBA = "油そば"
    TORI_PAITAN = "鶏白湯"


# Price select-box domains (yen)
MIN_PRICE_OPTIONS: tuple[int, ...] = tuple(range(500, 2000, 200))
MAX_PRICE_OPTIONS: tuple[int, ...] = tuple(range(800, 2001, 200))

DEFAULT_MIN_PRICE = 500
DEFAULT_MAX_PRICE = 2000


def parse_district(label: str) -> District:
    """Look up a district by its label.

    Args:
        label: Ward name, e.g. "渋谷区".

    Returns:
        The matching District.

    Raises:
        ValueError: If the label is not one of the 23 wards.
    """
    return District(label)


def parse_ramen_type(label: str) -> RamenType:
    """Look up a ramen type by its label.

    Raises:
        ValueError: If the label is not a known ramen type.
    """
    return RamenType(label)
