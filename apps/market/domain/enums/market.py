"""Market Domain Enums."""

from enum import Enum


class Race(str, Enum):
    """캐릭터 종족."""

    HUMAN = "human"
    ELF = "elf"
    HALF_ELF = "half elf"
    DWARF = "dwarf"
    HALFLING = "halfling"


class Guild(str, Enum):
    """캐릭터 길드."""

    MERCENARY = "mercenary"
    SCOUT = "scout"
    BLACKSMITH = "blacksmith"


class Branch(str, Enum):
    """캐릭터 소속 지부 (마을)."""

    PORTSMOUTH = "Portsmouth"
    GUILDFORD = "Guildford"


class PermitType(str, Enum):
    """퍼밋 타입 (구매/접근 권한 태그)."""

    WEAPON = "weapon"
    ARMOUR = "armour"
    BLACKSMITH = "blacksmith"


class ItemCategory(str, Enum):
    """마켓 아이템 카테고리."""

    WEAPONS = "weapons"
    ARMOUR = "armour"
    MISC = "misc"
    CONSUMABLE = "consumable"
