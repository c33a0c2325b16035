"""Table Definitions.

Market 도메인의 SQLAlchemy Table 정의.
ORM 매핑 없이 순수 테이블 스키마만 정의합니다.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    Text,
    UniqueConstraint,
    and_,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from apps.market.infrastructure.persistence_postgres.registry import mapper_registry

# market.accounts 테이블
accounts_table = Table(
    "accounts",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("email", String(320), nullable=False, unique=True),
    Column("password_hash", String(128), nullable=False),
    Column("first_name", String(120), nullable=True),
    Column("last_name", String(120), nullable=True),
    Column("created_at", DateTime(timezone=True), server_default=func.now()),
)

# market.characters 테이블 (활성 캐릭터)
characters_table = Table(
    "characters",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("user_id", UUID(as_uuid=True), nullable=False, index=True),
    Column("name", String(64), nullable=False),
    Column("race", String(32), nullable=False),
    Column("guild", String(32), nullable=False),
    Column("branch", String(64), nullable=True, index=True),
    Column("guild_rank", String(32), nullable=False, server_default="recruit"),
    Column("social_rank", Integer, nullable=False, server_default="0"),
    Column("crowns", Integer, nullable=False, server_default="0"),
    Column("pennies", Integer, nullable=False, server_default="0"),
    Column("created_at", DateTime(timezone=True), server_default=func.now()),
    Column("retired_at", DateTime(timezone=True), nullable=True),
    Column("died_at", DateTime(timezone=True), nullable=True),
    CheckConstraint("crowns >= 0", name="ck_characters_crowns_non_negative"),
    CheckConstraint("pennies >= 0 AND pennies < 12", name="ck_characters_pennies_range"),
)

# 사용자당 활성 캐릭터 1개
Index(
    "uq_characters_active_user",
    characters_table.c.user_id,
    unique=True,
    postgresql_where=and_(
        characters_table.c.retired_at.is_(None),
        characters_table.c.died_at.is_(None),
    ),
)

# market.character_permits 테이블
character_permits_table = Table(
    "character_permits",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "character_id",
        UUID(as_uuid=True),
        ForeignKey("market.characters.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("permit_type", String(32), nullable=False),
    Column("created_at", DateTime(timezone=True), server_default=func.now()),
    UniqueConstraint("character_id", "permit_type", name="uq_character_permit_type"),
)

# market.character_items 테이블
character_items_table = Table(
    "character_items",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "character_id",
        UUID(as_uuid=True),
        ForeignKey("market.characters.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("item_name", String(120), nullable=False),
    Column("quantity", Integer, nullable=False, server_default="1"),
    Column("crafter_user_id", UUID(as_uuid=True), nullable=True),
    Column("acquired_at", DateTime(timezone=True), server_default=func.now()),
    CheckConstraint("quantity > 0", name="ck_character_items_quantity_positive"),
)

# market.marketplace_items 테이블
marketplace_items_table = Table(
    "marketplace_items",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(120), nullable=False, index=True),
    Column("description", Text, nullable=True),
    Column("crowns", Integer, nullable=False),
    Column("pennies", Integer, nullable=False, server_default="0"),
    Column("category", String(32), nullable=False, server_default="misc", index=True),
    Column("quantity", Integer, nullable=False, server_default="1"),
    Column("seller_user_id", UUID(as_uuid=True), nullable=True, index=True),
    # FK 없음: 판매 캐릭터가 아카이브된 뒤에도 ID 유지
    Column("seller_character_id", UUID(as_uuid=True), nullable=True, index=True),
    Column("crafter_user_id", UUID(as_uuid=True), nullable=True),
    Column("required_permit", String(32), nullable=True),
    Column("listed_at", DateTime(timezone=True), server_default=func.now(), index=True),
    CheckConstraint("quantity >= 0", name="ck_marketplace_items_quantity_non_negative"),
)


def _archive_columns(timestamp_column: str) -> list[Column]:
    return [
        Column("id", UUID(as_uuid=True), primary_key=True),
        Column("user_id", UUID(as_uuid=True), nullable=False, index=True),
        Column("name", String(64), nullable=False),
        Column("race", String(32), nullable=False),
        Column("guild", String(32), nullable=False),
        Column("branch", String(64), nullable=True),
        Column("guild_rank", String(32), nullable=False),
        Column("social_rank", Integer, nullable=False),
        Column("crowns", Integer, nullable=False),
        Column("pennies", Integer, nullable=False),
        Column("created_at", DateTime(timezone=True), nullable=True),
        Column(timestamp_column, DateTime(timezone=True), nullable=False, index=True),
    ]


# market.retired_characters 테이블
retired_characters_table = Table(
    "retired_characters",
    mapper_registry.metadata,
    *_archive_columns("retired_at"),
)

# market.dead_characters 테이블
dead_characters_table = Table(
    "dead_characters",
    mapper_registry.metadata,
    *_archive_columns("died_at"),
)
