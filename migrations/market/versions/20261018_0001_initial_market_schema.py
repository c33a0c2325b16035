"""Initial market schema.

Revision ID: 0001
Revises: None
Create Date: 2026-10-18

Market Domain Migration
Schema: market.*
"""

from typing import Sequence

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _archive_table(name: str, timestamp_column: str) -> None:
    op.execute(f"""
        CREATE TABLE IF NOT EXISTS market.{name} (
            id UUID PRIMARY KEY,
            user_id UUID NOT NULL,
            name VARCHAR(64) NOT NULL,
            race VARCHAR(32) NOT NULL,
            guild VARCHAR(32) NOT NULL,
            branch VARCHAR(64),
            guild_rank VARCHAR(32) NOT NULL,
            social_rank INTEGER NOT NULL,
            crowns INTEGER NOT NULL,
            pennies INTEGER NOT NULL,
            created_at TIMESTAMPTZ,
            {timestamp_column} TIMESTAMPTZ NOT NULL
        )
    """)
    op.execute(f"CREATE INDEX IF NOT EXISTS ix_market_{name}_user_id ON market.{name}(user_id)")
    op.execute(
        f"CREATE INDEX IF NOT EXISTS ix_market_{name}_{timestamp_column} "
        f"ON market.{name}({timestamp_column})"
    )


def upgrade() -> None:
    """Create market schema tables."""
    op.execute("CREATE SCHEMA IF NOT EXISTS market")

    # accounts 테이블
    op.execute("""
        CREATE TABLE IF NOT EXISTS market.accounts (
            id UUID PRIMARY KEY,
            email VARCHAR(320) NOT NULL UNIQUE,
            password_hash VARCHAR(128) NOT NULL,
            first_name VARCHAR(120),
            last_name VARCHAR(120),
            created_at TIMESTAMPTZ DEFAULT NOW()
        )
    """)

    # characters 테이블 (활성 캐릭터)
    op.execute("""
        CREATE TABLE IF NOT EXISTS market.characters (
            id UUID PRIMARY KEY,
            user_id UUID NOT NULL,
            name VARCHAR(64) NOT NULL,
            race VARCHAR(32) NOT NULL,
            guild VARCHAR(32) NOT NULL,
            branch VARCHAR(64),
            guild_rank VARCHAR(32) NOT NULL DEFAULT 'recruit',
            social_rank INTEGER NOT NULL DEFAULT 0,
            crowns INTEGER NOT NULL DEFAULT 0,
            pennies INTEGER NOT NULL DEFAULT 0,
            created_at TIMESTAMPTZ DEFAULT NOW(),
            retired_at TIMESTAMPTZ,
            died_at TIMESTAMPTZ,
            CONSTRAINT ck_characters_crowns_non_negative CHECK (crowns >= 0),
            CONSTRAINT ck_characters_pennies_range CHECK (pennies >= 0 AND pennies < 12)
        )
    """)
    op.execute(
        "CREATE INDEX IF NOT EXISTS ix_market_characters_user_id ON market.characters(user_id)"
    )
    op.execute(
        "CREATE INDEX IF NOT EXISTS ix_market_characters_branch ON market.characters(branch)"
    )

    # 사용자당 활성 캐릭터 1개
    op.execute("""
        CREATE UNIQUE INDEX IF NOT EXISTS uq_characters_active_user
        ON market.characters(user_id)
        WHERE retired_at IS NULL AND died_at IS NULL
    """)

    # character_permits 테이블
    op.execute("""
        CREATE TABLE IF NOT EXISTS market.character_permits (
            id UUID PRIMARY KEY,
            character_id UUID NOT NULL REFERENCES market.characters(id) ON DELETE CASCADE,
            permit_type VARCHAR(32) NOT NULL,
            created_at TIMESTAMPTZ DEFAULT NOW(),
            CONSTRAINT uq_character_permit_type UNIQUE (character_id, permit_type)
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_market_character_permits_character_id
        ON market.character_permits(character_id)
    """)

    # character_items 테이블
    op.execute("""
        CREATE TABLE IF NOT EXISTS market.character_items (
            id UUID PRIMARY KEY,
            character_id UUID NOT NULL REFERENCES market.characters(id) ON DELETE CASCADE,
            item_name VARCHAR(120) NOT NULL,
            quantity INTEGER NOT NULL DEFAULT 1,
            crafter_user_id UUID,
            acquired_at TIMESTAMPTZ DEFAULT NOW(),
            CONSTRAINT ck_character_items_quantity_positive CHECK (quantity > 0)
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_market_character_items_character_id
        ON market.character_items(character_id)
    """)

    # marketplace_items 테이블
    op.execute("""
        CREATE TABLE IF NOT EXISTS market.marketplace_items (
            id UUID PRIMARY KEY,
            name VARCHAR(120) NOT NULL,
            description TEXT,
            crowns INTEGER NOT NULL,
            pennies INTEGER NOT NULL DEFAULT 0,
            category VARCHAR(32) NOT NULL DEFAULT 'misc',
            quantity INTEGER NOT NULL DEFAULT 1,
            seller_user_id UUID,
            seller_character_id UUID REFERENCES market.characters(id) ON DELETE SET NULL,
            crafter_user_id UUID,
            required_permit VARCHAR(32),
            listed_at TIMESTAMPTZ DEFAULT NOW(),
            CONSTRAINT ck_marketplace_items_quantity_non_negative CHECK (quantity >= 0)
        )
    """)
    for column in ("name", "category", "seller_user_id", "seller_character_id", "listed_at"):
        op.execute(
            f"CREATE INDEX IF NOT EXISTS ix_market_marketplace_items_{column} "
            f"ON market.marketplace_items({column})"
        )

    # 아카이브 테이블
    _archive_table("retired_characters", "retired_at")
    _archive_table("dead_characters", "died_at")


def downgrade() -> None:
    """Drop market schema.

    주의: 모든 데이터가 삭제됩니다!
    """
    op.execute("DROP TABLE IF EXISTS market.dead_characters CASCADE")
    op.execute("DROP TABLE IF EXISTS market.retired_characters CASCADE")
    op.execute("DROP TABLE IF EXISTS market.marketplace_items CASCADE")
    op.execute("DROP TABLE IF EXISTS market.character_items CASCADE")
    op.execute("DROP TABLE IF EXISTS market.character_permits CASCADE")
    op.execute("DROP TABLE IF EXISTS market.characters CASCADE")
    op.execute("DROP TABLE IF EXISTS market.accounts CASCADE")
    op.execute("DROP SCHEMA IF EXISTS market CASCADE")
