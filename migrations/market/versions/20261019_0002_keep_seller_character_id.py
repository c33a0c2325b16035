"""Drop the seller character FK on marketplace_items.

Revision ID: 0002
Revises: 0001
Create Date: 2026-10-19

변경 사항:
1. marketplace_items.seller_character_id: FK(ON DELETE SET NULL) 제거
   - 은퇴/사망으로 캐릭터 행이 삭제되어도 판매 캐릭터 ID 가 남음
   - 판매 대금이 같은 사용자의 새 캐릭터로 입금되지 않음
"""

from typing import Sequence

from alembic import op

# revision identifiers
revision: str = "0002"
down_revision: str | None = "0001"  # initial_market_schema
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """seller_character_id FK 제거."""
    op.execute("""
        ALTER TABLE market.marketplace_items
        DROP CONSTRAINT IF EXISTS marketplace_items_seller_character_id_fkey
    """)


def downgrade() -> None:
    """seller_character_id FK 복구.

    주의: 아카이브된 판매 캐릭터를 가리키는 ID 는 NULL 로 정리됩니다.
    """
    op.execute("""
        UPDATE market.marketplace_items AS m
        SET seller_character_id = NULL
        WHERE seller_character_id IS NOT NULL
          AND NOT EXISTS (
              SELECT 1 FROM market.characters c WHERE c.id = m.seller_character_id
          )
    """)
    op.execute("""
        ALTER TABLE market.marketplace_items
        ADD CONSTRAINT marketplace_items_seller_character_id_fkey
        FOREIGN KEY (seller_character_id) REFERENCES market.characters(id) ON DELETE SET NULL
    """)
