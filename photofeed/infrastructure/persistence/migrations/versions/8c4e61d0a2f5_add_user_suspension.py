"""add_user_suspension

Revision ID: 8c4e61d0a2f5
Revises: 3f1c2a9b7d10
Create Date: 2026-10-19 15:40:12.418093

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "8c4e61d0a2f5"
down_revision: Union[str, Sequence[str], None] = "3f1c2a9b7d10"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    with op.batch_alter_table("app_user") as batch_op:
        batch_op.add_column(
            sa.Column(
                "is_suspended",
                sa.Boolean(),
                server_default=sa.false(),
                nullable=False,
            )
        )
    op.create_index("ix_report_post_created_at", "report", ["post_id", "created_at"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_report_post_created_at", table_name="report")
    with op.batch_alter_table("app_user") as batch_op:
        batch_op.drop_column("is_suspended")
