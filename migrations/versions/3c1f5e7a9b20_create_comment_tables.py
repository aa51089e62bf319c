"""create_comment_tables

Create the comment engine schema:
- Comments (threaded, attached to host resources by type and ID)
- Comment votes (one up or down vote per user and comment)

Host resources, users and moderation records live in other services.
Their IDs are stored without foreign keys.

Revision ID: 3c1f5e7a9b20
Revises:
Create Date: 2026-10-18 10:12:44.301925

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f5e7a9b20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("commentable_type", sa.String(64), nullable=False),
        sa.Column("commentable_id", sa.UUID(), nullable=False),
        sa.Column("root_commentable_type", sa.String(64), nullable=False),
        sa.Column("root_commentable_id", sa.UUID(), nullable=False),
        sa.Column("depth", sa.SmallInteger(), nullable=False, server_default="0"),
        sa.Column("alignment", sa.SmallInteger(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("depth >= 0", name="depth_non_negative"),
        sa.CheckConstraint("alignment IN (-1, 0, 1)", name="alignment_in_range"),
    )
    op.create_index(
        "idx_comments_commentable", "comments", ["commentable_type", "commentable_id"]
    )
    op.create_index(
        "idx_comments_root_commentable",
        "comments",
        ["root_commentable_type", "root_commentable_id"],
    )
    op.create_index("idx_comments_author_id", "comments", ["author_id"])
    op.create_index("idx_comments_created_at", "comments", ["created_at"])

    # ========================================================================
    # COMMENT_VOTES table
    # ========================================================================
    op.create_table(
        "comment_votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("comment_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("weight", sa.SmallInteger(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("weight IN (-1, 1)", name="weight_up_or_down"),
        sa.UniqueConstraint("comment_id", "author_id", name="unique_comment_vote"),
    )
    op.create_index("idx_comment_votes_author_id", "comment_votes", ["author_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("comment_votes")
    op.drop_table("comments")
