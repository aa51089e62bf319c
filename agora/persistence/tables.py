"""SQLAlchemy table definitions for Agora.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("body", Text, nullable=False),
    Column("author_id", UUID, nullable=False),  # Owned by the host application
    # Direct parent: a host resource or another comment ('comment')
    Column("commentable_type", String(64), nullable=False),
    Column("commentable_id", UUID, nullable=False),
    # Denormalized thread root, always a host resource
    Column("root_commentable_type", String(64), nullable=False),
    Column("root_commentable_id", UUID, nullable=False),
    Column("depth", SmallInteger, nullable=False, server_default="0"),
    Column("alignment", SmallInteger, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("depth >= 0", name="depth_non_negative"),
    CheckConstraint("alignment IN (-1, 0, 1)", name="alignment_in_range"),
)

Index(
    "idx_comments_commentable",
    comments_table.c.commentable_type,
    comments_table.c.commentable_id,
)
Index(
    "idx_comments_root_commentable",
    comments_table.c.root_commentable_type,
    comments_table.c.root_commentable_id,
)
Index("idx_comments_author_id", comments_table.c.author_id)
Index("idx_comments_created_at", comments_table.c.created_at)

# ============================================================================
# COMMENT VOTES TABLE
# ============================================================================
comment_votes_table = Table(
    "comment_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_id", UUID, nullable=False),
    Column("weight", SmallInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("weight IN (-1, 1)", name="weight_up_or_down"),
    UniqueConstraint("comment_id", "author_id", name="unique_comment_vote"),
)

Index("idx_comment_votes_author_id", comment_votes_table.c.author_id)

# ============================================================================
# MODERATIONS TABLE (owned by the moderation service, read-only here)
# ============================================================================
moderations_table = Table(
    "moderations",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("reportable_type", String(64), nullable=False),
    Column("reportable_id", UUID, nullable=False),
    Column("hidden_at", TIMESTAMP(timezone=True), nullable=True),
)
