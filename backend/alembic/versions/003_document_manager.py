"""Document manager - typed folders and file records.

Revision ID: 003_document_manager
Revises: 002_movie_curation
Create Date: 2026-10-16

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "003_document_manager"
down_revision: Union[str, None] = "002_movie_curation"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "folders",
        sa.Column("folder_id", sa.Uuid, primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", sa.String(10), nullable=False),
        sa.Column("max_file_limit", sa.Integer, nullable=False),
    )

    op.create_table(
        "files",
        sa.Column("file_id", sa.Uuid, primary_key=True),
        sa.Column(
            "folder_id", sa.Uuid,
            sa.ForeignKey("folders.folder_id", ondelete="CASCADE", onupdate="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("type", sa.String(10), nullable=False),
        sa.Column("size", sa.Integer, nullable=False),
        sa.Column("uploaded_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_files_folder_id", "files", ["folder_id"])


def downgrade() -> None:
    op.drop_index("ix_files_folder_id", "files")
    op.drop_table("files")
    op.drop_table("folders")
