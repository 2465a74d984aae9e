from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_create_providers"
down_revision = None
branch_labels = None
depends_on = None


def _provider_columns():
    return [
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("account_number", sa.String(length=32), nullable=False),
        sa.Column("name", sa.String(length=120), nullable=True),
        sa.Column("phone", sa.String(length=32), nullable=True),
        sa.Column("city", sa.String(length=120), nullable=True),
        sa.Column("status", sa.String(length=16), nullable=False, server_default="pending"),
        sa.Column("is_online", sa.Boolean, nullable=True, server_default=sa.false()),
        sa.Column("rating", sa.Float, nullable=True, server_default="0"),
        sa.Column("review_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("lat", sa.Float, nullable=True),
        sa.Column("lng", sa.Float, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "therapists",
        *_provider_columns(),
        sa.Column("massage_types", sa.JSON, nullable=True),
    )
    op.create_index("ix_therapists_status", "therapists", ["status"])
    op.create_index("ix_therapists_rating", "therapists", ["rating"])

    op.create_table(
        "places",
        *_provider_columns(),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("services", sa.JSON, nullable=True),
        sa.Column("opening_hours", sa.JSON, nullable=True),
    )
    op.create_index("ix_places_status", "places", ["status"])
    op.create_index("ix_places_rating", "places", ["rating"])


def downgrade() -> None:
    op.drop_index("ix_places_rating", table_name="places")
    op.drop_index("ix_places_status", table_name="places")
    op.drop_table("places")
    op.drop_index("ix_therapists_rating", table_name="therapists")
    op.drop_index("ix_therapists_status", table_name="therapists")
    op.drop_table("therapists")
