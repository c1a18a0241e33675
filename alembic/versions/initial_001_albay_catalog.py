"""Initial schema: users, catalog, itineraries, reviews, favorites, OTPs

Revision ID: initial_001
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB, UUID

revision = "initial_001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps(updated: bool = True) -> list[sa.Column]:
    cols = [sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now())]
    if updated:
        cols.append(sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()))
    return cols


def upgrade() -> None:
    # --- users ---
    op.create_table(
        "users",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("email", sa.String(255), unique=True),
        sa.Column("phone", sa.String(20), unique=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("full_name", sa.String(200)),
        sa.Column("avatar_url", sa.Text),
        sa.Column("bio", sa.Text),
        sa.Column("role", sa.String(20), server_default="user"),
        sa.Column("is_active", sa.Boolean, server_default="true"),
        sa.Column("onboarding_complete", sa.Boolean, server_default="false"),
        sa.Column("onboarding_answers", JSONB),
        sa.Column("user_preferences", JSONB),
        *_timestamps(),
    )

    # --- catalog ---
    op.create_table(
        "tourist_spots",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("location", sa.String(255), nullable=False),
        sa.Column("municipality", sa.String(100)),
        sa.Column("category", JSONB, server_default="[]"),
        sa.Column("spot_type", JSONB),
        sa.Column("contact_number", sa.String(50)),
        sa.Column("image_url", sa.Text),
        sa.Column("latitude", sa.Float),
        sa.Column("longitude", sa.Float),
        sa.Column("rating", sa.Float),
        sa.Column("is_hidden_gem", sa.Boolean, server_default="false"),
        *_timestamps(),
    )
    op.create_index("idx_tourist_spots_category", "tourist_spots", ["category"], postgresql_using="gin")

    op.create_table(
        "accommodations",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("location", sa.String(255), nullable=False),
        sa.Column("municipality", sa.String(100)),
        sa.Column("category", JSONB, server_default="[]"),
        sa.Column("amenities", JSONB),
        sa.Column("price_range", sa.String(50)),
        sa.Column("rating", sa.Float),
        sa.Column("contact_number", sa.String(50)),
        sa.Column("email", sa.String(255)),
        sa.Column("image_url", sa.Text),
        sa.Column("latitude", sa.Float),
        sa.Column("longitude", sa.Float),
        *_timestamps(),
    )

    op.create_table(
        "restaurants",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("location", sa.String(255), nullable=False),
        sa.Column("municipality", sa.String(100)),
        sa.Column("food_type", sa.String(100)),
        sa.Column("image_url", sa.Text),
        *_timestamps(updated=False),
    )

    op.create_table(
        "categories",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("name", sa.String(100), unique=True, nullable=False),
        sa.Column("icon", sa.String(20)),
        *_timestamps(updated=False),
    )

    op.create_table(
        "subcategories",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("category_id", UUID(as_uuid=True), sa.ForeignKey("categories.id", ondelete="CASCADE")),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text),
        *_timestamps(updated=False),
    )

    # --- itineraries ---
    op.create_table(
        "itineraries",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("user_id", UUID(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(255), server_default="My Itinerary"),
        sa.Column("selected_categories", JSONB),
        sa.Column("spots", JSONB),
        sa.Column("route", JSONB),
        *_timestamps(),
    )
    op.create_index("idx_itineraries_user_created", "itineraries", ["user_id", "created_at"])

    # --- reviews / favorites ---
    op.create_table(
        "reviews",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("spot_id", UUID(as_uuid=True), sa.ForeignKey("tourist_spots.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_id", UUID(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("rating", sa.Integer, nullable=False),
        sa.Column("comment", sa.Text),
        *_timestamps(updated=False),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="ck_reviews_rating"),
    )
    op.create_index("idx_reviews_spot_created", "reviews", ["spot_id", "created_at"])

    op.create_table(
        "favorites",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("user_id", UUID(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("item_id", UUID(as_uuid=True), nullable=False),
        sa.Column("item_type", sa.String(20), nullable=False),
        sa.Column("kind", sa.String(20), server_default="favorite"),
        *_timestamps(updated=False),
        sa.UniqueConstraint("user_id", "item_id", "kind", name="uq_favorites_user_item_kind"),
    )

    # --- temp_otps ---
    op.create_table(
        "temp_otps",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("contact", sa.String(255), nullable=False),
        sa.Column("otp_code", sa.String(6), nullable=False),
        sa.Column("verified", sa.Boolean, server_default="false"),
        *_timestamps(updated=False),
    )
    op.create_index("ix_temp_otps_contact", "temp_otps", ["contact"])


def downgrade() -> None:
    op.drop_table("temp_otps")
    op.drop_table("favorites")
    op.drop_table("reviews")
    op.drop_table("itineraries")
    op.drop_table("subcategories")
    op.drop_table("categories")
    op.drop_table("restaurants")
    op.drop_table("accommodations")
    op.drop_table("tourist_spots")
    op.drop_table("users")
