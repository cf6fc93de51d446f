"""
Initial schema: settings, display configs and the prayer/lesson schedule.
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = 'initial_20241117'
down_revision = None
branch_labels = None
depends_on = None

_json = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    op.create_table(
        'settings',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('key', sa.String(length=100), nullable=False),
        sa.Column('value', _json, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_settings_key', 'settings', ['key'], unique=True)

    op.create_table(
        'display_configs',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('template_id', sa.String(length=50), nullable=False),
        sa.Column('zone_id', sa.String(length=50), nullable=False),
        sa.Column('display_type', sa.String(length=30), nullable=False),
        sa.Column('config', _json, nullable=False),
        sa.Column('zone_background_color', sa.String(length=9), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint('template_id', 'zone_id', name='uq_display_configs_template_zone'),
    )

    op.create_table(
        'prayer_times',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('prayer_type', sa.String(length=20), nullable=True),
        sa.Column('time_type', sa.String(length=20), nullable=False),
        sa.Column('fixed_time', sa.String(length=5), nullable=True),
        sa.Column('anchor_time_id', sa.String(length=50), nullable=True),
        sa.Column('offset_minutes', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('valid_on', _json, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('idx_prayer_times_type', 'prayer_times', ['type'])


def downgrade() -> None:
    op.drop_index('idx_prayer_times_type', table_name='prayer_times')
    op.drop_table('prayer_times')
    op.drop_table('display_configs')
    op.drop_index('ix_settings_key', table_name='settings')
    op.drop_table('settings')
