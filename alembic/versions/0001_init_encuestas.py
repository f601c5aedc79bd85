from alembic import op
import sqlalchemy as sa

revision = '0001_init_encuestas'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'respuestas',
        sa.Column('id', sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column('nombre', sa.String(), nullable=True),
        sa.Column('puesto', sa.String(), nullable=True),
        sa.Column('telefono', sa.String(), nullable=True),
        sa.Column('seguridad', sa.String(), nullable=True),
        sa.Column('problemas', sa.Text(), nullable=True),
        sa.Column('sugerencia', sa.Text(), nullable=True),
        sa.Column('calificacion', sa.String(), nullable=True),
        sa.Column('fecha', sa.String(), nullable=True),
        sa.Column('hora', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_respuestas_created_at', 'respuestas', ['created_at'])

    op.create_table(
        'administradores',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('usuario', sa.String(), nullable=False, unique=True),
        sa.Column('email', sa.String(), nullable=False, unique=True),
        sa.Column('password', sa.String(), nullable=False),
        sa.Column('fecha_registro', sa.String(), nullable=False),
    )
    op.create_index('ix_administradores_id', 'administradores', ['id'])

def downgrade():
    op.drop_index('ix_administradores_id', table_name='administradores')
    op.drop_table('administradores')
    op.drop_index('ix_respuestas_created_at', table_name='respuestas')
    op.drop_table('respuestas')
