"""initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2025-11-10 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('creado_en', sa.TIMESTAMP(), server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('actualizado_en', sa.TIMESTAMP(), server_default=sa.text('CURRENT_TIMESTAMP')),
    ]


def upgrade():
    # --- rol ---
    op.create_table(
        'rol',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('nombre', sa.String(length=50), nullable=False, unique=True),
        sa.Column('descripcion', sa.Text(), nullable=True),
        *_timestamps(),
    )

    # --- usuario (administradores) ---
    op.create_table(
        'usuario',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('nombre', sa.String(length=100), nullable=False),
        sa.Column('apellido', sa.String(length=100), nullable=True),
        sa.Column('id_rol', sa.Integer(), sa.ForeignKey('rol.id'), nullable=False),
        sa.Column('activo', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index('ix_usuario_email', 'usuario', ['email'], unique=True)

    # --- usuario_sin_password ---
    op.create_table(
        'usuario_sin_password',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('nombre', sa.String(length=100), nullable=False),
        sa.Column('apellido', sa.String(length=100), nullable=False),
        sa.Column('dni', sa.String(length=20), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('telefono', sa.String(length=30), nullable=True),
        sa.Column('direccion', sa.String(length=255), nullable=True),
        sa.Column('id_rol', sa.Integer(), sa.ForeignKey('rol.id'), nullable=False),
        sa.Column('activo', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index('ix_usuario_sin_password_dni', 'usuario_sin_password', ['dni'], unique=True)
    op.create_index('ix_usuario_sin_password_email', 'usuario_sin_password', ['email'], unique=True)

    # --- categoria ---
    op.create_table(
        'categoria',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('nombre', sa.String(length=150), nullable=False),
        sa.Column('tipo', sa.String(length=20), nullable=False),
        sa.Column('descripcion', sa.Text(), nullable=True),
        sa.Column('estado', sa.String(length=20), nullable=False, server_default='activo'),
        *_timestamps(),
    )
    op.create_index('ix_categoria_nombre', 'categoria', ['nombre'], unique=True)
    op.create_index('ix_categoria_estado', 'categoria', ['estado'])

    # --- subcategoria ---
    op.create_table(
        'subcategoria',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('nombre', sa.String(length=150), nullable=False),
        sa.Column('descripcion', sa.Text(), nullable=True),
        sa.Column('estado', sa.String(length=20), nullable=False, server_default='activo'),
        sa.Column('id_categoria', sa.Integer(), sa.ForeignKey('categoria.id'), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('id_categoria', 'nombre', name='uq_subcategoria_categoria_nombre'),
    )
    op.create_index('ix_subcategoria_estado', 'subcategoria', ['estado'])
    op.create_index('ix_subcategoria_id_categoria', 'subcategoria', ['id_categoria'])

    # --- profesor ---
    op.create_table(
        'profesor',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('nombre', sa.String(length=200), nullable=False),
        sa.Column('descripcion', sa.Text(), nullable=True),
        sa.Column('especialidad', sa.String(length=200), nullable=True),
        sa.Column('imagen_url', sa.String(length=500), nullable=True),
        *_timestamps(),
    )

    # --- servicio ---
    op.create_table(
        'servicio',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('titulo', sa.String(length=250), nullable=False),
        sa.Column('descripcion', sa.Text(), nullable=True),
        sa.Column('id_categoria', sa.Integer(), sa.ForeignKey('categoria.id'), nullable=True),
        sa.Column('id_subcategoria', sa.Integer(), sa.ForeignKey('subcategoria.id'), nullable=True),
        sa.Column('estado', sa.String(length=20), nullable=False, server_default='activo'),
        sa.Column('imagen_url', sa.String(length=500), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_servicio_estado', 'servicio', ['estado'])
    op.create_index('ix_servicio_id_categoria', 'servicio', ['id_categoria'])
    op.create_index('ix_servicio_id_subcategoria', 'servicio', ['id_subcategoria'])

    # --- taller ---
    op.create_table(
        'taller',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('nombre', sa.String(length=250), nullable=False),
        sa.Column('descripcion', sa.Text(), nullable=True),
        sa.Column('id_categoria', sa.Integer(), sa.ForeignKey('categoria.id'), nullable=False),
        sa.Column('id_subcategoria', sa.Integer(), sa.ForeignKey('subcategoria.id'), nullable=False),
        sa.Column('id_profesor', sa.Integer(), sa.ForeignKey('profesor.id'), nullable=False),
        sa.Column('fecha_inicio', sa.DateTime(), nullable=False),
        sa.Column('fecha_fin', sa.DateTime(), nullable=False),
        sa.Column('cupo_total', sa.Integer(), nullable=False),
        sa.Column('cupo_disponible', sa.Integer(), nullable=False),
        sa.Column('estado', sa.String(length=20), nullable=False, server_default='activo'),
        sa.Column('imagen_url', sa.String(length=500), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('fecha_fin > fecha_inicio', name='ck_taller_fechas'),
        sa.CheckConstraint('cupo_disponible >= 0 AND cupo_disponible <= cupo_total', name='ck_taller_cupo'),
    )
    op.create_index('ix_taller_estado', 'taller', ['estado'])
    op.create_index('ix_taller_fecha_inicio', 'taller', ['fecha_inicio'])
    op.create_index('ix_taller_id_categoria', 'taller', ['id_categoria'])
    op.create_index('ix_taller_id_subcategoria', 'taller', ['id_subcategoria'])
    op.create_index('ix_taller_id_profesor', 'taller', ['id_profesor'])

    # --- actividad ---
    op.create_table(
        'actividad',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('nombre', sa.String(length=200), nullable=False),
        sa.Column('descripcion', sa.Text(), nullable=True),
        *_timestamps(),
    )

    # --- festival ---
    op.create_table(
        'festival',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('titulo', sa.String(length=250), nullable=False),
        sa.Column('descripcion', sa.Text(), nullable=True),
        sa.Column('fecha_inicio', sa.DateTime(), nullable=False),
        sa.Column('fecha_fin', sa.DateTime(), nullable=False),
        sa.Column('lugar', sa.String(length=250), nullable=False),
        sa.Column('organizador', sa.String(length=250), nullable=False),
        sa.Column('tipo', sa.String(length=100), nullable=False),
        sa.Column('id_actividad', sa.Integer(), sa.ForeignKey('actividad.id'), nullable=False),
        sa.Column('estado', sa.String(length=20), nullable=False, server_default='activo'),
        sa.Column('imagen_url', sa.String(length=500), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_festival_fecha_inicio', 'festival', ['fecha_inicio'])
    op.create_index('ix_festival_tipo', 'festival', ['tipo'])
    op.create_index('ix_festival_estado', 'festival', ['estado'])
    op.create_index('ix_festival_id_actividad', 'festival', ['id_actividad'])

    # --- premio ---
    op.create_table(
        'premio',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('titulo', sa.String(length=250), nullable=False),
        sa.Column('fecha', sa.Date(), nullable=False),
        sa.Column('descripcion', sa.Text(), nullable=True),
        sa.Column('url_imagen', sa.String(length=500), nullable=True),
        *_timestamps(),
    )

    # --- inscripcion ---
    op.create_table(
        'inscripcion',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('id_usuario', sa.Integer(), sa.ForeignKey('usuario_sin_password.id'), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('estado', sa.String(length=20), nullable=False, server_default='pendiente'),
        sa.Column('total', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('moneda', sa.String(length=3), nullable=False, server_default='PEN'),
        sa.Column('fecha_inscripcion', sa.DateTime(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_inscripcion_id_usuario', 'inscripcion', ['id_usuario'])
    op.create_index('ix_inscripcion_estado', 'inscripcion', ['estado'])


def downgrade():
    op.drop_table('inscripcion')
    op.drop_table('premio')
    op.drop_table('festival')
    op.drop_table('actividad')
    op.drop_table('taller')
    op.drop_table('servicio')
    op.drop_table('profesor')
    op.drop_table('subcategoria')
    op.drop_table('categoria')
    op.drop_table('usuario_sin_password')
    op.drop_table('usuario')
    op.drop_table('rol')
