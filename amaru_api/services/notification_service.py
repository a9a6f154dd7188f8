"""Registration notifications.

Emails are scheduled on FastAPI ``BackgroundTasks`` so they run after the
response is sent. Delivery is best-effort: failures are logged and never reach
the caller.
"""
import logging
from datetime import datetime
from typing import Optional

from fastapi import BackgroundTasks

from ..config import settings
from ..models.enums import EstadoInscripcion
from .email_service import EmailService, get_email_service

logger = logging.getLogger(__name__)

# only these states produce an "estado actualizado" email
ESTADOS_NOTIFICABLES = (EstadoInscripcion.aprobado.value, EstadoInscripcion.rechazado.value)


def estado_texto(estado: str) -> str:
    return "APROBADA" if estado == EstadoInscripcion.aprobado.value else "RECHAZADA"


def _contexto_base(id_inscripcion) -> dict:
    return {
        "empresa": settings.MAIL_FROM_NAME,
        "id_inscripcion": id_inscripcion,
        "anio": datetime.utcnow().year,
    }


async def send_inscripcion_creada(
    email: str, estado: str, id_inscripcion, email_service: Optional[EmailService] = None
) -> None:
    if not settings.MAIL_ENABLED:
        logger.debug("Mail disabled; skipping 'inscripción creada' for %s", id_inscripcion)
        return
    try:
        service = email_service or get_email_service()
        context = _contexto_base(id_inscripcion)
        context.update(
            estado=estado,
            numero_pago=settings.NUMERO_PAGO,
            mensaje_whatsapp=(
                "Hola, quiero enviar mi comprobante de pago para la inscripción "
                f"{id_inscripcion}"
            ),
        )
        html, text = service.render_template("inscripcion_creada", context)
        result = await service.send_email(
            to_email=email,
            subject=f"Seguimiento de Inscripción - {settings.MAIL_FROM_NAME}",
            html_content=html,
            text_content=text,
        )
        if not result.get("success"):
            logger.error("Email 'inscripción creada' no enviado a %s: %s", email, result.get("error"))
    except Exception:
        logger.exception("Error enviando email de inscripción %s", id_inscripcion)


async def send_estado_actualizado(
    email: str, estado: str, id_inscripcion, email_service: Optional[EmailService] = None
) -> None:
    if not settings.MAIL_ENABLED:
        logger.debug("Mail disabled; skipping 'estado actualizado' for %s", id_inscripcion)
        return
    try:
        service = email_service or get_email_service()
        aprobado = estado == EstadoInscripcion.aprobado.value
        context = _contexto_base(id_inscripcion)
        context.update(
            estado_texto=estado_texto(estado),
            aprobado=aprobado,
            color_estado="#27ae60" if aprobado else "#e74c3c",
        )
        html, text = service.render_template("estado_actualizado", context)
        result = await service.send_email(
            to_email=email,
            subject=f"Actualización de Estado - Inscripción {estado_texto(estado)}",
            html_content=html,
            text_content=text,
        )
        if not result.get("success"):
            logger.error("Email 'estado actualizado' no enviado a %s: %s", email, result.get("error"))
    except Exception:
        logger.exception("Error enviando email de actualización de la inscripción %s", id_inscripcion)


def schedule_inscripcion_creada(background_tasks: BackgroundTasks, email: str, estado: str, id_inscripcion) -> None:
    """Schedule the "inscripción creada" email (non-blocking)."""
    background_tasks.add_task(send_inscripcion_creada, email, estado, id_inscripcion)


def schedule_estado_actualizado(background_tasks: BackgroundTasks, email: str, estado: str, id_inscripcion) -> bool:
    """Schedule the status email; returns False when the new state does not notify."""
    if estado not in ESTADOS_NOTIFICABLES:
        return False
    background_tasks.add_task(send_estado_actualizado, email, estado, id_inscripcion)
    return True
