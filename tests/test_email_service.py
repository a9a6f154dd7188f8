from types import SimpleNamespace

import aiosmtplib
import pytest

from amaru_api.config import settings
from amaru_api.services import notification_service
from amaru_api.services.email_service import EmailService


def _config(**overrides):
    values = dict(
        MAIL_ENABLED=True,
        MAIL_HOST="smtp.test",
        MAIL_PORT=587,
        MAIL_USER="user",
        MAIL_PASSWORD="secret",
        MAIL_USE_TLS=False,
        MAIL_START_TLS=True,
        MAIL_FROM="no-reply@amaru.test",
        MAIL_FROM_NAME="Amaru Producciones",
        MAIL_TIMEOUT=5.0,
    )
    values.update(overrides)
    return SimpleNamespace(**values)


class FakeSMTP:
    instances = []

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.logged_in = None
        self.sent = []
        FakeSMTP.instances.append(self)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    async def login(self, user, password):
        self.logged_in = (user, password)

    async def send_message(self, message):
        self.sent.append(message)


class FailingSMTP(FakeSMTP):
    async def send_message(self, message):
        raise aiosmtplib.SMTPException("connection dropped")


class RecordingEmailService:
    """Renders real templates but records messages instead of sending them."""

    def __init__(self, fail=False):
        self._real = EmailService(config=_config())
        self.fail = fail
        self.sent = []

    def render_template(self, name, context):
        return self._real.render_template(name, context)

    async def send_email(self, to_email, subject, html_content, text_content=None):
        if self.fail:
            raise RuntimeError("smtp down")
        self.sent.append({"to": to_email, "subject": subject, "html": html_content, "text": text_content})
        return {"success": True}


@pytest.fixture(autouse=True)
def reset_fake_smtp():
    FakeSMTP.instances = []


async def test_send_email_uses_configured_smtp(monkeypatch):
    monkeypatch.setattr(aiosmtplib, "SMTP", FakeSMTP)
    service = EmailService(config=_config())

    result = await service.send_email("a@b.com", "Hola", "<p>Hola</p>", "Hola")

    assert result["success"] is True
    smtp = FakeSMTP.instances[0]
    assert smtp.kwargs["hostname"] == "smtp.test"
    assert smtp.kwargs["start_tls"] is True
    assert smtp.kwargs["use_tls"] is False
    assert smtp.kwargs["timeout"] == 5.0
    assert smtp.logged_in == ("user", "secret")
    message = smtp.sent[0]
    assert message["To"] == "a@b.com"
    assert message["From"] == "Amaru Producciones <no-reply@amaru.test>"


async def test_implicit_tls_disables_starttls(monkeypatch):
    monkeypatch.setattr(aiosmtplib, "SMTP", FakeSMTP)
    service = EmailService(config=_config(MAIL_USE_TLS=True, MAIL_PORT=465, MAIL_USER=""))
    await service.send_email("a@b.com", "Hola", "<p>Hola</p>")
    smtp = FakeSMTP.instances[0]
    assert smtp.kwargs["use_tls"] is True
    assert smtp.kwargs["start_tls"] is False
    assert smtp.logged_in is None


async def test_send_failure_is_reported_not_raised(monkeypatch):
    monkeypatch.setattr(aiosmtplib, "SMTP", FailingSMTP)
    result = await EmailService(config=_config()).send_email("a@b.com", "Hola", "<p>Hola</p>")
    assert result["success"] is False
    assert "connection dropped" in result["error"]


async def test_disabled_service_does_not_connect(monkeypatch):
    monkeypatch.setattr(aiosmtplib, "SMTP", FakeSMTP)
    result = await EmailService(config=_config(MAIL_ENABLED=False)).send_email("a@b.com", "Hola", "<p>x</p>")
    assert result["success"] is False
    assert FakeSMTP.instances == []


def test_render_inscripcion_creada():
    html, text = EmailService(config=_config()).render_template(
        "inscripcion_creada",
        {
            "empresa": "Amaru Producciones",
            "estado": "pendiente",
            "id_inscripcion": 7,
            "numero_pago": "51959194292",
            "mensaje_whatsapp": "Hola, quiero enviar mi comprobante de pago para la inscripción 7",
            "anio": 2025,
        },
    )
    assert "PENDIENTE" in html
    assert "https://wa.me/51959194292?text=Hola" in html
    assert "ID de inscripción: 7" in text
    assert "<" not in text


async def test_notification_creada_renders_and_sends(monkeypatch):
    monkeypatch.setattr(settings, "MAIL_ENABLED", True)
    service = RecordingEmailService()

    await notification_service.send_inscripcion_creada("a@b.com", "pendiente", 3, email_service=service)

    sent = service.sent[0]
    assert sent["to"] == "a@b.com"
    assert sent["subject"].startswith("Seguimiento de Inscripción")
    assert settings.NUMERO_PAGO in sent["html"]


async def test_notification_estado_uses_aprobada_wording(monkeypatch):
    monkeypatch.setattr(settings, "MAIL_ENABLED", True)
    service = RecordingEmailService()

    await notification_service.send_estado_actualizado("a@b.com", "aprobado", 3, email_service=service)
    await notification_service.send_estado_actualizado("a@b.com", "rechazado", 3, email_service=service)

    assert service.sent[0]["subject"] == "Actualización de Estado - Inscripción APROBADA"
    assert "NUEVO ESTADO: APROBADA" in service.sent[0]["html"]
    assert "Felicidades" in service.sent[0]["html"]
    assert service.sent[1]["subject"] == "Actualización de Estado - Inscripción RECHAZADA"


async def test_notification_errors_are_absorbed(monkeypatch):
    monkeypatch.setattr(settings, "MAIL_ENABLED", True)
    await notification_service.send_estado_actualizado(
        "a@b.com", "aprobado", 3, email_service=RecordingEmailService(fail=True)
    )


def test_schedule_estado_skips_pendiente():
    class Tasks:
        def __init__(self):
            self.added = []

        def add_task(self, fn, *args):
            self.added.append((fn, args))

    tasks = Tasks()
    assert notification_service.schedule_estado_actualizado(tasks, "a@b.com", "pendiente", 1) is False
    assert tasks.added == []
    assert notification_service.schedule_estado_actualizado(tasks, "a@b.com", "rechazado", 1) is True
    assert tasks.added == [(notification_service.send_estado_actualizado, ("a@b.com", "rechazado", 1))]
