import smtplib
import ssl
import logging
from smtplib import SMTPAuthenticationError, SMTPResponseException
import certifi
from email.message import EmailMessage
from pathlib import Path
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.core.config import settings


logger = logging.getLogger("uvicorn.error")

# Transport failure reasons
AUTH_FAILURE = "auth"
CONNECTION_REFUSED = "connection_refused"
INVALID_LOGIN = "invalid_login"
GENERIC_FAILURE = "generic"


class MailTransportError(RuntimeError):
    def __init__(self, reason: str, detail: str) -> None:
        super().__init__(detail)
        self.reason = reason
        self.detail = detail


def _get_env() -> Environment:
    templates_dir = Path(__file__).resolve().parent.parent.parent / "templates" / "email"
    loader = FileSystemLoader(str(templates_dir))
    return Environment(loader=loader, autoescape=select_autoescape(["html", "xml"]))


def render_template(template_name: str, context: Dict[str, Any]) -> str:
    env = _get_env()
    template = env.get_template(template_name)
    return template.render(**context)


def build_message(
    subject: str,
    to: str,
    html_body: str,
    text_body: str | None = None,
    reply_to: str | None = None,
) -> EmailMessage:
    msg = EmailMessage()
    msg["Subject"] = subject
    msg["From"] = f"{settings.FROM_NAME} <{settings.FROM_EMAIL}>"
    msg["To"] = to
    if reply_to:
        msg["Reply-To"] = reply_to
    if text_body:
        msg.set_content(text_body)
    # Add HTML alternative
    msg.add_alternative(html_body, subtype="html")
    return msg


def _error_text(exc: BaseException) -> str:
    text = str(exc)
    if isinstance(exc, SMTPResponseException):
        err = exc.smtp_error
        text = f"{text} {err.decode(errors='replace') if isinstance(err, bytes) else err}"
    return text


def classify_smtp_error(exc: BaseException) -> str:
    if isinstance(exc, SMTPAuthenticationError):
        return AUTH_FAILURE
    if isinstance(exc, ConnectionRefusedError):
        return CONNECTION_REFUSED
    if "invalid login" in _error_text(exc).lower():
        return INVALID_LOGIN
    return GENERIC_FAILURE


class SmtpTransport:
    """Sends one message per connection through the configured SMTP server."""

    def __init__(
        self,
        host: str | None = None,
        port: int | None = None,
        user: str | None = None,
        password: str | None = None,
        timeout: float | None = None,
        use_ssl: bool | None = None,
        use_tls: bool | None = None,
    ) -> None:
        self.host = host or settings.SMTP_HOST
        self.port = port or settings.SMTP_PORT
        self.user = settings.SMTP_USER if user is None else user
        # Gmail app passwords are often shown with spaces; strip them
        self.password = (settings.SMTP_PASSWORD if password is None else password).replace(" ", "")
        self.timeout = settings.SMTP_TIMEOUT if timeout is None else timeout
        self.use_ssl = settings.SMTP_USE_SSL if use_ssl is None else use_ssl
        self.use_tls = settings.SMTP_USE_TLS if use_tls is None else use_tls

        # Auto-correct common port/protocol mismatches
        if self.port == 465 and not self.use_ssl:
            logger.warning("SMTP configured with port 465; enabling SSL and disabling STARTTLS for compatibility")
            self.use_ssl = True
            self.use_tls = False
        if self.port == 587 and self.use_ssl:
            logger.warning("SMTP configured with port 587 and SSL; switching to STARTTLS for compatibility")
            self.use_ssl = False
            self.use_tls = True

    def send(self, message: EmailMessage) -> None:
        if not self.user or not self.password:
            raise MailTransportError(AUTH_FAILURE, "SMTP credentials missing: set SMTP_USER and SMTP_PASSWORD env vars")

        # Use certifi CA bundle to avoid missing system CAs in slim containers
        context = ssl.create_default_context(cafile=certifi.where())

        try:
            if self.use_ssl:
                with smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout, context=context) as server:
                    server.login(self.user, self.password)
                    server.send_message(message)
                return

            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                server.ehlo()
                if self.use_tls:
                    server.starttls(context=context)
                    # Some SMTP servers require EHLO again after STARTTLS
                    server.ehlo()
                server.login(self.user, self.password)
                server.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            detail = f"{type(exc).__name__}: {_error_text(exc)}"
            if isinstance(exc, SMTPResponseException):
                detail = f"{detail} (code {exc.smtp_code})"
            raise MailTransportError(classify_smtp_error(exc), detail) from exc


def get_mail_transport() -> SmtpTransport:
    return SmtpTransport()
