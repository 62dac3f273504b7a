"""Contact form pipeline: validate, compose, send, classify."""
import logging
import re
from enum import Enum
from typing import Protocol

from email.message import EmailMessage

from app.core.config import settings
from app.schemas.contact_schema import ContactIn
from app.utils.email import (
    AUTH_FAILURE,
    CONNECTION_REFUSED,
    INVALID_LOGIN,
    MailTransportError,
    build_message,
    render_template,
)


logger = logging.getLogger("uvicorn.error")

# No whitespace, a single @, and a dot somewhere after it
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


class ContactOutcome(str, Enum):
    sent = "sent"
    missing_fields = "missing_fields"
    malformed_email = "malformed_email"
    auth_failure = "auth_failure"
    connection_refused = "connection_refused"
    invalid_credentials = "invalid_credentials"
    generic_failure = "generic_failure"


MESSAGES = {
    ContactOutcome.sent: "Bericht verzonden! We nemen zo snel mogelijk contact met u op.",
    ContactOutcome.missing_fields: "Vul alle velden in.",
    ContactOutcome.malformed_email: "Vul een geldig e-mailadres in.",
    ContactOutcome.auth_failure: "Uw bericht kon door een configuratieprobleem niet worden verzonden. Neem telefonisch contact met ons op.",
    ContactOutcome.connection_refused: "De mailserver is momenteel niet bereikbaar. Probeer het later opnieuw.",
    ContactOutcome.invalid_credentials: "Uw bericht kon niet worden verzonden omdat de mailserver de aanmelding weigerde. Neem telefonisch contact met ons op.",
    ContactOutcome.generic_failure: "Er is iets misgegaan bij het verzenden van uw bericht. Probeer het later opnieuw.",
}

_REASON_OUTCOMES = {
    AUTH_FAILURE: ContactOutcome.auth_failure,
    CONNECTION_REFUSED: ContactOutcome.connection_refused,
    INVALID_LOGIN: ContactOutcome.invalid_credentials,
}


class MailTransport(Protocol):
    def send(self, message: EmailMessage) -> None: ...


class ContactResult:
    def __init__(self, outcome: ContactOutcome, missing: list[str] | None = None) -> None:
        self.outcome = outcome
        self.missing = missing or []

    @property
    def ok(self) -> bool:
        return self.outcome is ContactOutcome.sent

    @property
    def message(self) -> str:
        return MESSAGES[self.outcome]


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(email or ""))


def compose_message(form: ContactIn, recipient: str | None = None) -> EmailMessage:
    context = form.model_dump()
    text = (
        f"Naam: {form.name}\n"
        f"E-mail: {form.email}\n"
        f"Telefoon: {form.phone}\n"
        f"Onderwerp: {form.subject}\n\n"
        f"{form.message}\n"
    )
    return build_message(
        # Header values must stay on one line
        subject=f"Contactformulier: {' '.join(form.subject.split())}",
        to=recipient or settings.CONTACT_RECIPIENT,
        html_body=render_template("contact.html", context),
        text_body=text,
        reply_to=form.email,
    )


class ContactDispatcher:
    def __init__(self, transport: MailTransport, recipient: str | None = None) -> None:
        self.transport = transport
        self.recipient = recipient

    def submit(self, form: ContactIn) -> ContactResult:
        missing = form.missing_fields()
        if missing:
            return ContactResult(ContactOutcome.missing_fields, missing)
        if not is_valid_email(form.email):
            return ContactResult(ContactOutcome.malformed_email)

        message = compose_message(form, self.recipient)
        try:
            # Blocks until the transport answers or its own timeout fires
            self.transport.send(message)
        except MailTransportError as exc:
            outcome = _REASON_OUTCOMES.get(exc.reason, ContactOutcome.generic_failure)
            logger.error("Contact mail failed (%s): %s", exc.reason, exc.detail)
            return ContactResult(outcome)
        except Exception:
            logger.exception("Contact mail failed with an unexpected error")
            return ContactResult(ContactOutcome.generic_failure)
        logger.info("Contact mail sent for subject %r", form.subject)
        return ContactResult(ContactOutcome.sent)
