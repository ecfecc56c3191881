# =============================================================================
# lib/mailer.py - Mail Transport
# =============================================================================
# Thin wrapper over an authenticated SMTP relay.
#
# The intake service only depends on the MailTransport protocol
# (verify + send), so tests can swap in a fake that records messages or
# fails at a chosen stage.
#
# Usage:
#   transport = SmtpMailTransport(host="smtp.gmail.com", port=465,
#                                 username=user, password=app_password)
#   transport.verify()
#   transport.send(MailMessage(...))
# =============================================================================

import logging
import smtplib
import ssl
from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import formataddr
from typing import Protocol

from lib.utils import ApplicationError

logger = logging.getLogger(__name__)


def fold_header(value: str) -> str:
    """Collapse newlines and runs of whitespace into single spaces."""
    return " ".join(value.split())


# =============================================================================
# Errors
# =============================================================================

class MailTransportError(ApplicationError):
    """Raised when the relay cannot be reached, rejects login, or refuses a message."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, code="MAIL_TRANSPORT_ERROR", **kwargs)


# =============================================================================
# Message
# =============================================================================

@dataclass
class MailMessage:
    """One outbound HTML email."""
    sender_name: str
    sender_address: str
    to_address: str
    subject: str
    html_body: str

    @property
    def from_header(self) -> str:
        """Display name plus address, e.g. 'SolveDet Team <x@y.com>'."""
        return formataddr((fold_header(self.sender_name), fold_header(self.sender_address)))

    def to_email_message(self) -> EmailMessage:
        """
        Build the MIME message handed to smtplib.

        Line breaks in header values (a client name pasted from a textarea)
        are folded into single spaces.
        """
        msg = EmailMessage()
        msg["From"] = self.from_header
        msg["To"] = fold_header(self.to_address)
        msg["Subject"] = fold_header(self.subject)
        msg.set_content(self.html_body, subtype="html", charset="utf-8")
        return msg


# =============================================================================
# Transports
# =============================================================================

class MailTransport(Protocol):
    """Capability the intake service needs from a mail provider."""

    def verify(self) -> None:
        """Raise MailTransportError if messages cannot be delivered."""
        ...

    def send(self, message: MailMessage) -> None:
        """Deliver one message, raising MailTransportError on failure."""
        ...


class SmtpMailTransport:
    """
    MailTransport backed by an SMTP relay with login authentication.

    Every call opens its own connection; nothing is shared between
    requests.
    """

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        timeout: float = 30.0,
        use_ssl: bool = True,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.timeout = timeout
        self.use_ssl = use_ssl

    def _connect(self) -> smtplib.SMTP:
        context = ssl.create_default_context()
        if self.use_ssl:
            server = smtplib.SMTP_SSL(
                self.host, self.port, timeout=self.timeout, context=context
            )
        else:
            server = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
            server.starttls(context=context)
        server.login(self.username, self.password)
        return server

    def verify(self) -> None:
        """
        Check that the relay accepts our credentials.

        Raises:
            MailTransportError: If credentials are missing, the relay is
                unreachable, or login is refused
        """
        if not self.username or not self.password:
            raise MailTransportError(
                "Mail credentials are not configured",
                details={"host": self.host},
            )

        try:
            server = self._connect()
            try:
                server.noop()
            finally:
                server.quit()
        except (smtplib.SMTPException, OSError) as e:
            raise MailTransportError(
                f"Mail relay verification failed: {e}",
                details={"host": self.host, "port": self.port},
            ) from e

        logger.info(f"Mail relay verified: {self.host}:{self.port}")

    def send(self, message: MailMessage) -> None:
        """
        Deliver one message.

        Raises:
            MailTransportError: If the relay refuses the message
        """
        try:
            email_message = message.to_email_message()
        except ValueError as e:
            raise MailTransportError(
                f"Invalid message for {message.to_address}: {e}",
                details={"to": message.to_address},
            ) from e

        try:
            server = self._connect()
            try:
                server.send_message(email_message)
            finally:
                server.quit()
        except (smtplib.SMTPException, OSError) as e:
            raise MailTransportError(
                f"Failed to send mail to {message.to_address}: {e}",
                details={"to": message.to_address},
            ) from e

        logger.info(f"Mail sent to {message.to_address}: {message.subject}")
