import logging
import smtplib
from email.message import EmailMessage
from email.utils import getaddresses

import taskboard.config as _cfg

logger = logging.getLogger(__name__)

INVITE_SUBJECT = "You're invited to a board on Taskboard"


def invitation_body(board_name: str) -> str:
    return (
        f'You have been invited to collaborate on the board "{board_name}". '
        "If you already have an account, please log in at the app. "
        "Otherwise, register with this email."
    )


def check_recipient(to: str) -> str:
    """Return ``to`` if it names exactly one mailbox; raise ValueError otherwise."""
    if "\r" in to or "\n" in to:
        raise ValueError("Recipient may not contain line breaks.")
    addresses = [addr for _, addr in getaddresses([to]) if addr]
    if len(addresses) != 1:
        raise ValueError(f"Expected a single recipient, got {len(addresses)}.")
    return to


class Mailer:
    def send_invitation(self, to: str, board_name: str) -> None:
        raise NotImplementedError


class ConsoleMailer(Mailer):
    """Used when no SMTP relay is configured: the invitation only goes to the log."""

    def send_invitation(self, to: str, board_name: str) -> None:
        logger.info("Invitation to %s for board %s", to, board_name)


class SmtpMailer(Mailer):
    def __init__(self, host: str, port: int, user: str, password: str, sender: str, timeout: float = 10):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.sender = sender
        self.timeout = timeout

    def _connect(self) -> smtplib.SMTP:
        # 465 is implicit TLS; anything else upgrades with STARTTLS when offered
        if self.port == 465:
            return smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout)
        smtp = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
        smtp.ehlo()
        if smtp.has_extn("starttls"):
            smtp.starttls()
            smtp.ehlo()
        return smtp

    def send_invitation(self, to: str, board_name: str) -> None:
        check_recipient(to)
        msg = EmailMessage()
        msg["From"] = self.sender
        msg["To"] = to
        msg["Subject"] = INVITE_SUBJECT
        msg.set_content(invitation_body(board_name))
        with self._connect() as smtp:
            smtp.login(self.user, self.password)
            smtp.send_message(msg)
        logger.info("Invitation sent to %s for board %s", to, board_name)


def build_mailer() -> Mailer:
    """SMTP mailer when host, port, user and password are all set; console otherwise."""
    if _cfg.SMTP_HOST and _cfg.SMTP_PORT and _cfg.SMTP_USER and _cfg.SMTP_PASS:
        return SmtpMailer(
            host=_cfg.SMTP_HOST,
            port=int(_cfg.SMTP_PORT),
            user=_cfg.SMTP_USER,
            password=_cfg.SMTP_PASS,
            sender=_cfg.SMTP_FROM or _cfg.SMTP_USER,
        )
    return ConsoleMailer()
