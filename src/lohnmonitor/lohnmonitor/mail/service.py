"""SMTP delivery of promotion alerts."""
from __future__ import annotations

import logging
import smtplib
import ssl
from dataclasses import dataclass
from datetime import date
from email.message import EmailMessage
from typing import Optional, Protocol

from jinja2 import DictLoader, Environment, select_autoescape

from ..core.exceptions import DispatchError
from ..employees.model import Employee
from . import templates

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SMTPConfig:
    enabled: bool = False
    host: Optional[str] = None
    port: int = 587
    use_ssl: bool = False
    use_tls: bool = True
    username: Optional[str] = None
    password: Optional[str] = None
    sender: str = "Lohnmonitor <noreply@company.de>"
    recipient: Optional[str] = None
    timeout: int = 30

    @classmethod
    def from_dict(cls, cfg: Optional[dict]) -> "SMTPConfig":
        cfg = dict(cfg or {})
        return cls(
            enabled=bool(cfg.get("enabled", False)),
            host=cfg.get("host"),
            port=int(cfg.get("port", 587)),
            use_ssl=bool(cfg.get("use_ssl", False)),
            use_tls=bool(cfg.get("use_tls", True)),
            username=cfg.get("username"),
            password=cfg.get("password"),
            sender=cfg.get("sender") or cls.sender,
            recipient=cfg.get("recipient"),
            timeout=int(cfg.get("timeout", 30)),
        )


class PromotionMailer(Protocol):
    @property
    def enabled(self) -> bool:
        raise NotImplementedError

    def send_promotion_alert(self, employee: Employee, promotion_date: date) -> None:
        raise NotImplementedError


class EmailService(PromotionMailer):
    """Renders and sends promotion alerts; raises DispatchError on failure."""

    def __init__(self, config: SMTPConfig):
        self._config = config
        self._env = Environment(
            loader=DictLoader(
                {
                    "promotion_subject.txt": templates.PROMOTION_SUBJECT,
                    "promotion.txt": templates.PROMOTION_TEXT,
                    "promotion.html": templates.PROMOTION_HTML,
                }
            ),
            autoescape=select_autoescape(["html"]),
        )

    @property
    def enabled(self) -> bool:
        return bool(self._config.enabled and self._config.host)

    def build_promotion_message(self, employee: Employee, promotion_date: date) -> EmailMessage:
        ctx = {"employee": employee, "promotion_date": promotion_date}

        msg = EmailMessage()
        msg["Subject"] = self._env.get_template("promotion_subject.txt").render(**ctx).strip()
        msg["From"] = self._config.sender
        msg["To"] = self._config.recipient or self._config.sender
        msg.set_content(self._env.get_template("promotion.txt").render(**ctx))
        msg.add_alternative(self._env.get_template("promotion.html").render(**ctx), subtype="html")
        return msg

    def _open(self) -> smtplib.SMTP:
        cfg = self._config
        if cfg.use_ssl:
            server = smtplib.SMTP_SSL(cfg.host, cfg.port, timeout=cfg.timeout, context=ssl.create_default_context())
        else:
            server = smtplib.SMTP(cfg.host, cfg.port, timeout=cfg.timeout)
            if cfg.use_tls:
                server.starttls(context=ssl.create_default_context())
        if cfg.username and cfg.password:
            server.login(cfg.username, cfg.password)
        return server

    def send(self, msg: EmailMessage) -> None:
        if not self.enabled:
            raise DispatchError("SMTP ist deaktiviert")

        try:
            with self._open() as server:
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            raise DispatchError(f"E-Mail an {msg['To']} fehlgeschlagen: {e}") from e

        logger.info("Sent mail %r to %s", msg["Subject"], msg["To"])

    def send_promotion_alert(self, employee: Employee, promotion_date: date) -> None:
        self.send(self.build_promotion_message(employee, promotion_date))

    def test_connection(self) -> bool:
        if not self.enabled:
            return False
        try:
            with self._open() as server:
                server.noop()
        except (smtplib.SMTPException, OSError) as e:
            logger.warning("SMTP connection test failed: %s", e)
            return False
        return True
