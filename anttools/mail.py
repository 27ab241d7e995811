"""Composing and sending e-mail over SMTP with PLAIN authentication."""

from __future__ import annotations

import mimetypes
import smtplib
import ssl
from dataclasses import dataclass, field
from email.message import EmailMessage
from pathlib import Path

DEFAULT_ADDRESS = "smtp.qq.com:25"
DEFAULT_HOST = "smtp.qq.com"
_LOCAL_HOSTS = {"localhost", "127.0.0.1", "::1"}


@dataclass
class Email:
    """An outgoing message together with the server settings to send it."""

    from_addr: str = ""
    to: list[str] = field(default_factory=list)
    cc: list[str] = field(default_factory=list)
    bcc: list[str] = field(default_factory=list)
    title: str = ""
    text: str = ""
    html: str = ""
    password: str = ""
    address: str = ""
    host: str = ""
    file_paths: list[str] = field(default_factory=list)

    def build_message(self) -> EmailMessage:
        """Build the MIME message; blind-copy recipients are left out of the headers."""
        message = EmailMessage()
        message["From"] = self.from_addr
        if self.to:
            message["To"] = ", ".join(self.to)
        if self.cc:
            message["Cc"] = ", ".join(self.cc)
        message["Subject"] = self.title

        if self.text:
            message.set_content(self.text)
            if self.html:
                message.add_alternative(self.html, subtype="html")
        elif self.html:
            message.set_content(self.html, subtype="html")

        for file_path in self.file_paths:
            path = Path(file_path)
            data = path.read_bytes()
            content_type, _ = mimetypes.guess_type(path.name)
            maintype, subtype = (content_type or "application/octet-stream").split("/", 1)
            message.add_attachment(data, maintype=maintype, subtype=subtype, filename=path.name)
        return message

    def send(self) -> None:
        """Send the message, filling in the default server when none is set."""
        message = self.build_message()
        if not self.address:
            self.address = DEFAULT_ADDRESS
        if not self.host:
            self.host = DEFAULT_HOST

        server, sep, port = self.address.rpartition(":")
        if not sep or not port.isdigit():
            raise ValueError(f"missing port in address {self.address!r}")
        if server != self.host:
            raise ValueError("wrong host name")

        recipients = [*self.to, *self.cc, *self.bcc]
        with smtplib.SMTP(server, int(port)) as smtp:
            smtp.ehlo()
            if smtp.has_extn("starttls"):
                smtp.starttls(context=ssl.create_default_context())
                smtp.ehlo()
            elif server not in _LOCAL_HOSTS:
                raise smtplib.SMTPException("unencrypted connection")
            smtp.login(self.from_addr, self.password)
            smtp.send_message(message, from_addr=self.from_addr, to_addrs=recipients)