import smtplib

from flask import current_app
from flask_mail import Message

from graduates.errors import UpstreamError
from graduates.extensions import mail


class MailService:
    @staticmethod
    def build_message(email_from, email_to, subject, text):
        return Message(subject=subject, sender=email_from, recipients=[email_to], body=text)

    @classmethod
    def send(cls, email_from, email_to, subject, text):
        msg = cls.build_message(email_from, email_to, subject, text)
        try:
            mail.send(msg)
        except (smtplib.SMTPException, OSError) as exc:
            current_app.logger.error("Failed to send mail to %s: %s", email_to, exc)
            raise UpstreamError("Could not send email.") from exc

        if current_app.extensions["mail"].suppress:
            current_app.logger.warning("Mail suppressed: %r to %s", subject, email_to)
        else:
            current_app.logger.info("Mail sent to %s", email_to)
        return msg
