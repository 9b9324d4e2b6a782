import html
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from exceptions import DeliveryError

logger = logging.getLogger(__name__)

class EmailTemplate:
    """Email template constants and configurations"""

    # Email subjects
    CUSTOMER_CONFIRMATION = "Thank You for Your Travel Inquiry"
    BUSINESS_NOTIFICATION = "New Travel Inquiry Submission"

    # Email types for logging
    TYPE_CUSTOMER_CONFIRMATION = "customer_confirmation"
    TYPE_BUSINESS_NOTIFICATION = "business_notification"

    SIGN_OFF = "The Travel Team"
    NO_MESSAGE = "No message provided"
    FOOTER = "This is an automated message. Please do not reply to this email."

BASE_STYLES = """
            body { font-family: Arial, sans-serif; line-height: 1.6; color: #333; }
            .container { max-width: 600px; margin: 0 auto; padding: 20px; }
            h1 { color: #2c3e50; }
            .footer { margin-top: 30px; font-size: 12px; color: #7f8c8d; }
            table { border-collapse: collapse; width: 100%; }
            table, th, td { border: 1px solid #ddd; }
            th, td { padding: 12px; text-align: left; }
            th { background-color: #f2f2f2; }"""

# ------------------  Row builders ------------------

def format_travel_dates(record):
    """Return 'start to end' (end defaults to TBD), or None without a start date"""
    if not record.get('travelDateStart'):
        return None
    return f"{record['travelDateStart']} to {record.get('travelDateEnd') or 'TBD'}"

def customer_summary_rows(record):
    """(label, value) pairs shown to the customer; absent fields are left out"""
    rows = [
        ("Destination", record.get('destination')),
        ("Travel Dates", format_travel_dates(record)),
        ("Number of Travelers", record.get('travelers')),
    ]
    return [(label, value) for label, value in rows if value]

def business_detail_rows(record):
    """(label, value) pairs for the operator; message and timestamp are always shown"""
    optional_rows = [
        ("Phone", record.get('phone')),
        ("Destination", record.get('destination')),
        ("Travel Dates", format_travel_dates(record)),
        ("Travelers", record.get('travelers')),
    ]
    return (
        [("Reference ID", record['id']), ("Name", record['name']), ("Email", record['email'])]
        + [(label, value) for label, value in optional_rows if value]
        + [
            ("Message", record.get('message') or EmailTemplate.NO_MESSAGE),
            ("Submitted At", record['submittedAt']),
        ]
    )

def wrap_html(title, content):
    return f"""<!DOCTYPE html>
<html>
    <head>
        <meta charset="UTF-8">
        <title>{html.escape(title)}</title>
        <style>{BASE_STYLES}
        </style>
    </head>
    <body>
        <div class="container">
{content}
        </div>
    </body>
</html>
"""

# ------------------  Renderers ------------------

def render_customer_confirmation(record):
    """
    Render the confirmation email sent to the customer

    Args:
        record (dict): Submission record

    Returns:
        dict: subject, text_body and html_body built from the same summary rows
    """
    subject = EmailTemplate.CUSTOMER_CONFIRMATION
    rows = customer_summary_rows(record)
    intro = "We have received your travel inquiry."
    if rows:
        intro += " Here's a summary of the information you provided:"

    text_lines = [subject, "", f"Dear {record['name']},", "", intro, ""]
    if rows:
        text_lines += [f"{label}: {value}" for label, value in rows] + [""]
    text_lines += [
        "A member of our team will review your inquiry and get back to you shortly.",
        "",
        f"Your reference number is: {record['id']}",
        "",
        "Best regards,",
        EmailTemplate.SIGN_OFF,
        "",
        EmailTemplate.FOOTER,
    ]

    summary_html = ""
    if rows:
        items = "\n".join(
            f"                <li>{html.escape(label)}: {html.escape(value)}</li>" for label, value in rows
        )
        summary_html = f"            <ul>\n{items}\n            </ul>\n"

    content = (
        f"            <h1>{html.escape(subject)}</h1>\n"
        f"            <p>Dear {html.escape(record['name'])},</p>\n"
        f"            <p>{html.escape(intro)}</p>\n"
        f"{summary_html}"
        "            <p>A member of our team will review your inquiry and get back to you shortly.</p>\n"
        f"            <p>Your reference number is: <strong>{html.escape(record['id'])}</strong></p>\n"
        f"            <p>Best regards,<br>{html.escape(EmailTemplate.SIGN_OFF)}</p>\n"
        f"            <div class=\"footer\"><p>{html.escape(EmailTemplate.FOOTER)}</p></div>"
    )

    return {
        'subject': subject,
        'text_body': "\n".join(text_lines),
        'html_body': wrap_html(subject, content),
    }

def render_business_notification(record):
    """Render the new-inquiry email sent to the business operator"""
    subject = EmailTemplate.BUSINESS_NOTIFICATION
    title = "New Travel Inquiry"
    intro = "A new travel inquiry has been submitted with the following details:"
    rows = business_detail_rows(record)

    text_lines = [title, "", intro, ""] + [f"{label}: {value}" for label, value in rows]

    table_rows = "\n".join(
        f"                <tr><th>{html.escape(label)}</th><td>{html.escape(value)}</td></tr>"
        for label, value in rows
    )
    content = (
        f"            <h1>{title}</h1>\n"
        f"            <p>{intro}</p>\n"
        f"            <table>\n{table_rows}\n            </table>"
    )

    return {
        'subject': subject,
        'text_body': "\n".join(text_lines),
        'html_body': wrap_html(title, content),
    }

# ------------------  Sending ------------------

class EmailSender:
    """Sends rendered messages through AWS SES"""

    def __init__(self, source_email, client=None):
        self.source_email = source_email
        self.ses_client = client or boto3.client('ses')

    def send(self, to_email, message, email_type=None):
        """
        Send one rendered message

        Args:
            to_email (str): Recipient email address
            message (dict): subject, text_body and html_body
            email_type (str): Type of email for logging (optional)

        Returns:
            str: SES MessageId

        Raises:
            DeliveryError: If SES rejects the message or cannot be reached
        """
        try:
            response = self.ses_client.send_email(
                Source=self.source_email,
                Destination={'ToAddresses': [to_email]},
                Message={
                    'Subject': {'Data': message['subject'], 'Charset': 'UTF-8'},
                    'Body': {
                        'Text': {'Data': message['text_body'], 'Charset': 'UTF-8'},
                        'Html': {'Data': message['html_body'], 'Charset': 'UTF-8'}
                    }
                }
            )
        except ClientError as e:
            error_code = e.response['Error']['Code']
            error_message = e.response['Error']['Message']
            logger.error(f"Failed to send {email_type or 'email'} to {to_email}. Error: {error_code} - {error_message}")
            raise DeliveryError(f"Failed to send {email_type or 'email'}: {error_code}") from e
        except BotoCoreError as e:
            logger.error(f"Failed to reach SES for {email_type or 'email'} to {to_email}: {str(e)}")
            raise DeliveryError(f"Failed to send {email_type or 'email'}: email service unavailable") from e

        message_id = response['MessageId']
        logger.info(f"Email sent successfully to {to_email}. Type: {email_type}, MessageId: {message_id}")
        return message_id

class NotificationDispatcher:
    """Sends the customer confirmation and the business notification for a record"""

    def __init__(self, sender, business_email):
        self.sender = sender
        self.business_email = business_email

    def dispatch(self, record):
        """
        Attempt both notifications, customer first

        The business notification is attempted even when the customer one fails.

        Returns:
            list: SES message ids, customer first

        Raises:
            DeliveryError: If either notification failed, after both were attempted
        """
        notifications = [
            (EmailTemplate.TYPE_CUSTOMER_CONFIRMATION, record['email'].strip(), render_customer_confirmation),
            (EmailTemplate.TYPE_BUSINESS_NOTIFICATION, self.business_email, render_business_notification),
        ]

        message_ids = []
        failures = []
        for email_type, to_email, render in notifications:
            try:
                message_ids.append(self.sender.send(to_email, render(record), email_type))
            except DeliveryError as e:
                failures.append({'type': email_type, 'error': e.message})
            except Exception as e:
                logger.error(f"Unexpected error sending {email_type} for submission {record['id']}: {str(e)}", exc_info=True)
                failures.append({'type': email_type, 'error': str(e)})

        if failures:
            failed_types = ', '.join(f['type'] for f in failures)
            raise DeliveryError(f"Notification delivery failed for submission {record['id']}: {failed_types}", failures)

        return message_ids
