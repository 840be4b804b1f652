"""Contact form router."""

import logging

from fastapi import APIRouter

from techstock.config import settings
from techstock.exceptions import EmailTransportError
from techstock.schemas.common import MessageResponse
from techstock.schemas.contact import ContactMessage
from techstock.services.email_service import EmailService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post("", response_model=MessageResponse)
def submit_contact_form(data: ContactMessage) -> dict:
    """Accept a contact form submission and forward it to the store inbox."""
    logger.info(f"Contact form submission from {data.name} <{data.email}>")

    if EmailService.is_configured() and settings.contact_inbox_address:
        try:
            EmailService.send_contact_message(data.name, data.email, data.message)
        except EmailTransportError as exc:
            raise EmailTransportError("Failed to send message. Please try again later.") from exc
    else:
        logger.info("Contact inbox not configured, submission logged only")

    return {"message": "Message sent successfully!"}
