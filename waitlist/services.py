"""
Service functions for waitlist signups
"""
import logging
from django.contrib.auth.base_user import BaseUserManager
from django.db import transaction
from .models import WaitlistEntry

logger = logging.getLogger(__name__)


def normalize_email(email):
    """Strip surrounding whitespace and lower-case the domain part."""
    return BaseUserManager.normalize_email(email.strip())


@transaction.atomic
def upsert_waitlist_entry(email, feedback=None, pain_points=None):
    """
    Create or merge a waitlist entry keyed by email.

    A new email gets a row with the supplied feedback and pain points (empty
    when absent). For an existing email, feedback is only replaced when the
    new value is non-blank and pain points only when the new list is
    non-empty, so a later bare "email only" signup never erases earlier
    answers.

    Args:
        email: Email address (already validated)
        feedback: Optional free-text feedback
        pain_points: Optional list of pain point strings, order preserved

    Returns:
        tuple: (WaitlistEntry, created)
    """
    email = normalize_email(email)
    pain_points = list(pain_points or [])

    entry, created = WaitlistEntry.objects.select_for_update().get_or_create(
        email=email,
        defaults={
            'feedback': feedback or '',
            'pain_points': pain_points,
        },
    )

    if created:
        logger.info(f"Waitlist entry {entry.uuid} created")
        return entry, True

    update_fields = []
    if feedback and feedback.strip():
        entry.feedback = feedback
        update_fields.append('feedback')
    if pain_points:
        entry.pain_points = pain_points
        update_fields.append('pain_points')

    if update_fields:
        entry.save(update_fields=update_fields + ['updated_at'])
        logger.info(f"Waitlist entry {entry.uuid} updated: {', '.join(update_fields)}")
    else:
        logger.debug(f"Waitlist entry {entry.uuid} resubmitted with nothing new")

    return entry, False
