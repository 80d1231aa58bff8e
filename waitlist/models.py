"""
Waitlist signups collected from the LessonRush landing page.
"""
import uuid
from django.db import models
from core.models import TimeStampedModel


class WaitlistEntry(TimeStampedModel):
    """
    One prospective user's signup, keyed by email.

    Re-submissions with the same email are merged into the existing row
    by ``waitlist.services.upsert_waitlist_entry``.
    """
    # Public UUID for external references (API responses)
    uuid = models.UUIDField(
        default=uuid.uuid4,
        unique=True,
        editable=False,
        db_index=True,
        help_text='Public identifier returned by the API (non-enumerable)'
    )

    email = models.EmailField(
        unique=True,
        help_text='Email address with a lower-cased domain'
    )
    feedback = models.TextField(
        blank=True,
        default='',
        help_text='Free-text feedback on what the product should solve'
    )
    pain_points = models.JSONField(
        default=list,
        blank=True,
        help_text='Selected pain points, in the order they were submitted'
    )

    class Meta:
        db_table = 'waitlist_entries'
        ordering = ['-created_at']
        verbose_name = 'Waitlist Entry'
        verbose_name_plural = 'Waitlist Entries'

    def __str__(self):
        return self.email

    @property
    def has_feedback(self):
        return bool(self.feedback.strip())
