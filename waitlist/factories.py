"""
Factory definitions for waitlist models
"""
import factory
from factory.django import DjangoModelFactory
from .models import WaitlistEntry


class WaitlistEntryFactory(DjangoModelFactory):
    """Factory for creating waitlist entries"""

    class Meta:
        model = WaitlistEntry
        django_get_or_create = ('email',)

    email = factory.Sequence(lambda n: f'creator{n}@example.com')
    feedback = ''
    pain_points = factory.LazyFunction(list)


class WaitlistEntryWithFeedbackFactory(WaitlistEntryFactory):
    """Factory for entries submitted through the feedback form"""

    feedback = factory.Faker('sentence')
    pain_points = factory.LazyFunction(
        lambda: ['Technical setup costs eat into my course profits']
    )
