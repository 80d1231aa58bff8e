"""
DRF Serializers for the LessonRush waitlist API.

Field names on the wire are camelCase (``painPoints``, ``createdAt``) to
match what the landing page JavaScript sends and reads.
"""
from rest_framework import serializers
from waitlist.models import WaitlistEntry


class WaitlistSubmissionSerializer(serializers.Serializer):
    """
    Validates a waitlist signup.

    Only the email is required; feedback and pain points are free text.
    """

    email = serializers.EmailField(max_length=254)
    feedback = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    painPoints = serializers.ListField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=False),
        required=False,
        source='pain_points',
    )


class WaitlistEntrySerializer(serializers.ModelSerializer):
    """Read-only representation of a stored waitlist entry."""

    id = serializers.UUIDField(source='uuid', read_only=True)
    painPoints = serializers.ListField(
        child=serializers.CharField(),
        source='pain_points',
        read_only=True,
    )
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = WaitlistEntry
        fields = ['id', 'email', 'feedback', 'painPoints', 'createdAt', 'updatedAt']
        read_only_fields = fields


# =============================================================================
# RESPONSE ENVELOPES (schema documentation only)
# =============================================================================


class WaitlistSuccessSerializer(serializers.Serializer):
    success = serializers.BooleanField(default=True)
    entry = WaitlistEntrySerializer()


class ErrorDetailSerializer(serializers.Serializer):
    field = serializers.CharField(allow_null=True)
    message = serializers.CharField()
    code = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField(default=False)
    message = serializers.CharField()
    errors = ErrorDetailSerializer(many=True, required=False)
