"""
API views for the LessonRush waitlist.
"""
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiExample

from waitlist.services import upsert_waitlist_entry

from .serializers import (
    WaitlistSubmissionSerializer,
    WaitlistEntrySerializer,
    WaitlistSuccessSerializer,
    ErrorResponseSerializer,
)
from .throttling import WaitlistRateThrottle


class WaitlistView(APIView):
    """
    Join the waitlist, or merge new answers into an existing signup.

    The same email can be submitted any number of times: non-blank feedback
    and a non-empty pain point list replace what was stored, blanks are
    ignored.
    """

    authentication_classes = []
    permission_classes = [AllowAny]
    throttle_classes = [WaitlistRateThrottle]

    @extend_schema(
        tags=["waitlist"],
        request=WaitlistSubmissionSerializer,
        responses={
            201: WaitlistSuccessSerializer,
            400: ErrorResponseSerializer,
            429: ErrorResponseSerializer,
            500: ErrorResponseSerializer,
        },
        description="Create or update the waitlist entry for an email address.",
        examples=[
            OpenApiExample(
                name="quick_signup",
                summary="Email only",
                value={"email": "creator@example.com"},
                request_only=True,
            ),
            OpenApiExample(
                name="signup_with_feedback",
                summary="Email, feedback and pain points",
                value={
                    "email": "creator@example.com",
                    "feedback": "I need drip content and certificates",
                    "painPoints": [
                        "Technical setup costs eat into my course profits",
                    ],
                },
                request_only=True,
            ),
        ],
    )
    def post(self, request):
        serializer = WaitlistSubmissionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        entry, _ = upsert_waitlist_entry(
            email=serializer.validated_data["email"],
            feedback=serializer.validated_data.get("feedback"),
            pain_points=serializer.validated_data.get("pain_points"),
        )

        return Response(
            {"success": True, "entry": WaitlistEntrySerializer(entry).data},
            status=status.HTTP_201_CREATED,
        )
