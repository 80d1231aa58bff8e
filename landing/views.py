from django.shortcuts import render, redirect
from django.http import HttpResponse
from django.conf import settings
from django.urls import reverse
from django.contrib import messages
from django.db import DatabaseError
from django.views.decorators.http import require_POST
import logging
from waitlist.services import upsert_waitlist_entry
from .content import CREATOR_PAIN_POINTS, CORE_FEATURES, TRUST_SIGNALS, CTA_PERKS
from .forms import WaitlistForm
from .seo import generate_og_image

logger = logging.getLogger(__name__)


def index(request):
    """LessonRush pre-launch landing page with the waitlist forms."""
    context = {
        'form': WaitlistForm(),
        'pain_points': CREATOR_PAIN_POINTS,
        'features': CORE_FEATURES,
        'trust_signals': TRUST_SIGNALS,
        'cta_perks': CTA_PERKS,
    }
    return render(request, 'landing/index.html', context)


@require_POST
def join_waitlist(request):
    """
    Form fallback for browsers without JavaScript.

    Runs the same upsert as POST /api/waitlist, then redirects back to the
    page with a flash message.

    POST /waitlist/join/
    """
    form = WaitlistForm(request.POST)
    index_url = reverse('landing:index')

    if not form.is_valid():
        for errors in form.errors.values():
            for error in errors:
                messages.error(request, error)
        return redirect(f'{index_url}#feedback-section')

    try:
        upsert_waitlist_entry(
            email=form.cleaned_data['email'],
            feedback=form.cleaned_data['feedback'],
            pain_points=form.cleaned_data['pain_points'],
        )
    except DatabaseError:
        logger.exception("Waitlist form submission failed")
        messages.error(request, "Something went wrong. Please try again in a moment.")
        return redirect(f'{index_url}#feedback-section')

    if form.cleaned_data['feedback'].strip():
        messages.success(request, "Thank you for your feedback! We've added you to our waitlist.")
    else:
        messages.success(request, "You're on the list! We'll notify you as soon as LessonRush is ready to launch.")

    return redirect(f'{index_url}#feedback-section')


def og_image(request):
    """Generate Open Graph image dynamically with page-specific content."""
    # Get custom title and subtitle from query params, or use defaults
    title = request.GET.get('title', settings.SITE_TAGLINE)
    subtitle = request.GET.get('subtitle', 'Create, launch, and scale your online course')

    image_buffer = generate_og_image(
        title=title,
        subtitle=subtitle
    )
    return HttpResponse(image_buffer.getvalue(), content_type='image/png')


def privacy_policy(request):
    """Privacy policy page."""
    return render(request, 'landing/privacy_policy.html')


def terms(request):
    """Terms of service page."""
    return render(request, 'landing/terms.html')
