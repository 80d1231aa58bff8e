"""
Context processors for making site settings available in templates.
"""
from django.conf import settings


def site_metadata(request):
    """
    Expose site name, SEO copy and the canonical base URL to every template.

    The protocol is detected from the request so proxies that terminate SSL
    (via SECURE_PROXY_SSL_HEADER) still produce https canonical links.
    """
    protocol = 'https' if request.is_secure() else settings.SITE_PROTOCOL
    return {
        'site_name': settings.SITE_NAME,
        'site_tagline': settings.SITE_TAGLINE,
        'site_description': settings.SITE_DESCRIPTION,
        'site_keywords': settings.SITE_KEYWORDS,
        'site_url': f'{protocol}://{settings.SITE_DOMAIN}',
        'contact_email': settings.CONTACT_EMAIL,
    }
