"""
Custom template tags for the landing app.

Provides Schema.org structured data for search engines.
"""
from django import template
from django.conf import settings
from django.utils.safestring import mark_safe
import json

register = template.Library()


def _json_ld(schema):
    # Escape "</" so user-controlled strings cannot close the script tag
    json_ld = json.dumps(schema, indent=2, ensure_ascii=False).replace('</', '<\\/')
    return mark_safe(f'<script type="application/ld+json">\n{json_ld}\n</script>')


@register.simple_tag
def software_app_schema(name, description, url, availability='PreOrder'):
    """
    Generate Schema.org SoftwareApplication structured data.

    Usage:
        {% software_app_schema site_name site_description site_url %}

    Returns:
        Safe HTML script tag with JSON-LD structured data
    """
    schema = {
        "@context": "https://schema.org",
        "@type": "SoftwareApplication",
        "name": name,
        "description": description,
        "url": url,
        "applicationCategory": "EducationalApplication",
        "operatingSystem": "Any (Web-based)",
        "offers": {
            "@type": "Offer",
            "availability": f"https://schema.org/{availability}",
        },
    }
    return _json_ld(schema)


@register.simple_tag
def organization_schema(url):
    """
    Generate Schema.org Organization structured data.

    Usage:
        {% organization_schema site_url %}
    """
    schema = {
        "@context": "https://schema.org",
        "@type": "Organization",
        "name": settings.SITE_NAME,
        "url": url,
        "email": settings.CONTACT_EMAIL,
    }
    return _json_ld(schema)
