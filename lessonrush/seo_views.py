from django.http import HttpResponse
from django.conf import settings
from django.utils import timezone

# Priority overrides (default is 0.5)
PRIORITY_CONFIG = {
    'index': 1.0,
    'privacy_policy': 0.3,
    'terms': 0.3,
}

# Changefreq overrides (default is monthly)
CHANGEFREQ_CONFIG = {
    'index': 'weekly',
    'privacy_policy': 'yearly',
    'terms': 'yearly',
}

# URLs to exclude from sitemap (non-page endpoints)
EXCLUDE_NAMES = {'og_image', 'robots', 'sitemap', 'join_waitlist'}


def _base_url(request):
    """
    Detect actual protocol from request (handles Cloudflare/proxy SSL termination).

    Django's request.is_secure() respects SECURE_PROXY_SSL_HEADER; anything
    not served from localhost is assumed to be behind https.
    """
    protocol = 'https' if request.is_secure() else 'http'
    host = request.get_host()
    if protocol == 'http' and not ('localhost' in host or '127.0.0.1' in host):
        protocol = 'https'
    return f"{protocol}://{settings.SITE_DOMAIN}"


def sitemap(request):
    """Generate XML sitemap dynamically from landing URL patterns."""
    from landing.urls import urlpatterns

    base_url = _base_url(request)
    lastmod = timezone.now().strftime('%Y-%m-%d')

    urls = []
    for pattern in urlpatterns:
        name = getattr(pattern, 'name', None)
        if not name or name in EXCLUDE_NAMES:
            continue

        url_path = str(pattern.pattern)
        if url_path and not url_path.endswith('/'):
            continue  # Skip non-page URLs like og-image.png

        priority = PRIORITY_CONFIG.get(name, 0.5)
        changefreq = CHANGEFREQ_CONFIG.get(name, 'monthly')

        urls.append(f'''    <url>
        <loc>{base_url}/{url_path}</loc>
        <lastmod>{lastmod}</lastmod>
        <changefreq>{changefreq}</changefreq>
        <priority>{priority}</priority>
    </url>''')

    sitemap_xml = f'''<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
{chr(10).join(urls)}
</urlset>'''

    return HttpResponse(sitemap_xml, content_type='application/xml')


def robots(request):
    """Generate robots.txt for search engine crawlers."""
    base_url = _base_url(request)

    robots_txt = f'''User-agent: *
Allow: /
Disallow: /admin/
Disallow: /api/
Disallow: /waitlist/

Sitemap: {base_url}/sitemap.xml
'''

    return HttpResponse(robots_txt, content_type='text/plain')
