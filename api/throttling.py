"""
Custom rate limiting for API endpoints.
"""
from rest_framework.throttling import SimpleRateThrottle


class WaitlistRateThrottle(SimpleRateThrottle):
    """
    Rate limiting for public waitlist signups.

    Requests are counted per client IP (honouring X-Forwarded-For via DRF's
    ``get_ident``). The rate comes from DEFAULT_THROTTLE_RATES["waitlist"].
    """

    scope = "waitlist"

    def get_cache_key(self, request, view):
        """
        Generate cache key based on the client address.

        Args:
            request: HTTP request object
            view: DRF view

        Returns:
            str: Cache key for throttling
        """
        return self.cache_format % {
            "scope": self.scope,
            "ident": self.get_ident(request),
        }
