# security_headers.py  (listed in MIDDLEWARE after SecurityMiddleware)
from django.utils.deprecation import MiddlewareMixin


class SecurityHeadersMiddleware(MiddlewareMixin):
    def process_response(self, request, response):
        # --- Content Security Policy ---
        # News articles embed YouTube players; books and covers load from any https host.
        frame_src = " ".join([
            "'self'",
            "https://www.youtube.com",
            "https://www.youtube-nocookie.com",
        ])

        csp = (
            "default-src 'self'; "
            "script-src 'self' 'unsafe-inline'; "
            "style-src 'self' 'unsafe-inline' https:; "
            "img-src 'self' data: blob: https:; "
            "font-src 'self' data: https:; "
            "connect-src 'self'; "
            f"frame-src {frame_src}; "
            "frame-ancestors 'none'"
        )
        response.headers.setdefault("Content-Security-Policy", csp)

        # --- Permissions-Policy: lock down browser features ---
        response.headers.setdefault("Permissions-Policy", "geolocation=(), microphone=(), camera=()")

        return response
