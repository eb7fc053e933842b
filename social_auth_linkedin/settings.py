# Copyright © The social-auth-linkedin Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of social-auth-linkedin. It is subject to the license
# terms in the LICENSE file found in the top-level directory of this
# distribution. No part of social-auth-linkedin, including this file, may be
# copied, modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""
LinkedIn application settings.

This is configured by the SOCIAL_AUTH_LINKEDIN variable in django settings.

Example::

    SOCIAL_AUTH_LINKEDIN = {
        "CLIENT_ID": "123client_id",
        "CLIENT_SECRET": "123client_secret",
        # Optional: profile fields to collect, separated by commas
        "DATA_POINTS": "name,email",
        # Optional: public URL of the site, used to build the redirect URI
        "BASE_URL": "https://example.org",
    }

The values must match the ones of the LinkedIn app created at
https://developers.linkedin.com/apps.
"""

import logging
from collections.abc import Collection
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlsplit

import django.http
from django.conf import settings
from django.urls import reverse

log = logging.getLogger(__name__)

DEFAULT_DATA_POINTS = "name,email"
DEFAULT_SCOPE = ("openid", "profile", "email")
#: Seconds to wait for each request to LinkedIn
DEFAULT_TIMEOUT = 10


@dataclass
class LinkedinAuthSettings:
    """Credentials and options of the LinkedIn app."""

    client_id: str = ""
    client_secret: str = field(default="", repr=False)
    data_points: str = DEFAULT_DATA_POINTS
    scope: Collection[str] = DEFAULT_SCOPE
    base_url: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def load(cls) -> "LinkedinAuthSettings":
        """Read the settings from ``settings.SOCIAL_AUTH_LINKEDIN``."""
        config: dict[str, Any] = getattr(settings, "SOCIAL_AUTH_LINKEDIN", {})
        scope = config.get("SCOPE", DEFAULT_SCOPE)
        if isinstance(scope, str):
            scope = scope.split()
        base_url = config.get("BASE_URL") or None
        return cls(
            client_id=config.get("CLIENT_ID") or "",
            client_secret=config.get("CLIENT_SECRET") or "",
            data_points=config.get("DATA_POINTS", DEFAULT_DATA_POINTS) or "",
            scope=tuple(scope),
            base_url=base_url.rstrip("/") if base_url else None,
            timeout=config.get("TIMEOUT", DEFAULT_TIMEOUT),
        )

    def is_valid(self) -> bool:
        """Check that both client id and client secret are set."""
        if not self.client_id or not self.client_secret:
            log.error("Define Client ID and Client Secret on module settings.")
            return False
        return True

    def data_points_list(self) -> list[str]:
        """Return the configured data points."""
        return [
            data_point.strip()
            for data_point in self.data_points.split(",")
            if data_point.strip()
        ]

    def site_url(self, request: django.http.HttpRequest | None = None) -> str:
        """
        Return the public URL of the site.

        :param request: used to compute the URL if BASE_URL is not set
        """
        if self.base_url is not None:
            return self.base_url
        if request is None:
            raise ValueError("BASE_URL is not set and no request is available")
        return request.build_absolute_uri("/").rstrip("/")

    def redirect_uri(
        self, request: django.http.HttpRequest | None = None
    ) -> str:
        """Return the URI LinkedIn redirects to after authorization."""
        path = reverse("social_auth_linkedin:callback")
        if self.base_url is not None:
            return self.base_url + path
        if request is None:
            raise ValueError("BASE_URL is not set and no request is available")
        return request.build_absolute_uri(path)

    def app_domain(self, request: django.http.HttpRequest | None = None) -> str:
        """Return the host name to register as app domain on LinkedIn."""
        return urlsplit(self.site_url(request)).hostname or ""
