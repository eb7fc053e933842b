# Copyright © The social-auth-linkedin Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of social-auth-linkedin. It is subject to the license
# terms in the LICENSE file found in the top-level directory of this
# distribution. No part of social-auth-linkedin, including this file, may be
# copied, modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""
Creation of the OAuth2 client used to talk to LinkedIn.

A client is bound to the current request, since the redirect URI can depend
on the host the site is being served from.
"""

import json
import logging
from typing import TYPE_CHECKING

import django.http
import requests

from social_auth_linkedin.exceptions import ConfigurationError
from social_auth_linkedin.settings import LinkedinAuthSettings

if TYPE_CHECKING:  # pragma: no cover
    from requests_oauthlib import OAuth2Session

log = logging.getLogger(__name__)

#: Identifier of this network, also used as provider key for local accounts
PLUGIN_ID = "social_auth_linkedin"


def fix_token_response_scope(response: requests.Response) -> requests.Response:
    """
    Make the scope of a LinkedIn token response space separated.

    LinkedIn lists the granted scopes separated by commas, which oauthlib
    would otherwise take for a single scope different from the requested ones.
    """
    try:
        token = response.json()
    except ValueError:
        # Left to the token parser to report
        return response

    if isinstance(token, dict) and isinstance(scope := token.get("scope"), str):
        token["scope"] = " ".join(
            s.strip() for s in scope.split(",") if s.strip()
        )
        response._content = json.dumps(token).encode()
    return response


class LinkedinClient:
    """OAuth2 session for LinkedIn, with the endpoints it needs."""

    url_authorize = "https://www.linkedin.com/oauth/v2/authorization"
    url_token = "https://www.linkedin.com/oauth/v2/accessToken"
    url_userinfo = "https://api.linkedin.com/v2/userinfo"

    def __init__(
        self,
        oauth: "OAuth2Session",
        *,
        client_secret: str,
        timeout: float,
    ) -> None:
        """
        Wrap an OAuth2 session.

        :param oauth: session configured with client id, scope and
            redirect URI
        :param client_secret: secret sent to LinkedIn on token exchange
        :param timeout: seconds to wait for each request to LinkedIn
        """
        self.oauth = oauth
        self.client_secret = client_secret
        self.timeout = timeout


class LinkedinAuthNetwork:
    """Build LinkedIn clients out of :py:class:`LinkedinAuthSettings`."""

    def __init__(self, settings: LinkedinAuthSettings | None = None) -> None:
        """
        Set up the network.

        :param settings: app settings; loaded from django settings if omitted
        """
        if settings is None:
            settings = LinkedinAuthSettings.load()
        self.settings = settings

    def create_client(self, request: django.http.HttpRequest) -> LinkedinClient:
        """
        Create a LinkedIn client for this request.

        :raises ConfigurationError: if the settings are incomplete, or the
            OAuth2 library is not available
        """
        try:
            from requests_oauthlib import OAuth2Session
        except ImportError as exc:
            log.error("The OAuth2 library for LinkedIn was not found: %s", exc)
            raise ConfigurationError(
                "The OAuth2 library for LinkedIn was not found"
            ) from exc

        if not self.settings.is_valid():
            raise ConfigurationError(
                "LinkedIn client id or client secret are not configured"
            )

        oauth = OAuth2Session(
            self.settings.client_id,
            scope=list(self.settings.scope),
            redirect_uri=self.settings.redirect_uri(request),
        )
        oauth.register_compliance_hook(
            "access_token_response", fix_token_response_scope
        )
        return LinkedinClient(
            oauth,
            client_secret=self.settings.client_secret,
            timeout=self.settings.timeout,
        )
