# Copyright © The social-auth-linkedin Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of social-auth-linkedin. It is subject to the license
# terms in the LICENSE file found in the top-level directory of this
# distribution. No part of social-auth-linkedin, including this file, may be
# copied, modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""
OAuth2 authorization code flow against LinkedIn.

A login attempt goes through these steps:

1. :py:meth:`LinkedinAuthManager.get_authorization_request` creates the URL
   to send the user to, and a random state that the caller stores in the
   session
2. LinkedIn sends the user back with a ``code``, and the caller checks the
   returned state against the stored one
3. :py:meth:`LinkedinAuthManager.authenticate` exchanges the code for an
   access token
4. :py:meth:`LinkedinAuthManager.get_user_info` fetches the profile of the
   user using the access token
"""

import logging
from dataclasses import dataclass
from typing import Any, NamedTuple, Self

import requests
from oauthlib.oauth2 import OAuth2Error

from social_auth_linkedin.exceptions import ProfileFetchError
from social_auth_linkedin.network import LinkedinClient

log = logging.getLogger(__name__)


class AuthorizationRequest(NamedTuple):
    """Where to send the user, and the state to expect back."""

    authorization_url: str
    state: str


@dataclass(frozen=True)
class LinkedinProfile:
    """Profile of the authenticated LinkedIn user."""

    provider_user_id: str
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    email_verified: bool = False
    image_url: str = ""

    @property
    def display_name(self) -> str:
        """Return the name to show for the user."""
        return f"{self.first_name} {self.last_name}"

    @property
    def verified_email(self) -> str:
        """
        Return the email, or an empty string if LinkedIn did not verify it.

        Only verified addresses can be used to match local users.
        """
        return self.email if self.email_verified else ""

    @classmethod
    def from_userinfo(cls, userinfo: dict[str, Any]) -> "LinkedinProfile":
        """
        Build a profile from the OpenID Connect userinfo response.

        :raises ProfileFetchError: if the response does not identify a user
        """
        if not (subject := userinfo.get("sub")):
            raise ProfileFetchError("LinkedIn userinfo has no 'sub' claim")
        return cls(
            provider_user_id=str(subject),
            first_name=userinfo.get("given_name") or "",
            last_name=userinfo.get("family_name") or "",
            email=userinfo.get("email") or "",
            email_verified=userinfo.get("email_verified") is True,
            image_url=userinfo.get("picture") or "",
        )


class LinkedinAuthManager:
    """Run one LinkedIn authorization attempt."""

    def __init__(self) -> None:
        """Create a manager with no client set."""
        self.client: LinkedinClient | None = None
        self.state: str | None = None
        self.token: dict[str, Any] | None = None

    def set_client(self, client: LinkedinClient) -> Self:
        """Set the LinkedIn client to use."""
        self.client = client
        return self

    def _get_client(self) -> LinkedinClient:
        if self.client is None:
            raise RuntimeError("LinkedinAuthManager used without a client")
        return self.client

    def get_authorization_request(self) -> AuthorizationRequest:
        """
        Build the URL of the LinkedIn authorization page.

        A new state is generated on each call.
        """
        client = self._get_client()
        url, state = client.oauth.authorization_url(client.url_authorize)
        self.state = state
        return AuthorizationRequest(authorization_url=url, state=state)

    def get_state(self) -> str | None:
        """Return the state generated with the last authorization request."""
        return self.state

    def authenticate(self, code: str) -> str:
        """
        Exchange the authorization code for an access token.

        :raises ProfileFetchError: if LinkedIn does not provide a token
        """
        client = self._get_client()
        try:
            token = client.oauth.fetch_token(
                client.url_token,
                code=code,
                client_secret=client.client_secret,
                include_client_id=True,
                timeout=client.timeout,
            )
        except (
            requests.RequestException,
            OAuth2Error,
            ValueError,
            # Raised by oauthlib when the granted scope differs
            Warning,
        ) as exc:
            raise ProfileFetchError(
                f"Cannot exchange authorization code: {exc}"
            ) from exc

        self.token = dict(token)
        access_token = self.get_access_token()
        if not access_token:
            raise ProfileFetchError("LinkedIn did not return an access token")
        return access_token

    def get_access_token(self) -> str | None:
        """Return the access token, if the code has been exchanged."""
        if self.token is None:
            return None
        return self.token.get("access_token")

    def get_user_info(self) -> LinkedinProfile:
        """
        Fetch the profile of the authenticated user.

        :raises ProfileFetchError: if the profile cannot be loaded
        """
        client = self._get_client()
        if self.get_access_token() is None:
            raise ProfileFetchError(
                "Profile requested before exchanging the authorization code"
            )

        try:
            response = client.oauth.get(
                client.url_userinfo, timeout=client.timeout
            )
            response.raise_for_status()
            userinfo = response.json()
        except (requests.RequestException, OAuth2Error, ValueError) as exc:
            raise ProfileFetchError(
                f"Cannot fetch LinkedIn profile: {exc}"
            ) from exc

        if not isinstance(userinfo, dict):
            raise ProfileFetchError(
                f"Unexpected LinkedIn userinfo response: {userinfo!r}"
            )

        profile = LinkedinProfile.from_userinfo(userinfo)
        log.debug("fetched LinkedIn profile %s", profile.provider_user_id)
        return profile
