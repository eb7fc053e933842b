# Copyright © The social-auth-linkedin Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of social-auth-linkedin. It is subject to the license
# terms in the LICENSE file found in the top-level directory of this
# distribution. No part of social-auth-linkedin, including this file, may be
# copied, modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""
Views needed to log in with LinkedIn.

:py:class:`LinkedinAuthRedirectView` sends the user to LinkedIn, and
:py:class:`LinkedinAuthCallbackView` handles the user coming back.
"""

import json
import logging
from typing import Any

from django.conf import settings
from django.contrib import messages
from django.http import (
    HttpRequest,
    HttpResponseBase,
    HttpResponseRedirect,
)
from django.shortcuts import redirect
from django.utils.crypto import constant_time_compare
from django.utils.decorators import method_decorator
from django.views.decorators.cache import never_cache
from django.views.generic import View

from social_auth_linkedin.exceptions import (
    ConfigurationError,
    LinkedinAuthError,
    ProfileFetchError,
    ProviderReportedError,
    StateMismatchError,
    UserCancelledError,
)
from social_auth_linkedin.manager import LinkedinAuthManager, LinkedinProfile
from social_auth_linkedin.network import (
    PLUGIN_ID,
    LinkedinAuthNetwork,
    LinkedinClient,
)
from social_auth_linkedin.persistent import LinkedinAuthPersistentDataHandler
from social_auth_linkedin.user_manager import (
    SocialAuthUserManager,
    get_user_manager,
)

log = logging.getLogger(__name__)

#: Data points that are filled by the fields of the LinkedIn profile
SUPPORTED_DATA_POINTS = frozenset(("name", "email"))


class TrustedRedirectResponse(HttpResponseRedirect):
    """
    Redirect that is meant to leave the site.

    Only used to send users to the LinkedIn authorization page.
    """

    allowed_schemes = ["https"]


class LinkedinAuthMixin:
    """Components shared by the LinkedIn views."""

    request: HttpRequest

    def setup(self, request: HttpRequest, *args: Any, **kwargs: Any) -> None:
        """Set up the components for this request."""
        assert isinstance(self, View)
        super().setup(request, *args, **kwargs)
        self.network = LinkedinAuthNetwork()
        self.linkedin_manager = LinkedinAuthManager()
        self.persistent_data_handler = LinkedinAuthPersistentDataHandler(
            request
        )

    def get_client(self) -> LinkedinClient:
        """
        Create the LinkedIn client.

        :raises ConfigurationError: if the module is not configured
        """
        return self.network.create_client(self.request)

    def login_failed(self, exc: LinkedinAuthError) -> HttpResponseBase:
        """Send the user back to the login page with an error message."""
        messages.error(self.request, exc.user_message)
        return redirect(settings.LOGIN_URL)


@method_decorator(never_cache, name="dispatch")
class LinkedinAuthRedirectView(LinkedinAuthMixin, View):
    """Redirect the user to LinkedIn for authentication."""

    def get(
        self, request: HttpRequest, *args: Any, **kwargs: Any
    ) -> HttpResponseBase:
        """Generate the authorization URL and redirect to it."""
        try:
            client = self.get_client()
        except ConfigurationError as exc:
            log.error("cannot start LinkedIn login: %s", exc)
            return self.login_failed(exc)

        self.linkedin_manager.set_client(client)
        authorization = self.linkedin_manager.get_authorization_request()

        # Replaces the state of any previous attempt
        self.persistent_data_handler.set("oAuth2State", authorization.state)

        return TrustedRedirectResponse(authorization.authorization_url)


@method_decorator(never_cache, name="dispatch")
class LinkedinAuthCallbackView(LinkedinAuthMixin, View):
    """
    Handle the user coming back from LinkedIn.

    If successful, the LinkedIn profile is passed to the user manager, which
    logs in the matching local user.
    """

    def setup(self, request: HttpRequest, *args: Any, **kwargs: Any) -> None:
        """Set up the user manager for this request."""
        super().setup(request, *args, **kwargs)
        self.user_manager: SocialAuthUserManager = get_user_manager(request)
        self.user_manager.set_plugin_id(PLUGIN_ID)
        # Forget the access token if the user cannot be logged in
        self.user_manager.set_session_keys_to_nullify(
            [self.persistent_data_handler.session_key("access_token")]
        )

    def _validate(self) -> LinkedinProfile:
        """
        Validate the callback and fetch the LinkedIn profile.

        :raises LinkedinAuthError: if the login cannot proceed
        """
        params = self.request.GET

        error = params.get("error")
        if error == "access_denied":
            raise UserCancelledError("user declined access on LinkedIn")

        client = self.get_client()

        expected_state = self.persistent_data_handler.get("oAuth2State")

        if error:
            raise ProviderReportedError(
                f"LinkedIn reported an error: {error!r}"
                f" ({params.get('error_description', '')})"
            )

        remote_state = params.get("state")
        if (
            not remote_state
            or expected_state is None
            or not constant_time_compare(remote_state, expected_state)
        ):
            self.persistent_data_handler.delete("oAuth2State")
            raise StateMismatchError(
                "Request state mismatch:"
                f" remote: {remote_state!r},"
                f" expected: {expected_state!r}"
            )

        # The state can only be used once
        self.persistent_data_handler.delete("oAuth2State")

        if not (code := params.get("code")):
            raise ProfileFetchError("authorization code missing in callback")

        self.linkedin_manager.set_client(client).authenticate(code)
        return self.linkedin_manager.get_user_info()

    def collect_data_points(self, profile: LinkedinProfile) -> dict[str, Any]:
        """
        Collect the configured data points.

        ``name`` and ``email`` are already part of the profile, and no other
        data point is supported.
        """
        data: dict[str, Any] = {}
        for data_point in self.network.settings.data_points_list():
            if data_point in SUPPORTED_DATA_POINTS:
                continue
            log.warning(
                "Failed to fetch data point. Invalid data point: %s",
                data_point,
            )
        return data

    def get(
        self, request: HttpRequest, *args: Any, **kwargs: Any
    ) -> HttpResponseBase:
        """Validate the callback and log the user in."""
        try:
            profile = self._validate()
        except UserCancelledError as exc:
            log.info("LinkedIn login cancelled: %s", exc)
            return self.login_failed(exc)
        except ConfigurationError as exc:
            log.error("cannot complete LinkedIn login: %s", exc)
            return self.login_failed(exc)
        except ProfileFetchError as exc:
            log.error("LinkedIn login failed: %s", exc, exc_info=exc)
            return self.login_failed(exc)
        except LinkedinAuthError as exc:
            log.warning("LinkedIn login failed: %s", exc)
            return self.login_failed(exc)

        if profile.email and not profile.email_verified:
            log.warning(
                "%s: ignoring unverified LinkedIn email %s",
                profile.provider_user_id,
                profile.email,
            )

        data = self.collect_data_points(profile)

        self.persistent_data_handler.set(
            "access_token", self.linkedin_manager.get_access_token()
        )

        return self.user_manager.authenticate_user(
            profile.display_name,
            profile.verified_email,
            PLUGIN_ID,
            profile.provider_user_id,
            profile.image_url,
            json.dumps(data),
        )
