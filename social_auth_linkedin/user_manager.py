# Copyright © The social-auth-linkedin Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of social-auth-linkedin. It is subject to the license
# terms in the LICENSE file found in the top-level directory of this
# distribution. No part of social-auth-linkedin, including this file, may be
# copied, modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""
Map identities from social login providers to local users.

The class used can be customized with the SOCIAL_AUTH_USER_MANAGER variable in
django settings, which is expected to be the dotted path to a subclass of
:py:class:`SocialAuthUserManager`. For example::

    SOCIAL_AUTH_USER_MANAGER = "mysite.signon.MySocialAuthUserManager"
"""

import logging
from collections.abc import Iterable

import django.http
from django.conf import settings
from django.contrib import auth, messages
from django.contrib.auth.backends import ModelBackend
from django.contrib.auth.hashers import make_password
from django.contrib.auth.models import AbstractBaseUser
from django.core.exceptions import ImproperlyConfigured, ValidationError
from django.db import transaction
from django.http import HttpResponseBase
from django.shortcuts import redirect
from django.utils.module_loading import import_string

from social_auth_linkedin.models import SocialAuthIdentity

log = logging.getLogger(__name__)

#: Backend recorded in the session for users logged in by this module
AUTH_BACKEND = "social_auth_linkedin.auth.SocialAuthBackend"


class AuthenticationFailed(Exception):
    """Exception raised when unable to map an identity to a user."""


class SocialAuthUserManager:
    """
    Log in, bind or create local users for social login identities.

    One instance is created for each request.
    """

    def __init__(self, request: django.http.HttpRequest) -> None:
        """Create a user manager for a request."""
        self.request = request
        self.plugin_id: str | None = None
        self.session_keys_to_nullify: list[str] = []

    def set_plugin_id(self, plugin_id: str) -> None:
        """Set the identifier of the provider plugin using this manager."""
        self.plugin_id = plugin_id

    def get_plugin_id(self) -> str | None:
        """Return the identifier of the provider plugin."""
        return self.plugin_id

    def set_session_keys_to_nullify(self, keys: Iterable[str]) -> None:
        """Set the session keys to remove if the login fails."""
        self.session_keys_to_nullify = list(keys)

    def nullify_session_keys(self) -> None:
        """Remove the registered session keys."""
        for key in self.session_keys_to_nullify:
            self.request.session.pop(key, None)

    def authenticate_user(
        self,
        name: str,
        email: str,
        provider_key: str,
        provider_user_id: str,
        image_url: str | None = None,
        extra_data: str | None = None,
    ) -> HttpResponseBase:
        """
        Log in the local user for an identity, creating it if needed.

        :param name: full name of the user
        :param email: email address of the user
        :param provider_key: identifier of the login provider
        :param provider_user_id: identifier of the user in the provider
        :param image_url: URL of the user picture
        :param extra_data: JSON-encoded data points to store
        :return: the response to send to the user
        """
        try:
            with transaction.atomic():
                identity = self.get_identity(
                    name, email, provider_key, provider_user_id
                )
                identity.image_url = image_url or ""
                identity.additional_data = extra_data or ""
                identity.save()
                self.login_user(identity)
        except AuthenticationFailed as exc:
            log.warning(
                "%s:%s: login failed: %s", provider_key, provider_user_id, exc
            )
            return self.login_failed(f"Login failed: {exc}")

        return redirect(self.get_login_redirect_url())

    def get_identity(
        self, name: str, email: str, provider_key: str, provider_user_id: str
    ) -> SocialAuthIdentity:
        """Look up the identity, binding it to a user if it is new."""
        try:
            identity = SocialAuthIdentity.objects.select_related("user").get(
                provider_key=provider_key, provider_user_id=provider_user_id
            )
        except SocialAuthIdentity.DoesNotExist:
            pass
        else:
            if (
                self.request.user.is_authenticated
                and identity.user != self.request.user
            ):
                raise AuthenticationFailed(
                    f"identity {identity} is bound to a different user"
                )
            return identity

        identity = SocialAuthIdentity(
            provider_key=provider_key, provider_user_id=provider_user_id
        )
        if self.request.user.is_authenticated:
            log.info("%s: auto associated to %s", self.request.user, identity)
            identity.user = self.request.user
            return identity

        # First lookup an existing user
        if (user := self.lookup_user(email)) is not None:
            log.info("%s: user matched to identity %s", user, identity)
        else:
            user = self.create_user(name, email)
            log.info("%s: auto created from identity %s", user, identity)

        identity.user = user
        return identity

    def lookup_user(self, email: str) -> AbstractBaseUser | None:
        """Look up an existing user by email."""
        if not email:
            return None
        User = auth.get_user_model()
        try:
            return User.objects.get(email__iexact=email)
        except User.DoesNotExist:
            return None
        except User.MultipleObjectsReturned:
            raise AuthenticationFailed(
                f"more than one user has email {email!r}"
            )

    def create_user(self, name: str, email: str) -> AbstractBaseUser:
        """Create a local user from the data of a social login."""
        if not email:
            raise AuthenticationFailed(
                "cannot create a local user without an email address"
            )

        User = auth.get_user_model()
        first_name, last_name = self.split_name(name)

        # Django does not run validators on create_user, so validation is done
        # explicitly before save
        user = User(
            username=User.normalize_username(email),
            email=User.objects.normalize_email(email),
            first_name=first_name,
            last_name=last_name,
        )
        user.password = make_password(None)

        try:
            user.clean_fields()
            user.validate_unique()
        except ValidationError as e:
            log.warning("%s: cannot create a local user", email, exc_info=e)
            raise AuthenticationFailed(
                f"cannot create a local user for {email!r}"
            )

        user.save()
        return user

    def split_name(self, name: str) -> tuple[str, str]:
        """
        Split a display name into (first_name, last_name).

        Display names are the first and last name joined by a space, and
        either of them can be empty. The last word is taken as the last name.
        """
        if name.startswith(" "):
            return "", name.strip()
        first_name, _, last_name = name.rstrip().rpartition(" ")
        if not first_name:
            return last_name, ""
        return first_name.strip(), last_name

    def login_user(self, identity: SocialAuthIdentity) -> None:
        """Log in the user bound to the identity."""
        backend = auth.load_backend(AUTH_BACKEND)
        assert isinstance(backend, ModelBackend)
        if not backend.user_can_authenticate(identity.user):
            raise AuthenticationFailed("user is not allowed to log in")

        if self.request.user == identity.user:
            return

        log.debug("logging in user %s", identity.user)
        auth.login(self.request, identity.user, backend=AUTH_BACKEND)

    def login_failed(self, message: str) -> HttpResponseBase:
        """Abort the login, and send the user back to the login page."""
        self.nullify_session_keys()
        messages.error(self.request, message)
        return redirect(settings.LOGIN_URL)

    def get_login_redirect_url(self) -> str:
        """Return where to send the user after a successful login."""
        return getattr(
            settings,
            "SOCIAL_AUTH_LINKEDIN_LOGIN_REDIRECT",
            settings.LOGIN_REDIRECT_URL,
        )


def get_user_manager(request: django.http.HttpRequest) -> SocialAuthUserManager:
    """
    Create the user manager for a request.

    :raises ImproperlyConfigured: if SOCIAL_AUTH_USER_MANAGER does not point
        to a subclass of SocialAuthUserManager
    """
    if (
        class_path := getattr(settings, "SOCIAL_AUTH_USER_MANAGER", None)
    ) is None:
        return SocialAuthUserManager(request)

    user_manager_class = import_string(class_path)
    if not isinstance(user_manager_class, type) or not issubclass(
        user_manager_class, SocialAuthUserManager
    ):
        raise ImproperlyConfigured(
            f"{class_path} is not a subclass of SocialAuthUserManager"
        )
    return user_manager_class(request)
