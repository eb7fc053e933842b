# Copyright © The social-auth-linkedin Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of social-auth-linkedin. It is subject to the license
# terms in the LICENSE file found in the top-level directory of this
# distribution. No part of social-auth-linkedin, including this file, may be
# copied, modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Errors that can abort a LinkedIn login attempt."""

from django.core.exceptions import ImproperlyConfigured


class LinkedinAuthError(Exception):
    """
    Base class for failed LinkedIn login attempts.

    All of them end the same way: the user is sent back to the login page
    with ``user_message`` as an error message.
    """

    #: Message shown to the user
    user_message = "LinkedIn login failed."

    def __init__(self, message: str | None = None) -> None:
        """Store the log message, defaulting to the user message."""
        super().__init__(message or self.user_message)


class ConfigurationError(LinkedinAuthError, ImproperlyConfigured):
    """The LinkedIn client cannot be created with the current setup."""

    user_message = (
        "Social Auth LinkedIn not configured properly."
        " Contact site administrator."
    )


class UserCancelledError(LinkedinAuthError):
    """The user declined to grant access on LinkedIn."""

    user_message = "You could not be authenticated."


class ProviderReportedError(LinkedinAuthError):
    """LinkedIn redirected back with an error."""

    user_message = (
        "LinkedIn login failed. Probably User Declined Authentication."
    )


class StateMismatchError(LinkedinAuthError):
    """The callback state does not match the one stored in the session."""

    user_message = "LinkedIn login failed. Invalid OAuth2 state."


class ProfileFetchError(LinkedinAuthError):
    """The token exchange or the profile request failed."""

    user_message = (
        "LinkedIn login failed, could not load LinkedIn profile."
        " Contact site administrator."
    )
