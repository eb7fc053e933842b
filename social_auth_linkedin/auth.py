# Copyright © The social-auth-linkedin Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of social-auth-linkedin. It is subject to the license
# terms in the LICENSE file found in the top-level directory of this
# distribution. No part of social-auth-linkedin, including this file, may be
# copied, modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Authentication backend recorded in the session of LinkedIn logins."""

from typing import Any

from django.contrib.auth.backends import ModelBackend
from django.contrib.auth.models import AbstractBaseUser
from django.http import HttpRequest


class SocialAuthBackend(ModelBackend):
    """
    Backend of users logged in by :py:mod:`social_auth_linkedin.user_manager`.

    Users are logged in explicitly after LinkedIn vouched for them, so this
    backend never checks credentials itself. It still loads the user of the
    session and its permissions like ModelBackend does.
    """

    def authenticate(
        self,
        request: HttpRequest | None,
        username: str | None = None,
        password: str | None = None,
        **kwargs: Any,
    ) -> AbstractBaseUser | None:
        """Refuse username/password authentication."""
        return None
