# Copyright © The social-auth-linkedin Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of social-auth-linkedin. It is subject to the license
# terms in the LICENSE file found in the top-level directory of this
# distribution. No part of social-auth-linkedin, including this file, may be
# copied, modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Session storage for values that survive the redirect to LinkedIn."""

from typing import Any

import django.http


class LinkedinAuthPersistentDataHandler:
    """
    Read and write values in the current session.

    Keys are namespaced with :py:attr:`session_prefix`, so that other login
    providers sharing the session do not collide with ours.
    """

    session_prefix = "social_auth_linkedin_"

    def __init__(self, request: django.http.HttpRequest) -> None:
        """Bind the handler to the session of ``request``."""
        self.session = request.session

    def session_key(self, key: str) -> str:
        """Return the session key used to store ``key``."""
        return f"{self.session_prefix}{key}"

    def get(self, key: str) -> Any:
        """Return the value stored for ``key``, or None."""
        return self.session.get(self.session_key(key))

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` for ``key``."""
        self.session[self.session_key(key)] = value

    def delete(self, key: str) -> None:
        """Remove ``key``, if present."""
        self.session.pop(self.session_key(key), None)
