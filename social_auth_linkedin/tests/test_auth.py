# Copyright © The social-auth-linkedin Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of social-auth-linkedin. It is subject to the license
# terms in the LICENSE file found in the top-level directory of this
# distribution. No part of social-auth-linkedin, including this file, may be
# copied, modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Tests for SocialAuthBackend."""

from django.contrib.auth import get_user_model
from django.test import RequestFactory, TestCase

from social_auth_linkedin.auth import SocialAuthBackend


class SocialAuthBackendTests(TestCase):
    """Tests for SocialAuthBackend."""

    def setUp(self) -> None:
        """Create a user with a password."""
        super().setUp()
        self.user = get_user_model().objects.create_user(
            "jane", email="jane@example.com", password="secret"
        )

    def test_no_password_authentication(self) -> None:
        """Valid credentials are not accepted by this backend."""
        request = RequestFactory().post("/login/")
        self.assertIsNone(
            SocialAuthBackend().authenticate(
                request, username="jane", password="secret"
            )
        )

    def test_get_user(self) -> None:
        """Users of the session are still loaded."""
        self.assertEqual(SocialAuthBackend().get_user(self.user.pk), self.user)
