# Copyright © The social-auth-linkedin Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of social-auth-linkedin. It is subject to the license
# terms in the LICENSE file found in the top-level directory of this
# distribution. No part of social-auth-linkedin, including this file, may be
# copied, modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Tests for the social_auth_linkedin configuration checks."""

from django.test import SimpleTestCase, override_settings

from social_auth_linkedin.checks import linkedin_credentials_check


class LinkedinCredentialsCheckTests(SimpleTestCase):
    """Tests for linkedin_credentials_check."""

    def test_configured(self) -> None:
        """No warnings if client id and secret are set."""
        self.assertEqual(linkedin_credentials_check(None), [])

    def test_missing(self) -> None:
        """Missing values are reported."""
        for config, missing in (
            ({}, "CLIENT_ID, CLIENT_SECRET"),
            ({"CLIENT_ID": "id"}, "CLIENT_SECRET"),
            ({"CLIENT_ID": "", "CLIENT_SECRET": "secret"}, "CLIENT_ID"),
        ):
            with (
                self.subTest(config=config),
                override_settings(SOCIAL_AUTH_LINKEDIN=config),
            ):
                warnings = linkedin_credentials_check(None)
                self.assertEqual(len(warnings), 1)
                self.assertEqual(warnings[0].id, "social_auth_linkedin.W001")
                self.assertEqual(
                    warnings[0].msg, f"SOCIAL_AUTH_LINKEDIN is missing {missing}"
                )
