# Copyright © The social-auth-linkedin Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of social-auth-linkedin. It is subject to the license
# terms in the LICENSE file found in the top-level directory of this
# distribution. No part of social-auth-linkedin, including this file, may be
# copied, modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Tests for LinkedinAuthSettings."""

from django.test import RequestFactory, SimpleTestCase, override_settings

from social_auth_linkedin.settings import (
    DEFAULT_SCOPE,
    DEFAULT_TIMEOUT,
    LinkedinAuthSettings,
)


class LinkedinAuthSettingsTests(SimpleTestCase):
    """Tests for LinkedinAuthSettings."""

    def test_load(self) -> None:
        """Settings are read from SOCIAL_AUTH_LINKEDIN."""
        with override_settings(
            SOCIAL_AUTH_LINKEDIN={
                "CLIENT_ID": "id",
                "CLIENT_SECRET": "secret",
                "DATA_POINTS": "name",
                "SCOPE": "openid email",
                "BASE_URL": "https://example.org/",
                "TIMEOUT": 3,
            }
        ):
            settings = LinkedinAuthSettings.load()

        self.assertEqual(settings.client_id, "id")
        self.assertEqual(settings.client_secret, "secret")
        self.assertEqual(settings.data_points, "name")
        self.assertEqual(settings.scope, ("openid", "email"))
        self.assertEqual(settings.base_url, "https://example.org")
        self.assertEqual(settings.timeout, 3)

    def test_load_defaults(self) -> None:
        """Missing settings get default values."""
        with override_settings(SOCIAL_AUTH_LINKEDIN={}):
            settings = LinkedinAuthSettings.load()

        self.assertEqual(settings.client_id, "")
        self.assertEqual(settings.client_secret, "")
        self.assertEqual(settings.data_points, "name,email")
        self.assertEqual(settings.scope, DEFAULT_SCOPE)
        self.assertIsNone(settings.base_url)
        self.assertEqual(settings.timeout, DEFAULT_TIMEOUT)

    def test_load_is_resolved_once(self) -> None:
        """Changing django settings does not affect loaded settings."""
        settings = LinkedinAuthSettings.load()
        with override_settings(SOCIAL_AUTH_LINKEDIN={"CLIENT_ID": "other"}):
            self.assertEqual(settings.client_id, "123client_id")

    def test_secret_not_in_repr(self) -> None:
        """The client secret is not shown in repr."""
        settings = LinkedinAuthSettings(client_id="id", client_secret="secret")
        self.assertNotIn("client_secret", repr(settings))

    def test_is_valid(self) -> None:
        """Settings with client id and secret are valid."""
        settings = LinkedinAuthSettings(client_id="id", client_secret="secret")
        self.assertTrue(settings.is_valid())

    def test_is_valid_missing_values(self) -> None:
        """A missing client id or secret is logged and makes settings invalid."""
        for client_id, client_secret in (("", "secret"), ("id", ""), ("", "")):
            with self.subTest(client_id=client_id, client_secret=client_secret):
                settings = LinkedinAuthSettings(
                    client_id=client_id, client_secret=client_secret
                )
                with self.assertLogs(
                    "social_auth_linkedin.settings", level="ERROR"
                ) as logs:
                    self.assertFalse(settings.is_valid())
                self.assertEqual(
                    logs.output,
                    [
                        "ERROR:social_auth_linkedin.settings:"
                        "Define Client ID and Client Secret on module settings."
                    ],
                )

    def test_data_points_list(self) -> None:
        """Data points are split on commas, ignoring blanks."""
        settings = LinkedinAuthSettings(data_points=" name, email,,phone ")
        self.assertEqual(
            settings.data_points_list(), ["name", "email", "phone"]
        )
        settings = LinkedinAuthSettings(data_points="")
        self.assertEqual(settings.data_points_list(), [])

    def test_urls_from_base_url(self) -> None:
        """Derived URLs use BASE_URL when set."""
        settings = LinkedinAuthSettings(base_url="https://example.org")
        self.assertEqual(
            settings.redirect_uri(),
            "https://example.org/user/login/linkedin/callback",
        )
        self.assertEqual(settings.site_url(), "https://example.org")
        self.assertEqual(settings.app_domain(), "example.org")

    def test_urls_from_request(self) -> None:
        """Derived URLs use the request when BASE_URL is not set."""
        request = RequestFactory().get("/")
        settings = LinkedinAuthSettings()
        self.assertEqual(
            settings.redirect_uri(request),
            "http://testserver/user/login/linkedin/callback",
        )
        self.assertEqual(settings.site_url(request), "http://testserver")
        self.assertEqual(settings.app_domain(request), "testserver")

    def test_urls_without_base_url_or_request(self) -> None:
        """Derived URLs need either BASE_URL or a request."""
        settings = LinkedinAuthSettings()
        with self.assertRaisesRegex(ValueError, "BASE_URL is not set"):
            settings.redirect_uri()
        with self.assertRaisesRegex(ValueError, "BASE_URL is not set"):
            settings.site_url()
