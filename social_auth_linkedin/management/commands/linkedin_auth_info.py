# Copyright © The social-auth-linkedin Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of social-auth-linkedin. It is subject to the license
# terms in the LICENSE file found in the top-level directory of this
# distribution. No part of social-auth-linkedin, including this file, may be
# copied, modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Command to print the values to register in the LinkedIn app."""

import argparse
from typing import Any

from django.core.management import BaseCommand, CommandError

from social_auth_linkedin.settings import LinkedinAuthSettings


class Command(BaseCommand):
    """Command to show the LinkedIn app setup values."""

    help = "Show the values to copy into the LinkedIn app settings"

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Add CLI arguments for the linkedin_auth_info command."""
        parser.add_argument(
            "--base-url",
            help="Public URL of the site (default: SOCIAL_AUTH_LINKEDIN"
            " BASE_URL setting)",
        )

    def handle(self, *args: Any, **options: Any) -> None:
        """Show the LinkedIn app setup values."""
        settings = LinkedinAuthSettings.load()
        if options["base_url"]:
            settings.base_url = options["base_url"].rstrip("/")
        if settings.base_url is None:
            raise CommandError(
                "Set BASE_URL in SOCIAL_AUTH_LINKEDIN or use --base-url",
                returncode=3,
            )

        self.stdout.write(
            f" * Valid OAuth redirect URIs = {settings.redirect_uri()}"
        )
        self.stdout.write(f" * App Domains = {settings.app_domain()}")
        self.stdout.write(f" * Site URL = {settings.site_url()}")
        self.stdout.write()
        if settings.client_id and settings.client_secret:
            self.stdout.write("Client ID and Client Secret are configured.")
        else:
            self.stdout.write(
                "Client ID and Client Secret are not configured: copy them"
                " from https://developers.linkedin.com/apps into"
                " SOCIAL_AUTH_LINKEDIN."
            )
