# Copyright © The social-auth-linkedin Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of social-auth-linkedin. It is subject to the license
# terms in the LICENSE file found in the top-level directory of this
# distribution. No part of social-auth-linkedin, including this file, may be
# copied, modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Django Application Configuration for social_auth_linkedin."""

from django.apps import AppConfig


class SocialAuthLinkedinConfig(AppConfig):
    """Django's AppConfig for the social_auth_linkedin application."""

    name = "social_auth_linkedin"
    verbose_name = "Social Auth LinkedIn"
    default_auto_field = "django.db.models.BigAutoField"

    def ready(self) -> None:
        """Register the configuration checks."""
        import social_auth_linkedin.checks  # noqa: F401
