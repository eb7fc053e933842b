# Copyright © The social-auth-linkedin Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of social-auth-linkedin. It is subject to the license
# terms in the LICENSE file found in the top-level directory of this
# distribution. No part of social-auth-linkedin, including this file, may be
# copied, modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Database models for social_auth_linkedin."""

from django.conf import settings
from django.db import models
from django.db.models import UniqueConstraint


class SocialAuthIdentity(models.Model):
    """Link between a local user and a user of a social login provider."""

    class Meta:
        constraints = [
            UniqueConstraint(
                fields=["provider_key", "provider_user_id"],
                name="%(app_label)s_%(class)s_unique_provider_user",
            ),
        ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        related_name="social_auth_identities",
        on_delete=models.CASCADE,
    )
    provider_key = models.CharField(
        max_length=128, help_text="identifier of the login provider"
    )
    provider_user_id = models.CharField(
        max_length=512,
        help_text="identifier of the user in the provider system",
    )
    image_url = models.URLField(max_length=1024, blank=True)
    additional_data = models.TextField(
        blank=True, help_text="JSON-encoded data points collected on login"
    )
    created = models.DateTimeField(auto_now_add=True)
    last_used = models.DateTimeField(
        auto_now=True, help_text="last time this identity has been used"
    )

    def __str__(self) -> str:
        """Return str for the object."""
        return f"{self.provider_key}:{self.provider_user_id}"
