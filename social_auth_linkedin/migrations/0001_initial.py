# Copyright © The social-auth-linkedin Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of social-auth-linkedin. It is subject to the license
# terms in the LICENSE file found in the top-level directory of this
# distribution. No part of social-auth-linkedin, including this file, may be
# copied, modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="SocialAuthIdentity",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "provider_key",
                    models.CharField(
                        help_text="identifier of the login provider",
                        max_length=128,
                    ),
                ),
                (
                    "provider_user_id",
                    models.CharField(
                        help_text="identifier of the user in the provider system",
                        max_length=512,
                    ),
                ),
                (
                    "image_url",
                    models.URLField(blank=True, max_length=1024),
                ),
                (
                    "additional_data",
                    models.TextField(
                        blank=True,
                        help_text="JSON-encoded data points collected on login",
                    ),
                ),
                ("created", models.DateTimeField(auto_now_add=True)),
                (
                    "last_used",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="last time this identity has been used",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=models.CASCADE,
                        related_name="social_auth_identities",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
        ),
        migrations.AddConstraint(
            model_name="socialauthidentity",
            constraint=models.UniqueConstraint(
                fields=("provider_key", "provider_user_id"),
                name="social_auth_linkedin_socialauthidentity_unique_provider_user",
            ),
        ),
    ]
