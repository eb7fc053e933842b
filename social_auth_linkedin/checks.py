# Copyright © The social-auth-linkedin Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of social-auth-linkedin. It is subject to the license
# terms in the LICENSE file found in the top-level directory of this
# distribution. No part of social-auth-linkedin, including this file, may be
# copied, modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""social_auth_linkedin checks using Django checks framework."""

from collections.abc import Sequence
from typing import Any

from django.apps.config import AppConfig
from django.conf import settings
from django.core.checks import Warning, register


@register()
def linkedin_credentials_check(
    app_configs: Sequence[AppConfig] | None, **kwargs: Any  # noqa: U100
) -> list[Warning]:
    """Check that the LinkedIn client id and secret are configured."""
    config = getattr(settings, "SOCIAL_AUTH_LINKEDIN", {})
    missing = [
        name
        for name in ("CLIENT_ID", "CLIENT_SECRET")
        if not config.get(name)
    ]
    if not missing:
        return []
    return [
        Warning(
            "SOCIAL_AUTH_LINKEDIN is missing " + ", ".join(missing),
            hint=(
                "Copy the values from the LinkedIn app at"
                " https://developers.linkedin.com/apps"
            ),
            id="social_auth_linkedin.W001",
        )
    ]
