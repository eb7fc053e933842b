# Copyright © The social-auth-linkedin Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of social-auth-linkedin. It is subject to the license
# terms in the LICENSE file found in the top-level directory of this
# distribution. No part of social-auth-linkedin, including this file, may be
# copied, modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""URLs for logging in with LinkedIn."""

from django.urls import path

from social_auth_linkedin.views import (
    LinkedinAuthCallbackView,
    LinkedinAuthRedirectView,
)

app_name = "social_auth_linkedin"

urlpatterns = [
    path(
        "user/login/linkedin",
        LinkedinAuthRedirectView.as_view(),
        name="redirect",
    ),
    path(
        "user/login/linkedin/callback",
        LinkedinAuthCallbackView.as_view(),
        name="callback",
    ),
]
