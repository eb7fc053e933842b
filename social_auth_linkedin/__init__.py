# Copyright © The social-auth-linkedin Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of social-auth-linkedin. It is subject to the license
# terms in the LICENSE file found in the top-level directory of this
# distribution. No part of social-auth-linkedin, including this file, may be
# copied, modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Log in to a Django site with a LinkedIn account."""

# The OAuth2 protocol work is done by LinkedinAuthManager (manager.py) on a
# client built by LinkedinAuthNetwork (network.py). The two views in views.py
# drive it, and hand the resulting profile to a SocialAuthUserManager
# (user_manager.py), which owns the mapping to local accounts.
