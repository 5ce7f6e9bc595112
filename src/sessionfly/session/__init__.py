# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""SessionFly Session — request-scoped sessions with flash data and pluggable handlers.

Import concrete handlers from the adapter package::

    from sessionfly.session.adapters.cache import CacheSessionHandler
    from sessionfly.session.adapters.cookie import EncryptedCookieSessionHandler
    from sessionfly.session.adapters.file import FileSessionHandler
"""

from sessionfly.session.cookies import CookieJar, SessionCookie
from sessionfly.session.encryption import Encrypter, FernetEncrypter
from sessionfly.session.ports.outbound import CookieConfigurable, SessionHandler, Sweeper
from sessionfly.session.properties import CookieProperties, SessionProperties
from sessionfly.session.record import FlashBags, SessionRecord, generate_session_id
from sessionfly.session.serializer import JsonSessionSerializer, SessionSerializer
from sessionfly.session.store import SessionState, SessionStore

__all__ = [
    "CookieConfigurable",
    "CookieJar",
    "CookieProperties",
    "Encrypter",
    "FernetEncrypter",
    "FlashBags",
    "JsonSessionSerializer",
    "SessionCookie",
    "SessionHandler",
    "SessionProperties",
    "SessionRecord",
    "SessionSerializer",
    "SessionState",
    "SessionStore",
    "Sweeper",
    "generate_session_id",
]
