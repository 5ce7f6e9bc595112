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
"""SessionStore — per-request session lifecycle on top of a SessionHandler."""

from __future__ import annotations

import logging
import random as _random
import time
from collections.abc import Callable, Iterable, Sequence
from enum import StrEnum
from typing import Any

from sessionfly.kernel.exceptions import (
    InvalidConfigurationException,
    SessionFinishedException,
    SessionNotStartedException,
)
from sessionfly.logging.masking import mask_session_id
from sessionfly.session.cookies import CookieJar
from sessionfly.session.ports.outbound import CookieConfigurable, SessionHandler, Sweeper
from sessionfly.session.record import SessionRecord, generate_session_id

_logger = logging.getLogger("sessionfly.session")

DEFAULT_COOKIE_NAME = "illuminate_session"
DEFAULT_LIFETIME = 120  # minutes
DEFAULT_LOTTERY = (2, 100)

_COOKIE_OPTIONS = frozenset({"name", "path", "domain", "secure", "http_only", "same_site"})
_MISSING = object()


class SessionState(StrEnum):
    UNSTARTED = "unstarted"
    LOADED = "loaded"
    FINISHED = "finished"


class SessionStore:
    """Loads, exposes and persists one request's session.

    ``start()`` reads the session-id cookie and asks the handler for the
    record, falling back to a fresh one when it is missing, malformed or
    expired. Handler code then works through :meth:`get`, :meth:`put`,
    :meth:`flash` and friends. ``finish()`` ages flash data, creates or
    updates the record, occasionally sweeps expired records, and attaches
    the session-id cookie to the response.

    Use one instance per request, or call :meth:`reset` between requests.

    Args:
        handler: Persistence strategy.
        cookie_jar: Cookie factory; defaults to the handler's jar when it has
            one. Its options, and later lifetime or cookie option changes,
            are pushed into handlers that write their own cookies.
        clock: Returns the current unix time in seconds.
        random: Source for the sweep lottery draw.
        id_factory: Returns new session ids.
        lifetime: Session lifetime in minutes.
        lottery: ``(chance, out_of)`` odds of sweeping on ``finish()``.
        cookie_name: Name of the session-id cookie.
    """

    def __init__(
        self,
        handler: SessionHandler,
        *,
        cookie_jar: CookieJar | None = None,
        clock: Callable[[], float] = time.time,
        random: _random.Random | None = None,
        id_factory: Callable[[], str] = generate_session_id,
        lifetime: int = DEFAULT_LIFETIME,
        lottery: Sequence[int] = DEFAULT_LOTTERY,
        cookie_name: str = DEFAULT_COOKIE_NAME,
    ) -> None:
        self._handler = handler
        self._cookies = cookie_jar or getattr(handler, "cookie_jar", None) or CookieJar()
        self._clock = clock
        self._random = random or _random.SystemRandom()
        self._id_factory = id_factory
        self._cookie_name = cookie_name
        self._record: SessionRecord | None = None
        self._exists = True
        self._state = SessionState.UNSTARTED
        self.set_lifetime(lifetime)
        self.set_sweep_lottery(*lottery)
        self._push_cookie_options(
            path=self._cookies.path,
            domain=self._cookies.domain,
            secure=self._cookies.secure,
            http_only=self._cookies.http_only,
            same_site=self._cookies.same_site,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self, request: Any) -> None:
        """Load the session for *request*, or fabricate a fresh one."""
        cookies = getattr(request, "cookies", None) or {}
        session_id = cookies.get(self._cookie_name)

        record = None
        if session_id:
            record = await self._handler.retrieve(session_id, request)

        if self.is_invalid(record):
            self._exists = False
            record = SessionRecord.fresh(self._id_factory())
            _logger.debug("Started new session %s", mask_session_id(record.id))
        else:
            self._exists = True
            _logger.debug("Resumed session %s", mask_session_id(record.id))

        self._record = record
        self._state = SessionState.LOADED

    async def finish(self, response: Any) -> None:
        """Persist the session and attach the session-id cookie to *response*.

        If the handler fails to persist, the record is rolled back to its
        pre-finish state and the error propagates; ``finish`` can be retried.

        Raises:
            SessionFinishedException: if the session was already finished.
        """
        record = self._require_record()
        if self._state is SessionState.FINISHED:
            raise SessionFinishedException(context={"session_id": mask_session_id(record.id)})
        now = self._clock()

        last_activity, old, new = record.last_activity, record.flash.old, record.flash.new
        record.last_activity = int(now)
        self.age_flash_data()

        try:
            if self._exists:
                await self._handler.update(record.id, record, response)
            else:
                await self._handler.create(record.id, record, response)
        except Exception:
            record.last_activity = last_activity
            record.flash.old, record.flash.new = old, new
            raise

        if isinstance(self._handler, Sweeper) and self.hits_sweep_lottery():
            await self._sweep(now - self.lifetime_seconds)

        cookie = self._cookies.make(self._cookie_name, record.id, minutes=self._lifetime, now=now)
        self._cookies.attach(response, cookie)

        self._exists = True
        self._state = SessionState.FINISHED

    def reset(self) -> None:
        """Drop the loaded record so the instance can serve another request."""
        self._record = None
        self._exists = True
        self._state = SessionState.UNSTARTED

    def is_invalid(self, record: Any) -> bool:
        """True if *record* is missing, malformed or expired."""
        return not isinstance(record, SessionRecord) or self.is_expired(record)

    def is_expired(self, record: SessionRecord) -> bool:
        """True once more than ``lifetime`` minutes passed since the last write.

        A record that was never written has not expired. A last write in the
        future (clock moved backwards) counts as expired.
        """
        if record.last_activity is None:
            return False
        elapsed = self._clock() - record.last_activity
        return elapsed < 0 or elapsed > self.lifetime_seconds

    def hits_sweep_lottery(self) -> bool:
        chance, out_of = self._lottery
        return self._random.randint(1, out_of) <= chance

    async def _sweep(self, expiration: float) -> None:
        try:
            await self._handler.sweep(expiration)  # type: ignore[attr-defined]
        except Exception:
            _logger.warning("Session sweep failed; continuing with the request", exc_info=True)

    # ------------------------------------------------------------------
    # Data access
    # ------------------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        """Return *key* from the data, then new flash, then old flash.

        A callable *default* is only invoked when the key is missing.
        """
        value = self._resolve(key)
        if value is not _MISSING:
            return value
        return default() if callable(default) else default

    def has(self, key: str) -> bool:
        return self._resolve(key) is not _MISSING

    def all(self) -> dict[str, Any]:
        """Return a copy of the regular (non-flash) session data."""
        return dict(self._require_record().data)

    def put(self, key: str, value: Any) -> None:
        self._require_record().data[key] = value

    def forget(self, key: str) -> None:
        self._require_record().data.pop(key, None)

    def flush(self) -> None:
        """Remove all data, flash included."""
        record = self._require_record()
        record.data = {}
        record.flash.clear()

    def flash(self, key: str, value: Any) -> None:
        """Store *value* for the rest of this request and the next one."""
        self._require_record().flash.new[key] = value

    def reflash(self) -> None:
        """Keep every old flash value for one more request."""
        flash = self._require_record().flash
        flash.new = {**flash.old, **flash.new}

    def keep(self, keys: str | Iterable[str]) -> None:
        """Keep the given values around for one more request; unknown keys are skipped."""
        if isinstance(keys, str):
            keys = [keys]
        flash = self._require_record().flash
        for key in keys:
            value = self._resolve(key)
            if value is not _MISSING:
                flash.new[key] = value

    def age_flash_data(self) -> None:
        self._require_record().flash.age()

    def regenerate(self) -> str:
        """Assign a new session id; the record will be created, not updated."""
        record = self._require_record()
        old_id = record.id
        record.id = self._id_factory()
        self._exists = False
        _logger.debug("Regenerated session %s -> %s", mask_session_id(old_id), mask_session_id(record.id))
        return record.id

    def _resolve(self, key: str) -> Any:
        record = self._require_record()
        for bucket in (record.data, record.flash.new, record.flash.old):
            if key in bucket:
                return bucket[key]
        return _MISSING

    def _require_record(self) -> SessionRecord:
        if self._record is None:
            raise SessionNotStartedException()
        return self._record

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def handler(self) -> SessionHandler:
        return self._handler

    @property
    def cookie_jar(self) -> CookieJar:
        return self._cookies

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def exists(self) -> bool:
        return self._exists

    @property
    def session_id(self) -> str | None:
        return self._record.id if self._record is not None else None

    @property
    def record(self) -> SessionRecord | None:
        return self._record

    def get_session(self) -> SessionRecord:
        return self._require_record()

    def set_session(self, record: SessionRecord) -> None:
        """Install *record* directly, as if ``start()`` had loaded it."""
        self._record = record
        self._state = SessionState.LOADED

    def set_exists(self, exists: bool) -> None:
        self._exists = exists

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def lifetime(self) -> int:
        """Session lifetime in minutes."""
        return self._lifetime

    @property
    def lifetime_seconds(self) -> int:
        return self._lifetime * 60

    def set_lifetime(self, minutes: int) -> None:
        if minutes <= 0:
            raise InvalidConfigurationException(
                "Session lifetime must be a positive number of minutes",
                context={"lifetime": minutes},
            )
        self._lifetime = minutes
        self._cookies.minutes = minutes
        self._push_cookie_options(minutes=minutes)

    @property
    def sweep_lottery(self) -> tuple[int, int]:
        return self._lottery

    def set_sweep_lottery(self, chance: int | Sequence[int], out_of: int | None = None) -> None:
        """Set the sweep odds, as ``(2, 100)`` or ``([2, 100])``."""
        if out_of is None:
            chance, out_of = chance  # type: ignore[misc]
        if out_of <= 0 or chance < 0:  # type: ignore[operator]
            raise InvalidConfigurationException(
                "Sweep lottery needs 0 <= chance and 0 < out_of",
                context={"chance": chance, "out_of": out_of},
            )
        self._lottery = (int(chance), int(out_of))  # type: ignore[arg-type]

    @property
    def cookie_name(self) -> str:
        return self._cookie_name

    def set_cookie_name(self, name: str) -> None:
        self._cookie_name = name

    def get_cookie_option(self, option: str) -> Any:
        self._check_cookie_option(option)
        if option == "name":
            return self._cookie_name
        return getattr(self._cookies, option)

    def set_cookie_option(self, option: str, value: Any) -> None:
        """Set one of ``name``, ``path``, ``domain``, ``secure``, ``http_only``, ``same_site``."""
        self._check_cookie_option(option)
        if option == "name":
            self.set_cookie_name(value)
        else:
            self._cookies.set_defaults(**{option: value})
            self._push_cookie_options(**{option: value})

    def _push_cookie_options(self, **options: Any) -> None:
        if isinstance(self._handler, CookieConfigurable):
            self._handler.configure_cookie(**options)

    @staticmethod
    def _check_cookie_option(option: str) -> None:
        if option not in _COOKIE_OPTIONS:
            raise InvalidConfigurationException(
                f"Unknown session cookie option '{option}'",
                context={"option": option, "allowed": sorted(_COOKIE_OPTIONS)},
            )
