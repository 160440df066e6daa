"""
Server-side Sessions

Session state lives in the `sessions` table; the browser only carries a
signed, opaque session id. The record expiry is pushed forward on every
request that saves the session.
"""

import logging
import secrets
from datetime import datetime

from flask import current_app, session
from flask.json.tag import TaggedJSONSerializer
from flask.sessions import SessionInterface, SessionMixin
from itsdangerous import BadSignature, Signer
from werkzeug.datastructures import CallbackDict

from authdash.extensions import db
from authdash.models import ServerSession

logger = logging.getLogger(__name__)


class ServerSideSession(CallbackDict, SessionMixin):
    """Session dict that remembers its id and whether it was modified."""

    def __init__(self, initial=None, sid=None, new=False):
        def on_update(self):
            self.modified = True
        CallbackDict.__init__(self, initial, on_update)
        self.sid = sid
        self.new = new
        self.modified = False


class DatabaseSessionInterface(SessionInterface):
    """Stores session data in the database, keyed by a random id."""

    session_class = ServerSideSession
    serializer = TaggedJSONSerializer()
    salt = 'authdash-session'
    sid_bytes = 32

    def generate_sid(self):
        return secrets.token_urlsafe(self.sid_bytes)

    def get_signer(self, app):
        if not app.secret_key:
            return None
        return Signer(app.secret_key, salt=self.salt, key_derivation='hmac')

    def _new_session(self):
        return self.session_class(sid=self.generate_sid(), new=True)

    def open_session(self, app, request):
        signer = self.get_signer(app)
        if signer is None:
            # Flask falls back to a NullSession and reports the missing secret
            return None

        cookie = request.cookies.get(self.get_cookie_name(app))
        if not cookie:
            return self._new_session()

        try:
            sid = signer.unsign(cookie).decode('utf-8')
        except BadSignature:
            logger.debug('Ignoring session cookie with a bad signature')
            return self._new_session()

        record = db.session.get(ServerSession, sid)
        if record is None:
            return self._new_session()

        if record.is_expired():
            logger.debug('Session %s... expired at %s', sid[:8], record.expiry)
            db.session.delete(record)
            db.session.commit()
            return self._new_session()

        try:
            data = self.serializer.loads(record.data)
        except ValueError:
            logger.warning('Discarding unreadable data for session %s...', sid[:8])
            return self._new_session()

        return self.session_class(data, sid=sid)

    def save_session(self, app, session, response):
        name = self.get_cookie_name(app)
        domain = self.get_cookie_domain(app)
        path = self.get_cookie_path(app)
        secure = self.get_cookie_secure(app)
        samesite = self.get_cookie_samesite(app)
        httponly = self.get_cookie_httponly(app)

        if session.accessed:
            response.vary.add('Cookie')

        # Emptied during this request: drop the record and the cookie
        if not session:
            if session.modified:
                if not session.new:
                    self._delete_record(session.sid)
                response.delete_cookie(name, domain=domain, path=path,
                                       secure=secure, samesite=samesite, httponly=httponly)
            return

        if not self.should_set_cookie(app, session):
            return

        record = db.session.get(ServerSession, session.sid)
        if record is None:
            record = ServerSession(sid=session.sid)
            db.session.add(record)
        record.data = self.serializer.dumps(dict(session))
        record.expiry = datetime.utcnow() + app.permanent_session_lifetime
        db.session.commit()

        signed = self.get_signer(app).sign(session.sid).decode('utf-8')
        response.set_cookie(name, signed,
                            expires=self.get_expiration_time(app, session),
                            httponly=httponly, domain=domain, path=path,
                            secure=secure, samesite=samesite)

    def destroy(self, session):
        """Delete the session record, then empty the session under a new id.

        The record is deleted before anything is cleared, so a store failure
        leaves the caller's session untouched.
        """
        self._delete_record(session.sid)
        session.clear()
        session.sid = self.generate_sid()
        session.new = True

    def _delete_record(self, sid):
        record = db.session.get(ServerSession, sid)
        if record is not None:
            db.session.delete(record)
            db.session.commit()


def destroy_session():
    """Destroy the current request's session."""
    current_app.session_interface.destroy(session._get_current_object())
