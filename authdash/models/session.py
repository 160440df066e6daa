"""
Server-side Session Model
"""

import logging
from datetime import datetime

from authdash.extensions import db

logger = logging.getLogger(__name__)


class ServerSession(db.Model):
    """Session record keyed by the opaque id carried in the session cookie"""
    __tablename__ = 'sessions'
    
    sid = db.Column(db.String(64), primary_key=True)
    data = db.Column(db.Text, nullable=False, default='{}')
    expiry = db.Column(db.DateTime, nullable=False, index=True)
    
    def is_expired(self, now=None):
        return self.expiry <= (now or datetime.utcnow())
    
    @classmethod
    def purge_expired(cls, now=None):
        """Delete every expired record and return how many were removed."""
        count = cls.query.filter(cls.expiry <= (now or datetime.utcnow())).delete()
        db.session.commit()
        logger.info('Purged %d expired session(s)', count)
        return count
    
    def __repr__(self):
        return f'<ServerSession {self.sid[:8]}... expires {self.expiry}>'
