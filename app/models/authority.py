"""
Verified authorities table — identities allowed to submit alerts.
Read by SqlAuthorityOracle; seeded by scripts/setup/init_db.py.
"""

from sqlalchemy import Column, Integer, String, DateTime
from app.database import Base


class Authority(Base):
    __tablename__ = "authorities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    identity = Column(String(128), unique=True, nullable=False, index=True)
    is_verified = Column(Integer, default=1, nullable=False)
    registered_at = Column(DateTime)

    def __repr__(self):
        return f"<Authority {self.identity} verified={self.is_verified}>"
