"""
Fee transfers table — one row per submission fee charged by the registry.
Written by SqlFeeLedger.
"""

from sqlalchemy import Column, BigInteger, Integer, String, DateTime
from app.database import Base


class FeeTransfer(Base):
    __tablename__ = "fee_transfers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    amount = Column(BigInteger, nullable=False)
    sender = Column(String(128), nullable=False, index=True)
    recipient = Column(String(128), nullable=False)
    recorded_at = Column(DateTime, nullable=False, index=True)

    def __repr__(self):
        return f"<FeeTransfer {self.id} {self.amount} {self.sender}->{self.recipient}>"
