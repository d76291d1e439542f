# app/services/fee_ledger.py
"""
Fee sinks — record the submission fee moving from reporter to beneficiary.
The registry calls transfer() once per accepted alert and never rolls it back.
"""

from datetime import datetime
from typing import List

from app.models.fee_transfer import FeeTransfer
from app.services.alert_records import FeeTransferRecord
from app.utils.logger import get_logger

logger = get_logger(__name__)


class InMemoryFeeLedger:
    def __init__(self):
        self.transfers: List[FeeTransferRecord] = []

    def transfer(self, amount: int, sender: str, recipient: str):
        self.transfers.append(FeeTransferRecord(amount=amount, sender=sender, recipient=recipient))
        logger.info(f"[FEE] {amount} from {sender} to {recipient}")

    def recent(self, limit: int = 50) -> List[FeeTransferRecord]:
        """Newest first."""
        return list(reversed(self.transfers))[:limit]


class SqlFeeLedger:
    """Persists each transfer as a fee_transfers row. Commits immediately."""

    def __init__(self, session_factory):
        self.session_factory = session_factory

    def transfer(self, amount: int, sender: str, recipient: str):
        db = self.session_factory()
        try:
            db.add(FeeTransfer(amount=amount, sender=sender, recipient=recipient,
                               recorded_at=datetime.utcnow()))
            db.commit()
        finally:
            db.close()
        logger.info(f"[FEE] {amount} from {sender} to {recipient} (recorded)")

    def recent(self, limit: int = 50) -> List[FeeTransferRecord]:
        db = self.session_factory()
        try:
            rows = (
                db.query(FeeTransfer)
                .order_by(FeeTransfer.id.desc())
                .limit(limit)
                .all()
            )
            return [FeeTransferRecord(amount=r.amount, sender=r.sender, recipient=r.recipient)
                    for r in rows]
        finally:
            db.close()
