"""Unit tests for authority oracles and fee ledgers."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
import requests
from datetime import datetime
from unittest.mock import MagicMock
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.database import create_tables
from app.models.authority import Authority
from app.services.authority_oracle import HttpAuthorityOracle, SqlAuthorityOracle, StaticAuthorityOracle
from app.services.fee_ledger import InMemoryFeeLedger, SqlFeeLedger
from app.services.alert_records import FeeTransferRecord


@pytest.fixture
def session_factory():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    create_tables(bind=engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


class TestStaticAuthorityOracle:
    def test_membership(self):
        oracle = StaticAuthorityOracle(["ST1TEST"])
        assert oracle.is_authorized("ST1TEST")
        assert not oracle.is_authorized("ST2FAKE")


class TestSqlAuthorityOracle:
    def test_verified_identity(self, session_factory):
        db = session_factory()
        db.add(Authority(identity="ST1TEST", is_verified=1, registered_at=datetime.utcnow()))
        db.add(Authority(identity="ST4REVOKED", is_verified=0, registered_at=datetime.utcnow()))
        db.commit()
        db.close()

        oracle = SqlAuthorityOracle(session_factory)
        assert oracle.is_authorized("ST1TEST")
        assert not oracle.is_authorized("ST4REVOKED")
        assert not oracle.is_authorized("ST2FAKE")

    def test_session_closed_after_lookup(self):
        db = MagicMock()
        db.query.return_value.filter.return_value.first.return_value = None
        oracle = SqlAuthorityOracle(lambda: db)
        assert oracle.is_authorized("ST1TEST") is False
        db.close.assert_called_once()


class TestHttpAuthorityOracle:
    def make_oracle(self, response=None, error=None):
        session = MagicMock()
        if error:
            session.get.side_effect = error
        else:
            session.get.return_value = response
        return HttpAuthorityOracle("http://authority.local/", timeout=2, session=session), session

    def test_verified(self):
        resp = MagicMock(status_code=200)
        resp.json.return_value = {"verified": True}
        oracle, session = self.make_oracle(resp)
        assert oracle.is_authorized("ST1TEST")
        session.get.assert_called_once_with("http://authority.local/authorities/ST1TEST", timeout=2)

    @pytest.mark.parametrize("identity, escaped", [
        ("evil/../ST1TEST", "evil%2F..%2FST1TEST"),
        ("ST1TEST?x=1", "ST1TEST%3Fx%3D1"),
        ("ST1TEST#frag", "ST1TEST%23frag"),
    ])
    def test_identity_escaped_as_one_path_segment(self, identity, escaped):
        resp = MagicMock(status_code=404)
        oracle, session = self.make_oracle(resp)
        assert not oracle.is_authorized(identity)
        session.get.assert_called_once_with(f"http://authority.local/authorities/{escaped}", timeout=2)

    def test_not_verified(self):
        resp = MagicMock(status_code=200)
        resp.json.return_value = {"verified": False}
        oracle, _ = self.make_oracle(resp)
        assert not oracle.is_authorized("ST1TEST")

    def test_not_found(self):
        oracle, _ = self.make_oracle(MagicMock(status_code=404))
        assert not oracle.is_authorized("ST2FAKE")

    def test_unreachable(self):
        oracle, _ = self.make_oracle(error=requests.exceptions.ConnectionError("refused"))
        assert not oracle.is_authorized("ST1TEST")

    def test_non_json_body(self):
        resp = MagicMock(status_code=200)
        resp.json.side_effect = ValueError("not json")
        oracle, _ = self.make_oracle(resp)
        assert not oracle.is_authorized("ST1TEST")


class TestFeeLedgers:
    def test_in_memory_records_in_order(self):
        ledger = InMemoryFeeLedger()
        ledger.transfer(100, "ST1TEST", "ST2TEST")
        ledger.transfer(200, "ST1TEST", "ST2TEST")
        assert ledger.transfers == [
            FeeTransferRecord(100, "ST1TEST", "ST2TEST"),
            FeeTransferRecord(200, "ST1TEST", "ST2TEST"),
        ]
        assert [t.amount for t in ledger.recent(1)] == [200]

    def test_sql_ledger_persists(self, session_factory):
        ledger = SqlFeeLedger(session_factory)
        ledger.transfer(100, "ST1TEST", "ST2TEST")
        ledger.transfer(250, "ST5OTHER", "ST2TEST")
        assert ledger.recent() == [
            FeeTransferRecord(250, "ST5OTHER", "ST2TEST"),
            FeeTransferRecord(100, "ST1TEST", "ST2TEST"),
        ]

    def test_sql_ledger_commits_each_transfer(self):
        db = MagicMock()
        SqlFeeLedger(lambda: db).transfer(100, "ST1TEST", "ST2TEST")
        db.add.assert_called_once()
        db.commit.assert_called_once()
        db.close.assert_called_once()
