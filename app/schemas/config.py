# app/schemas/config.py
from pydantic import BaseModel
from typing import Optional


class BeneficiaryIn(BaseModel):
    identity: str


class FeeIn(BaseModel):
    fee: int


class CapacityIn(BaseModel):
    max_alerts: int


class RegistryConfigOut(BaseModel):
    beneficiary: Optional[str]
    submission_fee: int
    max_alerts: int
    alert_count: int


class FeeTransferOut(BaseModel):
    amount: int
    sender: str
    recipient: str

    class Config:
        from_attributes = True
