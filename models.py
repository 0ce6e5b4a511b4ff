"""
Data models for the ZUS wallet relay.
"""

from enum import Enum
from dataclasses import dataclass, field, asdict
from typing import Optional, Any, List


class ErrorType(Enum):
    NETWORK     = "network"
    RATE_LIMIT  = "rate_limit"
    VALIDATION  = "validation"
    UNKNOWN     = "unknown"


@dataclass
class Session:
    """Per-caller auth state kept between the OTP request and login/registration."""
    device_id: str
    phone: Optional[str] = None
    signup_bearer: Optional[str] = None


@dataclass
class UpstreamResult:
    """Outcome of one upstream HTTP call. status == 0 means the call itself failed."""
    status: int = 0
    body: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.status == 200

    @property
    def data(self) -> Any:
        """The upstream ``data`` object, or None when absent or not an object."""
        if isinstance(self.body, dict) and isinstance(self.body.get("data"), dict):
            return self.body["data"]
        return None

    @property
    def message(self) -> Optional[str]:
        if isinstance(self.body, dict):
            return self.body.get("message")
        return None


@dataclass
class BatchSendItem:
    index: int
    amount: str
    sender_name: str
    recipient_name: str
    recipient_phone: str
    success: bool = False
    insufficient: bool = False
    status: int = 0
    ref_id: Optional[str] = None
    error: Optional[str] = None
    stop: bool = False

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class BatchRedeemItem:
    index: int
    code: str
    success: bool = False
    amount: str = "0.00"
    new_promotional_balance: str = "0"
    description: str = ""
    balance_log_ref_no: str = ""
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class BatchSummary:
    attempted: int = 0
    success_count: int = 0
    total_amount: str = "0.00"
    stopped: bool = False
    final_balance: Optional[str] = None
    errors: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)
