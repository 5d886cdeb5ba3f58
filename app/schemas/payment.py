# app/schemas/payment.py
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

PAYMENT_STATUS_PATTERN = "^(pending|completed|failed|refunded)$"


class PaymentCreate(BaseModel):
    payment_method: Optional[str] = Field(None, max_length=50)


class PaymentStatusUpdate(BaseModel):
    status: str = Field(..., pattern=PAYMENT_STATUS_PATTERN)
    transaction_id: Optional[str] = Field(None, max_length=255)
    payment_gateway_data: Optional[Dict[str, Any]] = None


class PaymentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    course_id: str
    amount: float = Field(..., ge=0)
    currency: str = "USD"
    status: str = Field(default="pending", pattern=PAYMENT_STATUS_PATTERN)
    payment_method: Optional[str] = None
    transaction_id: Optional[str] = None
    payment_gateway_data: Optional[Dict[str, Any]] = None
    created_at: datetime
    updated_at: datetime
