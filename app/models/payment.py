# app/models/payment.py
from sqlalchemy import JSON, Column, DateTime, Numeric, String

from app.core.database import Base


class Payment(Base):
    __tablename__ = "payments"

    id = Column(String(36), primary_key=True)

    user_id = Column(String(36), nullable=False, index=True)
    course_id = Column(String(36), nullable=False, index=True)

    # Amount
    amount = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    currency = Column(String(3), default="USD", nullable=False)

    # pending, completed, failed, refunded
    status = Column(String(20), default="pending", nullable=False, index=True)

    # Gateway details
    payment_method = Column(String(50), nullable=True)
    transaction_id = Column(String(255), nullable=True)
    payment_gateway_data = Column(JSON, nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<Payment(id={self.id}, amount={self.amount}, status={self.status})>"
