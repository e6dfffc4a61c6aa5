from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base
from src.service.hotel.driven_adapter.model.ticket_type_model import TicketTypeModel


class TicketModel(Base):
    __tablename__ = 'ticket'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ticket_type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('ticket_type.id'), nullable=False
    )
    enrollment_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('enrollment.id'), nullable=False, unique=True
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False)  # RESERVED / PAID
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    # Relationships
    ticket_type: Mapped[TicketTypeModel] = relationship(TicketTypeModel, lazy='raise')
