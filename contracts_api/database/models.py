"""
SQLAlchemy models for profiles, contracts and jobs.
Used by contracts_api.database.store for every API operation.
"""
from __future__ import annotations
from datetime import datetime
from typing import Optional
from sqlalchemy import Boolean, DateTime, Enum, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

PROFILE_TYPES = ("client", "contractor")
CONTRACT_STATUSES = ("new", "in_progress", "terminated")


class Base(DeclarativeBase):
    pass


class Profile(Base):
    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    profession: Mapped[str] = mapped_column(String(100), nullable=False)
    balance: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    type: Mapped[str] = mapped_column(Enum(*PROFILE_TYPES, name="profile_type"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow)

    client_contracts: Mapped[list["Contract"]] = relationship(
        "Contract", back_populates="client", foreign_keys="Contract.client_id"
    )
    contractor_contracts: Mapped[list["Contract"]] = relationship(
        "Contract", back_populates="contractor", foreign_keys="Contract.contractor_id"
    )


class Contract(Base):
    __tablename__ = "contracts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    terms: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(Enum(*CONTRACT_STATUSES, name="contract_status"), default="new", nullable=False)
    client_id: Mapped[int] = mapped_column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    contractor_id: Mapped[int] = mapped_column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow)

    client: Mapped["Profile"] = relationship("Profile", back_populates="client_contracts", foreign_keys=[client_id])
    contractor: Mapped["Profile"] = relationship("Profile", back_populates="contractor_contracts", foreign_keys=[contractor_id])
    jobs: Mapped[list["Job"]] = relationship("Job", back_populates="contract", order_by="Job.id")

    def has_participant(self, profile_id: int) -> bool:
        return profile_id in (self.client_id, self.contractor_id)


class Job(Base):
    __tablename__ = "jobs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    # NULL and False both mean "not paid yet"
    paid: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True, default=None)
    payment_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    contract_id: Mapped[int] = mapped_column(Integer, ForeignKey("contracts.id"), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow)

    contract: Mapped["Contract"] = relationship("Contract", back_populates="jobs")
