"""
Read-only mappings of the marketplace tables used for recipient lookups.
Rows are created and updated by the booking pages, never by this service.
"""

from sqlalchemy import Boolean, Column, String

from .database import Base


class Doctor(Base):
    __tablename__ = "doctors"

    id = Column(String(36), primary_key=True, index=True)
    full_name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    status = Column(String(50), nullable=True)  # pending, approved, rejected


class Nurse(Base):
    __tablename__ = "nurses"

    id = Column(String(36), primary_key=True, index=True)
    full_name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    status = Column(String(50), nullable=True)  # pending, approved, rejected
    emergency_available = Column(Boolean, default=False, nullable=False)


class MedicalStore(Base):
    __tablename__ = "medical_stores"

    id = Column(String(36), primary_key=True, index=True)
    name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    status = Column(String(50), nullable=True)


class Profile(Base):
    __tablename__ = "profiles"

    user_id = Column(String(36), primary_key=True, index=True)
    full_name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
