
# ARREMATO/backend/arremato/models/models.py

from sqlalchemy import Column, Integer, String, Float, ForeignKey, DateTime, Date, Boolean, Text
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from arremato.database import Base


def utcnow():
    """Horodatage UTC naïf, stocké tel quel dans les colonnes DateTime"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # hash bcrypt, jamais le mot de passe en clair
    created_at = Column(DateTime, default=utcnow)

    properties = relationship("Property", back_populates="owner")

class Property(Base):
    __tablename__ = "properties"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    location = Column(String)
    postal_code = Column(String)
    address = Column(String)
    number = Column(String)
    property_type = Column(String)
    state = Column(String)

    # Valeurs et coûts d'acquisition
    bid_value = Column(Float)
    market_value = Column(Float)
    itbi = Column(Float)
    registration = Column(Float)
    purchased_alone = Column(Boolean)
    investor_name = Column(String)
    invested_amount = Column(Float)
    monthly_condo_fee = Column(Float)
    annual_iptu = Column(Float)
    condo_debt = Column(Float)
    iptu_debt = Column(Float)
    other_debts = Column(Float)
    broker_name = Column(String)
    broker_commission = Column(Float)
    expected_months_to_sell = Column(Integer)
    expected_renovation_cost = Column(Float)
    taxation_type = Column(String)

    acquisition_date = Column(Date)
    purpose = Column(String)  # sale | rental | residence
    payment_method = Column(String)
    down_payment = Column(Float)
    installments = Column(Integer)
    installment_value = Column(Float)
    auction_origin = Column(String)
    legal_status = Column(String)
    registered_in = Column(String)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow)

    owner = relationship("User", back_populates="properties")
    tasks = relationship("Task", back_populates="property")
    constructions = relationship("PropertyConstruction", back_populates="property")
    transactions = relationship("FinancialTransaction", back_populates="property")

class Category(Base):
    __tablename__ = "categories"
    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(String)

class ExpenseType(Base):
    __tablename__ = "expense_types"
    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(String)

class FinancialTransaction(Base):
    __tablename__ = "financial_transactions"
    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    property_id = Column(Integer, ForeignKey("properties.id"), nullable=True, index=True)
    type = Column(String, nullable=False)  # expense | income
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    category = Column(String)
    date = Column(Date, nullable=False)
    amount = Column(Float, nullable=False)
    status = Column(String)  # paid | pending
    payment_method = Column(String)  # cash | financed | installment
    total_installments = Column(Integer)
    current_installment = Column(Integer)
    installment_value = Column(Float)
    # Parcelle racine du groupe (NULL pour la racine elle-même)
    parent_id = Column(Integer, ForeignKey("financial_transactions.id"), nullable=True, index=True)
    description = Column(Text)
    receipt = Column(String)
    funding_source = Column(String)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow)

    property = relationship("Property", back_populates="transactions")

class Task(Base):
    __tablename__ = "tasks"
    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    property_id = Column(Integer, ForeignKey("properties.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    status = Column(String, default="pending")  # pending | in progress | completed
    priority = Column(String, default="medium")  # low | medium | high
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow)

    property = relationship("Property", back_populates="tasks")

class PropertyConstruction(Base):
    __tablename__ = "property_constructions"
    id = Column(Integer, primary_key=True)
    property_id = Column(Integer, ForeignKey("properties.id"), nullable=False, index=True)
    budget = Column(Float)
    spent = Column(Float)
    delivery_days = Column(Integer)
    responsible_name = Column(String)
    responsible_phone = Column(String)
    status = Column(String)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow)

    property = relationship("Property", back_populates="constructions")

class Loan(Base):
    __tablename__ = "loans"
    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    amount = Column(Float, nullable=False)
    outstanding_balance = Column(Float)
    due_date = Column(Date)
    created_at = Column(DateTime, default=utcnow)

class Process(Base):
    __tablename__ = "processes"
    id = Column(Integer, primary_key=True)
    property_id = Column(Integer, ForeignKey("properties.id"), nullable=False, index=True)
    activity = Column(String, nullable=False)
    status = Column(String, default="pending")  # pending | in progress | completed | blocked
    progress = Column(Integer, default=0)
    description = Column(Text)
    updated_by = Column(String)
    created_at = Column(DateTime, default=utcnow)
