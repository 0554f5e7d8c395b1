# ARREMATO/backend/arremato/schemas/schemas.py

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional, List
import datetime as dt
from arremato.constants import (
    PROPERTY_PURPOSES, TRANSACTION_TYPES, TRANSACTION_STATUSES, PAYMENT_METHODS,
    TASK_STATUSES, TASK_PRIORITIES, PROCESS_STATUSES, REMAINDER_POLICIES,
)


def _check_choice(value, choices, field):
    if value is not None and value not in choices:
        raise ValueError(f"{field} deve ser um dos seguintes valores: {', '.join(choices)}")
    return value


# Les modèles de mise à jour refusent tout champ hors de leur liste autorisée
class PartialUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    def changes(self) -> dict:
        """Champs explicitement envoyés par le client, les null sont ignorés"""
        return {field: value for field, value in self.model_dump(exclude_unset=True).items() if value is not None}


# ---------- USER SCHEMAS ----------
class UserCreate(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=6)

class UserLogin(BaseModel):
    email: str
    password: str

class UserUpdate(PartialUpdate):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6)

class UserOut(BaseModel):
    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)

# ---------- TOKEN SCHEMA ----------
class LoginResponse(BaseModel):
    token: str
    user: UserOut

# ---------- PROPERTY SCHEMAS ----------
class PropertyFields(BaseModel):
    location: Optional[str] = None
    postal_code: Optional[str] = None
    address: Optional[str] = None
    number: Optional[str] = None
    property_type: Optional[str] = None
    state: Optional[str] = None
    bid_value: Optional[float] = None
    market_value: Optional[float] = None
    itbi: Optional[float] = None
    registration: Optional[float] = None
    purchased_alone: Optional[bool] = None
    investor_name: Optional[str] = None
    invested_amount: Optional[float] = None
    monthly_condo_fee: Optional[float] = None
    annual_iptu: Optional[float] = None
    condo_debt: Optional[float] = None
    iptu_debt: Optional[float] = None
    other_debts: Optional[float] = None
    broker_name: Optional[str] = None
    broker_commission: Optional[float] = None
    expected_months_to_sell: Optional[int] = None
    expected_renovation_cost: Optional[float] = None
    taxation_type: Optional[str] = None
    acquisition_date: Optional[dt.date] = None
    purpose: Optional[str] = None
    payment_method: Optional[str] = None
    down_payment: Optional[float] = None
    installments: Optional[int] = None
    installment_value: Optional[float] = None
    auction_origin: Optional[str] = None
    legal_status: Optional[str] = None
    registered_in: Optional[str] = None

    @field_validator("purpose")
    @classmethod
    def check_purpose(cls, value):
        return _check_choice(value, PROPERTY_PURPOSES, "purpose")

class PropertyCreate(PropertyFields):
    name: str = Field(..., min_length=1)

class PropertyUpdate(PropertyFields, PartialUpdate):
    name: Optional[str] = Field(None, min_length=1)

class PropertyOut(PropertyFields):
    id: int
    user_id: int
    name: str
    created_at: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)

# ---------- FINANCE SCHEMAS ----------
class FinanceFields(BaseModel):
    property_id: Optional[int] = None
    type: Optional[str] = None
    category_id: Optional[int] = None
    category: Optional[str] = None
    date: Optional[dt.date] = None
    amount: Optional[float] = Field(None, gt=0)
    status: Optional[str] = None
    payment_method: Optional[str] = None
    total_installments: Optional[int] = Field(None, gt=0)
    current_installment: Optional[int] = Field(None, gt=0)
    parent_id: Optional[int] = None
    description: Optional[str] = None
    installment_value: Optional[float] = Field(None, gt=0)

    @field_validator("type")
    @classmethod
    def check_type(cls, value):
        return _check_choice(value, TRANSACTION_TYPES, "type")

    @field_validator("status")
    @classmethod
    def check_status(cls, value):
        return _check_choice(value, TRANSACTION_STATUSES, "status")

    @field_validator("payment_method")
    @classmethod
    def check_payment_method(cls, value):
        return _check_choice(value, PAYMENT_METHODS, "payment_method")

class FinanceCreate(FinanceFields):
    type: str
    date: dt.date
    amount: float = Field(..., gt=0)
    status: str = "pending"
    payment_method: str = "cash"

class FinanceUpdate(FinanceFields, PartialUpdate):
    pass

class InstallmentCreate(BaseModel):
    property_id: Optional[int] = None
    type: str = "expense"
    category_id: Optional[int] = None
    category: Optional[str] = None
    date: dt.date
    amount: float = Field(..., gt=0)
    # Pas de gt=0 ici : le service renvoie un message dédié pour les valeurs <= 0
    total_installments: int
    description: Optional[str] = None
    remainder_policy: Optional[str] = None

    @field_validator("type")
    @classmethod
    def check_type(cls, value):
        return _check_choice(value, TRANSACTION_TYPES, "type")

    @field_validator("remainder_policy")
    @classmethod
    def check_remainder_policy(cls, value):
        return _check_choice(value, REMAINDER_POLICIES, "remainder_policy")

class FinanceOut(BaseModel):
    id: int
    user_id: int
    property_id: Optional[int] = None
    type: str
    category_id: Optional[int] = None
    category: Optional[str] = None
    date: dt.date
    amount: float
    status: Optional[str] = None
    payment_method: Optional[str] = None
    total_installments: Optional[int] = None
    current_installment: Optional[int] = None
    installment_value: Optional[float] = None
    parent_id: Optional[int] = None
    description: Optional[str] = None
    receipt: Optional[str] = None
    funding_source: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

# ---------- TRANSACTION SCHEMAS ----------
class TransactionCreate(BaseModel):
    property_id: int
    type: str
    date: dt.date
    amount: float = Field(..., gt=0)
    category: Optional[str] = None
    description: Optional[str] = None
    receipt: Optional[str] = None
    funding_source: Optional[str] = None

    @field_validator("type")
    @classmethod
    def check_type(cls, value):
        return _check_choice(value, TRANSACTION_TYPES, "type")

class PropertyRef(BaseModel):
    name: str
    location: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class TransactionWithProperty(FinanceOut):
    properties: Optional[PropertyRef] = None

class FinancialSummary(BaseModel):
    user_id: int
    total_income: float
    total_expense: float
    balance: float
    paid_expense: float
    pending_expense: float
    transactions_count: int
    installment_groups: int
    by_category: List[dict]
    by_property: List[dict]

# ---------- TASK SCHEMAS ----------
class TaskCreate(BaseModel):
    property_id: int
    name: str = Field(..., min_length=1)
    status: str = "pending"
    priority: str = "medium"

    @field_validator("status")
    @classmethod
    def check_status(cls, value):
        return _check_choice(value, TASK_STATUSES, "status")

    @field_validator("priority")
    @classmethod
    def check_priority(cls, value):
        return _check_choice(value, TASK_PRIORITIES, "priority")

class TaskUpdate(PartialUpdate):
    name: Optional[str] = Field(None, min_length=1)
    status: Optional[str] = None
    priority: Optional[str] = None

    @field_validator("status")
    @classmethod
    def check_status(cls, value):
        return _check_choice(value, TASK_STATUSES, "status")

    @field_validator("priority")
    @classmethod
    def check_priority(cls, value):
        return _check_choice(value, TASK_PRIORITIES, "priority")

class TaskStatusUpdate(PartialUpdate):
    status: str

    @field_validator("status")
    @classmethod
    def check_status(cls, value):
        return _check_choice(value, TASK_STATUSES, "status")

class TaskOut(BaseModel):
    id: int
    user_id: int
    property_id: int
    name: str
    status: str
    priority: str
    updated_at: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)

# ---------- CONSTRUCTION SCHEMAS ----------
class ConstructionFields(BaseModel):
    budget: Optional[float] = Field(None, ge=0)
    spent: Optional[float] = Field(None, ge=0)
    delivery_days: Optional[int] = Field(None, ge=0)
    responsible_name: Optional[str] = None
    responsible_phone: Optional[str] = None
    status: Optional[str] = None

class ConstructionCreate(ConstructionFields):
    property_id: int

class ConstructionUpdate(ConstructionFields, PartialUpdate):
    pass

class ConstructionOut(ConstructionFields):
    id: int
    property_id: int
    updated_at: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)

# ---------- REFERENCE SCHEMAS ----------
class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None

class CategoryOut(CategoryCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)

class ExpenseTypeOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

# ---------- LOAN SCHEMAS ----------
class LoanCreate(BaseModel):
    amount: float = Field(..., gt=0)
    outstanding_balance: Optional[float] = Field(None, ge=0)
    due_date: Optional[dt.date] = None

class LoanOut(LoanCreate):
    id: int
    user_id: int

    model_config = ConfigDict(from_attributes=True)

# ---------- PROCESS SCHEMAS ----------
class ProcessCreate(BaseModel):
    property_id: int
    activity: str = Field(..., min_length=1)
    status: str = "pending"
    progress: int = Field(0, ge=0, le=100)
    description: Optional[str] = None
    updated_by: Optional[str] = None

    @field_validator("status")
    @classmethod
    def check_status(cls, value):
        return _check_choice(value, PROCESS_STATUSES, "status")

class ProcessOut(ProcessCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)
