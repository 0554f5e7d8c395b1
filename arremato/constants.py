
# ARREMATO/backend/arremato/constants.py

# Constantes pour l'application
PROPERTY_PURPOSES = ["sale", "rental", "residence"]

TRANSACTION_TYPES = ["expense", "income"]
TRANSACTION_STATUSES = ["paid", "pending"]
PAYMENT_METHODS = ["cash", "financed", "installment"]

TASK_STATUSES = ["pending", "in progress", "completed"]
TASK_PRIORITIES = ["low", "medium", "high"]

PROCESS_STATUSES = ["pending", "in progress", "completed", "blocked"]

REMAINDER_POLICIES = ["none", "last"]
