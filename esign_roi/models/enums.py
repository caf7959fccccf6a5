from enum import Enum


class CostCategory(str, Enum):
    PRINTING = "printing"
    STORAGE = "storage"
    STAFF_TIME = "staff_time"
    DOCUMENT_LOSS = "document_loss"
    COMPLIANCE = "compliance"
    DPDP_PENALTY = "dpdp_penalty"
    PATIENT_DENIAL = "patient_denial"
    SOFTWARE_SUBSCRIPTION = "software_subscription"
