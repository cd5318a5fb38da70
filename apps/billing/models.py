# Models live in the persistence layer; re-exported here for Django discovery.
from apps.billing.infrastructure.persistence.models import (  # noqa: F401
    BaseModel,
    Document,
    DocumentCurrency,
    DocumentStatus,
    DocumentType,
)
