# Disaster Alert Registry — Database Models
# Import all models here for SQLAlchemy discovery

from app.models.authority import Authority          # noqa
from app.models.fee_transfer import FeeTransfer      # noqa
