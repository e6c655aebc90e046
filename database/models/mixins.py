"""Column helpers shared by all collections."""
import uuid

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column


def generate_id() -> str:
    """Opaque document ID assigned by storage."""
    return uuid.uuid4().hex


class DocumentIdMixin:
    """String primary key generated on insert."""
    
    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_id)
