from .serializers import serialize_document, to_object_id
from .store import Store

__all__ = ["Store", "serialize_document", "to_object_id"]
