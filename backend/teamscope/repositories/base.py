"""
Base Repository Pattern

Provides a generic, type-safe base class for all repositories.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pydantic import BaseModel

# Type variable for the model class
T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """
    Generic base repository providing common read/write operations.

    Type Parameters:
        T: The Pydantic model class this repository manages

    Usage:
        class UserRepository(BaseRepository[User]):
            collection_name = "users"
            model_class = User
    """

    # Subclasses must define these
    collection_name: str
    model_class: Type[T]

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection: AsyncIOMotorCollection = db[self.collection_name]

    def _to_model(self, data: Optional[Dict[str, Any]]) -> Optional[T]:
        """Convert a raw document to a model instance."""
        if data is None:
            return None
        return self.model_class(**data)

    def _to_model_list(self, docs: List[Dict[str, Any]]) -> List[T]:
        """Convert a list of raw documents to model instances."""
        return [self.model_class(**doc) for doc in docs]

    def _to_document(self, model: T) -> Dict[str, Any]:
        return model.model_dump(by_alias=True)

    async def get_by_id(self, id: str) -> Optional[T]:
        """Get a document by ID and return as model instance."""
        data = await self.collection.find_one({"_id": id})
        return self._to_model(data)

    async def find_one(self, query: Dict[str, Any]) -> Optional[T]:
        """Find one document matching query and return as model instance."""
        data = await self.collection.find_one(query)
        return self._to_model(data)

    async def find_all(self, query: Dict[str, Any], sort_by: Optional[str] = None) -> List[T]:
        """Find every document matching query (no pagination)."""
        cursor = self.collection.find(query)
        if sort_by:
            cursor = cursor.sort(sort_by, 1)
        docs = await cursor.to_list(None)
        return self._to_model_list(docs)

    async def create(self, model: T) -> T:
        """Create a new document from a model instance."""
        await self.collection.insert_one(self._to_document(model))
        return model
