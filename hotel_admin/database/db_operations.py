"""
Database operations - Generic CRUD functions for all collections
"""
from typing import Any, AsyncIterator, Dict, List, Optional, Tuple
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from hotel_admin.config.database import db_config
from datetime import datetime


def to_object_id(doc_id: str) -> Optional[ObjectId]:
    """Parse a document ID, returning None for malformed IDs"""
    try:
        return ObjectId(doc_id)
    except (InvalidId, TypeError):
        return None


class DBOperations:
    """Generic database operations for MongoDB collections"""

    async def get_all(
        self,
        collection_name: str,
        filter_query: Dict = None,
        skip: int = 0,
        limit: int = 100,
        sort: List[Tuple[str, int]] = None,
    ) -> List[Dict]:
        """Get all documents from a collection with optional filtering"""
        collection = db_config.get_collection(collection_name)
        filter_query = filter_query or {}
        cursor = collection.find(filter_query)
        if sort:
            cursor = cursor.sort(sort)
        cursor = cursor.skip(skip).limit(limit)
        documents = await cursor.to_list(length=limit)
        return documents

    async def get_by_id(self, collection_name: str, doc_id: str) -> Optional[Dict]:
        """Get a single document by ID"""
        object_id = to_object_id(doc_id)
        if object_id is None:
            return None
        collection = db_config.get_collection(collection_name)
        return await collection.find_one({"_id": object_id})

    async def get_one(self, collection_name: str, filter_query: Dict) -> Optional[Dict]:
        """Get a single document by filter query"""
        collection = db_config.get_collection(collection_name)
        document = await collection.find_one(filter_query)
        return document

    async def create(self, collection_name: str, document: Dict) -> Dict:
        """Create a new document"""
        collection = db_config.get_collection(collection_name)
        now = datetime.utcnow()
        document.setdefault("created_at", now)
        document["updated_at"] = now
        result = await collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document

    async def update(self, collection_name: str, doc_id: str, update_data: Dict) -> Optional[Dict]:
        """Update a document by ID, returning the updated document"""
        object_id = to_object_id(doc_id)
        if object_id is None:
            return None
        collection = db_config.get_collection(collection_name)
        update_data["updated_at"] = datetime.utcnow()
        return await collection.find_one_and_update(
            {"_id": object_id},
            {"$set": update_data},
            return_document=ReturnDocument.AFTER,
        )

    async def delete(self, collection_name: str, doc_id: str) -> bool:
        """Delete a document by ID"""
        object_id = to_object_id(doc_id)
        if object_id is None:
            return False
        collection = db_config.get_collection(collection_name)
        result = await collection.delete_one({"_id": object_id})
        return result.deleted_count > 0

    async def delete_many(self, collection_name: str, filter_query: Dict) -> int:
        """Delete every document matching the filter"""
        collection = db_config.get_collection(collection_name)
        result = await collection.delete_many(filter_query)
        return result.deleted_count

    async def count(self, collection_name: str, filter_query: Dict = None) -> int:
        """Count documents in a collection"""
        collection = db_config.get_collection(collection_name)
        filter_query = filter_query or {}
        count = await collection.count_documents(filter_query)
        return count

    async def watch(self, collection_name: str, pipeline: List[Dict] = None) -> AsyncIterator[Dict[str, Any]]:
        """Yield change-stream events for a collection (replica set required)"""
        collection = db_config.get_collection(collection_name)
        async with collection.watch(pipeline or [], full_document="updateLookup") as stream:
            async for change in stream:
                yield change

db_ops = DBOperations()


def get_db() -> DBOperations:
    """Dependency injection: database operations used by routes"""
    return db_ops
