import json
import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, status, Request, Depends, Query
from fastapi.concurrency import run_in_threadpool
from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection
from config.dataBase import get_todo_collection
from models.todo_schema import (
    TodoSchema,
    NewTodoId,
    validate_new_todo,
    OWNER_KEY,
    BODY_KEY,
    CATEGORY_KEY,
)
from utils.utils import parse_object_id, serialize_doc, contains_ignore_case

logger = logging.getLogger(__name__)

todo_router = APIRouter()

DEFAULT_SORT_FIELD = CATEGORY_KEY
FILTER_KEYS = (OWNER_KEY, BODY_KEY, CATEGORY_KEY)
LOG_PAYLOAD_LIMIT = 200


# ---------- QUERY BUILDERS ----------
def construct_filter(params: dict) -> dict:
    """AND together a substring match for every filter key present in params."""
    filters = [
        {key: contains_ignore_case(params[key])}
        for key in FILTER_KEYS
        if params.get(key) is not None
    ]
    if not filters:
        return {}
    return {"$and": filters}


def construct_sorting_order(sort_by: Optional[str], sort_order: Optional[str]) -> list:
    field = sort_by or DEFAULT_SORT_FIELD
    direction = DESCENDING if sort_order == "desc" else ASCENDING
    return [(field, direction)]


# ---------- LIST ----------
@todo_router.get("/todos")
def get_todos(
    owner: Optional[str] = Query(None),
    body: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    sortby: Optional[str] = Query(None, description="Field to sort by (default category)."),
    sortorder: Optional[str] = Query(None, description="'asc' (default) or 'desc'."),
    collection: Collection = Depends(get_todo_collection),
):
    combined_filter = construct_filter(
        {OWNER_KEY: owner, BODY_KEY: body, CATEGORY_KEY: category}
    )
    sorting_order = construct_sorting_order(sortby, sortorder)

    todos = collection.find(combined_filter).sort(sorting_order)
    return [serialize_doc(t) for t in todos]


# ---------- GET ONE ----------
@todo_router.get("/todos/{id}")
def get_todo(id: str, collection: Collection = Depends(get_todo_collection)):
    object_id = parse_object_id(id)
    if object_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="The requested todo id wasn't a legal Mongo Object ID.",
        )

    todo = collection.find_one({"_id": object_id})
    if todo is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="The requested todo was not found",
        )
    return serialize_doc(todo)


# ---------- CREATE ----------
@todo_router.post("/todos", status_code=status.HTTP_201_CREATED, response_model=NewTodoId)
async def add_new_todo(request: Request, collection: Collection = Depends(get_todo_collection)):
    raw_body = await request.body()
    try:
        payload = json.loads(raw_body)
    except (ValueError, UnicodeDecodeError):
        logger.warning("Rejected todo with unparseable body: %r", raw_body[:LOG_PAYLOAD_LIMIT])
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=["Request body must be valid JSON"],
        )

    errors = validate_new_todo(payload)
    if errors:
        body_text = raw_body.decode("utf-8", errors="replace")
        logger.warning(
            "Rejected todo %r: %s", body_text[:LOG_PAYLOAD_LIMIT], "; ".join(errors)
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=[f"{error}; body was {body_text}" for error in errors],
        )

    new_todo = TodoSchema(**{k: payload[k] for k in TodoSchema.model_fields})
    # pymongo blocks; keep it off the event loop
    result = await run_in_threadpool(collection.insert_one, new_todo.model_dump())
    todo_id = str(result.inserted_id)
    logger.info("Created todo %s for owner %r", todo_id, new_todo.owner)

    return {"id": todo_id}


# ---------- DELETE ----------
@todo_router.delete("/todos/{id}")
def delete_todo(id: str, collection: Collection = Depends(get_todo_collection)):
    object_id = parse_object_id(id)
    deleted_count = 0
    if object_id is not None:
        deleted_count = collection.delete_one({"_id": object_id}).deleted_count

    if deleted_count != 1:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Was unable to delete ID {id}; perhaps illegal ID or an ID for an item not in the system?",
        )

    logger.info("Deleted todo %s", id)
    return {"message": "Todo deleted successfully", "id": id}
