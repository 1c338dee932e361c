from pydantic import BaseModel

OWNER_KEY = "owner"
STATUS_KEY = "status"
BODY_KEY = "body"
CATEGORY_KEY = "category"


class TodoSchema(BaseModel):
    owner: str
    status: bool
    body: str
    category: str


class NewTodoId(BaseModel):
    id: str


def validate_new_todo(payload) -> list:
    """Return every rule the payload breaks; empty means it can be inserted."""
    if not isinstance(payload, dict):
        return ["Todo must be a JSON object"]

    errors = []
    for key in (OWNER_KEY, BODY_KEY, CATEGORY_KEY):
        value = payload.get(key)
        if not isinstance(value, str) or len(value) == 0:
            errors.append(f"Todo must have a non-empty {key}")
    if not isinstance(payload.get(STATUS_KEY), bool):
        errors.append("Todo must have a valid boolean status")
    return errors
