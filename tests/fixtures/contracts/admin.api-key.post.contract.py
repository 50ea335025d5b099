from pydantic import BaseModel


class CreateAPIKeyBody(BaseModel):
    name: str
    permissions: list[str]


class APIAuthKey(BaseModel):
    id: str
    name: str


Contract = {
    "path": "/admin/api-keys",
    "method": "post",
    "body": CreateAPIKeyBody,
    "response": {
        201: {"description": "Created", "schema": APIAuthKey},
    },
}
