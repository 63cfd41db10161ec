from pydantic import BaseModel


class ActionParameter(BaseModel):
    name: str
    label: str | None = None
    required: bool | None = None

class LinkedAction(BaseModel):
    href: str
    label: str
    parameters: list[ActionParameter] | None = None

class ActionLinks(BaseModel):
    actions: list[LinkedAction]

class ActionGetResponse(BaseModel):
    """Discovery document a third-party renderer turns into buttons."""
    icon: str
    label: str
    title: str
    description: str
    disabled: bool | None = None
    links: ActionLinks | None = None
