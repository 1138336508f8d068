"""
Pydantic schemas for the Person resource.

A person is the only entity exposed by the API.  On the wire the
fields use the names ``Id``, ``FirstName``, ``LastName`` and ``Age``;
the Python attribute names are accepted as input too.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Person(BaseModel):
    """Schema for reading and writing a person.

    ``id`` defaults to ``0`` which means "not set".  The same model is
    used for request and response bodies because every write replaces
    the whole record.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(0, alias="Id", description="Identifier of the person")
    first_name: Optional[str] = Field(None, alias="FirstName", description="Given name")
    last_name: Optional[str] = Field(None, alias="LastName", description="Family name")
    age: int = Field(0, alias="Age", description="Age in years")
