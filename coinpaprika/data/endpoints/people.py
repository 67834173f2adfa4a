"""Requests for the "People" section of the API."""

from ..models import Person
from .base import BaseRequest


class GetPersonRequest(BaseRequest):
    result_type = Person

    def __init__(self, client, person_id: str):
        super().__init__(client)
        self.person_id = person_id

    @property
    def path(self) -> str:
        return f"people/{self.person_id}"
