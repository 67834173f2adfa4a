"""Requests for the "Tags" section of the API."""

from typing import Dict, List, Sequence, Union

from ..models import Tag
from .base import BaseRequest, as_list, join_values


class _TagsBase(BaseRequest):
    def __init__(self, client):
        super().__init__(client)
        self._additional_fields: List[str] = []

    def additional_fields(self, additional_fields: Union[str, Sequence[str]]):
        """Extra fields to embed: ``coins`` and/or ``icos``."""
        self._additional_fields = as_list(additional_fields)
        return self

    def params(self) -> Dict[str, str]:
        value = join_values(self._additional_fields)
        return {"additional_fields": value} if value else {}


class GetTagsRequest(_TagsBase):
    result_type = List[Tag]
    path = "tags"


class GetTagRequest(_TagsBase):
    result_type = Tag

    def __init__(self, client, tag_id: str):
        super().__init__(client)
        self.tag_id = tag_id

    @property
    def path(self) -> str:
        return f"tags/{self.tag_id}"
