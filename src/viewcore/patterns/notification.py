from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel

from ..core.interfaces import INotification


class Notification(BaseModel, INotification):
    name: str
    body: Any = None
    type: Optional[str] = None

    def get_name(self) -> str:
        return self.name

    def get_body(self) -> Any:
        return self.body

    def set_body(self, body: Any) -> None:
        self.body = body

    def get_type(self) -> Optional[str]:
        return self.type

    def set_type(self, type: Optional[str]) -> None:  # noqa: A002
        self.type = type

    def __str__(self) -> str:
        body = "null" if self.body is None else str(self.body)
        type_ = "null" if self.type is None else self.type
        return f"Notification Name: {self.name}\nBody: {body}\nType: {type_}"
