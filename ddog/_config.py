from typing import Optional

from pydantic import BaseModel


class Config(BaseModel):
    base_url: str
    api_key: str
    application_key: Optional[str] = None
