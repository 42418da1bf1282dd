# ============================================================================
# FILE: tracknest/schemas/base.py
# ============================================================================
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase names on the wire"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
