from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """对外字段使用 camelCase，内部仍可用 snake_case 赋值"""

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
